"""
cvmath — numeric and point-geometry helpers.

Public API:
    from cvmath import mean, median, smooth9, near_far_point, ...

Reductions:
    max_value, min_value, max_idx, min_idx, max_min_abs,
    step_select, deinterleave4, interleave4, sum_values, sum_step4

Statistics (scalar + 4-channel):
    mean, mean_step4, median, median_step4, mode, mode_vec4, mode_step4, std_dev

Kernels:
    dot_product, apply_kernel, derivative, smooth9

Geometry:
    Point, Rect, dis, dis_int, dis_byte, dis_pt, dis_pt_x, dis_pt_y,
    near_far_point, points_rect, random_point, centre_point, split_pts_xy

Errors (cvmath.errors):
    CvMathError and its subclasses EmptyInputError, MisalignedChannelError,
    DimensionMismatchError, InvalidAxisError, IndexOutOfRangeError,
    ValueOutOfRangeError, KernelConfigError
"""

from cvmath.config import KernelConfig, get_kernel, list_kernels, load_kernel_configs
from cvmath.core.geometry import (
    Point,
    Rect,
    centre_point,
    dis,
    dis_byte,
    dis_int,
    dis_pt,
    dis_pt_x,
    dis_pt_y,
    near_far_point,
    points_rect,
    random_point,
    split_pts_xy,
)
from cvmath.core.kernels import apply_kernel, derivative, dot_product, smooth9
from cvmath.core.reductions import (
    Vec4,
    deinterleave4,
    interleave4,
    max_idx,
    max_min_abs,
    max_value,
    min_idx,
    min_value,
    step_select,
    sum_step4,
    sum_values,
)
from cvmath.core.statistics import (
    mean,
    mean_step4,
    median,
    median_step4,
    mode,
    mode_step4,
    mode_vec4,
    std_dev,
)
from cvmath.errors import (
    CvMathError,
    DimensionMismatchError,
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidAxisError,
    KernelConfigError,
    MisalignedChannelError,
    ValueOutOfRangeError,
)

__version__ = "0.1.0"

__all__ = [
    # Reductions
    'Vec4', 'max_value', 'min_value', 'max_idx', 'min_idx', 'max_min_abs',
    'step_select', 'deinterleave4', 'interleave4', 'sum_values', 'sum_step4',
    # Statistics
    'mean', 'mean_step4', 'median', 'median_step4',
    'mode', 'mode_vec4', 'mode_step4', 'std_dev',
    # Kernels
    'dot_product', 'apply_kernel', 'derivative', 'smooth9',
    'KernelConfig', 'get_kernel', 'list_kernels', 'load_kernel_configs',
    # Geometry
    'Point', 'Rect', 'dis', 'dis_int', 'dis_byte', 'dis_pt', 'dis_pt_x', 'dis_pt_y',
    'near_far_point', 'points_rect', 'random_point', 'centre_point', 'split_pts_xy',
    # Errors
    'CvMathError', 'EmptyInputError', 'MisalignedChannelError', 'DimensionMismatchError',
    'InvalidAxisError', 'IndexOutOfRangeError', 'ValueOutOfRangeError', 'KernelConfigError',
]
