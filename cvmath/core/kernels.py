"""
Signal Kernels.

Fixed-coefficient FIR stencils over a 1D signal:
- derivative: 9-point Savitzky-Golay first derivative (centre tap unused)
- smooth9:    9-point Savitzky-Golay smoothing, clamped to be non-negative

Coefficients come from cvmath/kernels.yaml. Output always has the input's
length; samples whose window would run past either end are handled by the
kernel's boundary policy (zeroed or copied from the input).
"""

import logging
from typing import Optional

import numpy as np
from scipy.signal import correlate

from cvmath.config import KernelConfig, get_kernel
from cvmath.validation import as_array, require_same_length

logger = logging.getLogger(__name__)


def dot_product(v1, v2) -> float:
    """Sum of elementwise products; lengths must match."""
    require_same_length(v1, v2, "dot_product")
    return float(np.dot(as_array(v1), as_array(v2)))


def apply_kernel(data, kernel: KernelConfig) -> np.ndarray:
    """
    Apply a stencil to every sample that has a full window around it.

    Args:
        data: Signal values
        kernel: Stencil definition (coefficients, divisor, boundary, clamp)

    Returns:
        Array of len(data). Interior sample i holds
        dot(coefficients, data[i-h : i+h+1]) / divisor, with h = half_width.
        The first and last h samples are 0 (boundary='zero') or copied
        from data (boundary='copy').
    """
    y = as_array(data)
    h = kernel.half_width

    if kernel.boundary == "copy":
        out = y.copy()
    else:
        out = np.zeros_like(y)

    if len(y) >= kernel.window:
        coeffs = np.asarray(kernel.coefficients, dtype=np.float64)
        out[h:len(y) - h] = correlate(y, coeffs, mode="valid", method="direct") / kernel.divisor
    else:
        logger.debug(
            "%s: %d samples is shorter than the %d-sample window, boundary only",
            kernel.name, len(y), kernel.window,
        )

    if kernel.clamp_min is not None:
        np.maximum(out, kernel.clamp_min, out=out)

    return out


def derivative(data, kernel: Optional[KernelConfig] = None) -> np.ndarray:
    """
    Smoothed first derivative of a signal.

    The first 4 and last 4 samples are 0; signals shorter than 9 samples
    give all zeros.
    """
    return apply_kernel(data, kernel or get_kernel("derivative"))


def smooth9(data, kernel: Optional[KernelConfig] = None) -> np.ndarray:
    """
    9-point smoothing.

    The first 4 and last 4 samples are copied from the input, then every
    value below 0 is set to 0.
    """
    return apply_kernel(data, kernel or get_kernel("smooth9"))
