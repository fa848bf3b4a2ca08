"""
Reduction helpers.

Fold a sequence of reals to a scalar (or scalar + index), and split / merge
4-channel interleaved data.
"""

import numpy as np
from typing import Sequence, Tuple

from cvmath.errors import DimensionMismatchError, IndexOutOfRangeError
from cvmath.validation import (
    CHANNELS,
    as_array,
    require_channel_aligned,
    require_non_empty,
    require_same_length,
)

Vec4 = Tuple[float, float, float, float]


def max_value(data) -> float:
    """Largest value of a non-empty sequence."""
    y = require_non_empty(as_array(data), "max_value")
    return float(np.max(y))


def min_value(data) -> float:
    """Smallest value of a non-empty sequence."""
    y = require_non_empty(as_array(data), "min_value")
    return float(np.min(y))


def max_idx(data) -> Tuple[float, int]:
    """Largest value and the first index holding it."""
    y = require_non_empty(as_array(data), "max_idx")
    i = int(np.argmax(y))
    return float(y[i]), i


def min_idx(data) -> Tuple[float, int]:
    """Smallest value and the first index holding it."""
    y = require_non_empty(as_array(data), "min_idx")
    i = int(np.argmin(y))
    return float(y[i]), i


def max_min_abs(data) -> Tuple[float, float]:
    """(max |x|, min |x|)."""
    a = np.abs(require_non_empty(as_array(data), "max_min_abs"))
    return float(np.max(a)), float(np.min(a))


def step_select(step: int, offset: int, data) -> np.ndarray:
    """
    Elements at positions i where i % step == offset.

    Args:
        step: stride, >= 1
        offset: position within each stride, 0 <= offset < step
        data: numeric sequence

    Returns:
        New array holding the selected elements in order
    """
    if step < 1:
        raise IndexOutOfRangeError(f"step must be >= 1, got {step}")
    if not 0 <= offset < step:
        raise IndexOutOfRangeError(f"offset must be in [0, {step}), got {offset}")
    return as_array(data)[offset::step].copy()


def deinterleave4(data) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Split 4-channel interleaved data into its four channels."""
    y = require_channel_aligned(as_array(data), "deinterleave4")
    return tuple(step_select(CHANNELS, k, y) for k in range(CHANNELS))


def interleave4(channels: Sequence) -> np.ndarray:
    """Inverse of deinterleave4: merge four equal-length channels at stride 4."""
    if len(channels) != CHANNELS:
        raise DimensionMismatchError("interleave4", len(channels), CHANNELS)

    arrays = [as_array(c) for c in channels]
    for c in arrays[1:]:
        require_same_length(arrays[0], c, "interleave4")
    return np.column_stack(arrays).ravel()


def sum_values(data) -> float:
    """Plain sum; the empty sum is 0.0."""
    return float(np.sum(as_array(data)))


def sum_step4(data) -> Vec4:
    """Per-channel sums of 4-channel interleaved data."""
    y = require_channel_aligned(as_array(data), "sum_step4")
    sums = y.reshape(-1, CHANNELS).sum(axis=0)
    return tuple(float(s) for s in sums)
