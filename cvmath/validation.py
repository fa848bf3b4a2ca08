"""
Input validation — guards shared by reductions, statistics, kernels and geometry.

Centralizes precondition checks so the compute functions can assume clean input.
"""

import numpy as np
from typing import Sequence

from cvmath.errors import (
    DimensionMismatchError,
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidAxisError,
    MisalignedChannelError,
)

CHANNELS = 4


def as_array(data) -> np.ndarray:
    """Convert any sequence of reals into a flat float64 array (copy-safe)."""
    return np.asarray(data, dtype=np.float64).ravel()


def require_non_empty(y: np.ndarray, func: str = "function") -> np.ndarray:
    """Raise EmptyInputError if y has no elements.

    Args:
        y: input array or sequence
        func: for error message

    Returns:
        The input, unchanged
    """
    if len(y) == 0:
        raise EmptyInputError(func)
    return y


def require_channel_aligned(y: np.ndarray, func: str = "function") -> np.ndarray:
    """Raise MisalignedChannelError unless len(y) is a multiple of 4."""
    if len(y) % CHANNELS != 0:
        raise MisalignedChannelError(func, len(y), CHANNELS)
    return y


def require_same_length(v1: Sequence, v2: Sequence, func: str = "function") -> None:
    """Raise DimensionMismatchError if the two vectors differ in length."""
    if len(v1) != len(v2):
        raise DimensionMismatchError(func, len(v1), len(v2))


def require_axis(xy: str) -> str:
    """Normalize an axis selector to 'x' or 'y'.

    Raises:
        InvalidAxisError: for anything other than 'X', 'x', 'Y', 'y'
    """
    if xy in ("X", "x"):
        return "x"
    if xy in ("Y", "y"):
        return "y"
    raise InvalidAxisError(xy)


def require_positive(n: int, name: str = "n") -> int:
    """Raise IndexOutOfRangeError if n < 1."""
    if n < 1:
        raise IndexOutOfRangeError(f"{name} must be >= 1, got {n}")
    return n
