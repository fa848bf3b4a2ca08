"""
Exception hierarchy for cvmath.

Every precondition failure surfaces as a subclass of CvMathError so callers
can catch the whole family, while the builtin base (ValueError/IndexError)
keeps generic handlers working.
"""


class CvMathError(Exception):
    """Base class for all cvmath errors."""


class EmptyInputError(CvMathError, ValueError):
    """Raised when a reduction or geometry function receives no data."""

    def __init__(self, func: str):
        self.func = func
        super().__init__(f"{func} requires at least one element, got 0")


class MisalignedChannelError(CvMathError, ValueError):
    """Raised when 4-channel interleaved data has a length not divisible by 4."""

    def __init__(self, func: str, length: int, channels: int = 4):
        self.func = func
        self.length = length
        self.channels = channels
        super().__init__(
            f"{func} requires a length divisible by {channels}, got {length}"
        )


class DimensionMismatchError(CvMathError, ValueError):
    """Raised when two vectors that must pair up have different lengths."""

    def __init__(self, func: str, left: int, right: int):
        self.func = func
        self.left = left
        self.right = right
        super().__init__(f"{func} vector dimensions differ: {left} != {right}")


class InvalidAxisError(CvMathError, ValueError):
    """Raised when an axis selector is not 'X'/'x' or 'Y'/'y'."""

    def __init__(self, axis):
        self.axis = axis
        super().__init__(f"axis can only be 'X' or 'Y', got {axis!r}")


class IndexOutOfRangeError(CvMathError, IndexError):
    """Raised when a step, offset or bucket count is outside its valid range."""


class ValueOutOfRangeError(CvMathError, ValueError):
    """Raised when a scalar input lies outside the range its type allows."""


class KernelConfigError(CvMathError, ValueError):
    """Raised when a kernel definition is missing or malformed."""
