"""
Central tendency & dispersion.

Scalar statistics plus their 4-channel variants:
    *_step4  — data is interleaved as 4 parallel channels at stride 4,
               each channel is reduced independently
    mode_vec4 — data is a run of non-overlapping 4-vectors, the most
               frequent vector is returned

Median uses the lower-middle element for even lengths (not the average of the
two middle values). Mode breaks ties in favour of the value seen first.
"""

from collections import Counter

import numpy as np

from cvmath.core.reductions import Vec4, deinterleave4, sum_step4
from cvmath.validation import (
    CHANNELS,
    as_array,
    require_channel_aligned,
    require_non_empty,
)


def mean(data) -> float:
    """Arithmetic mean."""
    y = require_non_empty(as_array(data), "mean")
    return float(np.sum(y) / len(y))


def mean_step4(data) -> Vec4:
    """Per-channel mean of 4-channel interleaved data."""
    y = require_non_empty(as_array(data), "mean_step4")
    y = require_channel_aligned(y, "mean_step4")
    sums = sum_step4(y)
    n_vec = len(y) // CHANNELS
    return tuple(s / n_vec for s in sums)


def median(data) -> float:
    """
    Median with the lower-middle convention.

    Sorts a copy, the caller's sequence is left untouched.

    Examples:
        median([1, 2, 3])    -> 2.0
        median([1, 2, 3, 4]) -> 2.0
    """
    s = np.sort(require_non_empty(as_array(data), "median"))
    pos = len(s) // 2
    if len(s) % 2 == 0:
        return float(s[pos - 1])
    return float(s[pos])


def median_step4(data) -> Vec4:
    """Per-channel median of 4-channel interleaved data."""
    y = require_non_empty(as_array(data), "median_step4")
    y = require_channel_aligned(y, "median_step4")
    return tuple(median(channel) for channel in deinterleave4(y))


def _most_common(keys):
    # Counter keeps first-seen order and most_common sorts stably,
    # so ties resolve to the earliest key
    return Counter(keys).most_common(1)[0][0]


def mode(data) -> float:
    """Most frequent value; ties go to the value that appears first."""
    y = require_non_empty(as_array(data), "mode")
    return float(_most_common(y.tolist()))


def mode_vec4(data) -> Vec4:
    """Most frequent 4-vector among consecutive non-overlapping groups of 4."""
    y = require_non_empty(as_array(data), "mode_vec4")
    y = require_channel_aligned(y, "mode_vec4")
    vectors = [tuple(row) for row in y.reshape(-1, CHANNELS).tolist()]
    return tuple(float(v) for v in _most_common(vectors))


def mode_step4(data) -> Vec4:
    """Per-channel mode of 4-channel interleaved data."""
    y = require_non_empty(as_array(data), "mode_step4")
    y = require_channel_aligned(y, "mode_step4")
    return tuple(mode(channel) for channel in deinterleave4(y))


def std_dev(data) -> float:
    """Population standard deviation (divides by n, not n - 1)."""
    y = require_non_empty(as_array(data), "std_dev")
    ave = mean(y)
    return float(np.sqrt(np.sum((y - ave) ** 2) / len(y)))
