"""
Point Geometry.

Distances, bounding rectangles and spatial bucketing over 2D integer points.

Tie rule for near_far_point: when several points share the extreme distance,
the LAST one in input order is returned, for both nearest and farthest.
"""

import logging
import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from cvmath.core.reductions import max_value, min_value
from cvmath.errors import ValueOutOfRangeError
from cvmath.validation import require_axis, require_non_empty, require_positive

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: int
    y: int


class Rect(NamedTuple):
    """Axis-aligned bounding rectangle (xMin, yMin, xMax, yMax)."""
    left: float
    top: float
    right: float
    bottom: float


def _as_point(pt) -> Point:
    return pt if isinstance(pt, Point) else Point(int(pt[0]), int(pt[1]))


def _as_points(pts, func: str) -> List[Point]:
    return [_as_point(p) for p in require_non_empty(list(pts), func)]


# =============================================================================
# Distances
# =============================================================================

def dis(a: float, b: float) -> float:
    return abs(a - b)


def dis_int(a: int, b: int) -> int:
    """Integer distance, truncated through a float computation."""
    return int(dis(float(a), float(b)))


def dis_byte(a: int, b: int) -> int:
    """Distance between two byte values (0-255)."""
    for v in (a, b):
        if not 0 <= v <= 255:
            raise ValueOutOfRangeError(f"dis_byte expects values in 0..255, got {v}")
    return int(dis(float(a), float(b)))


def dis_pt(pt1, pt2) -> float:
    """
    Euclidean distance between two points.

    Each axis delta goes through dis_int before squaring, so fractional
    coordinates lose their sub-unit part. Integer points are unaffected.
    """
    p1, p2 = _as_point(pt1), _as_point(pt2)
    dx = float(dis_int(p1.x, p2.x))
    dy = float(dis_int(p1.y, p2.y))
    return math.sqrt(dx * dx + dy * dy)


def dis_pt_x(pt1, pt2) -> float:
    return float(dis_int(_as_point(pt1).x, _as_point(pt2).x))


def dis_pt_y(pt1, pt2) -> float:
    return float(dis_int(_as_point(pt1).y, _as_point(pt2).y))


# =============================================================================
# Point sets
# =============================================================================

def near_far_point(to_pt, pts: Sequence) -> Tuple[Point, Point]:
    """
    Nearest and farthest point of pts from to_pt.

    Args:
        to_pt: Reference point
        pts: Non-empty candidate points

    Returns:
        (nearest, farthest). Ties go to the last tied point in pts.
    """
    points = _as_points(pts, "near_far_point")
    target = _as_point(to_pt)

    distances = np.array([dis_pt(p, target) for p in points])
    d_min, d_max = min_value(distances), max_value(distances)

    nearest = points[int(np.flatnonzero(distances == d_min)[-1])]
    farthest = points[int(np.flatnonzero(distances == d_max)[-1])]
    return nearest, farthest


def points_rect(pts: Sequence) -> Rect:
    """Bounding rectangle of a non-empty point set."""
    points = _as_points(pts, "points_rect")
    xs = np.array([p.x for p in points], dtype=np.float64)
    ys = np.array([p.y for p in points], dtype=np.float64)
    return Rect(min_value(xs), min_value(ys), max_value(xs), max_value(ys))


def random_point(pts: Sequence, rng: Optional[np.random.Generator] = None) -> Point:
    """
    A point of pts picked at random.

    One uniform draw r in [0, 1) places a candidate at
    (xMin + r * (xMax - xMin + 0.5), yMin + r * (yMax - yMin + 0.5)),
    which is then snapped to the nearest point of pts.

    Args:
        pts: Non-empty point set
        rng: Random source; a fresh entropy-seeded generator if None

    Returns:
        A member of pts
    """
    points = _as_points(pts, "random_point")
    x_min, y_min, x_max, y_max = points_rect(points)

    if rng is None:
        rng = np.random.default_rng()
    r = float(rng.random())

    x = r * (x_max - x_min + 0.5) + x_min
    y = r * (y_max - y_min + 0.5) + y_min

    nearest, _ = near_far_point(Point(int(x), int(y)), points)
    return nearest


def centre_point(pts: Sequence) -> Point:
    """Point of pts nearest to the centre of their bounding rectangle."""
    points = _as_points(pts, "centre_point")
    x_min, y_min, x_max, y_max = points_rect(points)

    centre = Point(int((x_max + x_min) / 2), int((y_max + y_min) / 2))
    nearest, _ = near_far_point(centre, points)
    return nearest


def split_pts_xy(pts: Sequence, xy: str, n: int) -> List[List[Point]]:
    """
    Partition points into n equal-width buckets along one axis.

    Args:
        pts: Non-empty point set
        xy: 'X'/'x' or 'Y'/'y'
        n: Number of buckets, >= 1

    Returns:
        n lists of points. Bucket index is round((coord - min) / width) with
        width = (max - min) / n, clamped to n - 1 so points at the maximum
        land in the last bucket. If every point shares the coordinate, all
        go to bucket 0.
    """
    axis = require_axis(xy)
    require_positive(n, "n")
    points = _as_points(pts, "split_pts_xy")

    x_min, y_min, x_max, y_max = points_rect(points)
    lo, hi = (x_min, x_max) if axis == "x" else (y_min, y_max)
    span = (hi - lo) / n

    areas: List[List[Point]] = [[] for _ in range(n)]

    if span == 0:
        logger.debug("split_pts_xy: all %d points share %s=%s, single bucket", len(points), axis, lo)
        areas[0].extend(points)
        return areas

    clamped = 0
    for pt in points:
        coord = pt.x if axis == "x" else pt.y
        # round half away from zero; offsets are never negative
        i = int(math.floor((coord - lo) / span + 0.5))
        if i >= n:
            i = n - 1
            clamped += 1
        areas[i].append(pt)

    if clamped:
        logger.debug("split_pts_xy: clamped %d points into bucket %d", clamped, n - 1)

    return areas
