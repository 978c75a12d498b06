"""
Exact geometric predicates on integer grid points.

All arithmetic stays in integers, so every test is exact: there is no
floating tolerance anywhere.  Points are ``(x, y)`` tuples.

Crossing policy
---------------
:func:`segments_intersect` only reports *proper* crossings, where each
segment strictly separates the endpoints of the other.  Touching at a
shared endpoint is never a crossing.  Any configuration involving a
collinear triple (T-junctions, collinear overlap) has a vertex lying
strictly inside one of the segments, and that case is decided by
:func:`segment_passes_through_vertex` instead.
"""

from __future__ import annotations

Point = tuple[int, int]


def cross(a: Point, b: Point, c: Point) -> int:
    """Twice the signed area of triangle ``abc`` (> 0 when counterclockwise)."""
    return (c[1] - a[1]) * (b[0] - a[0]) - (b[1] - a[1]) * (c[0] - a[0])


def orientation(a: Point, b: Point, c: Point) -> bool:
    """Return True if *c* lies counterclockwise of the directed segment ``a -> b``."""
    return (c[1] - a[1]) * (b[0] - a[0]) > (b[1] - a[1]) * (c[0] - a[0])


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """
    Return True if segments ``a-b`` and ``c-d`` properly cross.

    Equivalent to ``orientation(a,c,d) != orientation(b,c,d) and
    orientation(a,b,c) != orientation(a,b,d)`` for points in general
    position; when any three of the points are collinear the result is
    False.
    """
    s1 = _sign(cross(c, d, a))
    s2 = _sign(cross(c, d, b))
    if s1 * s2 >= 0:
        return False
    s3 = _sign(cross(a, b, c))
    s4 = _sign(cross(a, b, d))
    return s3 * s4 < 0


def segment_passes_through_vertex(a: Point, b: Point, v: Point) -> bool:
    """
    Return True if *v* lies strictly between *a* and *b* on segment ``a-b``.

    The endpoints themselves never count.  Vertical, horizontal and
    general segments are handled separately; each branch first checks the
    open bounding box, then (for the general case) compares cross-slopes
    without dividing.
    """
    if v == a or v == b:
        return False

    dx = b[0] - a[0]
    dy = b[1] - a[1]
    min_x, max_x = min(a[0], b[0]), max(a[0], b[0])
    min_y, max_y = min(a[1], b[1]), max(a[1], b[1])

    if dx == 0 and dy == 0:
        return False
    if dx == 0:
        return v[0] == a[0] and min_y < v[1] < max_y
    if dy == 0:
        return v[1] == a[1] and min_x < v[0] < max_x

    if not (min_x < v[0] < max_x and min_y < v[1] < max_y):
        return False
    return (v[0] - a[0]) * dy == (v[1] - a[1]) * dx
