"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for flatten_segment.
Not intended for public use.
"""

import math

from plotpath.domain import Point

# Subdivision depth cap; 2**16 edges is far below any useful tolerance
MAX_DEPTH = 16


def _distance_to_chord(point: Point, start: Point, end: Point) -> float:
    """Distance from a point to the infinite line through start and end."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)

    if length < 1e-12:
        return math.hypot(point.x - start.x, point.y - start.y)

    return abs(dx * (point.y - start.y) - dy * (point.x - start.x)) / length


def flatten_cubic(
    points: list[Point],
    tolerance: float,
    t0: float = 0.0,
    t1: float = 1.0,
    depth: int = 0,
) -> list[tuple[float, Point]]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision. The curve lies inside the
    hull of its control points, so once both control points are within
    tolerance of the chord the chord is within tolerance of the curve.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        t0: Curve parameter of p0 within the original curve
        t1: Curve parameter of p3 within the original curve
        depth: Current recursion depth

    Returns:
        List of (parameter, point) vertices approximating the curve
    """
    p0, p1, p2, p3 = points

    flat = max(_distance_to_chord(p1, p0, p3), _distance_to_chord(p2, p0, p3))

    if flat <= tolerance or depth >= MAX_DEPTH:
        # Flat enough, return endpoints
        return [(t0, p0), (t1, p3)]

    # Subdivide at t=0.5 using De Casteljau's algorithm
    # First level
    q1 = Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)
    q2 = Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)
    q3 = Point((p2.x + p3.x) / 2, (p2.y + p3.y) / 2)

    # Second level
    r1 = Point((q1.x + q2.x) / 2, (q1.y + q2.y) / 2)
    r2 = Point((q2.x + q3.x) / 2, (q2.y + q3.y) / 2)

    # Third level (midpoint)
    mid = Point((r1.x + r2.x) / 2, (r1.y + r2.y) / 2)
    t_mid = (t0 + t1) / 2

    left = flatten_cubic([p0, q1, r1, mid], tolerance, t0, t_mid, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, t_mid, t1, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
