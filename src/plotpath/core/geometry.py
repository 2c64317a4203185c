"""Geometric operations for segment and shape calculations.

This module provides core mathematical utilities for:
- Bounding box overlap testing
- Parametric line segment intersection
- Segment flattening into parametrised polylines
- Winding number computation (crossing-number with sign)

All functions are pure and stateless.
"""

import math

from plotpath.core._bezier import flatten_cubic as _flatten_cubic
from plotpath.domain import CubicSegment, LineSegment, Point, Segment

BBox = tuple[float, float, float, float]


def boxes_overlap(a: BBox, b: BBox) -> bool:
    """Check whether two axis-aligned bounding boxes overlap.

    Touching boxes count as overlapping.

    Args:
        a: First box as (min_x, min_y, max_x, max_y)
        b: Second box as (min_x, min_y, max_x, max_y)

    Returns:
        True if the boxes share at least one point

    Examples:
        >>> boxes_overlap((0, 0, 1, 1), (1, 1, 2, 2))
        True
        >>> boxes_overlap((0, 0, 1, 1), (2, 2, 3, 3))
        False
    """
    return a[0] <= b[2] and b[0] <= a[2] and a[1] <= b[3] and b[1] <= a[3]


def point_in_box(point: Point, box: BBox) -> bool:
    """Check whether a point lies inside or on a bounding box."""
    return box[0] <= point.x <= box[2] and box[1] <= point.y <= box[3]


def line_intersection(
    p1: Point, p2: Point, p3: Point, p4: Point
) -> tuple[float, float] | None:
    """Find the parameters at which two line segments intersect.

    Uses parametric line equations. Returns None if lines are parallel or
    coincident, or if the intersection is outside either segment.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        Tuple (t, u) of parameters on segment 1 and segment 2, or None

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(2.0, 2.0)
        >>> p3 = Point(0.0, 2.0)
        >>> p4 = Point(2.0, 0.0)
        >>> line_intersection(p1, p2, p3, p4)
        (0.5, 0.5)
    """
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    # Calculate denominator for parametric equations
    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Lines are parallel or coincident
    if abs(denom) < 1e-10:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0 <= t <= 1 and 0 <= u <= 1:
        return t, u

    return None


def flatten_segment(segment: Segment, tolerance: float) -> list[tuple[float, Point]]:
    """Convert a segment into a polyline with parameters at its vertices.

    A line is its own one-edge polyline on [0, 1]; a cubic is flattened
    by recursive subdivision.

    Args:
        segment: Line or cubic segment
        tolerance: Maximum distance from the true curve

    Returns:
        List of (parameter, point) vertices, parameters ascending from 0 to 1

    Raises:
        TypeError: If segment is not a known segment type
    """
    if isinstance(segment, LineSegment):
        return [(0.0, segment.p0), (1.0, segment.p1)]
    elif isinstance(segment, CubicSegment):
        return _flatten_cubic(list(segment.points()), tolerance)
    else:
        raise TypeError(f"Unsupported segment type: {type(segment).__name__}")


def winding_number(point: Point, polygon: list[Point]) -> int:
    """Compute the winding number of a closed polygon around a point.

    Casts a horizontal ray from the point to the right. Upward edges
    crossing the ray to the right of the point count +1, downward edges
    count -1. The polygon is closed implicitly from its last point back
    to its first.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        Signed winding number; 0 means outside

    Examples:
        >>> square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        >>> winding_number(Point(1, 1), square)
        1
        >>> winding_number(Point(3, 3), square)
        0
    """
    n = len(polygon)
    if n < 3:
        return 0

    winding = 0
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Edge runs from j to i; cross > 0 means point is left of it
        cross = (xi - xj) * (y - yj) - (x - xj) * (yi - yj)
        if yj <= y < yi and cross > 0:
            winding += 1
        elif yi <= y < yj and cross < 0:
            winding -= 1

        j = i

    return winding


def segment_length(segment: Segment, tolerance: float) -> float:
    """Approximate arc length of a segment along its flattening."""
    vertices = [pt for _, pt in flatten_segment(segment, tolerance)]
    return sum(
        math.hypot(b.x - a.x, b.y - a.y) for a, b in zip(vertices, vertices[1:])
    )
