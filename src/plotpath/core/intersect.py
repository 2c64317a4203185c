"""Segment and path intersection engine.

Intersections are asymmetric: ``segment_intersections(a, b)`` answers
"where along ``a`` does ``b`` cross it" and returns parameters on ``a``
only. Both sides are reduced to parametrised polylines (a line is a
one-edge polyline on [0, 1], a cubic is flattened within the tolerance)
and every edge pair is intersected with the closed-form line formula.
Roles never swap, whichever side is the curve.

A bounding box test precedes flattening, so segments that cannot touch
are rejected without any curve work.
"""

from plotpath.core.geometry import boxes_overlap, flatten_segment, line_intersection
from plotpath.domain import LineSegment, Path, Point, Segment

# Parameters closer than this are the same hit reached through two edges
PARAM_MERGE_EPSILON = 1e-9

DEFAULT_TOLERANCE = 0.25


def _merge_parameters(params: list[float]) -> list[float]:
    """Sort parameters and merge near-duplicates."""
    merged: list[float] = []
    for t in sorted(params):
        if merged and t - merged[-1] <= PARAM_MERGE_EPSILON:
            continue
        merged.append(t)
    return merged


def _polyline_hits(
    poly_a: list[tuple[float, Point]], poly_b: list[tuple[float, Point]]
) -> list[float]:
    """Unmerged parameters along ``poly_a`` where edges of ``poly_b`` cross it."""
    hits: list[float] = []
    for (ta0, pa0), (ta1, pa1) in zip(poly_a, poly_a[1:]):
        edge_a = (min(pa0.x, pa1.x), min(pa0.y, pa1.y), max(pa0.x, pa1.x), max(pa0.y, pa1.y))

        for (_, pb0), (_, pb1) in zip(poly_b, poly_b[1:]):
            edge_b = (
                min(pb0.x, pb1.x),
                min(pb0.y, pb1.y),
                max(pb0.x, pb1.x),
                max(pb0.y, pb1.y),
            )
            if not boxes_overlap(edge_a, edge_b):
                continue

            hit = line_intersection(pa0, pa1, pb0, pb1)
            if hit is not None:
                # Map the edge-local parameter back onto the whole segment
                hits.append(ta0 + hit[0] * (ta1 - ta0))

    return hits


def segment_intersections(
    a: Segment, b: Segment, tolerance: float = DEFAULT_TOLERANCE
) -> list[float]:
    """Find parameters on segment ``a`` where segment ``b`` crosses it.

    Args:
        a: The intersected segment
        b: The intersecting segment
        tolerance: Flattening tolerance for cubic segments

    Returns:
        Ascending, de-duplicated parameters in [0, 1] on ``a``
    """
    if not boxes_overlap(a.bounding_box(), b.bounding_box()):
        return []

    if isinstance(a, LineSegment) and isinstance(b, LineSegment):
        hit = line_intersection(a.p0, a.p1, b.p0, b.p1)
        return [hit[0]] if hit is not None else []

    hits = _polyline_hits(flatten_segment(a, tolerance), flatten_segment(b, tolerance))
    return _merge_parameters(hits)


def path_intersections(
    path: Path, other: Path, tolerance: float = DEFAULT_TOLERANCE
) -> dict[int, list[float]]:
    """Collect every crossing of ``other`` along ``path``.

    Each segment of either path is boxed and flattened at most once, however
    many segments of the other path it is tested against.

    Args:
        path: The path being cut
        other: The path whose segments cross it
        tolerance: Flattening tolerance for cubic segments

    Returns:
        Mapping of segment index in ``path`` to ascending parameters.
        Segments without crossings are absent.
    """
    result: dict[int, list[float]] = {}

    if path.is_empty() or other.is_empty():
        return result

    if not boxes_overlap(path.bounding_box(), other.bounding_box()):
        return result

    other_boxes = [segment.bounding_box() for segment in other.segments]
    flattened: dict[Segment, list[tuple[float, Point]]] = {}

    def flatten(segment: Segment) -> list[tuple[float, Point]]:
        poly = flattened.get(segment)
        if poly is None:
            poly = flattened[segment] = flatten_segment(segment, tolerance)
        return poly

    for index, segment in enumerate(path.segments):
        box = segment.bounding_box()
        params: list[float] = []

        for other_segment, other_box in zip(other.segments, other_boxes):
            if not boxes_overlap(box, other_box):
                continue

            if isinstance(segment, LineSegment) and isinstance(other_segment, LineSegment):
                hit = line_intersection(
                    segment.p0, segment.p1, other_segment.p0, other_segment.p1
                )
                if hit is not None:
                    params.append(hit[0])
                continue

            params.extend(_polyline_hits(flatten(segment), flatten(other_segment)))

        if params:
            result[index] = _merge_parameters(params)

    return result
