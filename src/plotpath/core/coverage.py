"""Point coverage tests against filled shapes.

A covering shape hides a point when the winding number of its outline
around the point is "inside" under the shape's fill rule. A shape never
hides its own fragments.
"""

from plotpath.core.geometry import flatten_segment, point_in_box, winding_number
from plotpath.core.intersect import DEFAULT_TOLERANCE
from plotpath.domain import CoveringShape, FillRule, Path, Point


def shape_winding_number(
    shape: CoveringShape, point: Point, tolerance: float = DEFAULT_TOLERANCE
) -> int:
    """Sum the winding numbers of all contours of a shape around a point.

    Args:
        shape: The covering shape
        point: The point to test
        tolerance: Flattening tolerance for cubic segments

    Returns:
        Signed winding number of the whole outline
    """
    total = 0
    for contour in shape.contours:
        polygon = [contour[0].start]
        for segment in contour:
            polygon.extend(pt for _, pt in flatten_segment(segment, tolerance)[1:])
        total += winding_number(point, polygon)
    return total


def is_inside(fill_rule: FillRule, winding: int) -> bool:
    """Apply a fill rule to a winding number."""
    if fill_rule is FillRule.EVEN_ODD:
        return winding % 2 != 0
    return winding != 0


def covers(
    shape: CoveringShape,
    path: Path,
    point: Point,
    tolerance: float = DEFAULT_TOLERANCE,
) -> bool:
    """Decide whether a shape hides a point belonging to a path.

    Args:
        shape: The covering shape drawn later
        path: The path the point was taken from
        point: The point to test
        tolerance: Flattening tolerance for cubic segments

    Returns:
        True if the point lies inside the shape under its fill rule
    """
    if path.source_id == shape.source_id:
        return False

    if not point_in_box(point, shape.bbox):
        return False

    return is_inside(shape.fill_rule, shape_winding_number(shape, point, tolerance))
