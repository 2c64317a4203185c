"""Converters between svgelements and domain models.

This module handles the conversion from svgelements shapes to the draw
command records the path builder consumes. Only move, line, cubic and
close reach the domain: quadratic curves are degree-elevated and arcs are
approximated by cubics here.
"""

from dataclasses import dataclass, field
from typing import Any

from svgelements import Arc, Close, CubicBezier, Line, Move, QuadraticBezier, Shape

from plotpath.domain import DrawCommand, FillRule, Path, build_path


@dataclass
class ShapeRecord:
    """Draw commands and paint attributes of one document shape.

    Attributes:
        source_id: Position of the shape in document order
        commands: Draw commands in order
        coordinates: Flat transformed coordinates matching the commands
        has_fill: Whether the shape is filled
        fill_rule: Fill rule of the shape
        has_stroke: Whether the shape is stroked
    """

    source_id: int
    commands: list[DrawCommand] = field(default_factory=list)
    coordinates: list[float] = field(default_factory=list)
    has_fill: bool = False
    fill_rule: FillRule = FillRule.NON_ZERO
    has_stroke: bool = False

    def to_path(self) -> Path:
        """Build the domain path for this shape."""
        return build_path(
            self.commands,
            self.coordinates,
            source_id=self.source_id,
            has_fill=self.has_fill,
            fill_rule=self.fill_rule,
        )


def svgelements_shape_to_record(shape: Shape, source_id: int) -> ShapeRecord:
    """Convert an svgelements shape to a ShapeRecord.

    Args:
        shape: Parsed shape element (reified or not)
        source_id: Position of the shape in document order

    Returns:
        ShapeRecord with transformed coordinates
    """
    fill_rule = (
        FillRule.EVEN_ODD
        if shape.values.get("fill-rule") == FillRule.EVEN_ODD.value
        else FillRule.NON_ZERO
    )
    record = ShapeRecord(
        source_id=source_id,
        has_fill=_is_painted(shape.fill),
        fill_rule=fill_rule,
        has_stroke=_is_painted(shape.stroke),
    )

    for segment in shape.segments(transformed=True):
        _append_segment(record, segment)

    return record


def _is_painted(color: Any) -> bool:
    return color is not None and color.value is not None


def _append(record: ShapeRecord, command: DrawCommand, *points: Any) -> None:
    record.commands.append(command)
    for pt in points:
        record.coordinates.extend((float(pt.x), float(pt.y)))


def _append_segment(record: ShapeRecord, segment: Any) -> None:
    """Translate one svgelements path segment into draw commands."""
    if isinstance(segment, Move):
        _append(record, DrawCommand.MOVE, segment.end)

    elif isinstance(segment, Close):
        _append(record, DrawCommand.CLOSE)

    elif isinstance(segment, Line):
        _append(record, DrawCommand.LINE, segment.end)

    elif isinstance(segment, CubicBezier):
        _append(record, DrawCommand.CURVE, segment.control1, segment.control2, segment.end)

    elif isinstance(segment, QuadraticBezier):
        # Degree elevation: cubic controls sit 2/3 of the way to the quad control
        start, control, end = segment.start, segment.control, segment.end
        c1 = _lerp(start, control, 2.0 / 3.0)
        c2 = _lerp(end, control, 2.0 / 3.0)
        record.commands.append(DrawCommand.CURVE)
        record.coordinates.extend((*c1, *c2, float(end.x), float(end.y)))

    elif isinstance(segment, Arc):
        for cubic in segment.as_cubic_curves():
            _append(record, DrawCommand.CURVE, cubic.control1, cubic.control2, cubic.end)


def _lerp(a: Any, b: Any, t: float) -> tuple[float, float]:
    return (float(a.x) + (float(b.x) - float(a.x)) * t, float(a.y) + (float(b.y) - float(a.y)) * t)
