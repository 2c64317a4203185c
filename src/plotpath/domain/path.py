"""Path representation and construction.

This module defines the path domain model, which represents a single
shape of the source document as an ordered sequence of segments together
with the fill metadata needed for occlusion culling.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

from plotpath.domain.segment import CubicSegment, LineSegment, Point, Segment
from plotpath.exceptions import PathDataError


class FillRule(Enum):
    """Policy mapping a winding number to inside/outside."""

    NON_ZERO = "nonzero"
    EVEN_ODD = "evenodd"


class DrawCommand(Enum):
    """Draw commands as delivered by the document reader."""

    MOVE = "M"
    LINE = "L"
    CURVE = "C"
    CLOSE = "Z"

    @property
    def coordinate_count(self) -> int:
        return _COORDINATE_COUNTS[self]


_COORDINATE_COUNTS = {
    DrawCommand.MOVE: 2,
    DrawCommand.LINE: 2,
    DrawCommand.CURVE: 6,
    DrawCommand.CLOSE: 0,
}


@dataclass(frozen=True)
class Path:
    """A shape outline as an ordered sequence of segments.

    Consecutive segments share an endpoint except where the source shape
    started a new sub-path; such a break marks a contour boundary.

    Attributes:
        segments: Segments in drawing order
        source_id: Identity of the originating shape
        closed: Whether the source shape ended with an explicit close command
        has_fill: Whether the source shape is filled
        fill_rule: Fill rule of the source shape
    """

    segments: tuple[Segment, ...]
    source_id: int
    closed: bool = False
    has_fill: bool = False
    fill_rule: FillRule = FillRule.NON_ZERO

    @property
    def can_cover(self) -> bool:
        """Only closed, filled shapes can occlude other paths."""
        return self.closed and self.has_fill

    def is_empty(self) -> bool:
        return len(self.segments) == 0

    def representative_point(self) -> Point:
        """Midpoint of the first segment, used to classify a whole fragment.

        Raises:
            ValueError: If the path has no segments
        """
        if not self.segments:
            raise ValueError("Empty path has no representative point")
        return self.segments[0].point_at(0.5)

    def contours(self) -> list[tuple[Segment, ...]]:
        """Split the segments into maximal continuous runs."""
        runs: list[list[Segment]] = []
        for segment in self.segments:
            if runs and runs[-1][-1].end == segment.start:
                runs[-1].append(segment)
            else:
                runs.append([segment])
        return [tuple(run) for run in runs]

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of all segments.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.segments:
            return (0.0, 0.0, 0.0, 0.0)

        boxes = [segment.bounding_box() for segment in self.segments]
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    def with_segments(self, segments: Iterable[Segment], closed: bool = False) -> "Path":
        """Create a fragment of this path carrying the same source metadata."""
        return replace(self, segments=tuple(segments), closed=closed)


@dataclass(frozen=True)
class CoveringShape:
    """Read-only view of a closed, filled path used for coverage tests.

    Every contour is implicitly closed, as SVG fills are.

    Attributes:
        source_id: Identity of the originating shape
        contours: Continuous segment runs of the outline
        fill_rule: Fill rule of the shape
        bbox: Bounding box of the outline
    """

    source_id: int
    contours: tuple[tuple[Segment, ...], ...]
    fill_rule: FillRule
    bbox: tuple[float, float, float, float] = field(compare=False)

    @classmethod
    def from_path(cls, path: Path) -> "CoveringShape":
        """Derive a covering shape from a path.

        Raises:
            ValueError: If the path cannot cover (not closed or not filled)
        """
        if not path.can_cover:
            raise ValueError(f"Path {path.source_id} is not a closed filled shape")

        contours = []
        for run in path.contours():
            if run[-1].end != run[0].start:
                run = (*run, LineSegment(run[-1].end, run[0].start))
            contours.append(run)

        return cls(
            source_id=path.source_id,
            contours=tuple(contours),
            fill_rule=path.fill_rule,
            bbox=path.bounding_box(),
        )


def build_path(
    commands: Iterable[DrawCommand],
    coordinates: Iterable[float],
    source_id: int,
    has_fill: bool = False,
    fill_rule: FillRule = FillRule.NON_ZERO,
) -> Path:
    """Construct a path from a shape's draw commands and coordinate stream.

    A close command emits a line back to the sub-path start, unless the
    current point already is the start, in which case it is dropped.

    Args:
        commands: Draw commands in document order
        coordinates: Flat, already-transformed coordinates matching commands
        source_id: Identity of the originating shape
        has_fill: Whether the shape is filled
        fill_rule: Fill rule of the shape

    Returns:
        Path instance

    Raises:
        PathDataError: If the coordinate stream does not match the commands
    """
    coords = list(coordinates)
    commands = list(commands)
    expected = sum(cmd.coordinate_count for cmd in commands)
    if expected != len(coords):
        raise PathDataError(
            f"Shape {source_id}: commands need {expected} coordinates, got {len(coords)}"
        )

    segments: list[Segment] = []
    position = 0
    current: Point | None = None
    start: Point | None = None

    def take_point() -> Point:
        nonlocal position
        pt = Point(float(coords[position]), float(coords[position + 1]))
        position += 2
        return pt

    for command in commands:
        if command is DrawCommand.MOVE:
            current = start = take_point()
            continue

        if current is None or start is None:
            raise PathDataError(f"Shape {source_id}: {command.name} before MOVE")

        if command is DrawCommand.LINE:
            end = take_point()
            segments.append(LineSegment(current, end))
            current = end
        elif command is DrawCommand.CURVE:
            c1, c2, end = take_point(), take_point(), take_point()
            segments.append(CubicSegment(current, c1, c2, end))
            current = end
        else:
            if current != start:
                segments.append(LineSegment(current, start))
            current = start

    closed = bool(commands) and commands[-1] is DrawCommand.CLOSE

    return Path(
        segments=tuple(segments),
        source_id=source_id,
        closed=closed,
        has_fill=has_fill,
        fill_rule=fill_rule,
    )
