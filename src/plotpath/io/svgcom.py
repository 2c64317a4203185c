"""The svgcom plotter command format.

An svgcom file has three lines:

    WIDTH HEIGHT N_COMMANDS N_COORDS
    MLLCL...
    x y x y x1 y1 x2 y2 x y ...

The second line holds one letter per command (M, L or C), the third the
coordinates of all commands in order: 2 per M/L, 6 per C.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from plotpath.domain import CubicSegment, Path
from plotpath.exceptions import FormatParseError

# Coordinates consumed by each command letter
COMMAND_ARITY = {"M": 2, "L": 2, "C": 6}


def _format_number(value: float) -> str:
    """Shortest text that parses back to the same float."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, slots=True)
class ImageSize:
    """Document size in whole pixels."""

    width: int
    height: int

    @classmethod
    def from_float(cls, width: float, height: float) -> "ImageSize":
        """Round a fractional document size up to whole pixels."""
        return cls(math.ceil(width), math.ceil(height))


@dataclass
class SvgCom:
    """In-memory svgcom document.

    Attributes:
        view_size: Document size in whole pixels
        commands: (letter, points) pairs; points are (x, y) tuples
    """

    view_size: ImageSize
    commands: list[tuple[str, tuple[tuple[float, float], ...]]] = field(default_factory=list)

    @classmethod
    def from_paths(cls, paths: Iterable[Path], width: float, height: float) -> "SvgCom":
        """Encode paths as plotter commands.

        A move is emitted at the start of every path and wherever a path
        continues somewhere other than where its previous segment ended.

        Args:
            paths: Paths in drawing order
            width: Document width (rounded up)
            height: Document height (rounded up)

        Returns:
            SvgCom instance
        """
        svgcom = cls(view_size=ImageSize.from_float(width, height))

        for path in paths:
            current = None
            for segment in path.segments:
                if segment.start != current:
                    svgcom.move_to(segment.start.to_tuple())

                if isinstance(segment, CubicSegment):
                    svgcom.curve_to(
                        segment.c1.to_tuple(), segment.c2.to_tuple(), segment.p1.to_tuple()
                    )
                else:
                    svgcom.line_to(segment.end.to_tuple())
                current = segment.end

        return svgcom

    def move_to(self, pt: tuple[float, float]) -> None:
        self.commands.append(("M", (pt,)))

    def line_to(self, pt: tuple[float, float]) -> None:
        self.commands.append(("L", (pt,)))

    def curve_to(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.commands.append(("C", (pt1, pt2, pt3)))

    @property
    def command_letters(self) -> str:
        return "".join(letter for letter, _ in self.commands)

    @property
    def coordinates(self) -> list[float]:
        """Flat coordinate list in command order."""
        return [value for _, points in self.commands for pt in points for value in pt]

    def points_count(self) -> int:
        return sum(len(points) for _, points in self.commands)

    def coordinates_count(self) -> int:
        return self.points_count() * 2

    def to_svgcom(self) -> str:
        """Serialize to svgcom text."""
        metrics = (
            f"{self.view_size.width} {self.view_size.height} "
            f"{len(self.commands)} {self.coordinates_count()}"
        )
        coords = " ".join(_format_number(value) for value in self.coordinates)
        return f"{metrics}\n{self.command_letters}\n{coords}\n"

    @classmethod
    def from_svgcom_str(cls, source: str) -> "SvgCom":
        """Parse svgcom text.

        Args:
            source: Full svgcom file contents

        Returns:
            SvgCom instance

        Raises:
            FormatParseError: If the text is not valid svgcom
        """
        lines = source.splitlines()
        if len(lines) < 3:
            raise FormatParseError("Expected at least 3 lines")

        metrics = _parse_metrics(lines[0])
        letters = lines[1].strip()
        coords = _parse_coords(lines[2])

        if len(letters) != metrics[2] or len(coords) != metrics[3]:
            raise FormatParseError("Data length does not match the header information")

        svgcom = cls(view_size=ImageSize(metrics[0], metrics[1]))
        svgcom._read_data(letters, coords)
        return svgcom

    def _read_data(self, letters: str, coords: list[float]) -> None:
        position = 0
        for letter in letters:
            arity = COMMAND_ARITY.get(letter)
            if arity is None:
                raise FormatParseError(f"Invalid command: {letter!r}")
            if not self.commands and letter != "M":
                raise FormatParseError(f"Commands must start with 'M', got {letter!r}")
            if position + arity > len(coords):
                raise FormatParseError(f"Not enough coordinates for command {letter!r}")

            values = coords[position : position + arity]
            points = tuple(zip(values[0::2], values[1::2]))
            self.commands.append((letter, points))
            position += arity

        if position != len(coords):
            raise FormatParseError(f"{len(coords) - position} unused coordinates")

    def draw(self, pen: Any) -> None:
        """Replay the commands into a fontTools pen.

        Every sub-path is left open; plotter strokes are never implicitly
        closed.
        """
        started = False
        for letter, points in self.commands:
            if letter == "M":
                if started:
                    pen.endPath()
                pen.moveTo(points[0])
                started = True
            elif letter == "L":
                pen.lineTo(points[0])
            else:
                pen.curveTo(*points)

        if started:
            pen.endPath()


def _parse_metrics(line: str) -> list[int]:
    try:
        metrics = [int(token) for token in line.split()]
    except ValueError as e:
        raise FormatParseError(f"Integer parsing error: {e}") from e

    if len(metrics) != 4:
        raise FormatParseError("Expected 4 metrics components: WIDTH, HEIGHT, N_CMD, N_COORD")
    if any(value < 0 for value in metrics):
        raise FormatParseError("Metrics must not be negative")

    return metrics


def _parse_coords(line: str) -> list[float]:
    try:
        return [float(token) for token in line.split()]
    except ValueError as e:
        raise FormatParseError(f"Float parsing error: {e}") from e
