"""Core geometric types for path segments.

This module defines the fundamental geometric types used throughout plotpath:
- Point: A 2D point in document coordinates
- LineSegment: A straight segment between two points
- CubicSegment: A cubic Bezier segment with two control points

Segments are parametrised on t in [0, 1], from the start point (t=0) to
the end point (t=1).
"""

from dataclasses import dataclass
from typing import Any

from fontTools.misc.bezierTools import (
    calcCubicBounds,
    cubicPointAtT,
    linePointAtT,
    splitCubicAtT,
)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D document space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in document units
        y: Y coordinate in document units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, pt: tuple[float, float]) -> "Point":
        """Build a point from an (x, y) pair."""
        return cls(float(pt[0]), float(pt[1]))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class LineSegment:
    """A straight line segment.

    Attributes:
        p0: Start point (t=0)
        p1: End point (t=1)
    """

    p0: Point
    p1: Point

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p1

    def points(self) -> tuple[Point, ...]:
        """Return all defining points in order."""
        return (self.p0, self.p1)

    def point_at(self, t: float) -> Point:
        """Evaluate the segment at parameter t."""
        return Point.from_tuple(linePointAtT(self.p0.to_tuple(), self.p1.to_tuple(), t))

    def subsegment(self, t0: float, t1: float) -> "LineSegment":
        """Extract the part of the segment between t0 and t1."""
        return LineSegment(self.point_at(t0), self.point_at(t1))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the segment.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        return (
            min(self.p0.x, self.p1.x),
            min(self.p0.y, self.p1.y),
            max(self.p0.x, self.p1.x),
            max(self.p0.y, self.p1.y),
        )


@dataclass(frozen=True, slots=True)
class CubicSegment:
    """A cubic Bezier segment.

    Attributes:
        p0: Start point (t=0)
        c1: First control point
        c2: Second control point
        p1: End point (t=1)
    """

    p0: Point
    c1: Point
    c2: Point
    p1: Point

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p1

    def points(self) -> tuple[Point, ...]:
        """Return all defining points in order."""
        return (self.p0, self.c1, self.c2, self.p1)

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t."""
        return Point.from_tuple(cubicPointAtT(*(p.to_tuple() for p in self.points()), t))

    def subsegment(self, t0: float, t1: float) -> "CubicSegment":
        """Extract the part of the curve between t0 and t1.

        The curve is split at both parameters and the middle piece is kept,
        so the result is again a cubic parametrised on [0, 1].
        """
        pieces = splitCubicAtT(*(p.to_tuple() for p in self.points()), t0, t1)
        return CubicSegment(*(Point.from_tuple(pt) for pt in pieces[1]))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate the tight bounding box of the curve.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        return calcCubicBounds(*(p.to_tuple() for p in self.points()))


Segment = LineSegment | CubicSegment
