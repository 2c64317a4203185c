"""Domain models for plotpath.

This module contains the core domain models representing points, segments,
paths and covering shapes. All models are designed to be:

- Immutable (using frozen dataclasses)
- Owners of their coordinate data (no views into parser buffers)
- Independent of svgelements implementation details

Key classes:
- Point: A 2D point in document coordinates
- LineSegment / CubicSegment: Parametrised path segments
- Path: An ordered segment sequence with fill metadata
- CoveringShape: A closed filled outline used for coverage tests
"""

from plotpath.domain.path import (
    CoveringShape,
    DrawCommand,
    FillRule,
    Path,
    build_path,
)
from plotpath.domain.segment import CubicSegment, LineSegment, Point, Segment

__all__: list[str] = [
    # Enums
    "DrawCommand",
    "FillRule",
    # Core types
    "Point",
    "LineSegment",
    "CubicSegment",
    "Segment",
    "Path",
    "CoveringShape",
    # Construction
    "build_path",
]
