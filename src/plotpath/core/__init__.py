"""Core processing algorithms for plotpath.

This module contains the occlusion-culling geometry engine:

- Geometry operations (bounding boxes, line intersection, winding numbers)
- Intersection engine (segment against segment, path against path)
- Path cutting at intersection parameters
- Coverage tests under fill rules
- The painter-order culling sweep

All functions are pure and deterministic; paths are processed strictly in
document order.

Key functions:
- segment_intersections: Parameters on one segment crossed by another
- path_intersections: All crossings of one path along another
- cut_path: Split a path at recorded cut points
- covers: Decide whether a filled shape hides a point
- cull: Remove stroke parts hidden under later filled shapes
- polish: Drop slivers and rejoin adjacent fragments

Key classes:
- PathProcessor: Orchestrates the generate and render workflows
"""

from plotpath.core.coverage import covers, is_inside, shape_winding_number
from plotpath.core.culler import cull, occlude, split_at_crossings
from plotpath.core.cutter import cut_path, split_contours
from plotpath.core.geometry import (
    boxes_overlap,
    flatten_segment,
    line_intersection,
    winding_number,
)
from plotpath.core.intersect import (
    DEFAULT_TOLERANCE,
    path_intersections,
    segment_intersections,
)
from plotpath.core.polish import polish
from plotpath.core.processor import PathProcessor, convert_paths

__all__ = [
    "DEFAULT_TOLERANCE",
    # Processor classes
    "PathProcessor",
    # Geometry functions
    "boxes_overlap",
    "convert_paths",
    "covers",
    "cull",
    "cut_path",
    "flatten_segment",
    "is_inside",
    "line_intersection",
    "occlude",
    "path_intersections",
    "polish",
    "segment_intersections",
    "shape_winding_number",
    "split_at_crossings",
    "split_contours",
    "winding_number",
]
