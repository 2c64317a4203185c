"""Occlusion culling over a painter-ordered stack of paths.

Paths are processed back to front in document order. Only a path drawn
later can hide parts of one drawn earlier, so the sweep keeps a working
set of surviving fragments and lets each new path cut and hide what is
already there before joining the set itself.
"""

import logging
from collections.abc import Iterable

from plotpath.core.coverage import covers
from plotpath.core.cutter import cut_path, split_contours
from plotpath.core.intersect import DEFAULT_TOLERANCE, path_intersections
from plotpath.domain import CoveringShape, Path

logger = logging.getLogger(__name__)


def occlude(
    fragment: Path, shape: CoveringShape, tolerance: float = DEFAULT_TOLERANCE
) -> list[Path]:
    """Remove the parts of a fragment hidden by a covering shape.

    Args:
        fragment: A continuous earlier path fragment
        shape: The covering shape drawn after it
        tolerance: Flattening tolerance for cubic segments

    Returns:
        Visible pieces of the fragment, in order. A fragment the shape
        neither crosses nor covers comes back unchanged.
    """
    return _cut_and_hide(fragment, _shape_outline(shape), shape, tolerance)


def split_at_crossings(
    fragment: Path, path: Path, tolerance: float = DEFAULT_TOLERANCE
) -> list[Path]:
    """Cut a fragment wherever a later path crosses it, keeping every piece.

    Used for later paths that cannot hide anything (open or unfilled).
    """
    return _cut_and_hide(fragment, path, None, tolerance)


def _cut_and_hide(
    fragment: Path,
    cutter: Path,
    shape: CoveringShape | None,
    tolerance: float,
) -> list[Path]:
    visible: list[Path] = []
    changed = False

    for piece in split_contours(fragment):
        if piece.is_empty():
            continue

        crossings = path_intersections(piece, cutter, tolerance)
        if crossings:
            changed = True
            parts = cut_path(piece, crossings)
        else:
            # No crossing: the piece is wholly inside or wholly outside
            parts = [piece]

        if shape is None:
            visible.extend(parts)
            continue

        for part in parts:
            if covers(shape, part, part.representative_point(), tolerance):
                changed = True
            else:
                visible.append(part)

    return visible if changed else [fragment]


def _shape_outline(shape: CoveringShape) -> Path:
    """Outline of a covering shape, including implicit closing edges."""
    return Path(
        segments=tuple(segment for contour in shape.contours for segment in contour),
        source_id=shape.source_id,
    )


def cull(paths: Iterable[Path], tolerance: float = DEFAULT_TOLERANCE) -> list[Path]:
    """Remove every part of every path hidden under a later filled shape.

    Every later path cuts the fragments it crosses. Only closed filled
    paths then hide the pieces they cover; the rest keep every piece.

    Args:
        paths: Paths in document (back to front) order
        tolerance: Flattening tolerance for cubic segments

    Returns:
        Surviving fragments, in drawing order
    """
    working_set: list[Path] = []

    for path in paths:
        if working_set and not path.is_empty():
            survivors: list[Path] = []
            if path.can_cover:
                shape = CoveringShape.from_path(path)
                for fragment in working_set:
                    survivors.extend(occlude(fragment, shape, tolerance))
            else:
                for fragment in working_set:
                    survivors.extend(split_at_crossings(fragment, path, tolerance))

            logger.debug(
                "Shape %d processed working set: %d fragments in, %d out",
                path.source_id, len(working_set), len(survivors),
            )
            working_set = survivors

        if not path.is_empty():
            working_set.append(path)

    return working_set
