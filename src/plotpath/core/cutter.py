"""Path cutting at intersection parameters.

Cutting never mutates its input. Each recorded parameter ends the current
sub-path and begins the next one, so a segment with k parameters yields
k + 1 pieces.
"""

from collections.abc import Mapping, Sequence

from plotpath.domain import Path, Segment

# Pieces spanning less parameter range than this are not emitted
MIN_PIECE_SPAN = 1e-9


def cut_path(path: Path, intersections: Mapping[int, Sequence[float]]) -> list[Path]:
    """Split a path at the given cut points.

    Parameters at 0 or 1, or repeated parameters, produce zero-length
    pieces; those pieces are not emitted but the sub-path boundary they
    stand for is kept. k cut points therefore give 1 + k fragments only
    when every piece has length: a cut at the very start of the first
    segment or the very end of the last one adds no fragment, since a
    plotter has nothing to draw for it.

    Args:
        path: The path to cut
        intersections: Segment index to ascending parameters in [0, 1]

    Returns:
        Non-empty fragments in path order. ``closed`` survives only on the
        fragment that still ends with the original, unsplit last segment.
    """
    pieces: list[list[Segment]] = [[]]

    for index, segment in enumerate(path.segments):
        params = intersections.get(index)
        if not params:
            pieces[-1].append(segment)
            continue

        bounds = [0.0, *params, 1.0]
        for k, (t0, t1) in enumerate(zip(bounds, bounds[1:])):
            if k > 0:
                pieces.append([])
            if t1 - t0 > MIN_PIECE_SPAN:
                pieces[-1].append(segment.subsegment(t0, t1))

    last_segment = path.segments[-1] if path.segments else None
    fragments = []
    for piece in pieces:
        if not piece:
            continue
        closed = path.closed and piece[-1] is last_segment
        fragments.append(path.with_segments(piece, closed=closed))

    return fragments


def split_contours(path: Path) -> list[Path]:
    """Split a path at its contour boundaries.

    A path made of a single continuous run is returned as is.
    """
    contours = path.contours()
    if len(contours) <= 1:
        return [path]

    return [
        path.with_segments(run, closed=path.closed and run is contours[-1])
        for run in contours
    ]
