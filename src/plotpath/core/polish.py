"""Clean-up pass for plotter output.

Cutting can leave slivers a fraction of a pen width long and can split one
stroke into neighbouring fragments that still meet end to start. Polishing
drops the slivers and rejoins such fragments so the plotter lifts its pen
less often.
"""

import logging

from plotpath.core.geometry import segment_length
from plotpath.domain import Path

logger = logging.getLogger(__name__)


def polish(paths: list[Path], epsilon: float = 1e-6, tolerance: float = 0.25) -> list[Path]:
    """Drop degenerate segments and rejoin adjacent fragments.

    Args:
        paths: Paths in drawing order
        epsilon: Segments shorter than this are dropped
        tolerance: Flattening tolerance used to measure curve length

    Returns:
        Polished paths in drawing order
    """
    result: list[Path] = []
    dropped = 0

    for path in paths:
        kept = [s for s in path.segments if segment_length(s, tolerance) >= epsilon]
        dropped += len(path.segments) - len(kept)
        if not kept:
            continue

        previous = result[-1] if result else None
        if (
            previous is not None
            and previous.source_id == path.source_id
            and previous.segments[-1].end == kept[0].start
        ):
            result[-1] = previous.with_segments(
                [*previous.segments, *kept], closed=path.closed
            )
        else:
            result.append(path.with_segments(kept, closed=path.closed))

    logger.debug(
        "Polished %d paths into %d, dropped %d short segments",
        len(paths), len(result), dropped,
    )
    return result
