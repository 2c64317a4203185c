"""Logging utilities for plotpath."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from a generate or render run."""

    shapes_read: int = 0
    shapes_skipped: int = 0
    paths_in: int = 0
    paths_out: int = 0
    segments_in: int = 0
    segments_out: int = 0
    commands_written: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_plotpath", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._plotpath = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._plotpath = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("plotpath")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_document_loaded(self, source: str, width: float, height: float) -> None:
        """Log a loaded input document."""
        self._logger.info("Document loaded", input=source, width=width, height=height)

    def log_shape_read(self, source_id: int, segments: int, can_cover: bool) -> None:
        """Log one shape converted to a path."""
        self._logger.debug(
            "Shape read",
            shape=source_id,
            segments=segments,
            can_cover=can_cover,
        )
        self._stats.shapes_read += 1
        self._stats.paths_in += 1
        self._stats.segments_in += segments

    def log_shape_skipped(self, source_id: int, reason: str) -> None:
        """Log skipped shape."""
        self._logger.debug("Shape skipped", shape=source_id, reason=reason)
        self._stats.shapes_skipped += 1

    def log_stage_complete(
        self,
        stage: str,
        paths_in: int,
        paths_out: int,
        duration_ms: float,
    ) -> None:
        """Log a completed pipeline stage (cull, polish)."""
        self._logger.info(
            "Stage complete",
            stage=stage,
            paths_in=paths_in,
            paths_out=paths_out,
            duration_ms=round(duration_ms, 2),
        )

    def log_output_written(self, target: str, paths: int, segments: int, commands: int) -> None:
        """Log the final output file."""
        self._logger.info(
            "Output written",
            output=target,
            paths=paths,
            segments=segments,
            commands=commands,
        )
        self._stats.paths_out = paths
        self._stats.segments_out = segments
        self._stats.commands_written = commands

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
