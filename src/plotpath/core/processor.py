"""Processing orchestration for the generate and render workflows.

Key components:
- convert_paths: Pure path pipeline (autocut, polish) used by generate
- PathProcessor: Main orchestrator class for file-to-file processing
"""

import time
from pathlib import Path

from plotpath.config import GenerateConfig, GeometryConfig, PlotPathSettings
from plotpath.core.culler import cull
from plotpath.core.polish import polish
from plotpath.domain import Path as PlotPath
from plotpath.exceptions import InputReadError
from plotpath.io import SvgCom, SvgReader, SvgWriter, write_text
from plotpath.utils import ProcessingLogger, ProcessingStats, configure_logging


def convert_paths(
    paths: list[PlotPath],
    generate: GenerateConfig,
    geometry: GeometryConfig,
) -> list[PlotPath]:
    """Apply the optional autocut and polish stages to document paths.

    Args:
        paths: Paths in document order
        generate: Stage switches
        geometry: Tolerances

    Returns:
        Paths to encode, in drawing order
    """
    result = list(paths)
    if generate.autocut:
        result = cull(result, tolerance=geometry.flatten_tolerance)
    if generate.polish:
        result = polish(
            result,
            epsilon=geometry.polish_epsilon,
            tolerance=geometry.flatten_tolerance,
        )
    return result


class PathProcessor:
    """Orchestrates SVG to svgcom generation and svgcom rendering.

    Manages the generate workflow:
    1. Load the SVG document
    2. Convert shapes to paths (optionally only stroked ones)
    3. Remove hidden stroke parts (autocut) and polish
    4. Encode svgcom and write it

    Example:
        settings = PlotPathSettings()
        processor = PathProcessor(settings)
        stats = processor.generate(Path("tiger.svg"), Path("tiger.svgcom"))
    """

    def __init__(self, config: PlotPathSettings) -> None:
        """Initialize path processor with configuration.

        Args:
            config: Settings containing geometry, generate and render config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=config.logging.quiet,
        )

    def load_paths(
        self, input_path: Path, processing_logger: ProcessingLogger
    ) -> tuple[list[PlotPath], float, float]:
        """Read an SVG document and build one path per shape.

        Returns:
            Tuple of (paths, width, height)

        Raises:
            InputReadError: If the file cannot be read
            DocumentParseError: If the document is malformed
        """
        with SvgReader(input_path) as reader:
            width, height = reader.width, reader.height
            processing_logger.log_document_loaded(str(input_path), width, height)

            paths: list[PlotPath] = []
            for record in reader.iter_shapes():
                if self.config.generate.only_stroked and not record.has_stroke:
                    processing_logger.log_shape_skipped(record.source_id, "no stroke")
                    continue

                path = record.to_path()
                if path.is_empty():
                    processing_logger.log_shape_skipped(record.source_id, "no segments")
                    continue

                processing_logger.log_shape_read(
                    path.source_id, len(path.segments), path.can_cover
                )
                paths.append(path)

        return paths, width, height

    def generate(self, input_path: Path, output_path: Path) -> ProcessingStats:
        """Convert an SVG document into an svgcom file.

        Args:
            input_path: Source SVG document
            output_path: svgcom file to write

        Returns:
            ProcessingStats with counts and timing

        Raises:
            InputReadError: If the input cannot be read
            DocumentParseError: If the input is not a valid SVG document
            OutputWriteError: If the output cannot be written
        """
        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting generate",
            input=str(input_path),
            output=str(output_path),
            autocut=self.config.generate.autocut,
            polish=self.config.generate.polish,
            precision=self.config.geometry.flatten_tolerance,
        )

        paths, width, height = self.load_paths(input_path, processing_logger)

        stage_start = time.time()
        result = convert_paths(paths, self.config.generate, self.config.geometry)
        if self.config.generate.autocut or self.config.generate.polish:
            processing_logger.log_stage_complete(
                stage=_stage_name(self.config.generate),
                paths_in=len(paths),
                paths_out=len(result),
                duration_ms=(time.time() - stage_start) * 1000,
            )

        svgcom = SvgCom.from_paths(result, width, height)
        write_text(output_path, svgcom.to_svgcom())

        processing_logger.log_output_written(
            str(output_path),
            paths=len(result),
            segments=sum(len(p.segments) for p in result),
            commands=len(svgcom.commands),
        )

        stats.end_time = time.time()
        self.logger.info(
            "Generate complete",
            shapes=stats.shapes_read,
            skipped=stats.shapes_skipped,
            paths_out=stats.paths_out,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats

    def render(self, input_path: Path, output_path: Path) -> ProcessingStats:
        """Render an svgcom file as a stroked SVG document.

        Args:
            input_path: svgcom file to read
            output_path: SVG document to write

        Returns:
            ProcessingStats with command count and timing

        Raises:
            InputReadError: If the input cannot be read
            FormatParseError: If the input is not valid svgcom
            OutputWriteError: If the output cannot be written
        """
        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        self.logger.info("Starting render", input=str(input_path), output=str(output_path))

        try:
            source = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(str(input_path), str(e)) from e

        svgcom = SvgCom.from_svgcom_str(source)

        writer = SvgWriter(
            stroke=self.config.render.stroke,
            stroke_width=self.config.render.stroke_width,
        )
        writer.save(svgcom, output_path)

        moves = sum(1 for letter, _ in svgcom.commands if letter == "M")
        processing_logger.log_output_written(
            str(output_path),
            paths=moves,
            segments=len(svgcom.commands) - moves,
            commands=len(svgcom.commands),
        )

        stats.end_time = time.time()
        self.logger.info(
            "Render complete",
            commands=stats.commands_written,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats


def _stage_name(generate: GenerateConfig) -> str:
    stages = []
    if generate.autocut:
        stages.append("autocut")
    if generate.polish:
        stages.append("polish")
    return "+".join(stages)
