"""CLI application entry point for plotpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from plotpath import __version__
from plotpath.cli.output import (
    console,
    print_error,
    print_generate_success,
    print_header,
    print_options,
    print_render_success,
    print_step,
)
from plotpath.config import (
    GenerateConfig,
    GeometryConfig,
    LoggingConfig,
    PlotPathSettings,
    RenderConfig,
)
from plotpath.core import PathProcessor
from plotpath.exceptions import (
    DocumentParseError,
    FormatParseError,
    InputReadError,
    OutputWriteError,
    PlotPathError,
)

# Create the Typer app
app = typer.Typer(
    name="plotpath",
    help="Convert SVG art into move/line/curve commands for pen plotters.",
    add_completion=False,
    no_args_is_help=True,
)

LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]plotpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert SVG art into move/line/curve commands for pen plotters."""


def _check_input(input_path: Path) -> None:
    """Validate that the input exists and is a file."""
    if not input_path.exists():
        print_error(
            f"Input file not found: {input_path}",
            details=f"The file '{input_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_path.is_file():
        print_error(f"Input path is not a file: {input_path}")
        raise typer.Exit(code=1)


@app.command()
def generate(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Argument(
            help="Path to output svgcom file",
            show_default=False,
        ),
    ],
    autocut: Annotated[
        bool,
        typer.Option(
            "--autocut",
            help="Remove stroke parts hidden under filled shapes drawn later",
        ),
    ] = False,
    polish: Annotated[
        bool,
        typer.Option(
            "--polish",
            help="Drop degenerate segments and rejoin adjacent fragments",
        ),
    ] = False,
    precision: Annotated[
        float,
        typer.Option(
            "--precision",
            help="Curve flattening tolerance in document units",
            min=1e-6,
            max=100.0,
        ),
    ] = 0.25,
    only_stroked: Annotated[
        bool,
        typer.Option(
            "--onlystroked",
            help="Ignore shapes that have no stroke",
        ),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Convert an SVG document into svgcom plotter commands.

    Example:
        plotpath generate tiger.svg tiger.svgcom --autocut
    """
    _check_input(input_svg)

    if not quiet:
        print_header(__version__)

    settings = PlotPathSettings(
        geometry=GeometryConfig(flatten_tolerance=precision),
        generate=GenerateConfig(
            autocut=autocut,
            polish=polish,
            only_stroked=only_stroked,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
            quiet=quiet,
        ),
    )

    try:
        if not quiet:
            print_step("Generating")
            print_options(autocut, polish, only_stroked, precision)

        processor = PathProcessor(settings)
        stats = processor.generate(input_svg, output)

        if not quiet:
            print_generate_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                total_time_s=stats.duration_seconds,
                shapes=stats.shapes_read,
                skipped=stats.shapes_skipped,
                paths=stats.paths_out,
                segments_in=stats.segments_in,
                segments_out=stats.segments_out,
            )

    except InputReadError as e:
        print_error(f"Could not read input: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentParseError as e:
        print_error(f"Could not parse SVG: {e.reason}")
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except PlotPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def render(
    input_svgcom: Annotated[
        Path,
        typer.Argument(
            help="Path to input svgcom file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Argument(
            help="Path to output SVG file",
            show_default=False,
        ),
    ],
    stroke: Annotated[
        str,
        typer.Option(
            "--stroke",
            help="Stroke colour of the rendered path",
        ),
    ] = "#000000",
    stroke_width: Annotated[
        float,
        typer.Option(
            "--stroke-width",
            help="Stroke width of the rendered path",
            min=1e-6,
        ),
    ] = 1.0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Render svgcom plotter commands as a stroked SVG preview.

    Example:
        plotpath render tiger.svgcom tiger-preview.svg --stroke red --stroke-width 3
    """
    _check_input(input_svgcom)

    if not quiet:
        print_header(__version__)

    settings = PlotPathSettings(
        render=RenderConfig(stroke=stroke, stroke_width=stroke_width),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
            quiet=quiet,
        ),
    )

    try:
        if not quiet:
            print_step("Rendering")

        processor = PathProcessor(settings)
        stats = processor.render(input_svgcom, output)

        if not quiet:
            print_render_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                total_time_s=stats.duration_seconds,
                commands=stats.commands_written,
            )

    except InputReadError as e:
        print_error(f"Could not read input: {e.reason}")
        raise typer.Exit(code=1)
    except FormatParseError as e:
        print_error(f"Could not parse svgcom: {e.reason}")
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except PlotPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"

    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
