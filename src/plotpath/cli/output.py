"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, summary and error messages.
"""


from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]plotpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_options(autocut: bool, polish: bool, only_stroked: bool, precision: float) -> None:
    """Print the active generate options."""
    flags = [
        name
        for name, enabled in (
            ("autocut", autocut),
            ("polish", polish),
            ("only stroked", only_stroked),
        )
        if enabled
    ]
    flags_str = f" {SYM_DOT} ".join(flags) if flags else "plain conversion"
    console.print(f"  {flags_str} {SYM_DOT} precision {precision:g}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_generate_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    shapes: int,
    skipped: int,
    paths: int,
    segments_in: int,
    segments_out: int,
) -> None:
    """Print generate success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        shapes: Number of shapes read
        skipped: Number of shapes skipped
        paths: Number of paths written
        segments_in: Segments read from the document
        segments_out: Segments written
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {shapes} shapes {SYM_DOT} {skipped} skipped {SYM_DOT} {paths} paths"
    )
    console.print(f"  {segments_in} segments in {SYM_DOT} {segments_out} segments out")


def print_render_success(
    output_path: str, file_size: str, total_time_s: float, commands: int
) -> None:
    """Print render success message with summary."""
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)
    console.print(f"  {commands} commands")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
