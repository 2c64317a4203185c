"""Writers for svgcom and rendered SVG output.

Output text is fully built in memory before the file is opened, so a
failed command never leaves a half-written file behind.
"""

from pathlib import Path
from xml.sax.saxutils import quoteattr

from fontTools.pens.svgPathPen import SVGPathPen

from plotpath.exceptions import OutputWriteError
from plotpath.io.svgcom import SvgCom


def write_text(output_path: Path, text: str) -> None:
    """Write text to a file.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output_path), e.strerror or str(e)) from e


class SvgWriter:
    """Renders svgcom commands as a stroked SVG document.

    The whole drawing becomes a single unfilled ``<path>``, which is what
    a plotter preview needs.

    Example:
        writer = SvgWriter(stroke="red", stroke_width=3.0)
        writer.save(svgcom, Path("preview.svg"))
    """

    def __init__(self, stroke: str = "#000000", stroke_width: float = 1.0) -> None:
        """Initialize the SVG writer.

        Args:
            stroke: Stroke colour of the rendered path
            stroke_width: Stroke width of the rendered path
        """
        self._stroke = stroke
        self._stroke_width = stroke_width

    @staticmethod
    def path_data(svgcom: SvgCom) -> str:
        """Build SVG path data for the commands."""
        pen = SVGPathPen(None)
        svgcom.draw(pen)
        return pen.getCommands()

    def to_svg(self, svgcom: SvgCom) -> str:
        """Render a complete SVG document."""
        size = svgcom.view_size
        return (
            '<?xml version="1.0" standalone="no"?>\n'
            '<svg version="1.1" xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {size.width} {size.height}">\n'
            f"<path stroke={quoteattr(self._stroke)} "
            f'stroke-width="{self._stroke_width:g}" fill="none" '
            f'd="{self.path_data(svgcom)}"/>\n'
            "</svg>\n"
        )

    def save(self, svgcom: SvgCom, output_path: Path) -> None:
        """Render and write the SVG document.

        Raises:
            OutputWriteError: If the file cannot be written
        """
        write_text(output_path, self.to_svg(svgcom))

