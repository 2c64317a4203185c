"""SVG reader for loading vector documents.

This module provides the SvgReader class for loading SVG files and
extracting their shapes, in document order, as draw command records.
"""

import io
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

from svgelements import SVG, Shape

from plotpath.exceptions import DocumentParseError, InputReadError
from plotpath.io.converter import ShapeRecord, svgelements_shape_to_record


class SvgReader:
    """Loads SVG documents and extracts shape records.

    Transforms are applied while parsing, so every record carries
    coordinates in document space.

    Example:
        reader = SvgReader(Path("drawing.svg"))
        reader.load()
        for record in reader.iter_shapes():
            print(record.source_id, record.has_fill)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the SVG reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._svg: SVG | None = None

    def load(self) -> None:
        """Load and parse the SVG file.

        Raises:
            InputReadError: If the file cannot be read
            DocumentParseError: If the file is not a valid SVG document
        """
        try:
            data = self._svg_path.read_bytes()
        except OSError as e:
            raise InputReadError(str(self._svg_path), e.strerror or str(e)) from e

        try:
            self._svg = SVG.parse(io.BytesIO(data), reify=True)
        except (ET.ParseError, ValueError) as e:
            raise DocumentParseError(str(self._svg_path), str(e)) from e

    def _require_loaded(self) -> SVG:
        if self._svg is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._svg

    @property
    def width(self) -> float:
        """Document width in user units.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        svg = self._require_loaded()
        if svg.width is not None:
            return float(svg.width)
        return float(svg.viewbox.width) if svg.viewbox is not None else 0.0

    @property
    def height(self) -> float:
        """Document height in user units.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        svg = self._require_loaded()
        if svg.height is not None:
            return float(svg.height)
        return float(svg.viewbox.height) if svg.viewbox is not None else 0.0

    def iter_shapes(self) -> Iterator[ShapeRecord]:
        """Iterate over visible shapes in document order.

        Yields:
            ShapeRecord per shape element

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        svg = self._require_loaded()

        index = 0
        for element in svg.elements():
            if not isinstance(element, Shape):
                continue
            if _is_hidden(element):
                continue

            yield svgelements_shape_to_record(element, source_id=index)
            index += 1

    def close(self) -> None:
        """Release the parsed document."""
        self._svg = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def _is_hidden(element: Shape) -> bool:
    values = element.values
    return (
        values.get("visibility") in ("hidden", "collapse")
        or values.get("display") == "none"
    )
