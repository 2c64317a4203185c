"""Document I/O layer for plotpath.

This module handles reading SVG documents using svgelements, the svgcom
plotter format, and rendering svgcom back to SVG. It provides a clean
abstraction layer between svgelements and the domain models.

Key responsibilities:
- Load SVG documents with transforms applied
- Convert svgelements shapes to draw command records
- Encode and decode svgcom text
- Render svgcom as a stroked SVG preview

Key classes:
- SvgReader: Load SVG documents and extract shape records
- SvgCom: In-memory svgcom document
- SvgWriter: Render svgcom to SVG
"""

from plotpath.io.converter import ShapeRecord
from plotpath.io.reader import SvgReader
from plotpath.io.svgcom import ImageSize, SvgCom
from plotpath.io.writer import SvgWriter, write_text

__all__ = [
    "ImageSize",
    "ShapeRecord",
    "SvgCom",
    "SvgReader",
    "SvgWriter",
    "write_text",
]
