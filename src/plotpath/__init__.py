"""plotpath - Convert SVG art into pen plotter commands.

plotpath is a CLI tool that reduces SVG drawings to move, line and cubic
curve commands (the svgcom format) that a pen plotter can follow. With
autocut enabled it also removes the parts of strokes that are hidden under
filled shapes drawn later, so the plotter only draws what is visible.

Example:
    $ plotpath generate tiger.svg tiger.svgcom --autocut
    $ plotpath render tiger.svgcom tiger-preview.svg --stroke red

The first command writes tiger.svgcom; the second renders it back as a
stroked SVG preview.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
