"""Command-line interface for plotpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- generate: SVG to svgcom, with optional autocut and polish
- render: svgcom to a stroked SVG preview
- Quiet mode and structured log files
- Detailed error reporting
"""

from plotpath.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
