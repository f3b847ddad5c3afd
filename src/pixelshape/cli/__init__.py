"""Command-line interface for pixelshape.

This module provides the CLI using Typer with rich output.

Key features:
- Renders one shape to native and magnified PNG previews
- Optional grid overlay on the magnified preview
- Terminal rendition of the native grid
"""

from pixelshape.cli.app import cli, main

__all__ = ["cli", "main"]
