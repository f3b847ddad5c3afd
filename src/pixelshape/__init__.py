"""Pixelshape - Preview how shapes rasterize onto a small pixel grid.

Pixelshape renders rounded rectangles, ellipses and circles onto a 50x50
grid, both at native resolution and magnified ten times, to help design
pixel-art shapes. Each pixel is classified as stroke, fill or empty.

Example:
    $ pixelshape circle --x 10 --y 10 --width 20 --thickness 3

This will create shape-native.png and shape-magnified.png in the current
directory.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
