"""Image output layer for pixelshape.

This module writes the preview buffers to disk using Pillow. It keeps
the imaging library out of the domain and core layers.

Key classes:
- PreviewWriter: Save native and magnified previews as PNG
"""

from pixelshape.io.writer import PreviewWriter, buffer_to_image

__all__ = [
    "PreviewWriter",
    "buffer_to_image",
]
