"""Domain models for pixelshape.

This module contains the core domain models representing shape requests,
classified grid cells and pixel buffers. Models are:

- Immutable where possible (using frozen dataclasses)
- Independent of any imaging library

Key classes:
- Point: An integer grid cell
- PointClassification: Disjoint stroke and fill cell sets of one quadrant
- ShapeKind: Rectangle, ellipse or circle
- ShapeRequest: A validated shape to rasterize
- BoundingBox: Full bounding box of a shape
- RasterBuffer: Row-major RGBA pixel grid with additive writes
"""

from pixelshape.domain.points import Point, PointClassification
from pixelshape.domain.raster import RGBA, Color, RasterBuffer
from pixelshape.domain.shape import BoundingBox, ShapeKind, ShapeRequest

__all__: list[str] = [
    # Enums
    "ShapeKind",
    # Core types
    "Point",
    "PointClassification",
    "BoundingBox",
    "ShapeRequest",
    "RasterBuffer",
    # Aliases
    "Color",
    "RGBA",
]
