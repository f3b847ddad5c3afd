"""Quadrant sampling of rounded rectangles.

A rounded rectangle quadrant is split into three disjoint regions:
- The corner, sampled as an ellipse of twice the corner radius
- The side strip below the corner, down to the quadrant bottom
- The top strip right of the corner, up to the quadrant's right edge
Sharp rectangles (radius 0 or 1) are classified directly.
"""

import math

from pixelshape.core.ellipse import sample_ellipse
from pixelshape.core.geometry import quadrant_extent, within_thickness
from pixelshape.domain import PointClassification


def sample_rectangle(
    width: int,
    height: int,
    corner_radius: int,
    thickness: int,
    x: int = 0,
    y: int = 0,
) -> PointClassification:
    """Classify the top-left quadrant of a rounded rectangle.

    Args:
        width: Bounding box width in cells
        height: Bounding box height in cells
        corner_radius: Corner radius in cells
        thickness: Stroke width in cells, 0 for fill only
        x: Bounding box left column on the native grid (clamps sampling)
        y: Bounding box top row on the native grid (clamps sampling)

    Returns:
        Stroke and fill cells of the quadrant

    Examples:
        >>> quadrant = sample_rectangle(20, 20, 0, 2)
        >>> (0, 0) in quadrant.stroke_pairs()
        False
    """
    max_x = quadrant_extent(width, x)
    max_y = quadrant_extent(height, y)

    if corner_radius <= 1:
        return _sample_sharp(max_x, max_y, corner_radius, thickness)

    result = sample_ellipse(min(2 * corner_radius, width), min(2 * corner_radius, height), thickness)

    w_corner = math.ceil(min(corner_radius, width / 2))
    h_corner = math.ceil(min(corner_radius, height / 2))

    for yi in range(h_corner, max_y):
        for xi in range(max_x):
            if within_thickness(xi, yi, thickness):
                result.add_stroke(xi, yi)
            else:
                result.add_fill(xi, yi)

    for xi in range(w_corner, max_x):
        for yi in range(h_corner):
            if yi < thickness:
                result.add_stroke(xi, yi)
            else:
                result.add_fill(xi, yi)

    return result


def _sample_sharp(
    max_x: int, max_y: int, corner_radius: int, thickness: int
) -> PointClassification:
    result = PointClassification()
    for yi in range(max_y):
        for xi in range(max_x):
            if within_thickness(xi, yi, thickness):
                # The outermost corner cell is left empty for square corners
                if corner_radius == 0 and xi == 0 and yi == 0:
                    continue
                result.add_stroke(xi, yi)
            else:
                result.add_fill(xi, yi)
    return result
