"""Symmetric compositing of quadrant classifications into pixel buffers.

The compositor expands a top-left quadrant classification into the full
shape by mirroring each cell horizontally and vertically within the
shape's bounding box, then additively blends a fixed color for each cell
into the native and magnified buffers.

Blending is additive, so a pixel written twice comes out brighter than
its neighbours.
"""

from pixelshape.config.settings import SCALE
from pixelshape.domain import BoundingBox, Color, Point, PointClassification, RasterBuffer

STROKE_COLOR: Color = (0, 128, 255)
FILL_COLOR: Color = (255, 127, 0)


def mirror_positions(xo: int, yo: int, box: BoundingBox) -> list[tuple[int, int]]:
    """Absolute positions of a quadrant cell and its distinct mirror images.

    Mirror images that coincide with the original cell, which happens on
    the centre row or column of odd-sized boxes, are listed only once.

    Args:
        xo: Quadrant-local column
        yo: Quadrant-local row
        box: Full bounding box of the shape

    Returns:
        One to four (x, y) positions on the native grid

    Examples:
        >>> mirror_positions(0, 0, BoundingBox(5, 5, 1, 1))
        [(5, 5)]
        >>> mirror_positions(0, 0, BoundingBox(0, 0, 4, 2))
        [(0, 0), (3, 0), (0, 1), (3, 1)]
    """
    xi, yi = box.mirror(xo, yo)
    xi += box.x
    yi += box.y
    xo += box.x
    yo += box.y

    positions = [(xo, yo)]
    if xi != xo:
        positions.append((xi, yo))
        if yi != yo:
            positions.append((xo, yi))
            positions.append((xi, yi))
    elif yi != yo:
        positions.append((xo, yi))
    return positions


class SymmetricCompositor:
    """Writes full shapes into a native and a magnified buffer.

    The compositor owns both buffers. Every call to composite() clears them
    and rewrites them completely, so nothing carries over between shapes.

    Example:
        compositor = SymmetricCompositor()
        native, magnified = compositor.composite(quadrant, request.bounding_box)
    """

    def __init__(
        self,
        native: RasterBuffer | None = None,
        magnified: RasterBuffer | None = None,
    ) -> None:
        """Initialize the compositor.

        Args:
            native: Native resolution buffer (created if None)
            magnified: Magnified buffer (created if None)
        """
        self.native = native if native is not None else RasterBuffer.native()
        self.magnified = magnified if magnified is not None else RasterBuffer.magnified()
        self.clipped_writes = 0

    def composite(
        self, classification: PointClassification, box: BoundingBox
    ) -> tuple[RasterBuffer, RasterBuffer]:
        """Clear both buffers and draw a shape from its quadrant cells.

        Args:
            classification: Stroke and fill cells of the top-left quadrant
            box: Full bounding box of the shape

        Returns:
            Tuple of (native, magnified) buffers
        """
        self.native.clear()
        self.magnified.clear()
        self.clipped_writes = 0

        for point in sorted(classification.stroke):
            self._color_symmetric(point, box, STROKE_COLOR)
        for point in sorted(classification.fill):
            self._color_symmetric(point, box, FILL_COLOR)

        return self.native, self.magnified

    def _color_symmetric(self, point: Point, box: BoundingBox, color: Color) -> None:
        for x, y in mirror_positions(point.x, point.y, box):
            self._color(x, y, color)

    def _color(self, x: int, y: int, color: Color) -> None:
        """Color one native cell and its block in the magnified buffer."""
        if not self.native.add_color(x, y, color):
            self.clipped_writes += 1
            return
        self.magnified.add_block(x * SCALE, y * SCALE, SCALE, color)


def composite(
    classification: PointClassification, box: BoundingBox
) -> tuple[RasterBuffer, RasterBuffer]:
    """Draw a shape into a fresh pair of buffers.

    Args:
        classification: Stroke and fill cells of the top-left quadrant
        box: Full bounding box of the shape

    Returns:
        Tuple of (native, magnified) buffers
    """
    return SymmetricCompositor().composite(classification, box)
