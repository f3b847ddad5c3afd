"""Static cell grid drawn over the magnified preview.

The overlay marks the boundary between magnified cells with dotted
lines of alternating white and black pixels at half opacity. It does not
depend on any shape parameter and is rendered once.
"""

from pixelshape.config.settings import S_SIZE, SCALE
from pixelshape.domain import RGBA, RasterBuffer

GRID_ALPHA = 127


def grid_line_pixel(index: int) -> RGBA:
    """Color of the pixel at a given position along a grid line.

    Even positions are white, odd positions black.
    """
    c = 255 * (1 - (index % 2))
    return (c, c, c, GRID_ALPHA)


def render_grid_overlay() -> RasterBuffer:
    """Render the grid overlay at magnified resolution.

    Lines run along the last pixel row and column of every cell. Vertical
    lines are drawn after horizontal ones and win at intersections.

    Returns:
        Magnified-size buffer holding only the grid lines
    """
    overlay = RasterBuffer(S_SIZE, S_SIZE)

    for y in range(SCALE - 1, S_SIZE, SCALE):
        for x in range(S_SIZE):
            overlay.set_pixel(x, y, grid_line_pixel(x))

    for x in range(SCALE - 1, S_SIZE, SCALE):
        for y in range(S_SIZE):
            overlay.set_pixel(x, y, grid_line_pixel(y))

    return overlay
