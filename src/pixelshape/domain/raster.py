"""RGBA pixel buffers written by the compositor.

A RasterBuffer is a fixed-size, row-major grid of RGBA bytes. The preview
uses two of them: the native grid (O_SIZE x O_SIZE) and the magnified
grid, where every native cell covers a SCALE x SCALE block.
"""

from collections.abc import Iterator

from pixelshape.config.settings import O_SIZE, S_SIZE

Color = tuple[int, int, int]
RGBA = tuple[int, int, int, int]

CHANNELS = 4
OPAQUE = 255


class RasterBuffer:
    """Row-major RGBA byte grid.

    Color writes are additive: each channel is summed into the existing
    value and saturates at 255, so overlapping writes show up as brighter
    pixels. Alpha is forced to fully opaque on every additive write.

    Example:
        buffer = RasterBuffer.native()
        buffer.add_color(3, 4, (0, 128, 255))
        assert buffer.get_pixel(3, 4) == (0, 128, 255, 255)
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a cleared (fully transparent) buffer.

        Args:
            width: Width in pixels
            height: Height in pixels
        """
        self.width = width
        self.height = height
        self.data = bytearray(width * height * CHANNELS)

    @classmethod
    def native(cls) -> "RasterBuffer":
        """Create a buffer at native grid resolution."""
        return cls(O_SIZE, O_SIZE)

    @classmethod
    def magnified(cls) -> "RasterBuffer":
        """Create a buffer at magnified resolution."""
        return cls(S_SIZE, S_SIZE)

    @property
    def size(self) -> tuple[int, int]:
        """Get (width, height) in pixels."""
        return (self.width, self.height)

    def _index(self, x: int, y: int) -> int:
        return (x + y * self.width) * CHANNELS

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if a pixel lies inside the buffer."""
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self) -> None:
        """Reset every pixel to transparent black."""
        self.data[:] = bytes(len(self.data))

    def get_pixel(self, x: int, y: int) -> RGBA:
        """Get the RGBA value of a pixel.

        Raises:
            IndexError: If the pixel lies outside the buffer
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        i = self._index(x, y)
        r, g, b, a = self.data[i : i + CHANNELS]
        return (r, g, b, a)

    def set_pixel(self, x: int, y: int, rgba: RGBA) -> None:
        """Overwrite a pixel. Out-of-bounds writes are ignored."""
        if not self.in_bounds(x, y):
            return
        i = self._index(x, y)
        self.data[i : i + CHANNELS] = bytes(rgba)

    def add_color(self, x: int, y: int, color: Color) -> bool:
        """Additively blend a color into one pixel.

        Args:
            x: Column
            y: Row
            color: RGB values to add

        Returns:
            True if the pixel was written, False if it was clipped
        """
        if not self.in_bounds(x, y):
            return False
        i = self._index(x, y)
        data = self.data
        data[i] = min(255, data[i] + color[0])
        data[i + 1] = min(255, data[i + 1] + color[1])
        data[i + 2] = min(255, data[i + 2] + color[2])
        data[i + 3] = OPAQUE
        return True

    def add_block(self, x: int, y: int, size: int, color: Color) -> None:
        """Additively blend a color into a size x size block.

        Args:
            x: Left column of the block
            y: Top row of the block
            size: Side length of the block
            color: RGB values to add
        """
        for yi in range(y, y + size):
            for xi in range(x, x + size):
                self.add_color(xi, yi, color)

    def is_opaque(self, x: int, y: int) -> bool:
        """Check if a pixel has been written."""
        return self.get_pixel(x, y)[3] == OPAQUE

    def opaque_pixels(self) -> Iterator[tuple[int, int]]:
        """Iterate (x, y) of every written pixel in row-major order."""
        data = self.data
        for y in range(self.height):
            for x in range(self.width):
                if data[self._index(x, y) + 3] == OPAQUE:
                    yield (x, y)

    def to_bytes(self) -> bytes:
        """Get an immutable copy of the raw RGBA data."""
        return bytes(self.data)
