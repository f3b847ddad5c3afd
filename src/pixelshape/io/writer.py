"""Preview writer for saving raster buffers as images.

This module provides the PreviewWriter class, which turns the native and
magnified buffers into PNG files using Pillow.
"""

from pathlib import Path

from PIL import Image

from pixelshape.core.grid import render_grid_overlay
from pixelshape.domain import RasterBuffer
from pixelshape.exceptions import PreviewSaveError


def buffer_to_image(buffer: RasterBuffer) -> Image.Image:
    """Convert a raster buffer to an RGBA Pillow image.

    Args:
        buffer: Source buffer

    Returns:
        RGBA image of the same size
    """
    return Image.frombytes("RGBA", buffer.size, buffer.to_bytes())


class PreviewWriter:
    """Saves preview buffers with the {stem}-native/-magnified naming convention.

    Example:
        writer = PreviewWriter()
        native_path, magnified_path = writer.save(native, magnified, Path("out"))
    """

    def __init__(self) -> None:
        self._grid: Image.Image | None = None

    @staticmethod
    def get_output_paths(output_dir: Path, stem: str = "shape") -> tuple[Path, Path]:
        """Get the native and magnified image paths for a stem.

        Args:
            output_dir: Directory the images are written to
            stem: File name stem

        Returns:
            Tuple of (native_path, magnified_path)
        """
        return (
            output_dir / f"{stem}-native.png",
            output_dir / f"{stem}-magnified.png",
        )

    def grid_image(self) -> Image.Image:
        """Get the grid overlay image, rendering it on first use."""
        if self._grid is None:
            self._grid = buffer_to_image(render_grid_overlay())
        return self._grid

    def compose_magnified(self, magnified: RasterBuffer, grid: bool = True) -> Image.Image:
        """Build the magnified preview image.

        Args:
            magnified: Magnified buffer
            grid: Whether to draw the cell grid over the shape

        Returns:
            RGBA image
        """
        image = buffer_to_image(magnified)
        if grid:
            image = Image.alpha_composite(image, self.grid_image())
        return image

    def save(
        self,
        native: RasterBuffer,
        magnified: RasterBuffer,
        output_dir: Path,
        stem: str = "shape",
        grid: bool = True,
    ) -> tuple[Path, Path]:
        """Write both buffers as PNG files.

        Args:
            native: Native resolution buffer
            magnified: Magnified buffer
            output_dir: Directory to write into (created if missing)
            stem: File name stem
            grid: Whether to draw the cell grid over the magnified image

        Returns:
            Tuple of (native_path, magnified_path)

        Raises:
            PreviewSaveError: If a directory or file cannot be written
        """
        native_path, magnified_path = self.get_output_paths(output_dir, stem)

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PreviewSaveError(str(output_dir), str(e)) from e

        self._save_image(buffer_to_image(native), native_path)
        self._save_image(self.compose_magnified(magnified, grid=grid), magnified_path)
        return native_path, magnified_path

    @staticmethod
    def _save_image(image: Image.Image, path: Path) -> None:
        try:
            image.save(path, format="PNG")
        except OSError as e:
            raise PreviewSaveError(str(path), str(e)) from e
