"""Unit tests for the command line interface."""

from pathlib import Path

from PIL import Image
from typer.testing import CliRunner

from pixelshape import __version__
from pixelshape.cli import output
from pixelshape.cli.app import app
from pixelshape.domain import ShapeRequest

runner = CliRunner()


class TestPreviewCommand:
    """Tests for the preview command."""

    def test_circle_writes_previews(self, tmp_path: Path) -> None:
        """Test that a circle is rendered into both images."""
        result = runner.invoke(app, ["circle", "-w", "20", "-t", "3", "-o", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        with Image.open(tmp_path / "shape-native.png") as image:
            assert image.size == (50, 50)
            assert image.getpixel((10, 19)) == (0, 128, 255, 255)
        assert (tmp_path / "shape-magnified.png").exists()

    def test_custom_stem(self, tmp_path: Path) -> None:
        """Test that the stem names the output files."""
        result = runner.invoke(
            app, ["rectangle", "--stem", "box", "-o", str(tmp_path), "--quiet"]
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "box-native.png").exists()
        assert (tmp_path / "box-magnified.png").exists()

    def test_shape_is_case_insensitive(self, tmp_path: Path) -> None:
        """Test that the shape argument ignores case."""
        result = runner.invoke(app, ["Ellipse", "-o", str(tmp_path), "-q"])
        assert result.exit_code == 0, result.output

    def test_invalid_shape(self, tmp_path: Path) -> None:
        """Test that an unknown shape fails without writing files."""
        result = runner.invoke(app, ["triangle", "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "Invalid shape" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_show_without_saving(self, tmp_path: Path) -> None:
        """Test printing the grid without writing any image."""
        result = runner.invoke(app, ["ellipse", "--show", "--no-save", "-o", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "stroke" in result.output
        assert "Drawn" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_show_conflicts_with_quiet(self) -> None:
        """Test that --show and --quiet cannot be combined."""
        result = runner.invoke(app, ["circle", "--show", "--quiet", "--no-save"])
        assert result.exit_code == 1

    def test_out_of_range_option(self, tmp_path: Path) -> None:
        """Test that option bounds are enforced by the parser."""
        result = runner.invoke(app, ["rectangle", "--width", "60", "-o", str(tmp_path)])
        assert result.exit_code == 2
        assert list(tmp_path.iterdir()) == []

    def test_unwritable_output(self, tmp_path: Path) -> None:
        """Test that a save failure exits with an error."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        result = runner.invoke(app, ["circle", "-o", str(blocker)])
        assert result.exit_code == 1
        assert "Could not save preview" in result.output

    def test_version(self) -> None:
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_empty_stem(self, tmp_path: Path) -> None:
        """Test that an empty stem is reported instead of crashing."""
        result = runner.invoke(app, ["circle", "--stem", "", "-o", str(tmp_path), "-q"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Invalid settings" in result.output
        assert "stem" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_unknown_log_level(self, tmp_path: Path) -> None:
        """Test that an unknown log level is reported instead of crashing."""
        result = runner.invoke(app, ["circle", "--log-level", "LOUD", "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Invalid settings" in result.output
        assert "log_level" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_log_level_is_case_insensitive(self, tmp_path: Path) -> None:
        """Test that log levels may be given in lower case."""
        result = runner.invoke(
            app, ["circle", "--log-level", "error", "--no-save", "-o", str(tmp_path)]
        )
        assert result.exit_code == 0, result.output


class TestRequestInfo:
    """Tests for the request summary printed before drawing."""

    def test_rectangle_shows_radius(self) -> None:
        """Test that rectangles list their corner radius."""
        with output.console.capture() as capture:
            output.print_request_info(ShapeRequest.rectangle(1, 2, 30, 20, 6, 2))
        text = capture.get()
        assert "rectangle" in text
        assert "radius 6" in text

    def test_ellipse_omits_radius(self) -> None:
        """Test that other shapes do not mention a radius."""
        with output.console.capture() as capture:
            output.print_request_info(ShapeRequest.ellipse(1, 2, 30, 20, 2))
        text = capture.get()
        assert "thickness 2" in text
        assert "radius" not in text
