"""Tests for shape dispatch."""

import logging
from unittest.mock import MagicMock

import pytest

from pixelshape.core.compositor import SymmetricCompositor
from pixelshape.core.drawer import ShapeDrawer
from pixelshape.core.ellipse import sample_ellipse
from pixelshape.core.rectangle import sample_rectangle
from pixelshape.domain import BoundingBox, ShapeRequest
from pixelshape.utils import RenderLogger


@pytest.fixture
def drawer() -> ShapeDrawer:
    """Create a drawer with its own compositor."""
    return ShapeDrawer()


class TestClassify:
    """Tests for ShapeDrawer.classify."""

    def test_rectangle_uses_rectangle_sampler(self, drawer: ShapeDrawer) -> None:
        """Test rectangle dispatch."""
        request = ShapeRequest.rectangle(5, 5, 20, 14, 4, 2)
        assert drawer.classify(request) == sample_rectangle(20, 14, 4, 2, x=5, y=5)

    def test_ellipse_uses_ellipse_sampler(self, drawer: ShapeDrawer) -> None:
        """Test ellipse dispatch."""
        request = ShapeRequest.ellipse(5, 5, 20, 14, 2)
        assert drawer.classify(request) == sample_ellipse(20, 14, 2, x=5, y=5)

    def test_circle_uses_side_length(self, drawer: ShapeDrawer) -> None:
        """Test circle dispatch with a square box."""
        request = ShapeRequest.circle(10, 10, 20, 3)
        assert drawer.classify(request) == sample_ellipse(20, 20, 3, x=10, y=10)

    def test_ellipse_ignores_corner_radius(self, drawer: ShapeDrawer) -> None:
        """Test that the radius has no effect outside rectangles."""
        plain = ShapeRequest.ellipse(0, 0, 12, 12, 1)
        radius = ShapeRequest("ellipse", 0, 0, 12, 12, corner_radius=5, thickness=1)  # type: ignore[arg-type]
        assert drawer.classify(plain) == drawer.classify(radius)


class TestDraw:
    """Tests for ShapeDrawer.draw."""

    def test_draw_returns_compositor_buffers(self) -> None:
        """Test that drawing writes the compositor's buffers."""
        compositor = SymmetricCompositor()
        drawer = ShapeDrawer(compositor=compositor)
        native, magnified = drawer.draw(ShapeRequest.rectangle(0, 0, 10, 10, 0, 1))
        assert native is compositor.native
        assert magnified is compositor.magnified
        assert native.is_opaque(1, 0)

    def test_draw_passes_bounding_box(self) -> None:
        """Test that the compositor receives the request's box."""
        compositor = MagicMock(spec=SymmetricCompositor)
        compositor.composite.return_value = (MagicMock(), MagicMock())
        compositor.clipped_writes = 0
        drawer = ShapeDrawer(compositor=compositor)

        drawer.draw(ShapeRequest.ellipse(3, 4, 10, 8, 1))

        _, box = compositor.composite.call_args.args
        assert box == BoundingBox(3, 4, 10, 8)

    def test_draw_updates_stats(self) -> None:
        """Test that each draw is counted."""
        render_logger = RenderLogger(MagicMock())
        drawer = ShapeDrawer(render_logger=render_logger)

        drawer.draw(ShapeRequest.circle(10, 10, 20, 3))
        drawer.draw(ShapeRequest.circle(45, 45, 20, 3))

        stats = render_logger.stats
        assert stats.draw_count == 2
        assert stats.stroke_points > 0
        assert stats.fill_points > 0
        assert stats.clipped_writes > 0
        assert stats.last_time_ms is not None

    def test_draw_logs_debug(self) -> None:
        """Test that a draw is logged with its kind."""
        logger = MagicMock()
        drawer = ShapeDrawer(render_logger=RenderLogger(logger))
        drawer.draw(ShapeRequest.ellipse(0, 0, 6, 6, 1))
        logger.debug.assert_called_once()
        assert logger.debug.call_args.kwargs["kind"] == "ellipse"
        assert logger.debug.call_args.kwargs["stroke"] == 4
        assert logger.debug.call_args.kwargs["fill"] == 4

    def test_zero_size_draws_nothing(self, drawer: ShapeDrawer) -> None:
        """Test that an empty shape leaves both buffers clear."""
        native, magnified = drawer.draw(ShapeRequest.circle(10, 10, 0, 2))
        assert list(native.opaque_pixels()) == []
        assert not any(magnified.data)


class TestDefaultLogger:
    """Tests for drawing without configured logging."""

    def test_draw_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that library use stays silent on stdout and stderr."""
        drawer = ShapeDrawer()
        drawer.draw(ShapeRequest.circle(10, 10, 20, 3))
        drawer.draw(ShapeRequest.rectangle(0, 0, 10, 10, 2, 1))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_draw_reaches_stdlib_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that debug records go to the "pixelshape" stdlib logger."""
        caplog.set_level(logging.DEBUG, logger="pixelshape")
        ShapeDrawer().draw(ShapeRequest.ellipse(0, 0, 6, 6, 1))
        messages = [r.getMessage() for r in caplog.records if r.name == "pixelshape"]
        assert any("Shape drawn" in m for m in messages)
