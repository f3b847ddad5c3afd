"""Tests for the interactive preview session."""

from unittest.mock import MagicMock

import pytest

from pixelshape.config import ParameterDefaults, PreviewSettings
from pixelshape.core.session import PreviewSession
from pixelshape.domain import ShapeKind, ShapeRequest
from pixelshape.exceptions import ParameterError


@pytest.fixture
def session() -> PreviewSession:
    """Create a rectangle session with default parameters."""
    return PreviewSession()


class TestSnapshot:
    """Tests for building requests from the current parameters."""

    def test_default_rectangle(self, session: PreviewSession) -> None:
        """Test the request built from default values."""
        assert session.snapshot() == ShapeRequest.rectangle(10, 10, 20, 20, 5, 2)

    def test_ellipse(self) -> None:
        """Test that ellipses drop the corner radius."""
        session = PreviewSession(kind=ShapeKind.ELLIPSE)
        assert session.snapshot() == ShapeRequest.ellipse(10, 10, 20, 20, 2)

    def test_circle_uses_width_for_height(self) -> None:
        """Test that a circle's height follows its width."""
        settings = PreviewSettings(defaults=ParameterDefaults(width=12, height=30))
        session = PreviewSession(settings=settings, kind=ShapeKind.CIRCLE)
        request = session.snapshot()
        assert request.width == request.height == 12


class TestEnabledParameters:
    """Tests for shape-dependent parameters."""

    def test_rectangle_enables_everything(self, session: PreviewSession) -> None:
        """Test that rectangles use all parameters."""
        for name in ("x", "y", "width", "height", "radius", "thickness"):
            assert session.is_enabled(name)

    def test_ellipse_disables_radius(self) -> None:
        """Test that ellipses ignore the radius."""
        session = PreviewSession(kind=ShapeKind.ELLIPSE)
        assert not session.is_enabled("radius")
        assert session.is_enabled("height")

    def test_circle_disables_radius_and_height(self) -> None:
        """Test that circles ignore radius and height."""
        session = PreviewSession(kind=ShapeKind.CIRCLE)
        assert not session.is_enabled("radius")
        assert not session.is_enabled("height")

    def test_unknown_parameter(self, session: PreviewSession) -> None:
        """Test that unknown names are rejected."""
        with pytest.raises(ParameterError, match="unknown"):
            session.is_enabled("depth")


class TestChanges:
    """Tests for parameter changes and redraws."""

    def test_set_notifies_listener(self, session: PreviewSession) -> None:
        """Test that a change redraws and notifies listeners."""
        listener = MagicMock()
        session.add_listener(listener)

        native, magnified = session.set("thickness", 3)

        listener.assert_called_once()
        request, got_native, got_magnified = listener.call_args.args
        assert request.thickness == 3
        assert got_native is native
        assert got_magnified is magnified

    def test_remove_listener(self, session: PreviewSession) -> None:
        """Test that removed listeners are no longer called."""
        listener = MagicMock()
        session.add_listener(listener)
        session.remove_listener(listener)
        session.set("x", 0)
        listener.assert_not_called()

    def test_last_write_wins(self, session: PreviewSession) -> None:
        """Test that each change redraws with the latest values."""
        session.set("width", 30)
        session.set("width", 8)
        assert session.last_request is not None
        assert session.last_request.width == 8
        assert session.get("width") == 8

    def test_out_of_bounds_rejected(self, session: PreviewSession) -> None:
        """Test that values outside the bounds are rejected."""
        with pytest.raises(ParameterError, match="outside"):
            session.set("width", 51)
        with pytest.raises(ParameterError):
            session.set("thickness", -1)

    def test_non_integer_rejected(self, session: PreviewSession) -> None:
        """Test that non-integer values are rejected."""
        with pytest.raises(ParameterError, match="integer"):
            session.set("x", 2.5)  # type: ignore[arg-type]

    def test_disabled_parameter_rejected(self) -> None:
        """Test that a disabled parameter cannot be set."""
        session = PreviewSession(kind=ShapeKind.CIRCLE)
        with pytest.raises(ParameterError, match="circle"):
            session.set("height", 5)

    def test_update_is_atomic(self, session: PreviewSession) -> None:
        """Test that a rejected update changes nothing."""
        listener = MagicMock()
        session.add_listener(listener)
        with pytest.raises(ParameterError):
            session.update(width=30, thickness=99)
        assert session.get("width") == 20
        listener.assert_not_called()

    def test_update_redraws_once(self, session: PreviewSession) -> None:
        """Test that several values are applied in a single redraw."""
        listener = MagicMock()
        session.add_listener(listener)
        session.update(x=0, y=0, width=50, height=50)
        listener.assert_called_once()
        assert listener.call_args.args[0].width == 50

    def test_set_shape(self, session: PreviewSession) -> None:
        """Test switching the shape kind."""
        session.set_shape("ellipse")
        assert session.kind is ShapeKind.ELLIPSE
        assert session.last_request is not None
        assert session.last_request.kind is ShapeKind.ELLIPSE

    def test_set_unknown_shape(self, session: PreviewSession) -> None:
        """Test that unknown shapes are rejected."""
        with pytest.raises(ParameterError, match="triangle"):
            session.set_shape("triangle")

    def test_values_is_a_copy(self, session: PreviewSession) -> None:
        """Test that the values mapping cannot modify the session."""
        values = session.values
        values["x"] = 40
        assert session.get("x") == 10


class TestStepping:
    """Tests for increment and decrement."""

    def test_increment(self, session: PreviewSession) -> None:
        """Test stepping a parameter up."""
        assert session.increment("thickness")
        assert session.get("thickness") == 3

    def test_decrement(self, session: PreviewSession) -> None:
        """Test stepping a parameter down."""
        assert session.decrement("radius")
        assert session.get("radius") == 4

    def test_increment_at_maximum(self, session: PreviewSession) -> None:
        """Test that stepping past the maximum is a no-op."""
        session.set("width", 50)
        listener = MagicMock()
        session.add_listener(listener)
        assert not session.increment("width")
        assert session.get("width") == 50
        listener.assert_not_called()

    def test_decrement_at_minimum(self, session: PreviewSession) -> None:
        """Test that stepping below the minimum is a no-op."""
        session.set("x", 0)
        assert not session.decrement("x")
        assert session.get("x") == 0

    def test_disabled_parameter_not_stepped(self) -> None:
        """Test that disabled parameters ignore stepping."""
        session = PreviewSession(kind=ShapeKind.ELLIPSE)
        assert not session.increment("radius")
        assert session.get("radius") == 5


class TestConstruction:
    """Tests for session construction."""

    def test_defaults_outside_bounds_rejected(self) -> None:
        """Test that defaults must lie within the bounds."""
        settings = PreviewSettings(defaults=ParameterDefaults(x=60))
        with pytest.raises(ParameterError):
            PreviewSession(settings=settings)

    def test_no_draw_until_change(self, session: PreviewSession) -> None:
        """Test that construction does not draw."""
        assert session.last_request is None
        assert session.drawer.render_logger.stats.draw_count == 0
