"""Interactive preview state driven by parameter changes.

A PreviewSession holds the current shape kind and its six bounded integer
parameters. Every change immediately builds a fresh ShapeRequest, redraws
it and hands the buffers to the registered listeners. Redraws are
synchronous and never queued, so the latest change always wins.
"""

from collections.abc import Callable

from pixelshape.config import PARAMETER_NAMES, PreviewSettings, get_default_settings
from pixelshape.core.drawer import ShapeDrawer
from pixelshape.domain import RasterBuffer, ShapeKind, ShapeRequest
from pixelshape.exceptions import ParameterError

PreviewListener = Callable[[ShapeRequest, RasterBuffer, RasterBuffer], None]


class PreviewSession:
    """Bounded shape parameters with redraw-on-change.

    Example:
        session = PreviewSession(kind=ShapeKind.CIRCLE)
        session.add_listener(lambda request, native, magnified: show(native))
        session.set("thickness", 3)
        session.increment("width")
    """

    def __init__(
        self,
        settings: PreviewSettings | None = None,
        drawer: ShapeDrawer | None = None,
        kind: ShapeKind = ShapeKind.RECTANGLE,
    ) -> None:
        """Initialize the session with default parameter values.

        Args:
            settings: Parameter bounds and defaults (library defaults if None)
            drawer: Drawer used for redraws (created if None)
            kind: Initial shape kind

        Raises:
            ParameterError: If a default value lies outside its bounds
        """
        self.settings = settings if settings is not None else get_default_settings()
        self.drawer = drawer if drawer is not None else ShapeDrawer()
        self._kind = ShapeKind(kind)
        self._listeners: list[PreviewListener] = []
        self._values: dict[str, int] = {}
        self.last_request: ShapeRequest | None = None

        defaults = self.settings.defaults.model_dump()
        for name in PARAMETER_NAMES:
            self._check_value(name, defaults[name])
            self._values[name] = defaults[name]

    @property
    def kind(self) -> ShapeKind:
        """Get the current shape kind."""
        return self._kind

    @property
    def values(self) -> dict[str, int]:
        """Get a copy of the current parameter values."""
        return dict(self._values)

    def add_listener(self, listener: PreviewListener) -> None:
        """Register a callback receiving (request, native, magnified) after each redraw."""
        self._listeners.append(listener)

    def remove_listener(self, listener: PreviewListener) -> None:
        """Unregister a previously added callback."""
        self._listeners.remove(listener)

    def is_enabled(self, name: str) -> bool:
        """Check if a parameter applies to the current shape kind.

        The corner radius only applies to rectangles, and circles take
        their height from their width.
        """
        self._check_name(name)
        if name == "radius":
            return self._kind is ShapeKind.RECTANGLE
        if name == "height":
            return self._kind is not ShapeKind.CIRCLE
        return True

    def get(self, name: str) -> int:
        """Get the current value of a parameter."""
        self._check_name(name)
        return self._values[name]

    def set_shape(self, kind: ShapeKind | str) -> tuple[RasterBuffer, RasterBuffer]:
        """Switch the shape kind and redraw."""
        try:
            self._kind = ShapeKind(kind)
        except ValueError:
            raise ParameterError("shape", f"unknown shape kind {kind!r}") from None
        self.drawer.render_logger.log_parameter_change("shape", self._kind.value)
        return self.redraw()

    def set(self, name: str, value: int) -> tuple[RasterBuffer, RasterBuffer]:
        """Set one parameter and redraw.

        Raises:
            ParameterError: If the name is unknown, the parameter is disabled
                for the current shape, or the value is out of bounds
        """
        return self.update(**{name: value})

    def update(self, **values: int) -> tuple[RasterBuffer, RasterBuffer]:
        """Set several parameters at once and redraw a single time.

        All values are validated before any is applied.

        Raises:
            ParameterError: If any name or value is rejected
        """
        for name, value in values.items():
            if not self.is_enabled(name):
                raise ParameterError(name, f"not used by {self._kind.value}")
            self._check_value(name, value)

        for name, value in values.items():
            self._values[name] = value
            self.drawer.render_logger.log_parameter_change(name, value)
        return self.redraw()

    def increment(self, name: str) -> bool:
        """Raise a parameter by one.

        Returns:
            True if the value changed, False if it was disabled or at its maximum
        """
        return self._step(name, 1)

    def decrement(self, name: str) -> bool:
        """Lower a parameter by one.

        Returns:
            True if the value changed, False if it was disabled or at its minimum
        """
        return self._step(name, -1)

    def _step(self, name: str, delta: int) -> bool:
        if not self.is_enabled(name):
            return False
        value = self._values[name] + delta
        if not self.settings.bounds.get(name).contains(value):
            return False
        self.set(name, value)
        return True

    def snapshot(self) -> ShapeRequest:
        """Build a request from the current kind and parameter values."""
        v = self._values
        if self._kind is ShapeKind.RECTANGLE:
            return ShapeRequest.rectangle(
                v["x"], v["y"], v["width"], v["height"], v["radius"], v["thickness"]
            )
        if self._kind is ShapeKind.ELLIPSE:
            return ShapeRequest.ellipse(v["x"], v["y"], v["width"], v["height"], v["thickness"])
        return ShapeRequest.circle(v["x"], v["y"], v["width"], v["thickness"])

    def redraw(self) -> tuple[RasterBuffer, RasterBuffer]:
        """Draw the current parameters and notify every listener.

        Returns:
            Tuple of (native, magnified) buffers
        """
        request = self.snapshot()
        native, magnified = self.drawer.draw(request)
        self.last_request = request
        for listener in list(self._listeners):
            listener(request, native, magnified)
        return native, magnified

    def _check_name(self, name: str) -> None:
        if name not in PARAMETER_NAMES:
            raise ParameterError(name, "unknown parameter")

    def _check_value(self, name: str, value: int) -> None:
        self._check_name(name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParameterError(name, f"{value!r} is not an integer")
        bounds = self.settings.bounds.get(name)
        if not bounds.contains(value):
            raise ParameterError(name, f"{value} outside [{bounds.min}, {bounds.max}]")
