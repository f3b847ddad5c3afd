"""Exception hierarchy for Pixelshape."""


class PixelShapeError(Exception):
    """Base exception for all Pixelshape errors."""

    pass


class ShapeRequestError(PixelShapeError, ValueError):
    """Invalid shape request arguments."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid shape {field}={value!r}: {reason}")


class ParameterError(PixelShapeError):
    """Preview parameter unknown or outside its bounds."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Parameter '{name}': {reason}")


class OutputError(PixelShapeError):
    """Errors related to writing preview output."""

    pass


class PreviewSaveError(OutputError):
    """Error saving a preview image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save preview '{path}': {reason}")
