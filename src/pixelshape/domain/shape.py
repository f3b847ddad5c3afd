"""Shape requests and bounding boxes.

A ShapeRequest is the complete, validated description of one shape to
preview. It is built fresh from the current parameters on every change
and never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pixelshape.exceptions import ShapeRequestError


class ShapeKind(str, Enum):
    """Supported shape kinds."""

    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    CIRCLE = "circle"


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Full bounding box of a shape on the native grid.

    Attributes:
        x: Left column
        y: Top row
        width: Width in cells
        height: Height in cells
    """

    x: int
    y: int
    width: int
    height: int

    def mirror(self, xo: int, yo: int) -> tuple[int, int]:
        """Mirror a box-local cell into the opposite quadrant.

        Args:
            xo: Box-local column in the top-left quadrant
            yo: Box-local row in the top-left quadrant

        Returns:
            Box-local (x, y) of the cell mirrored on both axes
        """
        return (self.width - xo - 1, self.height - yo - 1)


def _require_count(field: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ShapeRequestError(field, value, "must be an integer")
    if value < 0:
        raise ShapeRequestError(field, value, "must not be negative")


def _require_int(field: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ShapeRequestError(field, value, "must be an integer")


@dataclass(frozen=True, slots=True)
class ShapeRequest:
    """A single shape to rasterize.

    Attributes:
        kind: Shape kind
        x: Left column of the bounding box on the native grid
        y: Top row of the bounding box on the native grid
        width: Bounding box width in cells
        height: Bounding box height in cells (equals width for circles)
        corner_radius: Corner radius in cells, used by rectangles only
        thickness: Stroke width in cells, 0 draws the interior as fill only
    """

    kind: ShapeKind
    x: int
    y: int
    width: int
    height: int
    corner_radius: int = 0
    thickness: int = 1

    def __post_init__(self) -> None:
        try:
            kind = ShapeKind(self.kind)
        except ValueError:
            raise ShapeRequestError("kind", self.kind, "unknown shape kind") from None
        object.__setattr__(self, "kind", kind)

        _require_int("x", self.x)
        _require_int("y", self.y)
        _require_count("width", self.width)
        _require_count("height", self.height)
        _require_count("corner_radius", self.corner_radius)
        _require_count("thickness", self.thickness)

        if kind is ShapeKind.CIRCLE and self.height != self.width:
            raise ShapeRequestError(
                "height", self.height, "a circle's height must equal its width"
            )

    @classmethod
    def rectangle(
        cls, x: int, y: int, width: int, height: int, corner_radius: int, thickness: int
    ) -> "ShapeRequest":
        """Create a rounded rectangle request."""
        return cls(ShapeKind.RECTANGLE, x, y, width, height, corner_radius, thickness)

    @classmethod
    def ellipse(cls, x: int, y: int, width: int, height: int, thickness: int) -> "ShapeRequest":
        """Create an ellipse request."""
        return cls(ShapeKind.ELLIPSE, x, y, width, height, 0, thickness)

    @classmethod
    def circle(cls, x: int, y: int, side: int, thickness: int) -> "ShapeRequest":
        """Create a circle request with a square bounding box of the given side."""
        return cls(ShapeKind.CIRCLE, x, y, side, side, 0, thickness)

    @property
    def bounding_box(self) -> BoundingBox:
        """Get the full bounding box of the shape."""
        return BoundingBox(self.x, self.y, self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with kind and all integer parameters
        """
        return {
            "kind": self.kind.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "corner_radius": self.corner_radius,
            "thickness": self.thickness,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeRequest":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a request

        Returns:
            ShapeRequest instance
        """
        return cls(
            kind=ShapeKind(data["kind"]),
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
            corner_radius=data.get("corner_radius", 0),
            thickness=data.get("thickness", 1),
        )
