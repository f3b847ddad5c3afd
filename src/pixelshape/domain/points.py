"""Grid points and their stroke/fill classification.

This module defines the two types produced by the quadrant samplers:
- Point: An integer grid cell, relative to the quadrant origin
- PointClassification: Disjoint stroke and fill cell sets
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A grid cell in quadrant-local coordinates.

    Immutable and hashable for use in sets.

    Attributes:
        x: Column index
        y: Row index
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass
class PointClassification:
    """Stroke and fill cells of one quadrant.

    A cell appears in at most one of the two sets. Cells in neither set
    are empty (background).

    Attributes:
        stroke: Cells belonging to the shape's outline
        fill: Cells belonging to the shape's interior
    """

    stroke: set[Point] = field(default_factory=set)
    fill: set[Point] = field(default_factory=set)

    @classmethod
    def from_pairs(
        cls,
        stroke: Iterable[tuple[int, int]] = (),
        fill: Iterable[tuple[int, int]] = (),
    ) -> "PointClassification":
        """Build a classification from (x, y) pairs.

        Args:
            stroke: Stroke cell coordinates
            fill: Fill cell coordinates

        Returns:
            PointClassification instance
        """
        return cls(
            stroke={Point(x, y) for x, y in stroke},
            fill={Point(x, y) for x, y in fill},
        )

    def add_stroke(self, x: int, y: int) -> None:
        """Classify a cell as stroke."""
        self.stroke.add(Point(x, y))

    def add_fill(self, x: int, y: int) -> None:
        """Classify a cell as fill."""
        self.fill.add(Point(x, y))

    def update(self, other: "PointClassification") -> None:
        """Merge another classification into this one."""
        self.stroke |= other.stroke
        self.fill |= other.fill

    def is_empty(self) -> bool:
        """Check if no cell is classified."""
        return not self.stroke and not self.fill

    def is_disjoint(self) -> bool:
        """Check that no cell is classified as both stroke and fill."""
        return self.stroke.isdisjoint(self.fill)

    def __iter__(self) -> Iterator[Point]:
        yield from self.stroke
        yield from self.fill

    def __len__(self) -> int:
        return len(self.stroke) + len(self.fill)

    def stroke_pairs(self) -> set[tuple[int, int]]:
        """Get stroke cells as (x, y) tuples."""
        return {p.to_tuple() for p in self.stroke}

    def fill_pairs(self) -> set[tuple[int, int]]:
        """Get fill cells as (x, y) tuples."""
        return {p.to_tuple() for p in self.fill}
