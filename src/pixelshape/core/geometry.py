"""Shared arithmetic for the quadrant samplers.

All functions are pure and stateless.
"""

import math

from pixelshape.config.settings import O_SIZE


def half_extent(size: float) -> int:
    """Number of cells in the top-left half of a dimension.

    Counts the integers i >= 0 with i < size / 2, so odd sizes include the
    shared centre cell.

    Examples:
        >>> half_extent(20)
        10
        >>> half_extent(5)
        3
    """
    return max(0, math.ceil(size / 2))


def quadrant_extent(size: float, origin: int) -> int:
    """Number of cells sampled along one axis of a quadrant.

    The extent is half the bounding dimension, clamped so that sampling
    never runs past the right or bottom edge of the native grid.

    Args:
        size: Full bounding box dimension in cells
        origin: Bounding box origin on the native grid along the same axis

    Returns:
        Count of integer indices i >= 0 with i < min(size / 2, O_SIZE - origin)

    Examples:
        >>> quadrant_extent(20, 10)
        10
        >>> quadrant_extent(20, 45)
        5
    """
    return max(0, math.ceil(min(size / 2, O_SIZE - origin)))


def axis_ratio(offset_sq: float, axis_sq: float) -> float:
    """Evaluate one term (offset / axis)^2 of an implicit ellipse.

    A zero axis follows IEEE float division: a nonzero offset lies
    infinitely far out, a zero offset is undefined (NaN) and therefore
    compares false against any bound.

    Args:
        offset_sq: Squared offset from the ellipse centre
        axis_sq: Squared semi-axis length

    Returns:
        offset_sq / axis_sq
    """
    if axis_sq == 0:
        return math.inf if offset_sq else math.nan
    return offset_sq / axis_sq


def within_thickness(xi: int, yi: int, thickness: int) -> bool:
    """Check if a cell lies within thickness cells of the top or left edge."""
    return xi < thickness or yi < thickness
