"""Quadrant sampling of ellipses.

This module classifies the cells of an ellipse's top-left quadrant as
stroke or fill. The other three quadrants are mirror images and are
produced by the compositor.

Sizes are handled in order of increasing substance:
- Zero width or height: nothing is drawn
- Slivers (a side of at most 2 cells): one flat region
- Small shapes (a side of at most 4 cells): edge cells versus interior cells
- Everything else: implicit-curve sampling against three nested ellipses,
  followed by boundary reconciliation
"""

from pixelshape.core.geometry import axis_ratio, half_extent, quadrant_extent
from pixelshape.domain import Point, PointClassification


def sample_ellipse(
    width: int,
    height: int,
    thickness: int,
    x: int = 0,
    y: int = 0,
) -> PointClassification:
    """Classify the top-left quadrant of an ellipse.

    Args:
        width: Bounding box width in cells
        height: Bounding box height in cells
        thickness: Stroke width in cells, 0 for fill only
        x: Bounding box left column on the native grid (clamps sampling)
        y: Bounding box top row on the native grid (clamps sampling)

    Returns:
        Stroke and fill cells with x in [0, width/2) and y in [0, height/2)

    Examples:
        >>> sample_ellipse(2, 2, 1).stroke_pairs()
        {(0, 0)}
        >>> sample_ellipse(0, 10, 3).is_empty()
        True
    """
    if width == 0 or height == 0:
        return PointClassification()

    has_stroke = thickness > 0

    if width <= 2 or height <= 2:
        return _sample_sliver(width, height, has_stroke)

    has_fill = width / 2 > thickness and height / 2 > thickness

    if width <= 4 or height <= 4:
        return _sample_small(width, height, has_stroke, has_fill)

    return _sample_curve(width, height, thickness, x, y, has_stroke, has_fill)


def _sample_sliver(width: int, height: int, has_stroke: bool) -> PointClassification:
    cells = {
        Point(xi, yi)
        for xi in range(half_extent(width))
        for yi in range(half_extent(height))
    }
    if has_stroke:
        return PointClassification(stroke=cells)
    return PointClassification(fill=cells)


def _sample_small(
    width: int, height: int, has_stroke: bool, has_fill: bool
) -> PointClassification:
    outer: set[Point] = set()
    inner: set[Point] = set()

    for xi in range(half_extent(width)):
        for yi in range(half_extent(height)):
            on_x_edge = xi == 0 or xi == width - 1
            on_y_edge = yi == 0 or yi == height - 1

            # Corner cell: visually belongs to neither edge
            if on_x_edge and on_y_edge:
                continue
            if on_x_edge or on_y_edge:
                outer.add(Point(xi, yi))
            else:
                inner.add(Point(xi, yi))

    if has_stroke and has_fill:
        return PointClassification(stroke=outer, fill=inner)
    if has_stroke:
        return PointClassification(stroke=outer | inner)
    return PointClassification(fill=outer | inner)


def _sample_curve(
    width: int,
    height: int,
    thickness: int,
    x: int,
    y: int,
    has_stroke: bool,
    has_fill: bool,
) -> PointClassification:
    """Sample the quadrant against the fill and support ellipses.

    The fill ellipse bounds the interior. The outer and inner support
    ellipses bound the annulus whose cells seed the boundary reconciler.
    """
    # Without both roles a one-cell-wide reference curve is needed
    t = thickness if has_stroke and has_fill else 1

    cx = (width - 1) / 2
    cy = (height - 1) / 2

    af_2 = (cx + 1 - t) ** 2
    bf_2 = (cy + 1 - t) ** 2
    aso_2 = cx**2
    bso_2 = cy**2
    asi_2 = (cx - 2) ** 2
    bsi_2 = (cy - 2) ** 2

    cols = quadrant_extent(width, x)
    rows = quadrant_extent(height, y)

    seeds = [[False] * cols for _ in range(rows)]
    result = PointClassification()

    for yi in range(rows):
        y0_2 = (yi - cy) ** 2
        fy = axis_ratio(y0_2, bf_2)
        soy = axis_ratio(y0_2, bso_2)
        siy = axis_ratio(y0_2, bsi_2)

        for xi in range(cols):
            x0_2 = (xi - cx) ** 2

            is_fill = axis_ratio(x0_2, af_2) + fy < 1
            is_stroke = axis_ratio(x0_2, aso_2) + soy < 1
            is_boundary = axis_ratio(x0_2, asi_2) + siy >= 1

            if is_fill:
                if has_fill:
                    result.add_fill(xi, yi)
                else:
                    seeds[yi][xi] = True
                    result.add_stroke(xi, yi)
            if is_stroke:
                seeds[yi][xi] = is_boundary
                if not is_fill and has_stroke:
                    result.add_stroke(xi, yi)

    if width <= 6 or height <= 6:
        for point in result:
            seeds[point.y][point.x] = True

    reconcile_boundary(seeds, result.stroke if has_stroke else result.fill)
    return result


def reconcile_boundary(seeds: list[list[bool]], repairs: set[Point]) -> int:
    """Close diagonal gaps in a sampled quadrant curve.

    Scans the seed grid row-major from (1, 1). Every seed whose top or left
    neighbour is not a seed gets that neighbour marked and added to
    repairs. A single forward pass suffices because the sampled curves are
    convex and monotonic within one quadrant.

    Args:
        seeds: Boundary seed grid indexed [row][column], updated in place
        repairs: Point set receiving the repaired cells

    Returns:
        Number of cells added
    """
    added = 0
    for yi in range(1, len(seeds)):
        row = seeds[yi]
        above = seeds[yi - 1]
        for xi in range(1, len(row)):
            if not row[xi]:
                continue
            if not above[xi]:
                above[xi] = True
                repairs.add(Point(xi, yi - 1))
                added += 1
            if not row[xi - 1]:
                row[xi - 1] = True
                repairs.add(Point(xi - 1, yi))
                added += 1
    return added
