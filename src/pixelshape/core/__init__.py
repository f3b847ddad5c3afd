"""Core rasterization algorithms for pixelshape.

This module contains the algorithms for:

- Quadrant sampling (ellipse and rounded rectangle classification)
- Boundary reconciliation (closing diagonal gaps in sampled curves)
- Symmetric compositing (mirroring quadrants into pixel buffers)
- Shape dispatch and interactive preview sessions

All samplers are:
- Stateless
- Pure (no side effects)

Key functions:
- sample_ellipse: Classify the top-left quadrant of an ellipse
- sample_rectangle: Classify the top-left quadrant of a rounded rectangle
- reconcile_boundary: Close diagonal gaps in a seed grid
- mirror_positions: Distinct mirror images of a quadrant cell
- composite: Draw a quadrant into a fresh pair of buffers
- render_grid_overlay: Draw the magnified cell grid

Key classes:
- SymmetricCompositor: Owns and writes the native and magnified buffers
- ShapeDrawer: Dispatches requests to samplers and the compositor
- PreviewSession: Bounded parameters with redraw-on-change
"""

from pixelshape.core.compositor import (
    FILL_COLOR,
    STROKE_COLOR,
    SymmetricCompositor,
    composite,
    mirror_positions,
)
from pixelshape.core.drawer import ShapeDrawer
from pixelshape.core.ellipse import reconcile_boundary, sample_ellipse
from pixelshape.core.grid import render_grid_overlay
from pixelshape.core.rectangle import sample_rectangle
from pixelshape.core.session import PreviewListener, PreviewSession

__all__ = [
    "FILL_COLOR",
    "STROKE_COLOR",
    # Session classes
    "PreviewListener",
    "PreviewSession",
    # Drawing classes
    "ShapeDrawer",
    "SymmetricCompositor",
    # Functions
    "composite",
    "mirror_positions",
    "reconcile_boundary",
    "render_grid_overlay",
    "sample_ellipse",
    "sample_rectangle",
]
