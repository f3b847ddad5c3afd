"""Shape dispatch from requests to samplers and the compositor."""

import time

from pixelshape.core.compositor import SymmetricCompositor
from pixelshape.core.ellipse import sample_ellipse
from pixelshape.core.rectangle import sample_rectangle
from pixelshape.domain import PointClassification, RasterBuffer, ShapeKind, ShapeRequest
from pixelshape.utils import RenderLogger


class ShapeDrawer:
    """Draws shape requests into the compositor's buffers.

    Rectangles go through the rectangle sampler, ellipses and circles
    through the ellipse sampler. The resulting quadrant is handed to the
    compositor, which mirrors it over the whole bounding box.

    Example:
        drawer = ShapeDrawer()
        native, magnified = drawer.draw(ShapeRequest.circle(10, 10, 20, 3))
    """

    def __init__(
        self,
        compositor: SymmetricCompositor | None = None,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the drawer.

        Args:
            compositor: Compositor owning the output buffers (created if None)
            render_logger: Logger collecting redraw statistics (created if None)
        """
        self.compositor = compositor if compositor is not None else SymmetricCompositor()
        self.render_logger = render_logger if render_logger is not None else RenderLogger()

    def classify(self, request: ShapeRequest) -> PointClassification:
        """Compute the top-left quadrant classification of a request.

        Args:
            request: Shape to classify

        Returns:
            Stroke and fill cells of the quadrant
        """
        if request.kind is ShapeKind.RECTANGLE:
            return sample_rectangle(
                request.width,
                request.height,
                request.corner_radius,
                request.thickness,
                x=request.x,
                y=request.y,
            )
        if request.kind is ShapeKind.ELLIPSE:
            return sample_ellipse(
                request.width, request.height, request.thickness, x=request.x, y=request.y
            )
        return sample_ellipse(
            request.width, request.width, request.thickness, x=request.x, y=request.y
        )

    def draw(self, request: ShapeRequest) -> tuple[RasterBuffer, RasterBuffer]:
        """Classify a request and composite it into both buffers.

        Args:
            request: Shape to draw

        Returns:
            Tuple of (native, magnified) buffers
        """
        start_time = time.perf_counter()

        quadrant = self.classify(request)
        native, magnified = self.compositor.composite(quadrant, request.bounding_box)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.render_logger.log_draw(
            kind=request.kind.value,
            stroke_points=len(quadrant.stroke),
            fill_points=len(quadrant.fill),
            clipped=self.compositor.clipped_writes,
            duration_ms=duration_ms,
        )
        return native, magnified
