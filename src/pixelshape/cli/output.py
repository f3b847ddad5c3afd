"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library,
including a terminal rendition of the native preview grid.
"""

from rich.console import Console
from rich.text import Text

from pixelshape.core import FILL_COLOR, STROKE_COLOR
from pixelshape.domain import RasterBuffer, ShapeKind, ShapeRequest

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info
CELL_FULL = "██"
CELL_EMPTY = " ·"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Pixelshape[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_request_info(request: ShapeRequest) -> None:
    """Print the parameters of a shape request.

    Args:
        request: The shape being previewed
    """
    console.print(
        f"  [bold]{request.kind.value}[/bold] at ({request.x}, {request.y}) "
        f"{SYM_DOT} {request.width}x{request.height}"
    )
    details = f"  thickness {request.thickness}"
    if request.kind is ShapeKind.RECTANGLE:
        details += f" {SYM_DOT} radius {request.corner_radius}"
    console.print(details)


def render_grid_text(native: RasterBuffer) -> Text:
    """Render a native buffer as colored terminal cells.

    Each pixel becomes two characters wide so cells look roughly square.

    Args:
        native: Native resolution buffer

    Returns:
        Rich Text with one line per buffer row
    """
    text = Text()
    for y in range(native.height):
        for x in range(native.width):
            r, g, b, a = native.get_pixel(x, y)
            if a:
                text.append(CELL_FULL, style=f"rgb({r},{g},{b})")
            else:
                text.append(CELL_EMPTY, style="dim")
        text.append("\n")
    return text


def print_grid(native: RasterBuffer) -> None:
    """Print the native preview grid with a color legend.

    Args:
        native: Native resolution buffer
    """
    console.print(render_grid_text(native), end="")
    legend = Text("  ")
    legend.append(CELL_FULL, style="rgb({},{},{})".format(*STROKE_COLOR))
    legend.append(" stroke  ")
    legend.append(CELL_FULL, style="rgb({},{},{})".format(*FILL_COLOR))
    legend.append(" fill  ")
    legend.append(CELL_FULL, style="rgb(255,255,255)")
    legend.append(" overlap")
    console.print(legend)


def print_success(native_path: str, magnified_path: str, duration_ms: float) -> None:
    """Print success message with output paths.

    Args:
        native_path: Path of the native resolution image
        magnified_path: Path of the magnified image
        duration_ms: Time spent drawing the shape
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {duration_ms:.1f}ms")
    for path in (native_path, magnified_path):
        line = Text("  ")
        line.append(path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
