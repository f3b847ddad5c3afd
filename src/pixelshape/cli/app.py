"""CLI application entry point for pixelshape.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from pixelshape import __version__
from pixelshape.cli.output import (
    console,
    print_error,
    print_grid,
    print_header,
    print_request_info,
    print_step,
    print_success,
)
from pixelshape.config import (
    LoggingConfig,
    OutputConfig,
    ParameterBounds,
    ParameterDefaults,
    PreviewSettings,
)
from pixelshape.core import PreviewSession, ShapeDrawer
from pixelshape.domain import RasterBuffer, ShapeKind, ShapeRequest
from pixelshape.exceptions import ParameterError, PixelShapeError, PreviewSaveError
from pixelshape.io import PreviewWriter
from pixelshape.utils import RenderLogger, configure_logging

BOUNDS = ParameterBounds()
DEFAULTS = ParameterDefaults()

# Create the Typer app
app = typer.Typer(
    name="pixelshape",
    help="Preview how rectangles, ellipses and circles rasterize onto a 50x50 pixel grid.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pixelshape[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def preview(
    shape: Annotated[
        str,
        typer.Argument(
            help="Shape kind (rectangle|ellipse|circle)",
            show_default=False,
        ),
    ],
    x: Annotated[
        int,
        typer.Option("--x", "-x", help="Left column of the bounding box", min=BOUNDS.x.min, max=BOUNDS.x.max),
    ] = DEFAULTS.x,
    y: Annotated[
        int,
        typer.Option("--y", "-y", help="Top row of the bounding box", min=BOUNDS.y.min, max=BOUNDS.y.max),
    ] = DEFAULTS.y,
    width: Annotated[
        int,
        typer.Option(
            "--width",
            "-w",
            help="Bounding box width (side length for circles)",
            min=BOUNDS.width.min,
            max=BOUNDS.width.max,
        ),
    ] = DEFAULTS.width,
    height: Annotated[
        int,
        typer.Option(
            "--height",
            "-h",
            help="Bounding box height (ignored for circles)",
            min=BOUNDS.height.min,
            max=BOUNDS.height.max,
        ),
    ] = DEFAULTS.height,
    radius: Annotated[
        int,
        typer.Option(
            "--radius",
            "-r",
            help="Corner radius (rectangles only)",
            min=BOUNDS.radius.min,
            max=BOUNDS.radius.max,
        ),
    ] = DEFAULTS.radius,
    thickness: Annotated[
        int,
        typer.Option(
            "--thickness",
            "-t",
            help="Stroke thickness, 0 draws the fill only",
            min=BOUNDS.thickness.min,
            max=BOUNDS.thickness.max,
        ),
    ] = DEFAULTS.thickness,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Directory for {stem}-native.png and {stem}-magnified.png",
        ),
    ] = Path("."),
    stem: Annotated[
        str,
        typer.Option("--stem", help="File name stem of the preview images"),
    ] = "shape",
    grid: Annotated[
        bool,
        typer.Option("--grid/--no-grid", help="Draw the cell grid over the magnified image"),
    ] = True,
    show: Annotated[
        bool,
        typer.Option("--show", "-s", help="Print the native grid to the terminal"),
    ] = False,
    no_save: Annotated[
        bool,
        typer.Option("--no-save", help="Do not write any image files"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render one shape onto the pixel grid and save the previews.

    Stroke cells are drawn in blue, fill cells in orange. Colors are added
    rather than overwritten, so any cell drawn twice shows up brighter.

    Example:
        pixelshape rectangle --width 30 --height 20 --radius 6 --thickness 2

    This will create shape-native.png (50x50) and shape-magnified.png
    (500x500) in the current directory.
    """
    # Validate shape argument
    try:
        kind = ShapeKind(shape.lower())
    except ValueError:
        print_error(
            f"Invalid shape: {shape}",
            details="Valid values: rectangle, ellipse, circle",
        )
        raise typer.Exit(code=1)

    if show and quiet:
        print_error("Cannot use --show and --quiet together")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    writer = PreviewWriter()
    saved: list[Path] = []

    try:
        # Create settings from CLI arguments
        settings = PreviewSettings(
            defaults=ParameterDefaults(
                x=x,
                y=y,
                width=width,
                height=width if kind is ShapeKind.CIRCLE else height,
                radius=radius,
                thickness=thickness,
            ),
            output=OutputConfig(output_dir=output, stem=stem, grid_overlay=grid),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

        def save_preview(
            request: ShapeRequest, native: RasterBuffer, magnified: RasterBuffer
        ) -> None:
            if no_save:
                return
            saved.extend(
                writer.save(
                    native,
                    magnified,
                    settings.output.output_dir,
                    stem=settings.output.stem,
                    grid=settings.output.grid_overlay,
                )
            )

        drawer = ShapeDrawer(render_logger=RenderLogger(logger))
        session = PreviewSession(settings=settings, drawer=drawer, kind=kind)
        session.add_listener(save_preview)

        if not quiet:
            print_step("Drawing")
            print_request_info(session.snapshot())

        native, _ = session.redraw()

        if show:
            print_step("Native grid")
            print_grid(native)

        for path in saved:
            drawer.render_logger.log_saved(path)

        if not quiet:
            stats = drawer.render_logger.stats
            if saved:
                print_success(str(saved[0]), str(saved[1]), stats.last_time_ms or 0.0)
            else:
                console.print(f"\n[bold green]Drawn[/bold green] in {stats.last_time_ms or 0.0:.1f}ms")

    except ValidationError as e:
        print_error("Invalid settings", details=format_validation_error(e))
        raise typer.Exit(code=1)
    except ParameterError as e:
        print_error(f"Invalid parameter: {e.reason}", details=f"Parameter: {e.name}")
        raise typer.Exit(code=1)
    except PreviewSaveError as e:
        print_error(f"Could not save preview: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except PixelShapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def format_validation_error(error: ValidationError) -> str:
    """Summarize a settings validation error as one line per field."""
    return "\n  ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
