"""Logging utilities for Pixelshape."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics accumulated over preview redraws."""

    draw_count: int = 0
    stroke_points: int = 0
    fill_points: int = 0
    clipped_writes: int = 0
    total_time_ms: float = 0.0
    last_time_ms: float | None = None

    @property
    def avg_time_ms(self) -> float:
        """Average redraw duration."""
        if self.draw_count:
            return self.total_time_ms / self.draw_count
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pixelshape")
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


def get_library_logger() -> structlog.stdlib.BoundLogger:
    """Get a logger that defers to the stdlib "pixelshape" logger's level.

    Unlike structlog.get_logger, this does not print anything before
    configure_logging has been called: records below WARNING are dropped
    by the stdlib logger's default level.
    """
    return structlog.wrap_logger(
        logging.getLogger("pixelshape"),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class RenderLogger:
    """Logger for tracking redraws and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        """Initialize the logger.

        Args:
            logger: Configured logger, as returned by configure_logging
                (a stdlib-backed library logger if None)
        """
        self._logger = logger if logger is not None else get_library_logger()
        self._stats = RenderStats()

    def log_draw(
        self,
        kind: str,
        stroke_points: int,
        fill_points: int,
        clipped: int,
        duration_ms: float,
    ) -> None:
        """Log a completed redraw."""
        self._logger.debug(
            "Shape drawn",
            kind=kind,
            stroke=stroke_points,
            fill=fill_points,
            clipped=clipped,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.draw_count += 1
        self._stats.stroke_points += stroke_points
        self._stats.fill_points += fill_points
        self._stats.clipped_writes += clipped
        self._stats.total_time_ms += duration_ms
        self._stats.last_time_ms = duration_ms

    def log_parameter_change(self, name: str, value: object) -> None:
        """Log a preview parameter change."""
        self._logger.debug("Parameter changed", name=name, value=value)

    def log_saved(self, path: Path) -> None:
        """Log a written preview image."""
        self._logger.info("Preview saved", path=str(path))

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
