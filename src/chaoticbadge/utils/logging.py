"""Logging utilities for chaoticbadge."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    rendered_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    render_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_render_time_ms(self) -> float | None:
        """Average time per rendered badge."""
        if not self.render_times_ms:
            return None
        return sum(self.render_times_ms) / len(self.render_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("chaoticbadge")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking badge rendering and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("chaoticbadge")
        self._stats = RenderStats()

    def log_render_start(self, label: str) -> None:
        """Log start of badge rendering."""
        self._logger.debug("Rendering badge", label=label)

    def log_render_complete(self, label: str, output: str, width: float, duration_ms: float) -> None:
        """Log successful badge rendering."""
        self._logger.info(
            "Badge rendered",
            label=label,
            output=output,
            width=round(width, 2),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.render_times_ms.append(duration_ms)

    def log_render_skipped(self, label: str, reason: str) -> None:
        """Log skipped badge."""
        self._logger.debug("Badge skipped", label=label, reason=reason)
        self._stats.skipped_count += 1

    def log_render_error(
        self,
        label: str,
        error: str,
        error_type: str | None = None,
        traceback: str | None = None,
    ) -> None:
        """Log badge rendering error."""
        self._logger.error(
            "Badge rendering failed",
            label=label,
            error=error,
            error_type=error_type,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((label, error))

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
