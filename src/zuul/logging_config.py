"""structlog setup for Zuul."""

import logging

import structlog

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """
    Configure structlog for console or JSON output.

    Args:
        level: Minimum log level name (e.g., "DEBUG", "INFO")
        fmt: "console" for human readable output, "json" for one JSON object per line

    Raises:
        ValueError: If the level or format is not recognized
    """
    level_number = LOG_LEVELS.get(level.upper())
    if level_number is None:
        raise ValueError(f"Unknown log level '{level}' (must be one of: {', '.join(LOG_LEVELS)})")

    renderer: structlog.types.Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    elif fmt == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        raise ValueError(f"Unknown log format '{fmt}' (must be console or json)")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
        cache_logger_on_first_use=False,
    )
