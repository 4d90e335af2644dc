"""structlog setup.

Modules obtain loggers with ``structlog.get_logger(__name__)`` and emit
key/value events. Per-decision events are logged at debug level;
:func:`configure_logging` filters them out unless asked for.
"""

import logging

import structlog


def configure_logging(level: int | str = logging.INFO) -> None:
    """Install a console renderer filtering events below ``level``."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
