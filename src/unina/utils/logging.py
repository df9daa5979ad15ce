"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON (or console) rendering for structured logs
- Context binding support
- Dual output (stderr + optional file logging)

Configuration is loaded from unina.config.settings:
- UNINA_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- UNINA_LOG_FORMAT: json or console. Default: json
- UNINA_LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- UNINA_LOG_FILE_DIR: Directory for log files. Default: logs/

Library modules only call ``structlog.get_logger``; the process entry point
(``unina.cli``) calls ``configure_logging`` once.

Usage:
    >>> from unina.utils.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> logger = get_logger(__name__)
    >>> logger.info("database.loaded", range_count=40213)
"""

import logging
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.types import Processor

from unina.config import Settings, get_settings

_HANDLER_MARKER = "_unina_handler"


def _get_log_file_path(log_dir: Path) -> Path:
    """Get the log file path with date-based naming."""
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: unina-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"unina-{date_str}.log"


def _configure_structlog(renderer: Processor) -> None:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def install_default_logging() -> None:
    """Route structlog through stdlib logging without adding handlers.

    Until ``configure_logging`` runs, events are filtered by the stdlib root
    level (WARNING by default), so importing and using unina as a library
    never writes to stdout.
    """
    _configure_structlog(structlog.processors.JSONRenderer())


def reset_logging_handlers() -> None:
    """Remove the root handlers installed by ``configure_logging``."""
    for handler in list(logging.root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logging.root.removeHandler(handler)
            handler.close()


def reset_logging() -> None:
    """Drop handlers and restore the import-time structlog setup."""
    reset_logging_handlers()
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()
    install_default_logging()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - JSON or console renderer
    - Dual output (stderr + optional file)

    Calling it again replaces the handlers installed by the previous call.

    Args:
        settings: Settings to read; defaults to ``get_settings()``
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)

    reset_logging_handlers()
    logging.root.setLevel(level)

    # Add stderr handler (always enabled)
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(stream_handler, _HANDLER_MARKER, True)
    logging.root.addHandler(stream_handler)

    # Add file handler if enabled
    if settings.log_to_file:
        log_file = _get_log_file_path(Path(settings.log_file_dir))
        file_handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=30,  # 30-day retention
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(file_handler, _HANDLER_MARKER, True)
        logging.root.addHandler(file_handler)

    renderer: Processor
    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()
    _configure_structlog(renderer)


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog logger bound to ``name``

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("ucd_reader.extracted", range_count=40213)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Args:
        **kwargs: Context fields to bind (e.g., command="build",
            database_path="build/database.json")

    Returns:
        A BoundLogger with the specified context already bound

    Example:
        >>> logger = bind_context(command="build")
        >>> logger.info("database.written", range_count=40213)
    """
    return structlog.get_logger().bind(**kwargs)


# Install the stdlib routing on module import, unless the host application
# has configured structlog itself.
if not structlog.is_configured():
    install_default_logging()
