"""Structured logging configuration for uipoll using structlog.

Loggers are created lazily; the first ``get_logger`` call configures
structlog from the package settings unless ``setup_logging`` already ran.
Log lines go to stderr so command output on stdout stays parseable.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings

DISABLE_ENV_VAR = "UIPOLL_DISABLE_CONSOLE_LOGGING"

_logging_initialized = False


def _console_disabled() -> bool:
    return os.getenv(DISABLE_ENV_VAR) == "1"


def _build_processors(structured: bool, add_timestamp: bool, colors: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]
    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))
    return processors


def _build_handlers(console: bool, log_file: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
    return handlers


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = True,
    console: bool = True,
    add_timestamp: bool = True,
    colorize: bool = True,
) -> None:
    """Configure structured logging for uipoll.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that mirrors the console output
        structured: Render JSON instead of the console format
        console: Write to stderr (forced off by UIPOLL_DISABLE_CONSOLE_LOGGING)
        add_timestamp: Add ISO timestamps
        colorize: Colorize console output (non-structured only)
    """
    global _logging_initialized

    if _console_disabled():
        console = False
        log_file = None

    structlog.configure(
        processors=_build_processors(structured, add_timestamp, colors=colorize and console),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers = _build_handlers(console, log_file)
    if not handlers:
        handlers = [logging.NullHandler()]
        level = "CRITICAL"

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )
    _logging_initialized = True


def _ensure_logging_initialized() -> None:
    """Configure logging from settings on first use."""
    global _logging_initialized

    if _logging_initialized:
        return

    if _console_disabled():
        setup_logging(console=False, structured=False)
        return

    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        structured=settings.structured_logging,
        colorize=not settings.structured_logging,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def reset_logging() -> None:
    """Forget the lazy initialization so the next logger re-reads settings."""
    global _logging_initialized
    _logging_initialized = False
    structlog.reset_defaults()
