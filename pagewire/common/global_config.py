"""
================================================================================
Global Logging Configuration
================================================================================

Centralized Loguru setup for the wiring engine, driver binding and connectors.

Component proxies emit their operation lines through the shared Loguru logger
bound with ``component=<contract name>``; this module decides where those
lines end up.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader


DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
    "{extra[component]} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: Optional[str] = None,
    format_str: Optional[str] = None,
    config: Optional[ConfigLoader] = None,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
        config: Configuration source, the process-wide loader by default.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = config or ConfigLoader.instance()

    log_level = level or config.get("logging.level", "INFO")
    log_format = format_str or config.get("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    # Records without a bound component still render with the default format
    logger.configure(extra={"component": "pagewire"})
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = config.get("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level.upper(),
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """Return the Loguru logger, initializing it on first use."""
    if not _logger_initialized:
        init_logger()
    return logger


def reset_logger() -> None:
    """Forget the current setup so the next init_logger() call reconfigures."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "init_logger",
    "get_logger",
    "reset_logger",
]
