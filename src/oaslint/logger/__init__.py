"""Logging utilities for oaslint.

Architecture:
    Application -> QueueHandler -> Queue -> QueueListener Thread
                                                 |
                                     Console (+ File) Handlers

Usage:
    >>> from oaslint.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Linting %s", path)  # Use %-style formatting

Environment Variables:
    OASLINT_LOG_LEVEL: Console log level (default WARNING)
    OASLINT_LOG_DIR: Enables file logging into this directory

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from oaslint.logger.config import update_logger_levels as _update_levels
from oaslint.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from oaslint.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from oaslint.logger.state import LoggerState, get_state

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "LoggerState",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
    "update_logger_levels",
]


def update_logger_levels(
    console_level: str | None = None, file_level: str | None = None
) -> None:
    """Apply log levels read from a config file to the running handlers."""
    _update_levels(get_state(), console_level, file_level)
