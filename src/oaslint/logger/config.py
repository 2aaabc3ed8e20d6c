"""Configuration loading and updating for logging system.

Bootstrap levels come from environment variables; levels from the
``[lint]`` section of a config file are applied later with
``update_logger_levels`` once that file has been read.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from oaslint.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from oaslint.logger.state import LoggerState


def load_log_settings() -> tuple[str, str, Path | None]:
    """Load bootstrap console level, file level, and file path.

    Environment Variable Override:
        OASLINT_LOG_LEVEL: Console level (DEBUG, INFO, WARNING, ...)
        OASLINT_LOG_DIR: Enables file logging to
            $OASLINT_LOG_DIR/oaslint.log. File logging is off otherwise.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    console_level = (
        os.getenv(ENV_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL).upper()
    )

    env_log_dir = os.getenv(ENV_LOG_DIR)
    log_path = (
        Path(env_log_dir).expanduser() / LOG_FILE_NAME if env_log_dir else None
    )

    return console_level, DEFAULT_LOG_LEVEL, log_path


def update_logger_levels(
    state: "LoggerState",
    console_level: str | None = None,
    file_level: str | None = None,
) -> None:
    """Update handler levels of the running QueueListener.

    Only updates handler levels, never adds/removes handlers. Unknown
    level names fall back to WARNING (console) and INFO (file).

    Args:
        state: Logger state object (from logger.state module)
        console_level: New console level name, or None to keep current
        file_level: New file level name, or None to keep current

    """
    if state.queue_listener is None:
        return

    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            if file_level is not None:
                handler.setLevel(
                    getattr(logging, file_level.upper(), logging.INFO)
                )
        elif isinstance(handler, logging.StreamHandler):
            if console_level is not None:
                handler.setLevel(
                    getattr(logging, console_level.upper(), logging.WARNING)
                )

    state.config_applied = True
