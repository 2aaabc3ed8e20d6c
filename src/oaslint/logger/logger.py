"""Main logger module providing public API functions.

- setup_logging(): Configure logging with QueueHandler architecture
- get_logger(): Get or create logger instance
- flush_all_handlers(): Ensure all pending log records are written
- clear_logger_state(): Clear global logger state for testing
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from oaslint.logger.config import load_log_settings
from oaslint.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from oaslint.logger.state import get_state

_FLUSH_TIMEOUT_SECONDS = 5.0


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits for the queue to drain, then flushes each handler's buffer.
    Safe to call from any thread.
    """
    state = get_state()
    if state.queue_listener is not None and state.log_queue is not None:
        # QueueListener doesn't use task_done(), so poll the queue
        start_time = time.time()
        while not state.log_queue.empty():
            if time.time() - start_time > _FLUSH_TIMEOUT_SECONDS:
                break
            time.sleep(0.01)

        time.sleep(0.05)

        for handler in state.queue_listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    flush_all_handlers()
    get_state().stop_listener()


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging and return the logger called ``name``.

    The root ``oaslint`` logger is initialized exactly once; child loggers
    (``oaslint.rules.common.struct``) propagate to it.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file; file logging is disabled when neither
            this nor OASLINT_LOG_DIR is given

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get or create logger instance.

    Use __name__ as the logger name for proper hierarchical logging:

        >>> logger = get_logger(__name__)
        >>> logger.debug("Activated %d rules", len(checks))

    """
    return setup_logging(name=name)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, removes all handlers from oaslint loggers
    and resets the state flags so the next call starts from scratch.
    """
    state = get_state()
    with state.lock:
        flush_all_handlers()
        state.reset()

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(("test-", ROOT_LOGGER_NAME)):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
