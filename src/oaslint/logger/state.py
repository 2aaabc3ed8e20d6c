"""Process-wide logging state shared by the logger package."""

import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener
from pathlib import Path


@dataclass
class LoggerState:
    """What ``setup_root_logger`` built, so it can be torn down again.

    Attributes:
        lock: Guards one-time initialization of the ``oaslint`` logger
        root_initialized: Handlers are attached and the listener runs
        config_applied: Levels from a config file ``[lint]`` section are in
            effect
        queue_listener: Thread draining ``log_queue`` into the handlers
        log_queue: Queue fed by the ``oaslint`` QueueHandler
        log_file: File the file handler writes to, None without one

    """

    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    root_initialized: bool = False
    config_applied: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None
    log_file: Path | None = None

    def stop_listener(self) -> None:
        """Stop the listener thread, if running."""
        if self.queue_listener is not None:
            self.queue_listener.stop()
            self.queue_listener = None

    def reset(self) -> None:
        """Stop the listener and forget everything set up so far.

        The caller holds ``lock``.
        """
        self.stop_listener()
        self.log_queue = None
        self.log_file = None
        self.root_initialized = False
        self.config_applied = False


_state = LoggerState()


def get_state() -> LoggerState:
    """Return the process-wide logger state."""
    return _state
