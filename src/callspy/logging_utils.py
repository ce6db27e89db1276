"""Logging helpers for callspy."""

from __future__ import annotations

import logging
from typing import Any


class LoggingManager:
    """Manage callspy logging configuration and messages."""

    def __init__(self, logger_name: str = "callspy") -> None:
        self.logger = logging.getLogger(logger_name)
        self.logger.propagate = False

    def setup(self, verbose: bool, log_file: str | None = None) -> None:
        """Configure logging to the console and, optionally, ``log_file``."""
        level = logging.DEBUG if verbose else logging.INFO

        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")

        handlers: list[logging.Handler] = []
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        handlers.append(console)

        if log_file is not None:
            try:
                file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            except OSError:
                # If we cannot open the log file, continue with console-only logging.
                pass
            else:
                file_handler.setFormatter(formatter)
                handlers.append(file_handler)

        self.logger.handlers.clear()
        for handler in handlers:
            self.logger.addHandler(handler)
        self.logger.setLevel(level)

    def log(self, msg: str, *args: Any) -> None:
        """Log an informational message."""
        self.logger.info(msg, *args)

    def debug(self, msg: str, *args: Any) -> None:
        """Log a debug message."""
        self.logger.debug(msg, *args)


DEFAULT_LOGGER = LoggingManager()


# Procedural wrapper for callers that don't hold a manager.
def setup_logging(verbose: bool, log_file: str | None = None) -> None:
    DEFAULT_LOGGER.setup(verbose, log_file)
