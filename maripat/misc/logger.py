"""
Centralized logging utility for the maripat library.

Provides consistent logging across all modules with support for:
- Multiple log levels (DEBUG, INFO, WARNING, ERROR)
- Conditional output based on verbose flag
- Consistent formatting with [maripat] prefix
- Mirroring into the stdlib ``logging`` tree (``maripat.<component>``)
"""

import logging
import sys
from enum import Enum
from typing import Optional

from .logging_config import MARIPAT_LOGGER_NAME


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class MaripatLogger:
    """
    Component logger for the maripat library.

    Usage:
        logger = MaripatLogger(verbose=True, name="MissionGenerator")
        logger.info("Mission MP-251018-0001 generated")
        logger.warning("Unknown region, no secondary areas")
        logger.debug("Weapons table miss for C-295M/ASW")
    """

    def __init__(self, verbose: bool = True, name: Optional[str] = None, min_level: LogLevel = LogLevel.INFO):
        """
        Initialize logger.

        Args:
            verbose: If False, suppresses INFO and DEBUG messages
            name: Component name to include in log messages (e.g., "MissionGenerator")
            min_level: Minimum log level to display (defaults to INFO)
        """
        self.verbose = verbose
        self.name = name
        self.min_level = min_level
        stdlib_name = f"{MARIPAT_LOGGER_NAME}.{name}" if name else MARIPAT_LOGGER_NAME
        self._stdlib = logging.getLogger(stdlib_name)

    def _format_message(self, level: LogLevel, message: str) -> str:
        """Format log message with prefix and level."""
        level_prefix = {
            LogLevel.DEBUG: "DEBUG",
            LogLevel.INFO: "",
            LogLevel.WARNING: "Warning",
            LogLevel.ERROR: "ERROR"
        }

        prefix_parts = ["[maripat]"]
        if self.name:
            prefix_parts.append(f"[{self.name}]")

        level_str = level_prefix[level]
        if level_str:
            prefix_parts.append(f"{level_str}:")

        prefix = " ".join(prefix_parts)
        return f"{prefix} {message}"

    def _should_log(self, level: LogLevel) -> bool:
        """Check if message should be logged based on level and verbose setting."""
        # Always log warnings and errors
        if level in (LogLevel.WARNING, LogLevel.ERROR):
            return True

        if not self.verbose:
            return False

        return level.value >= self.min_level.value

    def _emit(self, level: LogLevel, message: str):
        # The stdlib logger decides on its own level; console output follows verbose.
        self._stdlib.log(_STDLIB_LEVELS[level], message)
        if not self._should_log(level):
            return
        stream = sys.stderr if level in (LogLevel.WARNING, LogLevel.ERROR) else sys.stdout
        print(self._format_message(level, message), file=stream)

    def debug(self, message: str):
        """Log debug message (only if verbose=True and min_level allows it)."""
        self._emit(LogLevel.DEBUG, message)

    def info(self, message: str):
        """Log info message (only if verbose=True)."""
        self._emit(LogLevel.INFO, message)

    def warning(self, message: str):
        """Log warning message (always shown)."""
        self._emit(LogLevel.WARNING, message)

    def error(self, message: str):
        """Log error message (always shown)."""
        self._emit(LogLevel.ERROR, message)

    def log(self, message: str, level: LogLevel = LogLevel.INFO):
        """
        Generic log method.

        Args:
            message: Message to log
            level: Log level (defaults to INFO)
        """
        self._emit(level, message)


def create_logger(verbose: bool = True, name: Optional[str] = None) -> MaripatLogger:
    """
    Factory function to create a logger instance.

    Args:
        verbose: If False, suppresses INFO and DEBUG messages
        name: Component name (e.g., "MissionGenerator", "Catalog")

    Returns:
        Configured MaripatLogger instance
    """
    return MaripatLogger(verbose=verbose, name=name)
