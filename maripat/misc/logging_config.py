"""
Centralized logging configuration for the maripat library.

Component loggers (see ``maripat.misc.logger``) mirror every message into the
``maripat`` stdlib logger tree; configure handlers for it here.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

# Default log level
DEFAULT_LOG_LEVEL = logging.INFO

# Logger name for the library
MARIPAT_LOGGER_NAME = "maripat"


def setup_logger(
    name: str = MARIPAT_LOGGER_NAME,
    level: int = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Configure and return a logger for maripat.

    Args:
        name: Logger name (default: 'maripat')
        level: Logging level (default: INFO)
        log_file: Optional file path for log output
        console: Whether to output to console (default: True)

    Returns:
        Configured logger instance

    Examples:
        >>> logger = setup_logger()
        >>> logger.info("Mission generated successfully")

        >>> # Keep a record of every generated mission
        >>> logger = setup_logger(log_file="logs/missions.log", console=False)

        >>> # Debug mode (also shows reference data gaps)
        >>> logger = setup_logger(level=logging.DEBUG)
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the maripat tree.

    Unlike ``setup_logger`` this never installs handlers; an application that
    wants output calls ``setup_logger`` once.

    Args:
        name: Child logger name (default: the 'maripat' root)

    Returns:
        Logger instance

    Examples:
        >>> logger = get_logger("catalog")
        >>> logger.name
        'maripat.catalog'
    """
    logger_name = f"{MARIPAT_LOGGER_NAME}.{name}" if name else MARIPAT_LOGGER_NAME
    return logging.getLogger(logger_name)
