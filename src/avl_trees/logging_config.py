"""Centralized logging configuration for the avl-trees project."""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "avl_trees"
LOG_LEVEL_ENV = "AVL_TREES_LOG_LEVEL"


def _default_level() -> int:
    """Resolve the default level from ``AVL_TREES_LOG_LEVEL`` (INFO if unset or unknown)."""
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler_type: str = "stream"
) -> logging.Logger:
    """
    Set up centralized logging configuration for the project.

    Args:
        level: Logging level (default: ``AVL_TREES_LOG_LEVEL`` or INFO)
        format_string: Custom format string (optional)
        handler_type: Type of handler - "stream" or "none"

    Returns:
        Configured logger instance
    """
    if level is None:
        level = _default_level()

    if format_string is None:
        format_string = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    logger = logging.getLogger(LOGGER_NAME)

    # Avoid duplicate configuration; only our own handlers count
    if logger.handlers:
        return logger

    formatter = logging.Formatter(format_string)

    if handler_type == "stream":
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    else:
        logger.addHandler(logging.NullHandler())

    # Set level and prevent propagation to root logger
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if not logging.getLogger(LOGGER_NAME).handlers:
        setup_logging()

    if name.startswith(LOGGER_NAME + ".") or name == LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def get_test_logger(name: str) -> logging.Logger:
    """
    Get a logger for tests with appropriate configuration.

    Args:
        name: Test module name

    Returns:
        Logger instance for tests
    """
    logger = logging.getLogger(f"Tests.{name}")

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

    return logger
