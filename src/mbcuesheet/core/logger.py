"""
Logging configuration for mbcuesheet.
Provides centralized logging setup with console output only.
"""

import logging
import sys
from typing import Optional
from .config import LOGGING_CONFIG


def setup_logging(
    level: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Set up logging configuration for the application.
    Console output goes to stderr so diagnostics never mix with regular output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to enable console logging

    Returns:
        Configured root logger
    """
    log_level = getattr(logging, level or LOGGING_CONFIG["LEVEL"], logging.INFO)

    root_logger = logging.getLogger("mbcuesheet")
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOGGING_CONFIG["FORMAT"]))
        root_logger.addHandler(console_handler)

    root_logger.propagate = False

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically the module's short name)

    Returns:
        Logger instance
    """
    if not logging.getLogger("mbcuesheet").handlers:
        setup_logging()

    return logging.getLogger(f"mbcuesheet.{name}")
