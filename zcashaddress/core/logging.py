"""
File for logging
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

__all__ = ["get_logger", "LOG_LEVEL_ENV"]

LOG_LEVEL_ENV = "ZCASHADDRESS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(name: str, log_level: Optional[str] = None, log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with the specified configuration.

    Args:
        name: Logger name (typically __name__ from calling module)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). When omitted the level is read from the
            ZCASHADDRESS_LOG_LEVEL environment variable, falling back to WARNING
        log_file: Optional path to log file for persistent logging
        format_string: Optional custom format string

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent adding duplicate handlers
    if logger.handlers:
        return logger

    if log_level is None:
        log_level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    logger.setLevel(level)

    if format_string is None:
        format_string = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'

    formatter = logging.Formatter(format_string)

    # Console handler
    console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Optional file handler
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
