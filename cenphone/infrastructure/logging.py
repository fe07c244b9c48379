"""
Logging infrastructure.

Provides logging utilities shared by every layer.
"""
import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)
        level: Optional level override ("DEBUG", logging.WARNING, ...)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(level: Union[int, str] = "INFO") -> logging.Logger:
    """Attach the stream handler to the package logger so module loggers inherit it."""
    return get_logger("cenphone", level)
