"""
Configure logging for the application.

Every module logs through a child of the ``voice_feedback`` logger so that a
single call to :func:`configure_logging` at startup controls the whole tree.
"""

import logging
import sys

LOGGER_NAME = "voice_feedback"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger for ``name``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the application logger with a console handler.

    Returns:
        logging.Logger: The configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers if any
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    logger.propagate = False

    logger.debug("Logging configured")
    return logger
