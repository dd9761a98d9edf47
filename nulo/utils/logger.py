"""Logging helpers for Nulo.

Example:
    >>> from nulo.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning buffer")
"""

import logging
from typing import Optional

ROOT_LOGGER_NAME = "nulo"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``nulo.``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + ".")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING, handler: Optional[logging.Handler] = None) -> logging.Logger:
    """Attach a single handler to the package logger.

    Library code never calls this; the command-line driver does.
    Calling it again replaces the previously installed handler.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
