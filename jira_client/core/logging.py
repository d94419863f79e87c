"""
Logging for the Jira client.

Every module logs under the "jira_client" namespace:

    from jira_client.core.logging import get_logger

    logger = get_logger(__name__)

The package installs a NullHandler on that namespace, so nothing is printed
unless the application configures logging. Programs that just want readable
output call setup_logging(), which touches the "jira_client" logger only and
leaves the root logger to the application.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "jira_client"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ClientHandler(logging.StreamHandler):
    """Marks the handler installed by setup_logging so it can be replaced."""


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the client namespace.

    Args:
        name: Module name, typically __name__. None returns the package logger.
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a formatted stream handler to the client logger.

    Calling it again replaces the handler instead of stacking another one.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Destination, stdout by default.

    Returns:
        The configured "jira_client" logger.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        if isinstance(handler, _ClientHandler):
            logger.removeHandler(handler)

    handler = _ClientHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Request lines are already logged by the transport
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logger
