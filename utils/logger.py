"""
utils/logger.py
---------------
Centralized logging configuration.
Every module obtains its logger with `get_logger(__name__)`. Records go to
stderr so that stdout stays reserved for the user rows printed by main.py.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: logging.Handler | None = None


def configure_logging(level: int = logging.INFO) -> None:
    """
    Attach the shared stderr handler to the root logger and set its level.

    The handler is installed once per process; later calls only change the
    level.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(_handler)
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance, configuring logging on first use.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
