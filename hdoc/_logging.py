"""Logging setup for the ``hdoc`` console script."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "hdoc-cli"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single stderr handler to the ``hdoc`` logger.

    Calling this again replaces the previous handler instead of stacking a
    second one, so repeated CLI invocations in one process log each record
    once.
    """
    package_logger = logging.getLogger("hdoc")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


__all__ = ["LOG_FORMAT", "configure_logging"]
