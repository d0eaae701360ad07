"""Configure logging for the ``sales`` package.

Log records go to stderr so that the status lines printed on stdout
stay machine-readable.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``sales`` logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """
    logger = logging.getLogger("sales")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
