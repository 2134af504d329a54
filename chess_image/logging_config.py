"""Logging setup for command-line use of chess_image."""

import logging
import sys

_LOGGING_CONFIGURED = False


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler to the ``chess_image`` logger and return it.

    The handler is added once; later calls only change the level.
    """
    global _LOGGING_CONFIGURED

    logger = logging.getLogger("chess_image")
    logger.setLevel(level)

    if not _LOGGING_CONFIGURED:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        _LOGGING_CONFIGURED = True

    return logger
