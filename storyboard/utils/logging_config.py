"""Logging setup for command-line use.

Library modules only create ``logging.getLogger(__name__)`` loggers and emit
DEBUG records; handlers are configured by the application, here via
:func:`setup_logging`.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a single stream handler to the ``storyboard`` logger.

    Args:
        level: Threshold for the ``storyboard`` logger and its handler.
        stream: Output stream; ``sys.stderr`` by default.

    Returns:
        The configured ``storyboard`` logger.
    """
    logger = logging.getLogger("storyboard")
    logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.handlers.clear()
    logger.addHandler(handler)

    # Pillow logs plugin discovery at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)
    return logger
