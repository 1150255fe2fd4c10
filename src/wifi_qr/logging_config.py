"""Logging setup for the wifi-qr command line tool."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def level_from_verbosity(verbosity: int) -> int:
    """Map the count of ``-v`` flags to a logging level."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the ``wifi_qr`` logger.

    stdout is reserved for the rendered QR code. Calling this again replaces
    the handlers from the previous call. Records do not propagate to the root
    logger, so an application that also configures logging sees them once.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    handlers[0].setFormatter(logging.Formatter(LOG_FORMAT))
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        handlers.append(file_handler)

    logger = logging.getLogger("wifi_qr")
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
