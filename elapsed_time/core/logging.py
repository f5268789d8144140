"""Logging setup for the elapsed_time package"""

import logging
import sys
from typing import Optional

from elapsed_time.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach a console handler to the package logger"""
    settings = settings or get_settings()

    logger = logging.getLogger("elapsed_time")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    return logger
