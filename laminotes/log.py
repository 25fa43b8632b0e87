"""Logging setup for applications embedding the core."""

import logging
import sys
from typing import Optional

from laminotes.config import ApplicationConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stdout handler to the ``laminotes`` logger once."""
    logger = logging.getLogger("laminotes")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    level_name = (level or ApplicationConfig.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    return logger
