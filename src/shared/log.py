"""
Loguru setup shared by the app and any scripts.

Batch runs put a short ``run`` id in the logging context, so lines from
overlapping Streamlit sessions can be told apart. Records logged outside a
run show ``-`` in that slot.
"""

import sys
from typing import Optional

from loguru import logger

from .config import Settings, get_settings

NO_RUN = "-"

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>run={extra[run]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Install a single stderr sink, JSON-serialised or coloured text."""
    settings = settings or get_settings()
    logger.remove()
    logger.configure(extra={"run": NO_RUN})

    serialize = settings.log_format == "json"
    logger.add(
        sys.stderr,
        format="{message}" if serialize else TEXT_FORMAT,
        level=settings.log_level,
        serialize=serialize,
    )
