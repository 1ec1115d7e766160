"""Logging configuration."""
import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging on stderr.

    Args:
        level: Level name; falls back to the LOG_LEVEL environment variable,
            then WARNING so the game screen stays clean
    """
    level = (level or os.environ.get("LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
