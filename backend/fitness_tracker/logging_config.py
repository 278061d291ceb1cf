"""
Logging Setup

The library never configures logging on import; applications
embedding it call setup_logging() once at startup.
"""

import logging
import sys
from typing import Optional

from fitness_tracker.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging to stdout.

    Args:
        level: Level name (e.g. 'DEBUG'). Defaults to settings.log_level,
               or DEBUG when settings.debug is on.
    """
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )
