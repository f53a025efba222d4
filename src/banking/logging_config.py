"""
Logging setup shared by the command line entry points
"""

import logging
from typing import Optional

from .config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger from settings, once per process"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT
    )
