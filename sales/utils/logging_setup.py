"""
Logging setup for applications embedding the sales domain
"""
import logging
from typing import Optional

from sales.config.settings import LoggingConfig


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging.

    Args:
        level: log level name; defaults to LoggingConfig.LEVEL
    """
    logging.basicConfig(
        level=getattr(logging, (level or LoggingConfig.LEVEL).upper(), logging.INFO),
        format=LoggingConfig.FORMAT,
        handlers=[logging.StreamHandler()],
    )
