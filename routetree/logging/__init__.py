"""
Logging Package
Structured logging for the route tree

Provides drop-in replacement for standard logging.getLogger
"""
import logging
from typing import Optional

from routetree.logging.logger_config import LoggerConfig, JSONFormatter

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
]

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Only allows logger names that are:
    - None (root logger)
    - Configured channels in 'routetree.log_channels' (e.g. 'routetree')
    - Module-based names (containing '.') like 'routetree.route_tree'

    Example:
        from routetree.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Registered route", extra={'route_name': 'de.photos.index'})
    """
    if name is not None and '.' not in name:
        from routetree.support import Config
        if name not in Config.get('routetree.log_channels', []):
            # Force arbitrary names to use root logger
            name = None

    return logging.getLogger(name)
