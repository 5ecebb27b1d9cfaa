"""
Logging Configuration

Configures the root logger once for the application.

Usage:
    import logging
    logger = logging.getLogger(__name__)

The level comes from the LOG_LEVEL config value or environment variable
(DEBUG, INFO, WARNING, ERROR). Default: INFO
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = '%(levelname)s [%(name)s] %(message)s'
LOG_FORMAT_DEBUG = '%(levelname)s [%(name)s:%(lineno)d] %(message)s'

_logging_configured = False


def _parse_level(level):
    if isinstance(level, int):
        return level
    name = (level or os.environ.get('LOG_LEVEL', '')).upper()
    if name == 'WARN':
        name = 'WARNING'
    return logging.getLevelName(name) if name in ('DEBUG', 'INFO', 'WARNING', 'ERROR') else DEFAULT_LOG_LEVEL


def configure_logging(level=None):
    """
    Configure the root logger for the application.

    Args:
        level: Log level (int or name). If None, reads LOG_LEVEL from the
               environment or uses DEFAULT_LOG_LEVEL.
    """
    global _logging_configured

    if _logging_configured:
        return

    level = _parse_level(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    _logging_configured = True
