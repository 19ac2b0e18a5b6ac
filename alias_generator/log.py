"""Package logger.

Every module logs through ``from .log import logger``.  Nothing is printed
unless :func:`enable_verbose` attaches a handler (``--verbose``).
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("alias_generator")
logger.addHandler(logging.NullHandler())


def enable_verbose(level: int = logging.DEBUG) -> logging.Handler:
    """Send package log records to stderr at *level* and return the handler."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
