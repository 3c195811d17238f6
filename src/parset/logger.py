"""
Opt-in log output for parset.

Modules log through logging.getLogger(__name__) under the "parset"
namespace and stay silent until an application calls setup_logger.
apply runs blocks on worker threads, so the format includes the thread.
"""

import logging
import sys
from typing import TextIO

from .config import default_log_level, resolve_log_level

__all__ = ["setup_logger"]

LOG_FORMAT = "%(asctime)s [%(threadName)s] %(name)s %(levelname)s: %(message)s"


def setup_logger(
    level: str | None = None,
    stream: TextIO | None = None,
    name: str = "parset",
) -> logging.Logger:
    """
    Send parset log records to a stream.

    Args:
        level: Level name; defaults to PARSET_LOG_LEVEL, then WARNING.
        stream: Destination; defaults to stdout.
        name: Logger to configure, "parset" or one of its children.

    Returns:
        The configured logger.

    Raises:
        ValueError: If level is not a known level name. The logger is
                    left untouched.
    """
    numeric_level = resolve_log_level(level or default_log_level())

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    logger.propagate = False

    # One handler per logger, however often this is called
    if not any(getattr(h, "_parset", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handler._parset = True
        logger.addHandler(handler)

    return logger
