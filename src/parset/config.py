"""Environment-driven defaults for parset."""

import logging
import os

__all__ = [
    "MAX_WORKERS_ENV",
    "LOG_LEVEL_ENV",
    "default_max_workers",
    "default_log_level",
    "resolve_log_level",
]

MAX_WORKERS_ENV = "PARSET_MAX_WORKERS"
LOG_LEVEL_ENV = "PARSET_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_max_workers() -> int:
    """
    Worker pool size used by apply when none is given.

    Reads PARSET_MAX_WORKERS if set, otherwise the machine's CPU count.

    Raises:
        ValueError: If PARSET_MAX_WORKERS is not a positive integer.
    """
    raw = os.getenv(MAX_WORKERS_ENV)
    if raw is None or raw.strip() == "":
        return os.cpu_count() or 1

    try:
        workers = int(raw)
    except ValueError:
        raise ValueError(f"{MAX_WORKERS_ENV} must be an integer, got {raw!r}") from None
    if workers < 1:
        raise ValueError(f"{MAX_WORKERS_ENV} must be at least 1, got {workers}")
    return workers


def default_log_level() -> str:
    """Level name for setup_logger: PARSET_LOG_LEVEL, or WARNING when unset."""
    return os.getenv(LOG_LEVEL_ENV, "WARNING")


def resolve_log_level(level: str) -> int:
    """
    Convert a level name such as "debug" to its logging constant.

    Raises:
        ValueError: If level is not one of DEBUG, INFO, WARNING, ERROR,
                    CRITICAL (case-insensitive).
    """
    name = level.strip().upper()
    if name not in _LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {', '.join(_LOG_LEVELS)}")
    return getattr(logging, name)
