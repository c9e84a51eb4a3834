"""Logging format and configuration for the video processing service."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def resolve_log_level(level: int | str) -> int:
    """Map a level name (any case, stdlib aliases such as WARN included) to its int; unknown -> INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure the root logger for this process. Call once at application startup."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT, datefmt=LOG_DATEFMT)
