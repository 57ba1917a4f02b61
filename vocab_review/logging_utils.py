"""
Logging setup for the review engine.

The engine itself never prints; it emits structured records through the
stdlib logging module and leaves handlers to the host unless nothing has
been configured yet.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


DEFAULT_LOGGER_NAME = "vocab_review"
DEFAULT_LOG_LEVEL = "INFO"


def parse_log_level(value: str) -> Optional[int]:
    """
    Numeric level for a level name such as "debug" or "WARNING".

    Returns:
        The level, or None if the name is not a registered level
    """
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else None


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Return the package logger, attaching a stdout handler on first use.

    LOG_LEVEL (default INFO) sets the level; an unknown name falls back to
    INFO with a warning. LOG_FORMAT=text switches the JSON formatter for a
    plain one.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    raw_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = parse_log_level(raw_level)
    logger.setLevel(logging.INFO if level is None else level)

    handler = logging.StreamHandler(sys.stdout)
    if os.getenv("LOG_FORMAT", "json") == "json":
        fmt = JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    else:
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    if level is None:
        logger.warning("unknown_log_level", extra={"log_level": raw_level})

    return logger
