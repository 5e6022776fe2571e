# dlcache/core/log.py
"""
Logger helpers for the dlcache package.

Modules log through `get_logger(__name__)`. Nothing is printed unless the host
configures logging, or `DLCACHE_DEBUG` is set / `enable_debug_logging()` is
called, which attaches one stderr handler to the package logger.
"""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER_NAME = "dlcache"

_DEBUG_HANDLER: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _debug_enabled() -> bool:
    return os.getenv("DLCACHE_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}


def enable_debug_logging(level: int = logging.DEBUG) -> logging.Logger:
    """Attach (once) a stderr handler to the package logger and set its level."""
    global _DEBUG_HANDLER
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if called repeatedly
    if _DEBUG_HANDLER is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
                datefmt="(%Y-%m-%d %H:%M:%S)",
            )
        )
        logger.addHandler(handler)
        _DEBUG_HANDLER = handler

    return logger


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

if _debug_enabled():  # pragma: no cover - env driven
    enable_debug_logging()


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "enable_debug_logging"]
