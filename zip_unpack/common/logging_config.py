"""Logging setup for zip-unpack.

The extractor logs skipped entries at WARNING, each created directory and
written file at DEBUG and the run summary at INFO. `zip-unpack` picks the
level from `--log-level` or `ZIP_UNPACK_LOG_LEVEL`; programmatic callers of
`extract` may leave configuration to their own application.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .constants import ENV_LOG_LEVEL

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configure root logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `ZIP_UNPACK_LOG_LEVEL`
    3. Fallback to `INFO`
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, "INFO")

    if isinstance(level, str):
        level = _LEVEL_MAP.get(level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger."""
    return logging.getLogger(name or "zip_unpack")


__all__ = ["configure_logging", "get_logger"]
