"""Settings resolved from the environment for zip-unpack.

Recognised variables:
* `ZIP_UNPACK_LOG_LEVEL` - root log level (see `logging_config`)
* `ZIP_UNPACK_PROGRESS` - render a progress bar by default
* `ZIP_UNPACK_CHUNK_SIZE` - copy buffer size in bytes

Command line flags take precedence over anything read here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import DEFAULT_CHUNK_SIZE, ENV_CHUNK_SIZE, ENV_LOG_LEVEL, ENV_PROGRESS


def env_bool(key: str, default: bool = False, environ: Optional[Mapping[str, str]] = None) -> bool:
    value = (environ if environ is not None else os.environ).get(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_int(key: str, default: int, environ: Optional[Mapping[str, str]] = None) -> int:
    value = (environ if environ is not None else os.environ).get(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class UnpackSettings:
    """Typed settings sourced from the environment."""

    progress: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "UnpackSettings":
        env = environ if environ is not None else os.environ
        chunk_size = env_int(ENV_CHUNK_SIZE, DEFAULT_CHUNK_SIZE, env)
        if chunk_size <= 0:
            chunk_size = DEFAULT_CHUNK_SIZE
        return cls(
            progress=env_bool(ENV_PROGRESS, False, env),
            chunk_size=chunk_size,
            log_level=env.get(ENV_LOG_LEVEL) or None,
        )
