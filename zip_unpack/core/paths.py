"""Resolution of untrusted archive entry names to paths under a destination.

Everything here is a pure function of its inputs: the filesystem is never
consulted. Containment against symlinks that already exist on disk is checked
separately by the extractor at write time.
"""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from zip_unpack.common.errors import UnsafePathError

_SEPARATORS = ("/", "\\")
_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")


class TargetKind(enum.Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class ResolvedTarget:
    """Output location for a single entry, always below the destination root."""

    output_path: Path
    kind: TargetKind

    @property
    def is_directory(self) -> bool:
        return self.kind is TargetKind.DIRECTORY


def normalize_name(declared_name: str) -> List[str]:
    """Split an entry name into safe path segments.

    Raises:
        UnsafePathError: if the name is empty, absolute, carries a drive
            prefix (on Windows) or NUL byte, climbs above the root with ``..`` or
            normalizes to nothing.
    """
    if not declared_name:
        raise UnsafePathError(declared_name, "empty name")
    if "\0" in declared_name:
        raise UnsafePathError(declared_name, "contains a NUL character")

    name = declared_name.replace("\\", "/")
    if name.startswith("/"):
        raise UnsafePathError(declared_name, "absolute path")
    if os.name == "nt" and _DRIVE_PREFIX.match(name):
        raise UnsafePathError(declared_name, "drive-qualified path")

    segments: List[str] = []
    for segment in name.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if not segments:
                raise UnsafePathError(declared_name, "escapes the destination root")
            segments.pop()
            continue
        segments.append(segment)

    if not segments:
        raise UnsafePathError(declared_name, "refers to the destination root itself")
    return segments


def resolve_or_raise(declared_name: str, destination_root: Union[str, Path]) -> ResolvedTarget:
    """Like `resolve` but raises `UnsafePathError` instead of returning None."""
    segments = normalize_name(declared_name)
    kind = TargetKind.DIRECTORY if declared_name.endswith(_SEPARATORS) else TargetKind.FILE
    return ResolvedTarget(Path(destination_root).joinpath(*segments), kind)


def resolve(declared_name: str, destination_root: Union[str, Path]) -> Optional[ResolvedTarget]:
    """Resolve an entry name to a target below `destination_root`, or None."""
    try:
        return resolve_or_raise(declared_name, destination_root)
    except UnsafePathError:
        return None


def is_within(path: Path, root: Path) -> bool:
    """Return True when `path` equals `root` or lies below it."""
    return path == root or root in path.parents


__all__ = [
    "TargetKind",
    "ResolvedTarget",
    "normalize_name",
    "resolve",
    "resolve_or_raise",
    "is_within",
]
