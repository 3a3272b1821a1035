"""Shared CLI helpers for zip-unpack."""

import sys
from typing import Optional

from zip_unpack.common.constants import ExitCodes
from zip_unpack.common.errors import (
    ArchiveAccessError,
    ArchiveFormatError,
    ArchiveNotFoundError,
    EntryIndexError,
    FilesystemError,
    ZipUnpackError,
)


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to zip-unpack exit codes."""
    if isinstance(exc, ArchiveNotFoundError):
        return ExitCodes.ARCHIVE_NOT_FOUND
    if isinstance(exc, ArchiveAccessError):
        return ExitCodes.ARCHIVE_UNREADABLE
    if isinstance(exc, ArchiveFormatError):
        return ExitCodes.ARCHIVE_FORMAT_ERROR
    if isinstance(exc, FilesystemError):
        return ExitCodes.FILESYSTEM_ERROR
    if isinstance(exc, EntryIndexError):
        return ExitCodes.INTERNAL_ERROR
    if isinstance(exc, ZipUnpackError):
        return ExitCodes.INTERNAL_ERROR
    return None
