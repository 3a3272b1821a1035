"""
Custom exception classes for zip-unpack.
"""


class ZipUnpackError(Exception):
    """Base exception class for zip-unpack errors."""
    pass


class ArchiveNotFoundError(ZipUnpackError):
    """Raised when the input archive file does not exist."""
    pass


class ArchiveAccessError(ZipUnpackError):
    """Raised when the archive file exists but cannot be opened or read."""
    pass


class ArchiveFormatError(ZipUnpackError):
    """Raised when the archive or one of its entries is malformed or corrupt."""
    pass


class FilesystemError(ZipUnpackError):
    """Raised when creating a directory or writing a file fails."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class EntryIndexError(ZipUnpackError, IndexError):
    """Raised when an entry index is outside the archive's entry table."""
    pass


class UnsafePathError(ZipUnpackError):
    """Raised when an entry name cannot be placed under the destination root."""

    def __init__(self, declared_name: str, reason: str):
        super().__init__(f"Unsafe entry name {declared_name!r}: {reason}")
        self.declared_name = declared_name
        self.reason = reason
