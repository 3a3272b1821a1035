"""
Constants and exit codes for zip-unpack.
"""

DEFAULT_CHUNK_SIZE = 64 * 1024

ENV_LOG_LEVEL = 'ZIP_UNPACK_LOG_LEVEL'
ENV_PROGRESS = 'ZIP_UNPACK_PROGRESS'
ENV_CHUNK_SIZE = 'ZIP_UNPACK_CHUNK_SIZE'


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    ARCHIVE_FORMAT_ERROR = 1
    FILESYSTEM_ERROR = 2
    ARCHIVE_NOT_FOUND = 3
    INTERNAL_ERROR = 4
    ARCHIVE_UNREADABLE = 5
    USAGE_ERROR = 64
