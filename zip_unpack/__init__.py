"""zip-unpack - safe extraction of ZIP archives.

Provides:
* Traversal-safe resolution of archive entry names
* A two-pass extraction engine (directories first, then file streams)
* Optional progress reporting through an injectable sink
* Thin CLI wrapper (`zip-unpack`)

The CLI is the primary interface; `extract` and `extract_path` are exported
for programmatic use.
"""

from .common.errors import (  # noqa: F401
    ArchiveAccessError,
    ArchiveFormatError,
    ArchiveNotFoundError,
    EntryIndexError,
    FilesystemError,
    UnsafePathError,
    ZipUnpackError,
)
from .common.logging_config import configure_logging  # noqa: F401
from .core.archive import ArchiveEntry, ZipArchive  # noqa: F401
from .core.extractor import ExtractionSummary, extract, extract_path  # noqa: F401
from .core.paths import ResolvedTarget, TargetKind, resolve  # noqa: F401

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "configure_logging",
    "ZipUnpackError",
    "ArchiveAccessError",
    "ArchiveFormatError",
    "ArchiveNotFoundError",
    "EntryIndexError",
    "FilesystemError",
    "UnsafePathError",
    "ArchiveEntry",
    "ZipArchive",
    "ExtractionSummary",
    "extract",
    "extract_path",
    "ResolvedTarget",
    "TargetKind",
    "resolve",
]
