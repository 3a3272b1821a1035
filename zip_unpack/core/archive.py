"""
Archive access for zip-unpack.

The extractor only needs an indexed view of an archive:
* ``len(archive)`` - number of entries
* ``archive.entry_at(index)`` - metadata for one entry
* ``archive.read_stream(index)`` - a fresh decompressed byte stream

`ZipArchive` provides that view over the standard library ``zipfile`` module
and translates its many failure modes into project errors.
"""

from __future__ import annotations

import zipfile
import zlib
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, List, Protocol, Union

from zip_unpack.common.errors import (
    ArchiveAccessError,
    ArchiveFormatError,
    ArchiveNotFoundError,
    EntryIndexError,
)
from zip_unpack.common.logging_config import get_logger

# Errors zipfile and its decompressors raise for corrupt entry data.
# RuntimeError covers encrypted entries, NotImplementedError unknown methods,
# OSError the bz2 "Invalid data stream" failure.
ARCHIVE_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    NotImplementedError,
    RuntimeError,
    OSError,
)


@dataclass(frozen=True)
class ArchiveEntry:
    """Read-only metadata for one archive entry."""

    index: int
    declared_name: str
    is_directory: bool
    size: int


class ArchiveReader(Protocol):
    """Indexed archive view consumed by the extractor."""

    def __len__(self) -> int: ...

    def entry_at(self, index: int) -> ArchiveEntry: ...

    def read_stream(self, index: int):
        """Return a context manager yielding a readable binary stream."""
        ...


class ZipArchive:
    """ZIP archive backed by ``zipfile.ZipFile``."""

    def __init__(self, zip_file: zipfile.ZipFile):
        self._zip = zip_file
        self._infos: List[zipfile.ZipInfo] = zip_file.infolist()
        self._log = get_logger(__name__)

    @classmethod
    def open(cls, source: Union[str, Path, BinaryIO]) -> "ZipArchive":
        """
        Open an archive from a path or a seekable binary file object.

        Raises:
            ArchiveNotFoundError: if `source` is a path that does not exist
            ArchiveFormatError: if `source` is not a readable ZIP archive
            ArchiveAccessError: if `source` exists but cannot be read
        """
        if isinstance(source, (str, Path)) and not Path(source).is_file():
            raise ArchiveNotFoundError(f"Archive not found: {source}")
        try:
            zip_file = zipfile.ZipFile(source, "r")
        except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError) as exc:
            raise ArchiveFormatError(f"Not a valid ZIP archive: {source}: {exc}") from exc
        except OSError as exc:
            raise ArchiveAccessError(f"Cannot read archive {source}: {exc}") from exc
        archive = cls(zip_file)
        archive._log.debug("Opened %s with %d entries", source, len(archive))
        return archive

    def __len__(self) -> int:
        return len(self._infos)

    def __enter__(self) -> "ZipArchive":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    def _info(self, index: int) -> zipfile.ZipInfo:
        if not 0 <= index < len(self._infos):
            raise EntryIndexError(
                f"Entry index {index} out of range for archive with {len(self._infos)} entries"
            )
        return self._infos[index]

    def entry_at(self, index: int) -> ArchiveEntry:
        info = self._info(index)
        return ArchiveEntry(
            index=index,
            declared_name=info.filename,
            is_directory=info.filename.endswith(("/", "\\")),
            size=info.file_size,
        )

    @contextmanager
    def read_stream(self, index: int) -> Iterator[BinaryIO]:
        """Open entry `index` for reading; decompression happens on read."""
        info = self._info(index)
        try:
            stream = self._zip.open(info, "r")
        except ARCHIVE_READ_ERRORS as exc:
            raise ArchiveFormatError(f"Cannot open entry {info.filename!r}: {exc}") from exc
        with stream:
            yield stream


__all__ = ["ARCHIVE_READ_ERRORS", "ArchiveEntry", "ArchiveReader", "ZipArchive"]
