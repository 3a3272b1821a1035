"""
Extraction engine for zip-unpack.

An extraction run has two phases:
* planning - every entry name is resolved below the destination root;
  entries with unsafe names are recorded as skipped and never touched
* execution - directory entries are created first, then file entries are
  streamed to disk, each phase in archive order

Filesystem and decompression failures abort the run immediately. Whatever
was already written stays on disk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from zip_unpack.common.constants import DEFAULT_CHUNK_SIZE
from zip_unpack.common.errors import ArchiveFormatError, FilesystemError
from zip_unpack.common.logging_config import get_logger
from zip_unpack.core.archive import ARCHIVE_READ_ERRORS, ArchiveReader, ZipArchive
from zip_unpack.core.paths import ResolvedTarget, is_within, resolve
from zip_unpack.core.progress import NullProgress, ProgressSink

_log = get_logger(__name__)


@dataclass(frozen=True)
class PlannedEntry:
    index: int
    declared_name: str
    target: ResolvedTarget


@dataclass(frozen=True)
class SkippedEntry:
    index: int
    declared_name: str
    reason: str = "unsafe name"


@dataclass
class ExtractionPlan:
    """Resolved entries in archive order, plus the entries left out."""

    destination_root: Path
    entries: List[PlannedEntry] = field(default_factory=list)
    skipped: List[SkippedEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def directories(self) -> List[PlannedEntry]:
        return [entry for entry in self.entries if entry.target.is_directory]

    @property
    def files(self) -> List[PlannedEntry]:
        return [entry for entry in self.entries if not entry.target.is_directory]


@dataclass
class ExtractionSummary:
    """Outcome of a successful extraction run."""

    directories: int = 0
    files: int = 0
    skipped: List[SkippedEntry] = field(default_factory=list)

    @property
    def written(self) -> int:
        return self.directories + self.files


def default_destination(archive_path: Union[str, Path]) -> Path:
    """Sibling directory named after the archive without its extension."""
    path = Path(archive_path)
    return path.with_name(path.stem)


def build_plan(archive: ArchiveReader, destination_root: Union[str, Path]) -> ExtractionPlan:
    """Resolve every entry of `archive` without touching the filesystem."""
    plan = ExtractionPlan(Path(destination_root))
    for index in range(len(archive)):
        entry = archive.entry_at(index)
        target = resolve(entry.declared_name, plan.destination_root)
        if target is None:
            _log.warning("Skipping entry %d with unsafe name %r", index, entry.declared_name)
            plan.skipped.append(SkippedEntry(index, entry.declared_name))
            continue
        plan.entries.append(PlannedEntry(index, entry.declared_name, target))
    return plan


def _make_dirs(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"Failed to create directory {path}: {exc}", path) from exc


def _contained(path: Path, real_root: Path) -> bool:
    # Follows symlinks already present under the destination.
    return is_within(Path(os.path.realpath(path)), real_root)


def _copy_entry(archive: ArchiveReader, planned: PlannedEntry, chunk_size: int) -> None:
    output_path = planned.target.output_path
    with archive.read_stream(planned.index) as source:
        try:
            destination = open(output_path, "wb")
        except OSError as exc:
            raise FilesystemError(f"Failed to create file {output_path}: {exc}", output_path) from exc
        with destination:
            while True:
                try:
                    chunk = source.read(chunk_size)
                except ARCHIVE_READ_ERRORS as exc:
                    raise ArchiveFormatError(
                        f"Corrupt data in entry {planned.index} ({output_path.name}): {exc}"
                    ) from exc
                if not chunk:
                    break
                try:
                    destination.write(chunk)
                except OSError as exc:
                    raise FilesystemError(
                        f"Failed to write file {output_path}: {exc}", output_path
                    ) from exc


def execute_plan(
    archive: ArchiveReader,
    plan: ExtractionPlan,
    progress: Optional[ProgressSink] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> ExtractionSummary:
    """Create the plan's directories, then write its files."""
    progress = progress or NullProgress()
    summary = ExtractionSummary(skipped=list(plan.skipped))

    _make_dirs(plan.destination_root)
    real_root = Path(os.path.realpath(plan.destination_root))

    progress.start(len(plan))
    try:
        for planned in plan.directories:
            path = planned.target.output_path
            if not _contained(path, real_root):
                _log.warning("Skipping directory %s: resolves outside %s", path, real_root)
                summary.skipped.append(
                    SkippedEntry(planned.index, planned.declared_name, "escapes via symlink")
                )
                continue
            _make_dirs(path)
            _log.debug("Created directory %s", path)
            summary.directories += 1
            progress.increment(str(path.relative_to(plan.destination_root)))

        for planned in plan.files:
            path = planned.target.output_path
            if not _contained(path, real_root):
                _log.warning("Skipping file %s: resolves outside %s", path, real_root)
                summary.skipped.append(
                    SkippedEntry(planned.index, planned.declared_name, "escapes via symlink")
                )
                continue
            _make_dirs(path.parent)
            _copy_entry(archive, planned, chunk_size)
            _log.debug("Wrote %s", path)
            summary.files += 1
            progress.increment(str(path.relative_to(plan.destination_root)))

        progress.finish(f"Extracted {summary.written} entries")
    finally:
        progress.close()
    return summary


def extract(
    archive: ArchiveReader,
    destination_root: Union[str, Path],
    progress: Optional[ProgressSink] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> ExtractionSummary:
    """
    Extract every safely named entry of `archive` below `destination_root`.

    Args:
        archive: Open archive; owned by the caller and left open
        destination_root: Output directory, created if missing
        progress: Optional progress sink
        chunk_size: Copy buffer size in bytes

    Returns:
        Summary with the number of directories and files written

    Raises:
        ArchiveFormatError: an entry's data could not be decompressed
        FilesystemError: a directory or file could not be created or written
        EntryIndexError: the archive reported fewer entries than its length
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    plan = build_plan(archive, destination_root)
    _log.debug(
        "Planned %d entries (%d skipped) into %s",
        len(plan), len(plan.skipped), plan.destination_root,
    )
    summary = execute_plan(archive, plan, progress, chunk_size)
    _log.info(
        "Extracted %d entries (%d directories, %d files) into %s; skipped %d",
        summary.written, summary.directories, summary.files,
        plan.destination_root, len(summary.skipped),
    )
    return summary


def extract_path(
    archive_path: Union[str, Path],
    destination_root: Union[str, Path, None] = None,
    progress: Optional[ProgressSink] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> ExtractionSummary:
    """Open the archive at `archive_path`, extract it and close it again."""
    destination = Path(destination_root) if destination_root else default_destination(archive_path)
    with ZipArchive.open(archive_path) as archive:
        return extract(archive, destination, progress, chunk_size)


__all__ = [
    "PlannedEntry",
    "SkippedEntry",
    "ExtractionPlan",
    "ExtractionSummary",
    "default_destination",
    "build_plan",
    "execute_plan",
    "extract",
    "extract_path",
]
