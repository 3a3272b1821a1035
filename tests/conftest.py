"""Test configuration helpers: stable temp directory on WSL, archive builders."""

from __future__ import annotations

import os
import platform
import struct
import sys
import tempfile
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def _is_wsl() -> bool:
    release = platform.release().lower()
    version = platform.version().lower()
    return "microsoft" in release or "microsoft" in version


if _is_wsl() and os.path.isdir("/tmp"):
    os.environ["TMPDIR"] = "/tmp"
    os.environ["TEMP"] = "/tmp"
    os.environ["TMP"] = "/tmp"
    tempfile.tempdir = "/tmp"


def write_zip(path: Path, entries, compression=zipfile.ZIP_DEFLATED) -> Path:
    """Write `entries` (name, content) pairs to a ZIP file at `path`."""
    with zipfile.ZipFile(path, "w", compression=compression) as zf:
        for name, content in entries:
            zf.writestr(zipfile.ZipInfo(name), content, compress_type=compression)
    return path


@pytest.fixture
def make_zip(tmp_path):
    def _make(entries, name="archive.zip", compression=zipfile.ZIP_DEFLATED):
        return write_zip(tmp_path / name, entries, compression)
    return _make


def flip_entry_data(archive_path: Path, entry_name: str) -> None:
    """Invert every byte of an entry's compressed data in place."""
    with zipfile.ZipFile(archive_path) as zf:
        info = zf.getinfo(entry_name)
    raw = bytearray(archive_path.read_bytes())
    name_len, extra_len = struct.unpack("<HH", raw[info.header_offset + 26:info.header_offset + 30])
    data_start = info.header_offset + 30 + name_len + extra_len
    for offset in range(data_start, data_start + info.compress_size):
        raw[offset] ^= 0xFF
    archive_path.write_bytes(bytes(raw))


@pytest.fixture
def corrupt_entry():
    return flip_entry_data
