from __future__ import annotations

import io
import logging

from zip_unpack.common.config import UnpackSettings, env_bool, env_int
from zip_unpack.common.constants import DEFAULT_CHUNK_SIZE
from zip_unpack.common.logging_config import configure_logging, get_logger
from zip_unpack.core.progress import NullProgress, TqdmProgress, make_progress


def test_tqdm_progress_writes_bar_and_message():
    stream = io.StringIO()
    progress = TqdmProgress(file=stream)

    progress.start(2)
    progress.increment("a.txt")
    progress.increment("dir/b.txt")
    progress.finish("Extracted 2 entries")

    output = stream.getvalue()
    assert "2/2" in output
    assert "Extracted 2 entries" in output


def test_tqdm_progress_ignores_calls_before_start():
    stream = io.StringIO()
    progress = TqdmProgress(file=stream)
    progress.increment("x")
    progress.finish("done")
    assert stream.getvalue() == ""


def test_make_progress_selects_sink():
    assert isinstance(make_progress(False), NullProgress)
    assert isinstance(make_progress(True, file=io.StringIO()), TqdmProgress)


def test_settings_defaults():
    settings = UnpackSettings.from_env({})
    assert settings.progress is False
    assert settings.chunk_size == DEFAULT_CHUNK_SIZE
    assert settings.log_level is None


def test_settings_from_environment():
    settings = UnpackSettings.from_env({
        "ZIP_UNPACK_PROGRESS": "yes",
        "ZIP_UNPACK_CHUNK_SIZE": "4096",
        "ZIP_UNPACK_LOG_LEVEL": "debug",
    })
    assert settings.progress is True
    assert settings.chunk_size == 4096
    assert settings.log_level == "debug"


def test_settings_reject_bad_chunk_size():
    assert UnpackSettings.from_env({"ZIP_UNPACK_CHUNK_SIZE": "-5"}).chunk_size == DEFAULT_CHUNK_SIZE
    assert UnpackSettings.from_env({"ZIP_UNPACK_CHUNK_SIZE": "big"}).chunk_size == DEFAULT_CHUNK_SIZE


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("FLAG", " On ")
    monkeypatch.setenv("NUM", "12")
    assert env_bool("FLAG") is True
    assert env_bool("UNSET_FLAG", default=True) is True
    assert env_int("NUM", 3) == 12
    assert env_int("UNSET_NUM", 3) == 3


def test_configure_logging_respects_environment(monkeypatch):
    monkeypatch.setenv("ZIP_UNPACK_LOG_LEVEL", "warning")
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, root.handlers[:]
    try:
        configure_logging(force=True)
        assert root.level == logging.WARNING
        assert get_logger().name == "zip_unpack"
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)


def test_tqdm_progress_close_without_finish():
    stream = io.StringIO()
    progress = TqdmProgress(file=stream)

    progress.start(3)
    progress.increment("a.txt")
    progress.close()
    progress.close()

    assert "1/3" in stream.getvalue()
    assert progress._bar is None
