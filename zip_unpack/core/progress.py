"""Progress reporting sinks.

The extractor talks to a sink through ``start(total)``, ``increment(label)``
and ``finish(message)``, and calls ``close()`` once the run ends, whether it
finished or aborted. Sinks observe the run and never influence it.
"""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

from tqdm import tqdm


class ProgressSink(Protocol):
    def start(self, total: int) -> None: ...

    def increment(self, label: str) -> None: ...

    def finish(self, message: str) -> None: ...

    def close(self) -> None: ...


class NullProgress:
    """Sink used when progress reporting is disabled."""

    def start(self, total: int) -> None:
        pass

    def increment(self, label: str) -> None:
        pass

    def finish(self, message: str) -> None:
        pass

    def close(self) -> None:
        pass


class TqdmProgress:
    """Terminal progress bar rendered with tqdm."""

    def __init__(self, file: Optional[TextIO] = None, description: str = "Extracting"):
        self._file = file or sys.stderr
        self._description = description
        self._bar: Optional[tqdm] = None

    def start(self, total: int) -> None:
        self._bar = tqdm(total=total, desc=self._description, unit="entry", file=self._file)

    def increment(self, label: str) -> None:
        if self._bar is None:
            return
        self._bar.set_postfix_str(label, refresh=False)
        self._bar.update(1)

    def finish(self, message: str) -> None:
        if self._bar is None:
            return
        self._bar.set_postfix_str("", refresh=False)
        self._bar.close()
        tqdm.write(message, file=self._file)
        self._bar = None

    def close(self) -> None:
        """Close the bar without a message; no-op after `finish`."""
        if self._bar is None:
            return
        self._bar.close()
        self._bar = None


def make_progress(enabled: bool, file: Optional[TextIO] = None) -> ProgressSink:
    """Return a tqdm sink when `enabled`, otherwise a no-op sink."""
    if enabled:
        return TqdmProgress(file=file)
    return NullProgress()


__all__ = ["ProgressSink", "NullProgress", "TqdmProgress", "make_progress"]
