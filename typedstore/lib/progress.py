"""Percentage display for long batch loops."""

import sys
from typing import TextIO


class Progress:
    """Prints ``message   0%`` and rewrites the percentage in place."""

    def __init__(self, message: str, total: int, stream: TextIO | None = None):
        self.message = message
        self.total = total
        self.current = 0
        self.last_printed = 0
        self.finished = False
        self._stream = stream if stream is not None else sys.stderr
        self._write(f"{message}   0%")

    def update(self, value: int | None = None) -> None:
        """Move to value (clamped to total), or advance by one."""
        if value is None:
            value = self.current + 1
        self.current = min(value, self.total)

        percent = self.current * 100 // self.total if self.total else 100
        if percent != self.last_printed:
            self.last_printed = percent
            self._write(f"\b\b\b\b{percent:>3}%")

    def finish(self) -> None:
        if self.finished:
            return
        self.finished = True
        if self.last_printed == 100:
            self._write("\n")
        else:
            self._write("\b\b\b\b100%\n")

    def __enter__(self) -> "Progress":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()
