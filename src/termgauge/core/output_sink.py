"""
Line-oriented output for in-place terminal redraws.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Optional


class OutputSink:
    """
    Serialize writes to one physical terminal.

    Indicators that share a screen (for example the members of a registry)
    share one sink, so their partial writes never interleave.
    """

    def __init__(self, writer: Optional[Any] = None) -> None:
        self._writer = writer
        self._lock = threading.Lock()

    @property
    def writer(self) -> Any:
        """The destination stream; stdout is looked up at write time."""
        return self._writer if self._writer is not None else sys.stdout

    def write_frame(self, text: str) -> None:
        """Redraw the current line with text, leaving the cursor on it."""
        self._write("\r" + text)

    def clear(self, width: int) -> None:
        """Blank width cells of the current line and return to column zero."""
        self._write("\r" + " " * width + "\r")

    def println(self, text: str) -> None:
        """Write a complete line of ordinary output."""
        self._write(text + "\n")

    def _write(self, data: str) -> None:
        with self._lock:
            writer = self.writer
            writer.write(data)
            flush = getattr(writer, "flush", None)
            if flush is not None:
                flush()
