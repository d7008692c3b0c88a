"""
Terminal width queries.

Failures (output redirected, no controlling terminal) never reach the
caller; they degrade to a fixed fallback width instead.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional, Tuple

from ..config.layout import (
    ETA_RESERVE,
    FALLBACK_WIDTH,
    MIN_TRACK_WIDTH,
    PERCENT_RESERVE,
    TRACK_MARGIN,
)

logger = logging.getLogger(__name__)


def get_terminal_size(
    fallback: Tuple[int, int] = (FALLBACK_WIDTH, 24), stream: Optional[Any] = None
) -> Tuple[int, int]:
    """
    Get the current terminal size.

    Args:
        fallback: Returned if the terminal size cannot be determined
        stream: Stream attached to the terminal (defaults to stdout)

    Returns:
        Tuple of (columns, rows)
    """
    size = query_terminal_size(stream)
    return size if size is not None else fallback


def query_terminal_size(stream: Optional[Any] = None) -> Optional[Tuple[int, int]]:
    """Return (columns, rows), or None when the stream is not a terminal."""
    stream = stream if stream is not None else sys.stdout
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return None
    if size.columns <= 0:
        return None
    return (size.columns, size.lines)


class WidthProbe:
    """Measure how many cells an indicator may use on the current line."""

    def __init__(self, stream: Optional[Any] = None, fallback: int = FALLBACK_WIDTH):
        self._stream = stream
        self._fallback = fallback

    def query(self) -> Optional[int]:
        """Return the terminal column count, or None if it is unavailable."""
        size = query_terminal_size(self._stream)
        if size is None:
            return None
        return size[0]

    def measure(self) -> int:
        """Return the terminal column count, falling back when unavailable."""
        columns = self.query()
        if columns is None:
            logger.debug(f"Terminal width unavailable, using {self._fallback}")
            return self._fallback
        return columns

    def track_width(self, show_percent: bool = False, show_eta: bool = False) -> int:
        """
        Compute the usable bar track width.

        Args:
            show_percent: Reserve room for the percentage suffix
            show_eta: Reserve room for the ETA suffix

        Returns:
            Track width in cells, never below the minimum
        """
        columns = self.query()
        if columns is None:
            return self._fallback

        reserved = TRACK_MARGIN
        if show_percent:
            reserved += PERCENT_RESERVE
        if show_eta:
            reserved += ETA_RESERVE
        return max(columns - reserved, MIN_TRACK_WIDTH)
