"""
Lock-protected render state shared by the caller and the render threads.

Every read and write of an indicator's mutable fields goes through the
RenderState lock. The lock is re-entrant so an indicator can hold it across
a store-and-draw sequence, which keeps renders in the same order as the
updates that produced them.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Optional


class Lifecycle(Enum):
    """Lifecycle of an indicator."""

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


def clamp_progress(value: float) -> float:
    """Constrain a progress fraction to [0.0, 1.0]."""
    return max(0.0, min(1.0, float(value)))


class RenderState:
    """Mutable fields of one indicator, serialized through a single lock."""

    def __init__(self, width: int = 0, clamp: bool = False) -> None:
        """
        Initialize the state.

        Args:
            width: Initial track width in cells
            clamp: Store values clamped to [0, 1] (bars) instead of raw counters
        """
        self._lock = threading.RLock()
        self._clamp = clamp
        self._value: float = 0.0
        self._width = width
        self._lifecycle = Lifecycle.IDLE
        self._started_at: Optional[float] = None

    @property
    def lock(self) -> threading.RLock:
        """The lock guarding every field of this state."""
        return self._lock

    def get(self) -> float:
        with self._lock:
            return self._value

    def set(self, value: float) -> float:
        """Store a new value and return what was actually stored."""
        if self._clamp:
            value = clamp_progress(value)
        with self._lock:
            self._value = value
            return value

    def advance(self, modulo: int) -> int:
        """
        Return the current frame index and move the counter one frame on.

        Args:
            modulo: Length of the frame sequence

        Returns:
            Index into the frame sequence for this tick
        """
        with self._lock:
            index = int(self._value) % modulo
            self._value += 1
            return index

    def get_width(self) -> int:
        with self._lock:
            return self._width

    def set_width(self, width: int) -> None:
        with self._lock:
            self._width = width

    @property
    def lifecycle(self) -> Lifecycle:
        with self._lock:
            return self._lifecycle

    @property
    def started_at(self) -> Optional[float]:
        with self._lock:
            return self._started_at

    def is_running(self) -> bool:
        with self._lock:
            return self._lifecycle is Lifecycle.RUNNING

    def is_started(self) -> bool:
        """True once started, until the next reset."""
        with self._lock:
            return self._lifecycle is not Lifecycle.IDLE

    def is_stopped(self) -> bool:
        with self._lock:
            return self._lifecycle is Lifecycle.STOPPED

    def mark_running(self, now: float) -> None:
        """Enter RUNNING with a zeroed value and a fresh start timestamp."""
        with self._lock:
            self._value = 0.0
            self._started_at = now
            self._lifecycle = Lifecycle.RUNNING

    def mark_stopped(self) -> None:
        with self._lock:
            self._lifecycle = Lifecycle.STOPPED

    def reset(self) -> None:
        """Return to a fresh IDLE state."""
        with self._lock:
            self._value = 0.0
            self._started_at = None
            self._lifecycle = Lifecycle.IDLE
