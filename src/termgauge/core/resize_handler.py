"""
Terminal resize handling.

This module installs one process-wide SIGWINCH handler where available and
fans each notification out to the ResizeWatcher threads that are listening.
The signal handler itself only sets events; the width query and the redraw
happen on the watcher threads.
"""

from __future__ import annotations

import logging
import signal
import sys
import threading
from typing import Callable, FrozenSet, Optional

logger = logging.getLogger(__name__)

# Replaced wholesale under _subscribers_lock, read without it
_subscribers: FrozenSet[threading.Event] = frozenset()
_subscribers_lock = threading.Lock()
_handler_installed = False


def _dispatch() -> None:
    # Runs inside the signal handler; must not take _subscribers_lock
    for event in _subscribers:
        event.set()


def setup_resize_handler() -> bool:
    """
    Install the shared SIGWINCH handler, chaining to any previous handler.

    Returns:
        True if resize notifications will be delivered
    """
    global _handler_installed

    if sys.platform == "win32":
        return False
    if not hasattr(signal, "SIGWINCH"):
        return False
    if _handler_installed:
        return True

    previous = signal.getsignal(signal.SIGWINCH)

    def handler(signum: int, frame: object) -> None:
        if callable(previous):
            previous(signum, frame)
        _dispatch()

    try:
        signal.signal(signal.SIGWINCH, handler)
    except ValueError:
        # signal.signal only works from the main thread
        logger.debug("Resize handler not installed: not on the main thread")
        return False

    _handler_installed = True
    return True


def subscribe(event: threading.Event) -> bool:
    """Register an event to be set on every resize notification."""
    global _subscribers

    with _subscribers_lock:
        _subscribers = _subscribers | {event}
    return setup_resize_handler()


def unsubscribe(event: threading.Event) -> None:
    global _subscribers

    with _subscribers_lock:
        _subscribers = _subscribers - {event}


class ResizeWatcher:
    """
    Background thread that redraws an indicator after terminal resizes.

    The watcher sleeps until a resize notification arrives, measures the new
    width and hands it to the owner. It exits once the owner's cancellation
    event is set; close() blocks until that has happened.
    """

    def __init__(
        self,
        measure: Callable[[], int],
        on_resize: Callable[[int], None],
        cancel: threading.Event,
        name: str = "termgauge-resize",
    ) -> None:
        """
        Initialize the watcher.

        Args:
            measure: Returns the width to apply after a resize
            on_resize: Called with the new width on the watcher thread
            cancel: Cancellation event shared with the owning indicator
            name: Thread name
        """
        self._measure = measure
        self._on_resize = on_resize
        self._cancel = cancel
        self._wakeup = threading.Event()
        self._thread = threading.Thread(target=self._watch, name=name, daemon=True)
        self.signal_enabled = False

    def start(self) -> None:
        self.signal_enabled = subscribe(self._wakeup)
        self._thread.start()

    def notify(self) -> None:
        """Deliver a resize notification to this watcher only."""
        self._wakeup.set()

    def close(self) -> None:
        """Wake the watcher and wait until it has observed cancellation."""
        unsubscribe(self._wakeup)
        self._wakeup.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def _watch(self) -> None:
        while True:
            self._wakeup.wait()
            self._wakeup.clear()
            if self._cancel.is_set():
                return
            width = self._measure()
            logger.debug(f"Terminal resized, new width {width}")
            self._on_resize(width)
