"""
Lifecycle and background-thread management shared by bars and spinners.

An Indicator moves IDLE -> RUNNING -> STOPPED and may be restarted from
STOPPED. Each start creates a fresh cancellation event; stop sets it, waits
for every background thread of that cycle to exit and only then clears the
line, so output printed after stop() returns never interleaves with a render.
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future, wait
from typing import Any, Callable, List, Optional, Tuple

from rich.cells import cell_len

from ..errors import IndicatorTimeoutError
from .output_sink import OutputSink
from .render_state import Lifecycle, RenderState
from .resize_handler import ResizeWatcher

logger = logging.getLogger(__name__)


def call_in_thread(func: Callable[..., Any], *args: Any, name: str) -> Future:
    """Run func on a new daemon thread and return a Future for its outcome."""
    future: Future = Future()

    def _call() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = func(*args)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)

    threading.Thread(target=_call, name=name, daemon=True).start()
    return future


class Indicator:
    """Base class owning the start/stop state machine of one indicator."""

    thread_prefix = "termgauge"

    def __init__(
        self, state: RenderState, sink: OutputSink, auto_width: bool = False
    ) -> None:
        self._state = state
        self._sink = sink
        self._auto_width = auto_width

        self._transition_lock = threading.Lock()
        self._cancel: Optional[threading.Event] = None
        self._workers: List[threading.Thread] = []
        self._watcher: Optional[ResizeWatcher] = None
        self._widest = 0

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def lifecycle(self) -> Lifecycle:
        return self._state.lifecycle

    def is_running(self) -> bool:
        return self._state.is_running()

    def is_started(self) -> bool:
        return self._state.is_started()

    def is_stopped(self) -> bool:
        return self._state.is_stopped()

    def start(self) -> None:
        """Start the indicator; a no-op while it is already running."""
        with self._transition_lock:
            with self._state.lock:
                if self._state.is_running():
                    return
                self._sink.clear(self._clear_width())
                self._widest = 0
                self._state.mark_running(time.monotonic())
                if self._auto_width:
                    self._state.set_width(self._measure_width())
                cancel = threading.Event()
                self._cancel = cancel

            self._workers = self._launch(cancel)
            if self._auto_width:
                watcher = ResizeWatcher(
                    self._measure_width,
                    self._apply_width,
                    cancel,
                    name=f"{self._thread_name()}-resize",
                )
                watcher.start()
                self._watcher = watcher
            logger.debug(f"{self._thread_name()} started")

    def stop(self) -> None:
        """
        Stop the indicator and clear its line.

        Blocks until the background threads of this run have exited. Calling
        stop on an idle or stopped indicator does nothing.
        """
        with self._transition_lock:
            self._stop_locked()

    def _stop_locked(self) -> None:
        """Tear down the current run. Callers hold the transition lock."""
        with self._state.lock:
            if not self._state.is_running():
                return
            # Updates arriving from here on are discarded
            self._state.mark_stopped()
            cancel = self._cancel
            workers, self._workers = self._workers, []
            watcher, self._watcher = self._watcher, None
            self._cancel = None

        if cancel is not None:
            cancel.set()
        if watcher is not None:
            watcher.close()
        current = threading.current_thread()
        for worker in workers:
            if worker is not current:
                worker.join()

        with self._state.lock:
            self._sink.clear(self._clear_width())
        logger.debug(f"{self._thread_name()} stopped")

    def restart(self) -> None:
        self.stop()
        self.start()

    def reset(self) -> None:
        """Stop if running, then return to a fresh idle state."""
        with self._transition_lock:
            self._stop_locked()
            self._state.reset()
            self._widest = 0

    def run(self, fn: Callable[..., Any]) -> Any:
        """
        Show the indicator while fn runs on a separate thread.

        Args:
            fn: Work to perform; bars pass it their progress setter

        Returns:
            Whatever fn returns; exceptions from fn propagate after stop
        """
        self.start()
        try:
            future = call_in_thread(
                fn, *self._run_args(), name=f"{self._thread_name()}-run"
            )
            return future.result()
        finally:
            self.stop()

    def run_with_timeout(self, fn: Callable[..., Any], timeout: float) -> Any:
        """
        Like run, but give up waiting after timeout seconds.

        fn itself is not cancelled; only the indicator is stopped.

        Raises:
            IndicatorTimeoutError: if fn has not finished within timeout
        """
        self.start()
        try:
            future = call_in_thread(
                fn, *self._run_args(), name=f"{self._thread_name()}-run"
            )
            done, _ = wait([future], timeout=timeout)
            if not done:
                raise IndicatorTimeoutError(timeout)
            return future.result()
        finally:
            self.stop()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _emit(self, text: str) -> None:
        """Write one rendered line. Callers hold the state lock."""
        self._widest = max(self._widest, cell_len(text))
        self._sink.write_frame(text)

    def _thread_name(self) -> str:
        return f"{self.thread_prefix}-{id(self):x}"

    def _launch(self, cancel: threading.Event) -> List[threading.Thread]:
        """Start the animation threads for one run and return them."""
        return []

    def _run_args(self) -> Tuple[Any, ...]:
        return ()

    def _clear_width(self) -> int:
        return self._widest

    def _measure_width(self) -> int:
        return self._state.get_width()

    def _apply_width(self, width: int) -> None:
        with self._state.lock:
            self._state.set_width(width)
