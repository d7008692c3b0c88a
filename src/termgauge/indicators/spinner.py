"""
Indeterminate spinner animated on a fixed interval.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Generator, List, Optional

from ..config import SpinnerConfig
from ..core.indicator import Indicator
from ..core.output_sink import OutputSink
from ..core.render_state import RenderState
from .frames import spinner_frame


class Spinner(Indicator):
    """Terminal loading spinner running on its own thread."""

    thread_prefix = "termgauge-spinner"

    def __init__(
        self,
        config: Optional[SpinnerConfig] = None,
        *,
        sink: Optional[OutputSink] = None,
        **options: Any,
    ) -> None:
        """
        Initialize the spinner.

        Args:
            config: Base configuration (defaults to SpinnerConfig())
            sink: Shared output sink; built from config.writer when omitted
            **options: SpinnerConfig fields overriding the base configuration
        """
        config = config or SpinnerConfig()
        if options:
            config = config.with_options(**options)
        self.config = config
        self._frames = config.frames
        self._interval = config.frame_interval
        self._prefix = config.prefix
        self._suffix = config.suffix
        super().__init__(RenderState(), sink or OutputSink(config.writer))

    @property
    def prefix(self) -> str:
        with self._state.lock:
            return self._prefix

    @property
    def suffix(self) -> str:
        with self._state.lock:
            return self._suffix

    @property
    def frame_index(self) -> int:
        """Index of the frame the next tick will show."""
        return int(self._state.get()) % len(self._frames)

    def set_prefix(self, prefix: str) -> None:
        """Update the text before the glyph; takes effect on the next frame."""
        with self._state.lock:
            self._prefix = prefix

    def set_suffix(self, suffix: str) -> None:
        with self._state.lock:
            self._suffix = suffix

    def _launch(self, cancel: threading.Event) -> List[threading.Thread]:
        thread = threading.Thread(
            target=self._animate,
            args=(cancel,),
            name=self._thread_name(),
            daemon=True,
        )
        thread.start()
        return [thread]

    def _animate(self, cancel: threading.Event) -> None:
        while not cancel.wait(self._interval):
            self._tick()

    def _tick(self) -> None:
        with self._state.lock:
            if not self._state.is_running():
                return
            index = self._state.advance(len(self._frames))
            self._emit(spinner_frame(self._frames, index, self._prefix, self._suffix))

    def _clear_width(self) -> int:
        width = len(self._prefix) + len(self._suffix) + 1
        return max(width, super()._clear_width())


def spinner_with_message(message: str, **options: Any) -> Spinner:
    """Create a spinner whose prefix is message."""
    return Spinner(prefix=message + " ", **options)


def quick_spinner(message: str, **options: Any):
    """
    Start a spinner showing message and return its stop function.

    Usage:
        stop = quick_spinner("Loading")
        load()
        stop()
    """
    s = spinner_with_message(message, **options)
    s.start()
    return s.stop


def perform(message: str, fn, **options: Any) -> Any:
    """Run fn while a spinner shows message."""
    return spinner_with_message(message, **options).run(fn)


@contextmanager
def spinner(message: str = "Working", **options: Any) -> Generator[Spinner, None, None]:
    """
    Context manager for spinner usage.

    Args:
        message: Text shown before the spinner glyph
        **options: SpinnerConfig overrides

    Yields:
        The running spinner
    """
    s = spinner_with_message(message, **options)
    s.start()
    try:
        yield s
    finally:
        s.stop()
