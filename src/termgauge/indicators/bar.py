"""
Determinate progress bar.

A bar does not animate on a timer. Every set_progress call stores the value
and redraws synchronously on the calling thread; the only background thread
is the resize watcher of auto-width bars, which redraws the last value at the
new width.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Tuple

from ..config import STYLE_DEFAULT, BarConfig
from ..config.layout import CLEAR_PADDING, ETA_RESERVE, PERCENT_RESERVE
from ..core.indicator import Indicator
from ..core.output_sink import OutputSink
from ..core.render_state import RenderState, clamp_progress
from ..core.width_probe import WidthProbe
from .frames import format_eta, format_percent, render_track


class Bar(Indicator):
    """Terminal progress bar, safe to update from any thread."""

    thread_prefix = "termgauge-bar"

    def __init__(
        self,
        config: Optional[BarConfig] = None,
        *,
        sink: Optional[OutputSink] = None,
        probe: Optional[WidthProbe] = None,
        **options: Any,
    ) -> None:
        """
        Initialize the bar.

        Args:
            config: Base configuration (defaults to STYLE_DEFAULT)
            sink: Shared output sink; built from config.writer when omitted
            probe: Terminal width probe for auto-width bars
            **options: BarConfig fields overriding the base configuration
        """
        config = config or STYLE_DEFAULT
        if options:
            config = config.with_options(**options)
        self.config = config
        self._probe = probe or WidthProbe()

        state = RenderState(clamp=True)
        super().__init__(state, sink or OutputSink(config.writer), config.auto_width)
        state.set_width(self._measure_width())

    @property
    def width(self) -> int:
        """Current track width in cells."""
        return self._state.get_width()

    def set_progress(self, progress: float) -> None:
        """
        Set completion to progress (clamped to [0, 1]) and redraw.

        Ignored unless the bar is running.
        """
        with self._state.lock:
            if not self._state.is_running():
                return
            value = self._state.set(clamp_progress(progress))
            self._draw(value)

    def increment(self, delta: float) -> None:
        """Advance progress by delta."""
        self.set_progress(self._state.get() + delta)

    def get_progress(self) -> float:
        return self._state.get()

    def render(self, progress: Optional[float] = None) -> str:
        """Compose the visible line for progress (defaults to the current value)."""
        with self._state.lock:
            if progress is None:
                progress = self._state.get()
            progress = clamp_progress(progress)
            line = render_track(
                self._state.get_width(),
                progress,
                self.config.filled_char,
                self.config.empty_char,
            )
            if self.config.show_percent:
                line += format_percent(progress)
            if self.config.show_eta:
                started_at = self._state.started_at
                elapsed = time.monotonic() - started_at if started_at else 0.0
                line += f" ETA: {format_eta(elapsed, progress)}"
            return line

    def _draw(self, progress: float) -> None:
        self._emit(self.render(progress))

    def _run_args(self) -> Tuple[Callable[[float], None]]:
        return (self.set_progress,)

    def _clear_width(self) -> int:
        width = self._state.get_width() + CLEAR_PADDING
        if self.config.show_percent:
            width += PERCENT_RESERVE
        if self.config.show_eta:
            width += ETA_RESERVE
        return max(width, super()._clear_width())

    def _measure_width(self) -> int:
        if not self.config.auto_width:
            return self.config.width
        return self._probe.track_width(self.config.show_percent, self.config.show_eta)

    def _apply_width(self, width: int) -> None:
        with self._state.lock:
            if not self._state.is_running():
                return
            self._state.set_width(width)
            self._draw(self._state.get())

    def handle_resize(self) -> None:
        """Re-measure the terminal and redraw the current value at the new width."""
        self._apply_width(self._measure_width())


def quick_bar(steps: int, fn: Callable[[Callable[[], None]], Any], **options: Any) -> Any:
    """
    Run fn with a bar that advances one step per call of the callable it receives.

    Args:
        steps: Number of steps that make up 100%
        fn: Work function; receives a step() callable
        **options: BarConfig overrides

    Returns:
        Whatever fn returns
    """
    if steps <= 0:
        raise ValueError("steps must be positive")

    bar = Bar(**options)
    done = 0

    def step() -> None:
        nonlocal done
        done += 1
        bar.set_progress(done / steps)

    with bar:
        return fn(step)


def download_progress(
    total_bytes: int, fn: Callable[[Callable[[int], None]], Any], **options: Any
) -> Any:
    """
    Run fn with an ETA-enabled bar fed by byte counts.

    Args:
        total_bytes: Expected size of the transfer
        fn: Work function; receives a downloaded(n_bytes) callable
        **options: BarConfig overrides

    Returns:
        Whatever fn returns
    """
    if total_bytes <= 0:
        raise ValueError("total_bytes must be positive")

    options.setdefault("show_eta", True)
    bar = Bar(**options)
    received = 0

    def downloaded(n_bytes: int) -> None:
        nonlocal received
        received += n_bytes
        bar.set_progress(received / total_bytes)

    with bar:
        return fn(downloaded)
