"""
Core render engine shared by every indicator.

This package holds the lifecycle state machine, the lock-protected render
state, terminal width probing and resize watching. Indicator types build on
Indicator rather than managing threads themselves.
"""

from .indicator import Indicator
from .output_sink import OutputSink
from .render_state import Lifecycle, RenderState, clamp_progress
from .resize_handler import ResizeWatcher, setup_resize_handler
from .width_probe import WidthProbe, get_terminal_size

__all__ = [
    "Indicator",
    "Lifecycle",
    "OutputSink",
    "RenderState",
    "ResizeWatcher",
    "WidthProbe",
    "clamp_progress",
    "get_terminal_size",
    "setup_resize_handler",
]
