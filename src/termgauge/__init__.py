"""
termgauge: thread-safe terminal progress bars and spinners.
"""

from .config import (
    FRAMES_ARROWS,
    FRAMES_BOUNCE,
    FRAMES_DOTS,
    FRAMES_LINES,
    FRAMES_PROGRESS,
    STYLE_BLOCKS,
    STYLE_DEFAULT,
    STYLE_DOTS,
    STYLE_MINIMAL,
    BarConfig,
    SpinnerConfig,
)
from .core import Lifecycle, OutputSink, WidthProbe
from .errors import DuplicateIndicatorError, IndicatorTimeoutError, TermgaugeError
from .indicators import (
    Bar,
    Spinner,
    download_progress,
    perform,
    quick_bar,
    quick_spinner,
    spinner,
    spinner_with_message,
)
from .managers import LabeledIndicator, MultiBar, MultiSpinner

__version__ = "0.1.0"

__all__ = [
    "Bar",
    "BarConfig",
    "DuplicateIndicatorError",
    "FRAMES_ARROWS",
    "FRAMES_BOUNCE",
    "FRAMES_DOTS",
    "FRAMES_LINES",
    "FRAMES_PROGRESS",
    "IndicatorTimeoutError",
    "LabeledIndicator",
    "Lifecycle",
    "MultiBar",
    "MultiSpinner",
    "OutputSink",
    "STYLE_BLOCKS",
    "STYLE_DEFAULT",
    "STYLE_DOTS",
    "STYLE_MINIMAL",
    "Spinner",
    "SpinnerConfig",
    "TermgaugeError",
    "WidthProbe",
    "download_progress",
    "perform",
    "quick_bar",
    "quick_spinner",
    "spinner",
    "spinner_with_message",
]
