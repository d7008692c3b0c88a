"""
Configuration models and presets for bars and spinners.
"""

from .indicator_config import (
    DEFAULT_FRAME_INTERVAL,
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
from .layout import (
    ETA_RESERVE,
    FALLBACK_WIDTH,
    MIN_TRACK_WIDTH,
    PERCENT_RESERVE,
    TRACK_MARGIN,
)

__all__ = [
    "BarConfig",
    "SpinnerConfig",
    "DEFAULT_FRAME_INTERVAL",
    "FRAMES_ARROWS",
    "FRAMES_BOUNCE",
    "FRAMES_DOTS",
    "FRAMES_LINES",
    "FRAMES_PROGRESS",
    "STYLE_BLOCKS",
    "STYLE_DEFAULT",
    "STYLE_DOTS",
    "STYLE_MINIMAL",
    "ETA_RESERVE",
    "FALLBACK_WIDTH",
    "MIN_TRACK_WIDTH",
    "PERCENT_RESERVE",
    "TRACK_MARGIN",
]
