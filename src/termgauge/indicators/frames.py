"""
Frame composition: pure functions turning state values into visible text.
"""

from __future__ import annotations

from typing import Sequence


def render_track(width: int, progress: float, filled_char: str, empty_char: str) -> str:
    """
    Render the bar track for a progress fraction.

    Args:
        width: Number of cells in the track
        progress: Completion fraction in [0, 1]
        filled_char: Glyph for the done portion
        empty_char: Glyph for the pending portion

    Returns:
        The track text, exactly width glyphs long
    """
    filled = int(width * progress)
    return filled_char * filled + empty_char * (width - filled)


def format_percent(progress: float) -> str:
    return f" {int(progress * 100):3d}%"


def estimate_remaining(elapsed: float, progress: float) -> float | None:
    """
    Estimate seconds remaining from the time spent so far.

    Returns:
        Remaining seconds floored at zero, or None while progress is zero
    """
    if progress <= 0:
        return None
    total = elapsed / progress
    return max(total - elapsed, 0.0)


def format_eta(elapsed: float, progress: float) -> str:
    """Format the remaining time as MM:SS, or a placeholder while unknown."""
    remaining = estimate_remaining(elapsed, progress)
    if remaining is None:
        return "--:--"
    minutes = int(remaining // 60)
    seconds = int(remaining) % 60
    return f"{minutes:02d}:{seconds:02d}"


def spinner_frame(frames: Sequence[str], index: int, prefix: str = "", suffix: str = "") -> str:
    """Compose one spinner line."""
    return f"{prefix}{frames[index % len(frames)]}{suffix}"
