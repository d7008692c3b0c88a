"""
ANSI color helpers for indicator text.
"""

from rich.color import ColorSystem
from rich.style import Style


def colorize(text: str, color: str) -> str:
    """
    Wrap text in the ANSI escape codes for a standard terminal color.

    Args:
        text: Text to color
        color: Any color name rich understands (e.g. "red", "bright_green")

    Returns:
        text surrounded by the color and reset sequences
    """
    return Style(color=color).render(text, color_system=ColorSystem.STANDARD)


def red(text: str) -> str:
    return colorize(text, "red")


def green(text: str) -> str:
    return colorize(text, "green")
