"""
Bar and spinner indicators.
"""

from .bar import Bar, download_progress, quick_bar
from .spinner import Spinner, perform, quick_spinner, spinner, spinner_with_message

__all__ = [
    "Bar",
    "Spinner",
    "download_progress",
    "perform",
    "quick_bar",
    "quick_spinner",
    "spinner",
    "spinner_with_message",
]
