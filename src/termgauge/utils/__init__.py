"""
Color and logging utilities.
"""

from .color import colorize, green, red
from .logging_config import setup_logging

__all__ = ["colorize", "green", "red", "setup_logging"]
