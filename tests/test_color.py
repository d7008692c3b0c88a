"""
Tests for ANSI color helpers.
"""

from termgauge.utils.color import colorize, green, red


def test_red_wraps_text_in_escape_codes() -> None:
    assert red("error") == "\x1b[31merror\x1b[0m"


def test_green() -> None:
    assert green("ok") == "\x1b[32mok\x1b[0m"


def test_colorize_named_color() -> None:
    assert colorize("x", "blue") == "\x1b[34mx\x1b[0m"
