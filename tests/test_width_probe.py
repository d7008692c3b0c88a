"""
Tests for terminal width probing.
"""

from __future__ import annotations

import io
import os

from termgauge.core import width_probe as width_module
from termgauge.core.width_probe import WidthProbe, get_terminal_size


class _Tty:
    def fileno(self) -> int:
        return 1


def _fixed_size(columns: int, lines: int = 24):
    def _size(fd=None):
        _ = fd
        return os.terminal_size((columns, lines))

    return _size


def _no_terminal(fd=None):
    raise OSError("not a terminal")


def test_get_terminal_size_falls_back(monkeypatch) -> None:
    """Verify the fallback is returned when the query fails."""
    monkeypatch.setattr(width_module.os, "get_terminal_size", _no_terminal)
    assert get_terminal_size(fallback=(33, 7)) == (33, 7)


def test_stream_without_descriptor_uses_fallback() -> None:
    probe = WidthProbe(stream=io.StringIO(), fallback=44)
    assert probe.query() is None
    assert probe.measure() == 44
    assert probe.track_width(show_percent=True, show_eta=True) == 44


def test_track_width_reserves_suffix_space(monkeypatch) -> None:
    monkeypatch.setattr(width_module.os, "get_terminal_size", _fixed_size(100))
    probe = WidthProbe(stream=_Tty())

    assert probe.measure() == 100
    assert probe.track_width() == 98
    assert probe.track_width(show_percent=True) == 93
    assert probe.track_width(show_percent=True, show_eta=True) == 81


def test_track_width_has_minimum(monkeypatch) -> None:
    """Verify tiny terminals still get a usable track."""
    monkeypatch.setattr(width_module.os, "get_terminal_size", _fixed_size(15))
    probe = WidthProbe(stream=_Tty())
    assert probe.track_width(show_percent=True, show_eta=True) == 10
