"""
Tests for the multi-indicator registries.
"""

from __future__ import annotations

import threading

import pytest

from termgauge import DuplicateIndicatorError, Lifecycle, MultiBar, MultiSpinner


def _alive(marker: str) -> list:
    return [t for t in threading.enumerate() if marker in t.name and t.is_alive()]


def test_lines_follow_insertion_order(writer) -> None:
    bars = MultiBar(writer=writer)
    first = bars.add("download", "Downloading", width=10)
    second = bars.add("verify", "Verifying", width=10)

    assert (first.line, second.line) == (0, 1)
    assert bars.names() == ["download", "verify"]
    assert [e.name for e in bars] == ["download", "verify"]
    assert len(bars) == 2
    assert "verify" in bars


def test_duplicate_name_is_rejected(writer) -> None:
    bars = MultiBar(writer=writer)
    original = bars.add("download", "Downloading", width=10)

    with pytest.raises(DuplicateIndicatorError):
        bars.add("download", "Again", width=10)

    assert bars.get("download") is original
    assert len(bars) == 1


def test_duplicate_error_is_a_key_error() -> None:
    assert issubclass(DuplicateIndicatorError, KeyError)


def test_stop_all_stops_and_joins_every_bar(writer) -> None:
    bars = MultiBar(writer=writer)
    download = bars.add("download", "Downloading")
    verify = bars.add("verify", "Verifying")
    bars.start("download")
    bars.start("verify")
    markers = [f"{id(e.indicator):x}" for e in (download, verify)]
    assert all(_alive(marker) for marker in markers)

    bars.stop_all()

    assert download.indicator.lifecycle is Lifecycle.STOPPED
    assert verify.indicator.lifecycle is Lifecycle.STOPPED
    assert not any(_alive(marker) for marker in markers)


def test_multibar_prints_labels_around_bar(writer) -> None:
    bars = MultiBar(writer=writer)
    bars.add("download", "Downloading", width=10, show_percent=False)

    bars.start("download")
    bars.set_progress("download", 0.5)
    bars.increment("download", 0.5)
    bars.stop("download")

    output = writer.getvalue()
    assert output.startswith("Downloading:\n")
    assert "\r#####     " in output
    assert "\r##########" in output
    assert output.endswith("Downloading: Complete!\n")
    assert bars.get_progress("download") == 1.0


def test_unknown_names_report_not_found(writer) -> None:
    bars = MultiBar(writer=writer)
    assert bars.start("missing") is False
    assert bars.stop("missing") is False
    assert bars.set_progress("missing", 0.5) is False
    assert bars.increment("missing", 0.1) is False
    assert bars.get_progress("missing") is None
    assert bars.get("missing") is None
    assert writer.getvalue() == ""


def test_registry_bars_share_one_sink(writer) -> None:
    bars = MultiBar(writer=writer)
    a = bars.add("a", "A", width=10)
    b = bars.add("b", "B", width=10)
    assert a.indicator._sink is b.indicator._sink is bars.sink


def test_multispinner_uses_label_as_prefix(writer, wait_until) -> None:
    spinners = MultiSpinner(writer=writer)
    entry = spinners.add("fetch", "Fetching", frame_interval=0.005)
    spinners.add("parse", "Parsing", frame_interval=0.005)
    assert entry.indicator.prefix == "Fetching "

    spinners.start_all()
    assert all(e.is_running() for e in spinners)

    assert spinners.update_label("fetch", "Downloading")
    assert entry.label == "Downloading"
    assert entry.indicator.prefix == "Downloading "
    assert wait_until(lambda: "Downloading " in writer.getvalue())

    spinners.stop_all()
    assert all(e.is_stopped() for e in spinners)
    assert spinners.update_label("missing", "x") is False


def test_start_and_stop_by_name(writer) -> None:
    spinners = MultiSpinner(writer=writer)
    entry = spinners.add("fetch", "Fetching", frame_interval=0.005)

    assert spinners.start("fetch")
    assert entry.is_running()
    assert spinners.stop("fetch")
    assert entry.is_stopped()
