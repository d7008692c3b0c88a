"""
Pytest configuration and fixtures.
"""

import io
import sys
import time
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest."""
    # Add src to path
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))

    config.addinivalue_line("markers", "threading: exercises background threads")
    config.addinivalue_line("markers", "resize: exercises terminal resize handling")


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        nodeid = item.nodeid.lower()
        if "spinner" in nodeid or "concurrent" in nodeid or "thread" in nodeid:
            item.add_marker("threading")
        if "resize" in nodeid:
            item.add_marker("resize")


@pytest.fixture
def writer() -> io.StringIO:
    """In-memory stream standing in for the terminal."""
    return io.StringIO()


@pytest.fixture
def wait_until():
    """Poll a predicate until it holds or the timeout expires."""

    def _wait(predicate, timeout: float = 2.0, interval: float = 0.005) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(interval)
        return predicate()

    return _wait


@pytest.fixture
def visible_frames():
    """Split raw indicator output into the non-blank lines that were drawn."""

    def _frames(output: str) -> list:
        return [segment for segment in output.split("\r") if segment.strip()]

    return _frames
