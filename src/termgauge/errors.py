"""
Exceptions raised by termgauge indicators and registries.
"""

from __future__ import annotations


class TermgaugeError(Exception):
    """Base class for all termgauge errors."""


class IndicatorTimeoutError(TermgaugeError, TimeoutError):
    """Raised when a wrapped operation outlives its run_with_timeout budget."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"operation timed out after {_format_seconds(timeout)}")


class DuplicateIndicatorError(TermgaugeError, KeyError):
    """Raised when a registry already holds an indicator under the given name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"indicator {self.name!r} is already registered"


def _format_seconds(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:g}ms"
    return f"{seconds:g}s"
