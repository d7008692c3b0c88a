"""
Named collections of indicators sharing one terminal.

A registry owns its entries and the name -> entry mapping. Every entry keeps
the display line it was given at insertion; lines are never reassigned. All
indicators of a registry render through the registry's single OutputSink.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, List, Optional, TypeVar

from ..core.indicator import Indicator
from ..core.output_sink import OutputSink
from ..errors import DuplicateIndicatorError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Indicator)


@dataclass
class LabeledIndicator(Generic[T]):
    """An indicator registered under a name, with a label and a display line."""

    name: str
    label: str
    line: int
    indicator: T

    def start(self) -> None:
        self.indicator.start()

    def stop(self) -> None:
        self.indicator.stop()

    def is_running(self) -> bool:
        return self.indicator.is_running()

    def is_stopped(self) -> bool:
        return self.indicator.is_stopped()


class IndicatorRegistry(Generic[T]):
    """Base registry: insertion-ordered entries looked up by name."""

    def __init__(self, writer: Optional[Any] = None) -> None:
        self._entries: Dict[str, LabeledIndicator[T]] = {}
        self._lock = threading.RLock()
        self._sink = OutputSink(writer)

    @property
    def sink(self) -> OutputSink:
        return self._sink

    def _register(self, name: str, label: str, indicator: T) -> LabeledIndicator[T]:
        with self._lock:
            if name in self._entries:
                raise DuplicateIndicatorError(name)
            entry = LabeledIndicator(
                name=name, label=label, line=len(self._entries), indicator=indicator
            )
            self._entries[name] = entry
        logger.debug(f"Registered {name!r} on line {entry.line}")
        return entry

    def get(self, name: str) -> Optional[LabeledIndicator[T]]:
        with self._lock:
            return self._entries.get(name)

    def names(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def entries(self) -> List[LabeledIndicator[T]]:
        """Snapshot of all entries in line order."""
        with self._lock:
            return list(self._entries.values())

    def start(self, name: str) -> bool:
        """Start the named indicator. Returns False if no such name exists."""
        entry = self.get(name)
        if entry is None:
            return False
        entry.start()
        return True

    def stop(self, name: str) -> bool:
        """Stop the named indicator. Returns False if no such name exists."""
        entry = self.get(name)
        if entry is None:
            return False
        entry.stop()
        return True

    def stop_all(self) -> None:
        for entry in self.entries():
            entry.stop()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def __iter__(self) -> Iterator[LabeledIndicator[T]]:
        return iter(self.entries())
