"""
Registry of labeled progress bars.
"""

from __future__ import annotations

from typing import Any, Optional

from ..config import BarConfig
from ..indicators.bar import Bar
from .registry import IndicatorRegistry, LabeledIndicator


class MultiBar(IndicatorRegistry[Bar]):
    """Manage several named progress bars on one terminal."""

    def add(
        self,
        name: str,
        label: str,
        config: Optional[BarConfig] = None,
        **options: Any,
    ) -> LabeledIndicator[Bar]:
        """
        Register a new bar.

        Args:
            name: Unique key within this registry
            label: Text printed above the bar when it starts
            config: Base bar configuration
            **options: BarConfig overrides

        Raises:
            DuplicateIndicatorError: if name is already registered
        """
        return self._register(name, label, Bar(config, sink=self.sink, **options))

    def start(self, name: str) -> bool:
        """Print the bar's label on its own line, then start the bar."""
        entry = self.get(name)
        if entry is None:
            return False
        self.sink.println(f"{entry.label}:")
        entry.start()
        return True

    def stop(self, name: str) -> bool:
        """Stop the bar, then print its completion line."""
        entry = self.get(name)
        if entry is None:
            return False
        entry.stop()
        self.sink.println(f"{entry.label}: Complete!")
        return True

    def set_progress(self, name: str, progress: float) -> bool:
        entry = self.get(name)
        if entry is None:
            return False
        entry.indicator.set_progress(progress)
        return True

    def increment(self, name: str, delta: float) -> bool:
        entry = self.get(name)
        if entry is None:
            return False
        entry.indicator.increment(delta)
        return True

    def get_progress(self, name: str) -> Optional[float]:
        entry = self.get(name)
        if entry is None:
            return None
        return entry.indicator.get_progress()
