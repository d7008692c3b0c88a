"""
Registry of labeled spinners.
"""

from __future__ import annotations

from typing import Any, Optional

from ..config import SpinnerConfig
from ..indicators.spinner import Spinner
from .registry import IndicatorRegistry, LabeledIndicator


class MultiSpinner(IndicatorRegistry[Spinner]):
    """Manage several named spinners on one terminal."""

    def add(
        self,
        name: str,
        label: str,
        config: Optional[SpinnerConfig] = None,
        **options: Any,
    ) -> LabeledIndicator[Spinner]:
        """
        Register a new spinner whose prefix is its label.

        Raises:
            DuplicateIndicatorError: if name is already registered
        """
        options["prefix"] = label + " "
        return self._register(name, label, Spinner(config, sink=self.sink, **options))

    def start_all(self) -> None:
        for entry in self.entries():
            entry.start()

    def update_label(self, name: str, label: str) -> bool:
        """Change a spinner's label; the running animation picks it up next frame."""
        with self._lock:
            entry = self._entries.get(name)
            if entry is None:
                return False
            entry.label = label
        entry.indicator.set_prefix(label + " ")
        return True
