"""
Registries managing several named indicators on one terminal.
"""

from .multi_bar import MultiBar
from .multi_spinner import MultiSpinner
from .registry import IndicatorRegistry, LabeledIndicator

__all__ = ["IndicatorRegistry", "LabeledIndicator", "MultiBar", "MultiSpinner"]
