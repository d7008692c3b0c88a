"""
Logging configuration for termgauge.

The library itself only creates loggers. Applications (and the demo CLI)
call setup_logging to route them to stderr, away from the indicator line.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "termgauge"


def setup_logging(verbose: bool = False) -> None:
    """
    Configure the termgauge logger.

    Args:
        verbose: If True, show debug messages for lifecycle and resize events.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers = [
        RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    ]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
