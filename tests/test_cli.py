"""
Tests for the demo entry point and logging setup.
"""

from __future__ import annotations

import logging
import sys

from rich.logging import RichHandler

from termgauge import cli as cli_module
from termgauge.utils.logging_config import setup_logging


def test_bar_demo(monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        sys, "argv", ["termgauge-demo", "bar", "--steps", "2", "--delay", "0"]
    )
    cli_module.cli()

    out = capsys.readouterr().out
    assert "Starting..." in out
    assert "Finished!" in out
    assert "#" in out


def test_spinner_demo(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["termgauge-demo", "spinner", "--seconds", "0.05"])
    cli_module.cli()
    assert "Done!" in capsys.readouterr().out


def test_multi_demo(monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        sys, "argv", ["termgauge-demo", "multi", "--steps", "2", "--delay", "0"]
    )
    cli_module.cli()

    out = capsys.readouterr().out
    assert "Downloading: Complete!" in out
    assert "Verifying: Complete!" in out


def test_setup_logging_routes_to_rich_handler() -> None:
    logger = logging.getLogger("termgauge")
    saved = (logger.handlers, logger.level, logger.propagate)
    try:
        setup_logging(verbose=True)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

        setup_logging(verbose=False)
        assert logger.level == logging.WARNING
    finally:
        logger.handlers, logger.level, logger.propagate = saved
