"""
Tests for indicator configuration validation.
"""

from __future__ import annotations

import io

import pytest
from pydantic import ValidationError

from termgauge import (
    FRAMES_DOTS,
    FRAMES_LINES,
    STYLE_BLOCKS,
    STYLE_DEFAULT,
    STYLE_MINIMAL,
    Bar,
    BarConfig,
    Spinner,
    SpinnerConfig,
)


def test_defaults_match_default_style() -> None:
    assert BarConfig() == STYLE_DEFAULT
    assert STYLE_DEFAULT.filled_char == "#"
    assert STYLE_DEFAULT.show_percent is True
    assert STYLE_DEFAULT.auto_width


def test_presets() -> None:
    assert (STYLE_BLOCKS.filled_char, STYLE_BLOCKS.empty_char) == ("█", "░")
    assert STYLE_MINIMAL.show_percent is False
    assert SpinnerConfig().frames == FRAMES_LINES
    assert SpinnerConfig().frame_interval == 0.1


def test_empty_glyphs_fall_back_to_defaults() -> None:
    config = BarConfig(filled_char="", empty_char="")
    assert (config.filled_char, config.empty_char) == ("#", " ")


@pytest.mark.parametrize(
    "options",
    [
        {"width": -1},
        {"filled_char": "##", "empty_char": "-"},
        {"writer": object()},
    ],
)
def test_invalid_bar_config_rejected(options) -> None:
    with pytest.raises(ValidationError):
        BarConfig(**options)


@pytest.mark.parametrize(
    "options",
    [
        {"frames": ()},
        {"frames": ("|", "")},
        {"frame_interval": 0},
        {"frame_interval": -0.5},
    ],
)
def test_invalid_spinner_config_rejected(options) -> None:
    with pytest.raises(ValidationError):
        SpinnerConfig(**options)


def test_errors_surface_at_construction() -> None:
    with pytest.raises(ValidationError):
        Bar(width=-3)
    with pytest.raises(ValidationError):
        Spinner(frame_interval=0)


def test_with_options_returns_validated_copy() -> None:
    writer = io.StringIO()
    config = STYLE_DEFAULT.with_options(width=20, writer=writer)

    assert config.width == 20
    assert config.writer is writer
    assert STYLE_DEFAULT.width == 0

    with pytest.raises(ValidationError):
        STYLE_DEFAULT.with_options(width=-1)


def test_with_options_rejects_unknown_fields() -> None:
    with pytest.raises(ValueError, match="unknown option"):
        SpinnerConfig().with_options(colour="red")


def test_spinner_frames_accept_lists() -> None:
    config = SpinnerConfig(frames=list(FRAMES_DOTS))
    assert config.frames == FRAMES_DOTS


def test_config_is_immutable() -> None:
    with pytest.raises(ValidationError):
        STYLE_DEFAULT.width = 5
