"""
Indicator configuration models.

Configuration is validated once, at construction time, so a running
indicator never fails because of a bad option. Presets are plain values
passed to the indicator constructors; there is no process-wide current style.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from rich.cells import cell_len


DEFAULT_FRAME_INTERVAL = 0.1

FRAMES_LINES: Tuple[str, ...] = ("|", "/", "-", "\\")
FRAMES_DOTS: Tuple[str, ...] = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")
FRAMES_BOUNCE: Tuple[str, ...] = (".", "o", "O", "o")
FRAMES_ARROWS: Tuple[str, ...] = ("↖", "↗", "↘", "↙")
FRAMES_PROGRESS: Tuple[str, ...] = (
    "⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏",
)


def _check_writer(writer: Any) -> Any:
    if writer is not None and not callable(getattr(writer, "write", None)):
        raise ValueError("writer must provide a write() method")
    return writer


class _IndicatorConfig(BaseModel):
    """Shared behaviour of the indicator configuration models."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    writer: Optional[Any] = Field(
        default=None,
        description="Output destination; None writes to the process stdout",
    )

    @field_validator("writer")
    @classmethod
    def _validate_writer(cls, value: Any) -> Any:
        return _check_writer(value)

    def with_options(self, **overrides: Any):
        """
        Return a validated copy of this configuration with some fields replaced.

        Args:
            **overrides: Field names and their new values

        Returns:
            New configuration of the same type
        """
        unknown = set(overrides) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"unknown option(s): {', '.join(sorted(unknown))}")
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(overrides)
        return type(self).model_validate(data)


class BarConfig(_IndicatorConfig):
    """Rendering options for a progress bar."""

    width: int = Field(default=0, ge=0, description="Track width, 0 = auto-detect")
    filled_char: str = Field(default="#", description="Glyph for the done portion")
    empty_char: str = Field(default=" ", description="Glyph for the pending portion")
    show_percent: bool = Field(default=True, description="Append a percentage")
    show_eta: bool = Field(default=False, description="Append time remaining")

    @field_validator("filled_char")
    @classmethod
    def _default_filled(cls, value: str) -> str:
        return value or "#"

    @field_validator("empty_char")
    @classmethod
    def _default_empty(cls, value: str) -> str:
        return value or " "

    @model_validator(mode="after")
    def _check_glyph_widths(self) -> "BarConfig":
        if cell_len(self.filled_char) != cell_len(self.empty_char):
            raise ValueError(
                "filled_char and empty_char must occupy the same number of cells"
            )
        return self

    @property
    def auto_width(self) -> bool:
        """True when the track width follows the terminal."""
        return self.width == 0


class SpinnerConfig(_IndicatorConfig):
    """Rendering options for a spinner."""

    frames: Tuple[str, ...] = Field(default=FRAMES_LINES, min_length=1)
    frame_interval: float = Field(
        default=DEFAULT_FRAME_INTERVAL, gt=0, description="Seconds between frames"
    )
    prefix: str = ""
    suffix: str = ""

    @field_validator("frames")
    @classmethod
    def _no_blank_frames(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(frame == "" for frame in value):
            raise ValueError("frames must not contain empty strings")
        return value


STYLE_DEFAULT = BarConfig()
STYLE_BLOCKS = BarConfig(filled_char="█", empty_char="░")
STYLE_DOTS = BarConfig(filled_char="●", empty_char="○")
STYLE_MINIMAL = BarConfig(filled_char="=", empty_char="-", show_percent=False)
