"""Theme-aware tinting of monochrome icons."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass
from typing import Any, Protocol

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)


class ThemeMode(enum.IntEnum):
    LIGHT = 0
    DARK = 1


class IconMode(enum.Enum):
    NORMAL = 0
    DISABLED = 1
    ACTIVE = 2
    SELECTED = 3


class IconState(enum.Enum):
    ON = 0
    OFF = 1


class _Theme(Protocol):
    mode: ThemeMode
    color: Any


@dataclass(frozen=True)
class PaintStyle:
    """The colour an icon is filled with and how opaque it is."""

    color: Any
    opacity: float


def _base_color(mode: ThemeMode) -> tuple[int, int, int]:
    return _BLACK if mode == ThemeMode.LIGHT else _WHITE


class IconEngine:
    """Tints an icon with the theme's colours according to its mode and state.

    ``theme`` is read on every call, so theme changes show immediately.
    """

    def __init__(self, theme: _Theme, icon: str, colorize: bool) -> None:
        self.theme = theme
        self.icon = icon
        self.alt_icon: str | None = None
        self.colorize = colorize

    def paint_style(self, mode: IconMode, state: IconState) -> PaintStyle | None:
        light = self.theme.mode == ThemeMode.LIGHT
        base = _base_color(self.theme.mode)
        if mode == IconMode.DISABLED:
            return PaintStyle(base, (97 if light else 128) / 255.0)
        if state == IconState.ON:
            color = self.theme.color if self.colorize else base
            return PaintStyle(color, (255 if light else 222) / 255.0)
        if self.colorize:
            return PaintStyle(base, (162 if light else 134) / 255.0)
        return PaintStyle(base, (255 if light else 222) / 255.0)

    def add_file(self, file: str, mode: IconMode, state: IconState) -> None:
        """A file added in normal mode is shown while the icon is on."""
        if mode == IconMode.NORMAL:
            self.alt_icon = file

    def source(self, state: IconState) -> str:
        """The picture file drawn for a state."""
        if state == IconState.ON and self.alt_icon is not None:
            return self.alt_icon
        return self.icon

    def clone(self) -> "IconEngine":
        return copy.copy(self)


class StylizedIconEngine(IconEngine):
    """An engine whose picture can be replaced by one that carries its own colours."""

    def __init__(self, theme: _Theme, icon: str, colorize: bool) -> None:
        super().__init__(theme, icon, colorize)
        self.stylized = False

    def paint_style(self, mode: IconMode, state: IconState) -> PaintStyle | None:
        """``None`` when the picture is drawn untinted."""
        if self.stylized:
            return None
        return super().paint_style(mode, state)

    def add_file(self, file: str, mode: IconMode, state: IconState) -> None:
        """A file added in active mode replaces the picture; added as on, it is left untinted."""
        if mode == IconMode.ACTIVE:
            self.icon = file
            self.stylized = state == IconState.ON