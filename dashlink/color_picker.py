"""An RGB colour and a three-slider picker that previews before saving."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour with 8-bit components."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for part in (self.red, self.green, self.blue):
            if not 0 <= part <= 255:
                raise ValueError(f"colour component {part} is outside 0..255")

    def name(self) -> str:
        """The colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Parse ``#rrggbb`` or ``#rgb``."""
        if not name.startswith("#"):
            raise ValueError(f"not a colour name: {name!r}")
        digits = name[1:]
        try:
            if len(digits) == 6:
                return cls(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))
            if len(digits) == 3:
                return cls(*(int(d * 2, 16) for d in digits))
        except ValueError:
            pass
        raise ValueError(f"not a colour name: {name!r}")


_COMPONENTS = ("red", "green", "blue")


class ColorPicker:
    """A button showing the saved colour and sliders that edit a preview.

    Slider changes only move the preview; :meth:`save` commits them.
    """

    def __init__(self, block_size: int = 16, scale: float = 1.0) -> None:
        self.icon_size = int(block_size * scale)
        self._values = {name: 0 for name in _COMPONENTS}
        self.labels = {name: "0" for name in _COMPONENTS}
        self.text = self.color.name()
        self.icon_color = self.color
        self.hint_color = self.color
        self.color_listeners: list[Callable[[Color], None]] = []

    @property
    def color(self) -> Color:
        """The colour the sliders are set to."""
        return Color(self._values["red"], self._values["green"], self._values["blue"])

    def update(self, color: Color) -> None:
        """Show ``color`` as the saved colour and move the sliders to it."""
        for name in _COMPONENTS:
            self.set_component(name, getattr(color, name))
        self.text = color.name()
        self.icon_color = color

    def set_component(self, component: str, value: int) -> int:
        """Move one slider, clamped to 0..255, and refresh the preview."""
        if component not in self._values:
            raise ValueError(f"unknown colour component {component!r}")
        value = min(max(int(value), 0), 255)
        self._values[component] = value
        self.labels[component] = str(value)
        self.hint_color = self.color
        return value

    def save(self) -> Color:
        """Commit the slider colour and notify listeners."""
        color = self.color
        self.text = color.name()
        self.icon_color = color
        for listener in list(self.color_listeners):
            listener(color)
        return color