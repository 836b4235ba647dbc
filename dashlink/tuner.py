"""A radio dial: tick layout around the tuned station and drag-to-tune."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MINIMUM = 880
MAXIMUM = 1080
TICKS = 12


@dataclass(frozen=True)
class Tick:
    """One dial tick, drawn from ``(x, y)`` down to ``(x, bottom)``."""

    x: float
    y: float
    bottom: int
    station: int
    alpha: int
    label: str | None


class Tuner:
    """Station value in tenths of a megahertz, with a dial drawn around it."""

    def __init__(self, scale: float = 1.0) -> None:
        self.minimum = MINIMUM
        self.maximum = MAXIMUM
        self.value = MINIMUM
        self.scale = scale
        self.color: Any = None
        self.accent: Any = None
        self.mouse_x = 0

    def set_value(self, value: int) -> int:
        """Tune to ``value``, clamped to the dial's range."""
        self.value = min(max(int(value), self.minimum), self.maximum)
        return self.value

    @staticmethod
    def size_hint(width: int) -> tuple[int, int]:
        return width, width // 3

    def ticks(self, width: int, height: int, font_height: int) -> list[Tick]:
        """Lay out the ticks for a dial of the given size.

        Stations on a whole megahertz other than the tuned one get a label
        and are drawn almost opaque; the others fade towards the edges.
        """
        half_tick = self.value % 2 == 1
        spacing = width / (TICKS + 2)
        min_tick_height = height * 0.3
        bottom = height - font_height
        slice_ = (bottom - min_tick_height) / TICKS

        x = -spacing / 2.0 if half_tick else 0.0
        result = []
        for i in range(0, TICKS * 2 + 1, 2):
            station = self.value - TICKS + i
            slices = i - TICKS
            if half_tick:
                station -= 1
                slices -= 1
            x += spacing
            y = slice_ * abs(slices) + height * 0.1
            alpha_offset = int(255 * (y / height)) + 24
            label = None
            if station % 10 == 0 and station != self.value:
                label = str(station // 10)
                alpha_offset = 12
            result.append(Tick(x, y, bottom, station, 255 - alpha_offset, label))
        return result

    @staticmethod
    def needle(width: int, height: int, font_height: int) -> tuple[float, float, int]:
        """The tuning needle as ``(x, top, bottom)``."""
        return width / 2.0, height * 0.1, height - font_height

    def press(self, x: int) -> None:
        self.mouse_x = x

    def drag(self, x: int, width: int) -> int:
        """Move the dial by a drag to ``x``; dragging left tunes up."""
        dist = self.mouse_x - x
        ratio = (self.maximum - self.minimum) / width
        trans = int(dist * ratio)
        if trans != 0:
            self.set_value(self.value + trans)
            self.mouse_x = x
        return self.value