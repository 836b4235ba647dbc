"""A spinning, breathing arc that shows work in progress."""

from __future__ import annotations

import math
from dataclasses import dataclass

BASE_PEN_WIDTH = 3
BASE_ELLIPSE_POINT = 16
CYCLE_MS = 1500

_LENGTH_FRAMES = ((0.0, 0.1), (0.15, 4.0), (0.5, 18.0), (0.6, 18.0), (1.0, 18.0))
_OFFSET_FRAMES = ((0.0, 0.0), (0.15, 0.0), (0.7, -7.0), (0.75, -7.0), (1.0, -25.0))
_ANGLE_START = -90
_ANGLE_END = 270


@dataclass(frozen=True)
class DashPattern:
    """Dash and gap lengths of the arc's pen, and where the pattern starts."""

    on: float
    off: float
    offset: float


def _in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - 2 * (1 - t) ** 2


def _in_out_sine(t: float) -> float:
    return -0.5 * (math.cos(math.pi * t) - 1)


def _interpolate(frames: tuple[tuple[float, float], ...], progress: float) -> float:
    for (p0, v0), (p1, v1) in zip(frames, frames[1:]):
        if progress <= p1:
            if p1 == p0:
                return v1
            return v0 + (v1 - v0) * (progress - p0) / (p1 - p0)
    return frames[-1][1]


class ProgressIndicator:
    """An animated arc; it is drawn only while the animation runs."""

    def __init__(self) -> None:
        self.pen_width = BASE_PEN_WIDTH
        self.ellipse_point = BASE_ELLIPSE_POINT
        self.angle = 0
        self.dash_length = 0.0
        self.dash_offset = 0.0
        self.enabled = False
        self.minimum_size = (0, 0)

    def scale(self, scale: float) -> None:
        self.pen_width = math.ceil(BASE_PEN_WIDTH * scale)
        self.ellipse_point = math.ceil(BASE_ELLIPSE_POINT * scale)
        self.minimum_size = self.size_hint()

    def size_hint(self) -> tuple[int, int]:
        size = self.ellipse_point * 2 + self.pen_width + 1
        return size, size

    def start_animation(self) -> None:
        self.enabled = True

    def stop_animation(self) -> None:
        self.enabled = False

    @property
    def visible(self) -> bool:
        return self.enabled

    def advance(self, elapsed_ms: float) -> None:
        """Set the animated properties for a point in the looping animation."""
        t = (elapsed_ms % CYCLE_MS) / CYCLE_MS
        self.dash_length = _interpolate(_LENGTH_FRAMES, _in_out_quad(t))
        self.dash_offset = _interpolate(_OFFSET_FRAMES, _in_out_sine(t))
        self.angle = int(_ANGLE_START + (_ANGLE_END - _ANGLE_START) * t)

    def dash_pattern(self) -> DashPattern:
        """The pen's dash pattern for the current animation state."""
        return DashPattern(
            on=self.dash_length * 48 / 36,
            off=float(30 * 48 // 36),
            offset=self.dash_offset * 48 / 36,
        )