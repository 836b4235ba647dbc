"""A sliding on/off switch: its geometry and checked state."""

from __future__ import annotations

import math
from typing import Any, Callable

BASE_TRACK_RADIUS = 8
BASE_THUMB_RADIUS = 12


class Switch:
    """A thumb that slides along a rounded track between two end positions.

    ``offset`` is the x coordinate of the thumb's centre.
    """

    def __init__(self, width: int = 0) -> None:
        self.width = width
        self.checked = False
        self.track_radius = BASE_TRACK_RADIUS
        self.thumb_radius = BASE_THUMB_RADIUS
        self.track_color: Any = None
        self.thumb_color: Any = None
        self.margin = 0
        self.base_offset = 0
        self.offset = 0
        self.state_listeners: list[Callable[[bool], None]] = []
        self._update_properties()

    def _update_properties(self) -> None:
        self.margin = max(0, self.thumb_radius - self.track_radius)
        self.base_offset = max(self.thumb_radius, self.track_radius)
        self.offset = self.end_offset(self.checked)

    def scale(self, scale: float) -> None:
        """Resize the track and thumb for a display scale."""
        self.track_radius = math.ceil(BASE_TRACK_RADIUS * scale)
        self.thumb_radius = math.ceil(BASE_THUMB_RADIUS * scale)
        self._update_properties()

    def size_hint(self) -> tuple[int, int]:
        """Preferred ``(width, height)``."""
        width = int(4.5 * self.track_radius + 2 * self.margin)
        height = 2 * self.track_radius + 2 * self.margin
        return width, height

    def end_offset(self, checked: bool) -> int:
        """Thumb position at rest for the given state."""
        return self.width - self.base_offset if checked else self.base_offset

    def resize(self, width: int) -> None:
        self.width = width
        self.offset = self.end_offset(self.checked)

    def set_checked(self, checked: bool) -> None:
        """Set the state without notifying listeners."""
        self.checked = bool(checked)
        self.offset = self.end_offset(self.checked)

    def toggle(self) -> bool:
        """Flip the state, as a click does, and notify listeners."""
        self.checked = not self.checked
        self.offset = self.end_offset(self.checked)
        for listener in list(self.state_listeners):
            listener(self.checked)
        return self.checked