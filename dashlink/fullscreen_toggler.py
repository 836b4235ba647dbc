"""Ways of leaving fullscreen: nothing, a bar at the bottom, or a floating button."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

BAR_HEIGHT = 10
TAP_MS = 100
DEFAULT_FONT_SIZE = 10


class FullscreenToggler(ABC):
    """A named control that is shown while the dashboard is fullscreen."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.visible = False

    @abstractmethod
    def enable(self) -> None:
        """Show the control."""

    @abstractmethod
    def disable(self) -> None:
        """Hide the control."""


class NullFullscreenToggler(FullscreenToggler):
    """No control at all."""

    def __init__(self) -> None:
        super().__init__("none")

    def enable(self) -> None:
        pass

    def disable(self) -> None:
        pass


class BarFullscreenToggler(FullscreenToggler):
    """A thin bar at the bottom; clicking it leaves fullscreen."""

    def __init__(self, on_exit: Callable[[], None] | None = None, scale: float = 1.0) -> None:
        super().__init__("bar")
        self.bar_height = int(BAR_HEIGHT * scale)
        self._on_exit = on_exit

    def enable(self) -> None:
        self.visible = True

    def disable(self) -> None:
        self.visible = False

    def click(self) -> None:
        if self._on_exit is not None:
            self._on_exit()


class ButtonFullscreenToggler(FullscreenToggler):
    """A floating button that can be dragged around; a short tap leaves fullscreen.

    Times are in milliseconds. The button is half as opaque as the display
    brightness, and fully as opaque while held.
    """

    def __init__(
        self,
        brightness: int = 255,
        origin: tuple[int, int] = (0, 0),
        on_exit: Callable[[], None] | None = None,
        on_activate: Callable[[], None] | None = None,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        super().__init__("button")
        self.brightness = brightness
        self.position = origin
        self.last_pos = origin
        self.grab = origin
        self.touch_start = 0.0
        self.font_size = font_size
        self.window_opacity = self.opacity(brightness)
        self._on_exit = on_exit
        self._on_activate = on_activate

    @staticmethod
    def opacity(brightness: int) -> float:
        """Resting opacity for a display brightness."""
        return brightness / 510.0

    def set_brightness(self, brightness: int) -> None:
        self.brightness = brightness
        self.window_opacity = self.opacity(brightness)

    def enable(self) -> None:
        self.visible = True
        self.window_opacity = self.opacity(self.brightness)
        self.position = self.last_pos

    def disable(self) -> None:
        self.last_pos = self.position
        self.visible = False
        self._activate()

    def press(self, x: int, y: int, now: float) -> None:
        """Start a touch at ``(x, y)`` within the button."""
        self.window_opacity = self.brightness / 255.0
        self.font_size = int(self.font_size * 1.5)
        self.grab = (x, y)
        self.touch_start = now

    def move(self, global_x: int, global_y: int) -> tuple[int, int]:
        """Drag so that the grabbed point follows the finger."""
        self.position = (global_x - self.grab[0], global_y - self.grab[1])
        return self.position

    def release(self, now: float) -> bool:
        """End the touch; return whether it was a tap that left fullscreen."""
        self._activate()
        self.window_opacity = self.opacity(self.brightness)
        self.font_size = int(self.font_size / 1.5)
        if now - self.touch_start < TAP_MS:
            if self._on_exit is not None:
                self._on_exit()
            return True
        return False

    def _activate(self) -> None:
        if self._on_activate is not None:
            self._on_activate()