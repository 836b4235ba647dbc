"""Pop-up dialogs: buttons, auto-close timeout, sizing and placement next to a parent."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

FULLSCREEN_MARGIN = 48
POPUP_OFFSET = 4
SNACKBAR_HEIGHT = 64
CANCEL = "cancel"


@dataclass(frozen=True)
class Rect:
    """An integer rectangle; its last pixel is at ``x + width - 1``."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    def center(self) -> tuple[int, int]:
        return int((self.x + self.right) / 2), int((self.y + self.bottom) / 2)


class Dialog:
    """A frameless dialog.

    A fullscreen dialog is modal, has a cancel button from the start and
    closes on Escape; a plain one ignores Escape and pops up beside its parent.
    """

    def __init__(
        self,
        fullscreen: bool = False,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self.fullscreen = fullscreen
        self.modal = fullscreen
        self.visible = False
        self.title: str | None = None
        self.body: Any = None
        self.scrollable = False
        self.buttons: list[str] = []
        self._on_close = on_close
        self._interval = 0
        self._remaining: float | None = None
        if fullscreen:
            self.buttons.append(CANCEL)

    @property
    def timer_active(self) -> bool:
        return self._remaining is not None

    def set_title(self, text: str) -> None:
        self.title = text

    def set_body(self, widget: Any) -> None:
        """Set the content; a fullscreen dialog wraps it in a scroll area."""
        self.body = widget
        self.scrollable = self.fullscreen

    def set_button(self, name: str) -> None:
        """Add a button that closes the dialog; the first one brings a cancel button."""
        if not self.buttons:
            self.buttons.append(CANCEL)
        self.buttons.append(name)

    def open(self, timeout: int = 0) -> None:
        """Show the dialog; with a positive timeout (ms) it closes by itself."""
        self.visible = True
        if timeout > 0:
            self._interval = timeout
            self._remaining = float(timeout)

    def close(self) -> None:
        """Hide the dialog and hand focus back to the main window."""
        self.visible = False
        self._remaining = None
        if self._on_close is not None:
            self._on_close()

    def tick(self, elapsed: float) -> bool:
        """Let ``elapsed`` ms pass; return whether the timeout closed the dialog."""
        if self._remaining is None:
            return False
        self._remaining -= elapsed
        if self._remaining <= 0:
            self.close()
            return True
        return False

    def press_escape(self) -> None:
        if self.fullscreen:
            self.close()

    def touch(self) -> None:
        """Any event while the timer runs starts the timeout over."""
        if self._remaining is not None:
            self._remaining = float(self._interval)

    def fit(
        self, width: int, height: int, parent_width: int, parent_height: int, scale: float = 1.0
    ) -> tuple[int, int]:
        """Size of the shown dialog; a fullscreen one keeps a margin inside its parent."""
        if not self.fullscreen:
            return width, height
        margin = math.ceil(FULLSCREEN_MARGIN * scale) * 2
        return min(width, parent_width - margin), min(height, parent_height - margin)

    def position(
        self, parent: Rect, window: Rect, width: int, height: int, scale: float = 1.0
    ) -> tuple[int, int]:
        """Top-left corner for a dialog of the given size.

        A fullscreen dialog is centred on ``parent``. Otherwise it pops up
        above or below the parent, towards the window's centre, with the
        parent's centre under one of its halves.
        """
        rect = Rect(0, 0, width, height)
        px, py = parent.center()
        if self.fullscreen:
            cx, cy = rect.center()
            return px - cx, py - cy

        wx, wy = window.center()
        offset = math.ceil(POPUP_OFFSET * scale)
        right_side = px > wx
        if py > wy:
            pivot_x = rect.right if right_side else rect.x
            pivot_y = rect.bottom + parent.height // 2 + offset
        else:
            pivot_x = rect.right if right_side else rect.x
            pivot_y = rect.y - (parent.height // 2 + offset)
        if right_side:
            pivot_x -= width // 2
        else:
            pivot_x += width // 2
        return px - pivot_x, py - pivot_y


def snackbar_width(parent_width: int) -> int:
    """A snack bar spans two thirds of the message area."""
    return int(parent_width * (2 / 3.0))


def snackbar_height(scale: float = 1.0) -> int:
    return int(SNACKBAR_HEIGHT * scale)