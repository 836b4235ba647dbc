"""A cycling choice between a list of options, with an optional placeholder entry."""

from __future__ import annotations

from typing import Callable, Iterable


class Selector:
    """Steps left and right through a list of options.

    When a placeholder is given it is put in front of the options. The index
    reported after stepping or replacing the options does not count the
    placeholder. The index reported after :meth:`set_current` does count it.
    """

    def __init__(
        self,
        options: Iterable[str],
        current: str | None = None,
        placeholder: str | None = None,
    ) -> None:
        self.placeholder = placeholder
        self._options: list[str] = list(options)
        self.enabled = False
        self.item_listeners: list[Callable[[str | None], None]] = []
        self.idx_listeners: list[Callable[[int], None]] = []
        self._apply_state()
        self._idx = self._index_of(current)

    @property
    def options(self) -> tuple[str, ...]:
        return tuple(self._options)

    @property
    def index(self) -> int:
        """Position of the current option, placeholder included."""
        return self._idx

    @property
    def is_placeholder(self) -> bool:
        """Whether the placeholder is showing (drawn in italics)."""
        return self.placeholder is not None and self.current() == self.placeholder

    def current(self) -> str | None:
        """The option showing, or ``None`` when there are no options."""
        if not self._options:
            return None
        if 0 <= self._idx < len(self._options):
            return self._options[self._idx]
        return self.placeholder

    def set_current(self, current: str) -> None:
        """Show ``current``, or the first entry when it is not an option."""
        self._idx = self._index_of(current)
        self._emit(self._idx)

    def set_options(self, options: Iterable[str]) -> None:
        """Replace the options and show the first entry."""
        self._options = list(options)
        self._apply_state()
        self._idx = 0
        self._emit(self._offset_idx())

    def next(self) -> str | None:
        """Step to the next option, wrapping at the end."""
        if not self._options:
            return None
        self._idx = (self._idx + 1) % len(self._options)
        self._emit(self._offset_idx())
        return self.current()

    def previous(self) -> str | None:
        """Step to the previous option, wrapping at the start."""
        if not self._options:
            return None
        self._idx = (self._idx - 1) % len(self._options)
        self._emit(self._offset_idx())
        return self.current()

    def _apply_state(self) -> None:
        if not self._options:
            self.enabled = False
            return
        self.enabled = True
        if self.placeholder is not None:
            self._options.insert(0, self.placeholder)

    def _index_of(self, value: str | None) -> int:
        try:
            return self._options.index(value)  # type: ignore[arg-type]
        except ValueError:
            return 0

    def _offset_idx(self) -> int:
        return self._idx - (0 if self.placeholder is None else 1)

    def _emit(self, idx: int) -> None:
        item = self.current()
        for listener in list(self.item_listeners):
            listener(item)
        for listener in list(self.idx_listeners):
            listener(idx)