"""Editor window interfaces and the registry that drives them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EditorWindow(ABC):
    """A window the editor renders every frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw the window."""

    @abstractmethod
    def on_resize(self, width: int, height: int) -> None:
        """React to the application window being resized."""


class Switchable(ABC):
    """Something that can be shown and hidden."""

    @abstractmethod
    def toggle(self) -> None:
        """Flip between shown and hidden."""


class Command(ABC):
    """Something that executes text commands."""

    @abstractmethod
    def execute(self, command: str) -> None:
        """Run ``command``."""


class EditorDesigner:
    """Keeps the editor's windows by id and forwards frame events to them."""

    def __init__(self) -> None:
        self._windows: dict[str, EditorWindow] = {}
        self.finished_clearing = False

    def add_window(self, window_id: str, window: EditorWindow) -> None:
        """Register ``window`` under ``window_id``, replacing any earlier one."""
        self._windows[window_id] = window

    def get_window(self, window_id: str) -> EditorWindow:
        """Return the window registered as ``window_id``; raise KeyError if none."""
        try:
            return self._windows[window_id]
        except KeyError:
            raise KeyError(f"no editor window {window_id!r}") from None

    def on_resize(self, width: int, height: int) -> None:
        for window in self._windows.values():
            window.on_resize(width, height)

    def render(self) -> None:
        for window in self._windows.values():
            window.render()

    def toggle(self) -> None:
        """Toggle every window that can be switched."""
        for window in self._windows.values():
            if isinstance(window, Switchable):
                window.toggle()

    @property
    def is_clear(self) -> bool:
        return self.finished_clearing

    def clear(self) -> None:
        self.finished_clearing = False

    def __len__(self) -> int:
        return len(self._windows)

    def __contains__(self, window_id: object) -> bool:
        return window_id in self._windows