"""The in-editor command console: log, history, completion and commands."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from editorcore.debug_log import DebugLog
from editorcore.editor import Command, EditorWindow, Switchable

_BUFFER_SIZE = 1024
_WORD_SEPARATORS = " \t,;"
_SPAWNABLE_SHAPES = ("cube", "sphere", "triangle")
_HISTORY_SHOWN = 10
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

ERROR_COLOR = (1.0, 0.4, 0.4, 1.0)
COMMAND_COLOR = (1.0, 0.8, 0.6, 1.0)

DEFAULT_COMMANDS = (
    "HELP: Shows the help message",
    "HISTORY: Shows the log history",
    "CLEAR: Clears the console",
    "CLASSIFY",
    "UE_LOG(): Unreal Engine Log",
    "stat: Shows the stat",
    "new: Initialize Scene",
    "save: Save Scene",
    "load: Load Scene",
    "spawn: Spawn Primitive Object",
)


class HistoryDirection(Enum):
    """Which way to move through the command history."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class ConsoleLine:
    """A log line as it is shown, with an optional highlight colour."""

    text: str
    color: tuple[float, float, float, float] | None = None


def _same(left: str, right: str) -> bool:
    return left.lower() == right.lower()


def _starts_with(text: str, prefix: str) -> bool:
    return text[: len(prefix)].lower() == prefix.lower()


def _parse_int(text: str) -> int:
    """Read a leading integer the way the console always has; raise ValueError if none."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid count: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"count out of range: {text!r}")
    return value


def _pass_filter(text: str, filter_text: str) -> bool:
    """Apply an "incl,-excl" filter, matching without regard to case."""
    patterns = [part.strip() for part in filter_text.split(",")]
    patterns = [p for p in patterns if p]
    if not patterns:
        return True
    lowered = text.lower()
    has_include = False
    for pattern in patterns:
        if pattern.startswith("-"):
            excluded = pattern[1:].lower()
            if excluded and excluded in lowered:
                return False
        else:
            has_include = True
            if pattern.lower() in lowered:
                return True
    return not has_include


class ConsoleWindow(EditorWindow, Switchable, Command):
    """A console window that keeps a log and runs typed commands."""

    def __init__(self, debug_log: DebugLog | None = None) -> None:
        self.debug_log = debug_log
        self.items: list[str] = []
        self.commands: list[str] = list(DEFAULT_COMMANDS)
        self.history: list[str] = []
        self.history_pos = -1
        self.filter_text = ""
        self.auto_scroll = True
        self.scroll_to_bottom = False
        self.is_open = False
        self.show_stat_memory = False
        self.show_stat_fps = False
        self.screen_size: tuple[int, int] | None = None
        self.renderer: Any = None
        self.log("Welcome to Engine !")

    def log(self, message: str, *args: Any) -> str:
        """Append a formatted line, mirror it to the debug log and return it."""
        text = message % args if args else message
        text = text[: _BUFFER_SIZE - 1]
        self.items.append(text)
        if self.debug_log is not None:
            self.debug_log.log_item(text)
        return text

    def clear_log(self) -> None:
        self.items.clear()

    def submit(self, text: str) -> None:
        """Handle a line entered in the input box."""
        if not text:
            return
        self.items.append("# " + text)
        self.history.append(text)
        self.history_pos = len(self.history)
        self.process_command(text)

    def execute(self, command: str) -> None:
        self.process_command(command)

    def process_command(self, command: str) -> None:
        """Run ``command``; names are matched without regard to case."""
        if _same(command, "clear"):
            self.clear_log()
        elif _same(command, "help") or command == "?":
            self.log("Commands:")
            for known in self.commands:
                self.log("- %s", known)
        elif _same(command, "history"):
            first = max(len(self.history) - _HISTORY_SHOWN, 0)
            for index, entry in enumerate(self.history[first:], start=first):
                self.log("%3d: %s", index, entry)
        elif _same(command, "stat memory"):
            self.show_stat_memory = not self.show_stat_memory
        elif _same(command, "stat fps"):
            self.show_stat_fps = not self.show_stat_fps
        elif _same(command, "stat none"):
            self.show_stat_memory = False
            self.show_stat_fps = False
        elif _starts_with(command, "spawn "):
            self._spawn(command[6:])
        else:
            self.log("Unknown command: '%s'", command)
        self.scroll_to_bottom = True

    def _spawn(self, args: str) -> None:
        if not args:
            self.log("사용법: spawn <cube|sphere|triangle> <count = 1>")
            return
        shape, separator, count_text = args.partition(" ")
        if not separator:
            if self._is_shape(args):
                self.log("Spawning 1 %s(s)...\n", args)
                self._log_spawn_attempt(args)
            else:
                self.log("알 수 없는 객체 타입입니다: '%s'", args)
            return
        if not self._is_shape(shape):
            self.log("알 수 없는 객체 타입입니다: '%s'", shape)
            return
        count = _parse_int(count_text)
        if count <= 0:
            self.log("잘못된 개수입니다: %s", count_text)
            return
        self.log("Spawning %d %s(s)...", count, shape)
        for _ in range(count):
            self._log_spawn_attempt(shape)

    @staticmethod
    def _is_shape(text: str) -> bool:
        return any(_same(text, shape) for shape in _SPAWNABLE_SHAPES)

    def _log_spawn_attempt(self, shape: str) -> None:
        if _same(shape, "cube"):
            self.log("Try to Spawn Cube!\n")
        elif _same(shape, "sphere"):
            self.log("Try to Spawn Sphere!\n")
        elif _same(shape, "triangle"):
            self.log("Try to Spawn Triangle!\n")

    def toggle(self) -> None:
        self.is_open = not self.is_open

    def render(self) -> list[ConsoleLine]:
        """Return the lines to show, filtered and coloured; nothing while closed."""
        if not self.is_open:
            return []
        lines = []
        for item in self.items:
            if not _pass_filter(item, self.filter_text):
                continue
            if "[error]" in item:
                color = ERROR_COLOR
            elif _starts_with(item, "# "):
                color = COMMAND_COLOR
            else:
                color = None
            lines.append(ConsoleLine(item, color))
        self.scroll_to_bottom = False
        return lines

    def on_resize(self, width: int, height: int) -> None:
        """Remember the new screen size; the console keeps its layout."""
        self.screen_size = (width, height)

    def complete(self, buffer: str, cursor: int | None = None) -> tuple[str, int]:
        """Complete the word before ``cursor``; return the new text and cursor."""
        if cursor is None:
            cursor = len(buffer)
        start = cursor
        while start > 0 and buffer[start - 1] not in _WORD_SEPARATORS:
            start -= 1
        word = buffer[start:cursor]

        candidates = [c for c in self.commands if _starts_with(c, word) and len(c) >= len(word)]
        if not candidates:
            self.log('No match for "%s"!\n', word)
            return buffer, cursor

        if len(candidates) == 1:
            inserted = candidates[0] + " "
            return buffer[:start] + inserted + buffer[cursor:], start + len(inserted)

        match_len = len(word)
        while True:
            head = candidates[0][match_len : match_len + 1].upper()
            if not head or any(c[match_len : match_len + 1] != head for c in candidates[1:]):
                break
            match_len += 1

        if match_len > 0:
            inserted = candidates[0][:match_len]
            buffer = buffer[:start] + inserted + buffer[cursor:]
            cursor = start + len(inserted)

        self.log("Possible matches:\n")
        for candidate in candidates:
            self.log("- %s\n", candidate)
        return buffer, cursor

    def history_step(self, direction: HistoryDirection) -> str | None:
        """Move through the history; return the text to show, or None if unchanged."""
        previous = self.history_pos
        if direction is HistoryDirection.UP:
            if self.history_pos == -1:
                self.history_pos = len(self.history) - 1
            elif self.history_pos > 0:
                self.history_pos -= 1
        elif self.history_pos != -1:
            self.history_pos += 1
            if self.history_pos >= len(self.history):
                self.history_pos = -1

        if previous == self.history_pos:
            return None
        return self.history[self.history_pos] if self.history_pos >= 0 else ""