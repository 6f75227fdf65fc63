"""A simple in-memory debug log and its command handler."""

from __future__ import annotations

from typing import Any

_BUFFER_SIZE = 1024


class DebugLog:
    """Collects formatted log lines for the debug console."""

    def __init__(self) -> None:
        self.items: list[str] = []

    def log(self, message: str, *args: Any) -> str:
        """Append ``message % args`` (or ``message`` alone) and return the line.

        Lines are cut to the size of the formatting buffer.
        """
        text = message % args if args else message
        text = text[: _BUFFER_SIZE - 1]
        self.items.append(text)
        return text

    def log_item(self, text: str) -> None:
        """Append ``text`` as it is."""
        self.items.append(text)

    def clear(self) -> None:
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


def process_command(command: str, log: list[str]) -> None:
    """Run a console command, writing its output into ``log``."""
    log.append("Executing: " + command)
    if command == "clear":
        log.clear()
    elif command == "help":
        log.extend(
            [
                "Available commands:",
                "- clear: Clears the console.",
                "- help: Shows this help message.",
            ]
        )
    else:
        log.append("Unknown command: " + command)


def resize_to_screen(
    vec: tuple[float, float],
    pre_ratio: tuple[float, float],
    cur_ratio: tuple[float, float],
) -> tuple[float, float]:
    """Rescale a window position or size after the screen ratio changed."""
    cur_min = min(cur_ratio)
    pre_min = min(pre_ratio)
    return (
        vec[0] * pre_ratio[0] / cur_ratio[0] * cur_min / pre_min,
        vec[1] * pre_ratio[1] / cur_ratio[1] * cur_min / pre_min,
    )