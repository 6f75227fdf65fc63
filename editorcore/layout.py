"""Rectangles, windows and splitters that lay out editor viewports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass
class Rect:
    """An axis-aligned rectangle in pixels."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; the right and bottom edges are outside."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Window:
    """A rectangular area that may own a viewport."""

    def __init__(self, viewport: Any = None) -> None:
        self._rect = Rect()
        self.viewport = viewport

    @property
    def rect(self) -> Rect:
        return self._rect

    @rect.setter
    def rect(self, value: Rect) -> None:
        self._rect = value
        if self.viewport is not None:
            self.viewport.set_rect(value)

    def tick(self, delta_time: float) -> None:
        if self.viewport is not None:
            self.viewport.tick(delta_time)

    def render(self, context: Any) -> None:
        if self.viewport is not None:
            self.viewport.render(context)

    def is_hover(self, x: float, y: float) -> bool:
        return self._rect.contains(x, y)


class Splitter(Window):
    """Divides its rectangle between two child windows."""

    MIN_RATIO = 0.01
    MAX_RATIO = 0.99

    def __init__(self, orientation: Orientation) -> None:
        super().__init__()
        self.orientation = orientation
        self.first: Window | None = None
        self.second: Window | None = None
        self.ratio = 0.5
        self.padding = 2.0

    def set_children(self, first: Window | None, second: Window | None) -> None:
        self.first = first
        self.second = second

    def set_child(self, index: int, child: Window | None) -> None:
        """Set child 0 or 1; other indices are ignored."""
        if index == 0:
            self.first = child
        elif index == 1:
            self.second = child

    def get_child(self, index: int) -> Window | None:
        if index == 0:
            return self.first
        if index == 1:
            return self.second
        return None

    def set_ratio(self, ratio: float, ignore_clamp: bool = False) -> None:
        """Set the share of the first child, clamped unless ``ignore_clamp``."""
        if ignore_clamp:
            self.ratio = ratio
        else:
            self.ratio = min(max(ratio, self.MIN_RATIO), self.MAX_RATIO)

    def update_child_rects(self) -> None:
        """Give each child its part of this rectangle, separated by the padding."""
        if self.first is None or self.second is None:
            return
        rect = self.rect
        half_pad = self.padding * 0.5
        if self.orientation is Orientation.HORIZONTAL:
            split = rect.x + rect.width * self.ratio
            self.first.rect = Rect(rect.x, rect.y, rect.width * self.ratio - half_pad, rect.height)
            self.second.rect = Rect(
                split + half_pad, rect.y, rect.width * (1.0 - self.ratio) - half_pad, rect.height
            )
        else:
            split = rect.y + rect.height * self.ratio
            self.first.rect = Rect(rect.x, rect.y, rect.width, rect.height * self.ratio - half_pad)
            self.second.rect = Rect(
                rect.x, split + half_pad, rect.width, rect.height * (1.0 - self.ratio) - half_pad
            )

    def tick(self, delta_time: float) -> None:
        self.update_child_rects()
        for child in (self.first, self.second):
            if child is not None:
                child.tick(delta_time)

    def render(self, context: Any) -> None:
        self.update_child_rects()
        for child in (self.first, self.second):
            if child is not None:
                child.render(context)


class HorizontalSplitter(Splitter):
    """Children side by side."""

    def __init__(self) -> None:
        super().__init__(Orientation.HORIZONTAL)


class VerticalSplitter(Splitter):
    """Children one above the other."""

    def __init__(self) -> None:
        super().__init__(Orientation.VERTICAL)