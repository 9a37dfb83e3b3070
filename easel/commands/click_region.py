from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QRect


class ClickRegion:
    """Rectangular hit area that runs *action* when clicked inside.

    Edges are inclusive, so a click on ``x + w`` or ``y + h`` still counts.
    """

    def __init__(self, x, y, w, h, action: Callable[[], object]):
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.action = action

    @property
    def rect(self) -> QRect:
        return QRect(self.x, self.y, self.w, self.h)

    def contains(self, px, py) -> bool:
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h

    def click(self, px, py) -> bool:
        if not self.contains(px, py):
            return False
        self.action()
        return True


def dispatch_click(regions, px, py) -> bool:
    """Send a click to the first region containing it."""

    for region in regions:
        if region.click(px, py):
            return True
    return False
