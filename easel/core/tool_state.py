from __future__ import annotations

import logging
import math
from enum import Enum

from PySide6.QtCore import QObject, QPoint, Signal, Slot
from PySide6.QtGui import QColor


logger = logging.getLogger(__name__)

MIN_SIZE = 1
MAX_SIZE = 50
DEFAULT_SIZE = 5
DEFAULT_COLOR = "#000000"


class Tool(str, Enum):
    BRUSH = "brush"
    ERASER = "eraser"
    FILL = "fill"
    TEXT = "text"
    SELECT = "select"
    RECT = "rect"
    ELLIPSE = "ellipse"
    LINE = "line"

    def __str__(self) -> str:
        return self.value


def clamp_size(value):
    if math.isnan(value) or value < MIN_SIZE:
        return MIN_SIZE
    if value > MAX_SIZE:
        return MAX_SIZE
    return value


class ToolState(QObject):
    """Current tool, stroke color, stroke size and drag anchor for a session."""

    tool_changed = Signal(object)
    color_changed = Signal(object)
    size_changed = Signal(float)

    def __init__(self, size=DEFAULT_SIZE, color=DEFAULT_COLOR):
        super().__init__()
        self.tool = Tool.BRUSH
        self.color = color
        self.size = clamp_size(size)
        self.dragging = False
        self.anchor = QPoint()

    @property
    def qcolor(self) -> QColor:
        return QColor(self.color)

    @Slot(str)
    def set_tool(self, name):
        # Raises ValueError for identifiers outside the Tool enum.
        tool = Tool(name)
        self.tool = tool
        logger.debug("Tool set to %s", tool)
        self.tool_changed.emit(tool)

    @Slot(object)
    def set_color(self, value):
        self.color = value
        self.color_changed.emit(value)

    @Slot(float)
    def set_size(self, value):
        self.size = clamp_size(value)
        self.size_changed.emit(self.size)

    def start_drag(self, x, y):
        self.dragging = True
        self.anchor = QPoint(int(x), int(y))

    def stop_drag(self):
        self.dragging = False
