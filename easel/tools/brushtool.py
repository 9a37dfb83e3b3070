from PySide6.QtCore import QPoint

from easel.core.tool_state import Tool
from easel.tools.basetool import BaseTool


class BrushTool(BaseTool):
    tool = Tool.BRUSH
    name = "Brush"
    shortcut = "b"

    def stroke_color(self):
        return self.tool_state.qcolor

    def on_gesture_move(self, prev_pos: QPoint, pos: QPoint):
        self.surface.commit_line(prev_pos, pos, self.stroke_color(), self.tool_state.size)
