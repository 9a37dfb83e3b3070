from PySide6.QtCore import QPoint

from easel.core.tool_state import Tool
from easel.tools.basetool import BaseTool

TEXT_SCALE = 2


class TextTool(BaseTool):
    tool = Tool.TEXT
    name = "Text"
    shortcut = "t"

    def on_gesture_start(self, pos: QPoint):
        self.controller.request_text(pos)

    def commit(self, text: str, pos: QPoint):
        self.surface.commit_text(
            text,
            pos.x(),
            pos.y(),
            self.tool_state.qcolor,
            self.tool_state.size * TEXT_SCALE,
        )
