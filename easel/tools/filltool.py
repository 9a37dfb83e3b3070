from PySide6.QtCore import QPoint

from easel.core.tool_state import Tool
from easel.tools.basetool import BaseTool


class FillTool(BaseTool):
    tool = Tool.FILL
    name = "Fill"
    shortcut = "f"

    def on_gesture_start(self, pos: QPoint):
        # Whole-surface fill; the click position does not bound the region.
        self.surface.fill_all(self.tool_state.qcolor)
