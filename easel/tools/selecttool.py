from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QColor, QCursor, QPen

from easel.core.tool_state import Tool
from easel.tools.baseshapetool import BaseShapeTool

SELECTION_DASH_PATTERN = [5, 5]


class SelectTool(BaseShapeTool):
    """Rubber-band selection box.

    The box is only ever drawn as a preview; releasing it commits nothing.
    """

    tool = Tool.SELECT
    name = "Select"
    shortcut = "s"

    def __init__(self, controller):
        super().__init__(controller)
        self.cursor = QCursor(Qt.CrossCursor)

    def preview_pen(self) -> QPen:
        pen = QPen(QColor(Qt.black), 1, Qt.CustomDashLine)
        pen.setDashPattern(SELECTION_DASH_PATTERN)
        return pen

    def on_gesture_end(self, pos: QPoint):
        pass
