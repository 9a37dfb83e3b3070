from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QPen

from easel.core.geometry import Gesture, draw_shape
from easel.tools.basetool import BaseTool


class BaseShapeTool(BaseTool):
    """Drag tool that previews a shape each frame and commits it on release."""

    previewable = True

    def preview_pen(self) -> QPen:
        return QPen(self.tool_state.qcolor, self.tool_state.size, Qt.SolidLine, Qt.SquareCap, Qt.MiterJoin)

    def draw_preview(self, painter, gesture: Gesture):
        painter.save()
        painter.setPen(self.preview_pen())
        painter.setBrush(Qt.NoBrush)
        draw_shape(painter, gesture.tool, gesture.anchor, gesture.pointer)
        painter.restore()

    def on_gesture_end(self, pos: QPoint):
        self.surface.commit_shape(
            self.tool,
            self.tool_state.anchor,
            pos,
            self.tool_state.qcolor,
            self.tool_state.size,
        )
