from __future__ import annotations

from PySide6.QtCore import QPoint, QPointF, QSize, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPen


DEFAULT_BACKDROP_COLOR = QColor(200, 200, 200)


class CanvasRenderer:
    """Draws one frame: backdrop, committed raster, live preview, size ring.

    The renderer only reads from the tool state, the surface and the drag
    controller. The pointer position is passed in by the caller.
    """

    def __init__(self, tool_state, surface, controller, backdrop_color=DEFAULT_BACKDROP_COLOR):
        self.tool_state = tool_state
        self.surface = surface
        self.controller = controller
        self.backdrop_color = QColor(backdrop_color)

    def paint(self, painter: QPainter, pointer: QPoint | None, frame_rect=None):
        if frame_rect is None:
            frame_rect = painter.viewport()

        painter.setRenderHint(QPainter.SmoothPixmapTransform, False)
        painter.fillRect(frame_rect, self.backdrop_color)
        self.surface.composite_into(painter)

        painter.setRenderHint(QPainter.Antialiasing, True)
        self.draw_preview(painter)
        self.draw_cursor(painter, pointer)

    def draw_preview(self, painter: QPainter):
        gesture = self.controller.gesture()
        if gesture is None:
            return
        tool = self.controller.current_tool
        if not tool.previewable:
            return
        tool.draw_preview(painter, gesture)

    def draw_cursor(self, painter: QPainter, pointer: QPoint | None):
        if not self.surface.contains(pointer):
            return
        radius = self.tool_state.size / 2.0
        painter.save()
        painter.setPen(QPen(QColor(Qt.black), 1))
        painter.setBrush(Qt.NoBrush)
        painter.drawEllipse(QPointF(pointer), radius, radius)
        painter.restore()

    def render_frame(self, size: QSize, pointer: QPoint | None = None) -> QImage:
        """Render a frame of *size* into a new image."""

        frame = QImage(size, QImage.Format_ARGB32)
        frame.fill(Qt.transparent)
        painter = QPainter(frame)
        self.paint(painter, pointer, frame.rect())
        painter.end()
        return frame
