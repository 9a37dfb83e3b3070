from __future__ import annotations

from PySide6.QtCore import QPoint, QSize, Qt, Signal, Slot
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QInputDialog, QSizePolicy, QWidget

from easel.commands.canvas_input_handler import CanvasInputHandler

DEFAULT_TEXT = "Hello World"


class Canvas(QWidget):
    """Widget showing the raster surface 1:1 from its top-left corner.

    The surface follows the widget size; every repaint runs one renderer
    frame with the last known pointer position.
    """

    cursor_pos_changed = Signal(QPoint)

    def __init__(self, app, parent=None):
        super().__init__(parent)
        self.app = app
        self.input_handler = CanvasInputHandler(self)
        self.pointer_pos: QPoint | None = None
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        self.app.surface_changed.connect(self.update)
        self.app.drag_controller.text_requested.connect(self.prompt_text)
        self.app.tool_state.size_changed.connect(lambda _size: self.update())
        self.app.tool_state.tool_changed.connect(self.update_cursor)
        self.update_cursor()

    def sizeHint(self):
        return QSize(self.app.surface.width, self.app.surface.height)

    def minimumSizeHint(self):
        return QSize(1, 1)

    def update_cursor(self, _tool=None):
        self.setCursor(self.app.drag_controller.current_tool.cursor)

    @Slot(QPoint)
    def prompt_text(self, pos):
        text, ok = QInputDialog.getText(self, "Text", "Enter Text:", text=DEFAULT_TEXT)
        self.app.drag_controller.resolve_text(text if ok else None)
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        self.app.renderer.paint(painter, self.pointer_pos, self.rect())
        painter.end()

    def resizeEvent(self, event):
        size = event.size()
        if size.width() > 0 and size.height() > 0:
            self.app.resize_viewport(size.width(), size.height())
        super().resizeEvent(event)

    def keyPressEvent(self, event):
        self.input_handler.keyPressEvent(event)

    def mousePressEvent(self, event):
        self.input_handler.mousePressEvent(event)

    def mouseMoveEvent(self, event):
        self.input_handler.mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        self.input_handler.mouseReleaseEvent(event)

    def leaveEvent(self, event):
        self.input_handler.leaveEvent(event)
        super().leaveEvent(event)
