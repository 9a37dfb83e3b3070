from __future__ import annotations

from PySide6.QtCore import QPoint, Qt


class CanvasInputHandler:
    """Routes Qt mouse and key events on the canvas to the drag controller.

    Positions are taken from each event and handed over explicitly; the
    previous pointer position for incremental strokes is tracked here.
    """

    def __init__(self, canvas):
        self.canvas = canvas
        self.last_pos: QPoint | None = None

    @property
    def controller(self):
        return self.canvas.app.drag_controller

    @property
    def tool_state(self):
        return self.canvas.app.tool_state

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.controller.cancel()
            self.last_pos = None
            self.canvas.update()
            return

        key_text = event.text()
        if not key_text:
            return
        for tool in self.controller.tools.values():
            if tool.shortcut and key_text == tool.shortcut:
                self.tool_state.set_tool(tool.tool)
                return

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            return
        pos = event.position().toPoint()
        self.last_pos = pos
        self.canvas.pointer_pos = pos
        self.controller.on_gesture_start(pos)
        self.canvas.update()

    def mouseMoveEvent(self, event):
        pos = event.position().toPoint()
        self.canvas.pointer_pos = pos
        self.canvas.cursor_pos_changed.emit(pos)

        if event.buttons() & Qt.LeftButton:
            prev_pos = self.last_pos if self.last_pos is not None else pos
            self.controller.on_gesture_move(prev_pos, pos)
            self.last_pos = pos
        self.canvas.update()

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.LeftButton:
            return
        pos = event.position().toPoint()
        self.canvas.pointer_pos = pos
        self.controller.on_gesture_end(pos)
        self.last_pos = None
        self.canvas.update()

    def leaveEvent(self, event):
        self.canvas.pointer_pos = None
        self.canvas.update()
