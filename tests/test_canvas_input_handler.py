from unittest.mock import Mock

import pytest
from PySide6.QtCore import QEvent, QPoint, QPointF, Qt
from PySide6.QtGui import QColor, QKeyEvent, QMouseEvent

from easel.commands.canvas_input_handler import CanvasInputHandler
from easel.core.app import App
from easel.core.drag_controller import GestureState
from easel.core.tool_state import Tool


def mouse_event(event_type, x, y, button=Qt.LeftButton, buttons=Qt.LeftButton):
    return QMouseEvent(event_type, QPointF(x, y), button, buttons, Qt.NoModifier)


@pytest.fixture
def handler(qapp, settings):
    mock_canvas = Mock()
    mock_canvas.app = App(settings_controller=settings)
    mock_canvas.pointer_pos = None
    return CanvasInputHandler(mock_canvas)


def test_drag_draws_freehand_stroke(handler):
    app = handler.canvas.app
    handler.mousePressEvent(mouse_event(QEvent.MouseButtonPress, 10, 50))
    handler.mouseMoveEvent(mouse_event(QEvent.MouseMove, 50, 50, Qt.NoButton))
    handler.mouseMoveEvent(mouse_event(QEvent.MouseMove, 90, 50, Qt.NoButton))
    assert app.surface.pixel_color(30, 50) == QColor("black")
    assert app.surface.pixel_color(70, 50) == QColor("black")

    handler.mouseReleaseEvent(mouse_event(QEvent.MouseButtonRelease, 90, 50, buttons=Qt.NoButton))
    assert app.tool_state.dragging is False
    assert handler.last_pos is None
    assert handler.canvas.pointer_pos == QPoint(90, 50)


def test_hover_updates_pointer_without_drawing(handler):
    app = handler.canvas.app
    handler.mouseMoveEvent(mouse_event(QEvent.MouseMove, 40, 40, Qt.NoButton, Qt.NoButton))
    assert handler.canvas.pointer_pos == QPoint(40, 40)
    handler.canvas.cursor_pos_changed.emit.assert_called_with(QPoint(40, 40))
    assert app.drag_controller.state is GestureState.IDLE


def test_rectangle_drag_commits_on_release(handler):
    app = handler.canvas.app
    app.set_tool("rect")
    app.set_size(4)
    handler.mousePressEvent(mouse_event(QEvent.MouseButtonPress, 10, 10))
    handler.mouseMoveEvent(mouse_event(QEvent.MouseMove, 50, 40, Qt.NoButton))
    assert app.surface.pixel_color(10, 25) == QColor("white")
    handler.mouseReleaseEvent(mouse_event(QEvent.MouseButtonRelease, 50, 40, buttons=Qt.NoButton))
    assert app.surface.pixel_color(10, 25) == QColor("black")
    assert app.surface.pixel_color(30, 25) == QColor("white")


def test_other_buttons_are_ignored(handler):
    app = handler.canvas.app
    handler.mousePressEvent(mouse_event(QEvent.MouseButtonPress, 10, 10, Qt.RightButton, Qt.RightButton))
    assert app.tool_state.dragging is False


def test_shortcut_switches_tool(handler):
    app = handler.canvas.app
    handler.keyPressEvent(QKeyEvent(QEvent.KeyPress, Qt.Key_E, Qt.NoModifier, "e"))
    assert app.tool_state.tool is Tool.ERASER
    handler.keyPressEvent(QKeyEvent(QEvent.KeyPress, Qt.Key_O, Qt.NoModifier, "o"))
    assert app.tool_state.tool is Tool.ELLIPSE


def test_escape_cancels_gesture(handler):
    app = handler.canvas.app
    app.set_tool("line")
    handler.mousePressEvent(mouse_event(QEvent.MouseButtonPress, 10, 10))
    handler.keyPressEvent(QKeyEvent(QEvent.KeyPress, Qt.Key_Escape, Qt.NoModifier))
    handler.mouseReleaseEvent(mouse_event(QEvent.MouseButtonRelease, 90, 10, buttons=Qt.NoButton))
    assert app.tool_state.dragging is False
    assert app.surface.pixel_color(50, 10) == QColor("white")


def test_leave_hides_cursor(handler):
    handler.canvas.pointer_pos = QPoint(3, 3)
    handler.leaveEvent(None)
    assert handler.canvas.pointer_pos is None
