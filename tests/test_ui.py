from unittest.mock import patch

import pytest
from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QColor

from easel.core.app import App
from easel.core.services.document_service import DocumentService
from easel.core.tool_state import Tool
from easel.ui.canvas import Canvas
from easel.ui.swatch_grid import DEFAULT_SWATCHES, SwatchGrid
from easel.ui.ui import MainWindow


@pytest.fixture
def app(qapp, settings):
    return App(settings_controller=settings, document_service=DocumentService())


@pytest.fixture
def window(app, qtbot):
    window = MainWindow(app)
    app.main_window = window
    qtbot.addWidget(window)
    return window


def test_tool_actions_follow_tool_state(window, app):
    actions = window.action_manager.tool_actions
    assert set(actions) == set(Tool)
    assert actions[Tool.BRUSH].isChecked()

    app.set_tool("ellipse")
    assert actions[Tool.ELLIPSE].isChecked()
    assert not actions[Tool.BRUSH].isChecked()

    actions[Tool.FILL].trigger()
    assert app.tool_state.tool is Tool.FILL


def test_size_spin_box_is_bound_both_ways(window, app):
    spin_box = window.tool_bar_builder.size_spin_box
    spin_box.setValue(12)
    assert app.tool_state.size == 12

    app.set_size(999)
    assert spin_box.value() == 50


def test_swatch_click_sets_color(app, qtbot):
    grid = SwatchGrid(app.tool_state)
    qtbot.addWidget(grid)
    grid.show()
    region = grid.regions[2]
    qtbot.mouseClick(grid, Qt.LeftButton, pos=QPoint(region.x + 5, region.y + 5))
    assert app.tool_state.color == DEFAULT_SWATCHES[2]


def test_swatch_gap_click_is_ignored(app, qtbot):
    grid = SwatchGrid(app.tool_state, colors=["#ff0000", "#00ff00"], columns=2, swatch_size=10, spacing=10)
    qtbot.addWidget(grid)
    grid.show()
    qtbot.mouseClick(grid, Qt.LeftButton, pos=QPoint(15, 5))
    assert app.tool_state.color == "#000000"


def test_canvas_resize_resizes_surface(app, qtbot):
    canvas = Canvas(app)
    qtbot.addWidget(canvas)
    canvas.resize(140, 90)
    canvas.show()
    qtbot.waitUntil(lambda: app.surface.width == 140)
    assert app.surface.height == 90


def test_canvas_text_prompt_commits(app, qtbot):
    canvas = Canvas(app)
    qtbot.addWidget(canvas)
    app.set_tool("text")
    with patch("easel.ui.canvas.QInputDialog.getText", return_value=("Hi", True)) as get_text, \
         patch.object(app.surface, "commit_text") as commit_text:
        app.drag_controller.on_gesture_start(QPoint(20, 30))
    get_text.assert_called_once()
    commit_text.assert_called_once_with("Hi", 20, 30, QColor("#000000"), 10)
    assert app.tool_state.dragging is False


def test_canvas_text_prompt_cancel(app, qtbot):
    canvas = Canvas(app)
    qtbot.addWidget(canvas)
    app.set_tool("text")
    with patch("easel.ui.canvas.QInputDialog.getText", return_value=("ignored", False)), \
         patch.object(app.surface, "commit_text") as commit_text:
        app.drag_controller.on_gesture_start(QPoint(20, 30))
    commit_text.assert_not_called()
    assert app.tool_state.dragging is False


def test_import_failure_shows_message(app, tmp_path, window):
    bad_file = tmp_path / "broken.png"
    bad_file.write_bytes(b"nope")
    with patch.object(DocumentService, "_show_message") as show_message:
        assert app.document_service.import_from_path(str(bad_file)) is False
    show_message.assert_called_once()


def test_save_updates_last_directory(app, tmp_path, window):
    target = tmp_path / "out" / "art.png"
    target.parent.mkdir()
    assert app.document_service.save_to_path(str(target)) is True
    assert target.exists()
    assert app.last_directory == str(target.parent)


def test_normalize_save_path(app):
    service = app.document_service
    assert service._normalize_save_path("/tmp/art", "JPEG (*.jpg *.jpeg)") == "/tmp/art.jpg"
    assert service._normalize_save_path("/tmp/art", None) == "/tmp/art.png"
    assert service._normalize_save_path("/tmp/art.bmp", "PNG (*.png)") == "/tmp/art.bmp"


def test_canvas_cursor_follows_tool(app, qtbot):
    canvas = Canvas(app)
    qtbot.addWidget(canvas)
    assert canvas.cursor().shape() == Qt.BlankCursor

    app.set_tool("select")
    assert canvas.cursor().shape() == Qt.CrossCursor

    app.set_tool("brush")
    assert canvas.cursor().shape() == Qt.BlankCursor


def test_exit_action_goes_through_app(window, app, qtbot):
    window.show()
    with qtbot.waitSignal(app.exit_triggered):
        window.action_manager.exit_action.trigger()
    assert not window.isVisible()


def test_status_bar_tracks_cursor_and_tool(window, app):
    status = window.status_bar_manager
    window.canvas.cursor_pos_changed.emit(QPoint(7, 9))
    assert status.cursor_pos_label.text() == "Cursor: (7, 9)"

    assert status.tool_label.text() == "Tool: Brush"
    app.set_tool("line")
    assert status.tool_label.text() == "Tool: Line"
