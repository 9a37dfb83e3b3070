from PySide6.QtCore import QSignalBlocker, Qt
from PySide6.QtWidgets import QLabel, QSpinBox, QToolBar

from easel.core.tool_state import MAX_SIZE, MIN_SIZE
from easel.ui.color_button import ActiveColorButton
from easel.ui.swatch_grid import SwatchGrid


class ToolBarBuilder:
    def __init__(self, main_window, app):
        self.main_window = main_window
        self.app = app
        self.action_manager = main_window.action_manager
        self.top_toolbar = None
        self.left_toolbar = None
        self.size_spin_box = None
        self.swatch_grid = None

    def setup_toolbars(self):
        self._setup_top_toolbar()
        self._setup_left_toolbar()

    def _setup_top_toolbar(self):
        tool_state = self.app.tool_state
        self.top_toolbar = QToolBar("Top Toolbar")
        self.main_window.addToolBar(Qt.TopToolBarArea, self.top_toolbar)

        self.top_toolbar.addAction(self.action_manager.open_action)
        self.top_toolbar.addAction(self.action_manager.save_action)
        self.top_toolbar.addAction(self.action_manager.clear_action)
        self.top_toolbar.addSeparator()

        self.top_toolbar.addWidget(QLabel("Size: "))
        self.size_spin_box = QSpinBox()
        self.size_spin_box.setRange(MIN_SIZE, MAX_SIZE)
        self.size_spin_box.setValue(int(tool_state.size))
        self.size_spin_box.valueChanged.connect(lambda value: tool_state.set_size(value))
        tool_state.size_changed.connect(self._sync_size_spin_box)
        self.top_toolbar.addWidget(self.size_spin_box)
        self.top_toolbar.addSeparator()

        self.top_toolbar.addWidget(ActiveColorButton(tool_state))
        self.swatch_grid = SwatchGrid(tool_state)
        self.top_toolbar.addWidget(self.swatch_grid)

    def _setup_left_toolbar(self):
        self.left_toolbar = QToolBar("Tools")
        self.main_window.addToolBar(Qt.LeftToolBarArea, self.left_toolbar)
        for action in self.action_manager.tool_action_group.actions():
            self.left_toolbar.addAction(action)

    def _sync_size_spin_box(self, size):
        if self.size_spin_box.value() == int(size):
            return
        blocker = QSignalBlocker(self.size_spin_box)
        self.size_spin_box.setValue(int(size))
        del blocker
