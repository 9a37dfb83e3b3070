from PySide6.QtWidgets import QLabel


class StatusBarManager:
    def __init__(self, main_window):
        self.main_window = main_window
        self.canvas = main_window.canvas
        self.app = main_window.app
        self._setup_status_bar()
        self._connect_signals()

    def _setup_status_bar(self):
        status_bar = self.main_window.statusBar()
        self.cursor_pos_label = QLabel("Cursor: (0, 0)")
        self.tool_label = QLabel(self._tool_text(self.app.tool_state.tool))
        status_bar.addWidget(self.cursor_pos_label)
        status_bar.addWidget(self.tool_label)

    def _connect_signals(self):
        self.canvas.cursor_pos_changed.connect(self.update_cursor_pos_label)
        self.app.tool_state.tool_changed.connect(self.update_tool_label)

    def update_cursor_pos_label(self, pos):
        self.cursor_pos_label.setText(f"Cursor: ({pos.x()}, {pos.y()})")

    def update_tool_label(self, tool):
        self.tool_label.setText(self._tool_text(tool))

    def _tool_text(self, tool):
        return f"Tool: {self.app.drag_controller.tools[tool].name}"
