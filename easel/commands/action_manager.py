from PySide6.QtGui import QAction, QActionGroup


class ActionManager:
    def __init__(self, main_window):
        self.main_window = main_window
        self.app = main_window.app
        self.tool_actions = {}
        self.tool_action_group = None

    def setup_actions(self):
        """Create the file and tool actions shared by menus and toolbars."""
        self._build_file_actions()
        self._build_tool_actions()

    def _build_file_actions(self):
        """Create actions related to file management."""
        document_service = self.app.document_service

        self.open_action = QAction("&Open Image...", self.main_window)
        self.open_action.setShortcut("Ctrl+O")
        self.open_action.triggered.connect(document_service.open_image)

        self.save_action = QAction("&Save Image As...", self.main_window)
        self.save_action.setShortcut("Ctrl+S")
        self.save_action.triggered.connect(document_service.save_image_as)

        self.clear_action = QAction("&Clear", self.main_window)
        self.clear_action.setShortcut("Ctrl+Shift+N")
        self.clear_action.triggered.connect(self.app.clear)

        self.exit_action = QAction("E&xit", self.main_window)
        self.exit_action.setShortcut("Ctrl+Q")
        self.exit_action.triggered.connect(self.app.exit)

    def _build_tool_actions(self):
        """Create one checkable action per tool, kept in sync with the tool state."""
        tool_state = self.app.tool_state
        self.tool_action_group = QActionGroup(self.main_window)
        self.tool_action_group.setExclusive(True)

        for tool in self.app.drag_controller.tools.values():
            action = QAction(tool.name, self.main_window)
            action.setCheckable(True)
            action.setToolTip(f"{tool.name} ({tool.shortcut.upper()})")
            action.setData(tool.tool.value)
            action.setChecked(tool.tool == tool_state.tool)
            action.triggered.connect(lambda checked=False, t=tool.tool: tool_state.set_tool(t))
            self.tool_action_group.addAction(action)
            self.tool_actions[tool.tool] = action

        tool_state.tool_changed.connect(self.update_tool_actions)

    def update_tool_actions(self, tool):
        action = self.tool_actions.get(tool)
        if action is not None and not action.isChecked():
            action.setChecked(True)
