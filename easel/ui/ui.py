from PySide6.QtWidgets import QMainWindow

from easel.commands.action_manager import ActionManager
from easel.commands.menu_bar_builder import MenuBarBuilder
from easel.commands.status_bar_manager import StatusBarManager
from easel.commands.tool_bar_builder import ToolBarBuilder
from easel.ui.canvas import Canvas


class MainWindow(QMainWindow):
    def __init__(self, app):
        super().__init__()
        self.app = app
        self.setWindowTitle("Easel")

        self.canvas = Canvas(self.app)
        self.setCentralWidget(self.canvas)

        self.action_manager = ActionManager(self)
        self.action_manager.setup_actions()
        self.menu_bar_builder = MenuBarBuilder(self, self.action_manager)
        self.menu_bar_builder.setup_menus()
        self.tool_bar_builder = ToolBarBuilder(self, self.app)
        self.tool_bar_builder.setup_toolbars()
        self.status_bar_manager = StatusBarManager(self)

        self.app.exit_triggered.connect(self.close)
        self.resize(self.app.surface.width, self.app.surface.height)
        self.canvas.setFocus()

    def closeEvent(self, event):
        self.app.save_settings()
        super().closeEvent(event)
