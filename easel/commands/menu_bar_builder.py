from PySide6.QtWidgets import QMainWindow

from easel.commands.action_manager import ActionManager


class MenuBarBuilder:
    def __init__(self, window: QMainWindow, action_manager: ActionManager):
        self.window = window
        self.action_manager = action_manager
        self.tools_menu = None

    def setup_menus(self):
        menu_bar = self.window.menuBar()
        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.action_manager.open_action)
        file_menu.addAction(self.action_manager.save_action)
        file_menu.addSeparator()
        file_menu.addAction(self.action_manager.clear_action)
        file_menu.addSeparator()
        file_menu.addAction(self.action_manager.exit_action)

        self.tools_menu = menu_bar.addMenu("&Tools")
        for action in self.action_manager.tool_action_group.actions():
            self.tools_menu.addAction(action)
