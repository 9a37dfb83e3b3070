from PySide6.QtWidgets import QPushButton, QColorDialog


class ActiveColorButton(QPushButton):
    def __init__(self, tool_state):
        super().__init__()
        self.tool_state = tool_state
        self.setFixedSize(24, 24)
        self.clicked.connect(self.on_click)
        self.update_color(self.tool_state.color)
        self.tool_state.color_changed.connect(self.update_color)

    def on_click(self):
        color = QColorDialog.getColor(self.tool_state.qcolor, self)
        if color.isValid():
            self.tool_state.set_color(color.name())

    def update_color(self, color):
        name = self.tool_state.qcolor.name()
        self.setStyleSheet(f"background-color: {name}")
        self.setToolTip(name)
