from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QWidget

from easel.commands.click_region import ClickRegion, dispatch_click

DEFAULT_SWATCHES = (
    "#000000",
    "#ffffff",
    "#ed1c24",
    "#ff7f27",
    "#fff200",
    "#22b14c",
    "#00a2e8",
    "#3f48cc",
    "#a349a4",
)


class SwatchGrid(QWidget):
    """Grid of color swatches; clicking one sets the stroke color."""

    def __init__(self, tool_state, colors=DEFAULT_SWATCHES, columns=9, swatch_size=20, spacing=4, parent=None):
        super().__init__(parent)
        self.tool_state = tool_state
        self.colors = list(colors)
        self.columns = max(1, columns)
        self.swatch_size = swatch_size
        self.spacing = spacing
        self.regions = []
        for index, color in enumerate(self.colors):
            row, col = divmod(index, self.columns)
            x = col * (swatch_size + spacing)
            y = row * (swatch_size + spacing)
            self.regions.append(
                ClickRegion(x, y, swatch_size, swatch_size, lambda c=color: self.tool_state.set_color(c))
            )
        self.tool_state.color_changed.connect(self.update)
        self.setFixedSize(self.sizeHint())

    def sizeHint(self):
        rows = (len(self.colors) + self.columns - 1) // self.columns
        cols = min(len(self.colors), self.columns)
        step = self.swatch_size + self.spacing
        return QSize(max(1, cols * step - self.spacing), max(1, rows * step - self.spacing))

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            return
        pos = event.position().toPoint()
        if dispatch_click(self.regions, pos.x(), pos.y()):
            event.accept()

    def paintEvent(self, event):
        painter = QPainter(self)
        active = self.tool_state.qcolor
        for color, region in zip(self.colors, self.regions):
            swatch = QColor(color)
            painter.fillRect(region.rect, swatch)
            if swatch == active:
                brightness = (swatch.red() * 299 + swatch.green() * 587 + swatch.blue() * 114) / 1000
                border = QColor(Qt.black) if brightness > 128 else QColor(Qt.white)
                painter.setPen(QPen(border, 2))
                painter.drawRect(region.rect.adjusted(1, 1, -1, -1))
        painter.end()
