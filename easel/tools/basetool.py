from PySide6.QtCore import QObject, QPoint, Qt
from PySide6.QtGui import QCursor

from easel.core.geometry import Gesture


class BaseTool(QObject):
    """Abstract base class for all drawing tools.

    A tool receives gesture callbacks from the :class:`DragController` with
    explicit pointer positions in surface coordinates. Tools read the current
    color and size from ``controller.tool_state`` and commit onto
    ``controller.surface``.
    """

    tool = None
    name = None
    shortcut = None
    previewable = False

    def __init__(self, controller):
        super().__init__()
        self.controller = controller
        self.cursor = QCursor(Qt.BlankCursor)

    @property
    def tool_state(self):
        return self.controller.tool_state

    @property
    def surface(self):
        return self.controller.surface

    def on_gesture_start(self, pos: QPoint):
        pass

    def on_gesture_move(self, prev_pos: QPoint, pos: QPoint):
        pass

    def on_gesture_end(self, pos: QPoint):
        pass

    def draw_preview(self, painter, gesture: Gesture):
        """Called every frame while a previewable gesture is in progress."""
        pass
