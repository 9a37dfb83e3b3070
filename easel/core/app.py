import logging

from PySide6.QtCore import QObject, Signal, Slot

from easel.core.drag_controller import DragController
from easel.core.raster_surface import RasterSurface
from easel.core.renderer import CanvasRenderer
from easel.core.settings_controller import SettingsController
from easel.core.tool_state import ToolState


logger = logging.getLogger(__name__)


class App(QObject):
    """Session orchestrator owning the tool state and the raster surface."""

    surface_changed = Signal()
    exit_triggered = Signal()

    def __init__(self, settings_controller=None, document_service=None):
        super().__init__()
        self._main_window = None
        self.settings_controller = settings_controller or SettingsController()
        settings = self.settings_controller

        self.tool_state = ToolState(size=settings.tool_size, color=settings.tool_color)
        canvas_size = settings.canvas_size
        self.surface = RasterSurface(
            canvas_size.width(),
            canvas_size.height(),
            settings.base_color,
            import_size=settings.import_size,
        )
        self.surface.changed.connect(self.surface_changed.emit)
        self.drag_controller = DragController(self.tool_state, self.surface)
        self.renderer = CanvasRenderer(
            self.tool_state,
            self.surface,
            self.drag_controller,
            settings.backdrop_color,
        )

        self.document_service = document_service
        if document_service is not None:
            document_service.app = self

    @property
    def last_directory(self):
        return self.settings_controller.last_directory

    @last_directory.setter
    def last_directory(self, value):
        self.settings_controller.last_directory = value

    @property
    def main_window(self):
        return self._main_window

    @main_window.setter
    def main_window(self, window):
        self._main_window = window

    # ------------------------------------------------------------------
    # Toolbar contract
    # ------------------------------------------------------------------
    @Slot(str)
    def set_tool(self, name):
        self.tool_state.set_tool(name)

    @Slot(object)
    def set_color(self, value):
        self.tool_state.set_color(value)

    @Slot(float)
    def set_size(self, value):
        self.tool_state.set_size(value)

    # ------------------------------------------------------------------
    # Surface operations
    # ------------------------------------------------------------------
    @Slot()
    def clear(self):
        self.drag_controller.cancel()
        self.surface.clear()

    @Slot(int, int)
    def resize_viewport(self, width, height):
        if width == self.surface.width and height == self.surface.height:
            return
        self.surface.resize(width, height)

    def export_image(self) -> bytes:
        return self.surface.export_png()

    def save_image(self, filename: str) -> None:
        self.surface.save(filename)

    def import_image(self, data: bytes) -> None:
        self.surface.import_image(data)

    def open_image(self, filename: str) -> None:
        self.surface.load(filename)

    @Slot()
    def save_settings(self):
        self.settings_controller.update_tool_settings(
            size=self.tool_state.size,
            color=self.tool_state.color,
        )
        self.settings_controller.save_settings()

    @Slot()
    def exit(self):
        self.exit_triggered.emit()
