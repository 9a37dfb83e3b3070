from PySide6.QtCore import QObject, QSize
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QMessageBox
import configparser
import logging
import os

from easel.core.tool_state import clamp_size


logger = logging.getLogger(__name__)

SETTINGS_FILE = 'settings.ini'


class SettingsController(QObject):
    """Manages application settings persistence."""

    DEFAULT_CANVAS_SETTINGS = {
        "width": 800,
        "height": 600,
        "base_color": "#ffffff",
        "backdrop_color": "#c8c8c8",
    }

    DEFAULT_TOOL_SETTINGS = {
        "size": 5,
        "color": "#000000",
    }

    DEFAULT_IMPORT_SETTINGS = {
        "width": 200,
        "height": 200,
    }

    def __init__(self, path=SETTINGS_FILE):
        super().__init__()
        self.path = path
        self.config = configparser.ConfigParser()
        self.config.read(self.path)
        if not self.config.has_section('General'):
            self.config.add_section('General')
        self.last_directory = self.config.get('General', 'last_directory', fallback=os.path.expanduser("~"))

        if not self.config.has_section('Canvas'):
            self.config.add_section('Canvas')
        self.canvas_width = self._get_positive_int(
            'Canvas', 'width', self.DEFAULT_CANVAS_SETTINGS["width"]
        )
        self.canvas_height = self._get_positive_int(
            'Canvas', 'height', self.DEFAULT_CANVAS_SETTINGS["height"]
        )
        self.base_color = self._get_color(
            'Canvas', 'base_color', self.DEFAULT_CANVAS_SETTINGS["base_color"]
        )
        self.backdrop_color = self._get_color(
            'Canvas', 'backdrop_color', self.DEFAULT_CANVAS_SETTINGS["backdrop_color"]
        )

        if not self.config.has_section('Tool'):
            self.config.add_section('Tool')
        try:
            size_value = self.config.getfloat('Tool', 'size')
        except (configparser.NoOptionError, ValueError):
            size_value = self.DEFAULT_TOOL_SETTINGS["size"]
        if float(size_value).is_integer():
            size_value = int(size_value)
        self.tool_size = clamp_size(size_value)
        self.tool_color = self._get_color(
            'Tool', 'color', self.DEFAULT_TOOL_SETTINGS["color"]
        )

        if not self.config.has_section('Import'):
            self.config.add_section('Import')
        self.import_width = self._get_positive_int(
            'Import', 'width', self.DEFAULT_IMPORT_SETTINGS["width"]
        )
        self.import_height = self._get_positive_int(
            'Import', 'height', self.DEFAULT_IMPORT_SETTINGS["height"]
        )
        self._sync_to_config()

    @property
    def canvas_size(self) -> QSize:
        return QSize(self.canvas_width, self.canvas_height)

    @property
    def import_size(self) -> QSize:
        return QSize(self.import_width, self.import_height)

    def save_settings(self):
        """Persist settings to disk."""
        try:
            self._sync_to_config()
            with open(self.path, 'w') as configfile:
                self.config.write(configfile)
        except OSError as e:
            logger.error("Could not write %s: %s", self.path, e)
            error_box = QMessageBox()
            error_box.setIcon(QMessageBox.Critical)
            error_box.setText("Error saving settings")
            error_box.setInformativeText(f"Could not write to {self.path}.\n\nReason: {e}")
            error_box.setStandardButtons(QMessageBox.Ok)
            error_box.exec()

    def update_tool_settings(self, *, size=None, color=None):
        if size is not None:
            self.tool_size = clamp_size(size)
        if color is not None:
            qcolor = QColor(color)
            if qcolor.isValid():
                self.tool_color = qcolor.name()
        self._sync_to_config()

    def _get_positive_int(self, section, option, fallback):
        try:
            value = self.config.getint(section, option)
        except (configparser.NoOptionError, ValueError):
            return fallback
        if value <= 0:
            return fallback
        return value

    def _get_color(self, section, option, fallback):
        raw_value = self.config.get(section, option, fallback=fallback)
        color = QColor(raw_value)
        if not color.isValid():
            color = QColor(fallback)
        return color.name()

    def _sync_to_config(self):
        self.config.set('General', 'last_directory', self.last_directory)
        self.config.set('Canvas', 'width', str(int(self.canvas_width)))
        self.config.set('Canvas', 'height', str(int(self.canvas_height)))
        self.config.set('Canvas', 'base_color', self.base_color)
        self.config.set('Canvas', 'backdrop_color', self.backdrop_color)
        self.config.set('Tool', 'size', str(self.tool_size))
        self.config.set('Tool', 'color', self.tool_color)
        self.config.set('Import', 'width', str(int(self.import_width)))
        self.config.set('Import', 'height', str(int(self.import_height)))
