import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import io

import numpy as np
import pytest
from PIL import Image, ImageQt
from PySide6.QtWidgets import QApplication

from easel.core.settings_controller import SettingsController


@pytest.fixture
def qapp():
    """
    Creates a new QApplication for each test function, ensuring a clean environment.
    """
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    app.quit()


@pytest.fixture
def settings(tmp_path):
    """Settings backed by a temporary file with a small 100x100 canvas."""
    path = tmp_path / "settings.ini"
    path.write_text("[Canvas]\nwidth = 100\nheight = 100\n")
    return SettingsController(path=str(path))


def qimage_to_array(image):
    return np.array(ImageQt.fromqimage(image).convert("RGBA"))


def png_bytes(width, height, color):
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()
