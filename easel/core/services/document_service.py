from __future__ import annotations

import logging
import os
from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMessageBox

from easel.core.errors import EaselError


logger = logging.getLogger(__name__)


class DocumentService:
    """File dialogs around the surface's image import and export."""

    _OPEN_FILE_FILTERS: tuple[str, ...] = (
        "Image Files (*.png *.jpg *.jpeg *.bmp *.gif *.tif *.tiff)",
        "All Files (*)",
    )

    _SAVE_FILE_FILTERS: tuple[str, ...] = (
        "PNG (*.png)",
        "JPEG (*.jpg *.jpeg)",
        "Bitmap (*.bmp)",
    )

    _RASTER_EXTENSIONS: frozenset[str] = frozenset({
        ".png",
        ".jpg",
        ".jpeg",
        ".bmp",
    })

    def __init__(self, app=None):
        self.app = app

    # ------------------------------------------------------------------
    # File dialogs
    # ------------------------------------------------------------------
    def open_image(self) -> None:
        app = self.app
        if app is None:
            return

        file_path, _ = QFileDialog.getOpenFileName(
            self._dialog_parent(),
            "Open Image",
            getattr(app, "last_directory", ""),
            self._build_filter_string(self._OPEN_FILE_FILTERS),
        )
        if not file_path:
            return
        self.import_from_path(file_path)

    def import_from_path(self, file_path: str) -> bool:
        try:
            self.app.open_image(file_path)
        except (EaselError, OSError) as exc:
            logger.warning("Import of %s failed: %s", file_path, exc)
            self._show_message(
                QMessageBox.Warning,
                "Unable to import image.",
                "The selected file could not be read as an image.",
            )
            return False
        self._update_last_directory(file_path)
        return True

    def save_image_as(self) -> None:
        app = self.app
        if app is None:
            return

        file_path, selected_filter = QFileDialog.getSaveFileName(
            self._dialog_parent(),
            "Save Image",
            getattr(app, "last_directory", ""),
            self._build_filter_string(self._SAVE_FILE_FILTERS),
        )
        if not file_path:
            return
        self.save_to_path(self._normalize_save_path(file_path, selected_filter))

    def save_to_path(self, file_path: str) -> bool:
        try:
            self.app.save_image(file_path)
        except (EaselError, OSError, ValueError) as exc:
            logger.error("Saving %s failed: %s", file_path, exc)
            self._show_message(
                QMessageBox.Critical,
                "Failed to save image.",
                "An error occurred while writing the file.",
            )
            return False
        self._update_last_directory(file_path)
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _dialog_parent(self):
        app = self.app
        if app is None:
            return None
        return getattr(app, "main_window", None)

    @staticmethod
    def _build_filter_string(filters: tuple[str, ...]) -> str:
        return ";;".join(filters)

    @staticmethod
    def _extract_extension_hint(selected_filter: str | None) -> str | None:
        if not selected_filter:
            return None
        try:
            _, pattern_section = selected_filter.split("(", 1)
            pattern_section, _ = pattern_section.split(")", 1)
        except ValueError:
            return None

        for token in pattern_section.split():
            token = token.strip()
            if token.startswith("*.") and token != "*.*":
                return f".{token[2:].lower()}"
        return None

    def _normalize_save_path(self, file_path: str, selected_filter: str | None) -> str:
        path = Path(file_path)
        if path.suffix.lower() in self._RASTER_EXTENSIONS:
            return str(path)
        suffix = self._extract_extension_hint(selected_filter) or ".png"
        return str(path.with_suffix(suffix))

    def _update_last_directory(self, file_path: str) -> None:
        app = self.app
        if app is None:
            return
        app.last_directory = os.path.dirname(file_path) or ""

    def _show_message(
        self,
        icon: QMessageBox.Icon,
        text: str,
        informative_text: str,
    ) -> None:
        box = QMessageBox(self._dialog_parent())
        box.setIcon(icon)
        box.setText(text)
        box.setInformativeText(informative_text)
        box.setStandardButtons(QMessageBox.Ok)
        box.exec()
