from __future__ import annotations

import io
import logging

import numpy as np
from PIL import Image, ImageQt, UnidentifiedImageError
from PySide6.QtCore import QObject, QPoint, QPointF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QFont, QImage, QPainter, QPen

from easel.core.errors import DecodeError, InvalidDimensions
from easel.core.geometry import draw_shape


logger = logging.getLogger(__name__)

DEFAULT_BASE_COLOR = "#ffffff"
DEFAULT_IMPORT_SIZE = QSize(200, 200)


class RasterSurface(QObject):
    """Persistent off-screen pixel buffer holding every committed stroke.

    The buffer is filled once with the base color when it is created. After
    that only the ``commit_*`` methods, :meth:`fill_all`, :meth:`clear`,
    :meth:`import_image` and :meth:`resize` touch it.
    """

    changed = Signal()

    def __init__(
        self,
        width: int,
        height: int,
        base_color=DEFAULT_BASE_COLOR,
        *,
        import_size: QSize | None = None,
    ) -> None:
        super().__init__()
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        self.base_color = QColor(base_color)
        self.import_size = QSize(import_size or DEFAULT_IMPORT_SIZE)
        self._image = self._blank_image(width, height)

    def _blank_image(self, width: int, height: int) -> QImage:
        image = QImage(QSize(width, height), QImage.Format_ARGB32)
        image.fill(self.base_color)
        return image

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._image.width()

    @property
    def height(self) -> int:
        return self._image.height()

    @property
    def size(self) -> QSize:
        return self._image.size()

    def contains(self, pos: QPoint | None) -> bool:
        if pos is None:
            return False
        return 0 <= pos.x() < self.width and 0 <= pos.y() < self.height

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def _begin(self) -> QPainter:
        painter = QPainter(self._image)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setRenderHint(QPainter.TextAntialiasing, True)
        return painter

    def fill_all(self, color) -> None:
        """Overwrite every pixel with *color*."""

        self._image.fill(QColor(color))
        logger.debug("Surface filled with %s", QColor(color).name())
        self.changed.emit()

    def clear(self) -> None:
        self.fill_all(self.base_color)

    def commit_line(self, start: QPoint, end: QPoint, color, width) -> None:
        painter = self._begin()
        painter.setPen(QPen(QColor(color), width, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
        painter.drawLine(QPointF(start), QPointF(end))
        painter.end()
        self.changed.emit()

    def commit_shape(self, kind, anchor: QPoint, far: QPoint, color, width) -> None:
        """Stroke the outline of a rectangle, ellipse or line."""

        painter = self._begin()
        painter.setPen(QPen(QColor(color), width, Qt.SolidLine, Qt.SquareCap, Qt.MiterJoin))
        painter.setBrush(Qt.NoBrush)
        try:
            draw_shape(painter, kind, anchor, far)
        finally:
            painter.end()
        logger.debug("Committed %s from (%d, %d) to (%d, %d)", kind, anchor.x(), anchor.y(), far.x(), far.y())
        self.changed.emit()

    def commit_text(self, text: str, x: int, y: int, color, size_scale) -> None:
        """Draw *text* with its baseline starting at ``(x, y)``."""

        painter = self._begin()
        font = QFont(painter.font())
        font.setPixelSize(max(1, int(round(size_scale))))
        painter.setFont(font)
        painter.setPen(QColor(color))
        painter.drawText(QPointF(x, y), text)
        painter.end()
        self.changed.emit()

    def resize(self, width: int, height: int) -> None:
        """Replace the buffer with a new one, keeping content at the origin."""

        if width <= 0 or height <= 0:
            logger.warning("Rejected surface resize to %sx%s", width, height)
            raise InvalidDimensions(width, height)
        if width == self.width and height == self.height:
            return

        new_image = self._blank_image(width, height)
        painter = QPainter(new_image)
        painter.setCompositionMode(QPainter.CompositionMode_Source)
        painter.drawImage(0, 0, self._image)
        painter.end()
        self._image = new_image
        logger.debug("Surface resized to %dx%d", width, height)
        self.changed.emit()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def composite_into(self, painter: QPainter) -> None:
        painter.drawImage(0, 0, self._image)

    def snapshot(self) -> QImage:
        return self._image.copy()

    def pixel_color(self, x: int, y: int) -> QColor:
        return self._image.pixelColor(x, y)

    def to_pil(self) -> Image.Image:
        return ImageQt.fromqimage(self._image).convert("RGBA")

    def to_array(self) -> np.ndarray:
        """Return the pixels as an ``(height, width, 4)`` RGBA array."""

        return np.array(self.to_pil())

    # ------------------------------------------------------------------
    # Image IO
    # ------------------------------------------------------------------
    def export_png(self) -> bytes:
        buffer = io.BytesIO()
        self.to_pil().save(buffer, format="PNG")
        return buffer.getvalue()

    def save(self, filename: str) -> None:
        image = self.to_pil()
        if filename.lower().endswith((".jpg", ".jpeg", ".bmp")):
            image = image.convert("RGB")
        image.save(filename)
        logger.info("Saved surface to %s", filename)

    def import_image(self, data: bytes) -> None:
        """Decode *data* and draw it into the fixed import box at the origin."""

        try:
            with Image.open(io.BytesIO(data)) as img:
                img.load()
                decoded = img.convert("RGBA")
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            ValueError,
        ) as exc:
            logger.warning("Could not decode imported image: %s", exc)
            raise DecodeError(str(exc)) from exc

        qimage = ImageQt.toqimage(decoded)
        painter = QPainter(self._image)
        painter.setRenderHint(QPainter.SmoothPixmapTransform, True)
        painter.drawImage(
            self._image.rect().topLeft(),
            qimage.scaled(self.import_size, Qt.IgnoreAspectRatio, Qt.SmoothTransformation),
        )
        painter.end()
        logger.info("Imported %dx%d image", decoded.width, decoded.height)
        self.changed.emit()

    def load(self, filename: str) -> None:
        with open(filename, "rb") as handle:
            data = handle.read()
        self.import_image(data)
