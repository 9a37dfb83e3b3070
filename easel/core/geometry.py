"""Shape geometry shared by live previews and committed shapes."""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QLineF, QPoint, QPointF, QRectF

from easel.core.tool_state import Tool


SHAPE_TOOLS = frozenset({Tool.RECT, Tool.ELLIPSE, Tool.LINE})
PREVIEW_TOOLS = SHAPE_TOOLS | {Tool.SELECT}

# Ellipse radii are twice the drag delta.
ELLIPSE_RADIUS_SCALE = 2


@dataclass(frozen=True)
class Gesture:
    tool: Tool
    anchor: QPoint
    pointer: QPoint

    @property
    def dx(self) -> int:
        return self.pointer.x() - self.anchor.x()

    @property
    def dy(self) -> int:
        return self.pointer.y() - self.anchor.y()


def rect_geometry(anchor: QPoint, far: QPoint) -> tuple[int, int, int, int]:
    """Return ``(x, y, width, height)`` with the signed drag extent.

    Width and height are negative when the drag runs left or up of the
    anchor.
    """

    return (
        anchor.x(),
        anchor.y(),
        far.x() - anchor.x(),
        far.y() - anchor.y(),
    )


def ellipse_geometry(anchor: QPoint, far: QPoint) -> tuple[QPoint, int, int]:
    """Return ``(center, radius_x, radius_y)`` for an anchor-centered ellipse."""

    dx = far.x() - anchor.x()
    dy = far.y() - anchor.y()
    return QPoint(anchor), ELLIPSE_RADIUS_SCALE * dx, ELLIPSE_RADIUS_SCALE * dy


def line_geometry(anchor: QPoint, far: QPoint) -> QLineF:
    return QLineF(QPointF(anchor), QPointF(far))


def draw_shape(painter, kind: Tool, anchor: QPoint, far: QPoint) -> None:
    """Stroke *kind* with the painter's current pen and brush."""

    if kind == Tool.RECT or kind == Tool.SELECT:
        x, y, width, height = rect_geometry(anchor, far)
        painter.drawRect(QRectF(x, y, width, height).normalized())
    elif kind == Tool.ELLIPSE:
        center, radius_x, radius_y = ellipse_geometry(anchor, far)
        painter.drawEllipse(QPointF(center), abs(radius_x), abs(radius_y))
    elif kind == Tool.LINE:
        painter.drawLine(line_geometry(anchor, far))
    else:
        raise ValueError(f"{kind} is not a shape tool")
