from __future__ import annotations

import logging
from enum import Enum

from PySide6.QtCore import QObject, QPoint, Signal

from easel.core.geometry import Gesture
from easel.core.tool_state import Tool
from easel.tools import get_tools


logger = logging.getLogger(__name__)


class GestureState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    AWAITING_TEXT = "awaiting_text"


class DragController(QObject):
    """Turns pointer-down/move/up sequences into tool actions.

    ``IDLE -> DRAGGING`` happens on a gesture start inside the surface;
    ``DRAGGING -> IDLE`` happens on gesture end wherever the pointer is. The
    text tool parks the controller in ``AWAITING_TEXT`` until the host calls
    :meth:`resolve_text`; every gesture call in that state is ignored.
    """

    state_changed = Signal(object)
    text_requested = Signal(QPoint)

    def __init__(self, tool_state, surface):
        super().__init__()
        self.tool_state = tool_state
        self.surface = surface
        self.state = GestureState.IDLE
        self.pointer = QPoint()
        self._text_pos: QPoint | None = None
        self.tools = {tool_def["tool"]: tool_def["class"](self) for tool_def in get_tools()}

    @property
    def current_tool(self):
        return self.tools[self.tool_state.tool]

    @property
    def is_dragging(self) -> bool:
        return self.state is GestureState.DRAGGING

    @property
    def awaiting_text(self) -> bool:
        return self.state is GestureState.AWAITING_TEXT

    def gesture(self) -> Gesture | None:
        """Return the in-progress gesture, or ``None`` when not dragging."""

        if not self.is_dragging or not self.tool_state.dragging:
            return None
        return Gesture(self.tool_state.tool, QPoint(self.tool_state.anchor), QPoint(self.pointer))

    def _set_state(self, state: GestureState):
        if state is self.state:
            return
        logger.debug("Gesture state %s -> %s", self.state.value, state.value)
        self.state = state
        self.state_changed.emit(state)

    # ------------------------------------------------------------------
    # Pointer contract
    # ------------------------------------------------------------------
    def on_gesture_start(self, pos: QPoint):
        # A start while already dragging re-anchors the gesture.
        if self.awaiting_text:
            return
        if not self.surface.contains(pos):
            return

        self.tool_state.start_drag(pos.x(), pos.y())
        self.pointer = QPoint(pos)
        self._set_state(GestureState.DRAGGING)
        self.current_tool.on_gesture_start(pos)

    def on_gesture_move(self, prev_pos: QPoint, pos: QPoint):
        if not self.is_dragging:
            return
        self.pointer = QPoint(pos)
        self.current_tool.on_gesture_move(prev_pos, pos)

    def on_gesture_end(self, pos: QPoint):
        if not self.is_dragging:
            return
        self.pointer = QPoint(pos)
        self.tool_state.stop_drag()
        self._set_state(GestureState.IDLE)
        self.current_tool.on_gesture_end(pos)

    def cancel(self):
        """Abandon the current gesture without committing anything."""

        if self.state is GestureState.IDLE:
            return
        self._text_pos = None
        self.tool_state.stop_drag()
        self._set_state(GestureState.IDLE)

    # ------------------------------------------------------------------
    # Text input
    # ------------------------------------------------------------------
    def request_text(self, pos: QPoint):
        self._text_pos = QPoint(pos)
        self._set_state(GestureState.AWAITING_TEXT)
        self.text_requested.emit(QPoint(pos))

    def resolve_text(self, text: str | None):
        """Finish a text gesture; empty or ``None`` text commits nothing."""

        if not self.awaiting_text:
            return
        pos = self._text_pos
        self._text_pos = None
        self.tool_state.stop_drag()
        self._set_state(GestureState.IDLE)
        if text:
            self.tools[Tool.TEXT].commit(text, pos)
        else:
            logger.debug("Text input cancelled")
