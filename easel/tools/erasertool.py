from easel.core.tool_state import Tool
from easel.tools.brushtool import BrushTool


class EraserTool(BrushTool):
    """Freehand stroke painted in the surface's base color."""

    tool = Tool.ERASER
    name = "Eraser"
    shortcut = "e"

    def stroke_color(self):
        return self.surface.base_color
