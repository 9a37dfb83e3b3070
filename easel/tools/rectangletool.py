from easel.core.tool_state import Tool
from easel.tools.baseshapetool import BaseShapeTool


class RectangleTool(BaseShapeTool):
    tool = Tool.RECT
    name = "Rectangle"
    shortcut = "r"
