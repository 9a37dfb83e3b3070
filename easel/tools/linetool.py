from easel.core.tool_state import Tool
from easel.tools.baseshapetool import BaseShapeTool


class LineTool(BaseShapeTool):
    tool = Tool.LINE
    name = "Line"
    shortcut = "l"
