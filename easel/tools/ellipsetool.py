from easel.core.tool_state import Tool
from easel.tools.baseshapetool import BaseShapeTool


class EllipseTool(BaseShapeTool):
    tool = Tool.ELLIPSE
    name = "Ellipse"
    shortcut = "o"
