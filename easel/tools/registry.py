from __future__ import annotations

import importlib
import os
from typing import Dict, List, Type

from easel.core.tool_state import Tool

from .basetool import BaseTool


class ToolRegistry:
    """Registry mapping each :class:`Tool` to the class that implements it."""

    def __init__(self) -> None:
        self._tools: List[Dict] = []

    # ------------------------------------------------------------------
    def register_tool(self, tool_cls: Type[BaseTool]) -> None:
        """Register a :class:`BaseTool` subclass.

        Parameters
        ----------
        tool_cls:
            The tool class to register. Its ``tool`` attribute must be a
            :class:`Tool` member not already claimed by another class.
        """

        if not isinstance(tool_cls, type) or not issubclass(tool_cls, BaseTool):
            raise TypeError("tool_cls must be a subclass of BaseTool")
        if tool_cls is BaseTool:
            return
        tool = getattr(tool_cls, "tool", None)
        if tool is None:
            return
        if not isinstance(tool, Tool):
            raise TypeError(f"{tool_cls.__name__}.tool must be a Tool member")
        for entry in self._tools:
            if entry["class"] is tool_cls:
                return
            if entry["tool"] is tool:
                raise ValueError(
                    f"{tool} is already handled by {entry['class'].__name__}"
                )
        self._tools.append(
            {
                "class": tool_cls,
                "tool": tool,
                "name": tool_cls.name,
                "shortcut": getattr(tool_cls, "shortcut", None),
            }
        )

    # ------------------------------------------------------------------
    def get_tools(self) -> List[Dict]:
        """Return registered tools in :class:`Tool` declaration order."""

        order = list(Tool)
        return sorted(self._tools, key=lambda entry: order.index(entry["tool"]))

    # ------------------------------------------------------------------
    def missing_tools(self) -> List[Tool]:
        registered = {entry["tool"] for entry in self._tools}
        return [tool for tool in Tool if tool not in registered]

    def validate(self) -> None:
        """Raise if any :class:`Tool` member has no implementing class."""

        missing = self.missing_tools()
        if missing:
            names = ", ".join(str(tool) for tool in missing)
            raise RuntimeError(f"No tool class registered for: {names}")

    # ------------------------------------------------------------------
    def load_builtin_tools(self) -> None:
        """Discover and register built-in tools located in this package."""

        tools_dir = os.path.dirname(__file__)
        for filename in sorted(os.listdir(tools_dir)):
            if not filename.endswith("tool.py"):
                continue
            if filename in {"basetool.py", "baseshapetool.py"}:
                continue
            module_name = f"{__package__}.{filename[:-3]}"
            module = importlib.import_module(module_name)
            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, BaseTool)
                    and attr is not BaseTool
                    and getattr(attr, "tool", None) is not None
                ):
                    self.register_tool(attr)


__all__ = ["ToolRegistry"]
