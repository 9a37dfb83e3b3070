"""Tool registration and discovery utilities."""

from .registry import ToolRegistry

# Global registry instance used throughout the application
registry = ToolRegistry()
registry.load_builtin_tools()
registry.validate()


def get_tools():
    return registry.get_tools()

__all__ = ["ToolRegistry", "registry", "get_tools"]
