"""Central registry of tool configurations.

Tool modules register their ToolConfig at import time. The MCP server uses
this registry both to list tools and to dispatch tool calls by name.
"""
from .tool_config import ToolConfig

_tools: dict[str, ToolConfig] = {}


def register_tool(config: ToolConfig) -> None:
    """Register a tool configuration under its name."""
    if config.name in _tools:
        raise ValueError(f"Tool already registered: {config.name}")
    _tools[config.name] = config


def get_tool(name: str) -> ToolConfig:
    """Get a tool configuration by name. Raises KeyError if not found."""
    if name not in _tools:
        raise KeyError(f"Unknown tool: {name}")
    return _tools[name]


def all_tools() -> list[ToolConfig]:
    """All registered tools, in registration order."""
    return list(_tools.values())
