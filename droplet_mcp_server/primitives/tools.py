# primitives/tools.py
"""Central tool registration module."""

# Importing a tool module registers its tools (at import time, via @Tool)
from .droplets import droplet_tools  # noqa: F401
from .droplets import droplet_resource_tools  # noqa: F401
from .droplets import droplet_action_tools  # noqa: F401
from .images import image_tools  # noqa: F401
from .images import image_action_tools  # noqa: F401

from ..handler_registry import all_tools
from ..tool_config import ToolConfig


def register_all_tools() -> list[ToolConfig]:
    """Return every registered tool configuration.

    The tool modules above register themselves on import, so this only has
    to read the registry back.
    """
    return all_tools()
