from typing import Any, Optional, Sequence

from .handler_registry import register_tool
from .tool_config import PAGINATION_DEFAULTS, ArgumentConfig, ArgumentType, HandlerFunc, ToolConfig


# ------------------------------------------------------------------------------
# Tool - Decorator class that registers coroutines as MCP tools
# ------------------------------------------------------------------------------
# Usage:
#   @Tool("droplet-get", "Get a droplet by its ID", arguments=[
#       Number("ID", "Droplet ID", required=True),
#   ])
#   async def droplet_get(ctx, client, args):
#       ...
#
# Parameters:
#   - name: Unique tool identifier exposed to MCP clients
#   - description: Shown to AI to understand when/how to use the tool
#   - arguments: Ordered argument declarations (schema + validation)
#   - destructive: Advertised as the MCP destructiveHint annotation
#
# What happens at import time:
#   1. Builds an immutable ToolConfig from the declaration
#   2. Stores it in the handler registry for listing and dispatch
# ------------------------------------------------------------------------------
class Tool:
    def __init__(
        self,
        name: str,
        description: str,
        handler: Optional[HandlerFunc] = None,
        *,
        arguments: Sequence[ArgumentConfig] = (),
        destructive: bool = False,
    ):
        self.name = name
        self.description = description
        self.arguments = tuple(arguments)
        self.destructive = destructive
        self.config: Optional[ToolConfig] = None

        # Support both @Tool(...) decorator and Tool(..., handler=fn) direct call
        if handler is not None:
            self._register(handler)

    # Called when used as @Tool(...) decorator
    def __call__(self, func: HandlerFunc) -> HandlerFunc:
        self._register(func)
        return func  # Return original so it can be called directly for testing

    def _register(self, func: HandlerFunc) -> None:
        self.config = ToolConfig(
            name=self.name,
            description=self.description,
            handler=func,
            arguments=self.arguments,
            destructive=self.destructive,
        )
        register_tool(self.config)


# ------------------------------------------------------------------------------
# Argument shorthands used in tool declarations
# ------------------------------------------------------------------------------
def String(name: str, description: str, *, required: bool = False, default: Any = None) -> ArgumentConfig:
    return ArgumentConfig(name, ArgumentType.STRING, description, required, default)


def Number(name: str, description: str, *, required: bool = False, default: Any = None) -> ArgumentConfig:
    return ArgumentConfig(name, ArgumentType.NUMBER, description, required, default)


def Boolean(name: str, description: str, *, required: bool = False, default: Any = None) -> ArgumentConfig:
    return ArgumentConfig(name, ArgumentType.BOOLEAN, description, required, default)


def Array(name: str, description: str, *, required: bool = False, default: Any = None) -> ArgumentConfig:
    return ArgumentConfig(name, ArgumentType.ARRAY, description, required, default)


def Object(name: str, description: str, *, required: bool = False, default: Any = None) -> ArgumentConfig:
    return ArgumentConfig(name, ArgumentType.OBJECT, description, required, default)


def pagination_arguments() -> list[ArgumentConfig]:
    """Page/PerPage declarations shared by every paginated tool."""
    return [
        Number("Page", "Page number", default=PAGINATION_DEFAULTS.page),
        Number("PerPage", "Items per page", default=PAGINATION_DEFAULTS.per_page),
    ]
