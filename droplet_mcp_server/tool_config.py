"""Declarative tool configuration.

A tool is described once, at import time, by a ToolConfig: its name, a
description for the AI client, the ordered list of arguments it accepts and
the coroutine that implements it. The same description is used to advertise
the tool's input schema and to validate incoming argument maps.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from mcp.types import Tool as McpTool, ToolAnnotations


class ArgumentType(str, Enum):
    """JSON schema type of a tool argument."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class PaginationDefaults:
    """Page and page size used when a list tool gets no usable value."""

    page: int = 1
    per_page: int = 50


PAGINATION_DEFAULTS = PaginationDefaults()


class ArgumentValidationError(Exception):
    """Raised when an argument map does not satisfy a tool's declaration."""


# Handlers receive (ctx, client, arguments) and return a str, a JSON-friendly
# value or a pydantic model.
HandlerFunc = Callable[[Any, Any, dict[str, Any]], Awaitable[Any]]


def _matches_type(value: Any, arg_type: ArgumentType) -> bool:
    if arg_type is ArgumentType.STRING:
        return isinstance(value, str)
    if arg_type is ArgumentType.NUMBER:
        # bool is an int subclass, never a number here
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if arg_type is ArgumentType.BOOLEAN:
        return isinstance(value, bool)
    if arg_type is ArgumentType.ARRAY:
        return isinstance(value, list)
    if arg_type is ArgumentType.OBJECT:
        return isinstance(value, dict)
    return False


@dataclass(frozen=True)
class ArgumentConfig:
    """Configuration for one named tool argument.

    A default only applies to optional arguments and must have the runtime
    type declared by ``type``.
    """

    name: str
    type: ArgumentType
    description: str
    required: bool = False
    default: Any = None

    def __post_init__(self) -> None:
        if not self.required and self.default is not None:
            if not _matches_type(self.default, self.type):
                raise ValueError(
                    f"Default for argument {self.name!r} does not match type "
                    f"{self.type.value}: {self.default!r}"
                )

    def to_property(self) -> dict[str, Any]:
        prop: dict[str, Any] = {
            "type": self.type.value,
            "description": self.description,
        }
        if not self.required and self.default is not None:
            prop["default"] = self.default
        return prop


@dataclass(frozen=True)
class ToolConfig:
    """Everything needed to advertise, validate and run one tool."""

    name: str
    description: str
    handler: HandlerFunc
    arguments: tuple[ArgumentConfig, ...] = field(default_factory=tuple)
    destructive: bool = False

    def build_input_schema(self) -> dict[str, Any]:
        """Build the JSON schema advertised as the tool's ``inputSchema``.

        Properties and the required list follow declaration order. The
        ``required`` key is omitted when no argument is required.
        """
        properties: dict[str, Any] = {}
        required: list[str] = []

        for arg in self.arguments:
            properties[arg.name] = arg.to_property()
            if arg.required:
                required.append(arg.name)

        schema: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    def build_mcp_tool(self) -> McpTool:
        """Convert this configuration into an MCP Tool definition."""
        annotations = ToolAnnotations(destructiveHint=True) if self.destructive else None
        return McpTool(
            name=self.name,
            description=self.description,
            inputSchema=self.build_input_schema(),
            annotations=annotations,
        )

    def validate_arguments(self, args: dict[str, Any]) -> None:
        """Check that every required argument is present.

        Only presence is checked. Unknown keys are ignored and value types
        are left to the handlers.

        Raises:
            ArgumentValidationError: naming the first missing argument
        """
        for arg in self.arguments:
            if arg.required and arg.name not in args:
                raise ArgumentValidationError(f"missing required argument: {arg.name}")


# ------------------------------------------------------------------------------
# Argument accessors
# ------------------------------------------------------------------------------
# Arguments arrive as untyped JSON. These helpers never raise: a missing or
# wrongly typed value yields the zero value of the requested type.
# ------------------------------------------------------------------------------

def get_argument_string(args: dict[str, Any], name: str) -> str:
    value = args.get(name)
    return value if isinstance(value, str) else ""


def get_argument_number(args: dict[str, Any], name: str) -> int:
    """Return a numeric argument as int, truncating floats (0 if unusable)."""
    value = args.get(name)
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def get_argument_float(args: dict[str, Any], name: str, default: float) -> float:
    value = args.get(name)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return default


def get_argument_boolean(args: dict[str, Any], name: str) -> bool:
    value = args.get(name)
    return value if isinstance(value, bool) else False


def get_argument_optional_boolean(args: dict[str, Any], name: str) -> Optional[bool]:
    """Like get_argument_boolean, but None when the caller did not send a bool."""
    value = args.get(name)
    return value if isinstance(value, bool) else None


def get_argument_array(args: dict[str, Any], name: str) -> Optional[list[Any]]:
    value = args.get(name)
    return value if isinstance(value, list) else None


def get_argument_object(args: dict[str, Any], name: str) -> Optional[dict[str, Any]]:
    value = args.get(name)
    return value if isinstance(value, dict) else None
