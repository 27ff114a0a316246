# handler_wrappers.py
"""Generic dispatch for tool handlers.

Every tool goes through the same entry point built by generic_tool_handler():

    validate arguments -> obtain client -> run handler -> format result

Error Handling Strategy:
    Failures fall in two tiers.

    Reported faults are expected: a missing argument, a malformed JSON
    sub-argument, or the DigitalOcean API rejecting the request. They are
    returned as a normal CallToolResult with isError=True so the AI client
    can read the message and react.

    Hard faults mean the invocation cannot complete at all: the client
    factory could not produce a DigitalOcean client, or the handler returned
    something that cannot be serialized. They are raised as DispatchError
    subclasses and left to the server layer.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Optional

import httpx
from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel

from .digitalocean.errors import DigitalOceanAPIError, UntrustedURLError
from .tool_config import ArgumentValidationError, ToolConfig

logger = logging.getLogger(__name__)

# Prefix of every reported fault raised by a handler
API_ERROR_PREFIX = "api error"

ClientFactory = Callable[[Any], Awaitable[Any]]
ToolInvoker = Callable[[Any, Optional[dict[str, Any]]], Awaitable[CallToolResult]]


# ------------------------------------------------------------------------------
# HandlerError - Custom exception for handler failures with structured error info
# ------------------------------------------------------------------------------
# Raise this in a handler to return a clean error to the AI client.
# - message: What went wrong
# - hint: Actionable suggestion for the AI (optional)
# - **data: Extra context like droplet_id, tag, etc. (optional)
#
# Example: raise HandlerError("Tag is required", hint="Pass a tag name", tool="droplet-list-by-tag")
# ------------------------------------------------------------------------------
class HandlerError(Exception):
    """Structured error for tool handlers.

    The dispatcher turns it into a reported fault whose text includes the
    hint and context data.

    Args:
        message: Description of what went wrong
        hint: Actionable suggestion for the AI (optional)
        **data: Extra context (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None, **data: Any):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.data = data

    def __str__(self) -> str:
        msg = self.message
        if self.hint:
            msg += f" (hint: {self.hint})"
        if self.data:
            msg += f" (context: {self.data})"
        return msg


class DispatchError(Exception):
    """Base class for hard faults raised out of the dispatcher."""


class ClientUnavailableError(DispatchError):
    """The DigitalOcean client could not be obtained."""


class ResponseSerializationError(DispatchError):
    """A handler result could not be serialized to JSON."""


def error_result(message: str) -> CallToolResult:
    """Build a reported-fault result carrying a single text message."""
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


def text_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_result(result: Any) -> str:
    """Render a handler result as response text.

    Strings pass through unchanged, anything else becomes indented JSON.

    Raises:
        ResponseSerializationError: If the result cannot be serialized
    """
    if isinstance(result, str):
        return result
    try:
        return json.dumps(result, indent=2, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError) as e:
        raise ResponseSerializationError(f"json marshal error: {e}") from e


def _is_expected_failure(error: Exception) -> bool:
    return isinstance(error, (HandlerError, DigitalOceanAPIError, UntrustedURLError, httpx.HTTPError))


def generic_tool_handler(config: ToolConfig, client_factory: ClientFactory) -> ToolInvoker:
    """Wrap a tool's handler into a uniform invoke(ctx, arguments) coroutine.

    Args:
        config: The tool to dispatch to
        client_factory: Coroutine function producing an authenticated
            DigitalOcean client for the given request context

    Returns:
        Coroutine function returning a CallToolResult

    Raises (from the returned coroutine):
        ClientUnavailableError: If client_factory fails
        ResponseSerializationError: If the handler result is not serializable
    """

    async def invoke(ctx: Any, arguments: Optional[dict[str, Any]]) -> CallToolResult:
        args = arguments or {}

        try:
            config.validate_arguments(args)
        except ArgumentValidationError as e:
            logger.warning("Tool %s rejected: %s", config.name, e)
            return error_result(str(e))

        try:
            client = await client_factory(ctx)
        except Exception as e:
            logger.error("Tool %s: could not get DigitalOcean client: %s", config.name, e)
            raise ClientUnavailableError(f"failed to get DigitalOcean client: {e}") from e

        try:
            result = await config.handler(ctx, client, args)
        except Exception as e:
            if _is_expected_failure(e):
                logger.warning("Tool %s failed: %s", config.name, e)
            else:
                # Log full traceback for debugging, still report to the client
                logger.exception("Unexpected error in tool %s: %s", config.name, e)
            return error_result(f"{API_ERROR_PREFIX}: {e}")

        return text_result(format_result(result))

    return invoke
