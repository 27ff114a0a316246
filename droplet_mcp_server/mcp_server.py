"""MCP server exposing the registered DigitalOcean tools.

This module wires the tool registry to the MCP SDK's low-level Server and
runs it over one of two transports.

Architecture:
    - Registry: every tool module registers a ToolConfig at import time
    - Listing: each ToolConfig advertises its own input schema
    - Dispatch: each call goes through generic_tool_handler(), which
      validates, obtains a DigitalOcean client and runs the handler
    - Transport: streamable HTTP (starlette + uvicorn) or stdio

The low-level Server is used rather than FastMCP because tool schemas come
from ToolConfig declarations, not from Python signatures. The SDK's own
input validation is switched off so callers receive the dispatcher's
"missing required argument" messages.
"""

import ipaddress
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

import anyio
import uvicorn
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.server.transport_security import TransportSecuritySettings
from mcp.types import CallToolResult, Tool as McpTool
from starlette.applications import Starlette
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from . import __version__
from .config import Config
from .digitalocean.factory import DigitalOceanClientFactory
from .handler_wrappers import ClientFactory, ToolInvoker, error_result, generic_tool_handler
from .primitives import register_all_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "droplet-mcp"


def _is_loopback(host: str) -> bool:
    host = host.strip("[]")
    if host == "localhost":
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


def transport_security_for(host: str) -> TransportSecuritySettings:
    """DNS rebinding protection for the HTTP transport.

    On a loopback address only loopback Host and Origin headers are
    accepted. On any other address the server is assumed to sit behind a
    tunnel or proxy with its own host names and the check is off.
    """
    if not _is_loopback(host):
        return TransportSecuritySettings(enable_dns_rebinding_protection=False)

    names = ["localhost", "127.0.0.1", "[::1]"]
    return TransportSecuritySettings(
        enable_dns_rebinding_protection=True,
        allowed_hosts=[h for name in names for h in (name, f"{name}:*")],
        allowed_origins=[o for name in names for o in (f"http://{name}", f"http://{name}:*")],
    )


class _StreamableHTTPApp:
    """ASGI endpoint forwarding requests to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self._session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self._session_manager.handle_request(scope, receive, send)


class McpServer:
    """MCP server for DigitalOcean droplets and images.

    Attributes:
        _config: Server configuration (transport, HTTP host/port, API token)
        _client_factory: Produces a DigitalOcean client per tool call
        _invokers: Dispatch entry point for each registered tool, by name
        server: The underlying MCP SDK server
    """

    def __init__(self, config: Config, client_factory: Optional[ClientFactory] = None) -> None:
        """Initialize MCP server.

        Args:
            config: Server configuration
            client_factory: Coroutine function producing a DigitalOcean
                client for a request context. Defaults to a
                DigitalOceanClientFactory built from config.
        """
        self._config = config
        self._client_factory = client_factory or DigitalOceanClientFactory(config)

        tools = register_all_tools()
        self._tools: list[McpTool] = [tool.build_mcp_tool() for tool in tools]
        self._invokers: dict[str, ToolInvoker] = {
            tool.name: generic_tool_handler(tool, self._client_factory) for tool in tools
        }

        self.server: Server = Server(SERVER_NAME, version=__version__)
        self._register_handlers()
        logger.info("Registered %d tools", len(self._tools))

    def _register_handlers(self) -> None:
        server = self.server

        @server.list_tools()
        async def list_tools() -> list[McpTool]:
            return self._tools

        @server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
            return await self.call_tool(name, arguments, server.request_context)

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]], ctx: Any = None) -> CallToolResult:
        """Dispatch one tool call.

        Args:
            name: Tool name
            arguments: Raw argument map from the caller
            ctx: MCP request context, handed to the client factory

        Returns:
            The tool's result, or a reported fault for an unknown tool

        Raises:
            DispatchError: Hard faults from the dispatcher
        """
        invoker = self._invokers.get(name)
        if invoker is None:
            logger.warning("Unknown tool requested: %s", name)
            return error_result(f"unknown tool: {name}")
        return await invoker(ctx, arguments)

    def run(self) -> None:
        """Run the server until interrupted.

        Blocks the calling thread. The transport is chosen by config.mode.
        """
        anyio.run(self._async_main)

    async def _async_main(self) -> None:
        try:
            if self._config.mode == "http":
                await self._run_http_mode()
            else:
                await self._run_stdio_mode()
        finally:
            aclose = getattr(self._client_factory, "aclose", None)
            if aclose is not None:
                await aclose()

    async def _run_stdio_mode(self) -> None:
        logger.info("Serving MCP over stdio")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )

    def build_http_app(self) -> Starlette:
        """Build the starlette app serving streamable HTTP at config.http_path."""
        session_manager = StreamableHTTPSessionManager(
            app=self.server,
            security_settings=transport_security_for(self._config.http_host),
        )

        @asynccontextmanager
        async def lifespan(app: Starlette) -> AsyncIterator[None]:
            async with session_manager.run():
                yield

        return Starlette(
            routes=[Route(self._config.http_path, endpoint=_StreamableHTTPApp(session_manager))],
            lifespan=lifespan,
        )

    async def _run_http_mode(self) -> None:
        app = self.build_http_app()

        config = uvicorn.Config(
            app,
            host=self._config.http_host,
            port=self._config.http_port,
            log_level="warning",
        )
        server = uvicorn.Server(config)

        logger.info(
            "Serving MCP over HTTP at http://%s:%d%s",
            self._config.http_host,
            self._config.http_port,
            self._config.http_path,
        )
        await server.serve()
