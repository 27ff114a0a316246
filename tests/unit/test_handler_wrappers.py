"""Tests for the generic dispatcher and its error tiers."""
from __future__ import annotations

import json
from datetime import datetime

import httpx
import pytest

from droplet_mcp_server.digitalocean.errors import DigitalOceanAPIError
from droplet_mcp_server.digitalocean.models import ListOptions
from droplet_mcp_server.handler_wrappers import (
    ClientUnavailableError,
    DispatchError,
    HandlerError,
    ResponseSerializationError,
    format_result,
    generic_tool_handler,
)
from droplet_mcp_server.tool_config import ToolConfig
from droplet_mcp_server.tool_decorator import Number, String

from .helpers import CountingFactory, StubClient, result_text


def _tool(handler, *arguments) -> ToolConfig:
    return ToolConfig("test-tool", "A test tool", handler, tuple(arguments))


@pytest.mark.anyio
class TestValidation:
    async def test_missing_argument_calls_neither_factory_nor_handler(self):
        handler_calls = []

        async def handler(ctx, client, args):
            handler_calls.append(args)

        factory = CountingFactory(StubClient())
        invoke = generic_tool_handler(_tool(handler, String("Name", "Name", required=True)), factory)

        result = await invoke(None, {})

        assert result.isError
        assert result_text(result) == "missing required argument: Name"
        assert factory.calls == 0
        assert handler_calls == []

    async def test_none_arguments_treated_as_empty(self):
        async def handler(ctx, client, args):
            return args

        invoke = generic_tool_handler(_tool(handler), CountingFactory(StubClient()))
        result = await invoke(None, None)
        assert json.loads(result_text(result)) == {}


@pytest.mark.anyio
class TestHardFaults:
    async def test_factory_failure_raises(self):
        async def handler(ctx, client, args):
            raise AssertionError("handler must not run")

        factory = CountingFactory(error=RuntimeError("no token"))
        invoke = generic_tool_handler(_tool(handler), factory)

        with pytest.raises(ClientUnavailableError, match="failed to get DigitalOcean client: no token") as exc:
            await invoke(None, {})
        assert isinstance(exc.value, DispatchError)

    async def test_unserializable_result_raises(self):
        async def handler(ctx, client, args):
            return {"when": object()}

        invoke = generic_tool_handler(_tool(handler), CountingFactory(StubClient()))
        with pytest.raises(ResponseSerializationError, match="json marshal error"):
            await invoke(None, {})


@pytest.mark.anyio
class TestReportedFaults:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (DigitalOceanAPIError(404, "not_found", "The resource you were accessing could not be found."),
             "api error: DigitalOcean API error (404, not_found): The resource you were accessing could not be found."),
            (HandlerError("Droplet ID is required"), "api error: Droplet ID is required"),
            (httpx.ReadTimeout("timed out"), "api error: timed out"),
            (KeyError("boom"), "api error: 'boom'"),
        ],
    )
    async def test_handler_errors_become_error_results(self, error, expected):
        async def handler(ctx, client, args):
            raise error

        result = await generic_tool_handler(_tool(handler), CountingFactory(StubClient()))(None, {})
        assert result.isError
        assert result_text(result) == expected


class TestHandlerError:
    def test_includes_hint_and_context(self):
        error = HandlerError("Tag is required", hint="Pass a tag name", tool="droplet-list-by-tag")
        assert str(error) == "Tag is required (hint: Pass a tag name) (context: {'tool': 'droplet-list-by-tag'})"


@pytest.mark.anyio
class TestSuccess:
    async def test_string_result_passes_through(self):
        async def handler(ctx, client, args):
            return "Droplet deleted successfully"

        invoke = generic_tool_handler(_tool(handler, Number("ID", "ID", required=True)), CountingFactory(StubClient()))
        result = await invoke(None, {"ID": 1})

        assert not result.isError
        assert result_text(result) == "Droplet deleted successfully"

    async def test_handler_receives_context_and_client(self):
        seen = {}

        async def handler(ctx, client, args):
            seen.update(ctx=ctx, client=client, args=args)
            return []

        client = StubClient()
        await generic_tool_handler(_tool(handler), CountingFactory(client))("ctx", {"A": 1})
        assert seen == {"ctx": "ctx", "client": client, "args": {"A": 1}}


class TestFormatResult:
    def test_indented_json(self):
        assert format_result({"id": 1}) == '{\n  "id": 1\n}'

    def test_pydantic_models_are_dumped(self):
        assert json.loads(format_result(ListOptions(page=2))) == {"page": 2, "per_page": 50}

    def test_none_is_null(self):
        assert format_result(None) == "null"

    def test_unserializable(self):
        with pytest.raises(ResponseSerializationError):
            format_result([datetime.now()])
