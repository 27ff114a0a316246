"""Stub DigitalOcean client and dispatch helpers for unit tests."""
from __future__ import annotations

import json
from typing import Any

from mcp.types import CallToolResult

from droplet_mcp_server.handler_registry import get_tool
from droplet_mcp_server.handler_wrappers import generic_tool_handler

# Importing the primitives registers every tool
import droplet_mcp_server.primitives  # noqa: F401


class StubService:
    """Records every coroutine call as ("service.method", args).

    The return value of a call is looked up in the shared responses map by
    "service.method"; an exception instance found there is raised instead.
    """

    def __init__(self, name: str, calls: list, responses: dict[str, Any]):
        self._name = name
        self._calls = calls
        self._responses = responses

    def __getattr__(self, method: str):
        key = f"{self._name}.{method}"

        async def _call(*args: Any) -> Any:
            self._calls.append((key, args))
            value = self._responses.get(key)
            if isinstance(value, BaseException):
                raise value
            return value

        return _call


class StubClient:
    """Stands in for DigitalOceanClient."""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.calls: list[tuple[str, tuple]] = []
        self.responses: dict[str, Any] = dict(responses or {})
        self.droplets = StubService("droplets", self.calls, self.responses)
        self.droplet_actions = StubService("droplet_actions", self.calls, self.responses)
        self.images = StubService("images", self.calls, self.responses)
        self.image_actions = StubService("image_actions", self.calls, self.responses)

    def methods_called(self) -> list[str]:
        return [name for name, _ in self.calls]


class CountingFactory:
    """Client factory that counts how often it is asked for a client."""

    def __init__(self, client: Any = None, error: Exception | None = None):
        self.client = client
        self.error = error
        self.calls = 0

    async def __call__(self, ctx: Any) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.client


async def call_tool(name: str, args: dict[str, Any] | None, factory: CountingFactory) -> CallToolResult:
    """Run a registered tool through the generic dispatcher."""
    invoke = generic_tool_handler(get_tool(name), factory)
    return await invoke(None, args)


def result_text(result: CallToolResult) -> str:
    assert len(result.content) == 1
    return result.content[0].text


def result_json(result: CallToolResult) -> Any:
    assert not result.isError, result_text(result)
    return json.loads(result_text(result))


def droplet(droplet_id: int = 123, name: str = "web-1", **extra: Any) -> dict[str, Any]:
    """A droplet payload shaped like the API's."""
    data = {
        "id": droplet_id,
        "name": name,
        "memory": 1024,
        "vcpus": 1,
        "disk": 25,
        "locked": False,
        "status": "active",
        "kernel": None,
        "created_at": "2024-01-01T00:00:00Z",
        "features": ["monitoring"],
        "backup_ids": [],
        "next_backup_window": None,
        "snapshot_ids": [],
        "image": {"id": 7, "slug": "ubuntu-24-04-x64"},
        "volume_ids": [],
        "size": {"slug": "s-1vcpu-1gb"},
        "size_slug": "s-1vcpu-1gb",
        "networks": {"v4": [], "v6": []},
        "region": {"slug": "nyc3"},
        "tags": ["web"],
        "vpc_uuid": "5a4981aa-9653-4bd1-bef5-d6bff52042e4",
    }
    data.update(extra)
    return data


def action(action_id: int = 1, action_type: str = "reboot", **extra: Any) -> dict[str, Any]:
    data = {
        "id": action_id,
        "status": "in-progress",
        "type": action_type,
        "resource_id": 123,
        "resource_type": "droplet",
    }
    data.update(extra)
    return data
