"""Helper functions for E2E tests using MCP Inspector CLI."""
from __future__ import annotations

import json
import os
import subprocess
from typing import Any

import pytest

SERVER_URL = os.environ.get("MCP_SERVER_URL", "")
ENABLED = bool(SERVER_URL) and os.environ.get("E2E_DIGITALOCEAN", "0") == "1"

# Applied as pytestmark in every e2e module
requires_server = pytest.mark.skipif(
    not ENABLED, reason="set MCP_SERVER_URL and E2E_DIGITALOCEAN=1 to run e2e tests"
)


def run_inspector(method: str, **kwargs) -> dict[str, Any]:
    """Run MCP Inspector CLI and return parsed JSON response.

    Args:
        method: MCP method (e.g., "tools/list", "tools/call")
        **kwargs: tool_name and tool_args for "tools/call"

    Returns:
        Parsed JSON response from the server.

    Raises:
        RuntimeError: If CLI fails or returns invalid JSON.
    """
    cmd = [
        "npx", "@modelcontextprotocol/inspector", "--cli",
        SERVER_URL,
        "--transport", "http",
        "--method", method,
    ]

    if "tool_name" in kwargs:
        cmd.extend(["--tool-name", kwargs["tool_name"]])

    if "tool_args" in kwargs:
        for key, value in kwargs["tool_args"].items():
            # Serialize complex types as JSON for MCP CLI
            if isinstance(value, (dict, list)):
                value = json.dumps(value)
            cmd.extend(["--tool-arg", f"{key}={value}"])

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=60)
    except (OSError, subprocess.TimeoutExpired) as e:
        raise RuntimeError(f"Inspector failed to run: {e}") from e

    if result.returncode != 0:
        raise RuntimeError(f"Inspector failed: {result.stderr}")

    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise RuntimeError(f"Invalid JSON response: {result.stdout}") from e


def call_tool(name: str, args: dict[str, Any] | None = None) -> dict[str, Any]:
    """Call an MCP tool and return the raw result envelope.

    The envelope has "content" (a list with one text item) and "isError".
    """
    return run_inspector("tools/call", tool_name=name, tool_args=args or {})


def tool_text(result: dict[str, Any]) -> str:
    return result["content"][0]["text"]


def tool_json(result: dict[str, Any]) -> Any:
    """Decode the JSON text of a successful tool result."""
    assert not result.get("isError"), tool_text(result)
    return json.loads(tool_text(result))


def list_tools() -> list[dict[str, Any]]:
    result = run_inspector("tools/list")
    return result.get("tools", [])
