"""E2E test configuration and fixtures.

These tests talk to a running server over streamable HTTP and reach a real
DigitalOcean account. Every module is marked with ``requires_server``, so
they only run when both MCP_SERVER_URL and E2E_DIGITALOCEAN=1 are set.
"""
from __future__ import annotations

import os
import time

import pytest

from .helpers import ENABLED, SERVER_URL, run_inspector

MAX_WAIT_SECONDS = int(os.environ.get("E2E_MAX_WAIT", "60"))


@pytest.fixture(scope="session", autouse=True)
def wait_for_server():
    """Wait for MCP server to be ready before running tests."""
    if not ENABLED:
        return

    print(f"\nWaiting for MCP server at {SERVER_URL}...")

    for attempt in range(MAX_WAIT_SECONDS):
        try:
            result = run_inspector("tools/list")
            if "tools" in result:
                print(f"Server ready after {attempt + 1}s")
                return
        except RuntimeError:
            pass
        time.sleep(1)

    pytest.fail(f"MCP server not ready after {MAX_WAIT_SECONDS}s")


@pytest.fixture(scope="session")
def server_url():
    """Return the MCP server URL."""
    return SERVER_URL
