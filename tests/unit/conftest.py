"""Unit test fixtures."""
from __future__ import annotations

import pytest

from .helpers import CountingFactory, StubClient


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client() -> StubClient:
    return StubClient()


@pytest.fixture
def factory(client: StubClient) -> CountingFactory:
    return CountingFactory(client)
