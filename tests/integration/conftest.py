"""Shared fixtures for integration tests.

These tests use the real HttpPlaylistValidator with a real
httpx.AsyncClient, with HTTP mocked via respx.
"""

from __future__ import annotations

from typing import AsyncIterator, Iterator

import httpx
import pytest
import respx


@pytest.fixture()
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Real httpx.AsyncClient for use with respx mocking."""
    async with httpx.AsyncClient(headers={"User-Agent": "BurgTV-API/1.0"}) as client:
        yield client


@pytest.fixture()
def respx_mock() -> Iterator[respx.MockRouter]:
    """Explicit respx mock router for request interception."""
    with respx.mock(assert_all_called=False) as router:
        yield router
