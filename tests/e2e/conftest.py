from collections.abc import AsyncIterator

import pytest_asyncio

from nuget_client.client import NuGetClientV3


@pytest_asyncio.fixture
async def client() -> AsyncIterator[NuGetClientV3]:
    """Client resolved from the live nuget.org service index (run with --live-feeds)."""
    yield await NuGetClientV3.create_from_index()
