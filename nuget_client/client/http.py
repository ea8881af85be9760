"""httpx client builder.

Centralizes timeouts and headers so every feed request behaves the same way.
Clients take a ClientFactory so tests can swap in an httpx.MockTransport.
"""

from collections.abc import Callable

import httpx

from nuget_client.core.config import Config, config

ClientFactory = Callable[[], httpx.AsyncClient]


def build_async_client(
    settings: Config | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    settings = settings or config
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def default_client_factory(settings: Config | None = None) -> ClientFactory:
    """Return a factory that builds clients from the given settings."""
    return lambda: build_async_client(settings)
