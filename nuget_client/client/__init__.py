"""NuGet auto-complete clients and the protocol-dispatching factory."""

import logging

from nuget_client.client.base import NuGetClient
from nuget_client.client.endpoints import (
    effective_base_url,
    is_v3_index_url,
    resolve_endpoints,
    resolve_protocol_version,
)
from nuget_client.client.http import ClientFactory, build_async_client
from nuget_client.client.legacy import LegacyNuGetClient
from nuget_client.client.v3 import NuGetClientV3
from nuget_client.contracts.service_index import NuGetApiVersion
from nuget_client.core.config import Config, config
from nuget_client.errors import UnsupportedVersionError

logger = logging.getLogger(__name__)

AnyNuGetClient = NuGetClientV3 | LegacyNuGetClient


async def create_client(
    *feed_urls: str,
    api_version: NuGetApiVersion | None = None,
    settings: Config | None = None,
    client_factory: ClientFactory | None = None,
) -> AnyNuGetClient:
    """Create a NuGet client for the specified feed(s).

    Args:
        feed_urls: Feed URLs; defaults to the configured default index URL.
        api_version: Optional API version hint. Without one the version is
            auto-detected from the URLs.

    Raises:
        UnsupportedVersionError: The hint names a version with no client and
            no URL looks like a v3 index, or the URLs mix protocols.
        IndexFetchError / IndexFormatError: v3 service index resolution failed.
    """
    settings = settings or config
    urls = [u.strip() for u in feed_urls if u and u.strip()] or [settings.default_index_url]
    hint = api_version or NuGetApiVersion.UNKNOWN

    detected = [resolve_protocol_version(u) for u in urls]
    v3_count = sum(1 for d in detected if d == NuGetApiVersion.V3)

    if hint == NuGetApiVersion.V3 or v3_count == len(urls):
        return await NuGetClientV3.create_from_index(
            *urls, settings=settings, client_factory=client_factory
        )

    if hint != NuGetApiVersion.UNKNOWN and v3_count == 0:
        raise UnsupportedVersionError(
            f'Unsupported API version "{hint.name}" for feed(s) {", ".join(urls)}.'
        )

    if v3_count:
        raise UnsupportedVersionError(
            "Cannot combine v3 service indexes and legacy feeds in one client: " + ", ".join(urls)
        )

    logger.info("No v3 service index recognized; using legacy feed client for %s", urls)
    return LegacyNuGetClient(*urls, settings=settings, client_factory=client_factory)


__all__ = [
    "AnyNuGetClient",
    "ClientFactory",
    "LegacyNuGetClient",
    "NuGetApiVersion",
    "NuGetClient",
    "NuGetClientV3",
    "build_async_client",
    "create_client",
    "effective_base_url",
    "is_v3_index_url",
    "resolve_endpoints",
    "resolve_protocol_version",
]
