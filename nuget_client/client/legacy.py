"""Client for simple NuGet feeds that expose /package-ids and /package-versions.

No service index is involved: queries go straight to each feed's base URL.
"""

import logging
from urllib.parse import quote

from nuget_client.client.aggregator import (
    AggregatingQueryEngine,
    EndpointQuery,
    sort_package_ids,
    sort_package_versions,
)
from nuget_client.client.endpoints import effective_base_url
from nuget_client.client.http import ClientFactory, default_client_factory
from nuget_client.contracts.service_index import NuGetApiVersion
from nuget_client.core.config import Config, config

logger = logging.getLogger(__name__)


class LegacyNuGetClient:
    def __init__(
        self,
        *feed_urls: str,
        settings: Config | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        settings = settings or config
        urls = [u for u in feed_urls if u and u.strip()] or [settings.default_index_url]
        self._feed_urls: tuple[str, ...] = tuple(urls)
        self._base_urls: tuple[str, ...] = tuple(effective_base_url(u.strip()) for u in urls)
        self.default_page_size = settings.default_page_size
        self._engine = AggregatingQueryEngine(client_factory or default_client_factory(settings))
        logger.debug("Legacy NuGet client for feeds %s", list(self._base_urls))

    @property
    def api_version(self) -> NuGetApiVersion:
        return NuGetApiVersion.UNKNOWN

    @property
    def feed_urls(self) -> tuple[str, ...]:
        return self._feed_urls

    @property
    def base_urls(self) -> tuple[str, ...]:
        return self._base_urls

    async def suggest_package_ids(self, partial_id: str, page_size: int | None = None) -> list[str]:
        # The legacy surface has no take parameter; page_size is accepted for parity only.
        queries = [
            EndpointQuery(
                url=_join(base, "/package-ids"),
                params={"includePrerelease": "true", "partialId": partial_id},
            )
            for base in self._base_urls
        ]
        result = await self._engine.collect(queries)
        return sort_package_ids(result.values)

    async def get_available_package_versions(
        self, package_id: str, page_size: int | None = None
    ) -> list[str]:
        path = "/package-versions/" + quote(package_id, safe="")
        queries = [
            EndpointQuery(url=_join(base, path), params={"includePrerelease": "true"})
            for base in self._base_urls
        ]
        result = await self._engine.collect(queries)
        return sort_package_versions(result.values)


def _join(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + "/" + path.lstrip("/")
