"""Client for v3 of the NuGet API (service index + SearchAutocompleteService)."""

import asyncio
import logging
from collections.abc import Iterable

from nuget_client.client.aggregator import (
    AggregatingQueryEngine,
    EndpointQuery,
    sort_package_ids,
    sort_package_versions,
)
from nuget_client.client.endpoints import resolve_endpoints
from nuget_client.client.http import ClientFactory, default_client_factory
from nuget_client.contracts.service_index import (
    ApiResource,
    ApiResourceType,
    FeedEndpoint,
    NuGetApiVersion,
)
from nuget_client.core.config import Config, config
from nuget_client.errors import IndexFormatError

logger = logging.getLogger(__name__)


class NuGetClientV3:
    """Queries every SearchAutocompleteService listed by one or more service indexes."""

    def __init__(
        self,
        endpoints: Iterable[FeedEndpoint | ApiResource],
        settings: Config | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        settings = settings or config
        resolved: dict[str, FeedEndpoint] = {}
        for item in endpoints:
            endpoint = FeedEndpoint.from_resource(item) if isinstance(item, ApiResource) else item
            if endpoint.resource_type != ApiResourceType.SEARCH_AUTOCOMPLETE:
                continue
            resolved.setdefault(endpoint.url, endpoint)
        if not resolved:
            raise IndexFormatError("The NuGet API index lists no SearchAutocompleteService end-points.")

        self._endpoints: tuple[FeedEndpoint, ...] = tuple(resolved.values())
        self.default_page_size = settings.default_page_size
        self._engine = AggregatingQueryEngine(client_factory or default_client_factory(settings))

    @property
    def api_version(self) -> NuGetApiVersion:
        return NuGetApiVersion.V3

    @property
    def endpoints(self) -> tuple[FeedEndpoint, ...]:
        return self._endpoints

    @property
    def autocomplete_urls(self) -> list[str]:
        return [e.url for e in self._endpoints]

    async def suggest_package_ids(self, partial_id: str, page_size: int | None = None) -> list[str]:
        result = await self._engine.collect(self._queries("q", partial_id, page_size))
        return sort_package_ids(result.values)

    async def get_available_package_versions(
        self, package_id: str, page_size: int | None = None
    ) -> list[str]:
        result = await self._engine.collect(self._queries("id", package_id, page_size))
        return sort_package_versions(result.values)

    def _queries(self, key: str, value: str, page_size: int | None) -> list[EndpointQuery]:
        take = page_size or self.default_page_size
        params = {key: value, "take": str(take), "prerelease": "true"}
        return [EndpointQuery(url=e.url, params=params) for e in self._endpoints]

    @classmethod
    async def create_from_index(
        cls,
        *index_urls: str,
        settings: Config | None = None,
        client_factory: ClientFactory | None = None,
    ) -> "NuGetClientV3":
        """Create a client from one or more v3 service indexes.

        Indexes are fetched concurrently. Every fetch is allowed to settle, then
        the first fetch or format failure (in argument order) is raised.
        Defaults to the configured default index URL.
        """
        settings = settings or config
        client_factory = client_factory or default_client_factory(settings)
        urls = list(index_urls) or [settings.default_index_url]

        outcomes = await asyncio.gather(
            *(resolve_endpoints(url, client_factory) for url in urls),
            return_exceptions=True,
        )
        endpoints: list[FeedEndpoint] = []
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
            endpoints.extend(outcome)
        logger.info(
            "NuGet v3 client: %d index(es) -> %d auto-complete end-point(s)",
            len(urls),
            len(endpoints),
        )
        return cls(endpoints, settings=settings, client_factory=client_factory)
