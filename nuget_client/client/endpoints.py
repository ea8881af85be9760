"""End-point resolution: protocol detection and service index interpretation.

Protocol detection is purely structural (URL conventions, no I/O). Resolving
end-points fetches the v3 service index once and keeps the resources whose
@type matches the capability the client needs. Suggesting ids and listing
versions both go through SearchAutocompleteService.
"""

import json
import logging

import httpx
from pydantic import ValidationError

from nuget_client.client.http import ClientFactory
from nuget_client.contracts.service_index import (
    ApiResourceType,
    FeedEndpoint,
    NuGetApiVersion,
    ServiceIndex,
)
from nuget_client.errors import IndexFetchError, IndexFormatError

logger = logging.getLogger(__name__)

V3_INDEX_SUFFIX = "/v3/index.json"
INDEX_DOCUMENT_SUFFIX = "/index.json"


def is_v3_index_url(index_url: str) -> bool:
    """Determine whether the URL points at the index for v3 of the NuGet API."""
    return index_url.endswith(V3_INDEX_SUFFIX)


def resolve_protocol_version(feed_url: str) -> NuGetApiVersion:
    if is_v3_index_url(feed_url):
        return NuGetApiVersion.V3
    return NuGetApiVersion.UNKNOWN


def effective_base_url(feed_url: str) -> str:
    """Trim a trailing 'index.json', keeping the '/' before it.

    Feed URLs without that suffix are used verbatim.
    """
    if feed_url.endswith(INDEX_DOCUMENT_SUFFIX):
        return feed_url[: len(feed_url) - len(INDEX_DOCUMENT_SUFFIX) + 1]
    return feed_url


async def fetch_service_index(index_url: str, client_factory: ClientFactory) -> ServiceIndex:
    """Fetch and parse the service index.

    Raises:
        IndexFetchError: On network failure or a non-success status.
        IndexFormatError: On a missing body or a malformed resources list.
    """
    logger.info("Fetching service index from %s", index_url)
    try:
        async with client_factory() as client:
            response = await client.get(index_url)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise IndexFetchError(
            f"Request for the NuGet API index at {index_url} failed "
            f"with status {e.response.status_code}."
        ) from e
    except httpx.HTTPError as e:
        raise IndexFetchError(f"Request for the NuGet API index at {index_url} failed: {e}") from e

    try:
        data = response.json()
    except (json.JSONDecodeError, ValueError) as e:
        raise IndexFormatError(f"Invalid NuGet API index JSON from {index_url}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("resources"), list):
        raise IndexFormatError(f"NuGet API index at {index_url} has no resources list.")

    try:
        index = ServiceIndex.model_validate(data)
    except ValidationError as e:
        raise IndexFormatError(f"Malformed NuGet API index at {index_url}: {e}") from e

    logger.info("Service index fetched: %d resource(s) from %s", len(index.resources), index_url)
    return index


def select_endpoints(
    index: ServiceIndex,
    resource_type: str = ApiResourceType.SEARCH_AUTOCOMPLETE,
) -> list[FeedEndpoint]:
    return [FeedEndpoint.from_resource(r) for r in index.resources_of_type(resource_type)]


async def resolve_endpoints(
    index_url: str,
    client_factory: ClientFactory,
    resource_type: str = ApiResourceType.SEARCH_AUTOCOMPLETE,
) -> list[FeedEndpoint]:
    index = await fetch_service_index(index_url, client_factory)
    endpoints = select_endpoints(index, resource_type)
    logger.debug(
        "Resolved %d %s end-point(s) from %s: %s",
        len(endpoints),
        resource_type,
        index_url,
        [e.url for e in endpoints],
    )
    return endpoints
