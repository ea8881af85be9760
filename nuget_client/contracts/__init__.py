"""NuGet service index contract: API versions, index resources and resolved end-points."""

from nuget_client.contracts.service_index import (
    ApiResource,
    ApiResourceType,
    FeedEndpoint,
    NuGetApiVersion,
    ServiceIndex,
)

__all__ = [
    "ApiResource",
    "ApiResourceType",
    "FeedEndpoint",
    "NuGetApiVersion",
    "ServiceIndex",
]
