"""NuGet client: package id and version discovery across federated feeds."""

from nuget_client.client import (
    AnyNuGetClient,
    LegacyNuGetClient,
    NuGetClient,
    NuGetClientV3,
    create_client,
    is_v3_index_url,
)
from nuget_client.contracts import FeedEndpoint, NuGetApiVersion
from nuget_client.core.config import DEFAULT_INDEX_URL_V3, Config
from nuget_client.errors import (
    EndpointQueryFailure,
    IndexFetchError,
    IndexFormatError,
    InvalidVersionFormat,
    NuGetClientError,
    PackageSourceConfigError,
    UnsupportedVersionError,
)
from nuget_client.sources import get_configured_package_sources, get_user_nuget_config_file
from nuget_client.utils.semver import compare_versions, sort_versions

__version__ = "0.1.0"

__all__ = [
    "AnyNuGetClient",
    "Config",
    "DEFAULT_INDEX_URL_V3",
    "EndpointQueryFailure",
    "FeedEndpoint",
    "IndexFetchError",
    "IndexFormatError",
    "InvalidVersionFormat",
    "LegacyNuGetClient",
    "NuGetApiVersion",
    "NuGetClient",
    "NuGetClientError",
    "NuGetClientV3",
    "PackageSourceConfigError",
    "UnsupportedVersionError",
    "compare_versions",
    "create_client",
    "get_configured_package_sources",
    "get_user_nuget_config_file",
    "is_v3_index_url",
    "sort_versions",
]
