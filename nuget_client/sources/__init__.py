"""Package sources: NuGet.config loading and user-level config discovery."""

from nuget_client.sources.nuget_config import (
    NuGetConfig,
    PackageSourceConfig,
    load_config,
    parse_config,
)
from nuget_client.sources.package_sources import (
    PackageSources,
    get_configured_package_sources,
    get_user_nuget_config_file,
    package_source_feed_urls,
)

__all__ = [
    "NuGetConfig",
    "PackageSourceConfig",
    "PackageSources",
    "get_configured_package_sources",
    "get_user_nuget_config_file",
    "load_config",
    "package_source_feed_urls",
    "parse_config",
]
