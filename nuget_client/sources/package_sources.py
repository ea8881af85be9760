"""Configured package sources from NuGet.config."""

import logging
import os
import sys
from pathlib import Path

from nuget_client.errors import PackageSourceConfigError
from nuget_client.sources.nuget_config import load_config

logger = logging.getLogger(__name__)

PackageSources = dict[str, str]

_CONFIG_FILE_NAMES = ("NuGet.Config", "NuGet.config")


def get_configured_package_sources(nuget_config_path: str | Path) -> PackageSources:
    """Map package source names to their URL or file-system path."""
    nuget_config = load_config(nuget_config_path)

    package_sources: PackageSources = {}
    for source in nuget_config.package_sources:
        logger.debug('PackageSource["%s"] = "%s"', source.key, source.value)
        package_sources[source.key] = source.value
    return package_sources


def user_nuget_config_dir() -> Path:
    """Directory holding the user-level NuGet.config (cross-platform)."""
    try:
        home = Path.home()
    except RuntimeError as e:
        raise PackageSourceConfigError("Cannot determine user's home directory.") from e

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(home / "AppData" / "Roaming")))
        return base / "NuGet"
    return home / ".nuget" / "NuGet"


def get_user_nuget_config_file() -> Path | None:
    """Full path to the user-level NuGet.config, or None if the file does not exist."""
    config_dir = user_nuget_config_dir()
    for name in _CONFIG_FILE_NAMES:
        candidate = config_dir / name
        if candidate.is_file():
            return candidate
    return None


def package_source_feed_urls(package_sources: PackageSources) -> list[str]:
    """Keep the sources that can be queried over HTTP (local folders are dropped)."""
    return [
        value
        for value in package_sources.values()
        if value.lower().startswith(("http://", "https://"))
    ]
