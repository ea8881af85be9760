"""NuGet.config loading.

Only the <packageSources> section is read. <add key=".." value=".."/> entries
are kept in document order and a <clear/> element discards every source
listed before it.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

from nuget_client.errors import PackageSourceConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageSourceConfig:
    """The configuration for a package source."""

    key: str
    value: str


@dataclass
class NuGetConfig:
    package_sources: list[PackageSourceConfig] = field(default_factory=list)


def parse_config(xml_text: str) -> NuGetConfig:
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise PackageSourceConfigError(f"Invalid NuGet.config XML: {e}") from e

    sources: list[PackageSourceConfig] = []
    section = root.find("packageSources")
    if section is None:
        return NuGetConfig()

    for element in section:
        if element.tag == "clear":
            sources.clear()
            continue
        if element.tag != "add":
            continue
        key = element.get("key")
        value = element.get("value")
        if not key or not value:
            logger.warning("Skipping package source with missing key or value: %s", element.attrib)
            continue
        sources.append(PackageSourceConfig(key=key, value=value))

    return NuGetConfig(package_sources=sources)


def load_config(file_path: str | Path) -> NuGetConfig:
    """Load NuGet configuration from the specified file."""
    path = Path(file_path)
    try:
        xml_text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PackageSourceConfigError(f"Cannot read NuGet.config at {path}: {e}") from e
    return parse_config(xml_text)
