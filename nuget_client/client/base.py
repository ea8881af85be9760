"""Standard interface for NuGet auto-complete clients.

Both client variants (v3 service-index and legacy feed) satisfy NuGetClient;
create_client returns one of them depending on the detected protocol.
"""

from typing import Protocol, runtime_checkable

from nuget_client.contracts.service_index import NuGetApiVersion


@runtime_checkable
class NuGetClient(Protocol):
    """The surface shared by every NuGet auto-complete client."""

    default_page_size: int

    @property
    def api_version(self) -> NuGetApiVersion:
        """The NuGet API version used by the client."""
        ...

    async def suggest_package_ids(self, partial_id: str, page_size: int | None = None) -> list[str]:
        """Provide suggestions to complete a package Id, sorted lexically."""
        ...

    async def get_available_package_versions(
        self, package_id: str, page_size: int | None = None
    ) -> list[str]:
        """Get available versions for the package, sorted by semver precedence."""
        ...
