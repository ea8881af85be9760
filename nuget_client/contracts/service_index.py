"""NuGet service index contract.

Defines the canonical types for:
  - API versions (NuGetApiVersion)
  - The v3 service index document (ServiceIndex, ApiResource)
  - Resolved query endpoints (FeedEndpoint)

The service index lists every resource a feed exposes; clients keep only the
resources whose @type matches the capability they need.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# API versions
# ---------------------------------------------------------------------------


class NuGetApiVersion(IntEnum):
    """A well-known version of the NuGet API."""

    UNKNOWN = 0
    V2 = 1
    V3 = 2


# ---------------------------------------------------------------------------
# Service index
# ---------------------------------------------------------------------------


class ApiResourceType(StrEnum):
    SEARCH_QUERY = "SearchQueryService"
    SEARCH_AUTOCOMPLETE = "SearchAutocompleteService"
    PACKAGE_BASE_ADDRESS = "PackageBaseAddress/3.0.0"


class ApiResource(BaseModel):
    """One entry of the service index `resources` array."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="@id", min_length=1, description="Resource end-point URL")
    type: str = Field(
        alias="@type",
        min_length=1,
        description="Resource type, e.g. 'SearchAutocompleteService'. Unlisted types are kept as-is.",
    )
    comment: str | None = Field(default=None)


class ServiceIndex(BaseModel):
    """The response from a NuGet v3 service index (index.json)."""

    model_config = ConfigDict(extra="ignore")

    version: str | None = Field(default=None)
    resources: list[ApiResource] = Field(description="Available API resources")

    def resources_of_type(self, resource_type: str) -> list[ApiResource]:
        return [r for r in self.resources if r.type == resource_type]


# ---------------------------------------------------------------------------
# Resolved endpoints
# ---------------------------------------------------------------------------


class FeedEndpoint(BaseModel):
    """A resolved query end-point. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    resource_type: str = Field(default=ApiResourceType.SEARCH_AUTOCOMPLETE.value)

    @field_validator("url")
    @classmethod
    def _strip_url(cls, value: str) -> str:
        url = value.strip()
        if not url:
            raise ValueError("url must not be blank")
        return url

    @classmethod
    def from_resource(cls, resource: ApiResource) -> FeedEndpoint:
        return cls(url=resource.id, resource_type=resource.type)
