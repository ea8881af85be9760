"""Errors raised by NuGet clients.

Construction errors (unsupported version, index fetch/format) propagate to the
caller. EndpointQueryFailure is contained by the aggregator and only logged.
"""


class NuGetClientError(Exception):
    """Base exception for NuGet client operations."""


class UnsupportedVersionError(NuGetClientError):
    """Raised when the requested or detected API version has no client implementation."""


class IndexFetchError(NuGetClientError):
    """Raised when the service index cannot be fetched."""


class IndexFormatError(NuGetClientError):
    """Raised when the service index body is missing or malformed."""


class EndpointQueryFailure(NuGetClientError):
    """A single endpoint's query failed or returned an unusable payload."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url


class InvalidVersionFormat(NuGetClientError, ValueError):
    """Raised when a version string cannot be parsed for ordering."""

    def __init__(self, version: str) -> None:
        super().__init__(f"Invalid package version: {version!r}")
        self.version = version


class PackageSourceConfigError(NuGetClientError):
    """Raised when NuGet.config cannot be located, read or parsed."""
