from collections.abc import Callable, Sequence

import httpx
import pytest

from nuget_client.core.config import DEFAULT_INDEX_URL_V3, Config

Handler = Callable[[httpx.Request], httpx.Response]


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("nuget", "NuGet feed tests")
    group.addoption(
        "--live-feeds",
        action="store_true",
        default=False,
        help="Also run tests that resolve the public nuget.org service index "
        "and query its SearchAutocompleteService end-points over the network.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "live_feed: fetches a real v3 service index and queries real auto-complete "
        "end-points; needs network access and is skipped without --live-feeds",
    )
    config.addinivalue_line(
        "markers",
        "property: hypothesis-generated version strings checked against the ordering rules",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: Sequence[pytest.Item]) -> None:
    if config.getoption("--live-feeds"):
        return
    offline = pytest.mark.skip(
        reason=f"needs a reachable NuGet feed ({DEFAULT_INDEX_URL_V3}); pass --live-feeds"
    )
    for item in items:
        if item.get_closest_marker("live_feed"):
            item.add_marker(offline)


@pytest.fixture
def settings() -> Config:
    return Config(request_timeout_seconds=5.0)


@pytest.fixture
def mock_factory():
    """Build a client factory backed by httpx.MockTransport.

    Every request passed to the handler is also appended to `requests`.
    """

    def _make(handler: Handler):
        requests: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        def factory() -> httpx.AsyncClient:
            return httpx.AsyncClient(transport=httpx.MockTransport(_recording))

        return factory, requests

    return _make
