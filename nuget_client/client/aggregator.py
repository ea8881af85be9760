"""Fan-out/fan-in query aggregation across feed end-points.

Every end-point gets the same logical query concurrently. Each end-point's
outcome is collected independently: a failure empties that end-point's
contribution and is logged, it never aborts the call. Merged values are
deduplicated by exact (case-sensitive) match; ordering is applied afterwards,
so it does not depend on response arrival order.
"""

import asyncio
import json
import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import httpx

from nuget_client.client.http import ClientFactory
from nuget_client.core.logger import QueryEvent
from nuget_client.errors import EndpointQueryFailure
from nuget_client.utils.semver import sort_versions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EndpointQuery:
    """One GET request against one end-point."""

    url: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass
class AggregateResult:
    values: set[str] = field(default_factory=set)
    failures: list[EndpointQueryFailure] = field(default_factory=list)
    queried: int = 0

    @property
    def succeeded(self) -> int:
        return self.queried - len(self.failures)


def extract_values(payload: Any) -> list[str] | None:
    """Pull the string list out of a response payload.

    Accepts a bare list of strings or an envelope whose `data` field is one.
    Returns None for any other shape.
    """
    if isinstance(payload, dict):
        payload = payload.get("data")
    if not isinstance(payload, list):
        return None
    if not all(isinstance(item, str) for item in payload):
        return None
    return payload


def sort_package_ids(values: Iterable[str]) -> list[str]:
    return sorted(values)


def sort_package_versions(values: Iterable[str]) -> list[str]:
    return sort_versions(values)


class AggregatingQueryEngine:
    """Issues queries to every end-point at once and merges what comes back."""

    def __init__(self, client_factory: ClientFactory) -> None:
        self._client_factory = client_factory

    async def collect(self, queries: list[EndpointQuery]) -> AggregateResult:
        result = AggregateResult(queried=len(queries))
        if not queries:
            return result

        t0 = time.monotonic()
        async with self._client_factory() as client:
            outcomes = await asyncio.gather(
                *(self._fetch_one(client, query) for query in queries),
                return_exceptions=True,
            )
        elapsed_ms = round((time.monotonic() - t0) * 1000, 1)

        for query, outcome in zip(queries, outcomes):
            if isinstance(outcome, EndpointQueryFailure):
                logger.warning("Query failed for %s: %s", query.url, outcome)
                result.failures.append(outcome)
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            result.values.update(outcome)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                QueryEvent(
                    event_type="AGGREGATE",
                    data={
                        "endpoints": len(queries),
                        "failed": [f.url for f in result.failures],
                        "values": len(result.values),
                        "elapsed_ms": elapsed_ms,
                    },
                ).to_json()
            )
        return result

    async def _fetch_one(self, client: httpx.AsyncClient, query: EndpointQuery) -> list[str]:
        try:
            response = await client.get(query.url, params=query.params or None)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise EndpointQueryFailure(query.url, f"status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise EndpointQueryFailure(query.url, f"request failed: {e!r}") from e
        except httpx.InvalidURL as e:
            raise EndpointQueryFailure(query.url, f"invalid URL: {e}") from e
        except (json.JSONDecodeError, ValueError) as e:
            raise EndpointQueryFailure(query.url, f"invalid JSON: {e}") from e

        values = extract_values(payload)
        if values is None:
            raise EndpointQueryFailure(
                query.url, f"unexpected payload shape ({type(payload).__name__})"
            )
        return values
