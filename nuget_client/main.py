"""Entry point: suggest | versions | sources."""

import argparse
import asyncio
import sys

from nuget_client.client import create_client, resolve_protocol_version
from nuget_client.client.aggregator import sort_package_ids, sort_package_versions
from nuget_client.contracts.service_index import NuGetApiVersion
from nuget_client.core.config import config
from nuget_client.core.logger import configure_logging
from nuget_client.errors import NuGetClientError
from nuget_client.sources import (
    get_configured_package_sources,
    get_user_nuget_config_file,
    package_source_feed_urls,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nuget-client")
    sub = parser.add_subparsers(dest="mode", required=True)

    for mode, target in (("suggest", "partial_id"), ("versions", "package_id")):
        p = sub.add_parser(mode)
        p.add_argument(target)
        p.add_argument("--feed", action="append", default=[], help="Feed URL (repeatable)")
        p.add_argument("--take", type=int, default=None, help="Results per end-point")
        p.add_argument(
            "--use-config",
            action="store_true",
            help="Query the http(s) package sources from NuGet.config",
        )
        p.add_argument("--config", default=None, help="Path to NuGet.config")

    p = sub.add_parser("sources")
    p.add_argument("--config", default=None, help="Path to NuGet.config")
    return parser


def _config_path(explicit: str | None):
    if explicit:
        return explicit
    if config.nuget_config_path:
        return config.nuget_config_path
    path = get_user_nuget_config_file()
    if path is None:
        raise NuGetClientError("No user-level NuGet.config found.")
    return path


def _group_by_protocol(feeds: list[str]) -> list[list[str]]:
    """Split feeds into v3 service indexes and legacy feeds, one client each."""
    v3: list[str] = []
    legacy: list[str] = []
    for feed in feeds:
        if resolve_protocol_version(feed) == NuGetApiVersion.V3:
            v3.append(feed)
        else:
            legacy.append(feed)
    return [group for group in (v3, legacy) if group] or [[]]


async def _settle(*aws):
    outcomes = await asyncio.gather(*aws, return_exceptions=True)
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome
    return outcomes


async def _query(args: argparse.Namespace) -> int:
    feeds = list(args.feed)
    if args.use_config:
        sources = get_configured_package_sources(_config_path(args.config))
        feeds.extend(package_source_feed_urls(sources))
    feeds = [f.strip() for f in feeds if f and f.strip()]

    clients = await _settle(*(create_client(*group) for group in _group_by_protocol(feeds)))
    if args.mode == "suggest":
        results = await _settle(
            *(c.suggest_package_ids(args.partial_id, args.take) for c in clients)
        )
        values = sort_package_ids(set().union(*results))
    else:
        results = await _settle(
            *(c.get_available_package_versions(args.package_id, args.take) for c in clients)
        )
        values = sort_package_versions(set().union(*results))
    for value in values:
        print(value)
    return 0


def _sources(args: argparse.Namespace) -> int:
    sources = get_configured_package_sources(_config_path(args.config))
    for name, value in sources.items():
        print(f"{name}\t{value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(config.log_level)

    problems = config.validate()
    if problems:
        for problem in problems:
            print(f"Config error: {problem}", file=sys.stderr)
        return 2

    try:
        if args.mode == "sources":
            return _sources(args)
        return asyncio.run(_query(args))
    except NuGetClientError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
