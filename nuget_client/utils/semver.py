"""Semantic version parsing and precedence for NuGet package versions.

Accepts MAJOR.MINOR.PATCH[.REVISION][-PRERELEASE][+BUILD]. The optional
fourth part is NuGet's legacy revision number; a missing revision counts as 0.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import cmp_to_key

from nuget_client.errors import InvalidVersionFormat

_VERSION_RE = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)(?:\.(?P<revision>\d+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)


@dataclass(frozen=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int
    revision: int = 0
    prerelease: tuple[str, ...] = ()
    build: str = ""

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def release(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.revision)


def parse_version(text: str) -> SemanticVersion:
    """Parse a version string, raising InvalidVersionFormat if it is not semver."""
    if not isinstance(text, str):
        raise InvalidVersionFormat(repr(text))
    m = _VERSION_RE.match(text.strip())
    if not m:
        raise InvalidVersionFormat(text)
    prerelease = m.group("prerelease")
    return SemanticVersion(
        major=int(m.group("major")),
        minor=int(m.group("minor")),
        patch=int(m.group("patch")),
        revision=int(m.group("revision") or 0),
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        build=m.group("build") or "",
    )


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_identifier(a: str, b: str) -> int:
    a_num, b_num = a.isdigit(), b.isdigit()
    if a_num and b_num:
        return _cmp(int(a), int(b))
    # Numeric identifiers always have lower precedence than alphanumeric ones.
    if a_num:
        return -1
    if b_num:
        return 1
    return _cmp(a, b)


def _compare_prerelease(a: tuple[str, ...], b: tuple[str, ...]) -> int:
    if not a and not b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    for x, y in zip(a, b):
        result = _compare_identifier(x, y)
        if result:
            return result
    return _cmp(len(a), len(b))


def compare_parsed(a: SemanticVersion, b: SemanticVersion) -> int:
    return _cmp(a.release, b.release) or _compare_prerelease(a.prerelease, b.prerelease)


def compare_versions(version1: str, version2: str) -> int:
    """Compare two versions by semver precedence.

    Returns:
        0 if the versions are equal, 1 if version1 is greater, -1 if version2 is greater.
    """
    return compare_parsed(parse_version(version1), parse_version(version2))


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Sort versions ascending by precedence.

    Every value is parsed before sorting; the first unparseable value raises
    InvalidVersionFormat. Values with equal precedence (build metadata only)
    are ordered lexically.
    """
    parsed = [(parse_version(v), v) for v in versions]

    def _compare(left, right) -> int:
        return compare_parsed(left[0], right[0]) or _cmp(left[1], right[1])

    return [v for _, v in sorted(parsed, key=cmp_to_key(_compare))]
