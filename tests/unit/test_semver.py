import pytest

from nuget_client.errors import InvalidVersionFormat
from nuget_client.utils.semver import compare_versions, parse_version, sort_versions


def test_compare_equal_versions():
    assert compare_versions("1.0.0", "1.0.0") == 0


def test_compare_lower_major():
    assert compare_versions("1.0.0", "2.0.0") == -1
    assert compare_versions("2.0.0", "1.0.0") == 1


def test_prerelease_ranks_below_release():
    assert compare_versions("1.0.0-alpha", "1.0.0") == -1
    assert compare_versions("1.0.0", "1.0.0-alpha") == 1


def test_numeric_parts_compare_numerically():
    assert compare_versions("1.10.0", "1.9.0") == 1
    assert compare_versions("1.0.0-beta.11", "1.0.0-beta.2") == 1


def test_semver_spec_precedence_chain():
    chain = [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
    ]
    for lower, higher in zip(chain, chain[1:]):
        assert compare_versions(lower, higher) == -1, (lower, higher)


def test_build_metadata_ignored_for_precedence():
    assert compare_versions("1.0.0+build.1", "1.0.0+build.2") == 0


def test_revision_part_is_optional_and_numeric():
    assert compare_versions("1.0.0", "1.0.0.0") == 0
    assert compare_versions("1.0.0.2", "1.0.0.10") == -1
    assert parse_version("4.0.0.1").revision == 1


def test_parse_version_fields():
    v = parse_version("2.3.4-rc.1+sha.abc")
    assert (v.major, v.minor, v.patch) == (2, 3, 4)
    assert v.prerelease == ("rc", "1")
    assert v.build == "sha.abc"
    assert v.is_prerelease


@pytest.mark.parametrize("bad", ["not-a-version", "1.0", "", "1.0.0-", "v1.0.0", "1.0.0-beta..1"])
def test_invalid_versions_raise(bad):
    with pytest.raises(InvalidVersionFormat) as exc:
        parse_version(bad)
    assert exc.value.version == bad


def test_sort_versions_example():
    assert sort_versions(["1.0.1", "1.0.0", "1.0.0-beta"]) == ["1.0.0-beta", "1.0.0", "1.0.1"]


def test_sort_versions_fails_loudly_on_garbage():
    with pytest.raises(InvalidVersionFormat):
        sort_versions(["1.0.0", "not-a-version", "2.0.0"])


def test_sort_versions_breaks_precedence_ties_lexically():
    assert sort_versions(["1.0.0+b", "1.0.0+a"]) == ["1.0.0+a", "1.0.0+b"]
