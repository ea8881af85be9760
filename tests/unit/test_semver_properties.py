from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from nuget_client.utils.semver import compare_versions, sort_versions

pytestmark = pytest.mark.property

_identifier = st.one_of(
    st.integers(min_value=0, max_value=50).map(str),
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz-", min_size=1, max_size=6),
)


@st.composite
def versions(draw: st.DrawFn) -> str:
    core = ".".join(str(draw(st.integers(min_value=0, max_value=20))) for _ in range(3))
    prerelease = draw(st.lists(_identifier, max_size=3))
    if prerelease:
        core += "-" + ".".join(prerelease)
    return core


@given(versions())
def test_compare_is_reflexive(v: str):
    assert compare_versions(v, v) == 0


@given(versions(), versions())
def test_compare_is_antisymmetric(a: str, b: str):
    assert compare_versions(a, b) == -compare_versions(b, a)


@given(st.lists(versions(), max_size=12))
def test_sort_is_ordered_and_order_independent(values: list[str]):
    ordered = sort_versions(values)
    assert sorted(ordered) == sorted(values)
    for lower, higher in zip(ordered, ordered[1:]):
        assert compare_versions(lower, higher) <= 0
    assert sort_versions(list(reversed(values))) == ordered
