# SPDX-License-Identifier: MIT
"""Property-based tests for version ordering.

These tests verify that:
- compare is a total order over all strings (reflexive, antisymmetric, transitive)
- Invalid strings sort below every valid version
- Build metadata and the v prefix never affect ordering
- Canonical form is idempotent and orders like its input
- version_key and the selection helpers agree with compare
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from verso_version import (
    canonical,
    compare,
    earliest,
    is_valid,
    latest,
    max_version,
    parse,
    sort_ascending,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

_NUM = r"[0-9]{1,3}"
_IDENT = r"[0-9A-Za-z-]{1,6}"

# Short cores without suffixes
short_versions = st.from_regex(rf"v?{_NUM}(\.{_NUM})?", fullmatch=True)

# Full cores with optional pre-release and build metadata
full_versions = st.from_regex(
    rf"v?{_NUM}\.{_NUM}\.{_NUM}(-{_IDENT}(\.{_IDENT}){{0,2}})?(\+[!-~]{{1,8}})?",
    fullmatch=True,
)

valid_versions = st.one_of(short_versions, full_versions)

invalid_versions = st.text(max_size=20).filter(lambda s: not is_valid(s))

any_strings = st.one_of(valid_versions, st.text(max_size=20))

build_metadata = st.from_regex(r"[!-~]{1,10}", fullmatch=True)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class TestTotalOrder:
    """Algebraic properties of compare."""

    @given(s=any_strings)
    @settings(max_examples=200)
    def test_reflexive(self, s):
        """*For any* string s, compare(s, s) == 0."""
        assert compare(s, s) == 0

    @given(a=any_strings, b=any_strings)
    @settings(max_examples=200)
    def test_antisymmetric(self, a, b):
        """*For any* strings a, b, compare(a, b) == -compare(b, a)."""
        assert compare(a, b) == -compare(b, a)

    @given(a=any_strings, b=any_strings)
    @settings(max_examples=200)
    def test_result_range(self, a, b):
        assert compare(a, b) in (-1, 0, 1)

    @given(versions=st.lists(any_strings, min_size=3, max_size=3))
    @settings(max_examples=200)
    def test_transitive(self, versions):
        """*For any* a <= b <= c, a <= c."""
        a, b, c = sorted(versions, key=version_key)
        assert compare(a, b) <= 0
        assert compare(b, c) <= 0
        assert compare(a, c) <= 0

    @given(invalid=invalid_versions, valid=valid_versions)
    @settings(max_examples=200)
    def test_invalid_dominated(self, invalid, valid):
        """*For any* invalid i and valid v, i < v."""
        assert compare(invalid, valid) == -1
        assert compare(valid, invalid) == 1

    @given(a=invalid_versions, b=invalid_versions)
    @settings(max_examples=100)
    def test_invalid_all_equal(self, a, b):
        assert compare(a, b) == 0

    @given(
        a=st.integers(min_value=0, max_value=10**30),
        b=st.integers(min_value=0, max_value=10**30),
        zeros=st.integers(min_value=0, max_value=3),
    )
    @settings(max_examples=200)
    def test_core_numbers_order_like_integers(self, a, b, zeros):
        """*For any* naturals a, b, cores order numerically, padded or not."""
        padded = "0" * zeros + str(a)
        assert compare(f"1.{padded}.0", f"1.{b}.0") == _sign(a - b)


class TestNormalization:
    """Prefix, metadata and canonical form never change ordering."""

    @given(version=valid_versions)
    @settings(max_examples=200)
    def test_prefix_irrelevant(self, version):
        stripped = version[1:] if version.startswith("v") else version
        assert compare(stripped, "v" + stripped) == 0

    @given(version=full_versions, meta1=build_metadata, meta2=build_metadata)
    @settings(max_examples=200)
    def test_metadata_irrelevant(self, version, meta1, meta2):
        core = version.split("+", 1)[0]
        assert compare(f"{core}+{meta1}", f"{core}+{meta2}") == 0
        assert compare(f"{core}+{meta1}", core) == 0

    @given(version=valid_versions)
    @settings(max_examples=200)
    def test_canonical_idempotent(self, version):
        once = canonical(version)
        assert once
        assert canonical(once) == once

    @given(version=valid_versions)
    @settings(max_examples=200)
    def test_canonical_equivalent(self, version):
        assert compare(version, canonical(version)) == 0

    @given(version=invalid_versions)
    @settings(max_examples=100)
    def test_canonical_invalid_empty(self, version):
        assert canonical(version) == ""

    @given(version=full_versions)
    @settings(max_examples=200)
    def test_prerelease_precedes_release(self, version):
        v = parse(version)
        release = f"{v.major}.{v.minor}.{v.patch}"
        if v.prerelease:
            assert compare(version, release) == -1
        else:
            assert compare(version, release) == 0


class TestHelpersAgreeWithCompare:
    """version_key, max_version, sort_ascending, latest and earliest follow compare."""

    @given(a=any_strings, b=any_strings)
    @settings(max_examples=200)
    def test_version_key_agrees(self, a, b):
        key_a, key_b = version_key(a), version_key(b)
        assert _sign((key_a > key_b) - (key_a < key_b)) == compare(a, b)

    @given(a=any_strings, b=any_strings)
    @settings(max_examples=200)
    def test_max_stable_under_swap(self, a, b):
        """*For any* pair, max(a, b) and max(b, a) are the same version."""
        assert compare(max_version(a, b), max_version(b, a)) == 0
        if compare(a, b) != 0:
            assert max_version(a, b) == max_version(b, a)

    @given(versions=st.lists(any_strings, max_size=10))
    @settings(max_examples=200)
    def test_sort_ascending(self, versions):
        result = sort_ascending(versions)
        assert all(is_valid(v) for v in result)
        assert len(result) == sum(1 for v in versions if is_valid(v))
        for lower, higher in zip(result, result[1:]):
            assert compare(lower, higher) <= 0

    @given(versions=st.lists(any_strings, max_size=10))
    @settings(max_examples=200)
    def test_latest_and_earliest_match_sort(self, versions):
        ordered = sort_ascending(versions)
        if ordered:
            assert compare(latest(versions), ordered[-1]) == 0
            assert compare(earliest(versions), ordered[0]) == 0
        else:
            assert earliest(versions) == ""
            assert latest(versions) == ""
