# SPDX-License-Identifier: MIT
"""Total ordering over version strings, valid or not.

Invalid strings compare equal to each other and below every valid version.
Pre-release text is compared as a whole, ordinally: beta < beta1 < beta2.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .semver import Version, parse

VersionLike = Union[str, Version, None]


def _as_version(version: VersionLike) -> Optional[Version]:
    if isinstance(version, Version):
        return version
    return parse(version)


def _number_key(digits: str) -> tuple[int, str]:
    # Digit strings carry no leading zeros, so longer means larger
    return (len(digits), digits)


def _compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings ("" meaning no pre-release).

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if pre1 == pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release
    return -1 if pre1 < pre2 else 1


def compare(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string, Version object or None)
        version2: Second version (string, Version object or None)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Never raises for malformed input: an invalid version is lower than any
    valid one, and two invalid versions are equal.

    Examples:
        >>> compare("1.0.0", "v1")
        0
        >>> compare("bad", "0.5.0")
        -1
        >>> compare("1.0.1-beta", "1.0.1")
        -1
        >>> compare("v1.0.0+metadata-dash", "v1.0.0+metadata-dash1")
        0
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    if v1 is None or v2 is None:
        if v1 is None and v2 is None:
            return 0
        return -1 if v1 is None else 1

    for attr in ("major", "minor", "patch"):
        val1 = _number_key(getattr(v1, attr))
        val2 = _number_key(getattr(v2, attr))
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: VersionLike) -> tuple:
    """Return a sort key that orders exactly like :func:`compare`.

    Examples:
        >>> sorted(["1.0.0", "bad", "1.0.0-alpha"], key=version_key)
        ['bad', '1.0.0-alpha', '1.0.0']
    """
    v = _as_version(version)
    if v is None:
        return (0,)

    # Releases sort after any pre-release of the same core
    if v.prerelease:
        prerelease_key: tuple = (0, v.prerelease)
    else:
        prerelease_key = (1,)

    return (
        1,
        _number_key(v.major),
        _number_key(v.minor),
        _number_key(v.patch),
        prerelease_key,
    )


def max_version(version1: str, version2: str) -> str:
    """Return whichever version is higher; version1 on a tie."""
    if compare(version1, version2) < 0:
        return version2
    return version1


def min_version(version1: str, version2: str) -> str:
    """Return whichever version is lower; version1 on a tie."""
    if compare(version1, version2) > 0:
        return version2
    return version1


def sort_ascending(versions: Iterable[str]) -> list[str]:
    """Return the valid versions sorted lowest first.

    Invalid entries are dropped. Entries that compare equal keep their
    input order.

    Examples:
        >>> sort_ascending(["z", "5.0.0", "v5.1.0", "5.1.0-beta", "1.2.3"])
        ['1.2.3', '5.0.0', '5.1.0-beta', 'v5.1.0']
    """
    return sorted((v for v in versions if parse(v) is not None), key=version_key)


def sort_descending(versions: Iterable[str]) -> list[str]:
    """Return the valid versions sorted highest first.

    Invalid entries are dropped. Entries that compare equal keep their
    input order.
    """
    return sorted(
        (v for v in versions if parse(v) is not None),
        key=version_key,
        reverse=True,
    )


def latest(versions: Iterable[str]) -> str:
    """Return the highest valid version, or "" if none is valid.

    The first of several equal-comparing maxima wins.
    """
    best = ""
    for version in versions:
        if parse(version) is None:
            continue
        best = max_version(best, version) if best else version
    return best


def earliest(versions: Iterable[str]) -> str:
    """Return the lowest valid version, or "" if none is valid.

    The first of several equal-comparing minima wins.
    """
    best = ""
    for version in versions:
        if parse(version) is None:
            continue
        best = min_version(best, version) if best else version
    return best
