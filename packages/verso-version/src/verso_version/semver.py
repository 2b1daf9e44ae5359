# SPDX-License-Identifier: MIT
"""Relaxed semantic version parsing.

Accepts an optional lowercase ``v`` prefix and a one, two or three part
numeric core. Pre-release and build metadata suffixes are only recognised
after a full MAJOR.MINOR.PATCH core:

- Short cores: v1, 1.2
- Pre-release: -alpha, -beta.2, -rc.1, -456-789
- Build metadata: +build, +meta-pre, +20240101
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

# Whole-string match; ASCII digits only
VERSION_PATTERN = re.compile(
    r"v?(?P<major>[0-9]+)"
    r"(?:\.(?P<minor>[0-9]+)"
    r"(?:\.(?P<patch>[0-9]+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>.+))?"
    r")?)?",
    re.ASCII | re.DOTALL,
)


class InvalidVersionError(Exception):
    """Raised by :func:`parse_version` when a string is not a valid version."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed version.

    Attributes:
        major: Major version number as a decimal string without leading zeros
        minor: Minor version number, "0" when omitted
        patch: Patch version number, "0" when omitted
        prerelease: Pre-release text without the leading dash, "" if absent
        build: Build metadata without the leading plus, "" if absent
    """

    major: str
    minor: str = "0"
    patch: str = "0"
    prerelease: str = ""
    build: str = ""

    def __str__(self) -> str:
        """Return the canonical form (build metadata is dropped)."""
        version = f"v{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        return version

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        """Dot-separated pre-release identifiers, empty when not a pre-release."""
        if not self.prerelease:
            return ()
        return tuple(self.prerelease.split("."))

    @property
    def base_version(self) -> str:
        """Return the core version without pre-release or build metadata."""
        return f"v{self.major}.{self.minor}.{self.patch}"


def _normalize_number(digits: str) -> str:
    # Kept as text: int() rejects very long digit strings
    return digits.lstrip("0") or "0"


def parse(version_string: Any) -> Optional[Version]:
    """Parse a version string, returning None when it is not valid.

    Malformed input is expected here (tags, filenames, user input), so this
    never raises. Non-string values are treated as invalid.

    Examples:
        >>> parse("v1.2")
        Version(major='1', minor='2', patch='0', prerelease='', build='')

        >>> parse("1.2.3-pre+meta")
        Version(major='1', minor='2', patch='3', prerelease='pre', build='meta')

        >>> parse("v1.2-pre") is None
        True
    """
    if not isinstance(version_string, str):
        return None

    match = VERSION_PATTERN.fullmatch(version_string)
    if not match:
        return None

    return Version(
        major=_normalize_number(match.group("major")),
        minor=_normalize_number(match.group("minor") or "0"),
        patch=_normalize_number(match.group("patch") or "0"),
        prerelease=match.group("prerelease") or "",
        build=match.group("build") or "",
    )


def parse_version(version_string: Any) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form
            [v]MAJOR[.MINOR[.PATCH[-prerelease][+build]]]

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string is not a valid version
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            version_string, f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    version = parse(version_string)
    if version is None:
        raise InvalidVersionError(version_string)
    return version


def is_valid(version_string: Any) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid("v1")
        True
        >>> is_valid("v1.2+meta")
        False
        >>> is_valid("1.2.3-456-789")
        True
    """
    return parse(version_string) is not None


def canonical(version_string: Any) -> str:
    """Return the canonical vMAJOR.MINOR.PATCH[-prerelease] form, or "" if invalid.

    Examples:
        >>> canonical("1.2")
        'v1.2.0'
        >>> canonical("v1.2.3-pre+meta")
        'v1.2.3-pre'
    """
    version = parse(version_string)
    if version is None:
        return ""
    return str(version)


def major(version_string: Any) -> str:
    version = parse(version_string)
    return "" if version is None else version.major


def minor(version_string: Any) -> str:
    version = parse(version_string)
    return "" if version is None else version.minor


def patch(version_string: Any) -> str:
    version = parse(version_string)
    return "" if version is None else version.patch


def prerelease(version_string: Any) -> str:
    """Return the pre-release text, "" if absent or if the version is invalid."""
    version = parse(version_string)
    return "" if version is None else version.prerelease


def build(version_string: Any) -> str:
    """Return the build metadata, "" if absent or if the version is invalid."""
    version = parse(version_string)
    return "" if version is None else version.build


def major_minor(version_string: Any) -> str:
    """Return the vMAJOR.MINOR release line, or "" if invalid.

    Examples:
        >>> major_minor("1.2.3-rc.1")
        'v1.2'
        >>> major_minor("v3")
        'v3.0'
    """
    version = parse(version_string)
    if version is None:
        return ""
    return f"v{version.major}.{version.minor}"
