# SPDX-License-Identifier: MIT
"""Relaxed semantic version parsing, normalization and comparison.

This package parses ``[v]MAJOR[.MINOR[.PATCH[-prerelease][+build]]]`` strings
and orders arbitrary strings, malformed ones included, without raising.
Invalid versions sort below every valid version.

Example:
    >>> from verso_version import canonical, compare, sort_ascending
    >>>
    >>> canonical("1.2")
    'v1.2.0'
    >>>
    >>> compare("bad", "0.5.0")
    -1
    >>>
    >>> sort_ascending(["del", "v5.1.0", "5.1.0-beta", "1.2.3"])
    ['1.2.3', '5.1.0-beta', 'v5.1.0']
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    InvalidVersionError,
    VERSION_PATTERN,
    parse,
    parse_version,
    is_valid,
    canonical,
    major,
    minor,
    patch,
    prerelease,
    build,
    major_minor,
)
from .compare import (
    compare,
    version_key,
    max_version,
    min_version,
    sort_ascending,
    sort_descending,
    latest,
    earliest,
)

__all__ = [
    # Parsing
    "Version",
    "InvalidVersionError",
    "VERSION_PATTERN",
    "parse",
    "parse_version",
    "is_valid",
    # Normalization and field access
    "canonical",
    "major",
    "minor",
    "patch",
    "prerelease",
    "build",
    "major_minor",
    # Comparison
    "compare",
    "version_key",
    "max_version",
    "min_version",
    "sort_ascending",
    "sort_descending",
    "latest",
    "earliest",
]
