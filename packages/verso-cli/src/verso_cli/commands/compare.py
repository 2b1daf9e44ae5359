# SPDX-License-Identifier: MIT
"""Compare two version strings."""

from __future__ import annotations

import click

from verso_version import compare as compare_versions
from verso_version import is_valid

from ..main import echo_info, echo_warning, pass_context, Context


@click.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower than, equal to or higher than VERSION2.

    Invalid versions are lower than every valid version and equal to each other.

    \b
    Examples:
        verso compare 1.0.1-beta 1.0.1   # -1
        verso compare v1 1.0.0+build     # 0
        verso compare 0.5.0 bad          # 1
    """
    if ctx.verbose:
        for version in (version1, version2):
            if not is_valid(version):
                echo_warning(f"'{version}' is not a valid version; it sorts lowest")

    echo_info(str(compare_versions(version1, version2)))
