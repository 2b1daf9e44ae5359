# SPDX-License-Identifier: MIT
"""Validate version strings."""

from __future__ import annotations

import click

from verso_version import canonical, is_valid

from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Print nothing; only set the exit status.",
)
@pass_context
def check(ctx: Context, versions: tuple[str, ...], quiet: bool) -> None:
    """Check that each VERSION is a valid version string.

    Exits with status 1 if any VERSION is invalid.

    \b
    Examples:
        verso check v1.2.3          # valid
        verso check v1.2-pre        # invalid: suffix needs a full core
        verso check -q "$TAG"       # exit status only
    """
    invalid = 0
    for version in versions:
        if is_valid(version):
            if not quiet:
                if ctx.verbose:
                    echo_info(f"{version}: valid ({canonical(version)})")
                else:
                    echo_info(f"{version}: valid")
        else:
            invalid += 1
            if not quiet:
                echo_info(f"{version}: invalid")

    if invalid:
        if not quiet and len(versions) > 1:
            echo_error(f"{invalid} of {len(versions)} versions are invalid")
        raise SystemExit(1)
