# SPDX-License-Identifier: MIT
"""Show the canonical form and fields of a version."""

from __future__ import annotations

import json

import click

from verso_version import parse

from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("version")
def canonical(version: str) -> None:
    """Print the canonical vMAJOR.MINOR.PATCH[-prerelease] form of VERSION.

    Build metadata is dropped and missing components are filled with 0.

    \b
    Examples:
        verso canonical 1.2               # v1.2.0
        verso canonical v1.2.3-rc.1+abc   # v1.2.3-rc.1
    """
    parsed = parse(version)
    if parsed is None:
        echo_error(f"Invalid version: {version}")
        raise SystemExit(1)
    echo_info(str(parsed))


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print fields as a JSON object.",
)
@pass_context
def show(ctx: Context, version: str, as_json: bool) -> None:
    """Print the major, minor, patch, prerelease and build fields of VERSION.

    \b
    Examples:
        verso show v1.2.3-beta+exp
        verso show --json 1.2
    """
    parsed = parse(version)
    if parsed is None:
        echo_error(f"Invalid version: {version}")
        raise SystemExit(1)

    fields = {
        "major": str(parsed.major),
        "minor": str(parsed.minor),
        "patch": str(parsed.patch),
        "prerelease": parsed.prerelease,
        "build": parsed.build,
    }
    if ctx.verbose:
        fields["canonical"] = str(parsed)

    if as_json:
        echo_info(json.dumps(fields, indent=2))
        return

    for name, value in fields.items():
        echo_info(f"{name}: {value}")
