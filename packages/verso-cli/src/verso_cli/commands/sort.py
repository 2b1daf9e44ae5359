# SPDX-License-Identifier: MIT
"""Sort and select from lists of version strings."""

from __future__ import annotations

from typing import IO, Optional

import click

from verso_version import earliest, is_valid, latest, sort_ascending, sort_descending

from ..main import echo_error, echo_info, echo_warning, pass_context, Context

_file_option = click.option(
    "--file",
    "-f",
    "file",
    type=click.File("r"),
    help="Read additional versions from FILE, one per line ('-' for stdin).",
)


def _collect_versions(
    ctx: Context, versions: tuple[str, ...], file: Optional[IO[str]]
) -> list[str]:
    """Gather versions from arguments and an optional file.

    Blank lines are ignored and surrounding whitespace is stripped from file
    lines. Invalid entries are reported when running verbose.
    """
    collected = list(versions)
    if file is not None:
        collected.extend(line.strip() for line in file if line.strip())

    if ctx.verbose:
        for version in collected:
            if not is_valid(version):
                echo_warning(f"Skipping invalid version: {version}")

    return collected


@click.command()
@click.argument("versions", nargs=-1)
@_file_option
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort highest first.",
)
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    file: Optional[IO[str]],
    reverse: bool,
) -> None:
    """Print the valid VERSIONS sorted lowest first, one per line.

    Invalid versions are dropped. Versions that compare equal keep their
    input order.

    \b
    Examples:
        verso sort 5.0.0 v5.1.0 5.1.0-beta 1.2.3
        git tag | verso sort -r -f -
    """
    collected = _collect_versions(ctx, versions, file)
    ordered = sort_descending(collected) if reverse else sort_ascending(collected)
    for version in ordered:
        echo_info(version)


def _select(ctx: Context, versions: tuple[str, ...], file: Optional[IO[str]], highest: bool) -> None:
    collected = _collect_versions(ctx, versions, file)
    selected = latest(collected) if highest else earliest(collected)

    if not selected:
        echo_error("No valid versions given")
        raise SystemExit(1)
    echo_info(selected)


@click.command(name="max")
@click.argument("versions", nargs=-1)
@_file_option
@pass_context
def max_(ctx: Context, versions: tuple[str, ...], file: Optional[IO[str]]) -> None:
    """Print the highest valid version among VERSIONS.

    Exits with status 1 if none is valid.

    \b
    Examples:
        verso max 1.3.4 1.2.3             # 1.3.4
        git tag | verso max -f -
    """
    _select(ctx, versions, file, highest=True)


@click.command(name="min")
@click.argument("versions", nargs=-1)
@_file_option
@pass_context
def min_(ctx: Context, versions: tuple[str, ...], file: Optional[IO[str]]) -> None:
    """Print the lowest valid version among VERSIONS.

    Exits with status 1 if none is valid.
    """
    _select(ctx, versions, file, highest=False)
