# SPDX-License-Identifier: MIT
"""CLI entry point for verso command."""

from __future__ import annotations

import sys

import click

from . import __version__


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="verso")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic version inspection tool.

    Validate, normalize, compare and sort version strings such as
    v1.2.3-beta+build. Malformed versions are never ranked above valid ones.

    \b
    Examples:
        verso check v1.2.3 1.2
        verso canonical 1.2
        verso compare 1.0.1-beta 1.0.1
        verso sort 5.0.0 v5.1.0 5.1.0-beta
        git tag | verso max -f -
    """
    ctx.verbose = verbose


# Import and register commands
from .commands import check, compare, show, sort

cli.add_command(check.check)
cli.add_command(show.canonical)
cli.add_command(show.show)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(sort.max_)
cli.add_command(sort.min_)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
