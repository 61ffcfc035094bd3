"""CLI command: knownhosts ls — list every entry."""

from __future__ import annotations

import click

from knownhosts.cli.common import load_lines, print_hosts


@click.command()
@click.pass_context
def ls(ctx: click.Context) -> None:
    """List all known hosts."""
    _path, lines = load_lines(ctx)
    print_hosts(lines)
