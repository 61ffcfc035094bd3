"""CLI command: knownhosts tui — interactive browser."""

from __future__ import annotations

import sys

import click

from knownhosts.cli.common import console, resolve_hosts_file
from knownhosts.tui import TuiApp


@click.command()
@click.pass_context
def tui(ctx: click.Context) -> None:
    """Browse, search and delete known hosts interactively."""
    path = resolve_hosts_file(ctx)

    if not sys.stdin.isatty():
        console.print("[red]The TUI needs an interactive terminal.[/red]")
        ctx.exit(1)

    app = TuiApp(ctx.obj["config"], path)
    app.run()
