"""CLI command: knownhosts help — print usage."""

from __future__ import annotations

import click


@click.command("help")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Show usage and exit."""
    parent = ctx.parent if ctx.parent is not None else ctx
    click.echo(parent.get_help())
