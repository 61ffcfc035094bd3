"""CLI command: knownhosts rm <PATTERN> — remove matching entries."""

from __future__ import annotations

import click
from rich.markup import escape

from knownhosts.cli.common import console, host_argument, load_lines, out
from knownhosts.errors import WriteFailure
from knownhosts.hosts import matcher, store


@click.command()
@click.argument("pattern", callback=host_argument)
@click.pass_context
def rm(ctx: click.Context, pattern: str) -> None:
    """Remove every known host whose name or address contains PATTERN."""
    path, lines = load_lines(ctx)
    kept = matcher.delete(lines, pattern)

    if len(kept) == len(lines):
        console.print(
            f"[dim]No matching hosts found for[/dim] {escape(pattern)}",
            highlight=False,
        )
        return

    remaining = set(kept)
    for line in lines:
        if line not in remaining:
            out.print(
                "Removing host: "
                f"[cyan]{escape(store.printable(matcher.host_part(line)))}[/cyan]",
                highlight=False,
            )

    try:
        store.save(path, kept)
    except WriteFailure as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        ctx.exit(1)

    removed = len(lines) - len(kept)
    console.print(f"[green]Removed {removed} host(s) from {path}[/green]")
