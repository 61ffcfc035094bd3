"""CLI command: knownhosts search <PATTERN> — list matching entries."""

from __future__ import annotations

import logging

import click

from knownhosts.cli.common import host_argument, load_lines, print_hosts
from knownhosts.hosts import matcher

logger = logging.getLogger(__name__)


@click.command()
@click.argument("pattern", callback=host_argument)
@click.pass_context
def search(ctx: click.Context, pattern: str) -> None:
    """List known hosts whose name or address contains PATTERN."""
    _path, lines = load_lines(ctx)
    found = matcher.search(lines, pattern)
    logger.debug("%d of %d line(s) match %r", len(found), len(lines), pattern)
    print_hosts(found)
