"""Helpers shared by the CLI commands: argument checks, loading, tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from knownhosts.config import KnownHostsConfig
from knownhosts.errors import InvalidFormat, ReadFailure
from knownhosts.hosts import store
from knownhosts.hosts.parser import parse_record

logger = logging.getLogger(__name__)

console = Console(stderr=True)
out = Console()

MAX_HOST_LENGTH = 1024


def validate_host(host: str) -> None:
    """Reject host patterns that are empty, multi-line or oversized."""
    if not host:
        raise ValueError("host must not be empty")
    if "\r" in host or "\n" in host:
        raise ValueError("host must not contain line breaks")
    if len(host) > MAX_HOST_LENGTH:
        raise ValueError(f"host is too long (max {MAX_HOST_LENGTH} characters)")


def host_argument(ctx: click.Context, param: click.Parameter, value: str) -> str:
    """Click callback wrapping :func:`validate_host`."""
    try:
        validate_host(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e
    return value


def resolve_hosts_file(ctx: click.Context) -> Path:
    """Return the configured hosts file, exiting quietly if there is none."""
    config: KnownHostsConfig = ctx.obj["config"]
    path = config.hosts_file
    if path is None:
        logger.debug("No known_hosts location; nothing to do")
        ctx.exit(0)
    if not store.exists(path):
        logger.debug("%s does not exist; nothing to do", path)
        ctx.exit(0)
    return path


def load_lines(ctx: click.Context) -> tuple[Path, list[str]]:
    """Load the hosts file for a command, exiting 1 on read failure."""
    path = resolve_hosts_file(ctx)
    try:
        return path, store.load(path)
    except ReadFailure as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        ctx.exit(1)


def print_hosts(lines: Iterable[str]) -> None:
    """Print lines as a Name / IP / Type table, skipping unparseable ones."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Name", no_wrap=True)
    table.add_column("IP", no_wrap=True)
    table.add_column("Type", no_wrap=True)

    for line in lines:
        if not line:
            continue
        try:
            record = parse_record(line)
        except InvalidFormat as e:
            logger.warning("Skipping line: %s", e)
            console.print(
                f"[yellow]Skipping {escape(str(e))}[/yellow]", highlight=False
            )
            continue
        fields = (record.name, record.address, record.key_type)
        table.add_row(*(escape(store.printable(f)) for f in fields))

    out.print("Current known hosts:")
    out.print(table)
