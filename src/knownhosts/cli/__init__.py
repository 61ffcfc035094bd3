"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from knownhosts import __version__
from knownhosts.config import KnownHostsConfig


class KnownHostsGroup(click.Group):
    """Click group whose usage errors exit with status 1."""

    def make_context(self, info_name, args, parent=None, **extra):  # type: ignore[no-untyped-def]
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise

    def invoke(self, ctx: click.Context):  # type: ignore[no-untyped-def]
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


@click.group(cls=KnownHostsGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="knownhosts")
@click.option(
    "--file",
    "-f",
    "hosts_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="known_hosts file to operate on (default: ~/.ssh/known_hosts).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(ctx: click.Context, hosts_file: str | None, verbose: bool) -> None:
    """knownhosts — list, search and remove entries in your SSH known_hosts."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = KnownHostsConfig.load(hosts_file)
    config.verbose = verbose
    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(1)


def _register_commands() -> None:
    from knownhosts.cli.ls import ls  # noqa: F811
    from knownhosts.cli.rm import rm  # noqa: F811
    from knownhosts.cli.search import search  # noqa: F811
    from knownhosts.cli.tui import tui  # noqa: F811
    from knownhosts.cli.usage import help_command  # noqa: F811

    main.add_command(ls)
    main.add_command(search)
    main.add_command(rm)
    main.add_command(tui)
    main.add_command(help_command)


_register_commands()
