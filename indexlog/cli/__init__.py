"""
Click-based CLI for indexlog.

Usage:
    from indexlog.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.bootstrap import bootstrap
from ..core.exceptions import IndexLogException
from .context import IndexLogContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("indexlog")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="indexlog")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: .indexlog/config.toml found upward from cwd)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """indexlog - inspect and compare index log entries

    \b
    Commands:
        indexlog show <record>           Summarize an index log entry
        indexlog compare <left> <right>  Decide whether two entries are the same index
        indexlog sessions                List available plan sessions
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        ctx.obj = IndexLogContext.create(config_path=config_path)
        bootstrap(config_path=config_path, start_dir=str(ctx.obj.cwd))
    except IndexLogException as e:
        error = click.ClickException(str(e))
        error.exit_code = e.exit_code
        raise error from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "IndexLogContext",
    "__version__",
    "cli",
    "register_commands",
]
