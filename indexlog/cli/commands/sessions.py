"""
Native Click implementation of the sessions command.

Usage: indexlog sessions
"""

from __future__ import annotations

import click

from ...core.container import get_container
from ..context import IndexLogContext


@click.command("sessions")
@click.pass_obj
def sessions(ctx: IndexLogContext) -> None:
    """List registered plan sessions."""
    names = get_container().list_plan_sessions()
    if not names:
        click.echo("No plan sessions registered.")
        return

    default = ctx.settings.plans.session
    for name in names:
        marker = " (default)" if name == default else ""
        click.echo(f"{name}{marker}")
