"""
Native Click implementation of the compare command.

Usage: indexlog compare [--session NAME] <left> <right>
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.container import get_container
from ...services.comparison import Outcome, compare_entries
from ..context import IndexLogContext
from ..decorators import handle_errors
from ._records import load_entry

_MARKS = {
    Outcome.EQUAL: "=",
    Outcome.DIFFERENT: "x",
    Outcome.UNRESOLVED: "?",
}


@click.command("compare")
@click.argument("left", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("right", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--session",
    "-s",
    "session_name",
    default=None,
    help="Plan session used to compare raw plans (default: plans.session from config)",
)
@click.pass_obj
@handle_errors
def compare(ctx: IndexLogContext, left: Path, right: Path, session_name: str | None) -> None:
    """Decide whether two index log entries describe the same index.

    Exits 0 when they do and 1 when they do not. Failures use other
    codes: 2 for plan errors (for example a missing session), 3 for a
    broken record, 4 for an unreadable file and 6 for an unknown session.
    Entries carrying raw plans need a plan session; see `indexlog sessions`.

    \b
    Examples:

        indexlog compare old.json new.json

        indexlog compare --session json old.json new.json
    """
    name = session_name or ctx.settings.plans.session
    session = get_container().get_plan_session(name) if name else None

    report = compare_entries(load_entry(left), load_entry(right), session)

    click.echo(f"{report.left_name} vs {report.right_name}")
    for c in report.components:
        line = f"  [{_MARKS[Outcome(c.outcome)]}] {c.component}"
        if c.outcome == Outcome.DIFFERENT and (c.left or c.right):
            line += f": {c.left} != {c.right}"
        click.echo(line)

    if report.equal:
        click.echo("Same index.")
        return
    click.echo("Different indexes.")
    raise SystemExit(1)
