"""
Native Click implementation of the show command.

Usage: indexlog show [--json] <record>
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from ...core.exceptions import ContractViolation, SchemaParseError
from ..context import IndexLogContext
from ..decorators import handle_errors
from ._records import load_entry


@click.command("show")
@click.argument("record", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Re-emit the validated entry as JSON")
@click.pass_obj
@handle_errors
def show(ctx: IndexLogContext, record: Path, as_json: bool) -> None:
    """Summarize an index log entry.

    \b
    Examples:

        indexlog show indexes/idx1/_log/3

        indexlog show --json entry.json
    """
    entry = load_entry(record)

    if as_json:
        click.echo(json.dumps(entry.to_dict(), indent=2))
        return

    click.echo(f"Index:      {entry.name}")
    click.echo(f"Version:    {entry.version}")
    click.echo(f"State:      {entry.state or '-'}{' (active)' if entry.is_active else ''}")
    click.echo(f"Indexed:    {', '.join(entry.indexed_columns)}")
    click.echo(f"Included:   {', '.join(entry.included_columns) or '-'}")
    click.echo(f"Buckets:    {entry.num_buckets}")

    try:
        signature = entry.signature()
        click.echo(f"Signature:  {signature.provider}:{signature.value}")
    except ContractViolation as e:
        click.echo(f"Signature:  invalid ({e})")

    try:
        schema = entry.schema()
        click.echo(f"Schema:     {', '.join(f'{f.name}:{_type_name(f.type)}' for f in schema.fields)}")
    except SchemaParseError as e:
        click.echo(f"Schema:     invalid ({e.message})")

    click.echo(f"Content:    {entry.content.root} ({entry.content.file_count} files)")
    sources = entry.source.data
    click.echo(f"Sources:    {len(sources)} location(s)")
    for data in sources:
        click.echo(f"  {data.content.root} ({data.content.file_count} files)")

    if entry.extra:
        click.echo("Extra:")
        for key, value in sorted(entry.extra.items()):
            click.echo(f"  {key} = {value}")


def _type_name(data_type: object) -> str:
    if isinstance(data_type, str):
        return data_type
    return getattr(data_type, "type", type(data_type).__name__)
