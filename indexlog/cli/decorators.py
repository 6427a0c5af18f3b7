"""
Click decorators for indexlog CLI commands.

- handle_errors: Reports IndexLogException as a CLI error with the
  exception's exit code
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import IndexLogException

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator turning library errors into CLI errors.

    Usage:
        @click.command()
        @click.pass_obj
        @handle_errors
        def show(ctx: IndexLogContext, record: Path):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except IndexLogException as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(e.exit_code) from e

    return wrapper  # type: ignore[return-value]
