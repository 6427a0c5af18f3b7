"""Helpers shared by commands that read index log entries from disk."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from ...core.models.index_log_entry import IndexLogEntry


class RecordLoadError(click.ClickException):
    """A record file is unreadable or not a valid index log entry."""

    exit_code = 4


def load_entry(path: Path) -> IndexLogEntry:
    """Read and validate a JSON-encoded index log entry.

    Raises:
        RecordLoadError: If the file is unreadable or not a valid entry
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RecordLoadError(f"Cannot read {path}: {e}") from e

    try:
        return IndexLogEntry.model_validate_json(text)
    except ValidationError as e:
        raise RecordLoadError(
            f"{path} is not a valid index log entry ({e.error_count()} error(s)):\n{e}"
        ) from e
