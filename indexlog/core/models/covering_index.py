"""
Covering index models.

Describes the derived dataset an index materializes: which columns it is
keyed on, which it carries along, its schema and its bucketing.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import RecordModel


class Columns(RecordModel):
    """Indexed and included column names, each in declaration order."""

    indexed: tuple[str, ...]
    included: tuple[str, ...] = Field(default_factory=tuple)


class CoveringIndexProperties(RecordModel):
    columns: Columns
    schema_string: str = Field(alias="schemaString", description="JSON struct type")
    num_buckets: int = Field(gt=0, alias="numBuckets")


class CoveringIndex(RecordModel):
    """Derived dataset of kind CoveringIndex."""

    kind: Literal["CoveringIndex"] = "CoveringIndex"
    properties: CoveringIndexProperties
