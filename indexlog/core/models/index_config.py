"""
Index configuration model.

IndexConfig is what a user asks for when creating an index: a name, the
columns to index on and the columns to include. Column names are
compared case-insensitively throughout.
"""

from __future__ import annotations

from pydantic import Field, model_validator

from .base import ImmutableModel


def _lower(columns: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(c.lower() for c in columns)


class IndexConfig(ImmutableModel):
    """Which index to build.

    Equality ignores case everywhere, keeps the order of indexed columns
    (it defines the index key) and ignores the order of included columns.
    """

    index_name: str
    indexed_columns: tuple[str, ...]
    included_columns: tuple[str, ...] = Field(default_factory=tuple)

    def __init__(
        self,
        index_name: str,
        indexed_columns: tuple[str, ...] | list[str],
        included_columns: tuple[str, ...] | list[str] = (),
    ) -> None:
        super().__init__(
            index_name=index_name,
            indexed_columns=tuple(indexed_columns),
            included_columns=tuple(included_columns),
        )

    @model_validator(mode="after")
    def check_columns(self) -> IndexConfig:
        """Reject empty names and any duplicated column."""
        if not self.index_name or not self.indexed_columns:
            raise ValueError("Empty index name or indexed columns are not allowed.")

        indexed = _lower(self.indexed_columns)
        included = _lower(self.included_columns)
        if len(set(indexed)) < len(indexed):
            raise ValueError("Duplicate indexed column names are not allowed.")
        if len(set(included)) < len(included):
            raise ValueError("Duplicate included column names are not allowed.")
        if set(indexed) & set(included):
            raise ValueError("Duplicate column names in indexed/included columns are not allowed.")
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexConfig):
            return NotImplemented
        return (
            self.index_name.lower() == other.index_name.lower()
            and _lower(self.indexed_columns) == _lower(other.indexed_columns)
            and set(_lower(self.included_columns)) == set(_lower(other.included_columns))
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.index_name.lower(),
                _lower(self.indexed_columns),
                frozenset(_lower(self.included_columns)),
            )
        )

    def __str__(self) -> str:
        return (
            f"[indexName: {self.index_name}; "
            f"indexedColumns: {', '.join(self.indexed_columns)}; "
            f"includedColumns: {', '.join(self.included_columns)}]"
        )
