"""
Index log entry: the versioned catalog record of one index.

An entry ties together the index's derived dataset, where the index data
lives, the source (plan and data) it was built from, free-form extras and
the lifecycle state the action layer last wrote.

Two entries are "the same index" when their config, canonical signature,
bucket count, output root, source and state agree. Only the output root
takes part, not the output file listing, so listing drift under one root
does not make an index look different.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Any, ClassVar, Literal

from pydantic import Field, ValidationError, field_validator

from ...constants import States
from ...services.plan_serde import deserialize_plan
from ..exceptions import ContractViolation
from ..interfaces.plan import IPlanHandle, IPlanSession
from .base import FrozenStrMap, RecordModel, empty_map
from .content import Content
from .covering_index import CoveringIndex
from .fingerprint import Signature
from .index_config import IndexConfig
from .schema import StructType, parse_schema
from .source import Source


def _now_millis() -> int:
    return int(time.time() * 1000)


def _state_tag(v: Any) -> Any:
    if isinstance(v, Enum):
        return v.value
    return v


class IndexLogEntry(RecordModel):
    """Catalog record of one covering index.

    ``id``, ``timestamp`` and ``enabled`` belong to the log envelope and
    never take part in equality or hashing.
    """

    VERSION: ClassVar[str] = "0.1"

    name: str
    derived_dataset: CoveringIndex = Field(alias="derivedDataset")
    content: Content
    source: Source
    extra: FrozenStrMap = Field(default_factory=empty_map)
    state: str = ""
    version: Literal["0.1"] = "0.1"
    id: int = Field(default=0, ge=0)
    timestamp: int = Field(default_factory=_now_millis)
    enabled: bool = True

    @field_validator("state", mode="before")
    @classmethod
    def state_value(cls, v: Any) -> Any:
        """Store lifecycle enums as their plain tag."""
        return _state_tag(v)

    @staticmethod
    def schema_string(schema: StructType) -> str:
        """Serialize a schema the way entries store it."""
        return schema.to_json()

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def schema(self) -> StructType:  # type: ignore[override]
        """Parse the stored schema.

        Raises:
            SchemaParseError: If schemaString is malformed
        """
        return parse_schema(self.derived_dataset.properties.schema_string)

    @property
    def is_active(self) -> bool:
        return self.state == States.ACTIVE.value

    @property
    def indexed_columns(self) -> tuple[str, ...]:
        return self.derived_dataset.properties.columns.indexed

    @property
    def included_columns(self) -> tuple[str, ...]:
        return self.derived_dataset.properties.columns.included

    @property
    def num_buckets(self) -> int:
        return self.derived_dataset.properties.num_buckets

    @property
    def config(self) -> IndexConfig:
        """The index config the stored columns describe.

        Records load without checking their columns, so a record with no
        indexed columns or with a column listed twice only fails here.
        Equality and hashing go through this property.

        Raises:
            ContractViolation: If name and columns do not form a valid IndexConfig
        """
        try:
            return IndexConfig(self.name, self.indexed_columns, self.included_columns)
        except ValidationError as e:
            raise ContractViolation(
                f"Index columns do not form a valid index config: {e.errors()[0]['msg']}",
                context={
                    "index": self.name,
                    "indexed": list(self.indexed_columns),
                    "included": list(self.included_columns),
                },
                cause=e,
            ) from e

    def resolved_plan(self, session: IPlanSession | None) -> IPlanHandle:
        """Deserialize the source plan with the given session.

        Raises:
            MissingContextError: If session is None
            DeserializationError: If the raw plan cannot be parsed
        """
        return deserialize_plan(self.source.plan.raw_plan, session)

    def signature(self) -> Signature:
        """Return the one signature of the source plan fingerprint.

        Equality relies on a single canonical signature, so anything else
        is a broken record.

        Raises:
            ContractViolation: If the fingerprint holds zero or several signatures
        """
        signatures = self.source.plan.fingerprint.signatures
        if len(signatures) != 1:
            raise ContractViolation(
                "Expected exactly one source plan signature.",
                context={"index": self.name, "signatures": len(signatures)},
            )
        return signatures[0]

    def with_state(self, state: str | States) -> IndexLogEntry:
        """Return a copy carrying a new lifecycle state."""
        return self.model_copy(update={"state": _state_tag(state)})

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def equivalent(self, other: IndexLogEntry, session: IPlanSession | None = None) -> bool:
        """
        Whether both entries describe the same index.

        Components are checked in order and the first mismatch wins, so a
        session is only needed once everything before the source agrees.

        Raises:
            ContractViolation: If either entry has an invalid config or not exactly one signature
            MissingContextError: If raw plans must be compared and session is None
            DeserializationError: If a raw plan cannot be parsed
        """
        return (
            self.config == other.config
            and self.signature() == other.signature()
            and self.num_buckets == other.num_buckets
            and self.content.root == other.content.root
            and self.source.equivalent(other.source, session)
            and self.state == other.state
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexLogEntry):
            return NotImplemented
        return self.equivalent(other)

    def __hash__(self) -> int:
        # content.root, not content: equal entries may differ in file listing
        return hash((self.config, self.signature(), self.num_buckets, self.content.root))
