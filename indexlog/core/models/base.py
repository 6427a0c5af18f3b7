"""
Base Pydantic models for indexlog.

Provides common configuration and base classes for all indexlog models.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer


def _freeze(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


def _thaw(value: Mapping[str, str]) -> dict[str, str]:
    return dict(value)


# String map held read-only on frozen records; dumps as a plain dict.
FrozenStrMap = Annotated[
    Mapping[str, str],
    AfterValidator(_freeze),
    PlainSerializer(_thaw, return_type=dict[str, str]),
]


def empty_map() -> Mapping[str, str]:
    """Default factory for FrozenStrMap fields."""
    return MappingProxyType({})


class IndexLogBaseModel(BaseModel):
    """Base model for all indexlog Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
        - use_enum_values: Serialize enums as values
        - revalidate_instances: Trust model instances (performance)
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class ImmutableModel(IndexLogBaseModel):
    """Immutable base model for DTOs that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class RecordModel(ImmutableModel):
    """Immutable base for the persisted record shape.

    Strict mode is relaxed so decoded JSON arrays validate into the tuple
    fields records use. Field names follow the persisted camelCase shape
    through aliases; Python code uses the snake_case names.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=False,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to the persisted (aliased) shape."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any:
        """Validate an instance from the persisted (aliased) shape."""
        return cls.model_validate(data)
