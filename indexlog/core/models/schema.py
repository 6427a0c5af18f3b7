"""
Structured-type schema codec.

An index stores the schema of its output as a JSON string in the shape
Spark writes data types:

    {"type": "struct", "fields": [
        {"name": "a", "type": "integer", "nullable": true, "metadata": {}}
    ]}

Primitive types are plain strings; complex types are objects tagged by
``type``.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Literal, Union

from pydantic import Field, StringConstraints, ValidationError

from ..exceptions import SchemaParseError
from .base import RecordModel

PrimitiveType = Annotated[
    str,
    StringConstraints(
        pattern=(
            r"^(null|boolean|byte|short|integer|long|float|double|string|binary"
            r"|date|timestamp|timestamp_ntz|calendarinterval|void"
            r"|(var)?char\(\d+\)"
            r"|decimal(\(\s*\d+\s*,\s*-?\d+\s*\))?)$"
        )
    ),
]


class ArrayType(RecordModel):
    type: Literal["array"] = "array"
    element_type: DataType = Field(alias="elementType")
    contains_null: bool = Field(default=True, alias="containsNull")


class MapType(RecordModel):
    type: Literal["map"] = "map"
    key_type: DataType = Field(alias="keyType")
    value_type: DataType = Field(alias="valueType")
    value_contains_null: bool = Field(default=True, alias="valueContainsNull")


class StructField(RecordModel):
    name: str
    type: DataType
    nullable: bool = True
    metadata: dict[str, Any] = Field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.name, self.type, self.nullable, json.dumps(self.metadata, sort_keys=True)))


class StructType(RecordModel):
    """An ordered collection of named, typed fields."""

    type: Literal["struct"] = "struct"
    fields: tuple[StructField, ...] = Field(default_factory=tuple)

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def __getitem__(self, name: str) -> StructField:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    def to_json(self) -> str:
        """Serialize to the compact JSON form stored in schemaString."""
        return json.dumps(self.to_dict(), separators=(",", ":"))


DataType = Annotated[
    Union[PrimitiveType, StructType, ArrayType, MapType],
    Field(union_mode="left_to_right"),
]

ArrayType.model_rebuild()
MapType.model_rebuild()
StructField.model_rebuild()
StructType.model_rebuild()


def parse_schema(schema_string: str) -> StructType:
    """
    Parse a serialized schema.

    Args:
        schema_string: JSON produced by StructType.to_json or by Spark

    Returns:
        The parsed struct type

    Raises:
        SchemaParseError: If the text is not JSON or not a struct type
    """
    try:
        return StructType.model_validate_json(schema_string)
    except ValidationError as e:
        raise SchemaParseError(
            f"Invalid struct type schema: {e.error_count()} validation error(s)",
            schema_string=schema_string,
            cause=e,
        ) from e
