"""
Unit tests for the struct type schema codec.
"""

import json

import pytest

from indexlog.core.exceptions import SchemaParseError
from indexlog.core.models import ArrayType, MapType, StructField, StructType, parse_schema

SPARK_SCHEMA = json.dumps(
    {
        "type": "struct",
        "fields": [
            {"name": "id", "type": "long", "nullable": False, "metadata": {}},
            {"name": "price", "type": "decimal(10,2)", "nullable": True, "metadata": {}},
            {
                "name": "tags",
                "type": {"type": "array", "elementType": "string", "containsNull": True},
                "nullable": True,
                "metadata": {},
            },
            {
                "name": "attrs",
                "type": {
                    "type": "map",
                    "keyType": "string",
                    "valueType": "integer",
                    "valueContainsNull": False,
                },
                "nullable": True,
                "metadata": {"comment": "free-form"},
            },
            {
                "name": "nested",
                "type": {
                    "type": "struct",
                    "fields": [{"name": "x", "type": "double", "nullable": True, "metadata": {}}],
                },
                "nullable": True,
                "metadata": {},
            },
        ],
    }
)


class TestParseSchema:
    def test_spark_shape(self):
        schema = parse_schema(SPARK_SCHEMA)
        assert schema.field_names == ["id", "price", "tags", "attrs", "nested"]
        assert schema["id"].type == "long"
        assert schema["id"].nullable is False
        assert schema["price"].type == "decimal(10,2)"
        assert isinstance(schema["tags"].type, ArrayType)
        assert schema["tags"].type.element_type == "string"
        assert isinstance(schema["attrs"].type, MapType)
        assert schema["attrs"].type.value_contains_null is False
        assert schema["attrs"].metadata == {"comment": "free-form"}
        assert isinstance(schema["nested"].type, StructType)
        assert schema["nested"].type["x"].type == "double"

    def test_defaults(self):
        schema = parse_schema('{"type": "struct", "fields": [{"name": "a", "type": "integer"}]}')
        assert schema["a"].nullable is True
        assert schema["a"].metadata == {}

    def test_round_trip(self):
        schema = parse_schema(SPARK_SCHEMA)
        assert parse_schema(schema.to_json()) == schema

    def test_compact_json(self):
        schema = StructType(fields=(StructField(name="a", type="integer"),))
        assert schema.to_json() == (
            '{"type":"struct","fields":[{"name":"a","type":"integer","nullable":true,"metadata":{}}]}'
        )

    @pytest.mark.parametrize(
        "text",
        [
            "{not json",
            "",
            '"integer"',
            '{"type": "array", "elementType": "string"}',
            '{"type": "struct", "fields": [{"name": "a", "type": "nosuchtype"}]}',
            '{"type": "struct", "fields": [{"type": "integer"}]}',
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(SchemaParseError):
            parse_schema(text)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_schema("{not json")

    def test_long_schema_string_truncated_in_context(self):
        with pytest.raises(SchemaParseError) as exc_info:
            parse_schema("{" + "x" * 200)
        assert len(exc_info.value.context["schema_string"]) == 64


class TestStructType:
    def test_missing_field(self):
        schema = StructType(fields=(StructField(name="a", type="integer"),))
        with pytest.raises(KeyError):
            schema["b"]

    def test_hashable_with_metadata(self):
        a = StructField(name="a", type="integer", metadata={"k": 1, "j": 2})
        b = StructField(name="a", type="integer", metadata={"j": 2, "k": 1})
        assert a == b
        assert hash(a) == hash(b)
