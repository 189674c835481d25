"""Tests for JsonSchemaAdapter."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any

import pytest

from promptschema.adapters import JsonSchemaAdapter, SchemaAdapter


@pytest.fixture
def adapter() -> JsonSchemaAdapter:
    return JsonSchemaAdapter()


class TestJsonSchemaAdapter:
    @pytest.mark.parametrize(
        "value",
        [
            {"type": "string"},
            {"properties": {}},
            {"items": {}},
            {"oneOf": []},
            {"anyOf": []},
            {"allOf": []},
            {"$schema": "https://json-schema.org/draft/2020-12/schema"},
            {"$ref": "#/$defs/X"},
        ],
    )
    def test_accepts_schema_keywords(self, adapter: JsonSchemaAdapter, value: dict[str, Any]) -> None:
        assert adapter.can_handle(value)

    @pytest.mark.parametrize("value", [{}, {"title": "x"}, "type", ["type"], None])
    def test_rejects_non_schemas(self, adapter: JsonSchemaAdapter, value: Any) -> None:
        assert not adapter.can_handle(value)

    def test_accepts_any_mapping(self, adapter: JsonSchemaAdapter) -> None:
        assert adapter.can_handle(OrderedDict(type="string"))

    def test_passthrough(self, adapter: JsonSchemaAdapter) -> None:
        schema = {"type": "object", "properties": {"a": {"type": "string"}}}
        result = adapter.to_json_schema(schema)
        assert result == schema
        assert type(result) is dict

    def test_protocol_conformance(self, adapter: JsonSchemaAdapter) -> None:
        assert isinstance(adapter, SchemaAdapter)
        assert adapter.name == "json-schema"
