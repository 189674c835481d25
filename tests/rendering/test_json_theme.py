"""Tests for the JSON theme."""

from __future__ import annotations

import json
from typing import Any

import pytest

from promptschema.extraction import ExtractOptions, SchemaModel, extract_model
from promptschema.rendering import JsonTheme, RenderOptions


@pytest.fixture
def theme() -> JsonTheme:
    return JsonTheme()


def fields_of(theme: JsonTheme, schema: dict[str, Any], options: ExtractOptions | None = None) -> list[Any]:
    return json.loads(theme.render(extract_model(schema, options)))["schema"]["fields"]


class TestJsonTheme:
    def test_empty_model_compact(self, theme: JsonTheme) -> None:
        assert theme.render(SchemaModel(), RenderOptions(indent_size=0)) == '{"schema":{"fields":[],"metadata":{}}}'

    def test_indented_by_default(self, theme: JsonTheme) -> None:
        assert theme.render(SchemaModel()).startswith('{\n  "schema": {')

    def test_scalar_fields(self, theme: JsonTheme) -> None:
        schema = {
            "type": "object",
            "title": "User",
            "properties": {
                "name": {"type": "string", "minLength": 1, "description": "Full name"},
                "nick": {"type": ["string", "null"]},
            },
            "required": ["name"],
        }
        output = json.loads(theme.render(extract_model(schema)))
        assert output == {
            "schema": {
                "fields": [
                    {
                        "name": "name",
                        "type": "string",
                        "required": True,
                        "description": "Full name",
                        "constraints": {"minLength": 1},
                    },
                    {"name": "nick", "type": "string", "required": False, "nullable": True},
                ],
                "metadata": {"title": "User"},
            }
        }

    def test_enum_and_const(self, theme: JsonTheme) -> None:
        schema = {"type": "object", "properties": {"kind": {"const": "a"}, "size": {"enum": ["S", "M"]}}}
        kind, size = fields_of(theme, schema)
        assert kind == {"name": "kind", "type": "const", "required": False, "enum": ["a"]}
        assert size == {"name": "size", "type": "enum", "required": False, "enum": ["S", "M"]}

    def test_examples(self, theme: JsonTheme) -> None:
        schema = {"type": "object", "properties": {"x": {"type": "integer", "examples": [1], "badExamples": [-1]}}}
        (field,) = fields_of(theme, schema)
        assert field["examples"] == [{"value": 1, "isCorrect": True}, {"value": -1, "isCorrect": False}]

    def test_object_array_tuple_record(self, theme: JsonTheme) -> None:
        schema = {
            "type": "object",
            "properties": {
                "user": {"type": "object", "properties": {"id": {"type": "integer"}}},
                "tags": {"type": "array", "items": {"type": "string"}},
                "pair": {"type": "array", "items": [{"type": "string"}, {"type": "number"}]},
                "scores": {"type": "object", "additionalProperties": {"type": "number"}},
                "when": {"type": "string", "format": "date-time"},
            },
        }
        user, tags, pair, scores, when = fields_of(theme, schema)
        assert user["properties"] == {"id": {"name": "id", "type": "integer", "required": False}}
        assert tags["items"] == {"type": "string"}
        assert pair["type"] == "array"
        assert pair["items"] == [{"type": "string"}, {"type": "number"}]
        assert scores["type"] == "object"
        assert scores["additionalProperties"] == {"type": "number"}
        assert when["type"] == "string"

    def test_plain_union(self, theme: JsonTheme) -> None:
        schema = {"type": "object", "properties": {"v": {"oneOf": [{"type": "string"}, {"enum": ["x"]}]}}}
        (field,) = fields_of(theme, schema)
        assert field["type"] == "anyOf"
        assert field["anyOf"] == [
            {"type": "string"},
            {"name": "variant", "type": "const", "required": True, "enum": ["x"]},
        ]

    def test_discriminated_union(self, theme: JsonTheme, message_schema: dict[str, Any]) -> None:
        (field,) = fields_of(theme, message_schema)
        assert field["type"] == "oneOf"
        assert field["discriminator"] == "type"
        text, image = field["oneOf"]
        assert text == {
            "type": "object",
            "properties": {
                "type": {"const": "text"},
                "content": {"name": "content", "type": "string", "required": True},
            },
            "required": ["type", "content"],
        }
        assert image["required"] == ["type", "url"]

    def test_discriminator_added_to_required(self, theme: JsonTheme) -> None:
        branches = [
            {"type": "object", "properties": {"kind": {"const": "a"}, "x": {"type": "string"}}},
            {"type": "object", "properties": {"kind": {"const": "b"}}},
        ]
        schema = {"type": "object", "properties": {"u": {"oneOf": branches}}}
        (field,) = fields_of(theme, schema)
        assert [v["required"] for v in field["oneOf"]] == [["kind"], ["kind"]]

    def test_default_included(self, theme: JsonTheme) -> None:
        schema = {"type": "object", "properties": {"n": {"type": "integer", "default": 3}}}
        (field,) = fields_of(theme, schema, ExtractOptions(include_defaults=True))
        assert field["default"] == 3

    def test_metadata_examples(self, theme: JsonTheme) -> None:
        schema = {"type": "string", "description": "An id", "examples": ["a1"]}
        output = json.loads(theme.render(extract_model(schema)))
        assert output["schema"]["metadata"] == {"description": "An id", "examples": ["a1"]}

    def test_non_ascii_preserved(self, theme: JsonTheme) -> None:
        schema = {"type": "object", "properties": {"city": {"type": "string", "description": "Zürich"}}}
        assert "Zürich" in theme.render(extract_model(schema))
