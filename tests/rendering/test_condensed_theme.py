"""Tests for the condensed theme."""

from __future__ import annotations

from typing import Any

import pytest

from promptschema.extraction import SchemaModel, extract_model
from promptschema.rendering import CondensedTheme, RenderOptions


@pytest.fixture
def theme() -> CondensedTheme:
    return CondensedTheme()


def render_property(theme: CondensedTheme, schema: dict[str, Any], required: bool = False) -> str:
    document = {"type": "object", "properties": {"f": schema}, "required": ["f"] if required else []}
    return theme.render(extract_model(document))


class TestCondensedTheme:
    def test_empty_model(self, theme: CondensedTheme) -> None:
        assert theme.render(SchemaModel()) == ""

    def test_flat_object(self, theme: CondensedTheme, person_schema: dict[str, Any]) -> None:
        assert theme.render(extract_model(person_schema)) == "name:str!\nage:num?"

    def test_critical_constraints(self, theme: CondensedTheme) -> None:
        schema = {"type": "string", "minLength": 3, "maxLength": 10, "pattern": "^x", "format": "email"}
        assert render_property(theme, schema, required=True) == "f:str![≥3,≤10,@]"

    def test_numeric_bounds_and_uri(self, theme: CondensedTheme) -> None:
        assert render_property(theme, {"type": "integer", "minimum": 0, "maximum": 9}) == "f:int?[≥0,≤9]"
        assert render_property(theme, {"type": "string", "format": "uri"}) == "f:str?[url]"

    def test_other_formats_dropped(self, theme: CondensedTheme) -> None:
        assert render_property(theme, {"type": "string", "format": "uuid"}) == "f:str?"

    def test_discriminated_union(self, theme: CondensedTheme, message_schema: dict[str, Any]) -> None:
        expected = "\n".join(
            [
                "block:obj[]!",
                "  type:text|image!",
                "    =text:",
                "      type:text!",
                "      content:str!",
                "    =image:",
                "      type:image!",
                "      url:str!",
            ]
        )
        assert theme.render(extract_model(message_schema)) == expected

    def test_nested_object_and_array_items(self, theme: CondensedTheme) -> None:
        schema = {
            "type": "object",
            "properties": {
                "user": {"type": "object", "properties": {"id": {"type": "integer"}}},
                "rows": {"type": "array", "items": {"type": "object", "properties": {"v": {"type": "number"}}}},
            },
        }
        assert theme.render(extract_model(schema), RenderOptions(indent_size=1)) == "user:obj?\n id:int?\nrows:object[]?\n v:num?"


class TestCompactTypes:
    @pytest.mark.parametrize(
        "schema,compact",
        [
            ({"type": "boolean"}, "bool"),
            ({"type": "string", "format": "date-time"}, "date"),
            ({}, "any"),
            ({"enum": ["a", "b", "c"]}, "a|b|c"),
            ({"enum": ["a", "b", "c", "d"]}, "a|b|c..."),
            ({"const": "x"}, "x"),
            ({"type": ["string", "integer"]}, "str|int"),
            ({"anyOf": [{"enum": ["S"]}, {"type": "number"}]}, "enum|num"),
            ({"type": "array", "items": [{"type": "string"}, {"type": "number"}]}, "[str,num]"),
            ({"type": "object", "additionalProperties": {"type": "number"}}, "Rec<str,num>"),
            ({"type": "array", "items": {"type": "string"}}, "str[]"),
            ({"type": "array", "items": {"enum": ["x", "y"]}}, "[x|y]"),
            ({"type": "array", "items": {"enum": ["x", "y", "z"]}}, "[x|y...]"),
            ({"type": "array"}, "arr"),
        ],
    )
    def test_compact(self, theme: CondensedTheme, schema: dict[str, Any], compact: str) -> None:
        assert render_property(theme, schema) == f"f:{compact}?"
