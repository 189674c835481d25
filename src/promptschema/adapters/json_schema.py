"""Passthrough adapter for documents that already are JSON Schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["JSON_SCHEMA_KEYS", "JsonSchemaAdapter"]

JSON_SCHEMA_KEYS = frozenset({"type", "properties", "items", "oneOf", "anyOf", "allOf", "$schema", "$ref"})


class JsonSchemaAdapter:
    """Accepts mappings that carry at least one JSON Schema keyword."""

    name = "json-schema"

    def can_handle(self, value: Any) -> bool:
        return isinstance(value, Mapping) and any(key in value for key in JSON_SCHEMA_KEYS)

    def to_json_schema(self, value: Any) -> dict[str, Any]:
        return dict(value)
