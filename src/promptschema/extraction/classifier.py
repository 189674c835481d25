"""Shape-based classification of JSON Schema nodes into field kinds."""

from __future__ import annotations

from typing import Any

from promptschema.extraction.types import FieldKind

__all__ = ["classify", "variant_type_name", "has_union", "has_additional_properties", "tuple_items"]

_SCALAR_KINDS: dict[str, FieldKind] = {
    "integer": FieldKind.INTEGER,
    "number": FieldKind.NUMBER,
    "boolean": FieldKind.BOOLEAN,
    "string": FieldKind.STRING,
}

_VARIANT_TYPE_NAMES = frozenset({"string", "number", "integer", "boolean", "object", "array"})


def has_union(schema: dict[str, Any]) -> bool:
    """True when the node declares ``oneOf`` or ``anyOf``."""
    return schema.get("oneOf") is not None or schema.get("anyOf") is not None


def has_additional_properties(schema: dict[str, Any]) -> bool:
    """True when ``additionalProperties`` is present and not ``false``."""
    additional = schema.get("additionalProperties")
    return additional is not None and additional is not False


def tuple_items(schema: dict[str, Any]) -> list[Any] | None:
    """Positional item schemas, from ``items`` as a list or draft 2020-12 ``prefixItems``."""
    items = schema.get("items")
    if isinstance(items, list):
        return items
    prefix_items = schema.get("prefixItems")
    if isinstance(prefix_items, list):
        return prefix_items
    return None


def classify(schema: dict[str, Any]) -> FieldKind:
    """Return the field kind of an (already nullability-unwrapped) schema node.

    Predicates are checked in a fixed order and the first match wins, since a
    node can satisfy several of them: enum, const, oneOf/anyOf, allOf, type
    list, record, object, tuple, array, date-time string, scalars. Anything
    unrecognized is ``any``.
    """
    if schema.get("enum") is not None:
        return FieldKind.ENUM
    if "const" in schema:
        return FieldKind.ENUM
    if has_union(schema):
        return FieldKind.UNION
    if schema.get("allOf") is not None:
        # Intersections are documented as plain objects.
        return FieldKind.OBJECT

    schema_type = schema.get("type")
    if isinstance(schema_type, list) and len(schema_type) > 1:
        return FieldKind.UNION

    if schema_type == "object":
        if has_additional_properties(schema) and schema.get("properties") is None:
            return FieldKind.RECORD
        return FieldKind.OBJECT

    if schema_type == "array":
        if tuple_items(schema) is not None:
            return FieldKind.TUPLE
        return FieldKind.ARRAY

    if schema_type == "string" and schema.get("format") == "date-time":
        return FieldKind.DATE

    if isinstance(schema_type, str) and schema_type in _SCALAR_KINDS:
        return _SCALAR_KINDS[schema_type]

    return FieldKind.ANY


def variant_type_name(schema: dict[str, Any]) -> str:
    """Coarse type label of a plain union branch, used for generated prose."""
    schema_type = schema.get("type")
    if isinstance(schema_type, str) and schema_type in _VARIANT_TYPE_NAMES:
        return schema_type
    if schema.get("enum") is not None:
        return FieldKind.ENUM.value
    return FieldKind.ANY.value
