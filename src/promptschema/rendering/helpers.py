"""Formatting helpers shared by the text themes."""

from __future__ import annotations

import json
from typing import Any

from promptschema.extraction.types import Field, FieldKind, TypeRef, UnionVariant

__all__ = [
    "MODIFIER_SEPARATOR",
    "PLURAL_TYPES",
    "bullet_type",
    "compact_json",
    "discriminator_name",
    "discriminator_values",
    "indent",
    "item_field",
    "modifier_suffix",
    "modifiers",
    "nested_fields",
    "plural_type",
    "type_name",
]

MODIFIER_SEPARATOR = " • "

PLURAL_TYPES: dict[str, str] = {
    "string": "strings",
    "number": "numbers",
    "integer": "integers",
    "boolean": "booleans",
    "object": "objects",
    "array": "arrays",
    "any": "any",
}


def indent(depth: int, size: int) -> str:
    return " " * (depth * size)


def plural_type(type_ref: str) -> str:
    return PLURAL_TYPES.get(type_ref, type_ref)


def type_name(type_ref: TypeRef) -> str:
    """Bare name of a type reference: the string itself or the nested field's kind."""
    if isinstance(type_ref, Field):
        return type_ref.kind.value
    return type_ref


def compact_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def modifiers(field: Field, include_required: bool = True) -> list[str]:
    """Modifier fragments in display order: required, nullable, then each constraint."""
    result: list[str] = []
    if include_required and field.is_required:
        result.append("required")
    if field.is_nullable:
        result.append("nullable")
    result.extend(c.display or f"{c.kind}: {c.value}" for c in field.constraints)
    return result


def modifier_suffix(field: Field) -> str:
    """Parenthesised modifier list, or an empty string when there is nothing to say."""
    fragments = modifiers(field)
    if not fragments:
        return ""
    return f" ({MODIFIER_SEPARATOR.join(fragments)})"


def discriminator_name(field: Field) -> str:
    return field.discriminator_field or "type"


def discriminator_values(variants: tuple[UnionVariant, ...], separator: str) -> str:
    return separator.join(v.discriminator_value for v in variants)


def item_field(field: Field) -> Field | None:
    """The nested item Field of an array, if its item is not a bare type name."""
    item = field.array_item_type
    return item if isinstance(item, Field) else None


def nested_fields(field: Field) -> tuple[Field, ...] | None:
    """Child fields rendered beneath a bullet.

    Checked in order: the field's own object fields, the object fields of a
    record's value, the object fields of an array's item.
    """
    if field.object_fields is not None:
        return field.object_fields
    value = field.record_value_type
    if isinstance(value, Field) and value.object_fields is not None:
        return value.object_fields
    item = item_field(field)
    if item is not None and item.object_fields is not None:
        return item.object_fields
    return None


def _union_enum(field: Field) -> Field | None:
    for variant in field.union_types or ():
        if isinstance(variant, Field) and variant.kind is FieldKind.ENUM and variant.enum_values is not None:
            return variant
    return None


def bullet_type(field: Field, surface_union_enum: bool = False) -> str:
    """Readable type label used by the bullet themes.

    Args:
        field: The field to describe.
        surface_union_enum: Show a plain union that contains an enum branch
            as that enum's allowed values instead of listing the branch kinds.
    """
    kind = field.kind

    if kind is FieldKind.ENUM and field.enum_values is not None:
        if len(field.enum_values) == 1:
            return field.enum_values[0]
        return f"MUST BE ONE OF [{' | '.join(field.enum_values)}]"

    if kind is FieldKind.UNION and field.union_types is not None:
        if surface_union_enum:
            enum_branch = _union_enum(field)
            if enum_branch is not None:
                return f"MUST BE ONE OF [{' | '.join(enum_branch.enum_values or ())}]"
        return " | ".join(type_name(t) for t in field.union_types)

    if kind is FieldKind.TUPLE and field.tuple_items is not None:
        return f"[{', '.join(type_name(t) for t in field.tuple_items)}]"

    if kind is FieldKind.RECORD and field.record_value_type is not None:
        return f"Record<{field.record_key_type}, {type_name(field.record_value_type)}>"

    if kind is FieldKind.ARRAY:
        item = field.array_item_type
        if isinstance(item, str):
            return f"array of {plural_type(item)}"
        if item is not None:
            if item.kind is FieldKind.ENUM and item.enum_values is not None:
                return f"array where EACH item MUST BE ONE OF [{', '.join(item.enum_values)}]"
            if item.kind is FieldKind.OBJECT:
                return "array of objects"
            if item.kind is FieldKind.DISCRIMINATED_UNION and item.discriminator_field:
                return f"array of objects ({item.discriminator_field} as discriminator)"
        return "array"

    if kind is FieldKind.DISCRIMINATED_UNION:
        return "union"

    return kind.value
