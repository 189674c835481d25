"""JSON theme: the field tree as a JSON-Schema-like document."""

from __future__ import annotations

import json
from typing import Any

from promptschema.extraction.types import Field, FieldKind, SchemaModel, TypeRef, UnionVariant
from promptschema.rendering.types import RenderOptions

__all__ = ["JsonTheme", "field_to_dict", "model_to_dict"]

_JSON_TYPES: dict[FieldKind, str] = {
    FieldKind.DISCRIMINATED_UNION: "oneOf",
    FieldKind.UNION: "anyOf",
    FieldKind.DATE: "string",
    FieldKind.RECORD: "object",
    FieldKind.TUPLE: "array",
}


def _json_type(field: Field) -> str:
    if field.kind is FieldKind.ENUM:
        return "const" if field.enum_values is not None and len(field.enum_values) == 1 else "enum"
    return _JSON_TYPES.get(field.kind, field.kind.value)


def _ref_to_dict(type_ref: TypeRef) -> dict[str, Any]:
    if isinstance(type_ref, Field):
        return field_to_dict(type_ref)
    return {"type": type_ref}


def _variant_to_dict(variant: UnionVariant, discriminator: str | None) -> dict[str, Any]:
    properties: dict[str, Any] = {}
    if discriminator:
        properties[discriminator] = {"const": variant.discriminator_value}
    for field in variant.fields:
        if field.name != discriminator:
            properties[field.name] = field_to_dict(field)

    required = [f.name for f in variant.fields if f.is_required and f.name != discriminator]
    if discriminator and discriminator not in required:
        required.insert(0, discriminator)
    return {"type": "object", "properties": properties, "required": required}


def field_to_dict(field: Field) -> dict[str, Any]:
    """Convert one Field, recursively, into a JSON-serializable mapping.

    Optional keys are emitted only when they carry information.
    """
    result: dict[str, Any] = {
        "name": field.name,
        "type": _json_type(field),
        "required": field.is_required,
    }
    if field.is_nullable:
        result["nullable"] = True
    if field.description:
        result["description"] = field.description
    if field.constraints:
        result["constraints"] = {c.kind: c.value for c in field.constraints}
    if field.enum_values is not None:
        result["enum"] = list(field.enum_values)
    if field.examples:
        result["examples"] = [{"value": ex.value, "isCorrect": ex.is_correct} for ex in field.examples]
    if field.object_fields is not None:
        result["properties"] = {nested.name: field_to_dict(nested) for nested in field.object_fields}
    if field.array_item_type is not None:
        result["items"] = _ref_to_dict(field.array_item_type)
    if field.tuple_items is not None:
        result["items"] = [_ref_to_dict(t) for t in field.tuple_items]
    if field.record_value_type is not None:
        result["additionalProperties"] = _ref_to_dict(field.record_value_type)
    if field.union_variants is not None:
        result["oneOf"] = [_variant_to_dict(v, field.discriminator_field) for v in field.union_variants]
        if field.discriminator_field:
            result["discriminator"] = field.discriminator_field
    if field.union_types is not None:
        result["anyOf"] = [_ref_to_dict(t) for t in field.union_types]
    if field.has_default:
        result["default"] = field.default_value
    return result


def model_to_dict(model: SchemaModel) -> dict[str, Any]:
    metadata = {
        key: value
        for key, value in (
            ("title", model.metadata.title),
            ("description", model.metadata.description),
            ("examples", list(model.metadata.examples) if model.metadata.examples is not None else None),
        )
        if value is not None
    }
    return {"schema": {"fields": [field_to_dict(f) for f in model.fields], "metadata": metadata}}


class JsonTheme:
    """Structured JSON output for programmatic consumption."""

    name = "json"
    description = "Structured JSON output for programmatic consumption"

    def render(self, model: SchemaModel, options: RenderOptions | None = None) -> str:
        opts = options if options is not None else RenderOptions()
        if opts.indent_size == 0:
            return json.dumps(model_to_dict(model), ensure_ascii=False, separators=(",", ":"))
        return json.dumps(model_to_dict(model), ensure_ascii=False, indent=opts.indent_size)
