"""Recursive field extraction: the core of the extraction engine.

Every function here is a pure read of the schema document. Recursion is
bounded only by ``ExtractOptions.max_depth``; there is no cycle detection,
so recursive schemas are truncated at the bound rather than followed.
"""

from __future__ import annotations

import logging
from typing import Any

from promptschema.extraction.classifier import classify, has_union, tuple_items
from promptschema.extraction.constraints import extract_constraints
from promptschema.extraction.nullability import unwrap_nullable
from promptschema.extraction.types import (
    NO_DEFAULT,
    ArrayPayload,
    DiscriminatedUnionPayload,
    EnumPayload,
    Example,
    ExtractOptions,
    Field,
    FieldKind,
    ObjectPayload,
    Payload,
    RecordPayload,
    TuplePayload,
    TypeRef,
    UnionPayload,
)
from promptschema.extraction.unions import resolve_union, stringify_literal, union_branches

__all__ = [
    "extract_field",
    "extract_object_fields",
    "extract_array_field",
    "extract_array_item_type",
    "extract_union_field",
]

logger = logging.getLogger(__name__)

_BAD_EXAMPLE_KEYS = ("badExamples", "x-bad-examples")


def _as_schema(node: Any) -> dict[str, Any]:
    return node if isinstance(node, dict) else {}


def _description_of(schema: dict[str, Any]) -> str | None:
    return schema.get("x-llm-description") or schema.get("description") or None


def _bad_examples_of(schema: dict[str, Any]) -> Any:
    for key in _BAD_EXAMPLE_KEYS:
        if schema.get(key) is not None:
            return schema[key]
    return None


def _collect_examples(outer: dict[str, Any], actual: dict[str, Any]) -> tuple[Example, ...]:
    good = outer.get("examples") or actual.get("examples")
    bad = _bad_examples_of(outer) or _bad_examples_of(actual)

    examples: list[Example] = []
    if isinstance(good, list):
        examples.extend(Example(value=value, is_correct=True) for value in good)
    if isinstance(bad, list):
        examples.extend(Example(value=value, is_correct=False) for value in bad)
    return tuple(examples)


def _default_of(outer: dict[str, Any], actual: dict[str, Any]) -> Any:
    if "default" in outer:
        return outer["default"]
    if "default" in actual:
        return actual["default"]
    return NO_DEFAULT


def _enum_values(schema: dict[str, Any]) -> tuple[str, ...]:
    values = schema.get("enum")
    if not isinstance(values, list):
        return ()
    return tuple(stringify_literal(v) for v in values)


def extract_object_fields(schema: dict[str, Any], options: ExtractOptions, depth: int) -> tuple[Field, ...]:
    """Extract the properties of an object schema as an ordered field tuple.

    Fields keep declaration order, then are stably sorted: discriminator
    fields first, then required fields, then optional ones.
    """
    schema = _as_schema(schema)
    properties = schema.get("properties")
    if not isinstance(properties, dict):
        return ()

    required = schema.get("required")
    required_names = {n for n in required if isinstance(n, str)} if isinstance(required, list) else set()

    fields = [
        extract_field(name, prop_schema, name in required_names, options, depth)
        for name, prop_schema in properties.items()
    ]
    fields.sort(key=lambda f: (0 if f.discriminator_field else 1, 0 if f.is_required else 1))
    return tuple(fields)


def _record_value_type(value_schema: Any, options: ExtractOptions, depth: int) -> TypeRef:
    if not isinstance(value_schema, dict):
        return FieldKind.ANY.value
    if isinstance(value_schema.get("properties"), dict):
        if depth >= options.max_depth:
            return FieldKind.OBJECT.value
        return Field(
            name="value",
            kind=FieldKind.OBJECT,
            is_required=True,
            payload=ObjectPayload(fields=extract_object_fields(value_schema, options, depth + 1)),
        )
    if isinstance(value_schema.get("type"), str):
        return value_schema["type"]
    return FieldKind.ANY.value


def _enum_item(schema: dict[str, Any]) -> Field:
    return Field(name="item", kind=FieldKind.ENUM, is_required=True, payload=EnumPayload(values=_enum_values(schema)))


def _enum_branch(schema: dict[str, Any]) -> dict[str, Any] | None:
    if not has_union(schema):
        return None
    for key in ("oneOf", "anyOf"):
        branches = schema.get(key)
        if not isinstance(branches, list):
            continue
        for branch in branches:
            if isinstance(branch, dict) and isinstance(branch.get("enum"), list) and branch["enum"]:
                return branch
    return None


def extract_array_item_type(item_schema: Any, options: ExtractOptions, depth: int) -> TypeRef:
    """Describe the item type of an array (or one slot of a tuple).

    Returns a bare type name for scalar items or a nested Field named
    ``item``. A plain union item containing an enum branch is replaced by
    that enum so the allowed values stay visible. Enum items keep their
    values at any depth. Past the depth bound other items collapse to their
    bare kind.
    """
    item_schema = _as_schema(item_schema)

    if item_schema.get("enum") is not None:
        return _enum_item(item_schema)

    if depth >= options.max_depth:
        enum_branch = _enum_branch(item_schema)
        if enum_branch is not None:
            return _enum_item(enum_branch)
        logger.debug(f"Depth bound {options.max_depth} reached at array item, collapsing to bare kind")
        if isinstance(item_schema.get("type"), str) and not has_union(item_schema):
            return item_schema["type"]
        return classify(item_schema).value

    if has_union(item_schema):
        union_field = extract_union_field("item", item_schema, True, options, depth + 1)
        for variant in union_field.union_types or ():
            if isinstance(variant, Field) and variant.kind is FieldKind.ENUM and variant.enum_values:
                return Field(
                    name="item",
                    kind=FieldKind.ENUM,
                    is_required=True,
                    payload=EnumPayload(values=variant.enum_values),
                )
        return union_field

    item_type = item_schema.get("type")
    if isinstance(item_type, str) and item_schema.get("properties") is None:
        return item_type

    if item_type == "object" or isinstance(item_schema.get("properties"), dict):
        return Field(
            name="item",
            kind=FieldKind.OBJECT,
            is_required=True,
            payload=ObjectPayload(fields=extract_object_fields(item_schema, options, depth + 1)),
        )

    return FieldKind.ANY.value


def extract_array_field(
    name: str,
    schema: dict[str, Any],
    is_required: bool,
    options: ExtractOptions,
    depth: int,
) -> Field:
    """Extract an array schema directly, without nullability handling."""
    schema = _as_schema(schema)
    payload = None
    if isinstance(schema.get("items"), dict):
        payload = ArrayPayload(item=extract_array_item_type(schema["items"], options, depth))
    return Field(
        name=name,
        kind=FieldKind.ARRAY,
        is_required=is_required,
        payload=payload,
        description=_description_of(schema),
        constraints=extract_constraints(schema),
    )


def extract_union_field(
    name: str,
    schema: dict[str, Any],
    is_required: bool,
    options: ExtractOptions,
    depth: int,
) -> Field:
    """Extract a ``oneOf``/``anyOf`` schema as a union or discriminated union field."""
    schema = _as_schema(schema)
    resolution = resolve_union(union_branches(schema), extract_object_fields, options, depth)

    if resolution.is_discriminated:
        return Field(
            name=name,
            kind=FieldKind.DISCRIMINATED_UNION,
            is_required=is_required,
            payload=DiscriminatedUnionPayload(
                discriminator=resolution.discriminator,
                variants=resolution.variants,
            ),
            description=_description_of(schema),
        )

    return Field(
        name=name,
        kind=FieldKind.UNION,
        is_required=is_required,
        payload=UnionPayload(types=resolution.types, type_names=resolution.type_names),
        description=f"Union of {', '.join(resolution.type_names)}",
    )


def extract_field(
    name: str,
    schema: Any,
    is_required: bool,
    options: ExtractOptions,
    depth: int,
) -> Field:
    """Extract one named schema node into a Field.

    Description and examples are read from the outer node before nullability
    unwrapping and fall back to the unwrapped node. The kind is then refined
    in a fixed precedence (enum, const, record, object, tuple, array, type
    list, oneOf/anyOf) and the matching payload populated. Never raises:
    shapes that cannot be classified become ``any``.
    """
    outer = _as_schema(schema)
    unwrapped = unwrap_nullable(outer)
    actual = _as_schema(unwrapped.actual_schema)

    kind = classify(actual)
    description = _description_of(outer) or _description_of(actual)
    payload: Payload | None = None

    if actual.get("enum") is not None:
        kind = FieldKind.ENUM
        payload = EnumPayload(values=_enum_values(actual))
    elif "const" in actual:
        # A literal-valued property tags its parent: record its own name as the discriminator.
        kind = FieldKind.ENUM
        payload = EnumPayload(values=(stringify_literal(actual["const"]),), discriminator=name)
    elif kind is FieldKind.RECORD:
        payload = RecordPayload(value=_record_value_type(actual["additionalProperties"], options, depth))
    elif kind is FieldKind.OBJECT and depth < options.max_depth:
        if isinstance(actual.get("properties"), dict):
            payload = ObjectPayload(fields=extract_object_fields(actual, options, depth + 1))
    elif kind is FieldKind.TUPLE:
        items = tuple_items(actual) or []
        payload = TuplePayload(items=tuple(extract_array_item_type(item, options, depth) for item in items))
    elif kind is FieldKind.ARRAY and isinstance(actual.get("items"), dict):
        payload = ArrayPayload(item=extract_array_item_type(actual["items"], options, depth))
    elif isinstance(actual.get("type"), list) and len(actual["type"]) > 1:
        type_names = tuple(str(t) for t in actual["type"])
        kind = FieldKind.UNION
        payload = UnionPayload(types=type_names, type_names=type_names)
    elif has_union(actual) and depth < options.max_depth:
        resolution = resolve_union(union_branches(actual), extract_object_fields, options, depth)
        if resolution.is_discriminated:
            kind = FieldKind.DISCRIMINATED_UNION
            payload = DiscriminatedUnionPayload(
                discriminator=resolution.discriminator,
                variants=resolution.variants,
            )
        else:
            kind = FieldKind.UNION
            payload = UnionPayload(types=resolution.types, type_names=resolution.type_names)
            description = f"Union of {', '.join(resolution.type_names)}"
    elif kind in (FieldKind.OBJECT, FieldKind.UNION):
        logger.debug(f"Depth bound {options.max_depth} reached at '{name}', not expanding {kind.value}")

    default_value = _default_of(outer, actual) if options.include_defaults else NO_DEFAULT

    return Field(
        name=name,
        kind=kind,
        is_required=is_required,
        is_nullable=unwrapped.is_nullable,
        payload=payload,
        description=description,
        constraints=extract_constraints(actual),
        examples=_collect_examples(outer, actual),
        default_value=default_value,
    )
