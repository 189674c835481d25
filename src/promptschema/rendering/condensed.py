"""Condensed theme: one terse line per field for token-constrained prompts."""

from __future__ import annotations

from promptschema.extraction.types import Constraint, Field, FieldKind, SchemaModel, UnionVariant
from promptschema.rendering.helpers import discriminator_name, discriminator_values, indent, item_field
from promptschema.rendering.types import RenderOptions

__all__ = ["CondensedTheme", "compact_primitive", "compact_type", "critical_constraints"]

_COMPACT_PRIMITIVES: dict[str, str] = {
    "string": "str",
    "number": "num",
    "integer": "int",
    "boolean": "bool",
    "object": "obj",
}

_SCALAR_KINDS: dict[FieldKind, str] = {
    FieldKind.STRING: "str",
    FieldKind.NUMBER: "num",
    FieldKind.INTEGER: "int",
    FieldKind.BOOLEAN: "bool",
    FieldKind.OBJECT: "obj",
    FieldKind.DATE: "date",
    FieldKind.ANY: "any",
}

_LOWER_BOUNDS = frozenset({"min", "minLength", "minItems"})
_UPPER_BOUNDS = frozenset({"max", "maxLength", "maxItems"})
_FORMAT_MARKS = {"email": "@", "uri": "url"}

_ENUM_PREVIEW = 3
_ITEM_ENUM_PREVIEW = 2


def compact_primitive(type_ref: str) -> str:
    return _COMPACT_PRIMITIVES.get(type_ref, type_ref)


def _compact_ref(type_ref: str | Field) -> str:
    if isinstance(type_ref, Field):
        return type_ref.kind.value
    return compact_primitive(type_ref)


def _preview(values: tuple[str, ...], limit: int) -> str:
    shown = "|".join(values[:limit])
    return f"{shown}..." if len(values) > limit else shown


def compact_type(field: Field) -> str:
    """Abbreviated type label, e.g. ``str``, ``int[]``, ``Rec<str,num>``."""
    kind = field.kind
    if kind in _SCALAR_KINDS:
        return _SCALAR_KINDS[kind]

    if kind is FieldKind.UNION and field.union_types is not None:
        return "|".join(_compact_ref(t) for t in field.union_types)

    if kind is FieldKind.TUPLE and field.tuple_items is not None:
        return f"[{','.join(_compact_ref(t) for t in field.tuple_items)}]"

    if kind is FieldKind.RECORD and field.record_value_type is not None:
        return f"Rec<{compact_primitive(field.record_key_type or 'string')},{_compact_ref(field.record_value_type)}>"

    if kind is FieldKind.ENUM and field.enum_values is not None:
        if len(field.enum_values) == 1:
            return field.enum_values[0]
        return _preview(field.enum_values, _ENUM_PREVIEW)

    if kind is FieldKind.ARRAY:
        item = field.array_item_type
        if isinstance(item, str):
            return f"{compact_primitive(item)}[]"
        if item is None:
            return "arr"
        if item.kind is FieldKind.ENUM and item.enum_values is not None:
            return f"[{_preview(item.enum_values, _ITEM_ENUM_PREVIEW)}]"
        return f"{item.kind.value}[]"

    return kind.value


def _critical(constraint: Constraint) -> str | None:
    if constraint.kind in _LOWER_BOUNDS:
        return f"≥{constraint.value}"
    if constraint.kind in _UPPER_BOUNDS:
        return f"≤{constraint.value}"
    if constraint.kind == "format":
        return _FORMAT_MARKS.get(constraint.value)
    return None


def critical_constraints(field: Field) -> list[str]:
    """Bounds and well-known formats; every other constraint is dropped."""
    marks = (_critical(c) for c in field.constraints)
    return [mark for mark in marks if mark is not None]


class CondensedTheme:
    """Ultra-compact format: ``name:type!`` for required, ``name:type?`` for optional."""

    name = "condensed"
    description = "Ultra-compact format for minimal token usage in AI prompts"

    def render(self, model: SchemaModel, options: RenderOptions | None = None) -> str:
        opts = options if options is not None else RenderOptions()
        lines: list[str] = []
        for field in model.fields:
            lines.extend(self._render_field(field, 0, opts))
        return "\n".join(lines).strip()

    def _render_field(self, field: Field, depth: int, opts: RenderOptions) -> list[str]:
        pad = indent(depth, opts.indent_size)
        flag = "!" if field.is_required else "?"
        variants = field.union_variants

        if field.kind is FieldKind.DISCRIMINATED_UNION and variants is not None:
            lines = [
                f"{pad}{field.name}:obj[]{flag}",
                f"{pad}  {discriminator_name(field)}:{discriminator_values(variants, '|')}!",
            ]
            for variant in variants:
                lines.extend(self._render_variant(variant, depth + 2, opts))
            return lines

        line = f"{pad}{field.name}:{compact_type(field)}{flag}"
        critical = critical_constraints(field)
        if critical:
            line += f"[{','.join(critical)}]"
        lines = [line]

        children = field.object_fields
        if children is None:
            item = item_field(field)
            children = item.object_fields if item is not None else None
        for child in children or ():
            lines.extend(self._render_field(child, depth + 1, opts))
        return lines

    def _render_variant(self, variant: UnionVariant, depth: int, opts: RenderOptions) -> list[str]:
        lines = [f"{indent(depth, opts.indent_size)}={variant.discriminator_value}:"]
        for field in variant.fields:
            lines.extend(self._render_field(field, depth + 1, opts))
        return lines
