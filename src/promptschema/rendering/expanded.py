"""Expanded theme: the standard layout plus descriptions, examples and warnings."""

from __future__ import annotations

import json

from promptschema.extraction.types import Example, Field, FieldKind, SchemaModel, UnionVariant
from promptschema.rendering.helpers import (
    bullet_type,
    compact_json,
    discriminator_name,
    discriminator_values,
    indent,
    item_field,
    modifier_suffix,
    nested_fields,
)
from promptschema.rendering.types import RenderOptions

__all__ = ["ENUM_ARRAY_WARNING", "ExpandedTheme"]

ENUM_ARRAY_WARNING = "⚠️ CRITICAL: Values MUST be from the list above. No other values are valid."


def _joined(examples: list[Example]) -> str:
    return ", ".join(compact_json(ex.value) for ex in examples)


class ExpandedTheme:
    """Full detail bullet list for prompts where accuracy matters more than length.

    Every field line is followed by sub-bullets for its description and its
    valid and invalid examples. Arrays of enum items carry an extra warning,
    and the first document-level example is appended as a JSON block.
    """

    name = "expanded"
    description = "Full detail format with descriptions and examples"

    def render(self, model: SchemaModel, options: RenderOptions | None = None) -> str:
        opts = options if options is not None else RenderOptions()
        lines = ["## Schema", ""]
        for field in model.fields:
            lines.extend(self._render_field(field, 0, opts))

        if model.metadata.examples:
            lines.extend(
                [
                    "",
                    "## Examples",
                    "",
                    "```json",
                    json.dumps(model.metadata.examples[0], indent=2, ensure_ascii=False),
                    "```",
                ]
            )
        return "\n".join(lines).strip()

    def _union_header(self, union: Field, pad: str) -> list[str]:
        lines: list[str] = []
        if union.description:
            lines.append(f"{pad}  - {union.description}")
        if union.examples:
            lines.append(f"{pad}  - Examples: {_joined(list(union.examples))}")
        values = discriminator_values(union.union_variants or (), " | ")
        lines.append(f"{pad}  - {discriminator_name(union)}: Must be one of {values} (required)")
        return lines

    def _render_field(self, field: Field, depth: int, opts: RenderOptions) -> list[str]:
        pad = indent(depth, opts.indent_size)
        variants = field.union_variants

        if field.kind is FieldKind.DISCRIMINATED_UNION and variants is not None:
            lines = [f"{pad}- {field.name}: array of objects{modifier_suffix(field)}"]
            lines.extend(self._union_header(field, pad))
            for variant in variants:
                lines.extend(self._render_variant(variant, depth + 2, opts))
            return lines

        lines = [f"{pad}- {field.name}: {bullet_type(field, surface_union_enum=True)}{modifier_suffix(field)}"]

        item = item_field(field)
        if item is not None and item.kind is FieldKind.ENUM and item.enum_values is not None:
            lines.append(f"{pad}  - {ENUM_ARRAY_WARNING}")

        if field.description:
            lines.append(f"{pad}  - {field.description}")

        valid = [ex for ex in field.examples if ex.is_correct]
        invalid = [ex for ex in field.examples if not ex.is_correct]
        if valid:
            lines.append(f"{pad}  - Examples: {_joined(valid)}")
        if invalid:
            lines.append(f"{pad}  - ❌ INVALID Examples (DO NOT USE): {_joined(invalid)}")

        children = nested_fields(field)
        if children is not None:
            for child in children:
                lines.extend(self._render_field(child, depth + 1, opts))
            return lines

        if item is not None and item.kind is FieldKind.DISCRIMINATED_UNION and item.union_variants is not None:
            lines.extend(self._union_header(item, pad))
            for variant in item.union_variants:
                lines.extend(self._render_variant(variant, depth + 2, opts))
        return lines

    def _render_variant(self, variant: UnionVariant, depth: int, opts: RenderOptions) -> list[str]:
        lines = [f"{indent(depth, opts.indent_size)}- {variant.discriminator_value}"]
        for field in variant.fields:
            lines.extend(self._render_field(field, depth + 1, opts))
        return lines
