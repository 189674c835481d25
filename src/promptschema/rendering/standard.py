"""Standard theme: minimal bullet list of names, types and modifiers."""

from __future__ import annotations

from promptschema.extraction.types import Field, FieldKind, SchemaModel, UnionVariant
from promptschema.rendering.helpers import (
    bullet_type,
    discriminator_name,
    discriminator_values,
    indent,
    item_field,
    modifier_suffix,
    nested_fields,
)
from promptschema.rendering.types import RenderOptions

__all__ = ["StandardTheme"]


class StandardTheme:
    """Clean bullet list without descriptions or examples."""

    name = "standard"
    description = "Clean, minimal format for schema documentation"

    def render(self, model: SchemaModel, options: RenderOptions | None = None) -> str:
        opts = options if options is not None else RenderOptions()
        lines = ["## Schema", ""]
        for field in model.fields:
            lines.extend(self._render_field(field, 0, opts))
        return "\n".join(lines).strip()

    def _render_field(self, field: Field, depth: int, opts: RenderOptions) -> list[str]:
        pad = indent(depth, opts.indent_size)
        variants = field.union_variants

        if field.kind is FieldKind.DISCRIMINATED_UNION and variants is not None:
            lines = [
                f"{pad}- {field.name}: array of objects{modifier_suffix(field)}",
                f"{pad}  - {discriminator_name(field)}: {discriminator_values(variants, ' | ')} (required)",
            ]
            for variant in variants:
                lines.extend(self._render_variant(variant, depth + 2, opts))
            return lines

        lines = [f"{pad}- {field.name}: {bullet_type(field)}{modifier_suffix(field)}"]

        children = nested_fields(field)
        if children is not None:
            for child in children:
                lines.extend(self._render_field(child, depth + 1, opts))
            return lines

        item = item_field(field)
        if item is not None and item.kind is FieldKind.DISCRIMINATED_UNION and item.union_variants is not None:
            lines.append(
                f"{pad}  - {discriminator_name(item)}: {discriminator_values(item.union_variants, ' | ')} (required)"
            )
            for variant in item.union_variants:
                lines.extend(self._render_variant(variant, depth + 2, opts))
        return lines

    def _render_variant(self, variant: UnionVariant, depth: int, opts: RenderOptions) -> list[str]:
        lines = [f"{indent(depth, opts.indent_size)}- {variant.discriminator_value}"]
        for field in variant.fields:
            lines.extend(self._render_field(field, depth + 1, opts))
        return lines
