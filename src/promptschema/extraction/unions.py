"""Union resolution: discriminated unions versus plain alternative lists."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

from promptschema.extraction.classifier import variant_type_name
from promptschema.extraction.types import (
    EnumPayload,
    ExtractOptions,
    Field,
    FieldKind,
    ObjectPayload,
    TypeRef,
    UnionVariant,
)

__all__ = [
    "DISCRIMINATOR_CANDIDATES",
    "ObjectFieldsExtractor",
    "UnionResolution",
    "find_discriminator",
    "resolve_union",
    "stringify_literal",
    "union_branches",
]

logger = logging.getLogger(__name__)

DISCRIMINATOR_CANDIDATES: tuple[str, ...] = ("type", "kind", "discriminator")

ObjectFieldsExtractor = Callable[[dict[str, Any], ExtractOptions, int], tuple[Field, ...]]


@dataclass(frozen=True)
class UnionResolution:
    """Outcome of resolving a set of union branches.

    A discriminated resolution carries ``discriminator`` and ``variants``; a
    plain one carries ``types`` (rich per-branch representation) and
    ``type_names`` (coarse labels for generated prose).
    """

    discriminator: str | None = None
    variants: tuple[UnionVariant, ...] = ()
    types: tuple[TypeRef, ...] = ()
    type_names: tuple[str, ...] = ()

    @property
    def is_discriminated(self) -> bool:
        return self.discriminator is not None


def stringify_literal(value: Any) -> str:
    """Render a JSON literal the way it reads in a document: strings bare, everything else as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def union_branches(schema: dict[str, Any]) -> list[Any]:
    """The ``oneOf`` alternatives of a node, or its ``anyOf`` alternatives."""
    branches = schema.get("oneOf")
    if branches is None:
        branches = schema.get("anyOf")
    return branches if isinstance(branches, list) else []


def _tag_property(branch: Any, name: str) -> dict[str, Any] | None:
    if not isinstance(branch, dict):
        return None
    properties = branch.get("properties")
    if not isinstance(properties, dict):
        return None
    prop = properties.get(name)
    return prop if isinstance(prop, dict) else None


def find_discriminator(branches: list[Any]) -> str | None:
    """Return the first candidate property carrying a ``const`` in every branch."""
    if not branches:
        return None
    for name in DISCRIMINATOR_CANDIDATES:
        if all("const" in (_tag_property(branch, name) or {}) for branch in branches):
            return name
    return None


def resolve_union(
    branches: list[Any],
    extract_object_fields: ObjectFieldsExtractor,
    options: ExtractOptions,
    depth: int,
) -> UnionResolution:
    """Resolve union branches into variants or plain alternatives.

    Args:
        branches: The ``oneOf``/``anyOf`` alternatives, in declaration order.
        extract_object_fields: Callback extracting the fields of an object schema.
        options: Active extraction options.
        depth: Depth of the union node; branch fields are extracted at ``depth + 1``.
    """
    discriminator = find_discriminator(branches)

    if discriminator is not None:
        logger.debug(f"Discriminated union on '{discriminator}' with {len(branches)} branches")
        variants: list[UnionVariant] = []
        for branch in branches:
            tag = _tag_property(branch, discriminator)
            if tag is None or "const" not in tag:
                continue
            variants.append(
                UnionVariant(
                    discriminator_value=stringify_literal(tag["const"]),
                    fields=extract_object_fields(branch, options, depth + 1),
                )
            )
        return UnionResolution(discriminator=discriminator, variants=tuple(variants))

    type_names: list[str] = []
    types: list[TypeRef] = []
    for branch in branches:
        if not isinstance(branch, dict):
            type_names.append(FieldKind.ANY.value)
            types.append(FieldKind.ANY.value)
            continue

        type_names.append(variant_type_name(branch))

        # enum is checked first since enum branches usually also declare a type
        if isinstance(branch.get("enum"), list):
            types.append(
                Field(
                    name="variant",
                    kind=FieldKind.ENUM,
                    is_required=True,
                    payload=EnumPayload(values=tuple(stringify_literal(v) for v in branch["enum"])),
                )
            )
        elif isinstance(branch.get("properties"), dict):
            types.append(
                Field(
                    name="variant",
                    kind=FieldKind.OBJECT,
                    is_required=True,
                    payload=ObjectPayload(fields=extract_object_fields(branch, options, depth + 1)),
                )
            )
        elif isinstance(branch.get("type"), str):
            types.append(branch["type"])
        else:
            types.append(FieldKind.ANY.value)

    return UnionResolution(types=tuple(types), type_names=tuple(type_names))
