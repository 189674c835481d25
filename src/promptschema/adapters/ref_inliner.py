"""Inlining of local ``$ref`` pointers into self-contained schema trees."""

from __future__ import annotations

import logging
from typing import Any

from promptschema.errors import SchemaNotFoundError

__all__ = ["inline_local_refs"]

logger = logging.getLogger(__name__)

_DEFINITION_KEYS = ("$defs", "definitions")


def _local_name(ref: str) -> str | None:
    for key in _DEFINITION_KEYS:
        prefix = f"#/{key}/"
        if ref.startswith(prefix):
            return ref[len(prefix) :].replace("~1", "/").replace("~0", "~")
    return None


def _cut(name: str, definition: Any) -> dict[str, Any]:
    title = definition.get("title") if isinstance(definition, dict) else None
    return {"type": "object", "title": title or name}


def inline_local_refs(schema: dict[str, Any]) -> dict[str, Any]:
    """Replace ``#/$defs/...`` and ``#/definitions/...`` pointers with their targets.

    Returns a new document without the definition tables; the input is not
    modified. Keys next to a ``$ref`` override the target's keys. A reference
    back into a definition that is already being expanded is replaced with
    an opaque ``{"type": "object", "title": ...}`` node. A single-entry
    ``allOf`` wrapper is merged into its parent. Pointers to anything other
    than a local definition are left in place.

    Raises:
        SchemaNotFoundError: If a local pointer names a missing definition.
    """
    definitions: dict[str, Any] = {}
    for key in _DEFINITION_KEYS:
        table = schema.get(key)
        if isinstance(table, dict):
            definitions.update(table)

    root = {k: v for k, v in schema.items() if k not in _DEFINITION_KEYS}
    return _inline(root, definitions, ())


def _inline(node: Any, definitions: dict[str, Any], expanding: tuple[str, ...]) -> Any:
    if isinstance(node, list):
        return [_inline(item, definitions, expanding) for item in node]
    if not isinstance(node, dict):
        return node

    ref = node.get("$ref")
    name = _local_name(ref) if isinstance(ref, str) else None
    if name is not None:
        siblings = {k: _inline(v, definitions, expanding) for k, v in node.items() if k != "$ref"}
        if name in expanding:
            logger.debug(f"Cutting recursive reference to '{name}'")
            resolved: Any = _cut(name, definitions.get(name))
        elif name in definitions:
            resolved = _inline(definitions[name], definitions, expanding + (name,))
        else:
            raise SchemaNotFoundError(schema_id=f"{ref} (definition '{name}' not found)")
        if isinstance(resolved, dict):
            return {**resolved, **siblings}
        return resolved

    result = {k: _inline(v, definitions, expanding) for k, v in node.items()}

    all_of = result.get("allOf")
    if isinstance(all_of, list) and len(all_of) == 1 and isinstance(all_of[0], dict):
        rest = {k: v for k, v in result.items() if k != "allOf"}
        return {**all_of[0], **rest}
    return result
