"""Validation constraint extraction."""

from __future__ import annotations

from typing import Any

from promptschema.extraction.types import Constraint

__all__ = ["extract_constraints"]

# (schema key, constraint kind, display template), in display order.
_CONSTRAINT_RULES: tuple[tuple[str, str, str], ...] = (
    ("minLength", "minLength", "min {} chars"),
    ("maxLength", "maxLength", "max {} chars"),
    ("pattern", "pattern", "pattern: {}"),
    ("format", "format", "format: {}"),
    ("minimum", "min", "min: {}"),
    ("maximum", "max", "max: {}"),
    ("minItems", "minItems", "min {} items"),
    ("maxItems", "maxItems", "max {} items"),
)

# Empty strings carry no information for these keys.
_TEXT_KEYS = frozenset({"pattern", "format"})


def extract_constraints(schema: dict[str, Any]) -> tuple[Constraint, ...]:
    """Collect string, numeric and array constraints in a fixed display order.

    Keys missing from the node produce no entry and unrecognized keys are
    ignored, so the result does not depend on the key order of the document.
    """
    constraints: list[Constraint] = []
    for key, kind, template in _CONSTRAINT_RULES:
        value = schema.get(key)
        if value is None or (key in _TEXT_KEYS and not value):
            continue
        constraints.append(Constraint(kind=kind, value=value, display=template.format(value)))
    return tuple(constraints)
