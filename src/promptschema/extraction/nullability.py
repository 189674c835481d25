"""Detection of the "union with null" nullability encodings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Unwrapped", "unwrap_nullable"]


@dataclass(frozen=True)
class Unwrapped:
    """The non-null schema behind a nullable wrapper."""

    actual_schema: dict[str, Any]
    is_nullable: bool


def _is_null_branch(branch: Any) -> bool:
    return isinstance(branch, dict) and branch.get("type") == "null"


def unwrap_nullable(schema: dict[str, Any]) -> Unwrapped:
    """Strip a nullable wrapper from a schema node.

    Recognizes ``anyOf`` with a null branch and exactly one other branch
    (descending once more into a nested ``anyOf`` produced by optional plus
    nullable wrapping), and ``type`` lists containing ``"null"``. Any other
    node is returned unchanged. The input is never modified.
    """
    any_of = schema.get("anyOf")
    if isinstance(any_of, list):
        has_null = any(_is_null_branch(branch) for branch in any_of)
        non_null = [branch for branch in any_of if not _is_null_branch(branch)]

        if has_null and len(non_null) == 1 and isinstance(non_null[0], dict):
            actual: dict[str, Any] = non_null[0]
            inner_any_of = actual.get("anyOf")
            if isinstance(inner_any_of, list):
                inner = next(
                    (branch for branch in inner_any_of if isinstance(branch, dict) and "not" not in branch),
                    None,
                )
                if inner is not None:
                    actual = inner
            return Unwrapped(actual_schema=actual, is_nullable=True)

    schema_type = schema.get("type")
    if isinstance(schema_type, list) and "null" in schema_type:
        remaining = [t for t in schema_type if t != "null"]
        actual = dict(schema)
        actual["type"] = remaining[0] if len(remaining) == 1 else remaining
        return Unwrapped(actual_schema=actual, is_nullable=True)

    return Unwrapped(actual_schema=schema, is_nullable=False)
