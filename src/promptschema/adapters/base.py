"""Schema adapter protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["SchemaAdapter"]


@runtime_checkable
class SchemaAdapter(Protocol):
    """Converts one family of schema values into a JSON Schema document."""

    name: str

    def can_handle(self, value: Any) -> bool:
        """Return True if this adapter understands ``value``."""
        ...

    def to_json_schema(self, value: Any) -> dict[str, Any]:
        """Convert ``value`` into a JSON Schema document."""
        ...
