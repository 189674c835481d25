"""Adapter for schema documents stored in YAML or JSON files."""

from __future__ import annotations

from pathlib import PurePath
from typing import Any

from promptschema.loader import SCHEMA_FILE_SUFFIXES, load_document

__all__ = ["SchemaFileAdapter"]


class SchemaFileAdapter:
    """Accepts ``pathlib`` paths ending in ``.json``, ``.yaml`` or ``.yml``.

    Plain strings are not accepted, so a path is never mistaken for data.
    """

    name = "file"

    def can_handle(self, value: Any) -> bool:
        return isinstance(value, PurePath) and value.suffix.lower() in SCHEMA_FILE_SUFFIXES

    def to_json_schema(self, value: Any) -> dict[str, Any]:
        return load_document(value)
