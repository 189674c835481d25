"""Adapters converting schema sources into JSON Schema documents."""

from __future__ import annotations

from promptschema.adapters.base import SchemaAdapter
from promptschema.adapters.file_adapter import SchemaFileAdapter
from promptschema.adapters.json_schema import JsonSchemaAdapter
from promptschema.adapters.pydantic_adapter import PydanticAdapter
from promptschema.adapters.ref_inliner import inline_local_refs

__all__ = [
    "SchemaAdapter",
    "JsonSchemaAdapter",
    "PydanticAdapter",
    "SchemaFileAdapter",
    "inline_local_refs",
]
