"""Top-level extraction of a JSON Schema document into a SchemaModel."""

from __future__ import annotations

import logging
from typing import Any

from promptschema.extraction.classifier import has_union
from promptschema.extraction.fields import (
    extract_array_field,
    extract_field,
    extract_object_fields,
    extract_union_field,
)
from promptschema.extraction.types import ExtractOptions, ModelMetadata, SchemaModel

__all__ = ["ROOT_FIELD_NAME", "extract_model"]

logger = logging.getLogger(__name__)

ROOT_FIELD_NAME = "root"


def _metadata_of(document: dict[str, Any]) -> ModelMetadata:
    examples = document.get("examples")
    return ModelMetadata(
        title=document.get("title"),
        description=document.get("description"),
        examples=tuple(examples) if isinstance(examples, list) else None,
    )


def extract_model(document: Any, options: ExtractOptions | None = None) -> SchemaModel:
    """Extract a JSON Schema document into a SchemaModel.

    Object roots contribute one field per property; array roots, union roots
    and anything else become a single field named ``root``. Document-level
    title, description and examples are always attached as metadata.

    Args:
        document: The JSON Schema document. Non-mapping values are treated as empty.
        options: Extraction options; defaults to ``ExtractOptions()``.

    Returns:
        A new SchemaModel. The document is never modified.
    """
    opts = options if options is not None else ExtractOptions()
    doc: dict[str, Any] = document if isinstance(document, dict) else {}

    if doc.get("type") == "object" and isinstance(doc.get("properties"), dict):
        fields = extract_object_fields(doc, opts, 0)
    elif doc.get("type") == "array" and isinstance(doc.get("items"), dict):
        fields = (extract_array_field(ROOT_FIELD_NAME, doc, True, opts, 0),)
    elif has_union(doc):
        fields = (extract_union_field(ROOT_FIELD_NAME, doc, True, opts, 0),)
    else:
        # Primitives, enums, records and positional (tuple) roots.
        fields = (extract_field(ROOT_FIELD_NAME, doc, True, opts, 0),)

    logger.debug(f"Extracted {len(fields)} top-level field(s) with max_depth={opts.max_depth}")
    return SchemaModel(fields=fields, metadata=_metadata_of(doc))
