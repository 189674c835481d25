"""Loading JSON Schema documents from YAML or JSON files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from promptschema.errors import SchemaNotFoundError, SchemaParseError

__all__ = ["SCHEMA_FILE_SUFFIXES", "load_document"]

logger = logging.getLogger(__name__)

SCHEMA_FILE_SUFFIXES = frozenset({".json", ".yaml", ".yml"})


def load_document(path: str | Path) -> dict[str, Any]:
    """Load a schema document from disk.

    JSON is parsed with the YAML loader, which accepts it as a subset.
    An empty file yields an empty document.

    Raises:
        SchemaNotFoundError: If the file does not exist.
        SchemaParseError: If the file is not valid YAML/JSON or its root is not a mapping.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SchemaNotFoundError(schema_id=str(file_path))

    content = file_path.read_text(encoding="utf-8")
    if not content.strip():
        logger.debug(f"Schema file {file_path} is empty")
        return {}

    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SchemaParseError(message=f"Invalid YAML in {file_path}: {e}", cause=e) from e

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise SchemaParseError(message=f"Schema file {file_path} must be a mapping, got {type(parsed).__name__}")
    return parsed
