"""Adapter for pydantic models and TypeAdapters."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, PydanticUserError, TypeAdapter
from pydantic.json_schema import JsonSchemaMode

from promptschema.adapters.ref_inliner import inline_local_refs
from promptschema.errors import SchemaConversionError

__all__ = ["PydanticAdapter"]

logger = logging.getLogger(__name__)


class PydanticAdapter:
    """Turns pydantic models into self-contained JSON Schema documents.

    Accepts ``BaseModel`` subclasses, ``BaseModel`` instances and
    ``TypeAdapter`` instances. The generated schema has its local ``$ref``
    pointers inlined so the extractor sees nested models directly.

    Args:
        mode: ``"validation"`` (input shape) or ``"serialization"`` (output shape).
    """

    name = "pydantic"

    def __init__(self, mode: JsonSchemaMode = "validation") -> None:
        self._mode: JsonSchemaMode = mode

    def can_handle(self, value: Any) -> bool:
        if isinstance(value, type):
            return issubclass(value, BaseModel)
        return isinstance(value, (BaseModel, TypeAdapter))

    def to_json_schema(self, value: Any) -> dict[str, Any]:
        """Generate and inline the JSON Schema for a pydantic value.

        Raises:
            SchemaConversionError: If pydantic cannot produce a JSON Schema for the value.
        """
        try:
            if isinstance(value, TypeAdapter):
                raw = value.json_schema(mode=self._mode)
            else:
                model = value if isinstance(value, type) else type(value)
                raw = model.model_json_schema(mode=self._mode)
        except PydanticUserError as e:
            raise SchemaConversionError(adapter=self.name, reason=str(e), cause=e) from e

        logger.debug(f"Generated {self._mode} schema with {len(raw.get('$defs', {}))} definition(s)")
        return inline_local_refs(raw)
