"""promptschema extraction engine -- public API.

Turns a JSON Schema document into a depth-bounded tree of Fields.

Example usage::

    from promptschema.extraction import ExtractOptions, extract_model

    model = extract_model({"type": "object", "properties": {"name": {"type": "string"}}})
"""

from __future__ import annotations

from promptschema.extraction.classifier import classify, variant_type_name
from promptschema.extraction.constraints import extract_constraints
from promptschema.extraction.fields import (
    extract_array_field,
    extract_array_item_type,
    extract_field,
    extract_object_fields,
    extract_union_field,
)
from promptschema.extraction.model import extract_model
from promptschema.extraction.nullability import Unwrapped, unwrap_nullable
from promptschema.extraction.types import (
    NO_DEFAULT,
    ArrayPayload,
    Constraint,
    DiscriminatedUnionPayload,
    EnumPayload,
    Example,
    ExtractOptions,
    Field,
    FieldKind,
    ModelMetadata,
    ObjectPayload,
    RecordPayload,
    SchemaModel,
    TuplePayload,
    TypeRef,
    UnionPayload,
    UnionVariant,
)
from promptschema.extraction.unions import UnionResolution, find_discriminator, resolve_union

__all__ = [
    "FieldKind",
    "TypeRef",
    "Constraint",
    "Example",
    "UnionVariant",
    "EnumPayload",
    "ObjectPayload",
    "ArrayPayload",
    "TuplePayload",
    "RecordPayload",
    "UnionPayload",
    "DiscriminatedUnionPayload",
    "Field",
    "ModelMetadata",
    "SchemaModel",
    "ExtractOptions",
    "NO_DEFAULT",
    "Unwrapped",
    "UnionResolution",
    "classify",
    "variant_type_name",
    "unwrap_nullable",
    "extract_constraints",
    "find_discriminator",
    "resolve_union",
    "extract_field",
    "extract_object_fields",
    "extract_array_field",
    "extract_array_item_type",
    "extract_union_field",
    "extract_model",
]
