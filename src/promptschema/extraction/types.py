"""Field tree types produced by extraction and consumed by the themes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from promptschema.errors import ConfigError

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
]


class FieldKind(str, Enum):
    """Closed set of field kinds a schema node can be classified as."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    ENUM = "enum"
    DATE = "date"
    UNION = "union"
    DISCRIMINATED_UNION = "discriminated-union"
    RECORD = "record"
    TUPLE = "tuple"
    ANY = "any"

    def __str__(self) -> str:
        return self.value


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()

# A bare scalar type name taken from the schema (e.g. "string", "null") or a nested Field.
TypeRef = Union[str, "Field"]


@dataclass(frozen=True)
class Constraint:
    """One validation constraint with its display fragment.

    Attributes:
        kind: One of minLength, maxLength, pattern, format, min, max, minItems, maxItems.
        value: The raw value from the schema.
        display: Human-readable fragment, e.g. "min 3 chars".
    """

    kind: str
    value: Any
    display: str

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Example:
    """A documented example value, marked valid or invalid."""

    value: Any
    is_correct: bool = True
    description: str | None = None

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class UnionVariant:
    """One branch of a discriminated union, keyed by its tag value."""

    discriminator_value: str
    fields: tuple[Field, ...] = ()


@dataclass(frozen=True)
class EnumPayload:
    """Allowed literal values. ``discriminator`` is set for ``const`` tag fields."""

    values: tuple[str, ...] = ()
    discriminator: str | None = None


@dataclass(frozen=True)
class ObjectPayload:
    fields: tuple[Field, ...] = ()


@dataclass(frozen=True)
class ArrayPayload:
    item: TypeRef


@dataclass(frozen=True)
class TuplePayload:
    items: tuple[TypeRef, ...] = ()


@dataclass(frozen=True)
class RecordPayload:
    value: TypeRef
    key: str = "string"


@dataclass(frozen=True)
class UnionPayload:
    """Plain union alternatives plus the coarse per-branch type names."""

    types: tuple[TypeRef, ...] = ()
    type_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiscriminatedUnionPayload:
    discriminator: str
    variants: tuple[UnionVariant, ...] = ()


Payload = Union[
    EnumPayload,
    ObjectPayload,
    ArrayPayload,
    TuplePayload,
    RecordPayload,
    UnionPayload,
    DiscriminatedUnionPayload,
]

_PAYLOAD_KINDS: dict[type, FieldKind] = {
    EnumPayload: FieldKind.ENUM,
    ObjectPayload: FieldKind.OBJECT,
    ArrayPayload: FieldKind.ARRAY,
    TuplePayload: FieldKind.TUPLE,
    RecordPayload: FieldKind.RECORD,
    UnionPayload: FieldKind.UNION,
    DiscriminatedUnionPayload: FieldKind.DISCRIMINATED_UNION,
}


@dataclass(frozen=True)
class Field:
    """A node of the extracted documentation tree.

    The type-specific data lives in ``payload``, whose class must match
    ``kind``. A payload may be absent, e.g. for primitives or for objects
    and unions past the depth bound. The accessor properties return ``None``
    when the payload does not apply.

    Fields compare by value but are not hashable: defaults, examples and
    constraint values may be lists or dicts.
    """

    name: str
    kind: FieldKind
    is_required: bool = False
    is_nullable: bool = False
    payload: Payload | None = None
    description: str | None = None
    constraints: tuple[Constraint, ...] = ()
    examples: tuple[Example, ...] = ()
    default_value: Any = NO_DEFAULT

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.payload is not None:
            expected = _PAYLOAD_KINDS.get(type(self.payload))
            if expected is not self.kind:
                raise ValueError(
                    f"Field '{self.name}' of kind '{self.kind.value}' cannot carry {type(self.payload).__name__}"
                )

    @property
    def has_default(self) -> bool:
        return self.default_value is not NO_DEFAULT

    @property
    def enum_values(self) -> tuple[str, ...] | None:
        if isinstance(self.payload, EnumPayload):
            return self.payload.values
        return None

    @property
    def object_fields(self) -> tuple[Field, ...] | None:
        if isinstance(self.payload, ObjectPayload):
            return self.payload.fields
        return None

    @property
    def array_item_type(self) -> TypeRef | None:
        if isinstance(self.payload, ArrayPayload):
            return self.payload.item
        return None

    @property
    def tuple_items(self) -> tuple[TypeRef, ...] | None:
        if isinstance(self.payload, TuplePayload):
            return self.payload.items
        return None

    @property
    def record_key_type(self) -> str | None:
        if isinstance(self.payload, RecordPayload):
            return self.payload.key
        return None

    @property
    def record_value_type(self) -> TypeRef | None:
        if isinstance(self.payload, RecordPayload):
            return self.payload.value
        return None

    @property
    def union_types(self) -> tuple[TypeRef, ...] | None:
        if isinstance(self.payload, UnionPayload):
            return self.payload.types
        return None

    @property
    def union_variants(self) -> tuple[UnionVariant, ...] | None:
        if isinstance(self.payload, DiscriminatedUnionPayload):
            return self.payload.variants
        return None

    @property
    def discriminator_field(self) -> str | None:
        """Tag property name: the field's own name for ``const`` fields, the tag for discriminated unions."""
        if isinstance(self.payload, EnumPayload):
            return self.payload.discriminator
        if isinstance(self.payload, DiscriminatedUnionPayload):
            return self.payload.discriminator
        return None


@dataclass(frozen=True)
class ModelMetadata:
    title: str | None = None
    description: str | None = None
    examples: tuple[Any, ...] | None = None

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class SchemaModel:
    """Root container of an extracted field tree plus document metadata."""

    fields: tuple[Field, ...] = ()
    metadata: ModelMetadata = field(default_factory=ModelMetadata)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class ExtractOptions:
    """Extraction settings.

    Attributes:
        max_depth: Nesting depth past which objects, arrays and unions are not expanded.
        include_defaults: Whether to attach schema ``default`` values to fields.
    """

    max_depth: int = 3
    include_defaults: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ConfigError(message=f"max_depth must be an integer, got {type(self.max_depth).__name__}")
        if self.max_depth < 0:
            raise ConfigError(message=f"max_depth must be >= 0, got {self.max_depth}")
