"""promptschema - JSON Schema to LLM-readable prompt documentation."""

from __future__ import annotations

# Extraction
from promptschema.extraction import (
    Constraint,
    Example,
    ExtractOptions,
    Field,
    FieldKind,
    ModelMetadata,
    SchemaModel,
    UnionVariant,
    extract_model,
)

# Rendering
from promptschema.rendering import (
    CondensedTheme,
    ExpandedTheme,
    JsonTheme,
    RenderOptions,
    StandardTheme,
    Theme,
    ThemeRegistry,
    default_registry,
    render,
)

# Adapters
from promptschema.adapters import (
    JsonSchemaAdapter,
    PydanticAdapter,
    SchemaAdapter,
    SchemaFileAdapter,
    inline_local_refs,
)

# Conversion
from promptschema.converter import FALLBACK_PROMPT, PromptSchema, get_prompts

# Config
from promptschema.config import Config
from promptschema.loader import load_document

# Errors
from promptschema.errors import (
    AdapterNotFoundError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    PromptSchemaError,
    SchemaConversionError,
    SchemaNotFoundError,
    SchemaParseError,
    ThemeNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Extraction
    "FieldKind",
    "Field",
    "Constraint",
    "Example",
    "UnionVariant",
    "ModelMetadata",
    "SchemaModel",
    "ExtractOptions",
    "extract_model",
    # Rendering
    "Theme",
    "RenderOptions",
    "StandardTheme",
    "ExpandedTheme",
    "CondensedTheme",
    "JsonTheme",
    "ThemeRegistry",
    "default_registry",
    "render",
    # Adapters
    "SchemaAdapter",
    "JsonSchemaAdapter",
    "PydanticAdapter",
    "SchemaFileAdapter",
    "inline_local_refs",
    # Conversion
    "PromptSchema",
    "get_prompts",
    "FALLBACK_PROMPT",
    # Config
    "Config",
    "load_document",
    # Errors
    "PromptSchemaError",
    "ConfigError",
    "ConfigNotFoundError",
    "ThemeNotFoundError",
    "AdapterNotFoundError",
    "SchemaConversionError",
    "SchemaNotFoundError",
    "SchemaParseError",
    "ErrorCodes",
]
