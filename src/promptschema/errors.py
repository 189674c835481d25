"""Error hierarchy for the promptschema package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
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


class PromptSchemaError(Exception):
    """Base error for all promptschema errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigError(PromptSchemaError):
    """Raised when extraction, render or file configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ConfigNotFoundError(PromptSchemaError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ThemeNotFoundError(PromptSchemaError):
    """Raised when a render is requested with a theme name nobody registered."""

    def __init__(self, theme: str, available: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="THEME_NOT_FOUND",
            message=f"Theme '{theme}' not found. Available: {', '.join(available)}",
            details={"theme": theme, "available": list(available)},
            **kwargs,
        )

    @property
    def theme(self) -> str:
        """The theme name that was requested."""
        return self.details["theme"]

    @property
    def available(self) -> list[str]:
        """The theme names that were registered at lookup time."""
        return self.details["available"]


class AdapterNotFoundError(PromptSchemaError):
    """Raised when no registered adapter accepts a schema value."""

    def __init__(self, adapters: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="ADAPTER_NOT_FOUND",
            message=f"No adapter found for schema. Registered adapters: {', '.join(adapters)}",
            details={"adapters": list(adapters)},
            **kwargs,
        )


class SchemaConversionError(PromptSchemaError):
    """Raised when an adapter fails to turn a schema value into a JSON Schema document."""

    def __init__(self, adapter: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="SCHEMA_CONVERSION_FAILED",
            message=f"Adapter '{adapter}' failed to convert schema: {reason}",
            details={"adapter": adapter, "reason": reason},
            **kwargs,
        )


class SchemaNotFoundError(PromptSchemaError):
    """Raised when a schema file or a local reference target cannot be found."""

    def __init__(self, schema_id: str, **kwargs: Any) -> None:
        super().__init__(
            code="SCHEMA_NOT_FOUND",
            message=f"Schema not found: {schema_id}",
            details={"schema_id": schema_id},
            **kwargs,
        )


class SchemaParseError(PromptSchemaError):
    """Raised when a schema file cannot be parsed."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="SCHEMA_PARSE_ERROR", message=message, **kwargs)


class ErrorCodes:
    """All promptschema error codes as constants.

    Example:
        if error.code == ErrorCodes.THEME_NOT_FOUND:
            fall_back_to_standard()
    """

    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    THEME_NOT_FOUND = "THEME_NOT_FOUND"
    ADAPTER_NOT_FOUND = "ADAPTER_NOT_FOUND"
    SCHEMA_CONVERSION_FAILED = "SCHEMA_CONVERSION_FAILED"
    SCHEMA_NOT_FOUND = "SCHEMA_NOT_FOUND"
    SCHEMA_PARSE_ERROR = "SCHEMA_PARSE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
