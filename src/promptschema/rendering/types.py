"""Theme protocol and render options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from promptschema.errors import ConfigError
from promptschema.extraction.types import SchemaModel

__all__ = ["RenderOptions", "Theme"]


@dataclass(frozen=True)
class RenderOptions:
    """Render settings.

    Attributes:
        indent_size: Spaces per nesting level. For the json theme this is the
            serializer indent, where 0 produces compact output.
    """

    indent_size: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.indent_size, bool) or not isinstance(self.indent_size, int):
            raise ConfigError(message=f"indent_size must be an integer, got {type(self.indent_size).__name__}")
        if self.indent_size < 0:
            raise ConfigError(message=f"indent_size must be >= 0, got {self.indent_size}")


@runtime_checkable
class Theme(Protocol):
    """Protocol for named rendering strategies."""

    name: str
    description: str

    def render(self, model: SchemaModel, options: RenderOptions | None = None) -> str:
        """Render a complete model to text."""
        ...
