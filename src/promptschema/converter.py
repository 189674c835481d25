"""High-level conversion of schema values into prompt text."""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Any

from promptschema.adapters import JsonSchemaAdapter, PydanticAdapter, SchemaAdapter, SchemaFileAdapter
from promptschema.config import Config
from promptschema.errors import AdapterNotFoundError
from promptschema.extraction import ExtractOptions, SchemaModel, extract_model
from promptschema.rendering import RenderOptions, ThemeRegistry, default_registry

__all__ = ["FALLBACK_PROMPT", "PromptSchema", "get_prompts"]

logger = logging.getLogger(__name__)

FALLBACK_PROMPT = "## Schema\n\nProvide valid JSON matching the expected structure."


class PromptSchema:
    """Converts schema values into prompt text through registered adapters.

    Adapters are consulted most-recently-registered first; the first whose
    ``can_handle`` accepts the value produces the JSON Schema document, which
    is then extracted and rendered. Explicit keyword arguments override the
    values from ``config``, which override the built-in defaults.

    Args:
        config: Settings for extraction depth, defaults, theme and indent.
        registry: Theme registry to render with. Defaults to ``default_registry``.
    """

    def __init__(self, config: Config | None = None, registry: ThemeRegistry | None = None) -> None:
        self._config = config if config is not None else Config()
        self._registry = registry if registry is not None else default_registry
        self._adapters: list[SchemaAdapter] = []
        self._write_lock = threading.RLock()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def registry(self) -> ThemeRegistry:
        return self._registry

    @property
    def adapters(self) -> list[str]:
        """Names of the registered adapters in lookup order."""
        with self._write_lock:
            return [adapter.name for adapter in self._adapters]

    def register_adapter(self, adapter: SchemaAdapter) -> PromptSchema:
        """Register an adapter ahead of all previously registered ones."""
        with self._write_lock:
            self._adapters.insert(0, adapter)
        logger.debug(f"Registered adapter '{adapter.name}'")
        return self

    def find_adapter(self, value: Any) -> SchemaAdapter | None:
        """Return the first adapter that accepts ``value``, or None.

        An adapter whose ``can_handle`` raises is skipped.
        """
        with self._write_lock:
            adapters = list(self._adapters)
        for adapter in adapters:
            try:
                handles = adapter.can_handle(value)
            except Exception as e:
                logger.debug(f"Adapter '{adapter.name}' failed while checking value: {e}")
                continue
            if handles:
                logger.debug(f"Selected adapter '{adapter.name}' for {type(value).__name__}")
                return adapter
        return None

    def to_json_schema(self, value: Any) -> dict[str, Any]:
        """Convert a schema value into a JSON Schema document.

        Raises:
            AdapterNotFoundError: If no registered adapter accepts the value.
        """
        adapter = self.find_adapter(value)
        if adapter is None:
            raise AdapterNotFoundError(adapters=self.adapters)
        return adapter.to_json_schema(value)

    def extract(
        self,
        value: Any,
        max_depth: int | None = None,
        include_defaults: bool | None = None,
    ) -> SchemaModel:
        """Convert a schema value and extract it into a SchemaModel."""
        options = self._config.extract_options()
        overrides: dict[str, Any] = {}
        if max_depth is not None:
            overrides["max_depth"] = max_depth
        if include_defaults is not None:
            overrides["include_defaults"] = include_defaults
        if overrides:
            options = dataclasses.replace(options, **overrides)
        return extract_model(self.to_json_schema(value), options)

    def to_prompt(
        self,
        value: Any,
        theme: str | None = None,
        max_depth: int | None = None,
        include_defaults: bool | None = None,
        indent_size: int | None = None,
    ) -> str:
        """Convert a schema value into prompt text.

        Raises:
            AdapterNotFoundError: If no registered adapter accepts the value.
            ThemeNotFoundError: If the theme is not registered.
            ConfigError: If an option is invalid.
        """
        model = self.extract(value, max_depth=max_depth, include_defaults=include_defaults)
        render_options = (
            RenderOptions(indent_size=indent_size) if indent_size is not None else self._config.render_options()
        )
        theme_name = theme if theme is not None else self._config.theme()
        return self._registry.render(model, theme_name, render_options)


def get_prompts(
    value: Any,
    theme: str | None = None,
    max_depth: int | None = None,
    safe: bool = False,
    config: Config | None = None,
) -> str:
    """One-shot conversion with the built-in file, JSON Schema and pydantic adapters.

    Args:
        value: A JSON Schema mapping, a pydantic model or TypeAdapter, or a schema file path.
        theme: Theme name; defaults to ``render.theme`` from config, then ``standard``.
        max_depth: Extraction depth bound; defaults to config, then 3.
        safe: When True, any failure is logged and ``FALLBACK_PROMPT`` is returned.
        config: Optional settings.
    """
    converter = (
        PromptSchema(config=config)
        .register_adapter(PydanticAdapter())
        .register_adapter(JsonSchemaAdapter())
        .register_adapter(SchemaFileAdapter())
    )
    if not safe:
        return converter.to_prompt(value, theme=theme, max_depth=max_depth)
    try:
        return converter.to_prompt(value, theme=theme, max_depth=max_depth)
    except Exception as e:
        logger.warning(f"Failed to convert schema: {e}")
        return FALLBACK_PROMPT
