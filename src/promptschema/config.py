"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from promptschema.errors import ConfigError, ConfigNotFoundError
from promptschema.extraction.types import ExtractOptions
from promptschema.rendering.registry import DEFAULT_THEME
from promptschema.rendering.types import RenderOptions

__all__ = ["Config"]

_DEFAULTS: dict[str, Any] = {
    "extract": {"max_depth": 3, "include_defaults": False},
    "render": {"theme": DEFAULT_THEME, "indent_size": 2},
}


class Config:
    """Configuration accessor with dot-path key support.

    Recognised keys are ``extract.max_depth``, ``extract.include_defaults``,
    ``render.theme`` and ``render.indent_size``. Missing keys fall back to
    the built-in defaults; unknown keys are kept and ignored.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Load configuration from a YAML (or JSON) file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML or its root is not a mapping.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigNotFoundError(config_path=str(file_path))
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in {file_path}: {e}", cause=e) from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(message=f"Config file {file_path} must be a mapping, got {type(data).__name__}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def _get_or_default(self, key: str) -> Any:
        section, name = key.split(".", 1)
        return self.get(key, _DEFAULTS[section][name])

    def extract_options(self) -> ExtractOptions:
        """Build ExtractOptions from the ``extract`` section.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        include_defaults = self._get_or_default("extract.include_defaults")
        if not isinstance(include_defaults, bool):
            raise ConfigError(message=f"extract.include_defaults must be a boolean, got {include_defaults!r}")
        return ExtractOptions(
            max_depth=self._get_or_default("extract.max_depth"),
            include_defaults=include_defaults,
        )

    def render_options(self) -> RenderOptions:
        return RenderOptions(indent_size=self._get_or_default("render.indent_size"))

    def theme(self) -> str:
        theme = self._get_or_default("render.theme")
        if not isinstance(theme, str) or not theme:
            raise ConfigError(message=f"render.theme must be a non-empty string, got {theme!r}")
        return theme
