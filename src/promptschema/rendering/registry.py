"""Theme registry: name-keyed lookup of rendering strategies."""

from __future__ import annotations

import logging
import threading

from promptschema.errors import ThemeNotFoundError
from promptschema.extraction.types import SchemaModel
from promptschema.rendering.condensed import CondensedTheme
from promptschema.rendering.expanded import ExpandedTheme
from promptschema.rendering.json_theme import JsonTheme
from promptschema.rendering.standard import StandardTheme
from promptschema.rendering.types import RenderOptions, Theme

__all__ = ["DEFAULT_THEME", "ThemeRegistry", "default_registry", "render"]

logger = logging.getLogger(__name__)

DEFAULT_THEME = "standard"


class ThemeRegistry:
    """Thread-safe mapping of theme names to Theme implementations.

    Registering a theme under an existing name replaces it. Names are listed
    in registration order.
    """

    def __init__(self, include_builtin: bool = True) -> None:
        self._themes: dict[str, Theme] = {}
        self._write_lock = threading.RLock()
        if include_builtin:
            for theme in (StandardTheme(), ExpandedTheme(), CondensedTheme(), JsonTheme()):
                self.register(theme)

    def register(self, theme: Theme) -> ThemeRegistry:
        """Register a theme under its ``name``. Returns the registry for chaining."""
        if not theme.name:
            raise ValueError("Theme name must be a non-empty string")
        with self._write_lock:
            replaced = theme.name in self._themes
            self._themes[theme.name] = theme
        logger.debug(f"{'Replaced' if replaced else 'Registered'} theme '{theme.name}'")
        return self

    def unregister(self, name: str) -> bool:
        """Remove a theme. Returns False if it was not registered."""
        with self._write_lock:
            if name not in self._themes:
                return False
            del self._themes[name]
        logger.debug(f"Unregistered theme '{name}'")
        return True

    def get(self, name: str) -> Theme | None:
        with self._write_lock:
            return self._themes.get(name)

    def has(self, name: str) -> bool:
        with self._write_lock:
            return name in self._themes

    def list(self) -> list[str]:
        with self._write_lock:
            return list(self._themes)

    def render(self, model: SchemaModel, theme_name: str, options: RenderOptions | None = None) -> str:
        """Render a model with the named theme.

        Raises:
            ThemeNotFoundError: If no theme is registered under ``theme_name``.
        """
        theme = self.get(theme_name)
        if theme is None:
            raise ThemeNotFoundError(theme=theme_name, available=self.list())
        return theme.render(model, options)


default_registry = ThemeRegistry()


def render(model: SchemaModel, theme: str = DEFAULT_THEME, options: RenderOptions | None = None) -> str:
    """Render a model with one of the themes in ``default_registry``."""
    return default_registry.render(model, theme, options)
