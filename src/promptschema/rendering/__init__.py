"""promptschema rendering -- themes that turn a SchemaModel into prompt text."""

from __future__ import annotations

from promptschema.rendering.condensed import CondensedTheme
from promptschema.rendering.expanded import ExpandedTheme
from promptschema.rendering.json_theme import JsonTheme
from promptschema.rendering.registry import DEFAULT_THEME, ThemeRegistry, default_registry, render
from promptschema.rendering.standard import StandardTheme
from promptschema.rendering.types import RenderOptions, Theme

__all__ = [
    "Theme",
    "RenderOptions",
    "StandardTheme",
    "ExpandedTheme",
    "CondensedTheme",
    "JsonTheme",
    "ThemeRegistry",
    "DEFAULT_THEME",
    "default_registry",
    "render",
]
