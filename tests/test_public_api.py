"""Tests for the promptschema public API surface.

Verifies that all expected names are importable from the top-level
``promptschema`` package and that ``__all__`` is comprehensive.
"""

from __future__ import annotations

import re

import pytest

import promptschema


class TestPublicAPIImports:
    @pytest.mark.parametrize(
        "name",
        [
            "extract_model",
            "render",
            "get_prompts",
            "PromptSchema",
            "FieldKind",
            "Field",
            "SchemaModel",
            "ExtractOptions",
            "RenderOptions",
            "ThemeRegistry",
            "default_registry",
            "StandardTheme",
            "ExpandedTheme",
            "CondensedTheme",
            "JsonTheme",
            "JsonSchemaAdapter",
            "PydanticAdapter",
            "SchemaFileAdapter",
            "Config",
            "load_document",
            "ThemeNotFoundError",
            "ErrorCodes",
            "FALLBACK_PROMPT",
        ],
    )
    def test_importable(self, name: str) -> None:
        assert getattr(promptschema, name) is not None

    def test_all_names_resolve(self) -> None:
        for name in promptschema.__all__:
            assert hasattr(promptschema, name), name

    def test_all_has_no_duplicates(self) -> None:
        assert len(promptschema.__all__) == len(set(promptschema.__all__))

    def test_version(self) -> None:
        assert re.fullmatch(r"\d+\.\d+\.\d+", promptschema.__version__)


class TestSubpackageExports:
    def test_extraction(self) -> None:
        from promptschema import extraction

        for name in extraction.__all__:
            assert hasattr(extraction, name), name

    def test_rendering(self) -> None:
        from promptschema import rendering

        for name in rendering.__all__:
            assert hasattr(rendering, name), name

    def test_adapters(self) -> None:
        from promptschema import adapters

        for name in adapters.__all__:
            assert hasattr(adapters, name), name
