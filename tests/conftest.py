"""Shared test fixtures for the promptschema test suite."""

from __future__ import annotations

from typing import Any

import pytest

from promptschema.extraction import ExtractOptions


# === Schemas ===


@pytest.fixture
def person_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "number"},
        },
        "required": ["name"],
    }


@pytest.fixture
def text_branch() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "type": {"const": "text"},
            "content": {"type": "string"},
        },
        "required": ["type", "content"],
    }


@pytest.fixture
def image_branch() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "type": {"const": "image"},
            "url": {"type": "string"},
        },
        "required": ["type", "url"],
    }


@pytest.fixture
def block_union(text_branch: dict[str, Any], image_branch: dict[str, Any]) -> dict[str, Any]:
    """Discriminated union over text and image blocks, tagged by ``type``."""
    return {"oneOf": [text_branch, image_branch]}


@pytest.fixture
def message_schema(block_union: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {"block": block_union},
        "required": ["block"],
    }


@pytest.fixture
def options() -> ExtractOptions:
    return ExtractOptions()
