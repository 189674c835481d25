"""Tests for load_document."""

from __future__ import annotations

from pathlib import Path

import pytest

from promptschema.errors import SchemaNotFoundError, SchemaParseError
from promptschema.loader import load_document


class TestLoadDocument:
    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "s.yaml"
        path.write_text("type: object\nproperties:\n  id:\n    type: integer\n")
        assert load_document(path) == {"type": "object", "properties": {"id": {"type": "integer"}}}

    def test_json_string_path(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text('{"type": "string", "enum": ["a", "b"]}')
        assert load_document(str(path)) == {"type": "string", "enum": ["a", "b"]}

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("  \n")
        assert load_document(path) == {}

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(SchemaNotFoundError):
            load_document(tmp_path / "missing.yaml")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(SchemaNotFoundError):
            load_document(tmp_path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("type: [unclosed\n")
        with pytest.raises(SchemaParseError) as exc_info:
            load_document(path)
        assert exc_info.value.cause is not None

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(SchemaParseError):
            load_document(path)
