"""Tests for Config."""

from __future__ import annotations

from pathlib import Path

import pytest

from promptschema.config import Config
from promptschema.errors import ConfigError, ConfigNotFoundError
from promptschema.extraction import ExtractOptions
from promptschema.rendering import RenderOptions


class TestGet:
    def test_dot_path(self) -> None:
        config = Config({"render": {"theme": "expanded"}})
        assert config.get("render.theme") == "expanded"

    def test_missing_key_default(self) -> None:
        assert Config().get("render.theme", "x") == "x"

    def test_non_mapping_segment(self) -> None:
        assert Config({"render": "flat"}).get("render.theme") is None


class TestDerivedOptions:
    def test_defaults(self) -> None:
        config = Config()
        assert config.extract_options() == ExtractOptions()
        assert config.render_options() == RenderOptions()
        assert config.theme() == "standard"

    def test_values(self) -> None:
        config = Config(
            {
                "extract": {"max_depth": 5, "include_defaults": True},
                "render": {"theme": "condensed", "indent_size": 4},
            }
        )
        assert config.extract_options() == ExtractOptions(max_depth=5, include_defaults=True)
        assert config.render_options() == RenderOptions(indent_size=4)
        assert config.theme() == "condensed"

    def test_negative_depth(self) -> None:
        with pytest.raises(ConfigError):
            Config({"extract": {"max_depth": -1}}).extract_options()

    def test_non_integer_indent(self) -> None:
        with pytest.raises(ConfigError):
            Config({"render": {"indent_size": "2"}}).render_options()

    def test_boolean_indent_rejected(self) -> None:
        with pytest.raises(ConfigError):
            Config({"render": {"indent_size": True}}).render_options()

    def test_non_boolean_include_defaults(self) -> None:
        with pytest.raises(ConfigError):
            Config({"extract": {"include_defaults": "yes"}}).extract_options()

    def test_bad_theme(self) -> None:
        with pytest.raises(ConfigError):
            Config({"render": {"theme": 3}}).theme()


class TestLoad:
    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "promptschema.yaml"
        path.write_text("extract:\n  max_depth: 2\nrender:\n  theme: json\n")
        config = Config.load(path)
        assert config.extract_options().max_depth == 2
        assert config.theme() == "json"

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "promptschema.json"
        path.write_text('{"render": {"indent_size": 0}}')
        assert Config.load(path).render_options().indent_size == 0

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Config.load(path).theme() == "standard"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError) as exc_info:
            Config.load(tmp_path / "nope.yaml")
        assert exc_info.value.details["config_path"].endswith("nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("render: [unclosed\n")
        with pytest.raises(ConfigError):
            Config.load(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            Config.load(path)
