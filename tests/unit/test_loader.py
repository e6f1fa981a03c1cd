"""Tests for the YAML macro-file loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from filterql.ast.builder import and_, eq, field, gt, is_empty, macro
from filterql.errors import MacroFileError
from filterql.parser.loader import MacroLoader, load_macros, load_macros_text
from tests.conftest import SAMPLE_MACROS_YAML


class TestLoadMacros:
    def test_load_text(self) -> None:
        macros = load_macros_text(SAMPLE_MACROS_YAML)
        assert set(macros) == {"adults", "named_jerry", "adult_jerry", "never_joined"}
        assert macros["adults"] == gt(field(4), 17)
        assert macros["named_jerry"] == eq(field(2), "Jerry")
        assert macros["adult_jerry"] == and_(macro("adults"), macro("named_jerry"))
        assert macros["never_joined"] == is_empty(field(3))

    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "macros.yaml"
        path.write_text(SAMPLE_MACROS_YAML, encoding="utf-8")
        assert load_macros(path) == load_macros_text(SAMPLE_MACROS_YAML)
        assert load_macros(str(path)) == load_macros_text(SAMPLE_MACROS_YAML)

    def test_null_literal(self) -> None:
        macros = load_macros_text('joined: ["!=", ["field", 3], null]\n')
        assert macros["joined"].values == (None,)

    def test_empty_document(self) -> None:
        assert load_macros_text("") == {}
        assert load_macros_text("# nothing here\n") == {}

    def test_non_string_keys_become_names(self) -> None:
        macros = load_macros_text('42: ["field", 1]\n')
        assert macros == {"42": field(1)}


class TestLoaderErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MacroFileError, match="Cannot read macro file"):
            load_macros(tmp_path / "absent.yaml")

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(MacroFileError, match="must contain a mapping"):
            load_macros_text('- ["field", 1]\n')

    def test_invalid_yaml(self) -> None:
        with pytest.raises(MacroFileError, match="Invalid YAML"):
            load_macros_text("adults: [\">\", [\"field\", 4]\n")

    def test_bad_expression_names_macro(self) -> None:
        with pytest.raises(MacroFileError) as exc_info:
            load_macros_text('broken: ["between", ["field", 4], 1, 2]\n')
        assert "broken" in str(exc_info.value)
        assert exc_info.value.code == "MACRO_FILE"

    def test_anchors_rejected(self) -> None:
        content = 'base: &b [">", ["field", 4], 17]\nagain: *b\n'
        with pytest.raises(MacroFileError, match="anchors"):
            load_macros_text(content)

    def test_document_size_limit(self) -> None:
        content = "x: " + '"' + "a" * 1_000_001 + '"\n'
        with pytest.raises(MacroFileError, match="maximum size"):
            load_macros_text(content)

    def test_depth_limit(self) -> None:
        depth = 80
        raw = '["not", ' * depth + '["field", 1]' + "]" * depth
        with pytest.raises(MacroFileError, match="nesting depth"):
            load_macros_text(f"deep: {raw}\n")

    def test_loader_instance_reusable(self) -> None:
        loader = MacroLoader()
        first = loader.load_string('a: ["field", 1]\n')
        second = loader.load_string('b: ["field", 2]\n')
        assert first == {"a": field(1)}
        assert second == {"b": field(2)}
