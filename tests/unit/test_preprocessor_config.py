#!/usr/bin/env python3
"""
Tests for the preprocessor configuration and code fence features.
"""

import pytest
from rust_highlight.passes.identification import DEFAULT_FALLBACK_RULES
from rust_highlight.preprocessor.config import (
    PreprocessorConfig,
    parse_fallback_names,
    parse_fallback_positions,
)
from rust_highlight.preprocessor.fences import FENCE_PATTERN, feature_string, parse_features
from rust_highlight.shared.categories import Category
from rust_highlight.shared.errors import ConfigError
from rust_highlight.shared.span_registry import IdentPosition
from rust_highlight.utils.config import DEFAULT_FEATURES


def _context(table=None):
    preprocessor = {} if table is None else {"rust-highlight": table}
    return {"root": "/book", "renderer": "html", "config": {"preprocessor": preprocessor}}


class TestPreprocessorConfig:
    def test_defaults_without_table(self):
        config = PreprocessorConfig.from_context(_context())
        assert config.whichlang is True
        assert config.fallback_rules is DEFAULT_FALLBACK_RULES

    def test_missing_config_section(self):
        assert PreprocessorConfig.from_context({}) == PreprocessorConfig()

    def test_whichlang_false(self):
        assert PreprocessorConfig.from_context(_context({"whichlang": False})).whichlang is False

    def test_whichlang_must_be_bool(self):
        with pytest.raises(ConfigError) as exc_info:
            PreprocessorConfig.from_context(_context({"whichlang": "yes"}))
        assert exc_info.value.key == "preprocessor.rust-highlight.whichlang"

    def test_table_must_be_a_table(self):
        with pytest.raises(ConfigError):
            PreprocessorConfig.from_context(_context(["whichlang"]))

    def test_fallback_names_extend_defaults(self):
        config = PreprocessorConfig.from_context(_context({
            "fallback": {"Type": ["String", "Vec"], "function": ["drop"]},
        }))
        rules = config.fallback_rules
        assert rules.lookup("String", IdentPosition.BARE_PATH) is Category.TYPE
        assert rules.lookup("drop", IdentPosition.CALL_TARGET) is Category.FUNCTION
        assert rules.lookup("Ok", IdentPosition.CALL_TARGET) is Category.ENUM

    def test_fallback_positions(self):
        config = PreprocessorConfig.from_context(_context({
            "fallback-positions": {"call-target": "Function"},
        }))
        assert config.fallback_rules.lookup("anything", IdentPosition.CALL_TARGET) is Category.FUNCTION


class TestFallbackParsing:
    def test_names(self):
        assert parse_fallback_names({"Enum": ["Left", "Right"]}) == {
            "Left": Category.ENUM,
            "Right": Category.ENUM,
        }

    def test_unknown_category(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_fallback_names({"Operator": ["+"]})
        assert exc_info.value.key == "preprocessor.rust-highlight.fallback.Operator"

    def test_non_resolvable_category(self):
        with pytest.raises(ConfigError, match="cannot be assigned"):
            parse_fallback_names({"Comment": ["x"]})

    def test_names_must_be_a_list(self):
        with pytest.raises(ConfigError):
            parse_fallback_names({"Type": "String"})

    def test_names_must_be_strings(self):
        with pytest.raises(ConfigError):
            parse_fallback_names({"Type": ["String", 3]})

    def test_not_a_table(self):
        with pytest.raises(ConfigError):
            parse_fallback_names(["Type"])
        with pytest.raises(ConfigError):
            parse_fallback_positions("call-target")

    def test_unknown_position(self):
        with pytest.raises(ConfigError, match="unknown identifier position"):
            parse_fallback_positions({"argument": "Ident"})

    def test_position_category_must_be_a_name(self):
        with pytest.raises(ConfigError, match="expected a category name"):
            parse_fallback_positions({"pattern": 1})


class TestFeatures:
    def test_defaults(self):
        assert parse_features(None) == DEFAULT_FEATURES
        assert parse_features("") == DEFAULT_FEATURES

    def test_override_and_add(self):
        features = parse_features("icon=@custom.svg, editable=true")
        assert features == {"icon": "@custom.svg", "editable": "true"}

    def test_trailing_comma(self):
        assert parse_features("a=1,") == dict(DEFAULT_FEATURES, a="1")

    def test_entry_without_value(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_features("editable", "intro.md#1")
        assert exc_info.value.key == "intro.md#1"

    def test_feature_string_sorted(self):
        assert feature_string({"icon": "@x", "editable": "true"}) == "editable=true icon=@x "
        assert feature_string({}) == ""

    def test_fence_pattern(self):
        content = "```hlrs,a=1\nlet x = 1;\n```\n```rust\nlet y = 2;\n```"
        matches = list(FENCE_PATTERN.finditer(content))
        assert len(matches) == 1
        assert matches[0].group(1) == "a=1"
        assert matches[0].group(2) == "let x = 1;"

    def test_fence_pattern_without_features(self):
        match = FENCE_PATTERN.search("```hlrs\nfn f() {}\n```")
        assert match.group(1) is None
        assert match.group(2) == "fn f() {}"
