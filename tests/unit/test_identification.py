#!/usr/bin/env python3
"""
Tests for deferred identification: memory first, then fallback rules, then Ident.
"""

import pytest
from rust_highlight.passes.identification import (
    DEFAULT_FALLBACK_RULES,
    FallbackRules,
    Resolver,
)
from rust_highlight.shared.categories import Category
from rust_highlight.shared.errors import HighlightImplementationError
from rust_highlight.shared.identifier_memory import IdentifierMemory
from rust_highlight.shared.span_registry import DeferredIdent, IdentPosition, SpanRegistry


def _frozen(**names) -> IdentifierMemory:
    memory = IdentifierMemory()
    for name, category in names.items():
        memory.declare(name, category)
    memory.freeze()
    return memory


class TestFallbackRules:
    def test_default_conventional_names(self):
        for name in ("Ok", "Err", "Some", "None"):
            assert DEFAULT_FALLBACK_RULES.lookup(name, IdentPosition.BARE_PATH) is Category.ENUM
        assert DEFAULT_FALLBACK_RULES.lookup("self", IdentPosition.BARE_PATH) is Category.SELF_TOKEN
        assert DEFAULT_FALLBACK_RULES.lookup("Self", IdentPosition.PATH_TAIL) is Category.SELF_TOKEN

    def test_unknown_name_has_no_fallback(self):
        assert DEFAULT_FALLBACK_RULES.lookup("foo", IdentPosition.CALL_TARGET) is None

    def test_position_default(self):
        rules = FallbackRules(positions={IdentPosition.CALL_TARGET: Category.FUNCTION})
        assert rules.lookup("anything", IdentPosition.CALL_TARGET) is Category.FUNCTION
        assert rules.lookup("anything", IdentPosition.BARE_PATH) is None

    def test_name_beats_position(self):
        rules = FallbackRules(
            names={"Some": Category.ENUM},
            positions={IdentPosition.CALL_TARGET: Category.FUNCTION},
        )
        assert rules.lookup("Some", IdentPosition.CALL_TARGET) is Category.ENUM

    def test_extend_layers_on_top(self):
        rules = DEFAULT_FALLBACK_RULES.extend(
            names={"String": Category.TYPE, "Ok": Category.FUNCTION},
        )
        assert rules.lookup("String", IdentPosition.BARE_PATH) is Category.TYPE
        assert rules.lookup("Ok", IdentPosition.BARE_PATH) is Category.FUNCTION
        assert rules.lookup("Err", IdentPosition.BARE_PATH) is Category.ENUM
        # the original is untouched
        assert DEFAULT_FALLBACK_RULES.lookup("String", IdentPosition.BARE_PATH) is None

    def test_non_resolvable_category_rejected(self):
        with pytest.raises(HighlightImplementationError):
            FallbackRules(names={"x": Category.COMMENT})
        with pytest.raises(HighlightImplementationError):
            FallbackRules(positions={IdentPosition.PATTERN: Category.NEED_IDENTIFICATION})


class TestResolver:
    def test_memory_beats_fallback(self):
        resolver = Resolver(_frozen(Some=Category.FUNCTION))
        assert resolver.identify(DeferredIdent("Some", IdentPosition.CALL_TARGET)) is Category.FUNCTION

    def test_fallback_without_memory(self):
        resolver = Resolver(_frozen())
        assert resolver.identify(DeferredIdent("Ok", IdentPosition.CALL_TARGET)) is Category.ENUM

    def test_default_is_ident(self):
        resolver = Resolver(_frozen())
        assert resolver.identify(DeferredIdent("value", IdentPosition.BARE_PATH)) is Category.IDENT

    def test_empty_rules_fall_through_to_ident(self):
        resolver = Resolver(_frozen(), FallbackRules())
        assert resolver.identify(DeferredIdent("Ok", IdentPosition.CALL_TARGET)) is Category.IDENT

    def test_resolve_keys_by_start(self):
        registry = SpanRegistry()
        registry.defer(0, 6, "helper", IdentPosition.CALL_TARGET)
        registry.defer(10, 12, "Ok", IdentPosition.CALL_TARGET)
        registry.defer(20, 21, "x", IdentPosition.BARE_PATH)
        resolver = Resolver(_frozen(helper=Category.FUNCTION, x=Category.IDENT))
        assert resolver.resolve(registry) == {
            0: Category.FUNCTION,
            10: Category.ENUM,
            20: Category.IDENT,
        }

    def test_resolution_is_deterministic(self):
        registry = SpanRegistry()
        for i, name in enumerate(["a", "Some", "helper", "Point", "None"]):
            registry.defer(i * 10, i * 10 + len(name), name, IdentPosition.BARE_PATH)
        resolver = Resolver(_frozen(helper=Category.FUNCTION, Point=Category.TYPE))
        assert resolver.resolve(registry) == resolver.resolve(registry)

    def test_resolve_requires_frozen_memory(self):
        registry = SpanRegistry()
        registry.defer(0, 1, "x", IdentPosition.BARE_PATH)
        with pytest.raises(HighlightImplementationError):
            Resolver(IdentifierMemory()).resolve(registry)
