#!/usr/bin/env python3
"""
Tests for the span registry: ordering, degenerate spans, deferred entries,
marker generation and comment registration.
"""

import pytest
from rust_highlight.shared.categories import Category
from rust_highlight.shared.errors import HighlightImplementationError
from rust_highlight.shared.span_registry import (
    DeferredIdent,
    IdentPosition,
    SpanRegistry,
    TagEntry,
    TaggedSpan,
)

END = Category.END_OF_TOKEN


class TestOrdering:
    """(start ascending, end descending, category order)"""

    def test_start_ascending(self):
        registry = SpanRegistry()
        registry.register(10, 12, Category.IDENT)
        registry.register(0, 3, Category.KEYWORD)
        registry.register(4, 5, Category.IDENT)
        assert [(s.start, s.end) for s in registry.spans()] == [(0, 3), (4, 5), (10, 12)]

    def test_wider_span_first_on_shared_start(self):
        registry = SpanRegistry()
        registry.register(0, 3, Category.IDENT)
        registry.register(0, 10, Category.COMMENT)
        spans = registry.spans()
        assert spans[0] == TaggedSpan(0, 10, Category.COMMENT)
        assert spans[1] == TaggedSpan(0, 3, Category.IDENT)

    def test_category_breaks_ties(self):
        registry = SpanRegistry()
        registry.register(2, 5, Category.TYPE)
        registry.register(2, 5, Category.KEYWORD)
        assert [s.category for s in registry.spans()] == [Category.KEYWORD, Category.TYPE]

    def test_category_rank_follows_declaration_order(self):
        ranks = [c.rank for c in Category]
        assert ranks == sorted(ranks)
        assert Category.KEYWORD.rank < Category.IDENT.rank < Category.END_OF_TOKEN.rank

    def test_registration_order_does_not_matter(self):
        spans = [(0, 3, Category.KEYWORD), (4, 5, Category.IDENT), (0, 9, Category.BORING)]
        forward, backward = SpanRegistry(), SpanRegistry()
        for start, end, category in spans:
            forward.register(start, end, category)
        for start, end, category in reversed(spans):
            backward.register(start, end, category)
        assert forward.spans() == backward.spans()
        assert forward.entries() == backward.entries()


class TestRegistration:
    def test_degenerate_span_dropped(self):
        registry = SpanRegistry()
        registry.register(4, 4, Category.IDENT)
        assert len(registry) == 0
        assert registry.entries() == []

    def test_inverted_span_is_a_defect(self):
        with pytest.raises(HighlightImplementationError):
            SpanRegistry().register(5, 4, Category.IDENT)

    def test_end_marker_is_not_a_category(self):
        with pytest.raises(HighlightImplementationError):
            SpanRegistry().register(0, 4, Category.END_OF_TOKEN)

    def test_duplicate_registration_is_a_no_op(self):
        registry = SpanRegistry()
        registry.register(0, 3, Category.KEYWORD)
        registry.register(0, 3, Category.KEYWORD)
        assert len(registry) == 1
        assert len(registry.entries()) == 2

    def test_defer_records_side_table(self):
        registry = SpanRegistry()
        registry.defer(4, 7, "foo", IdentPosition.CALL_TARGET)
        assert registry.deferred() == {4: DeferredIdent("foo", IdentPosition.CALL_TARGET)}
        assert registry.spans() == [TaggedSpan(4, 7, Category.NEED_IDENTIFICATION)]

    def test_defer_empty_span_is_a_defect(self):
        with pytest.raises(HighlightImplementationError):
            SpanRegistry().defer(3, 3, "", IdentPosition.BARE_PATH)

    def test_deferred_copy_is_detached(self):
        registry = SpanRegistry()
        registry.defer(0, 1, "x", IdentPosition.BARE_PATH)
        registry.deferred().clear()
        assert len(registry.deferred()) == 1


class TestEntries:
    def test_open_close_pairs(self):
        registry = SpanRegistry()
        registry.register(0, 3, Category.KEYWORD)
        registry.register(4, 5, Category.IDENT)
        assert registry.entries() == [
            TagEntry(0, Category.KEYWORD),
            TagEntry(3, END),
            TagEntry(4, Category.IDENT),
            TagEntry(5, END),
        ]

    def test_nested_spans_close_innermost_first(self):
        registry = SpanRegistry()
        registry.register(0, 10, Category.BORING)
        registry.register(0, 3, Category.KEYWORD)
        registry.register(5, 10, Category.IDENT)
        assert registry.entries() == [
            TagEntry(0, Category.BORING),
            TagEntry(0, Category.KEYWORD),
            TagEntry(3, END),
            TagEntry(5, Category.IDENT),
            TagEntry(10, END),
            TagEntry(10, END),
        ]

    def test_adjacent_spans_close_before_next_opens(self):
        registry = SpanRegistry()
        registry.register(0, 2, Category.SEGMENT)
        registry.register(2, 4, Category.IDENT)
        entries = registry.entries()
        assert entries[1] == TagEntry(2, END)
        assert entries[2] == TagEntry(2, Category.IDENT)

    def test_crossing_span_is_clipped(self):
        registry = SpanRegistry()
        registry.register(0, 5, Category.COMMENT)
        registry.register(3, 8, Category.LIT_STR)
        assert registry.entries() == [
            TagEntry(0, Category.COMMENT),
            TagEntry(3, Category.LIT_STR),
            TagEntry(5, END),
            TagEntry(5, END),
        ]

    def test_open_and_close_counts_match(self):
        registry = SpanRegistry()
        for start, end in [(0, 9), (1, 4), (2, 3), (5, 9), (6, 7), (11, 12)]:
            registry.register(start, end, Category.IDENT)
        entries = registry.entries()
        opens = [e for e in entries if not e.is_close]
        closes = [e for e in entries if e.is_close]
        assert len(opens) == len(closes) == len(registry)

    def test_deferred_span_takes_resolution(self):
        registry = SpanRegistry()
        registry.defer(4, 7, "foo", IdentPosition.BARE_PATH)
        assert registry.entries({4: Category.FUNCTION}) == [
            TagEntry(4, Category.FUNCTION),
            TagEntry(7, END),
        ]

    def test_unresolved_deferred_span_is_a_defect(self):
        registry = SpanRegistry()
        registry.defer(4, 7, "foo", IdentPosition.BARE_PATH)
        with pytest.raises(HighlightImplementationError, match="never identified"):
            registry.entries({})


class TestCommentRegistration:
    def test_comment_registered(self):
        registry = SpanRegistry()
        assert registry.register_comment_spans("let x = 1; // one") == 1
        assert registry.spans() == [TaggedSpan(11, 17, Category.COMMENT)]

    def test_comment_marker_inside_string_skipped(self):
        text = 'let s = "http://x"; // c'
        registry = SpanRegistry()
        registry.register(8, 18, Category.LIT_STR)
        assert registry.register_comment_spans(text) == 1
        comments = [s for s in registry.spans() if s.category is Category.COMMENT]
        assert comments == [TaggedSpan(20, 24, Category.COMMENT)]
        assert text[20:24] == "// c"

    def test_boring_span_does_not_hide_comments(self):
        text = "// hidden\nlet x = 1;"
        registry = SpanRegistry()
        registry.register(0, 10, Category.BORING)
        assert registry.register_comment_spans(text) == 1
        assert TaggedSpan(0, 9, Category.COMMENT) in registry.spans()

    def test_covers(self):
        registry = SpanRegistry()
        registry.register(2, 4, Category.LIT_STR)
        registry.register(6, 9, Category.BORING)
        assert not registry.covers(1)
        assert registry.covers(2)
        assert registry.covers(3)
        assert not registry.covers(4)
        assert not registry.covers(7)


class TestIdentPosition:
    def test_from_name(self):
        assert IdentPosition.from_name("call-target") is IdentPosition.CALL_TARGET
        assert IdentPosition.from_name("struct_path") is IdentPosition.STRUCT_PATH

    def test_unknown_position(self):
        with pytest.raises(ValueError, match="unknown identifier position"):
            IdentPosition.from_name("argument")
