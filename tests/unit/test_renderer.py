#!/usr/bin/env python3
"""
Tests for the single-pass HTML renderer.
"""

import pytest
from rust_highlight.backends.html import HtmlRenderer, escape_html, strip_markers
from rust_highlight.shared.categories import Category
from rust_highlight.shared.errors import HighlightImplementationError
from rust_highlight.shared.span_registry import SpanRegistry, TagEntry

END = Category.END_OF_TOKEN


class TestHtmlRenderer:
    def test_markers_inserted_at_offsets(self):
        entries = [
            TagEntry(0, Category.KEYWORD), TagEntry(3, END),
            TagEntry(4, Category.IDENT), TagEntry(5, END),
        ]
        out = HtmlRenderer().render("let x = 5;", entries)
        assert out == (
            '<span class="hlrs-Keyword">let</span> '
            '<span class="hlrs-Ident">x</span> = 5;'
        )

    def test_offsets_refer_to_original_text(self):
        # every marker position is relative to the unmodified input
        registry = SpanRegistry()
        registry.register(0, 3, Category.KEYWORD)
        registry.register(4, 5, Category.IDENT)
        registry.register(8, 9, Category.LIT_NUM)
        out = HtmlRenderer().render("let x = 5;", registry.entries())
        assert '<span class="hlrs-LitNum">5</span>;' in out
        assert strip_markers(out) == "let x = 5;"

    def test_nested_markers(self):
        registry = SpanRegistry()
        registry.register(0, 6, Category.BORING)
        registry.register(0, 2, Category.KEYWORD)
        out = HtmlRenderer().render("fn f()", registry.entries())
        assert out == '<span class="boring"><span class="hlrs-Keyword">fn</span> f()</span>'

    def test_no_entries(self):
        assert HtmlRenderer().render("x + y", []) == "x + y"

    def test_empty_text(self):
        assert HtmlRenderer().render("", []) == ""

    def test_escape_applies_between_markers_only(self):
        registry = SpanRegistry()
        registry.register(4, 9, Category.LIT_STR)
        out = HtmlRenderer(escape=escape_html).render('a < "<b>" & c', registry.entries())
        assert out == 'a &lt; <span class="hlrs-LitStr">"&lt;b&gt;"</span> &amp; c'

    def test_escape_leaves_quotes(self):
        assert escape_html('"it\'s"') == '"it\'s"'

    def test_out_of_order_entries_rejected(self):
        entries = [TagEntry(4, Category.IDENT), TagEntry(2, END)]
        with pytest.raises(HighlightImplementationError, match="out of order"):
            HtmlRenderer().render("let x = 5;", entries)

    def test_entry_past_end_rejected(self):
        with pytest.raises(HighlightImplementationError):
            HtmlRenderer().render("abc", [TagEntry(0, Category.IDENT), TagEntry(9, END)])

    def test_unresolved_category_rejected(self):
        entries = [TagEntry(0, Category.NEED_IDENTIFICATION), TagEntry(1, END)]
        with pytest.raises(HighlightImplementationError, match="unresolved"):
            HtmlRenderer().render("x", entries)


class TestMarkers:
    def test_css_classes(self):
        renderer = HtmlRenderer()
        assert renderer.open_marker(Category.LIFETIME) == '<span class="hlrs-LifeTime">'
        assert renderer.open_marker(Category.SELF_TOKEN) == '<span class="hlrs-SelfToken">'
        assert renderer.open_marker(Category.BORING) == '<span class="boring">'
        assert renderer.close_marker() == "</span>"

    def test_strip_markers(self):
        rendered = '<span class="hlrs-Keyword">let</span> <span class="boring">x</span>'
        assert strip_markers(rendered) == "let x"


class TestCategoryNames:
    def test_from_display_name(self):
        assert Category.from_name("Function") is Category.FUNCTION
        assert Category.from_name("LifeTime") is Category.LIFETIME

    def test_from_member_name(self):
        assert Category.from_name("self_token") is Category.SELF_TOKEN
        assert Category.from_name("lit-str") is Category.LIT_STR

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="unknown highlight category"):
            Category.from_name("Operator")

    def test_resolvable(self):
        assert Category.ENUM.is_resolvable
        assert not Category.COMMENT.is_resolvable
        assert not Category.BORING.is_resolvable
        assert not Category.NEED_IDENTIFICATION.is_resolvable
