#!/usr/bin/env python3
"""
End-to-end tests for the mdbook preprocessor: a [context, book] pair in,
a book with highlighted ``hlrs`` blocks out.
"""

import copy
import pytest
from rust_highlight.frontend.parser import ParseError
from rust_highlight.preprocessor.book import iter_chapters, top_level_items
from rust_highlight.preprocessor.preprocessor import RustHighlightPreprocessor
from rust_highlight.shared.errors import ConfigError

ICON = "icon=@https://www.rust-lang.org/static/images/rust-logo-blk.svg "


def _chapter(name, content, sub_items=None):
    return {"Chapter": {
        "name": name,
        "content": content,
        "number": [1],
        "sub_items": sub_items or [],
        "path": f"{name}.md",
        "source_path": f"{name}.md",
        "parent_names": [],
    }}


def _book(*items, key="sections"):
    return {key: list(items), "__non_exhaustive": None}


def _context(table=None):
    preprocessor = {} if table is None else {"rust-highlight": table}
    return {
        "root": "/book",
        "renderer": "html",
        "mdbook_version": "0.4.40",
        "config": {"book": {"title": "Test"}, "preprocessor": preprocessor},
    }


@pytest.fixture(scope="module")
def preprocessor(session_parser):
    return RustHighlightPreprocessor(parser=session_parser)


class TestPreprocessor:
    def test_supports(self, preprocessor):
        assert preprocessor.name == "rust-highlight"
        assert preprocessor.supports_renderer("html")
        assert not preprocessor.supports_renderer("latex")

    def test_highlights_fenced_block(self, preprocessor):
        book = _book(_chapter("intro", "# Intro\n\n```hlrs\nlet x = 5;\n```\n\nText.\n"))
        result = preprocessor.run(_context(), book)
        content = result["sections"][0]["Chapter"]["content"]
        assert content == (
            "# Intro\n\n"
            f'<pre><code class="language-hlrs {ICON}">'
            '<span class="hlrs-Keyword">let</span> '
            '<span class="hlrs-Ident">x</span> = '
            '<span class="hlrs-LitNum">5</span>;'
            "</code></pre>\n\nText.\n"
        )

    def test_other_fences_untouched(self, preprocessor):
        content = "```rust\nlet x = 5;\n```\n\n```\nplain\n```\n"
        result = preprocessor.run(_context(), _book(_chapter("a", content)))
        assert result["sections"][0]["Chapter"]["content"] == content

    def test_features_sorted_and_overridden(self, preprocessor):
        content = "```hlrs,icon=@me.svg,editable=true\nlet x = 1;\n```"
        result = preprocessor.run(_context(), _book(_chapter("a", content)))
        rendered = result["sections"][0]["Chapter"]["content"]
        assert rendered.startswith('<pre><code class="language-hlrs editable=true icon=@me.svg ">')

    def test_whichlang_disabled(self, preprocessor):
        content = "```hlrs,editable=true\nlet x = 1;\n```"
        result = preprocessor.run(_context({"whichlang": False}), _book(_chapter("a", content)))
        rendered = result["sections"][0]["Chapter"]["content"]
        assert rendered.startswith('<pre><code class="language-hlrs ">')

    def test_html_is_escaped(self, preprocessor):
        content = '```hlrs\nlet b = a < 1 && c > 2;\n```'
        result = preprocessor.run(_context(), _book(_chapter("a", content)))
        rendered = result["sections"][0]["Chapter"]["content"]
        assert "&lt; <span" in rendered
        assert "&amp;&amp;" in rendered
        assert " < " not in rendered

    def test_hidden_lines(self, preprocessor):
        content = "```hlrs\n# fn main() {\nlet x = 5;\n# }\n```"
        result = preprocessor.run(_context(), _book(_chapter("a", content)))
        rendered = result["sections"][0]["Chapter"]["content"]
        assert '<span class="boring"><span class="hlrs-Keyword">fn</span>' in rendered
        assert "# " not in rendered

    def test_blocks_are_independent(self, preprocessor):
        content = (
            "```hlrs\nfn helper() {}\n```\n\n"
            "```hlrs\nhelper()\n```\n"
        )
        result = preprocessor.run(_context(), _book(_chapter("a", content)))
        rendered = result["sections"][0]["Chapter"]["content"]
        assert '<span class="hlrs-Function">helper</span>' in rendered
        assert '<span class="hlrs-Ident">helper</span>' in rendered

    def test_configured_fallback(self, preprocessor):
        content = "```hlrs\nlet s = String::new();\n```"
        context = _context({"fallback-positions": {"call-target": "Function"}})
        result = preprocessor.run(context, _book(_chapter("a", content)))
        rendered = result["sections"][0]["Chapter"]["content"]
        assert '<span class="hlrs-Function">new</span>' in rendered

    def test_nested_chapters_and_separators(self, preprocessor):
        nested = _chapter("child", "```hlrs\nlet y = 2;\n```")
        book = _book(
            {"PartTitle": "Part one"},
            _chapter("parent", "no code here", [nested]),
            "Separator",
            _chapter("last", "```hlrs\nOk(1)\n```"),
            key="items",
        )
        result = preprocessor.run(_context(), book)
        chapters = list(iter_chapters(top_level_items(result)))
        assert [c["name"] for c in chapters] == ["parent", "child", "last"]
        assert chapters[0]["content"] == "no code here"
        assert '<span class="hlrs-Ident">y</span>' in chapters[1]["content"]
        assert '<span class="hlrs-Enum">Ok</span>' in chapters[2]["content"]
        assert result["items"][0] == {"PartTitle": "Part one"}
        assert result["items"][2] == "Separator"

    def test_book_without_code_unchanged(self, preprocessor):
        book = _book(_chapter("a", "Just prose."), "Separator")
        expected = copy.deepcopy(book)
        assert preprocessor.run(_context(), book) == expected


class TestPreprocessorErrors:
    def test_parse_error_names_block(self, preprocessor):
        content = "```hlrs\nlet x = 1;\n```\n\n```hlrs\nlet = ;\n```"
        with pytest.raises(ParseError) as exc_info:
            preprocessor.run(_context(), _book(_chapter("broken", content)))
        assert exc_info.value.location.file == "broken.md#2"

    def test_bad_feature(self, preprocessor):
        content = "```hlrs,editable\nlet x = 1;\n```"
        with pytest.raises(ConfigError):
            preprocessor.run(_context(), _book(_chapter("a", content)))

    def test_bad_config_rejected_before_chapters(self, preprocessor):
        book = _book(_chapter("a", "```hlrs\nlet x = 1;\n```"))
        original = copy.deepcopy(book)
        with pytest.raises(ConfigError):
            preprocessor.run(_context({"whichlang": 1}), book)
        assert book == original
