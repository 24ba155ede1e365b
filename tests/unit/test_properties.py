#!/usr/bin/env python3
"""
Whole-pipeline properties checked over a corpus of snippets: well-formed
markup, exact content preservation, nesting order and deterministic output.
"""

import html
import pytest
from rust_highlight.backends.html import strip_markers
from rust_highlight.frontend.hidden_lines import strip_hidden_lines
from tests.test_utils import assert_well_formed, parse_markup

CORPUS = {
    "let": "let x = 5;",
    "receiver": "fn foo(&self) {}",
    "enum_then_path": "enum Status { Ok, Err }\nfn check() -> Status { Status::Ok }",
    "leading_comment": "// a comment\nlet y = 1;",
    "fallback": "Ok(5)",
    "word_count": (
        "use std::collections::HashMap;\n"
        "\n"
        "/// Counts words.\n"
        "fn count(text: &str) -> HashMap<String, usize> {\n"
        "    let mut map = HashMap::new();\n"
        "    for word in text.split_whitespace() {\n"
        "        *map.entry(word.to_string()).or_insert(0) += 1;\n"
        "    }\n"
        "    map\n"
        "}\n"
    ),
    "generic_struct": (
        "#[derive(Debug, Clone)]\n"
        "pub struct Point<T> {\n"
        "    pub x: T,\n"
        "    y: T,\n"
        "}\n"
        "\n"
        "impl<T: Copy> Point<T> {\n"
        "    pub fn new(x: T, y: T) -> Self {\n"
        "        Point { x, y }\n"
        "    }\n"
        "}\n"
    ),
    "match_and_closure": (
        "fn describe(n: Option<i32>) -> &'static str {\n"
        "    match n {\n"
        "        Some(0) => \"zero\",\n"
        "        Some(x) if x < 0 => \"negative\",\n"
        "        None => \"nothing\",\n"
        "        _ => \"positive\",\n"
        "    }\n"
        "}\n"
        "let add = |a: i32, b| a + b;\n"
    ),
    "literals": (
        "let s = r#\"raw \"quoted\"\"#;\n"
        "let c = 'x';\n"
        "let b = b\"bytes\";\n"
        "let n = 0xFF_u8 as u32 + 1_000; /* block */\n"
    ),
    "trait_where": (
        "trait Shape {\n"
        "    fn area(&self) -> f64;\n"
        "}\n"
        "\n"
        "fn largest<'a, T>(items: &'a [T]) -> Option<&'a T>\n"
        "where\n"
        "    T: PartialOrd,\n"
        "{\n"
        "    items.iter().max_by(|a, b| a.partial_cmp(b).unwrap())\n"
        "}\n"
    ),
    "comment_in_string": 'let url = "http://example.com"; // link',
    "use_group": "use std::io::{self, Read as _};",
    "unicode": 'let s = "héllo"; // ünïcode\nlet t = s.len();',
    "operators": "let b = a < 1 && c > 2;",
    "control_flow": (
        "let mut total = 0;\n"
        "'outer: loop {\n"
        "    while total < 10 {\n"
        "        total += 1;\n"
        "        if total == 5 { continue; }\n"
        "    }\n"
        "    break 'outer;\n"
        "}\n"
    ),
    "empty": "",
}

BLOCKS = {
    "hidden_main": "# fn main() {\nlet x = 5;\nprintln!(\"{}\", x);\n# }",
    "hidden_use": "# use std::fmt;\n# \nfmt::format(format_args!(\"x\"));",
    "escaped_attribute": "##[derive(Debug)]\nstruct S;",
}


@pytest.mark.parametrize("name", sorted(CORPUS))
class TestCorpusProperties:
    def test_well_formed(self, highlighter, name):
        assert_well_formed(highlighter.highlight(CORPUS[name]))

    def test_content_preserved(self, highlighter, name):
        assert strip_markers(highlighter.highlight(CORPUS[name])) == CORPUS[name]

    def test_escaped_content_preserved(self, html_highlighter, name):
        rendered = html_highlighter.highlight(CORPUS[name])
        assert_well_formed(rendered)
        assert html.unescape(strip_markers(rendered)) == CORPUS[name]

    def test_no_unresolved_tags(self, highlighter, name):
        assert "NeedIdentification" not in highlighter.highlight(CORPUS[name])

    def test_wider_span_opens_first(self, highlighter, name):
        tagged = parse_markup(highlighter.highlight(CORPUS[name]))
        for before, after in zip(tagged, tagged[1:]):
            assert before.start <= after.start
            if before.start == after.start:
                assert before.end >= after.end

    def test_deterministic(self, highlighter, name):
        assert highlighter.highlight(CORPUS[name]) == highlighter.highlight(CORPUS[name])

    def test_resolution_deterministic(self, highlighter, name):
        first = highlighter.collect(CORPUS[name])
        second = highlighter.collect(CORPUS[name])
        assert first.resolutions == second.resolutions
        assert first.registry.spans() == second.registry.spans()


@pytest.mark.parametrize("name", sorted(BLOCKS))
class TestBlockProperties:
    def test_well_formed(self, highlighter, name):
        assert_well_formed(highlighter.highlight_block(BLOCKS[name]))

    def test_only_markers_removed(self, highlighter, name):
        visible, _ = strip_hidden_lines(BLOCKS[name])
        assert strip_markers(highlighter.highlight_block(BLOCKS[name])) == visible
