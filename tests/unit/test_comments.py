#!/usr/bin/env python3
"""
Tests for the lexical comment scanner.
"""

from rust_highlight.frontend.comments import CommentScanner


def _scan(text, skip=None):
    return [text[start:end] for start, end in CommentScanner().scan(text, skip=skip)]


class TestCommentScanner:
    def test_line_comment_stops_before_newline(self):
        text = "// a comment\nlet y = 1;"
        assert list(CommentScanner().scan(text)) == [(0, 12)]

    def test_line_comment_at_end_of_input(self):
        assert _scan("let x = 1; // trailing") == ["// trailing"]

    def test_crlf_line_endings(self):
        assert _scan("// one\r\nlet x = 1;") == ["// one"]

    def test_doc_comments(self):
        text = "//! crate docs\n/// item docs\nfn f() {}"
        assert _scan(text) == ["//! crate docs", "/// item docs"]

    def test_block_comment(self):
        text = "let x = /* inline */ 1;"
        assert _scan(text) == ["/* inline */"]

    def test_multiline_block_comment(self):
        text = "/*\n * header\n */\nfn f() {}"
        assert _scan(text) == ["/*\n * header\n */"]

    def test_block_comments_do_not_nest(self):
        assert _scan("/* a /* b */ c */") == ["/* a /* b */"]

    def test_unterminated_block_comment_is_not_a_comment(self):
        assert _scan("let x = 1; /* open") == []

    def test_no_comments(self):
        assert _scan("let x = 1 / 2;") == []

    def test_skip_resumes_after_marker(self):
        text = "a // b // c"
        rejected = []

        def skip(position):
            if position == 2:
                rejected.append(position)
                return True
            return False

        assert _scan(text, skip) == ["// c"]
        assert rejected == [2]

    def test_skip_everything(self):
        assert _scan("// a\n// b", lambda position: True) == []
