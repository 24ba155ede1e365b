"""
mdbook hidden lines

In a Rust code block, a line whose first non-blank text is ``#`` followed by
a space (or a lone ``#``) is compiled but shown dimmed. ``##`` escapes a line
that really starts with ``#``.
"""

from typing import List, Tuple

from ..shared.source_location import Span
from ..utils.config import HIDDEN_LINE_ESCAPE, HIDDEN_LINE_MARKER


def _classify(line: str) -> Tuple[str, bool]:
    """Return the line with its marker removed and whether it is hidden"""
    stripped = line.lstrip(" \t")
    indent = line[:len(line) - len(stripped)]

    if stripped.startswith(HIDDEN_LINE_ESCAPE):
        return indent + stripped[1:], False
    if stripped == HIDDEN_LINE_MARKER:
        return indent, True
    if stripped.startswith(HIDDEN_LINE_MARKER + " "):
        return indent + stripped[2:], True
    return line, False


def strip_hidden_lines(code: str) -> Tuple[str, List[Span]]:
    """
    Remove hidden-line markers from ``code``.

    Returns the code the highlighter sees and the span of every hidden line
    in that code (newline included), so the caller can tag them as boring.
    Attributes such as ``#[derive(Debug)]`` and ``#![allow(unused)]`` are not
    hidden lines.
    """
    out: List[str] = []
    hidden: List[Span] = []
    offset = 0

    for raw in code.splitlines(keepends=True):
        body = raw.rstrip("\r\n")
        newline = raw[len(body):]
        text, is_hidden = _classify(body)
        line = text + newline
        if is_hidden:
            hidden.append(Span(offset, offset + len(line)))
        out.append(line)
        offset += len(line)

    return "".join(out), hidden
