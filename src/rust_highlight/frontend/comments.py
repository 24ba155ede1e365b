"""
Comment Scanner

A lexical pass over the raw text. The parser discards comments, so they never
appear as tree nodes and have to be found here instead.
"""

import re
from typing import Callable, Iterator, Optional, Pattern, Tuple

# Line comments (including `///` and `//!` doc comments) stop before the line
# break; block comments do not nest.
COMMENT_PATTERN: Pattern[str] = re.compile(r"//[^\r\n]*|/\*[\s\S]*?\*/")

# How far to advance past a rejected candidate: the length of `//` or `/*`
_MARKER_WIDTH = 2


class CommentScanner:
    """Finds comment spans in source text"""

    def __init__(self, pattern: Pattern[str] = COMMENT_PATTERN):
        self.pattern = pattern

    def scan(
        self,
        text: str,
        skip: Optional[Callable[[int], bool]] = None,
    ) -> Iterator[Tuple[int, int]]:
        """
        Yield ``(start, end)`` for every comment in ``text``.

        ``skip(position)`` rejects a candidate starting at ``position`` (the
        registry uses it for comment markers inside string literals). Scanning
        resumes just after the rejected marker, so a genuine comment later on
        the same line is still reported.
        """
        position = 0
        while True:
            match = self.pattern.search(text, position)
            if match is None:
                return
            start, end = match.span()
            if skip is not None and skip(start):
                position = start + _MARKER_WIDTH
                continue
            yield start, end
            position = end
