"""
HTML Renderer

Inserts the open/close markers of a resolved registry into the original text
in a single forward pass. Text between markers is copied unchanged (or passed
through ``escape``); nothing is deleted or reordered.
"""

import html
import logging
import re
from typing import Callable, Iterable, List, Optional, Pattern

from ..shared.categories import Category
from ..shared.errors import HighlightImplementationError
from ..shared.span_registry import TagEntry
from ..utils.config import CLOSE_MARKER, OPEN_MARKER_TEMPLATE

logger = logging.getLogger(__name__)

# Matches any marker the renderer can emit
MARKER_PATTERN: Pattern[str] = re.compile(r'<span class="[^"]*">|</span>')


def escape_html(text: str) -> str:
    """Escape `&`, `<` and `>` (quotes are left alone inside <code>)"""
    return html.escape(text, quote=False)


def strip_markers(rendered: str) -> str:
    """Remove every marker, recovering the text the markers were inserted into"""
    return MARKER_PATTERN.sub("", rendered)


class HtmlRenderer:
    """Renders TagEntry sequences as `<span>` markup"""

    def __init__(self, escape: Optional[Callable[[str], str]] = None):
        self.escape = escape

    def open_marker(self, category: Category) -> str:
        return OPEN_MARKER_TEMPLATE.format(css_class=category.css_class)

    def close_marker(self) -> str:
        return CLOSE_MARKER

    def marker(self, entry: TagEntry) -> str:
        if entry.is_close:
            return self.close_marker()
        if entry.category is Category.NEED_IDENTIFICATION:
            raise HighlightImplementationError(
                f"unresolved identifier reached the renderer at {entry.position}"
            )
        return self.open_marker(entry.category)

    def render(self, text: str, entries: Iterable[TagEntry]) -> str:
        """
        Insert markers into ``text``.

        ``entries`` must be in render order (non-decreasing positions), as
        produced by ``SpanRegistry.entries``.
        """
        out: List[str] = []
        cursor = 0
        inserted = 0

        for entry in entries:
            if entry.position < cursor or entry.position > len(text):
                raise HighlightImplementationError(
                    f"marker at {entry.position} out of order (cursor {cursor}, length {len(text)})"
                )
            out.append(self._chunk(text[cursor:entry.position]))
            marker = self.marker(entry)
            out.append(marker)
            inserted += len(marker)
            cursor = entry.position

        out.append(self._chunk(text[cursor:]))
        logger.debug("rendered %d characters with %d characters of markup", len(text), inserted)
        return "".join(out)

    def _chunk(self, text: str) -> str:
        return self.escape(text) if self.escape is not None else text
