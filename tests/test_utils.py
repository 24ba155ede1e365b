"""
Test utilities for the rust_highlight test suite.

Helpers to take rendered markup apart again: list the (category, text) pairs
it tags, check that it nests, and recover the original text.
"""

import re
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from rust_highlight.backends.html import strip_markers
from rust_highlight.shared.categories import Category
from rust_highlight.utils.config import BORING_CSS_CLASS, CSS_CLASS_PREFIX

_MARKUP = re.compile(r'<span class="([^"]*)">|</span>')


@dataclass
class TaggedText:
    """One open/close pair found in rendered markup"""
    category: Optional[Category]
    text: str
    start: int
    end: int


def category_for_class(css_class: str) -> Optional[Category]:
    if css_class == BORING_CSS_CLASS:
        return Category.BORING
    if not css_class.startswith(CSS_CLASS_PREFIX):
        return None
    value = css_class[len(CSS_CLASS_PREFIX):]
    for category in Category:
        if category.value == value:
            return category
    return None


def parse_markup(rendered: str) -> List[TaggedText]:
    """
    Tagged regions of ``rendered`` in the order their open markers appear.

    ``start``/``end`` are offsets into the stripped text. Raises AssertionError
    if a close marker has no open marker.
    """
    stack: List[Tuple[Optional[Category], int, int]] = []
    found: List[Tuple[int, TaggedText]] = []
    plain: List[str] = []
    offset = 0
    cursor = 0
    order = 0

    for match in _MARKUP.finditer(rendered):
        chunk = rendered[cursor:match.start()]
        plain.append(chunk)
        offset += len(chunk)
        cursor = match.end()
        if match.group(1) is not None:
            stack.append((category_for_class(match.group(1)), offset, order))
            order += 1
        else:
            assert stack, f"close marker without open at {match.start()}"
            category, start, index = stack.pop()
            found.append((index, TaggedText(category, "", start, offset)))
    plain.append(rendered[cursor:])

    assert not stack, f"{len(stack)} open markers never closed"
    text = "".join(plain)
    result = []
    for _, tagged in sorted(found, key=lambda item: item[0]):
        tagged.text = text[tagged.start:tagged.end]
        result.append(tagged)
    return result


def assert_well_formed(rendered: str) -> None:
    """Every open marker has exactly one matching close marker after it"""
    depth = 0
    for match in _MARKUP.finditer(rendered):
        if match.group(1) is not None:
            depth += 1
        else:
            depth -= 1
            assert depth >= 0, f"close marker before its open at {match.start()}"
    assert depth == 0, f"{depth} open markers never closed"


def tags_of(rendered: str) -> List[Tuple[Category, str]]:
    """(category, text) pairs in open-marker order"""
    return [(t.category, t.text) for t in parse_markup(rendered)]


def category_of(rendered: str, text: str, occurrence: int = 0) -> Optional[Category]:
    """Category of the ``occurrence``-th region whose text is exactly ``text``"""
    matches = [t for t in parse_markup(rendered) if t.text == text]
    if len(matches) <= occurrence:
        return None
    return matches[occurrence].category


__all__ = [
    "TaggedText", "parse_markup", "assert_well_formed", "tags_of",
    "category_of", "category_for_class", "strip_markers",
]
