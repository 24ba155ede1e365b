"""
Span Registry

Collects tagged spans in any order and hands them back in render order:
``(start ascending, end descending, category order)``. Among spans sharing a
start the widest opens first, which is what makes the rendered markup nest.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Set

from .categories import Category
from .errors import HighlightImplementationError
from ..frontend.comments import CommentScanner

logger = logging.getLogger(__name__)


class IdentPosition(Enum):
    """Syntactic position of a deferred identifier"""
    BARE_PATH = "bare-path"          # `x`, `foo`, `Ok`
    PATH_TAIL = "path-tail"          # `new` in `Vec::new`
    CALL_TARGET = "call-target"      # callee path of a call expression
    PATTERN = "pattern"              # `None` in `match x { None => .. }`
    STRUCT_PATH = "struct-path"      # `Point` in `Point { x: 1 }`
    USE_NAME = "use-name"            # `HashMap` in `use std::collections::HashMap`

    @classmethod
    def from_name(cls, name: str) -> "IdentPosition":
        wanted = name.strip().lower().replace("_", "-")
        for position in cls:
            if wanted == position.value:
                return position
        raise ValueError(f"unknown identifier position '{name}'")


@dataclass(frozen=True)
class TaggedSpan:
    """One logical span: rendered as an open marker at start, close at end"""
    start: int
    end: int
    category: Category

    def sort_key(self):
        return (self.start, -self.end, self.category.rank)


@dataclass(frozen=True)
class DeferredIdent:
    """Side-table entry for a span whose category is decided after the walk"""
    text: str
    position: IdentPosition


@dataclass(frozen=True)
class TagEntry:
    """
    A marker to insert at ``position``.

    ``category`` is END_OF_TOKEN for close markers.
    """
    position: int
    category: Category

    @property
    def is_close(self) -> bool:
        return self.category is Category.END_OF_TOKEN


class SpanRegistry:
    """
    Write-once set of tagged spans for a single highlight run.

    There is no removal operation. Registering the same span twice is a no-op.
    """

    def __init__(self, scanner: Optional[CommentScanner] = None) -> None:
        self._spans: Set[TaggedSpan] = set()
        self._deferred: Dict[int, DeferredIdent] = {}
        self._scanner = scanner or CommentScanner()

    def register(self, start: int, end: int, category: Category) -> None:
        if start > end:
            raise HighlightImplementationError(
                f"span [{start}, {end}) for {category.value} ends before it starts"
            )
        if start == end:
            return
        if category is Category.END_OF_TOKEN:
            raise HighlightImplementationError("end-of-token is a marker, not a span category")
        self._spans.add(TaggedSpan(start, end, category))

    def defer(self, start: int, end: int, text: str, position: IdentPosition) -> None:
        """Register a span to be identified once the whole tree has been walked"""
        if start >= end:
            raise HighlightImplementationError(
                f"cannot defer empty identifier '{text}' at {start}"
            )
        self._deferred[start] = DeferredIdent(text, position)
        self._spans.add(TaggedSpan(start, end, Category.NEED_IDENTIFICATION))

    def register_comment_spans(self, text: str) -> int:
        """
        Scan ``text`` for comments and register them. Returns the number of
        comment spans added.

        Comment markers that start inside an existing span (typically a string
        literal such as ``"http://..."``) are not comments and are skipped.
        """
        def inside_registered(position: int) -> bool:
            if self.covers(position):
                logger.debug("comment marker at %d lies inside a tagged span, skipped", position)
                return True
            return False

        count = 0
        for start, end in self._scanner.scan(text, skip=inside_registered):
            self.register(start, end, Category.COMMENT)
            count += 1
        return count

    def covers(self, position: int) -> bool:
        """Whether ``position`` lies inside a registered (non-boring) span"""
        return any(
            span.start <= position < span.end
            for span in self._spans
            if span.category is not Category.BORING
        )

    def spans(self) -> List[TaggedSpan]:
        return sorted(self._spans, key=TaggedSpan.sort_key)

    def deferred(self) -> Mapping[int, DeferredIdent]:
        return dict(self._deferred)

    def entries(self, resolutions: Optional[Mapping[int, Category]] = None) -> List[TagEntry]:
        """
        Open and close markers in render order.

        Deferred spans take their category from ``resolutions`` (keyed by
        start offset). A span that crosses the end of the span enclosing it is
        clipped to that end, so the markup is well-formed for every input.
        """
        resolutions = resolutions or {}
        out: List[TagEntry] = []
        open_ends: List[int] = []

        for span in self.spans():
            category = span.category
            if category is Category.NEED_IDENTIFICATION:
                try:
                    category = resolutions[span.start]
                except KeyError:
                    raise HighlightImplementationError(
                        f"deferred span [{span.start}, {span.end}) was never identified"
                    ) from None

            while open_ends and open_ends[-1] <= span.start:
                out.append(TagEntry(open_ends.pop(), Category.END_OF_TOKEN))

            end = span.end
            if open_ends and end > open_ends[-1]:
                logger.warning(
                    "%s span [%d, %d) crosses its enclosing span ending at %d; clipped",
                    category.value, span.start, span.end, open_ends[-1],
                )
                end = open_ends[-1]

            out.append(TagEntry(span.start, category))
            open_ends.append(end)

        while open_ends:
            out.append(TagEntry(open_ends.pop(), Category.END_OF_TOKEN))
        return out

    def __len__(self) -> int:
        return len(self._spans)

    def __repr__(self) -> str:
        return f"SpanRegistry({len(self._spans)} spans, {len(self._deferred)} deferred)"
