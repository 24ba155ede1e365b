"""
Highlight Driver

Orchestrates one highlight run: parse -> collect tags -> scan comments ->
identify deferred names -> render. Every call builds a fresh
HighlightContext, so nothing learned in one code block leaks into the next.
"""

import logging
from typing import Iterable, Optional

from ..backends.html import HtmlRenderer
from ..frontend.hidden_lines import strip_hidden_lines
from ..frontend.parser import Parser
from ..passes.base import HighlightContext, PassManager
from ..passes.comment_scan import CommentScanPass
from ..passes.identification import DEFAULT_FALLBACK_RULES, FallbackRules, IdentificationPass
from ..passes.tag_collection import TagCollectionPass
from ..shared.categories import Category
from ..shared.source_location import Span
from ..utils.config import DEFAULT_SOURCE_NAME

logger = logging.getLogger(__name__)


class Highlighter:
    """
    Highlighting driver.

    The parser and renderer are reusable across runs; the registry, the
    identifier memory and the resolutions live in the per-run context.
    """

    def __init__(
        self,
        fallback_rules: Optional[FallbackRules] = None,
        parser: Optional[Parser] = None,
        renderer: Optional[HtmlRenderer] = None,
    ):
        self.fallback_rules = fallback_rules or DEFAULT_FALLBACK_RULES
        self.parser = parser or Parser()
        self.renderer = renderer or HtmlRenderer()
        self.pass_manager = PassManager()
        self._register_passes()

    def _register_passes(self) -> None:
        """Order is resolved from each pass's ``requires``"""
        self.pass_manager.register_pass(TagCollectionPass)
        self.pass_manager.register_pass(CommentScanPass)
        self.pass_manager.register_pass(IdentificationPass)

    def collect(
        self,
        source: str,
        source_file: str = DEFAULT_SOURCE_NAME,
        hidden: Iterable[Span] = (),
    ) -> HighlightContext:
        """
        Parse ``source`` and run every pass, returning the resolved context.

        ``hidden`` spans are registered as Boring before the walk.
        """
        program = self.parser.parse(source, source_file)
        ctx = HighlightContext(source, self.fallback_rules)
        for span in hidden:
            ctx.registry.register(span.start, span.end, Category.BORING)
        self.pass_manager.run_all(program, ctx)
        return ctx

    def highlight(
        self,
        source: str,
        source_file: str = DEFAULT_SOURCE_NAME,
        hidden: Iterable[Span] = (),
    ) -> str:
        """Annotated copy of ``source``"""
        ctx = self.collect(source, source_file, hidden)
        entries = ctx.registry.entries(ctx.resolutions)
        logger.debug("%s: %d markers", source_file, len(entries))
        return self.renderer.render(source, entries)

    def highlight_block(self, code: str, source_file: str = DEFAULT_SOURCE_NAME) -> str:
        """
        Highlight a documentation code block: hidden-line markers are removed
        and the hidden lines are wrapped as boring.
        """
        visible, hidden = strip_hidden_lines(code)
        return self.highlight(visible, source_file, hidden)


_default_highlighter: Optional[Highlighter] = None


def get_highlighter() -> Highlighter:
    """Shared Highlighter with default rules (the grammar is loaded once)"""
    global _default_highlighter
    if _default_highlighter is None:
        _default_highlighter = Highlighter()
    return _default_highlighter


def highlight(code: str) -> str:
    """Highlight ``code`` with the default rules; markers are not HTML-escaped"""
    return get_highlighter().highlight(code)
