"""
Rust highlight preprocessor

The mdbook side of the project: answers ``supports`` queries and rewrites the
``hlrs`` code blocks of every chapter.
"""

import logging
from typing import Any, Dict, Optional

from ..backends.html import HtmlRenderer, escape_html
from ..engine.driver import Highlighter
from ..frontend.parser import Parser
from ..utils.config import PREPROCESSOR_NAME, SUPPORTED_RENDERERS
from .book import chapter_name, iter_chapters, top_level_items
from .config import PreprocessorConfig
from .fences import highlight_chapter

logger = logging.getLogger(__name__)


class RustHighlightPreprocessor:
    """mdbook preprocessor for ``hlrs`` code blocks"""

    name = PREPROCESSOR_NAME

    def __init__(self, parser: Optional[Parser] = None):
        self._parser = parser

    def supports_renderer(self, renderer: str) -> bool:
        return renderer in SUPPORTED_RENDERERS

    def highlighter(self, config: PreprocessorConfig) -> Highlighter:
        if self._parser is None:
            self._parser = Parser()
        return Highlighter(
            fallback_rules=config.fallback_rules,
            parser=self._parser,
            renderer=HtmlRenderer(escape=escape_html),
        )

    def run(self, context: Dict[str, Any], book: Dict[str, Any]) -> Dict[str, Any]:
        """
        Rewrite the book in place and return it.

        The configuration is validated before any chapter is processed.
        """
        config = PreprocessorConfig.from_context(context)
        highlighter = self.highlighter(config)

        count = 0
        for chapter in iter_chapters(top_level_items(book)):
            content = chapter.get("content")
            if not isinstance(content, str):
                continue
            chapter["content"] = highlight_chapter(
                content,
                highlighter,
                whichlang=config.whichlang,
                chapter_name=chapter_name(chapter),
            )
            count += 1

        logger.info("%s: processed %d chapters", self.name, count)
        return book
