"""
Comment Scan Pass

Comments never reach the AST, so they are found lexically in the raw text and
merged into the same registry. Runs after tag collection so that comment
markers inside already-tagged literals can be skipped.
"""

import logging

from ..shared.nodes import SourceFile
from .base import BasePass, HighlightContext
from .tag_collection import TagCollectionPass

logger = logging.getLogger(__name__)


class CommentScanPass(BasePass):
    requires = [TagCollectionPass]

    def run(self, program: SourceFile, ctx: HighlightContext) -> SourceFile:
        count = ctx.registry.register_comment_spans(ctx.source)
        logger.debug("registered %d comment spans", count)
        ctx.set_analysis(CommentScanPass, count)
        return program
