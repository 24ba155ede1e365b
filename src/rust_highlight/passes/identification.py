"""
Identification Pass

Decides the category of every deferred identifier once collection is over.
The identifier memory is frozen first, so each decision is a pure function of
the identifier text, its position and the final memory.

Lookup order: identifier memory, then fallback rules (exact names, then the
optional per-position default), then plain Ident.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from ..shared.categories import Category
from ..shared.errors import HighlightImplementationError
from ..shared.identifier_memory import IdentifierMemory
from ..shared.nodes import SourceFile
from ..shared.span_registry import DeferredIdent, IdentPosition, SpanRegistry
from .base import BasePass, HighlightContext
from .comment_scan import CommentScanPass
from .tag_collection import TagCollectionPass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FallbackRules:
    """
    Categories for deferred identifiers the memory knows nothing about.

    ``names`` maps exact identifier text to a category; ``positions`` maps an
    identifier position to a default category. Both are conventions, not
    facts about the program, which is why they are configurable.
    """
    names: Mapping[str, Category] = field(default_factory=dict)
    positions: Mapping[IdentPosition, Category] = field(default_factory=dict)

    def __post_init__(self):
        for name, category in self.names.items():
            if not category.is_resolvable:
                raise HighlightImplementationError(
                    f"fallback for '{name}' uses non-resolvable category {category.value}"
                )
        for position, category in self.positions.items():
            if not category.is_resolvable:
                raise HighlightImplementationError(
                    f"fallback for {position.value} uses non-resolvable category {category.value}"
                )

    def lookup(self, text: str, position: IdentPosition) -> Optional[Category]:
        category = self.names.get(text)
        if category is not None:
            return category
        return self.positions.get(position)

    def extend(
        self,
        names: Optional[Mapping[str, Category]] = None,
        positions: Optional[Mapping[IdentPosition, Category]] = None,
    ) -> "FallbackRules":
        """Copy of these rules with ``names`` and ``positions`` layered on top"""
        merged_names = dict(self.names)
        merged_names.update(names or {})
        merged_positions = dict(self.positions)
        merged_positions.update(positions or {})
        return FallbackRules(names=merged_names, positions=merged_positions)


DEFAULT_FALLBACK_RULES = FallbackRules(
    names={
        "self": Category.SELF_TOKEN,
        "Self": Category.SELF_TOKEN,
        "Ok": Category.ENUM,
        "Err": Category.ENUM,
        "Some": Category.ENUM,
        "None": Category.ENUM,
    },
)


class Resolver:
    """Resolves deferred identifiers against a frozen identifier memory"""

    def __init__(self, memory: IdentifierMemory, rules: FallbackRules = DEFAULT_FALLBACK_RULES):
        self.memory = memory
        self.rules = rules

    def identify(self, deferred: DeferredIdent) -> Category:
        category = self.memory.lookup(deferred.text)
        if category is not None:
            return category
        category = self.rules.lookup(deferred.text, deferred.position)
        if category is not None:
            return category
        return Category.IDENT

    def resolve(self, registry: SpanRegistry) -> Dict[int, Category]:
        """Category for every deferred span, keyed by span start"""
        if not self.memory.frozen:
            raise HighlightImplementationError("resolution started before collection finished")
        return {
            start: self.identify(deferred)
            for start, deferred in registry.deferred().items()
        }


class IdentificationPass(BasePass):
    requires = [TagCollectionPass, CommentScanPass]

    def run(self, program: SourceFile, ctx: HighlightContext) -> SourceFile:
        ctx.memory.freeze()
        resolutions = Resolver(ctx.memory, ctx.fallback_rules).resolve(ctx.registry)
        ctx.resolutions = resolutions
        ctx.set_analysis(IdentificationPass, resolutions)
        logger.debug("identified %d deferred spans", len(resolutions))
        return program
