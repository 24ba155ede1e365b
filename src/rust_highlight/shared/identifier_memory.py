"""
Identifier Memory

Per-invocation mapping from identifier text to the category it was declared
with. Written during tag collection, read during identification.
"""

import logging
from typing import Dict, ItemsView, Optional

from .categories import Category
from .errors import HighlightImplementationError

logger = logging.getLogger(__name__)

# Plain bindings never replace an item declaration of the same name
_BINDING_CATEGORIES = frozenset({Category.IDENT})


class IdentifierMemory:
    """
    Name -> Category table for one highlight run.

    Item declarations (functions, types, variants, modules, macros) outrank
    plain bindings regardless of the order in which the walker meets them,
    so the final table does not depend on declaration order.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Category] = {}
        self._frozen = False

    def declare(self, name: str, category: Category) -> None:
        if self._frozen:
            raise HighlightImplementationError(
                f"identifier memory is frozen; cannot declare '{name}' as {category.value}"
            )
        current = self._entries.get(name)
        if (
            current is not None
            and current not in _BINDING_CATEGORIES
            and category in _BINDING_CATEGORIES
        ):
            return
        self._entries[name] = category

    def lookup(self, name: str) -> Optional[Category]:
        return self._entries.get(name)

    def freeze(self) -> None:
        """End the collection phase; later declarations are defects."""
        self._frozen = True
        logger.debug("identifier memory frozen with %d entries", len(self._entries))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def items(self) -> ItemsView[str, Category]:
        return self._entries.items()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"IdentifierMemory({len(self._entries)} entries, frozen={self._frozen})"
