"""
Highlight categories

The closed set of tag kinds a span can carry. Member order is significant:
it is the third component of the span ordering key.
"""

from enum import Enum
from typing import FrozenSet, List

from ..utils.config import BORING_CSS_CLASS, CSS_CLASS_PREFIX


class Category(Enum):
    """Tag kinds emitted by the walker and the comment scanner"""
    KEYWORD = "Keyword"
    IDENT = "Ident"
    LIT_STR = "LitStr"
    LIT_NUM = "LitNum"
    LIT_BOOL = "LitBool"
    FUNCTION = "Function"
    SELF_TOKEN = "SelfToken"
    MACRO = "Macro"
    TYPE = "Type"
    ENUM = "Enum"
    SEGMENT = "Segment"
    LIFETIME = "LifeTime"
    COMMENT = "Comment"
    BORING = "Boring"
    NEED_IDENTIFICATION = "NeedIdentification"
    END_OF_TOKEN = "EndOfToken"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @property
    def css_class(self) -> str:
        if self is Category.BORING:
            return BORING_CSS_CLASS
        return f"{CSS_CLASS_PREFIX}{self.value}"

    @property
    def is_resolvable(self) -> bool:
        """Whether a deferred identifier may resolve to this category"""
        return self in RESOLVABLE_CATEGORIES

    @classmethod
    def from_name(cls, name: str) -> "Category":
        """
        Look up a category by display name (``Function``) or member name
        (``function``), case-insensitively. Raises ValueError when unknown.
        """
        wanted = name.strip().lower().replace("-", "_")
        for category in cls:
            if wanted in (category.value.lower(), category.name.lower()):
                return category
        raise ValueError(f"unknown highlight category '{name}'")


_ORDER: List[Category] = list(Category)

RESOLVABLE_CATEGORIES: FrozenSet[Category] = frozenset({
    Category.KEYWORD,
    Category.IDENT,
    Category.LIT_STR,
    Category.LIT_NUM,
    Category.LIT_BOOL,
    Category.FUNCTION,
    Category.SELF_TOKEN,
    Category.MACRO,
    Category.TYPE,
    Category.ENUM,
    Category.SEGMENT,
    Category.LIFETIME,
})
