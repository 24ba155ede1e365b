"""
Shared helpers for the lark -> AST transformers
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

from lark.lexer import Token as LarkToken
from typing_extensions import TypeAlias

from ...shared.nodes import Token, Ty
from ...shared.source_location import Span

# Lark Meta object (start_pos / end_pos / empty when position propagation is on)
LarkMeta: TypeAlias = Any
Child: TypeAlias = Union[LarkToken, Any, List[Any], None]


@dataclass
class ReturnType:
    """Internal result of `-> T`, unwrapped by the rule that owns it"""
    ty: Ty


def span_of(meta: LarkMeta) -> Span:
    """Span covered by a rule, including its filtered punctuation"""
    if meta is None or getattr(meta, "empty", True):
        return Span(0, 0)
    return Span(meta.start_pos, meta.end_pos)


def to_token(token: LarkToken) -> Token:
    return Token(text=str(token), kind=token.type, span=Span(token.start_pos, token.end_pos))


class Parts:
    """
    Children of a rule, flattened and classified.

    Absent optionals leave no placeholder, so rules pick their pieces by
    terminal kind or node class instead of by position. Lists returned by
    helper rules (attributes, arguments, bounds) are spliced in place.
    """

    def __init__(self, children: Iterable[Child]) -> None:
        self.items: List[Any] = []
        for child in children:
            self._add(child)

    def _add(self, child: Child) -> None:
        if child is None:
            return
        if isinstance(child, list):
            for item in child:
                self._add(item)
        elif isinstance(child, LarkToken):
            self.items.append(to_token(child))
        else:
            self.items.append(child)

    def token(self, *kinds: str) -> Optional[Token]:
        for item in self.items:
            if isinstance(item, Token) and (not kinds or item.kind in kinds):
                return item
        return None

    def tokens(self, *kinds: str) -> List[Token]:
        return [
            item for item in self.items
            if isinstance(item, Token) and (not kinds or item.kind in kinds)
        ]

    def node(self, *classes: type) -> Optional[Any]:
        for item in self.items:
            if isinstance(item, classes):
                return item
        return None

    def nodes(self, *classes: type) -> List[Any]:
        return [item for item in self.items if isinstance(item, classes)]

    def output(self) -> Optional[Ty]:
        ret = self.node(ReturnType)
        return ret.ty if ret is not None else None

    def __getitem__(self, index: int) -> Any:
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)
