"""
Literal parsing: lexer terminal -> LitExpr with its literal kind
"""

from typing import Dict

from lark.lexer import Token as LarkToken

from ...shared.errors import HighlightImplementationError
from ...shared.nodes import LitExpr, LitKind
from .common import to_token


class LiteralParser:
    """Classifies literal tokens by the terminal that produced them"""

    KINDS: Dict[str, LitKind] = {
        "INT": LitKind.INT,
        "FLOAT": LitKind.FLOAT,
        "STRING": LitKind.STR,
        "RAW_STRING": LitKind.STR,
        "BYTE_STRING": LitKind.BYTE_STR,
        "RAW_BYTE_STRING": LitKind.BYTE_STR,
        "C_STRING": LitKind.C_STR,
        "CHAR": LitKind.CHAR,
        "BYTE_CHAR": LitKind.BYTE,
        "TRUE": LitKind.BOOL,
        "FALSE": LitKind.BOOL,
    }

    def parse(self, token: LarkToken) -> LitExpr:
        try:
            kind = self.KINDS[token.type]
        except KeyError:
            raise HighlightImplementationError(
                f"terminal {token.type} is not a literal"
            ) from None
        tok = to_token(token)
        return LitExpr(span=tok.span, token=tok, kind=kind)
