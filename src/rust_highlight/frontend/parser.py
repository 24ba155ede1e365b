"""
Parser

Rust snippet text -> AST (``SourceFile``).
"""

import logging
from pathlib import Path
from typing import Optional, Union

from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError

from ..shared.errors import HighlightSourceError
from ..shared.nodes import SourceFile
from ..shared.source_location import SourceLocation
from ..utils.config import DEFAULT_SOURCE_NAME
from .transformers.base import RustTransformer

logger = logging.getLogger("rust_highlight.frontend.parser")

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class Parser:
    """
    Earley parser over the snippet grammar.

    The grammar is not LALR(1) (items, statements and a tail expression share
    the top level). Lark only caches LALR tables, so there is no cache file.
    """

    def __init__(self, grammar_path: Optional[Union[str, Path]] = None):
        self.parser = Lark.open(
            str(grammar_path or GRAMMAR_PATH),
            start='program',
            parser='earley',
            lexer='basic',
            ambiguity='resolve',
            propagate_positions=True,   # spans come from rule metadata
            maybe_placeholders=False,
        )
        self.transformer = RustTransformer()

    def parse(self, source: str, source_file: str = DEFAULT_SOURCE_NAME) -> SourceFile:
        """
        Parse source code to AST.

        Raises ParseError when ``source`` is not valid Rust.
        """
        self.transformer.current_file = source_file
        try:
            tree = self.parser.parse(source)
        except UnexpectedInput as e:
            raise ParseError.from_lark(e, source, source_file) from e

        try:
            ast = self.transformer.transform(tree)
        except VisitError as e:
            # lark wraps everything raised inside a rule callback
            raise e.orig_exc from e

        logger.debug("parsed %s: %d statements", source_file, len(ast.stmts))
        return ast


class ParseError(HighlightSourceError):
    """Rust source that the grammar rejects"""

    @classmethod
    def from_lark(cls, error: UnexpectedInput, source: str, source_file: str) -> "ParseError":
        line = getattr(error, "line", -1)
        column = getattr(error, "column", -1)
        location = None
        if line is not None and line > 0:
            start = max(getattr(error, "pos_in_stream", 0) or 0, 0)
            location = SourceLocation(
                file=source_file,
                line=line,
                column=max(column or 1, 1),
                start=start,
                end=start + 1,
            )

        token = getattr(error, "token", None)
        if token is not None and str(token):
            message = f"unexpected token `{token}`"
        elif getattr(error, "char", None):
            message = f"unexpected character `{error.char}`"
        else:
            message = "unexpected end of input"

        expected = sorted(getattr(error, "expected", None) or getattr(error, "allowed", None) or ())
        note = None
        if expected:
            shown = ", ".join(expected[:8])
            note = f"expected one of: {shown}" + (", ..." if len(expected) > 8 else "")

        logger.debug("parse error in %s: %s", source_file, error)
        return cls(
            message,
            location=location,
            source_code=source,
            note=note,
            label="not valid Rust here",
        )
