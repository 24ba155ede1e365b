"""
RustTransformer

Turns the lark parse tree into the AST in ``shared.nodes``. Rule methods are
split across mixins by construct family; this module owns the shared ones
(program, blocks, attributes, paths, macros) and combines the rest.
"""

import logging

from lark import Transformer, v_args

from ...shared.errors import HighlightImplementationError
from ...shared.nodes import (
    AssocBound, AssocType, Attribute, Block, ConstArg, GenericArgs,
    Lifetime, LitExpr, MacroCall, ParenArgs, Path, PathSegment, QSelf,
    SourceFile, Ty, Visibility,
)
from ...utils.config import DEFAULT_SOURCE_NAME
from .common import LarkMeta, Parts, span_of, to_token
from .expressions import ExpressionTransformer
from .items import BOUND_NODES, ItemTransformer
from .literals import LiteralParser
from .patterns import PatternTransformer
from .types import TypeTransformer

logger = logging.getLogger(__name__)


@v_args(inline=True, meta=True)
class RustTransformer(
    ItemTransformer,
    ExpressionTransformer,
    PatternTransformer,
    TypeTransformer,
    Transformer,
):
    """Transformer for the snippet grammar. One instance per parser."""

    def __init__(self) -> None:
        super().__init__()
        self.current_file = DEFAULT_SOURCE_NAME
        self.literal_parser = LiteralParser()

    def __default__(self, data, children, meta):
        raise HighlightImplementationError(f"no transformer rule for '{data}' in {self.current_file}")

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def program(self, meta: LarkMeta, *children) -> SourceFile:
        attrs, stmts = self._split_body(children)
        logger.debug("%s: %d top-level statements", self.current_file, len(stmts))
        return SourceFile(span=span_of(meta), attrs=attrs, stmts=stmts)

    def block(self, meta: LarkMeta, *children) -> Block:
        attrs, stmts = self._split_body(children)
        return Block(span=span_of(meta), attrs=attrs, stmts=stmts)

    def _split_body(self, children):
        parts = Parts(children)
        attrs = parts.nodes(Attribute)
        stmts = [item for item in parts.items if not isinstance(item, Attribute)]
        return attrs, stmts

    def empty_stmt(self, meta: LarkMeta, *_tokens) -> None:
        return None

    def attrs(self, meta: LarkMeta, *attrs) -> list:
        return list(attrs)

    def inner_attrs(self, meta: LarkMeta, *attrs) -> list:
        return list(attrs)

    def outer_attr(self, meta: LarkMeta, *_tokens) -> Attribute:
        return Attribute(span=span_of(meta), inner=False)

    def inner_attr(self, meta: LarkMeta, *_tokens) -> Attribute:
        return Attribute(span=span_of(meta), inner=True)

    def visibility(self, meta: LarkMeta, *_children) -> Visibility:
        return Visibility(span=span_of(meta))

    def lifetime(self, meta: LarkMeta, token) -> Lifetime:
        return Lifetime(span=span_of(meta), token=to_token(token))

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def simple_path(self, meta: LarkMeta, *idents) -> Path:
        segments = []
        for ident in idents:
            token = to_token(ident)
            segments.append(PathSegment(span=token.span, ident=token))
        return Path(span=span_of(meta), segments=segments)

    def expr_path(self, meta: LarkMeta, *segments) -> Path:
        return Path(span=span_of(meta), segments=list(segments))

    multi_path = expr_path

    def expr_segment(self, meta: LarkMeta, ident, args=None) -> PathSegment:
        return PathSegment(span=span_of(meta), ident=to_token(ident), args=args)

    def type_path(self, meta: LarkMeta, *segments) -> Path:
        return Path(span=span_of(meta), segments=list(segments))

    def type_segment(self, meta: LarkMeta, ident, args=None) -> PathSegment:
        return PathSegment(span=span_of(meta), ident=to_token(ident), args=args)

    def qself(self, meta: LarkMeta, *children) -> QSelf:
        parts = Parts(children)
        return QSelf(
            span=span_of(meta),
            ty=parts.node(Ty),
            as_token=parts.token("AS"),
            trait_path=parts.node(Path),
        )

    def generic_args(self, meta: LarkMeta, *args) -> GenericArgs:
        return GenericArgs(span=span_of(meta), args=list(args))

    def paren_args(self, meta: LarkMeta, *children) -> ParenArgs:
        parts = Parts(children)
        return ParenArgs(span=span_of(meta), inputs=parts.nodes(Ty), output=parts.output())

    def const_arg(self, meta: LarkMeta, value) -> ConstArg:
        return ConstArg(span=span_of(meta), expr=value)

    def assoc_type(self, meta: LarkMeta, name, *rest) -> AssocType:
        parts = Parts(rest)
        return AssocType(
            span=span_of(meta),
            name=to_token(name),
            generics=parts.node(GenericArgs),
            ty=parts.node(Ty),
        )

    def assoc_bound(self, meta: LarkMeta, name, *rest) -> AssocBound:
        parts = Parts(rest)
        return AssocBound(
            span=span_of(meta),
            name=to_token(name),
            generics=parts.node(GenericArgs),
            bounds=parts.nodes(*BOUND_NODES),
        )

    # ------------------------------------------------------------------
    # Macros
    # ------------------------------------------------------------------

    def macro_call(self, meta: LarkMeta, path, bang, tree) -> MacroCall:
        return MacroCall(span=span_of(meta), path=path, bang=to_token(bang), literals=tree)

    def token_tree(self, meta: LarkMeta, *children) -> list:
        # only literals survive; other tokens inside a macro are opaque
        return Parts(children).nodes(LitExpr)
