"""
Pattern rules: lark tree -> Pat nodes
"""

from lark import Transformer, v_args

from ...shared.nodes import (
    FieldPat, IdentPat, LitPat, OrPat, ParenPat, Pat, Path, PathPat, QSelf,
    RangePat, RefPat, RestPat, SlicePat, StructPat, TuplePat, TupleStructPat,
    WildPat,
)
from .common import LarkMeta, Parts, span_of, to_token


@v_args(inline=True, meta=True)
class PatternTransformer(Transformer):
    """Builds pattern nodes. Mixed into RustTransformer."""

    def or_pattern(self, meta: LarkMeta, *cases) -> OrPat:
        return OrPat(span=span_of(meta), cases=Parts(cases).nodes(Pat))

    def ident_pattern(self, meta: LarkMeta, *children) -> IdentPat:
        parts = Parts(children)
        return IdentPat(
            span=span_of(meta),
            by_ref=parts.token("REF"),
            mutability=parts.token("MUT"),
            ident=parts.token("IDENT"),
            subpat=parts.node(Pat),
        )

    def ref_pattern(self, meta: LarkMeta, *children) -> RefPat:
        parts = Parts(children)
        return RefPat(span=span_of(meta), mutability=parts.token("MUT"), pat=parts.node(Pat))

    def tuple_pattern(self, meta: LarkMeta, *elems) -> TuplePat:
        return TuplePat(span=span_of(meta), elems=Parts(elems).nodes(Pat))

    def paren_pattern(self, meta: LarkMeta, pat) -> ParenPat:
        return ParenPat(span=span_of(meta), pat=pat)

    def tuple_struct_pattern(self, meta: LarkMeta, *children) -> TupleStructPat:
        parts = Parts(children)
        return TupleStructPat(
            span=span_of(meta),
            qself=parts.node(QSelf),
            path=parts.node(Path),
            elems=parts.nodes(Pat),
        )

    def path_pattern(self, meta: LarkMeta, *children) -> PathPat:
        parts = Parts(children)
        return PathPat(span=span_of(meta), qself=parts.node(QSelf), path=parts.node(Path))

    def struct_pattern(self, meta: LarkMeta, *children) -> StructPat:
        parts = Parts(children)
        return StructPat(
            span=span_of(meta),
            qself=parts.node(QSelf),
            path=parts.node(Path),
            fields=parts.nodes(FieldPat),
            rest=parts.token("DOTDOT"),
        )

    def field_pattern(self, meta: LarkMeta, *children) -> FieldPat:
        parts = Parts(children)
        if len(parts) == 1 and isinstance(parts[0], IdentPat):
            # shorthand `Point { x, ref mut y }`
            return FieldPat(span=span_of(meta), pat=parts[0])
        return FieldPat(
            span=span_of(meta),
            member=parts.token("IDENT", "INT"),
            pat=parts.node(Pat),
        )

    def literal_pattern(self, meta: LarkMeta, lit) -> LitPat:
        return LitPat(span=span_of(meta), lit=lit)

    def range_pattern(self, meta: LarkMeta, *children) -> RangePat:
        bounds = Parts(children).nodes(Pat)
        if len(bounds) == 2:
            return RangePat(span=span_of(meta), start=bounds[0], end=bounds[1])
        bound = bounds[0]
        if bound.span.start == meta.start_pos:
            return RangePat(span=span_of(meta), start=bound)
        return RangePat(span=span_of(meta), end=bound)

    def wildcard_pattern(self, meta: LarkMeta, token) -> WildPat:
        return WildPat(span=span_of(meta), token=to_token(token))

    def rest_pattern(self, meta: LarkMeta, token) -> RestPat:
        return RestPat(span=span_of(meta), token=to_token(token))

    def slice_pattern(self, meta: LarkMeta, *elems) -> SlicePat:
        return SlicePat(span=span_of(meta), elems=Parts(elems).nodes(Pat))
