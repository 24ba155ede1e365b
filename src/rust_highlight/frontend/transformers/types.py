"""
Type rules: lark tree -> Ty nodes
"""

from lark import Transformer, v_args

from ...shared.nodes import (
    ASTNode, Abi, ArrayType, BoundLifetimes, DynTraitType, FnPtrParam, FnPtrType,
    ImplTraitType, InferType, Lifetime, NeverType, ParenType, Path, PathType,
    PtrType, QSelf, RefType, SliceType, TupleType, Ty, Expr,
)
from .common import LarkMeta, Parts, ReturnType, span_of


@v_args(inline=True, meta=True)
class TypeTransformer(Transformer):
    """Builds type nodes. Mixed into RustTransformer."""

    def path_type(self, meta: LarkMeta, *children) -> PathType:
        parts = Parts(children)
        return PathType(span=span_of(meta), qself=parts.node(QSelf), path=parts.node(Path))

    def ref_type(self, meta: LarkMeta, *children) -> RefType:
        parts = Parts(children)
        return RefType(
            span=span_of(meta),
            lifetime=parts.node(Lifetime),
            mutability=parts.token("MUT"),
            elem=parts.node(Ty),
        )

    def tuple_type(self, meta: LarkMeta, *elems) -> TupleType:
        return TupleType(span=span_of(meta), elems=Parts(elems).nodes(Ty))

    def paren_type(self, meta: LarkMeta, elem) -> ParenType:
        return ParenType(span=span_of(meta), elem=elem)

    def slice_type(self, meta: LarkMeta, elem) -> SliceType:
        return SliceType(span=span_of(meta), elem=elem)

    def array_type(self, meta: LarkMeta, elem, length) -> ArrayType:
        return ArrayType(span=span_of(meta), elem=elem, len=length if isinstance(length, Expr) else None)

    def ptr_type(self, meta: LarkMeta, *children) -> PtrType:
        parts = Parts(children)
        return PtrType(span=span_of(meta), qualifier=parts.token("CONST", "MUT"), elem=parts.node(Ty))

    def never_type(self, meta: LarkMeta, *_tokens) -> NeverType:
        return NeverType(span=span_of(meta))

    def infer_type(self, meta: LarkMeta, *_tokens) -> InferType:
        return InferType(span=span_of(meta))

    def fn_ptr_type(self, meta: LarkMeta, *children) -> FnPtrType:
        parts = Parts(children)
        return FnPtrType(
            span=span_of(meta),
            lifetimes=parts.node(BoundLifetimes),
            unsafety=parts.token("UNSAFE"),
            abi=parts.node(Abi),
            fn_token=parts.token("FN"),
            params=parts.nodes(FnPtrParam),
            output=parts.output(),
        )

    def fn_ptr_param(self, meta: LarkMeta, *children) -> FnPtrParam:
        parts = Parts(children)
        return FnPtrParam(
            span=span_of(meta),
            name=parts.token("IDENT", "UNDERSCORE"),
            ty=parts.node(Ty),
        )

    def impl_trait_type(self, meta: LarkMeta, *children) -> ImplTraitType:
        parts = Parts(children)
        return ImplTraitType(
            span=span_of(meta),
            impl_token=parts.token("IMPL"),
            bounds=parts.nodes(ASTNode),
        )

    def dyn_trait_type(self, meta: LarkMeta, *children) -> DynTraitType:
        parts = Parts(children)
        return DynTraitType(
            span=span_of(meta),
            dyn_token=parts.token("DYN"),
            bounds=parts.nodes(ASTNode),
        )

    def ret_type(self, meta: LarkMeta, ty) -> ReturnType:
        return ReturnType(ty)
