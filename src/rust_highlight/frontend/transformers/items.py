"""
Item rules: lark tree -> item, generics and use-tree nodes
"""

from lark import Transformer, v_args

from ...shared.nodes import (
    ASTNode, Abi, Attribute, Block, BoundLifetimes, ConstItem, ConstParam,
    EnumItem, Expr, ExternBlock, ExternCrate, Field, FnItem, Generics,
    ImplItem, Lifetime, LifetimeParam, LitExpr, MacroCall, MacroDef, ModItem,
    Pat, Path, PreciseCapture, Receiver, Signature, StaticItem, StructItem,
    TraitBound, TraitItem, Ty, TypeAlias, TypeParam, TypedParam, UseGlob,
    UseGroup, UseItem, UseName, UsePath, UseRename, Variant, Visibility,
    WhereClause, WherePredicate,
)
from .common import LarkMeta, Parts, span_of, to_token

# Nodes that may appear in the body of an impl, trait or extern block
ASSOC_ITEMS = (FnItem, ConstItem, TypeAlias, StaticItem, MacroCall)

# Nodes produced by the `bounds` rule
BOUND_NODES = (Lifetime, TraitBound, PreciseCapture)


@v_args(inline=True, meta=True)
class ItemTransformer(Transformer):
    """Builds item nodes. Mixed into RustTransformer."""

    # ------------------------------------------------------------------
    # Functions
    # ------------------------------------------------------------------

    def fn_item(self, meta: LarkMeta, *children) -> FnItem:
        parts = Parts(children)
        return FnItem(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            sig=parts.node(Signature),
            body=parts.node(Block),
        )

    def signature(self, meta: LarkMeta, *children) -> Signature:
        parts = Parts(children)
        return Signature(
            span=span_of(meta),
            constness=parts.token("CONST"),
            asyncness=parts.token("ASYNC"),
            unsafety=parts.token("UNSAFE"),
            abi=parts.node(Abi),
            fn_token=parts.token("FN"),
            name=parts.token("IDENT"),
            generics=parts.node(Generics),
            params=parts.nodes(Receiver, TypedParam),
            output=parts.output(),
            where_clause=parts.node(WhereClause),
        )

    def abi(self, meta: LarkMeta, extern_token, name=None) -> Abi:
        return Abi(
            span=span_of(meta),
            extern_token=to_token(extern_token),
            name=to_token(name) if name is not None else None,
        )

    def receiver(self, meta: LarkMeta, *children) -> Receiver:
        parts = Parts(children)
        return Receiver(
            span=span_of(meta),
            reference=parts.token("AMP") is not None,
            lifetime=parts.token("LIFETIME"),
            mutability=parts.token("MUT"),
            self_token=parts.token("SELF"),
            ty=parts.node(Ty),
        )

    def typed_param(self, meta: LarkMeta, *children) -> TypedParam:
        parts = Parts(children)
        return TypedParam(span=span_of(meta), pattern=parts.node(Pat), ty=parts.node(Ty))

    # ------------------------------------------------------------------
    # Data types
    # ------------------------------------------------------------------

    def enum_item(self, meta: LarkMeta, *children) -> EnumItem:
        parts = Parts(children)
        return EnumItem(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            enum_token=parts.token("ENUM"),
            name=parts.token("IDENT"),
            generics=parts.node(Generics),
            where_clause=parts.node(WhereClause),
            variants=parts.nodes(Variant),
        )

    def enum_variant(self, meta: LarkMeta, *children) -> Variant:
        parts = Parts(children)
        return Variant(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            name=parts.token("IDENT"),
            fields=parts.nodes(Field),
            discriminant=parts.node(Expr),
        )

    def tuple_fields(self, meta: LarkMeta, *fields) -> list:
        return list(fields)

    def named_fields(self, meta: LarkMeta, *fields) -> list:
        return list(fields)

    def tuple_field(self, meta: LarkMeta, *children) -> Field:
        parts = Parts(children)
        return Field(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            ty=parts.node(Ty),
        )

    def named_field(self, meta: LarkMeta, *children) -> Field:
        parts = Parts(children)
        return Field(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            name=parts.token("IDENT"),
            ty=parts.node(Ty),
        )

    def struct_item(self, meta: LarkMeta, *children) -> StructItem:
        parts = Parts(children)
        return StructItem(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            struct_token=parts.token("STRUCT"),
            name=parts.token("IDENT"),
            generics=parts.node(Generics),
            where_clause=parts.node(WhereClause),
            fields=parts.nodes(Field),
        )

    # ------------------------------------------------------------------
    # Impls and traits
    # ------------------------------------------------------------------

    def impl_item(self, meta: LarkMeta, *children) -> ImplItem:
        parts = Parts(children)
        return ImplItem(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            unsafety=parts.token("UNSAFE"),
            impl_token=parts.token("IMPL"),
            generics=parts.node(Generics),
            negative=parts.token("BANG"),
            trait_path=parts.node(Path),
            for_token=parts.token("FOR"),
            self_ty=parts.node(Ty),
            where_clause=parts.node(WhereClause),
            items=parts.nodes(*ASSOC_ITEMS),
        )

    def trait_item(self, meta: LarkMeta, *children) -> TraitItem:
        parts = Parts(children)
        return TraitItem(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            unsafety=parts.token("UNSAFE"),
            trait_token=parts.token("TRAIT"),
            name=parts.token("IDENT"),
            generics=parts.node(Generics),
            supertraits=parts.nodes(*BOUND_NODES),
            where_clause=parts.node(WhereClause),
            items=parts.nodes(*ASSOC_ITEMS),
        )

    def const_item(self, meta: LarkMeta, *children) -> ConstItem:
        parts = Parts(children)
        return ConstItem(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            const_token=parts.token("CONST"),
            name=parts.token("IDENT", "UNDERSCORE"),
            ty=parts.node(Ty),
            expr=parts.node(Expr),
        )

    def static_item(self, meta: LarkMeta, *children) -> StaticItem:
        parts = Parts(children)
        return StaticItem(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            static_token=parts.token("STATIC"),
            mutability=parts.token("MUT"),
            name=parts.token("IDENT"),
            ty=parts.node(Ty),
            expr=parts.node(Expr),
        )

    def type_alias(self, meta: LarkMeta, *children) -> TypeAlias:
        parts = Parts(children)
        return TypeAlias(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            type_token=parts.token("TYPE"),
            name=parts.token("IDENT"),
            generics=parts.node(Generics),
            bounds=parts.nodes(*BOUND_NODES),
            where_clauses=parts.nodes(WhereClause),
            ty=parts.node(Ty),
        )

    # ------------------------------------------------------------------
    # Modules and imports
    # ------------------------------------------------------------------

    def mod_item(self, meta: LarkMeta, *children) -> ModItem:
        parts = Parts(children)
        items = [
            item for item in parts.nodes(ASTNode)
            if not isinstance(item, (Attribute, Visibility))
        ]
        return ModItem(
            span=span_of(meta),
            attrs=[item for item in parts.nodes(Attribute) if not item.inner],
            vis=parts.node(Visibility),
            mod_token=parts.token("MOD"),
            name=parts.token("IDENT"),
            items=items,
        )

    def use_item(self, meta: LarkMeta, *children) -> UseItem:
        parts = Parts(children)
        return UseItem(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            use_token=parts.token("USE"),
            tree=parts.node(UsePath, UseGroup, UseGlob, UseName, UseRename),
        )

    def use_path(self, meta: LarkMeta, ident, tree) -> UsePath:
        return UsePath(span=span_of(meta), ident=to_token(ident), tree=tree)

    def use_group(self, meta: LarkMeta, *items) -> UseGroup:
        return UseGroup(span=span_of(meta), items=list(items))

    def use_glob(self, meta: LarkMeta) -> UseGlob:
        return UseGlob(span=span_of(meta))

    def use_name(self, meta: LarkMeta, ident) -> UseName:
        return UseName(span=span_of(meta), ident=to_token(ident))

    def use_rename(self, meta: LarkMeta, ident, as_token, rename) -> UseRename:
        return UseRename(
            span=span_of(meta),
            ident=to_token(ident),
            as_token=to_token(as_token),
            rename=to_token(rename),
        )

    def extern_crate(self, meta: LarkMeta, *children) -> ExternCrate:
        parts = Parts(children)
        names = parts.tokens("IDENT", "SELF", "UNDERSCORE")
        return ExternCrate(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            vis=parts.node(Visibility),
            extern_token=parts.token("EXTERN"),
            crate_token=parts.token("CRATE"),
            name=names[0],
            as_token=parts.token("AS"),
            rename=names[1] if len(names) > 1 else None,
        )

    def extern_block(self, meta: LarkMeta, *children) -> ExternBlock:
        parts = Parts(children)
        return ExternBlock(
            span=span_of(meta),
            attrs=[item for item in parts.nodes(Attribute) if not item.inner],
            unsafety=parts.token("UNSAFE"),
            abi=parts.node(Abi),
            items=parts.nodes(*ASSOC_ITEMS),
        )

    def macro_def(self, meta: LarkMeta, *children) -> MacroDef:
        parts = Parts(children)
        return MacroDef(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            path=parts.node(Path),
            bang=parts.token("BANG"),
            name=parts.token("IDENT"),
            literals=parts.nodes(LitExpr),
        )

    # ------------------------------------------------------------------
    # Generics
    # ------------------------------------------------------------------

    def generics(self, meta: LarkMeta, *params) -> Generics:
        return Generics(span=span_of(meta), params=list(params))

    def lifetime_param(self, meta: LarkMeta, *children) -> LifetimeParam:
        lifetimes = Parts(children).tokens("LIFETIME")
        return LifetimeParam(span=span_of(meta), lifetime=lifetimes[0], bounds=lifetimes[1:])

    def type_param(self, meta: LarkMeta, *children) -> TypeParam:
        parts = Parts(children)
        return TypeParam(
            span=span_of(meta),
            name=parts.token("IDENT"),
            bounds=parts.nodes(*BOUND_NODES),
            default=parts.node(Ty),
        )

    def const_param(self, meta: LarkMeta, *children) -> ConstParam:
        parts = Parts(children)
        return ConstParam(
            span=span_of(meta),
            const_token=parts.token("CONST"),
            name=parts.token("IDENT"),
            ty=parts.node(Ty),
            default=parts.node(Expr, Block),
        )

    def where_clause(self, meta: LarkMeta, where_token, *predicates) -> WhereClause:
        return WhereClause(
            span=span_of(meta),
            where_token=to_token(where_token),
            predicates=list(predicates),
        )

    def where_pred(self, meta: LarkMeta, *children) -> WherePredicate:
        parts = Parts(children)
        if isinstance(parts[0], Lifetime):
            # `'a: 'b + 'c`
            return WherePredicate(span=span_of(meta), bounded=parts[0], bounds=parts.items[1:])
        return WherePredicate(
            span=span_of(meta),
            lifetimes=parts.node(BoundLifetimes),
            bounded=parts.node(Ty),
            bounds=parts.nodes(*BOUND_NODES),
        )

    def for_lifetimes(self, meta: LarkMeta, for_token, generics) -> BoundLifetimes:
        return BoundLifetimes(span=span_of(meta), for_token=to_token(for_token), generics=generics)

    def bounds(self, meta: LarkMeta, *bounds) -> list:
        return list(bounds)

    def trait_bound(self, meta: LarkMeta, *children) -> TraitBound:
        parts = Parts(children)
        return TraitBound(
            span=span_of(meta),
            const_token=parts.token("CONST"),
            lifetimes=parts.node(BoundLifetimes),
            path=parts.node(Path),
        )

    def precise_capture(self, meta: LarkMeta, use_token, *params) -> PreciseCapture:
        return PreciseCapture(
            span=span_of(meta),
            use_token=to_token(use_token),
            params=[to_token(param) for param in params],
        )
