"""
Tag Collection Pass

Walks the AST once and registers a tagged span for every construct it can
classify. Names whose role is fixed by a declaration are tagged immediately
and recorded in the identifier memory; references whose role local syntax
cannot decide are deferred for the identification pass.

This pass only writes to the identifier memory. It never reads it.
"""

import logging
from typing import Optional

from ..shared.ast_visitor import ASTVisitor
from ..shared.categories import Category
from ..shared.identifier_memory import IdentifierMemory
from ..shared.nodes import (
    LitKind, Path, PathExpr, SourceFile, Token,
)
from ..shared.span_registry import IdentPosition, SpanRegistry
from .base import BasePass, HighlightContext

logger = logging.getLogger(__name__)

LITERAL_CATEGORIES = {
    LitKind.STR: Category.LIT_STR,
    LitKind.BYTE_STR: Category.LIT_STR,
    LitKind.C_STR: Category.LIT_STR,
    LitKind.CHAR: Category.LIT_STR,
    LitKind.BYTE: Category.LIT_STR,
    LitKind.INT: Category.LIT_NUM,
    LitKind.FLOAT: Category.LIT_NUM,
    LitKind.BOOL: Category.LIT_BOOL,
}

# Terminal kinds that are never deferred, whatever their position in a path
_SELF_KINDS = frozenset({"SELF", "SELF_TYPE"})
_PATH_KEYWORD_KINDS = frozenset({"CRATE", "SUPER"})


class TagCollector(ASTVisitor[None]):
    """
    Emits tagged spans into a SpanRegistry.

    Each node kind is visited exactly once, from its parent. Node kinds with
    nothing to highlight (attributes, `!` and `_` types, globs) fall through
    to the no-op default.
    """

    def __init__(self, registry: SpanRegistry, memory: IdentifierMemory):
        self.registry = registry
        self.memory = memory

    # ------------------------------------------------------------------
    # Registration helpers
    # ------------------------------------------------------------------

    def tag(self, item, category: Category) -> None:
        """Tag anything carrying a span (node or token)"""
        self.registry.register(item.span.start, item.span.end, category)

    def try_tag(self, item, category: Category) -> None:
        if item is not None:
            self.tag(item, category)

    def tag_merged(self, first, last, category: Category) -> None:
        """One span from the start of ``first`` to the end of ``last``"""
        self.registry.register(first.span.start, last.span.end, category)

    def declare(self, token: Token, category: Category) -> None:
        """Tag a defining occurrence and remember its category"""
        self.tag(token, category)
        self.memory.declare(token.text, category)

    def defer(self, token: Token, position: IdentPosition) -> None:
        self.registry.defer(token.span.start, token.span.end, token.text, position)

    def _tag_prefix(self, ident: Token) -> None:
        """A path segment that is not the last one"""
        if ident.kind in _SELF_KINDS:
            self.tag(ident, Category.SELF_TOKEN)
        elif ident.kind in _PATH_KEYWORD_KINDS:
            self.tag(ident, Category.KEYWORD)
        else:
            self.tag(ident, Category.SEGMENT)

    def _register_path(
        self,
        path: Path,
        last_category: Optional[Category] = None,
        position: IdentPosition = IdentPosition.BARE_PATH,
    ) -> None:
        """
        Tag every segment of ``path``. Leading segments are Segment; the last
        one gets ``last_category``, or is deferred at ``position`` when no
        category is given.
        """
        for segment in path.segments[:-1]:
            self._tag_prefix(segment.ident)
            self.try_visit(segment.args)

        last = path.last
        ident = last.ident
        if ident.kind in _SELF_KINDS:
            self.tag(ident, Category.SELF_TOKEN)
        elif ident.kind in _PATH_KEYWORD_KINDS:
            self.tag(ident, Category.KEYWORD)
        elif last_category is not None:
            self.tag(ident, last_category)
        else:
            self.defer(ident, position)
        self.try_visit(last.args)

    def _member(self, token: Optional[Token]) -> None:
        """Field name (`a.name`, `Point { name }`) or tuple index (`a.0`)"""
        if token is None:
            return
        if token.kind in ("INT", "FLOAT"):
            self.tag(token, Category.LIT_NUM)
        else:
            self.tag(token, Category.IDENT)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def visit_source_file(self, node) -> None:
        self.visit_all(node.stmts)

    def visit_block(self, node) -> None:
        self.visit_all(node.stmts)

    def visit_visibility(self, node) -> None:
        self.tag(node, Category.KEYWORD)

    def visit_lifetime(self, node) -> None:
        self.tag(node, Category.LIFETIME)

    # ------------------------------------------------------------------
    # Functions
    # ------------------------------------------------------------------

    def visit_fn_item(self, node) -> None:
        self.try_visit(node.vis)
        self.visit(node.sig)
        self.try_visit(node.body)

    def visit_signature(self, node) -> None:
        self.try_tag(node.constness, Category.KEYWORD)
        self.try_tag(node.asyncness, Category.KEYWORD)
        self.try_tag(node.unsafety, Category.KEYWORD)
        self.try_visit(node.abi)
        self.tag(node.fn_token, Category.KEYWORD)
        self.declare(node.name, Category.FUNCTION)
        self.try_visit(node.generics)
        self.visit_all(node.params)
        self.try_visit(node.output)
        self.try_visit(node.where_clause)

    def visit_abi(self, node) -> None:
        self.tag(node.extern_token, Category.KEYWORD)
        self.try_tag(node.name, Category.LIT_STR)

    def visit_receiver(self, node) -> None:
        self.try_tag(node.lifetime, Category.LIFETIME)
        self.try_tag(node.mutability, Category.KEYWORD)
        self.tag(node.self_token, Category.SELF_TOKEN)
        self.try_visit(node.ty)

    def visit_typed_param(self, node) -> None:
        self.try_visit(node.pattern)
        self.try_visit(node.ty)

    # ------------------------------------------------------------------
    # Data types
    # ------------------------------------------------------------------

    def visit_enum_item(self, node) -> None:
        self.try_visit(node.vis)
        self.tag(node.enum_token, Category.KEYWORD)
        self.declare(node.name, Category.TYPE)
        self.try_visit(node.generics)
        self.try_visit(node.where_clause)
        self.visit_all(node.variants)

    def visit_variant(self, node) -> None:
        self.declare(node.name, Category.ENUM)
        self.visit_all(node.fields)
        self.try_visit(node.discriminant)

    def visit_field(self, node) -> None:
        self.try_visit(node.vis)
        self.try_tag(node.name, Category.IDENT)
        self.try_visit(node.ty)

    def visit_struct_item(self, node) -> None:
        self.try_visit(node.vis)
        self.tag(node.struct_token, Category.KEYWORD)
        self.declare(node.name, Category.TYPE)
        self.try_visit(node.generics)
        self.try_visit(node.where_clause)
        self.visit_all(node.fields)

    # ------------------------------------------------------------------
    # Impls, traits and other items
    # ------------------------------------------------------------------

    def visit_impl_item(self, node) -> None:
        self.try_tag(node.unsafety, Category.KEYWORD)
        self.tag(node.impl_token, Category.KEYWORD)
        self.try_visit(node.generics)
        self.try_tag(node.negative, Category.KEYWORD)
        if node.trait_path is not None:
            self._register_path(node.trait_path, Category.TYPE)
        self.try_tag(node.for_token, Category.KEYWORD)
        self.try_visit(node.self_ty)
        self.try_visit(node.where_clause)
        self.visit_all(node.items)

    def visit_trait_item(self, node) -> None:
        self.try_visit(node.vis)
        self.try_tag(node.unsafety, Category.KEYWORD)
        self.tag(node.trait_token, Category.KEYWORD)
        self.declare(node.name, Category.TYPE)
        self.try_visit(node.generics)
        self.visit_all(node.supertraits)
        self.try_visit(node.where_clause)
        self.visit_all(node.items)

    def visit_const_item(self, node) -> None:
        self.try_visit(node.vis)
        self.tag(node.const_token, Category.KEYWORD)
        if node.name.kind == "UNDERSCORE":
            self.tag(node.name, Category.IDENT)
        else:
            self.declare(node.name, Category.IDENT)
        self.try_visit(node.ty)
        self.try_visit(node.expr)

    def visit_static_item(self, node) -> None:
        self.try_visit(node.vis)
        self.tag(node.static_token, Category.KEYWORD)
        self.try_tag(node.mutability, Category.KEYWORD)
        self.declare(node.name, Category.IDENT)
        self.try_visit(node.ty)
        self.try_visit(node.expr)

    def visit_type_alias(self, node) -> None:
        self.try_visit(node.vis)
        self.tag(node.type_token, Category.KEYWORD)
        self.declare(node.name, Category.TYPE)
        self.try_visit(node.generics)
        self.visit_all(node.bounds)
        self.visit_all(node.where_clauses)
        self.try_visit(node.ty)

    def visit_mod_item(self, node) -> None:
        self.try_visit(node.vis)
        self.tag(node.mod_token, Category.KEYWORD)
        self.declare(node.name, Category.SEGMENT)
        self.visit_all(node.items or [])

    def visit_extern_crate(self, node) -> None:
        self.try_visit(node.vis)
        self.tag(node.extern_token, Category.KEYWORD)
        self.tag(node.crate_token, Category.KEYWORD)
        if node.name.kind == "SELF":
            self.tag(node.name, Category.SELF_TOKEN)
        else:
            self.declare(node.name, Category.SEGMENT)
        self.try_tag(node.as_token, Category.KEYWORD)
        if node.rename is not None:
            if node.rename.kind == "UNDERSCORE":
                self.tag(node.rename, Category.IDENT)
            else:
                self.declare(node.rename, Category.SEGMENT)

    def visit_extern_block(self, node) -> None:
        self.try_tag(node.unsafety, Category.KEYWORD)
        self.visit(node.abi)
        self.visit_all(node.items)

    def visit_macro_def(self, node) -> None:
        self.tag_merged(node.path, node.bang, Category.MACRO)
        self.declare(node.name, Category.MACRO)
        self.visit_all(node.literals)

    # ------------------------------------------------------------------
    # Use trees
    # ------------------------------------------------------------------

    def visit_use_item(self, node) -> None:
        self.try_visit(node.vis)
        self.tag(node.use_token, Category.KEYWORD)
        self.visit(node.tree)

    def visit_use_path(self, node) -> None:
        self._tag_prefix(node.ident)
        self.visit(node.tree)

    def visit_use_group(self, node) -> None:
        self.visit_all(node.items)

    def visit_use_name(self, node) -> None:
        if node.ident.kind in _SELF_KINDS:
            self.tag(node.ident, Category.SELF_TOKEN)
        else:
            self.defer(node.ident, IdentPosition.USE_NAME)

    def visit_use_rename(self, node) -> None:
        self.tag(node.ident, Category.SEGMENT)
        self.tag(node.as_token, Category.KEYWORD)
        if node.rename.kind == "UNDERSCORE":
            self.tag(node.rename, Category.IDENT)
        else:
            self.tag(node.rename, Category.SEGMENT)

    # ------------------------------------------------------------------
    # Generics and bounds
    # ------------------------------------------------------------------

    def visit_generics(self, node) -> None:
        self.visit_all(node.params)

    def visit_lifetime_param(self, node) -> None:
        self.tag(node.lifetime, Category.LIFETIME)
        for bound in node.bounds:
            self.tag(bound, Category.LIFETIME)

    def visit_type_param(self, node) -> None:
        self.declare(node.name, Category.TYPE)
        self.visit_all(node.bounds)
        self.try_visit(node.default)

    def visit_const_param(self, node) -> None:
        self.tag(node.const_token, Category.KEYWORD)
        self.declare(node.name, Category.IDENT)
        self.try_visit(node.ty)
        self.try_visit(node.default)

    def visit_where_clause(self, node) -> None:
        self.tag(node.where_token, Category.KEYWORD)
        self.visit_all(node.predicates)

    def visit_where_predicate(self, node) -> None:
        self.try_visit(node.lifetimes)
        self.try_visit(node.bounded)
        self.visit_all(node.bounds)

    def visit_bound_lifetimes(self, node) -> None:
        self.tag(node.for_token, Category.KEYWORD)
        self.try_visit(node.generics)

    def visit_trait_bound(self, node) -> None:
        self.try_tag(node.const_token, Category.KEYWORD)
        self.try_visit(node.lifetimes)
        self._register_path(node.path, Category.TYPE)

    def visit_precise_capture(self, node) -> None:
        self.tag(node.use_token, Category.KEYWORD)
        for param in node.params:
            if param.kind == "LIFETIME":
                self.tag(param, Category.LIFETIME)
            elif param.kind == "SELF_TYPE":
                self.tag(param, Category.SELF_TOKEN)
            else:
                self.tag(param, Category.TYPE)

    # ------------------------------------------------------------------
    # Path pieces
    # ------------------------------------------------------------------

    def visit_generic_args(self, node) -> None:
        self.visit_all(node.args)

    def visit_paren_args(self, node) -> None:
        self.visit_all(node.inputs)
        self.try_visit(node.output)

    def visit_const_arg(self, node) -> None:
        self.try_visit(node.expr)

    def visit_assoc_type(self, node) -> None:
        self.tag(node.name, Category.TYPE)
        self.try_visit(node.generics)
        self.try_visit(node.ty)

    def visit_assoc_bound(self, node) -> None:
        self.tag(node.name, Category.TYPE)
        self.try_visit(node.generics)
        self.visit_all(node.bounds)

    def visit_qself(self, node) -> None:
        self.try_visit(node.ty)
        self.try_tag(node.as_token, Category.KEYWORD)
        if node.trait_path is not None:
            self._register_path(node.trait_path, Category.TYPE)

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def visit_let_stmt(self, node) -> None:
        self.tag(node.let_token, Category.KEYWORD)
        self.try_visit(node.pattern)
        self.try_visit(node.init)
        self.try_tag(node.else_token, Category.KEYWORD)
        self.try_visit(node.diverge)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def visit_lit_expr(self, node) -> None:
        self.tag(node, LITERAL_CATEGORIES[node.kind])

    def visit_path_expr(self, node) -> None:
        self._visit_path_expr(node)

    def _visit_path_expr(self, node: PathExpr, position: Optional[IdentPosition] = None) -> None:
        self.try_visit(node.qself)
        if position is None:
            if node.qself is not None or len(node.path.segments) > 1:
                position = IdentPosition.PATH_TAIL
            else:
                position = IdentPosition.BARE_PATH
        self._register_path(node.path, position=position)

    def visit_method_call(self, node) -> None:
        self.visit(node.receiver)
        self.tag(node.method, Category.FUNCTION)
        self.try_visit(node.turbofish)
        self.visit_all(node.args)

    def visit_call_expr(self, node) -> None:
        # callee role is left to identification: `Point(1, 2)` is a constructor
        if isinstance(node.func, PathExpr):
            self._visit_path_expr(node.func, IdentPosition.CALL_TARGET)
        else:
            self.visit(node.func)
        self.visit_all(node.args)

    def visit_field_expr(self, node) -> None:
        self.visit(node.base)
        self._member(node.member)

    def visit_await_expr(self, node) -> None:
        self.visit(node.base)
        self.tag(node.await_token, Category.KEYWORD)

    def visit_try_expr(self, node) -> None:
        self.visit(node.expr)

    def visit_index_expr(self, node) -> None:
        self.visit(node.expr)
        self.visit(node.index)

    def visit_unary_expr(self, node) -> None:
        self.visit(node.expr)

    def visit_reference_expr(self, node) -> None:
        self.try_tag(node.mutability, Category.KEYWORD)
        self.visit(node.expr)

    def visit_binary_expr(self, node) -> None:
        self.visit(node.left)
        self.visit(node.right)

    def visit_cast_expr(self, node) -> None:
        self.visit(node.expr)
        self.tag(node.as_token, Category.KEYWORD)
        self.visit(node.ty)

    def visit_range_expr(self, node) -> None:
        self.try_visit(node.start)
        self.try_visit(node.end)

    def visit_paren_expr(self, node) -> None:
        self.visit(node.expr)

    def visit_tuple_expr(self, node) -> None:
        self.visit_all(node.elems)

    def visit_array_expr(self, node) -> None:
        self.visit_all(node.elems)

    def visit_struct_expr(self, node) -> None:
        self._register_path(node.path, position=IdentPosition.STRUCT_PATH)
        self.visit_all(node.fields)
        self.try_visit(node.rest)

    def visit_field_value(self, node) -> None:
        self._member(node.member)
        self.try_visit(node.expr)

    def visit_macro_call(self, node) -> None:
        self.tag_merged(node.path, node.bang, Category.MACRO)
        self.visit_all(node.literals)

    # ------------------------------------------------------------------
    # Blocks and control flow
    # ------------------------------------------------------------------

    def visit_block_expr(self, node) -> None:
        self.try_visit(node.label)
        self.visit(node.block)

    def visit_unsafe_block(self, node) -> None:
        self.tag(node.unsafe_token, Category.KEYWORD)
        self.visit(node.block)

    def visit_async_block(self, node) -> None:
        self.tag(node.async_token, Category.KEYWORD)
        self.try_tag(node.move_token, Category.KEYWORD)
        self.visit(node.block)

    def visit_const_block(self, node) -> None:
        self.tag(node.const_token, Category.KEYWORD)
        self.visit(node.block)

    def visit_let_expr(self, node) -> None:
        self.tag(node.let_token, Category.KEYWORD)
        self.visit(node.pattern)
        self.visit(node.expr)

    def visit_if_expr(self, node) -> None:
        self.tag(node.if_token, Category.KEYWORD)
        self.visit(node.cond)
        self.visit(node.then_branch)
        self.try_tag(node.else_token, Category.KEYWORD)
        self.try_visit(node.else_branch)

    def visit_match_expr(self, node) -> None:
        self.tag(node.match_token, Category.KEYWORD)
        self.visit(node.expr)
        self.visit_all(node.arms)

    def visit_arm(self, node) -> None:
        self.try_visit(node.pattern)
        self.try_tag(node.if_token, Category.KEYWORD)
        self.try_visit(node.guard)
        self.try_visit(node.body)

    def visit_for_expr(self, node) -> None:
        self.try_visit(node.label)
        self.tag(node.for_token, Category.KEYWORD)
        self.try_visit(node.pattern)
        self.tag(node.in_token, Category.KEYWORD)
        self.visit(node.expr)
        self.visit(node.body)

    def visit_while_expr(self, node) -> None:
        self.try_visit(node.label)
        self.tag(node.while_token, Category.KEYWORD)
        self.visit(node.cond)
        self.visit(node.body)

    def visit_loop_expr(self, node) -> None:
        self.try_visit(node.label)
        self.tag(node.loop_token, Category.KEYWORD)
        self.visit(node.body)

    def visit_closure_expr(self, node) -> None:
        self.try_tag(node.asyncness, Category.KEYWORD)
        self.try_tag(node.move_token, Category.KEYWORD)
        self.visit_all(node.params)
        self.try_visit(node.output)
        self.try_visit(node.body)

    def visit_closure_param(self, node) -> None:
        self.try_visit(node.pattern)
        self.try_visit(node.ty)

    def visit_return_expr(self, node) -> None:
        self.tag(node.return_token, Category.KEYWORD)
        self.try_visit(node.expr)

    def visit_break_expr(self, node) -> None:
        self.tag(node.break_token, Category.KEYWORD)
        self.try_visit(node.label)
        self.try_visit(node.expr)

    def visit_continue_expr(self, node) -> None:
        self.tag(node.continue_token, Category.KEYWORD)
        self.try_visit(node.label)

    # ------------------------------------------------------------------
    # Patterns
    # ------------------------------------------------------------------

    def visit_ident_pat(self, node) -> None:
        self.try_tag(node.by_ref, Category.KEYWORD)
        self.try_tag(node.mutability, Category.KEYWORD)
        is_plain = node.by_ref is None and node.mutability is None and node.subpat is None
        if is_plain and node.ident.text[:1].isupper():
            # `None`, `MAX`: a unit variant or constant, not a new binding
            self.defer(node.ident, IdentPosition.PATTERN)
        else:
            self.declare(node.ident, Category.IDENT)
        self.try_visit(node.subpat)

    def visit_ref_pat(self, node) -> None:
        self.try_tag(node.mutability, Category.KEYWORD)
        self.try_visit(node.pat)

    def visit_type_pat(self, node) -> None:
        self.try_visit(node.pat)
        self.try_visit(node.ty)

    def visit_tuple_pat(self, node) -> None:
        self.visit_all(node.elems)

    def visit_paren_pat(self, node) -> None:
        self.try_visit(node.pat)

    def visit_tuple_struct_pat(self, node) -> None:
        self.try_visit(node.qself)
        self._register_path(node.path, Category.ENUM)
        self.visit_all(node.elems)

    def visit_path_pat(self, node) -> None:
        self.try_visit(node.qself)
        self._register_path(node.path, position=IdentPosition.PATTERN)

    def visit_struct_pat(self, node) -> None:
        self.try_visit(node.qself)
        self._register_path(node.path, position=IdentPosition.STRUCT_PATH)
        self.visit_all(node.fields)
        self.try_tag(node.rest, Category.IDENT)

    def visit_field_pat(self, node) -> None:
        self._member(node.member)
        self.try_visit(node.pat)

    def visit_lit_pat(self, node) -> None:
        # one span, so a negative literal keeps its sign
        self.tag(node, LITERAL_CATEGORIES[node.lit.kind])

    def visit_range_pat(self, node) -> None:
        self.try_visit(node.start)
        self.try_visit(node.end)

    def visit_wild_pat(self, node) -> None:
        self.tag(node.token, Category.IDENT)

    def visit_rest_pat(self, node) -> None:
        self.tag(node.token, Category.IDENT)

    def visit_slice_pat(self, node) -> None:
        self.visit_all(node.elems)

    def visit_or_pat(self, node) -> None:
        self.visit_all(node.cases)

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def visit_path_type(self, node) -> None:
        self.try_visit(node.qself)
        self._register_path(node.path, Category.TYPE)

    def visit_ref_type(self, node) -> None:
        self.try_visit(node.lifetime)
        self.try_tag(node.mutability, Category.KEYWORD)
        self.visit(node.elem)

    def visit_tuple_type(self, node) -> None:
        self.visit_all(node.elems)

    def visit_paren_type(self, node) -> None:
        self.visit(node.elem)

    def visit_slice_type(self, node) -> None:
        self.visit(node.elem)

    def visit_array_type(self, node) -> None:
        self.visit(node.elem)
        self.try_visit(node.len)

    def visit_ptr_type(self, node) -> None:
        self.tag(node.qualifier, Category.KEYWORD)
        self.visit(node.elem)

    def visit_fn_ptr_type(self, node) -> None:
        self.try_visit(node.lifetimes)
        self.try_tag(node.unsafety, Category.KEYWORD)
        self.try_visit(node.abi)
        self.tag(node.fn_token, Category.KEYWORD)
        self.visit_all(node.params)
        self.try_visit(node.output)

    def visit_fn_ptr_param(self, node) -> None:
        self.try_tag(node.name, Category.IDENT)
        self.visit(node.ty)

    def visit_impl_trait_type(self, node) -> None:
        self.tag(node.impl_token, Category.KEYWORD)
        self.visit_all(node.bounds)

    def visit_dyn_trait_type(self, node) -> None:
        self.tag(node.dyn_token, Category.KEYWORD)
        self.visit_all(node.bounds)


class TagCollectionPass(BasePass):
    """Runs the TagCollector over the whole file"""
    requires = []

    def run(self, program: SourceFile, ctx: HighlightContext) -> SourceFile:
        TagCollector(ctx.registry, ctx.memory).visit(program)
        deferred = len(ctx.registry.deferred())
        logger.debug(
            "collected %d spans (%d deferred), %d names in memory",
            len(ctx.registry), deferred, len(ctx.memory),
        )
        ctx.set_analysis(TagCollectionPass, deferred)
        return program

