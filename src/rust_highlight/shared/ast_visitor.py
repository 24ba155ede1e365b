"""
AST Visitor

Rust Pattern: rustc_ast::visit::Visitor

One method per ``NodeType``. Every method falls back to ``generic_visit``,
which does nothing: a visitor only overrides the node kinds it handles, and a
node kind it does not handle is an explicit no-op rather than an error.
"""

from typing import Generic, Iterable, Optional, TypeVar

from .nodes import ASTNode

T = TypeVar('T')


class ASTVisitor(Generic[T]):
    """Base visitor over the Rust AST"""

    def visit(self, node: ASTNode) -> T:
        return node.accept(self)

    def try_visit(self, node: Optional[ASTNode]) -> Optional[T]:
        if node is None:
            return None
        return node.accept(self)

    def visit_all(self, nodes: Iterable[ASTNode]) -> None:
        for node in nodes:
            node.accept(self)

    def generic_visit(self, node: ASTNode) -> T:
        """Default for node kinds a visitor does not handle"""
        return None

    def visit_source_file(self, node) -> T:
        return self.generic_visit(node)

    def visit_block(self, node) -> T:
        return self.generic_visit(node)

    def visit_attribute(self, node) -> T:
        return self.generic_visit(node)

    def visit_visibility(self, node) -> T:
        return self.generic_visit(node)

    def visit_lifetime(self, node) -> T:
        return self.generic_visit(node)

    def visit_fn_item(self, node) -> T:
        return self.generic_visit(node)

    def visit_signature(self, node) -> T:
        return self.generic_visit(node)

    def visit_abi(self, node) -> T:
        return self.generic_visit(node)

    def visit_receiver(self, node) -> T:
        return self.generic_visit(node)

    def visit_typed_param(self, node) -> T:
        return self.generic_visit(node)

    def visit_enum_item(self, node) -> T:
        return self.generic_visit(node)

    def visit_variant(self, node) -> T:
        return self.generic_visit(node)

    def visit_field(self, node) -> T:
        return self.generic_visit(node)

    def visit_struct_item(self, node) -> T:
        return self.generic_visit(node)

    def visit_impl_item(self, node) -> T:
        return self.generic_visit(node)

    def visit_trait_item(self, node) -> T:
        return self.generic_visit(node)

    def visit_const_item(self, node) -> T:
        return self.generic_visit(node)

    def visit_static_item(self, node) -> T:
        return self.generic_visit(node)

    def visit_type_alias(self, node) -> T:
        return self.generic_visit(node)

    def visit_mod_item(self, node) -> T:
        return self.generic_visit(node)

    def visit_use_item(self, node) -> T:
        return self.generic_visit(node)

    def visit_use_path(self, node) -> T:
        return self.generic_visit(node)

    def visit_use_name(self, node) -> T:
        return self.generic_visit(node)

    def visit_use_rename(self, node) -> T:
        return self.generic_visit(node)

    def visit_use_glob(self, node) -> T:
        return self.generic_visit(node)

    def visit_use_group(self, node) -> T:
        return self.generic_visit(node)

    def visit_extern_crate(self, node) -> T:
        return self.generic_visit(node)

    def visit_extern_block(self, node) -> T:
        return self.generic_visit(node)

    def visit_macro_def(self, node) -> T:
        return self.generic_visit(node)

    def visit_generics(self, node) -> T:
        return self.generic_visit(node)

    def visit_lifetime_param(self, node) -> T:
        return self.generic_visit(node)

    def visit_type_param(self, node) -> T:
        return self.generic_visit(node)

    def visit_const_param(self, node) -> T:
        return self.generic_visit(node)

    def visit_where_clause(self, node) -> T:
        return self.generic_visit(node)

    def visit_where_predicate(self, node) -> T:
        return self.generic_visit(node)

    def visit_bound_lifetimes(self, node) -> T:
        return self.generic_visit(node)

    def visit_trait_bound(self, node) -> T:
        return self.generic_visit(node)

    def visit_precise_capture(self, node) -> T:
        return self.generic_visit(node)

    def visit_path(self, node) -> T:
        return self.generic_visit(node)

    def visit_path_segment(self, node) -> T:
        return self.generic_visit(node)

    def visit_generic_args(self, node) -> T:
        return self.generic_visit(node)

    def visit_paren_args(self, node) -> T:
        return self.generic_visit(node)

    def visit_const_arg(self, node) -> T:
        return self.generic_visit(node)

    def visit_assoc_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_assoc_bound(self, node) -> T:
        return self.generic_visit(node)

    def visit_qself(self, node) -> T:
        return self.generic_visit(node)

    def visit_let_stmt(self, node) -> T:
        return self.generic_visit(node)

    def visit_lit_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_path_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_method_call(self, node) -> T:
        return self.generic_visit(node)

    def visit_call_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_field_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_await_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_try_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_index_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_unary_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_reference_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_binary_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_cast_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_range_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_paren_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_tuple_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_array_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_block_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_unsafe_block(self, node) -> T:
        return self.generic_visit(node)

    def visit_async_block(self, node) -> T:
        return self.generic_visit(node)

    def visit_const_block(self, node) -> T:
        return self.generic_visit(node)

    def visit_if_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_let_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_match_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_arm(self, node) -> T:
        return self.generic_visit(node)

    def visit_for_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_while_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_loop_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_closure_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_closure_param(self, node) -> T:
        return self.generic_visit(node)

    def visit_return_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_break_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_continue_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_struct_expr(self, node) -> T:
        return self.generic_visit(node)

    def visit_field_value(self, node) -> T:
        return self.generic_visit(node)

    def visit_macro_call(self, node) -> T:
        return self.generic_visit(node)

    def visit_ident_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_ref_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_type_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_tuple_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_paren_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_tuple_struct_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_path_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_struct_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_field_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_lit_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_range_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_wild_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_rest_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_slice_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_or_pat(self, node) -> T:
        return self.generic_visit(node)

    def visit_path_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_ref_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_tuple_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_paren_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_slice_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_array_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_ptr_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_never_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_infer_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_fn_ptr_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_fn_ptr_param(self, node) -> T:
        return self.generic_visit(node)

    def visit_impl_trait_type(self, node) -> T:
        return self.generic_visit(node)

    def visit_dyn_trait_type(self, node) -> T:
        return self.generic_visit(node)
