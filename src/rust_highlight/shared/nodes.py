"""
Rust AST Definitions

A tagged-variant tree: every node kind is listed in ``NodeType`` and carries
the span of source text it was parsed from. ``accept`` dispatches to the
visitor method named after the node type, so adding a construct means adding
a ``NodeType`` member, a node class and a visitor method.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Optional, Union

from .source_location import Span


class NodeType(Enum):
    """AST node kinds (value = visitor method suffix)"""
    SOURCE_FILE = "source_file"
    BLOCK = "block"
    ATTRIBUTE = "attribute"
    VISIBILITY = "visibility"
    LIFETIME = "lifetime"

    # Items
    FN_ITEM = "fn_item"
    SIGNATURE = "signature"
    ABI = "abi"
    RECEIVER = "receiver"
    TYPED_PARAM = "typed_param"
    ENUM_ITEM = "enum_item"
    VARIANT = "variant"
    FIELD = "field"
    STRUCT_ITEM = "struct_item"
    IMPL_ITEM = "impl_item"
    TRAIT_ITEM = "trait_item"
    CONST_ITEM = "const_item"
    STATIC_ITEM = "static_item"
    TYPE_ALIAS = "type_alias"
    MOD_ITEM = "mod_item"
    USE_ITEM = "use_item"
    USE_PATH = "use_path"
    USE_NAME = "use_name"
    USE_RENAME = "use_rename"
    USE_GLOB = "use_glob"
    USE_GROUP = "use_group"
    EXTERN_CRATE = "extern_crate"
    EXTERN_BLOCK = "extern_block"
    MACRO_DEF = "macro_def"

    # Generics
    GENERICS = "generics"
    LIFETIME_PARAM = "lifetime_param"
    TYPE_PARAM = "type_param"
    CONST_PARAM = "const_param"
    WHERE_CLAUSE = "where_clause"
    WHERE_PREDICATE = "where_predicate"
    BOUND_LIFETIMES = "bound_lifetimes"
    TRAIT_BOUND = "trait_bound"
    PRECISE_CAPTURE = "precise_capture"

    # Paths
    PATH = "path"
    PATH_SEGMENT = "path_segment"
    GENERIC_ARGS = "generic_args"
    PAREN_ARGS = "paren_args"
    CONST_ARG = "const_arg"
    ASSOC_TYPE = "assoc_type"
    ASSOC_BOUND = "assoc_bound"
    QSELF = "qself"

    # Statements
    LET_STMT = "let_stmt"

    # Expressions
    LIT_EXPR = "lit_expr"
    PATH_EXPR = "path_expr"
    METHOD_CALL = "method_call"
    CALL_EXPR = "call_expr"
    FIELD_EXPR = "field_expr"
    AWAIT_EXPR = "await_expr"
    TRY_EXPR = "try_expr"
    INDEX_EXPR = "index_expr"
    UNARY_EXPR = "unary_expr"
    REFERENCE_EXPR = "reference_expr"
    BINARY_EXPR = "binary_expr"
    CAST_EXPR = "cast_expr"
    RANGE_EXPR = "range_expr"
    PAREN_EXPR = "paren_expr"
    TUPLE_EXPR = "tuple_expr"
    ARRAY_EXPR = "array_expr"
    BLOCK_EXPR = "block_expr"
    UNSAFE_BLOCK = "unsafe_block"
    ASYNC_BLOCK = "async_block"
    CONST_BLOCK = "const_block"
    IF_EXPR = "if_expr"
    LET_EXPR = "let_expr"
    MATCH_EXPR = "match_expr"
    ARM = "arm"
    FOR_EXPR = "for_expr"
    WHILE_EXPR = "while_expr"
    LOOP_EXPR = "loop_expr"
    CLOSURE_EXPR = "closure_expr"
    CLOSURE_PARAM = "closure_param"
    RETURN_EXPR = "return_expr"
    BREAK_EXPR = "break_expr"
    CONTINUE_EXPR = "continue_expr"
    STRUCT_EXPR = "struct_expr"
    FIELD_VALUE = "field_value"
    MACRO_CALL = "macro_call"

    # Patterns
    IDENT_PAT = "ident_pat"
    REF_PAT = "ref_pat"
    TYPE_PAT = "type_pat"
    TUPLE_PAT = "tuple_pat"
    PAREN_PAT = "paren_pat"
    TUPLE_STRUCT_PAT = "tuple_struct_pat"
    PATH_PAT = "path_pat"
    STRUCT_PAT = "struct_pat"
    FIELD_PAT = "field_pat"
    LIT_PAT = "lit_pat"
    RANGE_PAT = "range_pat"
    WILD_PAT = "wild_pat"
    REST_PAT = "rest_pat"
    SLICE_PAT = "slice_pat"
    OR_PAT = "or_pat"

    # Types
    PATH_TYPE = "path_type"
    REF_TYPE = "ref_type"
    TUPLE_TYPE = "tuple_type"
    PAREN_TYPE = "paren_type"
    SLICE_TYPE = "slice_type"
    ARRAY_TYPE = "array_type"
    PTR_TYPE = "ptr_type"
    NEVER_TYPE = "never_type"
    INFER_TYPE = "infer_type"
    FN_PTR_TYPE = "fn_ptr_type"
    FN_PTR_PARAM = "fn_ptr_param"
    IMPL_TRAIT_TYPE = "impl_trait_type"
    DYN_TRAIT_TYPE = "dyn_trait_type"


class LitKind(Enum):
    """Literal token kinds"""
    STR = "str"
    BYTE_STR = "byte_str"
    C_STR = "c_str"
    CHAR = "char"
    BYTE = "byte"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


@dataclass(frozen=True)
class Token:
    """A leaf token: its text, lexer kind (terminal name) and span"""
    text: str
    kind: str
    span: Span

    def __str__(self) -> str:
        return self.text


@dataclass
class ASTNode:
    """Base class for all AST nodes"""
    span: Span
    node_type: ClassVar[NodeType]

    def accept(self, visitor: Any) -> Any:
        return getattr(visitor, f"visit_{self.node_type.value}")(self)


@dataclass
class Expr(ASTNode):
    """Base class for expressions"""


@dataclass
class Pat(ASTNode):
    """Base class for patterns"""


@dataclass
class Ty(ASTNode):
    """Base class for types"""


# ============================================================================
# Common
# ============================================================================

@dataclass
class Attribute(ASTNode):
    node_type = NodeType.ATTRIBUTE
    inner: bool = False


@dataclass
class Visibility(ASTNode):
    """`pub`, `pub(crate)`, `pub(in path)`: tagged as one span"""
    node_type = NodeType.VISIBILITY


@dataclass
class Lifetime(ASTNode):
    node_type = NodeType.LIFETIME
    token: Optional[Token] = None


@dataclass
class Block(ASTNode):
    """`{ stmts; tail }` (tail expression, if any, is the last element)"""
    node_type = NodeType.BLOCK
    attrs: List[Attribute] = field(default_factory=list)
    stmts: List[ASTNode] = field(default_factory=list)


@dataclass
class SourceFile(ASTNode):
    node_type = NodeType.SOURCE_FILE
    attrs: List[Attribute] = field(default_factory=list)
    stmts: List[ASTNode] = field(default_factory=list)


# ============================================================================
# Paths
# ============================================================================

@dataclass
class PathSegment(ASTNode):
    node_type = NodeType.PATH_SEGMENT
    ident: Optional[Token] = None
    args: Optional[Union["GenericArgs", "ParenArgs"]] = None


@dataclass
class Path(ASTNode):
    node_type = NodeType.PATH
    segments: List[PathSegment] = field(default_factory=list)

    @property
    def last(self) -> PathSegment:
        return self.segments[-1]


@dataclass
class GenericArgs(ASTNode):
    node_type = NodeType.GENERIC_ARGS
    args: List[ASTNode] = field(default_factory=list)


@dataclass
class ParenArgs(ASTNode):
    """`Fn(A, B) -> C` style arguments"""
    node_type = NodeType.PAREN_ARGS
    inputs: List[Ty] = field(default_factory=list)
    output: Optional[Ty] = None


@dataclass
class ConstArg(ASTNode):
    node_type = NodeType.CONST_ARG
    expr: Optional[ASTNode] = None


@dataclass
class AssocType(ASTNode):
    """`Item = T` inside generic arguments"""
    node_type = NodeType.ASSOC_TYPE
    name: Optional[Token] = None
    generics: Optional[GenericArgs] = None
    ty: Optional[Ty] = None


@dataclass
class AssocBound(ASTNode):
    """`Item: Bound` inside generic arguments"""
    node_type = NodeType.ASSOC_BOUND
    name: Optional[Token] = None
    generics: Optional[GenericArgs] = None
    bounds: List[ASTNode] = field(default_factory=list)


@dataclass
class QSelf(ASTNode):
    """`<T as Trait>::` prefix"""
    node_type = NodeType.QSELF
    ty: Optional[Ty] = None
    as_token: Optional[Token] = None
    trait_path: Optional[Path] = None


# ============================================================================
# Generics
# ============================================================================

@dataclass
class LifetimeParam(ASTNode):
    node_type = NodeType.LIFETIME_PARAM
    lifetime: Optional[Token] = None
    bounds: List[Token] = field(default_factory=list)


@dataclass
class TypeParam(ASTNode):
    node_type = NodeType.TYPE_PARAM
    name: Optional[Token] = None
    bounds: List[ASTNode] = field(default_factory=list)
    default: Optional[Ty] = None


@dataclass
class ConstParam(ASTNode):
    node_type = NodeType.CONST_PARAM
    const_token: Optional[Token] = None
    name: Optional[Token] = None
    ty: Optional[Ty] = None
    default: Optional[ASTNode] = None


@dataclass
class Generics(ASTNode):
    node_type = NodeType.GENERICS
    params: List[ASTNode] = field(default_factory=list)


@dataclass
class BoundLifetimes(ASTNode):
    """`for<'a>`"""
    node_type = NodeType.BOUND_LIFETIMES
    for_token: Optional[Token] = None
    generics: Optional[Generics] = None


@dataclass
class WherePredicate(ASTNode):
    node_type = NodeType.WHERE_PREDICATE
    lifetimes: Optional[BoundLifetimes] = None
    bounded: Optional[ASTNode] = None
    bounds: List[ASTNode] = field(default_factory=list)


@dataclass
class WhereClause(ASTNode):
    node_type = NodeType.WHERE_CLAUSE
    where_token: Optional[Token] = None
    predicates: List[WherePredicate] = field(default_factory=list)


@dataclass
class TraitBound(ASTNode):
    node_type = NodeType.TRAIT_BOUND
    const_token: Optional[Token] = None
    lifetimes: Optional[BoundLifetimes] = None
    path: Optional[Path] = None


@dataclass
class PreciseCapture(ASTNode):
    """`use<'a, T>` bound"""
    node_type = NodeType.PRECISE_CAPTURE
    use_token: Optional[Token] = None
    params: List[Token] = field(default_factory=list)


# ============================================================================
# Items
# ============================================================================

@dataclass
class Abi(ASTNode):
    node_type = NodeType.ABI
    extern_token: Optional[Token] = None
    name: Optional[Token] = None


@dataclass
class Receiver(ASTNode):
    """`self`, `&self`, `&'a mut self`, `self: Box<Self>`"""
    node_type = NodeType.RECEIVER
    reference: bool = False
    lifetime: Optional[Token] = None
    mutability: Optional[Token] = None
    self_token: Optional[Token] = None
    ty: Optional[Ty] = None


@dataclass
class TypedParam(ASTNode):
    node_type = NodeType.TYPED_PARAM
    pattern: Optional[Pat] = None
    ty: Optional[Ty] = None


@dataclass
class Signature(ASTNode):
    node_type = NodeType.SIGNATURE
    constness: Optional[Token] = None
    asyncness: Optional[Token] = None
    unsafety: Optional[Token] = None
    abi: Optional[Abi] = None
    fn_token: Optional[Token] = None
    name: Optional[Token] = None
    generics: Optional[Generics] = None
    params: List[ASTNode] = field(default_factory=list)
    output: Optional[Ty] = None
    where_clause: Optional[WhereClause] = None


@dataclass
class FnItem(ASTNode):
    node_type = NodeType.FN_ITEM
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    sig: Optional[Signature] = None
    body: Optional[Block] = None


@dataclass
class Field(ASTNode):
    """Struct or variant field; ``name`` is None for tuple fields"""
    node_type = NodeType.FIELD
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    name: Optional[Token] = None
    ty: Optional[Ty] = None


@dataclass
class Variant(ASTNode):
    node_type = NodeType.VARIANT
    attrs: List[Attribute] = field(default_factory=list)
    name: Optional[Token] = None
    fields: List[Field] = field(default_factory=list)
    discriminant: Optional[Expr] = None


@dataclass
class EnumItem(ASTNode):
    node_type = NodeType.ENUM_ITEM
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    enum_token: Optional[Token] = None
    name: Optional[Token] = None
    generics: Optional[Generics] = None
    where_clause: Optional[WhereClause] = None
    variants: List[Variant] = field(default_factory=list)


@dataclass
class StructItem(ASTNode):
    node_type = NodeType.STRUCT_ITEM
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    struct_token: Optional[Token] = None
    name: Optional[Token] = None
    generics: Optional[Generics] = None
    where_clause: Optional[WhereClause] = None
    fields: List[Field] = field(default_factory=list)


@dataclass
class ImplItem(ASTNode):
    node_type = NodeType.IMPL_ITEM
    attrs: List[Attribute] = field(default_factory=list)
    unsafety: Optional[Token] = None
    impl_token: Optional[Token] = None
    generics: Optional[Generics] = None
    negative: Optional[Token] = None
    trait_path: Optional[Path] = None
    for_token: Optional[Token] = None
    self_ty: Optional[Ty] = None
    where_clause: Optional[WhereClause] = None
    items: List[ASTNode] = field(default_factory=list)


@dataclass
class TraitItem(ASTNode):
    node_type = NodeType.TRAIT_ITEM
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    unsafety: Optional[Token] = None
    trait_token: Optional[Token] = None
    name: Optional[Token] = None
    generics: Optional[Generics] = None
    supertraits: List[ASTNode] = field(default_factory=list)
    where_clause: Optional[WhereClause] = None
    items: List[ASTNode] = field(default_factory=list)


@dataclass
class ConstItem(ASTNode):
    node_type = NodeType.CONST_ITEM
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    const_token: Optional[Token] = None
    name: Optional[Token] = None
    ty: Optional[Ty] = None
    expr: Optional[Expr] = None


@dataclass
class StaticItem(ASTNode):
    node_type = NodeType.STATIC_ITEM
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    static_token: Optional[Token] = None
    mutability: Optional[Token] = None
    name: Optional[Token] = None
    ty: Optional[Ty] = None
    expr: Optional[Expr] = None


@dataclass
class TypeAlias(ASTNode):
    node_type = NodeType.TYPE_ALIAS
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    type_token: Optional[Token] = None
    name: Optional[Token] = None
    generics: Optional[Generics] = None
    bounds: List[ASTNode] = field(default_factory=list)
    where_clauses: List[WhereClause] = field(default_factory=list)
    ty: Optional[Ty] = None


@dataclass
class ModItem(ASTNode):
    node_type = NodeType.MOD_ITEM
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    mod_token: Optional[Token] = None
    name: Optional[Token] = None
    items: Optional[List[ASTNode]] = None


@dataclass
class UsePath(ASTNode):
    """`segment::tree`"""
    node_type = NodeType.USE_PATH
    ident: Optional[Token] = None
    tree: Optional[ASTNode] = None


@dataclass
class UseName(ASTNode):
    node_type = NodeType.USE_NAME
    ident: Optional[Token] = None


@dataclass
class UseRename(ASTNode):
    node_type = NodeType.USE_RENAME
    ident: Optional[Token] = None
    as_token: Optional[Token] = None
    rename: Optional[Token] = None


@dataclass
class UseGlob(ASTNode):
    node_type = NodeType.USE_GLOB


@dataclass
class UseGroup(ASTNode):
    node_type = NodeType.USE_GROUP
    items: List[ASTNode] = field(default_factory=list)


@dataclass
class UseItem(ASTNode):
    node_type = NodeType.USE_ITEM
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    use_token: Optional[Token] = None
    tree: Optional[ASTNode] = None


@dataclass
class ExternCrate(ASTNode):
    node_type = NodeType.EXTERN_CRATE
    attrs: List[Attribute] = field(default_factory=list)
    vis: Optional[Visibility] = None
    extern_token: Optional[Token] = None
    crate_token: Optional[Token] = None
    name: Optional[Token] = None
    as_token: Optional[Token] = None
    rename: Optional[Token] = None


@dataclass
class ExternBlock(ASTNode):
    node_type = NodeType.EXTERN_BLOCK
    attrs: List[Attribute] = field(default_factory=list)
    unsafety: Optional[Token] = None
    abi: Optional[Abi] = None
    items: List[ASTNode] = field(default_factory=list)


@dataclass
class MacroDef(ASTNode):
    """`macro_rules! name { ... }`"""
    node_type = NodeType.MACRO_DEF
    attrs: List[Attribute] = field(default_factory=list)
    path: Optional[Path] = None
    bang: Optional[Token] = None
    name: Optional[Token] = None
    literals: List["LitExpr"] = field(default_factory=list)


# ============================================================================
# Statements
# ============================================================================

@dataclass
class LetStmt(ASTNode):
    node_type = NodeType.LET_STMT
    attrs: List[Attribute] = field(default_factory=list)
    let_token: Optional[Token] = None
    pattern: Optional[Pat] = None
    init: Optional[Expr] = None
    else_token: Optional[Token] = None
    diverge: Optional[Block] = None


# ============================================================================
# Expressions
# ============================================================================

@dataclass
class LitExpr(Expr):
    node_type = NodeType.LIT_EXPR
    token: Optional[Token] = None
    kind: LitKind = LitKind.INT


@dataclass
class PathExpr(Expr):
    node_type = NodeType.PATH_EXPR
    qself: Optional[QSelf] = None
    path: Optional[Path] = None


@dataclass
class MethodCall(Expr):
    node_type = NodeType.METHOD_CALL
    receiver: Optional[Expr] = None
    method: Optional[Token] = None
    turbofish: Optional[GenericArgs] = None
    args: List[Expr] = field(default_factory=list)


@dataclass
class CallExpr(Expr):
    node_type = NodeType.CALL_EXPR
    func: Optional[Expr] = None
    args: List[Expr] = field(default_factory=list)


@dataclass
class FieldExpr(Expr):
    """`base.name` or `base.0`"""
    node_type = NodeType.FIELD_EXPR
    base: Optional[Expr] = None
    member: Optional[Token] = None


@dataclass
class AwaitExpr(Expr):
    node_type = NodeType.AWAIT_EXPR
    base: Optional[Expr] = None
    await_token: Optional[Token] = None


@dataclass
class TryExpr(Expr):
    node_type = NodeType.TRY_EXPR
    expr: Optional[Expr] = None


@dataclass
class IndexExpr(Expr):
    node_type = NodeType.INDEX_EXPR
    expr: Optional[Expr] = None
    index: Optional[Expr] = None


@dataclass
class UnaryExpr(Expr):
    node_type = NodeType.UNARY_EXPR
    expr: Optional[Expr] = None


@dataclass
class ReferenceExpr(Expr):
    node_type = NodeType.REFERENCE_EXPR
    mutability: Optional[Token] = None
    expr: Optional[Expr] = None


@dataclass
class BinaryExpr(Expr):
    """Binary operators and (compound) assignment"""
    node_type = NodeType.BINARY_EXPR
    left: Optional[Expr] = None
    right: Optional[Expr] = None


@dataclass
class CastExpr(Expr):
    node_type = NodeType.CAST_EXPR
    expr: Optional[Expr] = None
    as_token: Optional[Token] = None
    ty: Optional[Ty] = None


@dataclass
class RangeExpr(Expr):
    node_type = NodeType.RANGE_EXPR
    start: Optional[Expr] = None
    end: Optional[Expr] = None


@dataclass
class ParenExpr(Expr):
    node_type = NodeType.PAREN_EXPR
    expr: Optional[Expr] = None


@dataclass
class TupleExpr(Expr):
    node_type = NodeType.TUPLE_EXPR
    elems: List[Expr] = field(default_factory=list)


@dataclass
class ArrayExpr(Expr):
    """`[a, b]` or `[value; len]`"""
    node_type = NodeType.ARRAY_EXPR
    elems: List[Expr] = field(default_factory=list)


@dataclass
class BlockExpr(Expr):
    node_type = NodeType.BLOCK_EXPR
    label: Optional[Lifetime] = None
    block: Optional[Block] = None


@dataclass
class UnsafeBlock(Expr):
    node_type = NodeType.UNSAFE_BLOCK
    unsafe_token: Optional[Token] = None
    block: Optional[Block] = None


@dataclass
class AsyncBlock(Expr):
    node_type = NodeType.ASYNC_BLOCK
    async_token: Optional[Token] = None
    move_token: Optional[Token] = None
    block: Optional[Block] = None


@dataclass
class ConstBlock(Expr):
    node_type = NodeType.CONST_BLOCK
    const_token: Optional[Token] = None
    block: Optional[Block] = None


@dataclass
class LetExpr(Expr):
    """`let PAT = EXPR` in `if`/`while` conditions"""
    node_type = NodeType.LET_EXPR
    let_token: Optional[Token] = None
    pattern: Optional[Pat] = None
    expr: Optional[Expr] = None


@dataclass
class IfExpr(Expr):
    node_type = NodeType.IF_EXPR
    if_token: Optional[Token] = None
    cond: Optional[Expr] = None
    then_branch: Optional[Block] = None
    else_token: Optional[Token] = None
    else_branch: Optional[ASTNode] = None


@dataclass
class Arm(ASTNode):
    node_type = NodeType.ARM
    attrs: List[Attribute] = field(default_factory=list)
    pattern: Optional[Pat] = None
    if_token: Optional[Token] = None
    guard: Optional[Expr] = None
    body: Optional[Expr] = None


@dataclass
class MatchExpr(Expr):
    node_type = NodeType.MATCH_EXPR
    match_token: Optional[Token] = None
    expr: Optional[Expr] = None
    arms: List[Arm] = field(default_factory=list)


@dataclass
class ForExpr(Expr):
    node_type = NodeType.FOR_EXPR
    label: Optional[Lifetime] = None
    for_token: Optional[Token] = None
    pattern: Optional[Pat] = None
    in_token: Optional[Token] = None
    expr: Optional[Expr] = None
    body: Optional[Block] = None


@dataclass
class WhileExpr(Expr):
    node_type = NodeType.WHILE_EXPR
    label: Optional[Lifetime] = None
    while_token: Optional[Token] = None
    cond: Optional[Expr] = None
    body: Optional[Block] = None


@dataclass
class LoopExpr(Expr):
    node_type = NodeType.LOOP_EXPR
    label: Optional[Lifetime] = None
    loop_token: Optional[Token] = None
    body: Optional[Block] = None


@dataclass
class ClosureParam(ASTNode):
    node_type = NodeType.CLOSURE_PARAM
    pattern: Optional[Pat] = None
    ty: Optional[Ty] = None


@dataclass
class ClosureExpr(Expr):
    node_type = NodeType.CLOSURE_EXPR
    asyncness: Optional[Token] = None
    move_token: Optional[Token] = None
    params: List[ClosureParam] = field(default_factory=list)
    output: Optional[Ty] = None
    body: Optional[Expr] = None


@dataclass
class ReturnExpr(Expr):
    node_type = NodeType.RETURN_EXPR
    return_token: Optional[Token] = None
    expr: Optional[Expr] = None


@dataclass
class BreakExpr(Expr):
    node_type = NodeType.BREAK_EXPR
    break_token: Optional[Token] = None
    label: Optional[Lifetime] = None
    expr: Optional[Expr] = None


@dataclass
class ContinueExpr(Expr):
    node_type = NodeType.CONTINUE_EXPR
    continue_token: Optional[Token] = None
    label: Optional[Lifetime] = None


@dataclass
class FieldValue(ASTNode):
    """`name: expr` or shorthand `name` in a struct literal"""
    node_type = NodeType.FIELD_VALUE
    member: Optional[Token] = None
    expr: Optional[Expr] = None


@dataclass
class StructExpr(Expr):
    node_type = NodeType.STRUCT_EXPR
    path: Optional[Path] = None
    fields: List[FieldValue] = field(default_factory=list)
    rest: Optional[Expr] = None


@dataclass
class MacroCall(Expr):
    """
    `path!(...)` in any position. Only the literals found in the token tree
    are kept; the rest of the tree is opaque.
    """
    node_type = NodeType.MACRO_CALL
    path: Optional[Path] = None
    bang: Optional[Token] = None
    literals: List[LitExpr] = field(default_factory=list)


# ============================================================================
# Patterns
# ============================================================================

@dataclass
class IdentPat(Pat):
    node_type = NodeType.IDENT_PAT
    by_ref: Optional[Token] = None
    mutability: Optional[Token] = None
    ident: Optional[Token] = None
    subpat: Optional[Pat] = None


@dataclass
class RefPat(Pat):
    node_type = NodeType.REF_PAT
    mutability: Optional[Token] = None
    pat: Optional[Pat] = None


@dataclass
class TypePat(Pat):
    """`pat: Type` in let statements, parameters and closures"""
    node_type = NodeType.TYPE_PAT
    pat: Optional[Pat] = None
    ty: Optional[Ty] = None


@dataclass
class TuplePat(Pat):
    node_type = NodeType.TUPLE_PAT
    elems: List[Pat] = field(default_factory=list)


@dataclass
class ParenPat(Pat):
    node_type = NodeType.PAREN_PAT
    pat: Optional[Pat] = None


@dataclass
class TupleStructPat(Pat):
    node_type = NodeType.TUPLE_STRUCT_PAT
    qself: Optional[QSelf] = None
    path: Optional[Path] = None
    elems: List[Pat] = field(default_factory=list)


@dataclass
class PathPat(Pat):
    node_type = NodeType.PATH_PAT
    qself: Optional[QSelf] = None
    path: Optional[Path] = None


@dataclass
class FieldPat(ASTNode):
    """`name: pat`; shorthand fields carry only ``pat``"""
    node_type = NodeType.FIELD_PAT
    member: Optional[Token] = None
    pat: Optional[Pat] = None


@dataclass
class StructPat(Pat):
    node_type = NodeType.STRUCT_PAT
    qself: Optional[QSelf] = None
    path: Optional[Path] = None
    fields: List[FieldPat] = field(default_factory=list)
    rest: Optional[Token] = None


@dataclass
class LitPat(Pat):
    """Literal pattern; the span includes a leading `-`"""
    node_type = NodeType.LIT_PAT
    lit: Optional[LitExpr] = None


@dataclass
class RangePat(Pat):
    node_type = NodeType.RANGE_PAT
    start: Optional[Pat] = None
    end: Optional[Pat] = None


@dataclass
class WildPat(Pat):
    node_type = NodeType.WILD_PAT
    token: Optional[Token] = None


@dataclass
class RestPat(Pat):
    node_type = NodeType.REST_PAT
    token: Optional[Token] = None


@dataclass
class SlicePat(Pat):
    node_type = NodeType.SLICE_PAT
    elems: List[Pat] = field(default_factory=list)


@dataclass
class OrPat(Pat):
    node_type = NodeType.OR_PAT
    cases: List[Pat] = field(default_factory=list)


# ============================================================================
# Types
# ============================================================================

@dataclass
class PathType(Ty):
    node_type = NodeType.PATH_TYPE
    qself: Optional[QSelf] = None
    path: Optional[Path] = None


@dataclass
class RefType(Ty):
    node_type = NodeType.REF_TYPE
    lifetime: Optional[Lifetime] = None
    mutability: Optional[Token] = None
    elem: Optional[Ty] = None


@dataclass
class TupleType(Ty):
    node_type = NodeType.TUPLE_TYPE
    elems: List[Ty] = field(default_factory=list)


@dataclass
class ParenType(Ty):
    node_type = NodeType.PAREN_TYPE
    elem: Optional[Ty] = None


@dataclass
class SliceType(Ty):
    node_type = NodeType.SLICE_TYPE
    elem: Optional[Ty] = None


@dataclass
class ArrayType(Ty):
    node_type = NodeType.ARRAY_TYPE
    elem: Optional[Ty] = None
    len: Optional[Expr] = None


@dataclass
class PtrType(Ty):
    node_type = NodeType.PTR_TYPE
    qualifier: Optional[Token] = None
    elem: Optional[Ty] = None


@dataclass
class NeverType(Ty):
    node_type = NodeType.NEVER_TYPE


@dataclass
class InferType(Ty):
    node_type = NodeType.INFER_TYPE


@dataclass
class FnPtrParam(ASTNode):
    node_type = NodeType.FN_PTR_PARAM
    name: Optional[Token] = None
    ty: Optional[Ty] = None


@dataclass
class FnPtrType(Ty):
    node_type = NodeType.FN_PTR_TYPE
    lifetimes: Optional[BoundLifetimes] = None
    unsafety: Optional[Token] = None
    abi: Optional[Abi] = None
    fn_token: Optional[Token] = None
    params: List[FnPtrParam] = field(default_factory=list)
    output: Optional[Ty] = None


@dataclass
class ImplTraitType(Ty):
    node_type = NodeType.IMPL_TRAIT_TYPE
    impl_token: Optional[Token] = None
    bounds: List[ASTNode] = field(default_factory=list)


@dataclass
class DynTraitType(Ty):
    node_type = NodeType.DYN_TRAIT_TYPE
    dyn_token: Optional[Token] = None
    bounds: List[ASTNode] = field(default_factory=list)
