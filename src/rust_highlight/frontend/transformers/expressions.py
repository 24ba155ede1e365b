"""
Expression rules: lark tree -> Expr nodes
"""

import re
from typing import Optional, Tuple

from lark import Transformer, v_args

from ...shared.nodes import (
    Arm, ArrayExpr, AsyncBlock, Attribute, AwaitExpr, BinaryExpr, Block,
    BlockExpr, BreakExpr, CallExpr, CastExpr, ClosureExpr, ClosureParam,
    ConstBlock, ContinueExpr, Expr, FieldExpr, FieldValue, ForExpr, GenericArgs,
    IfExpr, IndexExpr, LetExpr, LetStmt, Lifetime, LitExpr, LoopExpr, MatchExpr,
    MethodCall, ParenExpr, Pat, Path, PathExpr, QSelf, RangeExpr,
    ReferenceExpr, ReturnExpr, StructExpr, Token, TryExpr, TupleExpr, Ty, TypePat,
    UnaryExpr, UnsafeBlock, WhileExpr,
)
from ...shared.source_location import Span
from .common import LarkMeta, Parts, span_of, to_token

_TUPLE_INDEX_PAIR = re.compile(r"([0-9]+)\.([0-9]+)")


def _tuple_indices(member: Token) -> Optional[Tuple[Token, Token]]:
    """Split a FLOAT member such as `0.1` into its two tuple indices"""
    if member.kind != "FLOAT":
        return None
    match = _TUPLE_INDEX_PAIR.fullmatch(member.text)
    if match is None:
        return None
    start = member.span.start
    return (
        Token(text=match.group(1), kind="INT", span=Span(start + match.start(1), start + match.end(1))),
        Token(text=match.group(2), kind="INT", span=Span(start + match.start(2), start + match.end(2))),
    )


@v_args(inline=True, meta=True)
class ExpressionTransformer(Transformer):
    """Builds statement and expression nodes. Mixed into RustTransformer."""

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def let_stmt(self, meta: LarkMeta, *children) -> LetStmt:
        parts = Parts(children)
        pattern = parts.node(Pat)
        ty = parts.node(Ty)
        if pattern is not None and ty is not None:
            pattern = TypePat(span=pattern.span.to(ty.span), pat=pattern, ty=ty)
        return LetStmt(
            span=span_of(meta),
            attrs=parts.nodes(Attribute),
            let_token=parts.token("LET"),
            pattern=pattern,
            init=parts.node(Expr),
            else_token=parts.token("ELSE"),
            diverge=parts.node(Block),
        )

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def binary_expr(self, meta: LarkMeta, *children) -> BinaryExpr:
        operands = Parts(children).nodes(Expr)
        return BinaryExpr(span=span_of(meta), left=operands[0], right=operands[-1])

    def range(self, meta: LarkMeta, *children) -> RangeExpr:
        operands = Parts(children).nodes(Expr)
        if len(operands) == 2:
            return RangeExpr(span=span_of(meta), start=operands[0], end=operands[1])
        if not operands:
            return RangeExpr(span=span_of(meta))
        operand = operands[0]
        if operand.span.start == meta.start_pos:
            return RangeExpr(span=span_of(meta), start=operand)
        return RangeExpr(span=span_of(meta), end=operand)

    def cast(self, meta: LarkMeta, expr, as_token, ty) -> CastExpr:
        return CastExpr(span=span_of(meta), expr=expr, as_token=to_token(as_token), ty=ty)

    def unary(self, meta: LarkMeta, expr) -> UnaryExpr:
        return UnaryExpr(span=span_of(meta), expr=expr)

    def reference_expr(self, meta: LarkMeta, *children) -> ReferenceExpr:
        parts = Parts(children)
        return ReferenceExpr(span=span_of(meta), mutability=parts.token("MUT"), expr=parts.node(Expr))

    # ------------------------------------------------------------------
    # Postfix
    # ------------------------------------------------------------------

    def field_expr(self, meta: LarkMeta, base, member) -> FieldExpr:
        member = to_token(member)
        indices = _tuple_indices(member)
        if indices is None:
            return FieldExpr(span=span_of(meta), base=base, member=member)
        # `x.0.1` lexes its two indices as one float
        first, second = indices
        inner = FieldExpr(span=Span(base.span.start, first.span.end), base=base, member=first)
        return FieldExpr(span=span_of(meta), base=inner, member=second)

    def method_call(self, meta: LarkMeta, receiver, method, *rest) -> MethodCall:
        parts = Parts(rest)
        return MethodCall(
            span=span_of(meta),
            receiver=receiver,
            method=to_token(method),
            turbofish=parts.node(GenericArgs),
            args=parts.nodes(Expr),
        )

    def call_expr(self, meta: LarkMeta, func, *args) -> CallExpr:
        return CallExpr(span=span_of(meta), func=func, args=Parts(args).nodes(Expr))

    def try_expr(self, meta: LarkMeta, expr) -> TryExpr:
        return TryExpr(span=span_of(meta), expr=expr)

    def index_expr(self, meta: LarkMeta, expr, index) -> IndexExpr:
        return IndexExpr(span=span_of(meta), expr=expr, index=index)

    def await_expr(self, meta: LarkMeta, base, await_token) -> AwaitExpr:
        return AwaitExpr(span=span_of(meta), base=base, await_token=to_token(await_token))

    def call_args(self, meta: LarkMeta, *args) -> list:
        return list(args)

    # ------------------------------------------------------------------
    # Primary
    # ------------------------------------------------------------------

    def literal(self, meta: LarkMeta, token) -> LitExpr:
        return self.literal_parser.parse(token)

    def path_expr(self, meta: LarkMeta, *children) -> PathExpr:
        parts = Parts(children)
        return PathExpr(span=span_of(meta), qself=parts.node(QSelf), path=parts.node(Path))

    def paren_expr(self, meta: LarkMeta, expr) -> ParenExpr:
        return ParenExpr(span=span_of(meta), expr=expr)

    def tuple_expr(self, meta: LarkMeta, *elems) -> TupleExpr:
        return TupleExpr(span=span_of(meta), elems=Parts(elems).nodes(Expr))

    def array_expr(self, meta: LarkMeta, *elems) -> ArrayExpr:
        return ArrayExpr(span=span_of(meta), elems=Parts(elems).nodes(Expr))

    def struct_expr(self, meta: LarkMeta, path, *rest) -> StructExpr:
        parts = Parts(rest)
        return StructExpr(
            span=span_of(meta),
            path=path,
            fields=parts.nodes(FieldValue),
            rest=parts.node(Expr),
        )

    def field_value(self, meta: LarkMeta, member, expr=None) -> FieldValue:
        return FieldValue(span=span_of(meta), member=to_token(member), expr=expr)

    # ------------------------------------------------------------------
    # Blocks and control flow
    # ------------------------------------------------------------------

    def block_expr(self, meta: LarkMeta, *children) -> BlockExpr:
        parts = Parts(children)
        return BlockExpr(span=span_of(meta), label=parts.node(Lifetime), block=parts.node(Block))

    def unsafe_block(self, meta: LarkMeta, unsafe_token, block) -> UnsafeBlock:
        return UnsafeBlock(span=span_of(meta), unsafe_token=to_token(unsafe_token), block=block)

    def async_block(self, meta: LarkMeta, *children) -> AsyncBlock:
        parts = Parts(children)
        return AsyncBlock(
            span=span_of(meta),
            async_token=parts.token("ASYNC"),
            move_token=parts.token("MOVE"),
            block=parts.node(Block),
        )

    def const_block(self, meta: LarkMeta, const_token, block) -> ConstBlock:
        return ConstBlock(span=span_of(meta), const_token=to_token(const_token), block=block)

    def if_expr(self, meta: LarkMeta, *children) -> IfExpr:
        # IF cond block [ELSE (block | if_expr)]: every piece is positional
        parts = Parts(children)
        node = IfExpr(span=span_of(meta), if_token=parts[0], cond=parts[1], then_branch=parts[2])
        if len(parts) > 3:
            node.else_token = parts[3]
            node.else_branch = parts[4]
        return node

    def let_expr(self, meta: LarkMeta, let_token, pattern, expr) -> LetExpr:
        return LetExpr(span=span_of(meta), let_token=to_token(let_token), pattern=pattern, expr=expr)

    def match_expr(self, meta: LarkMeta, match_token, expr, *rest) -> MatchExpr:
        return MatchExpr(
            span=span_of(meta),
            match_token=to_token(match_token),
            expr=expr,
            arms=Parts(rest).nodes(Arm),
        )

    def match_arm(self, meta: LarkMeta, *children) -> Arm:
        parts = Parts(children)
        attrs = parts.nodes(Attribute)
        rest = [item for item in parts.items if not isinstance(item, Attribute)]
        arm = Arm(span=span_of(meta), attrs=attrs, pattern=rest[0], body=rest[-1])
        if len(rest) == 4:
            arm.if_token = rest[1]
            arm.guard = rest[2]
        return arm

    def loop_expr(self, meta: LarkMeta, *children) -> LoopExpr:
        parts = Parts(children)
        return LoopExpr(
            span=span_of(meta),
            label=parts.node(Lifetime),
            loop_token=parts.token("LOOP"),
            body=parts.node(Block),
        )

    def while_expr(self, meta: LarkMeta, *children) -> WhileExpr:
        parts = Parts(children)
        return WhileExpr(
            span=span_of(meta),
            label=parts.node(Lifetime),
            while_token=parts.token("WHILE"),
            cond=parts.node(Expr),
            body=parts.node(Block),
        )

    def for_expr(self, meta: LarkMeta, *children) -> ForExpr:
        parts = Parts(children)
        return ForExpr(
            span=span_of(meta),
            label=parts.node(Lifetime),
            for_token=parts.token("FOR"),
            pattern=parts.node(Pat),
            in_token=parts.token("IN"),
            expr=parts.node(Expr),
            body=parts.node(Block),
        )

    # ------------------------------------------------------------------
    # Closures and jumps
    # ------------------------------------------------------------------

    def closure_expr(self, meta: LarkMeta, *children) -> ClosureExpr:
        parts = Parts(children)
        body = parts.nodes(Expr)
        return ClosureExpr(
            span=span_of(meta),
            asyncness=parts.token("ASYNC"),
            move_token=parts.token("MOVE"),
            params=parts.nodes(ClosureParam),
            output=parts.output(),
            body=body[-1] if body else None,
        )

    def closure_param(self, meta: LarkMeta, *children) -> ClosureParam:
        parts = Parts(children)
        return ClosureParam(span=span_of(meta), pattern=parts.node(Pat), ty=parts.node(Ty))

    def return_expr(self, meta: LarkMeta, return_token, expr=None) -> ReturnExpr:
        return ReturnExpr(span=span_of(meta), return_token=to_token(return_token), expr=expr)

    def break_expr(self, meta: LarkMeta, break_token, *rest) -> BreakExpr:
        parts = Parts(rest)
        return BreakExpr(
            span=span_of(meta),
            break_token=to_token(break_token),
            label=parts.node(Lifetime),
            expr=parts.node(Expr),
        )

    def continue_expr(self, meta: LarkMeta, continue_token, label=None) -> ContinueExpr:
        return ContinueExpr(span=span_of(meta), continue_token=to_token(continue_token), label=label)
