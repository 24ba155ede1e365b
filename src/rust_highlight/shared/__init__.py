"""
Shared components: categories, spans, the AST, the span registry and errors.
"""

from .source_location import Span, SourceLocation
from .categories import Category, RESOLVABLE_CATEGORIES
from .errors import (
    Error, HighlightError, HighlightSourceError, ConfigError,
    HighlightImplementationError,
)
from .identifier_memory import IdentifierMemory
from .nodes import ASTNode, Expr, Pat, Ty, NodeType, LitKind, Token, SourceFile
from .ast_visitor import ASTVisitor

__all__ = [
    'Span', 'SourceLocation',
    'Category', 'RESOLVABLE_CATEGORIES',
    'Error', 'HighlightError', 'HighlightSourceError', 'ConfigError',
    'HighlightImplementationError',
    'IdentifierMemory',
    'ASTNode', 'Expr', 'Pat', 'Ty', 'NodeType', 'LitKind', 'Token', 'SourceFile',
    'ASTVisitor',
]
