"""
Rust AST Transformers
=====================

Lark tree -> AST, split by construct family.
"""

from .base import RustTransformer
from .literals import LiteralParser

__all__ = [
    'RustTransformer',
    'LiteralParser',
]
