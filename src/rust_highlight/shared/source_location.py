"""
Source Location (Span)

Rust Pattern: rustc_span::Span
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Span:
    """
    Half-open ``[start, end)`` range of offsets into the original source text.

    Offsets index the exact string handed to the parser, so every span the
    walker emits can be rendered back against that same text.
    """
    start: int
    end: int

    def to(self, other: "Span") -> "Span":
        """Span from the start of ``self`` to the end of ``other``"""
        return Span(min(self.start, other.start), max(self.end, other.end))


@dataclass(frozen=True)
class SourceLocation:
    """
    Line/column location used in diagnostics.

    Rust Pattern: rustc_span::Span (resolved through the SourceMap)
    """
    file: str
    line: int
    column: int
    start: int = 0
    end: int = 0
    end_line: int = 0
    end_column: int = 0

    def __str__(self) -> str:
        """Format as file:line:column (Rust pattern)"""
        return f"{self.file}:{self.line}:{self.column}"
