"""
rust_highlight utilities package
"""

from .io_utils import read_source, read_source_file

__all__ = ["read_source", "read_source_file"]
