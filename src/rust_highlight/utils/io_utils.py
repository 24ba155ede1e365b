"""
Centralized file I/O utilities.

- Single place for encoding
- Use Path.read_text() consistently (no raw open/read)
"""

import sys
from pathlib import Path
from typing import IO, Optional, Union

from .config import DEFAULT_FILE_ENCODING


def read_source_file(path: Union[Path, str]) -> str:
    """Read source file with standard encoding."""
    p = Path(path) if not isinstance(path, Path) else path
    return p.read_text(encoding=DEFAULT_FILE_ENCODING)


def read_source(path: Optional[Union[Path, str]] = None, stream: Optional[IO[str]] = None) -> str:
    """Read ``path``, or ``stream`` (stdin by default) when no path is given or it is ``-``."""
    if path is None or str(path) == "-":
        return (stream or sys.stdin).read()
    return read_source_file(path)
