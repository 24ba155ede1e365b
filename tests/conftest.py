"""
Pytest configuration and shared fixtures for the rust_highlight tests.

Loading the grammar is the expensive part of a run, so the parser is built
once per session and shared. Highlighters are stateless between calls (every
run gets a fresh context), which makes sharing them safe.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from rust_highlight.backends.html import HtmlRenderer, escape_html
from rust_highlight.engine.driver import Highlighter
from rust_highlight.frontend.parser import Parser


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def session_parser():
    """Session-scoped parser: the grammar is loaded once"""
    return Parser()


@pytest.fixture(scope="session")
def session_highlighter(session_parser):
    """Highlighter with default fallback rules and no HTML escaping"""
    return Highlighter(parser=session_parser)


# =============================================================================
# Class-scoped fixtures
# =============================================================================

@pytest.fixture(scope="class")
def parser(session_parser):
    return session_parser


@pytest.fixture(scope="class")
def highlighter(session_highlighter):
    return session_highlighter


@pytest.fixture(scope="class")
def html_highlighter(session_parser):
    """Highlighter that escapes text between markers, as the preprocessor does"""
    return Highlighter(parser=session_parser, renderer=HtmlRenderer(escape=escape_html))
