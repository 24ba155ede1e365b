"""CLI entry point: `mdbook-rust-highlight` or `python -m rust_highlight`.

    mdbook-rust-highlight supports <renderer>   exit status 0 if supported
    mdbook-rust-highlight                       preprocess [context, book] on stdin
    mdbook-rust-highlight highlight [FILE]      print annotated Rust source
"""

import logging
import os
import sys


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    # stdout carries the book; logs go to stderr only
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> int:
    import argparse
    from .backends.html import HtmlRenderer, escape_html
    from .engine.driver import Highlighter
    from .preprocessor.book import dump_book, load_input
    from .preprocessor.preprocessor import RustHighlightPreprocessor
    from .shared.errors import HighlightError
    from .utils.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, PREPROCESSOR_NAME
    from .utils.io_utils import read_source

    parser = argparse.ArgumentParser(
        prog=f"mdbook-{PREPROCESSOR_NAME}",
        description="mdbook preprocessor that highlights ```hlrs code blocks.",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL),
        help=f"Logging level (default: ${LOG_LEVEL_ENV_VAR} or {DEFAULT_LOG_LEVEL})",
    )
    subcommands = parser.add_subparsers(dest="command")

    supports = subcommands.add_parser("supports", help="Check whether a renderer is supported")
    supports.add_argument("renderer", help="Renderer name, e.g. html")

    highlight = subcommands.add_parser("highlight", help="Highlight a Rust file (or stdin)")
    highlight.add_argument("file", nargs="?", default=None, help="Rust source file (default: stdin)")
    highlight.add_argument("--html-escape", action="store_true", help="HTML-escape text between markers")

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    preprocessor = RustHighlightPreprocessor()

    if args.command == "supports":
        return 0 if preprocessor.supports_renderer(args.renderer) else 1

    try:
        if args.command == "highlight":
            source = read_source(args.file)
            renderer = HtmlRenderer(escape=escape_html if args.html_escape else None)
            name = args.file or "<stdin>"
            sys.stdout.write(Highlighter(renderer=renderer).highlight_block(source, name))
            return 0

        context, book = load_input(sys.stdin)
        book = preprocessor.run(context, book)
        dump_book(book, sys.stdout)
        return 0
    except HighlightError as e:
        sys.stderr.write(f"{PREPROCESSOR_NAME}: {e}\n")
        return 1
    except OSError as e:
        sys.stderr.write(f"{PREPROCESSOR_NAME}: error: could not read input: {e}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
