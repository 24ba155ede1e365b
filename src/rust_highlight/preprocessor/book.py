"""
mdbook JSON protocol

mdbook runs a preprocessor with ``[context, book]`` as JSON on stdin and
reads the (possibly modified) book back as JSON from stdout. Book items are
``{"Chapter": {...}}``, ``"Separator"`` or ``{"PartTitle": "..."}``; chapters
nest through ``sub_items``. Older mdbook releases call the top-level list
``sections``, newer ones ``items``.
"""

import json
from typing import Any, Dict, IO, Iterator, List, MutableMapping, Tuple

from ..shared.errors import ConfigError

SECTION_KEYS = ("sections", "items")


def load_input(stream: IO[str]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Read the ``[context, book]`` pair mdbook sends"""
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as e:
        raise ConfigError(f"preprocessor input is not valid JSON: {e}") from None
    if not isinstance(payload, list) or len(payload) != 2:
        raise ConfigError("preprocessor input should be a JSON array [context, book]")
    context, book = payload
    if not isinstance(context, dict) or not isinstance(book, dict):
        raise ConfigError("preprocessor context and book should be JSON objects")
    return context, book


def dump_book(book: Dict[str, Any], stream: IO[str]) -> None:
    json.dump(book, stream, ensure_ascii=False)


def top_level_items(book: Dict[str, Any]) -> List[Any]:
    for key in SECTION_KEYS:
        items = book.get(key)
        if isinstance(items, list):
            return items
    return []


def iter_chapters(items: List[Any]) -> Iterator[MutableMapping[str, Any]]:
    """Every chapter, depth first, in book order"""
    for item in items:
        if not isinstance(item, dict):
            continue        # "Separator"
        chapter = item.get("Chapter")
        if not isinstance(chapter, dict):
            continue        # PartTitle
        yield chapter
        yield from iter_chapters(chapter.get("sub_items") or [])


def chapter_name(chapter: MutableMapping[str, Any]) -> str:
    """Name used in diagnostics: the source path when mdbook provides one"""
    return chapter.get("path") or chapter.get("source_path") or chapter.get("name") or "chapter"
