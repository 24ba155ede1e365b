"""
Code fence rewriting

Finds ```` ```hlrs[,key=value,...] ```` blocks in chapter markdown and
replaces each with a highlighted ``<pre><code>`` block.
"""

import logging
import re
from typing import Dict, Optional, Pattern

from ..engine.driver import Highlighter
from ..shared.errors import ConfigError
from ..utils.config import (
    CODE_BLOCK_TEMPLATE, DEFAULT_FEATURES, FEATURE_ASSIGN, FEATURE_SEPARATOR,
    FENCE_LANGUAGE,
)

logger = logging.getLogger(__name__)

# group 1: feature list after the comma, group 2: the code
FENCE_PATTERN: Pattern[str] = re.compile(
    r"```" + re.escape(FENCE_LANGUAGE) + r"(?:,([^\n]*))?\n([\s\S]*?)\n```"
)


def parse_features(raw: Optional[str], where: Optional[str] = None) -> Dict[str, str]:
    """
    Default features overlaid with the fence's ``key=value`` list.

    An entry without ``=`` is a ConfigError. Empty entries (a trailing comma)
    are ignored.
    """
    features = dict(DEFAULT_FEATURES)
    if not raw:
        return features
    for entry in raw.split(FEATURE_SEPARATOR):
        entry = entry.strip()
        if not entry:
            continue
        key, assign, value = entry.partition(FEATURE_ASSIGN)
        if not assign or not key.strip():
            raise ConfigError(f"code block feature '{entry}' is not of the form key=value", where)
        features[key.strip()] = value.strip()
    return features


def feature_string(features: Dict[str, str]) -> str:
    """``key=value `` entries in key order"""
    return "".join(f"{key}{FEATURE_ASSIGN}{value} " for key, value in sorted(features.items()))


def render_block(
    code: str,
    highlighter: Highlighter,
    features: str = "",
    source_name: str = "<code>",
) -> str:
    highlighted = highlighter.highlight_block(code, source_name)
    return CODE_BLOCK_TEMPLATE.format(language=FENCE_LANGUAGE, features=features, code=highlighted)


def highlight_chapter(
    content: str,
    highlighter: Highlighter,
    whichlang: bool = True,
    chapter_name: str = "chapter",
) -> str:
    """
    Rewrite every fenced block in ``content``. Each block is an independent
    highlight run; a parse error in any block propagates.
    """
    pieces = []
    cursor = 0
    for number, match in enumerate(FENCE_PATTERN.finditer(content), start=1):
        source_name = f"{chapter_name}#{number}"
        features = parse_features(match.group(1), source_name)
        rendered_features = feature_string(features) if whichlang else ""
        pieces.append(content[cursor:match.start()])
        pieces.append(render_block(match.group(2), highlighter, rendered_features, source_name))
        cursor = match.end()
        logger.debug("highlighted %s", source_name)
    pieces.append(content[cursor:])
    return "".join(pieces)

