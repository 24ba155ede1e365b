"""
Preprocessor configuration

Read from the ``[preprocessor.rust-highlight]`` table of ``book.toml``, which
mdbook hands over inside the preprocessor context:

    [preprocessor.rust-highlight]
    whichlang = true

    [preprocessor.rust-highlight.fallback]
    Type = ["String", "Vec"]

    [preprocessor.rust-highlight.fallback-positions]
    call-target = "Function"

Malformed values raise ConfigError when the configuration is loaded, before
any chapter is touched.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from ..passes.identification import DEFAULT_FALLBACK_RULES, FallbackRules
from ..shared.categories import Category
from ..shared.errors import ConfigError
from ..shared.span_registry import IdentPosition
from ..utils.config import PREPROCESSOR_NAME

logger = logging.getLogger(__name__)

WHICHLANG_KEY = "whichlang"
FALLBACK_KEY = "fallback"
FALLBACK_POSITIONS_KEY = "fallback-positions"


def _config_key(*parts: str) -> str:
    return ".".join(("preprocessor", PREPROCESSOR_NAME) + parts)


def _category(value: Any, key: str) -> Category:
    if not isinstance(value, str):
        raise ConfigError(f"expected a category name, found {type(value).__name__}", key)
    try:
        category = Category.from_name(value)
    except ValueError as e:
        raise ConfigError(str(e), key) from None
    if not category.is_resolvable:
        raise ConfigError(f"'{category.value}' cannot be assigned to an identifier", key)
    return category


def parse_fallback_names(table: Any) -> Dict[str, Category]:
    """``{Category: [name, ...]}`` -> ``{name: Category}``"""
    key = _config_key(FALLBACK_KEY)
    if not isinstance(table, Mapping):
        raise ConfigError("expected a table of category = [names]", key)

    names: Dict[str, Category] = {}
    for category_name, members in table.items():
        entry_key = f"{key}.{category_name}"
        category = _category(category_name, entry_key)
        if isinstance(members, str) or not isinstance(members, (list, tuple)):
            raise ConfigError("expected a list of identifier names", entry_key)
        for member in members:
            if not isinstance(member, str) or not member:
                raise ConfigError(f"invalid identifier name {member!r}", entry_key)
            names[member] = category
    return names


def parse_fallback_positions(table: Any) -> Dict[IdentPosition, Category]:
    """``{position: Category}`` with positions such as ``call-target``"""
    key = _config_key(FALLBACK_POSITIONS_KEY)
    if not isinstance(table, Mapping):
        raise ConfigError("expected a table of position = category", key)

    positions: Dict[IdentPosition, Category] = {}
    for position_name, category_name in table.items():
        entry_key = f"{key}.{position_name}"
        try:
            position = IdentPosition.from_name(position_name)
        except ValueError as e:
            raise ConfigError(str(e), entry_key) from None
        positions[position] = _category(category_name, entry_key)
    return positions


@dataclass(frozen=True)
class PreprocessorConfig:
    """Runtime configuration of the preprocessor"""
    whichlang: bool = True
    fallback_rules: FallbackRules = field(default=DEFAULT_FALLBACK_RULES)

    @classmethod
    def from_table(cls, table: Mapping[str, Any]) -> "PreprocessorConfig":
        whichlang = table.get(WHICHLANG_KEY, True)
        if not isinstance(whichlang, bool):
            raise ConfigError(
                f"`{WHICHLANG_KEY}` should be a boolean, found {type(whichlang).__name__}",
                _config_key(WHICHLANG_KEY),
            )

        rules = DEFAULT_FALLBACK_RULES
        if FALLBACK_KEY in table or FALLBACK_POSITIONS_KEY in table:
            rules = rules.extend(
                names=parse_fallback_names(table.get(FALLBACK_KEY, {})),
                positions=parse_fallback_positions(table.get(FALLBACK_POSITIONS_KEY, {})),
            )
        return cls(whichlang=whichlang, fallback_rules=rules)

    @classmethod
    def from_context(cls, context: Mapping[str, Any]) -> "PreprocessorConfig":
        """Extract and validate our table from an mdbook preprocessor context"""
        config = context.get("config") or {}
        preprocessors = config.get("preprocessor") or {}
        table = preprocessors.get(PREPROCESSOR_NAME)
        if table is None:
            return cls()
        if not isinstance(table, Mapping):
            raise ConfigError("expected a table", _config_key())
        result = cls.from_table(table)
        logger.debug("configuration: whichlang=%s, %d fallback names",
                     result.whichlang, len(result.fallback_rules.names))
        return result
