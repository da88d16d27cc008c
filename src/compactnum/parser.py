"""Compact number parsing.

Parsing reverses formatting: the numeric literal is extracted from the text,
the remainder is taken as the tier symbol, and the symbol is mapped back to
its divisor through a per-locale symbol map derived from the locale's short
and long rule tables.

Example:
    uncompact_number("1.2K")            # 1200.0
    uncompact_number("-1.5M")           # -1500000.0
    uncompact_number("1.2 mil", "es")   # 1200.0
"""

from __future__ import annotations

import logging
import re

from compactnum.errors import (
    InvalidNumberFormatError,
    LocaleNotRegisteredError,
    UnknownSymbolError,
)
from compactnum.store import LocaleStore, normalize_locale, store as default_store
from compactnum.types import FormatRules, Locale

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")

FALLBACK_LOCALE = "en"


def build_symbol_map(locale: Locale) -> dict[str, int]:
    """Map every bare symbol of a locale to the magnitude it stands for.

    Short rules are read before long rules, and ``one`` before ``other``;
    the first rule seen for a symbol wins. A symbol first seen on a
    multi-digit template maps to the divisor scaled back by its extra digits
    ("00 mil M" at 10^10 stands for 10^9). That magnitude differs from the
    raw rule divisor on purpose, so formatted strings parse back to the value.
    """
    symbols: dict[str, int] = {}

    def add_symbols(rules: FormatRules) -> None:
        for rule in rules:
            for template in (rule.formats.one, rule.formats.other):
                symbol = template.symbol
                if symbol and symbol not in symbols:
                    extra_digits = max(template.digit_count - 1, 0)
                    symbols[symbol] = rule.divisor // 10 ** extra_digits

    add_symbols(locale.short)
    add_symbols(locale.long)
    return symbols


class CompactNumberParser:
    """Parser for compact number strings.

    Symbol maps are cached per locale and dropped whenever the store
    changes, so re-registering a locale takes effect on the next parse.
    """

    def __init__(self, store: LocaleStore | None = None) -> None:
        self._store = store
        self._symbol_maps: dict[str, dict[str, int]] = {}
        self._cache_version: int | None = None

    @property
    def store(self) -> LocaleStore:
        return self._store if self._store is not None else default_store

    def clear_cache(self) -> None:
        """Drop all cached symbol maps."""
        self._symbol_maps.clear()
        self._cache_version = None

    def get_symbol_map(self, locale: str = FALLBACK_LOCALE) -> dict[str, int]:
        """Return the symbol map for ``locale``.

        Unregistered locales use the English map.

        Raises:
            LocaleNotRegisteredError: If neither the locale nor English is registered.
        """
        current = self.store.version
        if self._cache_version != current:
            self._symbol_maps.clear()
            self._cache_version = current

        key = normalize_locale(locale)
        cached = self._symbol_maps.get(key)
        if cached is not None:
            return cached

        locale_info = self.store.get(key)
        if locale_info is None:
            locale_info = self.store.get(FALLBACK_LOCALE)
            if locale_info is None:
                raise LocaleNotRegisteredError(
                    FALLBACK_LOCALE,
                    f'Default locale "{FALLBACK_LOCALE}" is not registered.',
                )
            logger.debug("Locale %r is not registered, parsing with %r symbols", locale, FALLBACK_LOCALE)

        symbols = build_symbol_map(locale_info)
        self._symbol_maps[key] = symbols
        logger.debug("Built symbol map for %r with %d symbols", key, len(symbols))
        return symbols

    def parse(self, text: str, locale: str = FALLBACK_LOCALE) -> float:
        """Parse a compact string back into a number.

        Args:
            text: Compact string, e.g. "1.2K" or "2 millones"
            locale: Locale whose symbols to recognize

        Returns:
            The number, scaled by the symbol's divisor when a symbol is present.

        Raises:
            InvalidNumberFormatError: For empty text or text without a number.
            UnknownSymbolError: If the symbol is not known to the locale.
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidNumberFormatError("Input must be a non-empty string.")

        symbols = self.get_symbol_map(locale)

        match = NUMBER_PATTERN.search(text)
        if match is None:
            raise InvalidNumberFormatError("Invalid number format.")
        number = float(match.group(0))

        symbol = text.replace(match.group(0), "", 1).strip().lower()
        if not symbol:
            return number

        divisor = symbols.get(symbol)
        if divisor is None:
            raise UnknownSymbolError(symbol)
        return number * divisor


# ==============================================================================
# Convenience Functions
# ==============================================================================

_parser = CompactNumberParser()


def uncompact_number(
    text: str,
    locale: str = FALLBACK_LOCALE,
    *,
    store: LocaleStore | None = None,
) -> float:
    """Parse a compact string back into a number.

    Args:
        text: Compact string
        locale: Locale whose symbols to recognize
        store: Locale store to use instead of the global one

    Returns:
        Parsed number
    """
    parser = _parser if store is None else CompactNumberParser(store=store)
    return parser.parse(text, locale)


def clear_symbol_cache() -> None:
    """Drop the symbol maps cached for the global store."""
    _parser.clear_cache()


__all__ = [
    "CompactNumberParser",
    "build_symbol_map",
    "clear_symbol_cache",
    "uncompact_number",
]
