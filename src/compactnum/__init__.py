"""compactnum: locale-aware compact number formatting.

Formats numbers as compact strings ("1.2K", "1.5 million", "1,2 Mio.") and
parses such strings back into numbers, using CLDR-derived rule tables.

Example:
    from compactnum import compact_number, uncompact_number, store
    from compactnum.locales import es

    compact_number(1234)                      # "1.2K"
    compact_number(1234, style="long")        # "1.2 thousand"

    store.register(es)
    compact_number(1234, locale="es")         # "1.2 mil"
    uncompact_number("1.2 mil", "es")         # 1200.0
"""

from compactnum.config import CompactNumberOptions
from compactnum.errors import (
    CompactNumberError,
    CompactNumberValidationError,
    FractionDigitsError,
    InvalidLocaleDataError,
    InvalidNumberFormatError,
    InvalidRoundingModeError,
    InvalidValueError,
    LocaleNotRegisteredError,
    UnknownSymbolError,
)
from compactnum.formatter import CompactNumberFormatter, compact_number
from compactnum.locales import ALL_LOCALES, de, en, es, fr, ja, zh
from compactnum.parser import CompactNumberParser, clear_symbol_cache, uncompact_number
from compactnum.rounding import round_decimal, round_value
from compactnum.store import LocaleStore, normalize_locale, store
from compactnum.types import (
    CompactStyle,
    FormatRule,
    FormatRules,
    FormatTemplate,
    Locale,
    PluralForm,
    PluralizedFormat,
    RoundingMode,
)

__version__ = "0.1.0"

__all__ = [
    # Formatting
    "compact_number",
    "CompactNumberFormatter",
    "CompactNumberOptions",
    # Parsing
    "uncompact_number",
    "CompactNumberParser",
    "clear_symbol_cache",
    # Store
    "store",
    "LocaleStore",
    "normalize_locale",
    # Rounding
    "round_decimal",
    "round_value",
    # Types
    "RoundingMode",
    "CompactStyle",
    "PluralForm",
    "FormatTemplate",
    "PluralizedFormat",
    "FormatRule",
    "FormatRules",
    "Locale",
    # Locales
    "ALL_LOCALES",
    "de",
    "en",
    "es",
    "fr",
    "ja",
    "zh",
    # Errors
    "CompactNumberError",
    "CompactNumberValidationError",
    "InvalidValueError",
    "FractionDigitsError",
    "LocaleNotRegisteredError",
    "InvalidNumberFormatError",
    "UnknownSymbolError",
    "InvalidRoundingModeError",
    "InvalidLocaleDataError",
]
