"""Transform raw CLDR number data into Locale records.

Input is the parsed content of a CLDR ``main/<locale>/numbers.json`` file::

    {
        "main": {
            "de": {
                "numbers": {
                    "decimalFormats-numberSystem-latn": {
                        "short": {"decimalFormat": {"1000-count-one": "0", ...}},
                        "long": {"decimalFormat": {"1000-count-one": "0 Tausend", ...}},
                    }
                }
            }
        }
    }

Only the ``one`` and ``other`` plural entries are kept. Each entry's numeric
prefix becomes the rule divisor and the number of ``0`` characters in its
pattern becomes the digit count.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from compactnum.errors import InvalidLocaleDataError
from compactnum.types import (
    EMPTY_TEMPLATE,
    FormatRule,
    FormatRules,
    FormatTemplate,
    Locale,
    PluralForm,
    PluralizedFormat,
)

MAX_SAFE_INTEGER = 2**53 - 1
NUMBER_SYSTEM_KEY = "decimalFormats-numberSystem-latn"

# German CLDR leaves the thousands tiers uncompacted; "Tsd." is the common
# abbreviation.
_GERMAN_THOUSANDS = {
    1000: FormatTemplate("0 Tsd.", 1),
    10000: FormatTemplate("00 Tsd.", 2),
    100000: FormatTemplate("000 Tsd.", 3),
}


def transform_decimal_formats(decimal_format: Mapping[str, str]) -> FormatRules:
    """Turn a CLDR ``decimalFormat`` mapping into ascending format rules."""
    forms: dict[int, dict[str, FormatTemplate]] = {}

    for key, pattern in decimal_format.items():
        parts = key.split("-")
        if len(parts) < 2:
            continue

        plural = parts[-1]
        if plural not in (PluralForm.ONE.value, PluralForm.OTHER.value):
            continue

        try:
            divisor = int(parts[0])
        except ValueError:
            continue
        if divisor > MAX_SAFE_INTEGER:
            continue

        forms.setdefault(divisor, {})[plural] = FormatTemplate(pattern, pattern.count("0"))

    return FormatRules(
        FormatRule(
            divisor,
            PluralizedFormat(
                one=templates.get("one", EMPTY_TEMPLATE),
                other=templates.get("other", EMPTY_TEMPLATE),
            ),
        )
        for divisor, templates in sorted(forms.items())
    )


def _apply_overrides(locale: Locale) -> Locale:
    if locale.locale != "de":
        return locale

    rules = []
    for rule in locale.short:
        template = _GERMAN_THOUSANDS.get(rule.divisor)
        if template is not None:
            rule = FormatRule(rule.divisor, PluralizedFormat(one=template, other=template))
        rules.append(rule)
    return Locale(locale=locale.locale, short=FormatRules(rules), long=locale.long)


def parse_cldr(cldr_data: Mapping[str, Any]) -> dict[str, Locale]:
    """Build a locale bundle from one CLDR ``numbers.json`` payload.

    Args:
        cldr_data: Parsed CLDR JSON.

    Returns:
        A single-entry bundle ``{locale_key: Locale}``.

    Raises:
        InvalidLocaleDataError: If the payload lacks the expected sections.
    """
    try:
        main = cldr_data["main"]
        locale_key = next(iter(main))
        formats = main[locale_key]["numbers"][NUMBER_SYSTEM_KEY]
        short = formats["short"]["decimalFormat"]
        long = formats["long"]["decimalFormat"]
    except (KeyError, TypeError, StopIteration) as e:
        raise InvalidLocaleDataError(f"Unrecognized CLDR number data: {e}") from e

    locale = Locale(
        locale=locale_key,
        short=transform_decimal_formats(short),
        long=transform_decimal_formats(long),
    )
    return {locale_key: _apply_overrides(locale)}


__all__ = [
    "MAX_SAFE_INTEGER",
    "parse_cldr",
    "transform_decimal_formats",
]
