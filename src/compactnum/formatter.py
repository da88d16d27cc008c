"""Compact number formatting.

Formatting picks the magnitude tier of a value from the locale's rule table,
promotes values sitting just below the next tier, scales the value to the
tier template's leading digits, rounds it, and renders it into the singular
or plural template.

Example:
    compact_number(1234)                                   # "1.2K"
    compact_number(1234, maximum_fraction_digits=2)        # "1.23K"
    compact_number(999_950)                                # "1M"
    compact_number(2_000_000, locale="es", style="long",
                   maximum_fraction_digits=0)              # "2 millones"
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any

from compactnum.config import DEFAULT_OPTIONS, CompactNumberOptions
from compactnum.errors import InvalidValueError, LocaleNotRegisteredError
from compactnum.rounding import format_fixed, pre_scale, round_value
from compactnum.store import LocaleStore, store as default_store
from compactnum.types import FormatRule, FormatRules, Locale, PluralForm

logger = logging.getLogger(__name__)

COMPACT_MINIMUM = 1000


def _coerce_number(value: float | int | Decimal | str) -> float:
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError) as e:
        raise InvalidValueError() from e
    if not math.isfinite(number):
        raise InvalidValueError()
    return number


class CompactNumberFormatter:
    """Locale-aware compact number formatter.

    Example:
        formatter = CompactNumberFormatter()
        formatter.format(1_500_000)                  # "1.5M"
        formatter.format(1234, style="long")         # "1.2 thousand"

        isolated = CompactNumberFormatter(store=LocaleStore())
    """

    def __init__(
        self,
        store: LocaleStore | None = None,
        options: CompactNumberOptions | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            store: Locale store to resolve locales from (default: global store)
            options: Base options, overridden per call
        """
        self._store = store
        self.options = options or DEFAULT_OPTIONS

    @property
    def store(self) -> LocaleStore:
        return self._store if self._store is not None else default_store

    def format(
        self,
        value: float | int | Decimal | str | None,
        options: CompactNumberOptions | None = None,
        **overrides: Any,
    ) -> str:
        """Format a number in compact notation.

        Args:
            value: Number (or numeric string) to format. ``None`` renders "0".
            options: Options replacing the formatter's base options
            **overrides: Individual option fields, e.g. ``locale="de"``

        Returns:
            Compact string such as "1.2K" or "1,5 millones".

        Raises:
            InvalidValueError: If ``value`` is not a finite number.
            FractionDigitsError: For negative or inverted fraction digits.
            LocaleNotRegisteredError: If the locale is not in the store.
            InvalidRoundingModeError: For an unknown rounding mode.
        """
        opts = (options or self.options).merged(**overrides)

        if opts.locale_data:
            self.store.register(opts.locale_data)

        if value is None:
            return "0"
        number = _coerce_number(value)
        opts.validate()

        rules = self._resolve_locale(opts.locale).rules_for(opts.compact_style)
        return self._format_with_rules(number, rules, opts)

    def _resolve_locale(self, locale: str) -> Locale:
        found = self.store.get(locale)
        if found is None:
            raise LocaleNotRegisteredError(locale)
        return found

    def _format_with_rules(
        self,
        number: float,
        rules: FormatRules,
        opts: CompactNumberOptions,
    ) -> str:
        abs_number = abs(number)

        if abs_number < COMPACT_MINIMUM:
            rounded = round_value(number, opts.maximum_fraction_digits, opts.rounding_mode)
            if abs(rounded) >= COMPACT_MINIMUM and rules:
                # 999.9 at zero digits becomes 1000 and belongs to the first tier
                return self._format_tier(rounded, rules[0], opts)
            return format_fixed(
                rounded, opts.minimum_fraction_digits, opts.maximum_fraction_digits
            )

        index = self._find_tier(abs_number, rules)
        if index < 0:
            return self._format_plain(number, opts)

        if index + 1 < len(rules):
            next_rule = rules[index + 1]
            if 1 - abs_number / next_rule.divisor <= opts.threshold:
                logger.debug(
                    "Promoting %s from tier %s to %s (threshold %s)",
                    number, rules[index].divisor, next_rule.divisor, opts.threshold,
                )
                index += 1

        return self._format_tier(number, rules[index], opts)

    @staticmethod
    def _find_tier(abs_number: float, rules: FormatRules) -> int:
        """Index of the largest divisor not above ``abs_number``, or -1."""
        index = -1
        for i, rule in enumerate(rules):
            if abs_number >= rule.divisor:
                index = i
            else:
                break
        return index

    @staticmethod
    def _format_plain(number: float, opts: CompactNumberOptions) -> str:
        rounded = round_value(number, opts.maximum_fraction_digits, opts.rounding_mode)
        return format_fixed(
            rounded, opts.minimum_fraction_digits, opts.maximum_fraction_digits
        )

    def _format_tier(
        self,
        number: float,
        rule: FormatRule,
        opts: CompactNumberOptions,
    ) -> str:
        formats = rule.formats
        if not formats.other.symbol:
            # Tier without an abbreviation (e.g. the thousands tier in ja/zh)
            return self._format_plain(number, opts)

        scaled = pre_scale(abs(number), rule.divisor, rule.digit_count)
        rounded = round_value(scaled, opts.maximum_fraction_digits, opts.rounding_mode)

        template = formats.select(PluralForm.ONE if rounded == 1 else PluralForm.OTHER)
        if template.is_empty:
            template = formats.other

        signed = -rounded if number < 0 else rounded
        return template.render(
            format_fixed(signed, opts.minimum_fraction_digits, opts.maximum_fraction_digits)
        )


# ==============================================================================
# Convenience Functions
# ==============================================================================

_formatter = CompactNumberFormatter()


def compact_number(
    value: float | int | Decimal | str | None,
    options: CompactNumberOptions | None = None,
    *,
    store: LocaleStore | None = None,
    **overrides: Any,
) -> str:
    """Format a number in compact notation.

    Args:
        value: Number to format
        options: Full option set (default: CompactNumberOptions())
        store: Locale store to use instead of the global one
        **overrides: Individual options (locale, locale_data, style,
            minimum_fraction_digits, maximum_fraction_digits, rounding_mode,
            threshold)

    Returns:
        Compact string

    Example:
        compact_number(1234, locale="de")  # "1.2 Tsd."
    """
    formatter = _formatter if store is None else CompactNumberFormatter(store=store)
    return formatter.format(value, options, **overrides)


__all__ = [
    "COMPACT_MINIMUM",
    "CompactNumberFormatter",
    "compact_number",
]
