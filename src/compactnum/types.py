"""Core types for compact number formatting.

This module holds the enums and the immutable value records that describe a
locale's compact-notation rules:

- FormatTemplate: a display pattern such as "0K" or "00 Mio'.'" split once
  around its digit placeholder
- PluralizedFormat: the ``one`` / ``other`` pair of templates for a tier
- FormatRule: a tier divisor with its pluralized templates
- FormatRules: the ascending sequence of rules for one display style
- Locale: the short and long rule tables of a locale

Rule data is accepted either as these records or in the plain nested
list/dict shape produced by locale data generators::

    [1000, {"one": ["0K", 1], "other": ["0K", 1]}]
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, overload

from compactnum.errors import InvalidLocaleDataError


# ==============================================================================
# Enums
# ==============================================================================

class RoundingMode(str, Enum):
    """Rounding applied to the displayed number."""
    ROUND = "round"  # half away from zero
    FLOOR = "floor"
    CEIL = "ceil"


class CompactStyle(str, Enum):
    """Compact display style."""
    SHORT = "short"  # 1.2K
    LONG = "long"    # 1.2 thousand


class PluralForm(str, Enum):
    """Two-way plural selection used by compact templates."""
    ONE = "one"
    OTHER = "other"


# ==============================================================================
# Templates and rules
# ==============================================================================

_PLACEHOLDER = re.compile(r"0+")
_QUOTE = "'"


@dataclass(frozen=True)
class FormatTemplate:
    """A compact display pattern with a single run of ``0`` placeholders.

    Attributes:
        pattern: Raw pattern, e.g. "0K", "00 mil", "0 Mrd'.'"
        digit_count: Number of placeholder digits in the pattern
    """
    pattern: str
    digit_count: int
    prefix: str = field(init=False, repr=False, compare=False)
    suffix: str = field(init=False, repr=False, compare=False)
    has_placeholder: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str):
            raise InvalidLocaleDataError(f"Template pattern must be a string: {self.pattern!r}")
        if not isinstance(self.digit_count, int) or self.digit_count < 0:
            raise InvalidLocaleDataError(
                f"Template digit count must be a non-negative integer: {self.digit_count!r}"
            )

        match = _PLACEHOLDER.search(self.pattern)
        if match:
            prefix, suffix = self.pattern[: match.start()], self.pattern[match.end():]
        else:
            prefix, suffix = self.pattern, ""
        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "suffix", suffix)
        object.__setattr__(self, "has_placeholder", match is not None)

    @classmethod
    def from_pattern(cls, pattern: str) -> "FormatTemplate":
        """Build a template, counting the zeros in the pattern."""
        return cls(pattern, pattern.count("0"))

    @classmethod
    def coerce(cls, data: Any) -> "FormatTemplate":
        """Accept a template, a ``(pattern, digit_count)`` pair, or a bare pattern."""
        if isinstance(data, cls):
            return data
        if isinstance(data, str):
            return cls.from_pattern(data)
        if isinstance(data, Sequence) and len(data) == 2:
            return cls(data[0], data[1])
        raise InvalidLocaleDataError(f"Invalid format template: {data!r}")

    @property
    def is_empty(self) -> bool:
        """True when the tier has no compact form for this plural."""
        return not self.pattern

    @property
    def symbol(self) -> str:
        """Bare lower-cased symbol, e.g. "k" for "0K" or "mio." for "0 Mio'.'"."""
        return (self.prefix + self.suffix).replace(_QUOTE, "").strip().lower()

    def render(self, number_text: str) -> str:
        """Substitute the rendered number for the placeholder run."""
        if not self.has_placeholder:
            return self.pattern.replace(_QUOTE, "")
        return f"{self.prefix}{number_text}{self.suffix}".replace(_QUOTE, "")

    def to_list(self) -> list[Any]:
        return [self.pattern, self.digit_count]


EMPTY_TEMPLATE = FormatTemplate("", 0)


@dataclass(frozen=True)
class PluralizedFormat:
    """Singular and plural templates of one tier."""
    one: FormatTemplate
    other: FormatTemplate

    @classmethod
    def coerce(cls, data: Any) -> "PluralizedFormat":
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise InvalidLocaleDataError(f"Invalid pluralized format: {data!r}")
        return cls(
            one=FormatTemplate.coerce(data.get("one", EMPTY_TEMPLATE)),
            other=FormatTemplate.coerce(data.get("other", EMPTY_TEMPLATE)),
        )

    def select(self, form: PluralForm) -> FormatTemplate:
        return self.one if form is PluralForm.ONE else self.other

    def to_dict(self) -> dict[str, list[Any]]:
        return {"one": self.one.to_list(), "other": self.other.to_list()}


@dataclass(frozen=True)
class FormatRule:
    """A magnitude tier: the divisor it starts at and its templates."""
    divisor: int
    formats: PluralizedFormat

    def __post_init__(self) -> None:
        if isinstance(self.divisor, bool) or not isinstance(self.divisor, (int, float)):
            raise InvalidLocaleDataError(f"Rule divisor must be a number: {self.divisor!r}")
        if self.divisor <= 0:
            raise InvalidLocaleDataError(f"Rule divisor must be positive: {self.divisor!r}")

    @classmethod
    def coerce(cls, data: Any) -> "FormatRule":
        if isinstance(data, cls):
            return data
        if isinstance(data, Sequence) and not isinstance(data, str) and len(data) == 2:
            return cls(data[0], PluralizedFormat.coerce(data[1]))
        raise InvalidLocaleDataError(f"Invalid format rule: {data!r}")

    @property
    def digit_count(self) -> int:
        """Placeholder digits used for pre-scaling (taken from the ``other`` form)."""
        return self.formats.other.digit_count

    def to_list(self) -> list[Any]:
        return [self.divisor, self.formats.to_dict()]


class FormatRules(Sequence[FormatRule]):
    """Rules of one display style, strictly ascending by divisor."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Any] = ()) -> None:
        coerced = tuple(FormatRule.coerce(rule) for rule in rules)
        for previous, current in zip(coerced, coerced[1:]):
            if current.divisor <= previous.divisor:
                raise InvalidLocaleDataError(
                    "Format rules must be strictly ascending by divisor: "
                    f"{previous.divisor} is followed by {current.divisor}"
                )
        self._rules = coerced

    @overload
    def __getitem__(self, index: int) -> FormatRule: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[FormatRule, ...]: ...

    def __getitem__(self, index):
        return self._rules[index]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[FormatRule]:
        return iter(self._rules)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FormatRules):
            return self._rules == other._rules
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"FormatRules({[rule.divisor for rule in self._rules]})"

    @property
    def divisors(self) -> list[int]:
        return [rule.divisor for rule in self._rules]

    def to_list(self) -> list[list[Any]]:
        return [rule.to_list() for rule in self._rules]


# ==============================================================================
# Locale records
# ==============================================================================

@dataclass(frozen=True)
class Locale:
    """Compact-notation rules of a locale.

    Attributes:
        locale: Locale key, e.g. "en", "es", "fr-CA"
        short: Rules for the short style ("1.2K")
        long: Rules for the long style ("1.2 thousand")
        parent_locale: Optional parent locale key
    """
    locale: str
    short: FormatRules
    long: FormatRules
    parent_locale: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.short, FormatRules):
            object.__setattr__(self, "short", FormatRules(self.short))
        if not isinstance(self.long, FormatRules):
            object.__setattr__(self, "long", FormatRules(self.long))

    def rules_for(self, style: CompactStyle | str) -> FormatRules:
        """Return the rule table for a display style."""
        return self.long if CompactStyle(style) is CompactStyle.LONG else self.short

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], key: str | None = None) -> "Locale":
        """Build a locale from its nested dict shape.

        Expected shape::

            {
                "locale": "es",
                "numbers": {"decimal": {"short": [...], "long": [...]}},
                "parentLocale": "es-419",  # optional
            }
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise InvalidLocaleDataError(f"Locale data must be a mapping, got {type(data).__name__}")

        try:
            decimal = data["numbers"]["decimal"]
            short, long = decimal["short"], decimal["long"]
        except (KeyError, TypeError) as e:
            name = data.get("locale", key)
            raise InvalidLocaleDataError(
                f"Locale data for {name!r} is missing numbers.decimal.short/long"
            ) from e

        return cls(
            locale=data.get("locale") or key or "",
            short=FormatRules(short),
            long=FormatRules(long),
            parent_locale=data.get("parentLocale") or data.get("parent_locale"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "locale": self.locale,
            "numbers": {
                "decimal": {
                    "short": self.short.to_list(),
                    "long": self.long.to_list(),
                },
            },
        }
        if self.parent_locale:
            result["parentLocale"] = self.parent_locale
        return result


LocaleData = Mapping[str, "Locale | Mapping[str, Any]"]


__all__ = [
    "RoundingMode",
    "CompactStyle",
    "PluralForm",
    "FormatTemplate",
    "EMPTY_TEMPLATE",
    "PluralizedFormat",
    "FormatRule",
    "FormatRules",
    "Locale",
    "LocaleData",
]
