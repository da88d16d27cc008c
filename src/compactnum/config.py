"""Formatting options.

CompactNumberOptions carries every knob of compact formatting with its
default. Options can be built directly, from a dict, or from environment
variables:

    COMPACTNUM_LOCALE=de
    COMPACTNUM_STYLE=long
    COMPACTNUM_MAXIMUM_FRACTION_DIGITS=2

    options = CompactNumberOptions.from_env()
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from compactnum.errors import CompactNumberValidationError, FractionDigitsError
from compactnum.types import CompactStyle, LocaleData, RoundingMode

ENV_PREFIX = "COMPACTNUM"


@dataclass(frozen=True)
class CompactNumberOptions:
    """Options for compact number formatting.

    Attributes:
        locale: Locale key to format with.
        locale_data: Locale bundle(s) registered before formatting.
        style: "short" (1.2K) or "long" (1.2 thousand).
        minimum_fraction_digits: Fraction digits always shown.
        maximum_fraction_digits: Fraction digits shown at most.
        rounding_mode: "round", "floor" or "ceil".
        threshold: Relative distance below the next tier's divisor within
            which a value is promoted into that tier.
    """

    locale: str = "en"
    locale_data: LocaleData | list[LocaleData] | None = None
    style: CompactStyle | str = CompactStyle.SHORT
    minimum_fraction_digits: int = 0
    maximum_fraction_digits: int = 1
    rounding_mode: RoundingMode | str = RoundingMode.ROUND
    threshold: float = 0.0005

    def validate(self) -> None:
        """Check fraction digit settings and style.

        Raises:
            FractionDigitsError: For negative digits or min > max.
            CompactNumberValidationError: For an unknown style.
        """
        digits = (self.minimum_fraction_digits, self.maximum_fraction_digits)
        if any(isinstance(d, bool) or not isinstance(d, int) or d < 0 for d in digits):
            raise FractionDigitsError("Fraction digits must be non-negative numbers.")

        if self.minimum_fraction_digits > self.maximum_fraction_digits:
            raise FractionDigitsError(
                "minimumFractionDigits cannot be greater than maximumFractionDigits."
            )

        try:
            CompactStyle(self.style)
        except ValueError as e:
            raise CompactNumberValidationError(f"Invalid style: {self.style}") from e

    @property
    def compact_style(self) -> CompactStyle:
        return CompactStyle(self.style)

    def merged(self, **overrides: Any) -> "CompactNumberOptions":
        """Return a copy with the given fields replaced.

        ``None`` overrides are ignored so keyword defaults can be passed through.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CompactNumberOptions":
        """Build options from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "CompactNumberOptions":
        """Build options from ``<PREFIX>_<FIELD>`` environment variables."""
        data: dict[str, Any] = {}
        env_prefix = f"{prefix}_"
        for key, value in os.environ.items():
            if key.startswith(env_prefix):
                parsed = _parse_value(value)
                if parsed is not None:
                    data[key[len(env_prefix):].lower()] = parsed
        data.pop("locale_data", None)
        return cls.from_dict(data)


def _parse_value(value: str) -> Any:
    """Parse an environment string to int, float or str."""
    if value.lower() in ("null", "none", ""):
        return None

    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        return value


DEFAULT_OPTIONS = CompactNumberOptions()


__all__ = [
    "ENV_PREFIX",
    "CompactNumberOptions",
    "DEFAULT_OPTIONS",
]
