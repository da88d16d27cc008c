"""Exceptions raised by compactnum.

Every failure surfaces as a subclass of CompactNumberError so callers can catch
the whole family at once, or a specific kind when they need to tell them apart.
"""

from __future__ import annotations


class CompactNumberError(Exception):
    """Base exception for all compact number errors."""

    pass


class CompactNumberValidationError(CompactNumberError, ValueError):
    """Raised when formatting input or options fail validation."""

    pass


class InvalidValueError(CompactNumberValidationError):
    """Raised when the value to format is not a finite number."""

    def __init__(self, message: str = "Input must be a finite number.") -> None:
        super().__init__(message)


class FractionDigitsError(CompactNumberValidationError):
    """Raised for negative or inverted fraction digit settings."""

    pass


class LocaleNotRegisteredError(CompactNumberError, LookupError):
    """Raised when a locale is missing from the store."""

    def __init__(self, locale: str, message: str | None = None) -> None:
        self.locale = locale
        super().__init__(
            message
            or f'Locale "{locale}" has not been registered. '
            'Please register it using "store.register()".'
        )


class InvalidNumberFormatError(CompactNumberError, ValueError):
    """Raised when a compact string has no numeric literal."""

    pass


class UnknownSymbolError(CompactNumberError, ValueError):
    """Raised when a compact string carries a symbol the locale does not know."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f'Unknown symbol: "{symbol}"')


class InvalidRoundingModeError(CompactNumberError, ValueError):
    """Raised for a rounding mode outside round/floor/ceil."""

    def __init__(self, mode: object) -> None:
        self.mode = mode
        label = mode.value if hasattr(mode, "value") else mode
        super().__init__(f"Invalid rounding mode: {label}")


class InvalidLocaleDataError(CompactNumberError, ValueError):
    """Raised when locale rule data is malformed."""

    pass


__all__ = [
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
