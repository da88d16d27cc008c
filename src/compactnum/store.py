"""Locale rule store.

LocaleStore maps normalized locale keys ("en", "es-mx") to Locale records.
A default instance, ``store``, is seeded with English and used by the
module-level formatting and parsing functions; independent instances can be
created and passed to formatters and parsers instead.

Example:
    from compactnum import store
    from compactnum.locales import es

    store.register(es)
    store.get("es-MX")  # falls back to "es"
    store.reset()       # back to "en" only
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from compactnum.types import Locale, LocaleData

logger = logging.getLogger(__name__)


def normalize_locale(locale: str | Sequence[str]) -> str:
    """Normalize a locale key: lower-case, underscores folded to hyphens.

    A sequence of keys normalizes its first element.

    Example:
        normalize_locale("en_US")  # "en-us"
    """
    if not isinstance(locale, str):
        locale = locale[0] if locale else ""
    if not locale:
        return ""
    return locale.replace("_", "-").lower()


def _default_locales() -> dict[str, Locale]:
    from compactnum.locales.en import en

    return dict(en)


class LocaleStore:
    """Registry of locale rule tables.

    Registration merges entries under their normalized key; a later
    registration of the same key replaces the earlier one. ``version``
    increases on every mutation so derived caches can detect staleness.
    """

    def __init__(self, defaults: LocaleData | None = None) -> None:
        """Initialize the store.

        Args:
            defaults: Locales the store is seeded with and restored to by
                ``reset()``. Defaults to the bundled English locale.
        """
        source = _default_locales() if defaults is None else defaults
        self._defaults = self._coerce_bundle(source)
        self._locales: dict[str, Locale] = dict(self._defaults)
        self._version = 0

    @staticmethod
    def _coerce_bundle(bundle: LocaleData) -> dict[str, Locale]:
        return {
            normalize_locale(key): Locale.from_dict(value, key)
            for key, value in bundle.items()
        }

    @property
    def version(self) -> int:
        """Mutation counter, bumped by ``register()`` and ``reset()``."""
        return self._version

    def register(self, locale_data: LocaleData | Iterable[LocaleData]) -> None:
        """Register one or more locale bundles.

        Args:
            locale_data: A mapping of locale key to Locale (or its dict shape),
                or a list of such mappings.

        Raises:
            InvalidLocaleDataError: If any bundle is malformed. Nothing is
                registered in that case.
        """
        bundles = [locale_data] if isinstance(locale_data, Mapping) else list(locale_data)
        coerced = [self._coerce_bundle(bundle) for bundle in bundles]
        for entries in coerced:
            self._locales.update(entries)
            logger.debug("Registered compact locales: %s", ", ".join(entries))
        self._version += 1

    def register_from_cldr(self, cldr_data: Mapping[str, Any] | Iterable[Mapping[str, Any]]) -> None:
        """Register locales from raw CLDR ``numbers.json`` payloads.

        Payloads without a ``main`` section are skipped.
        """
        from compactnum.cldr import parse_cldr

        payloads = [cldr_data] if isinstance(cldr_data, Mapping) else list(cldr_data)
        bundles = [parse_cldr(payload) for payload in payloads if payload.get("main")]
        if bundles:
            self.register(bundles)

    def get(self, locale: str | Sequence[str]) -> Locale | None:
        """Look up a locale, falling back to a registered parent locale.

        Args:
            locale: Locale key, e.g. "es-MX" or "en_US".

        Returns:
            The exact match, else the first registered key that is a parent
            of the request ("es" for "es-mx"), else None.
        """
        normalized = normalize_locale(locale)
        found = self._locales.get(normalized)
        if found is not None:
            return found

        for key, value in self._locales.items():
            if normalized.startswith(f"{key}-"):
                return value
        return None

    def list_registered_keys(self) -> list[str]:
        """List registered locale keys in registration order."""
        return list(self._locales.keys())

    get_registered_locales = list_registered_keys

    def reset(self) -> None:
        """Drop all registrations and restore the seeded defaults."""
        self._locales = dict(self._defaults)
        self._version += 1
        logger.debug("Reset compact locale store to: %s", ", ".join(self._locales))

    def __contains__(self, locale: object) -> bool:
        return isinstance(locale, str) and self.get(locale) is not None

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        return f"LocaleStore({self.list_registered_keys()})"


# Global store
store = LocaleStore()


__all__ = [
    "LocaleStore",
    "normalize_locale",
    "store",
]
