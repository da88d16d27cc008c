"""Tests for the locale rule store."""

from __future__ import annotations

import pytest

from compactnum import store
from compactnum.errors import InvalidLocaleDataError
from compactnum.locales import de, es
from compactnum.store import LocaleStore, normalize_locale


def _single_rule_locale(key: str, pattern: str) -> dict:
    return {
        key: {
            "locale": key,
            "numbers": {
                "decimal": {
                    "short": [[1000, {"one": [pattern, 1], "other": [pattern, 1]}]],
                    "long": [[1000, {"one": [pattern, 1], "other": [pattern, 1]}]],
                },
            },
        }
    }


class TestNormalizeLocale:
    """Tests for locale key normalization."""

    def test_lowercase_and_hyphen(self):
        """Test case folding and separator normalization."""
        assert normalize_locale("en_US") == "en-us"
        assert normalize_locale("zh_Hant_TW") == "zh-hant-tw"
        assert normalize_locale("ES-mx") == "es-mx"

    def test_sequence_and_empty(self):
        """Test sequences use the first key and empties stay empty."""
        assert normalize_locale(["de_AT", "en"]) == "de-at"
        assert normalize_locale([]) == ""
        assert normalize_locale("") == ""


class TestLocaleStore:
    """Tests for LocaleStore."""

    def test_seeded_with_english(self):
        """Test a new store only holds English."""
        assert LocaleStore().list_registered_keys() == ["en"]
        assert store.get("en") is not None

    def test_register_single_and_many(self):
        """Test single bundles and lists of bundles."""
        local = LocaleStore()
        local.register(es)
        local.register([de, _single_rule_locale("fr-CA", "0k")])
        assert local.list_registered_keys() == ["en", "es", "de", "fr-ca"]

    def test_register_overwrites(self):
        """Test the last registration of a key wins."""
        local = LocaleStore()
        local.register(_single_rule_locale("en", "0 Grand"))
        assert local.get("en").short[0].formats.other.pattern == "0 Grand"
        assert len(local) == 1

    def test_parent_fallback(self):
        """Test regional keys resolve to a registered parent."""
        local = LocaleStore()
        local.register(es)
        assert local.get("es-MX") is local.get("es")
        assert local.get("es_419") is local.get("es")
        assert "es-MX" in local

    def test_exact_match_preferred(self):
        """Test an exact regional entry beats its parent."""
        local = LocaleStore()
        local.register([es, _single_rule_locale("es-MX", "0k")])
        assert local.get("es-mx").locale == "es-MX"

    def test_fallback_needs_hyphen_boundary(self):
        """Test a key is not a parent of a longer language code."""
        local = LocaleStore()
        local.register(es)
        assert local.get("est") is None

    def test_missing_locale(self):
        """Test unknown keys return None."""
        assert store.get("unknown") is None
        assert "unknown" not in store

    def test_reset(self):
        """Test reset restores only the seeded defaults."""
        local = LocaleStore()
        local.register([es, de])
        local.register(_single_rule_locale("en", "0 Grand"))
        local.reset()
        assert local.list_registered_keys() == ["en"]
        assert local.get("en").short[0].formats.other.pattern == "0K"

    def test_custom_defaults(self):
        """Test stores can be seeded with other locales."""
        local = LocaleStore(defaults=de)
        assert local.list_registered_keys() == ["de"]
        local.register(es)
        local.reset()
        assert local.list_registered_keys() == ["de"]

    def test_version_bumps_on_mutation(self):
        """Test registration and reset advance the version."""
        local = LocaleStore()
        start = local.version
        local.register(es)
        assert local.version == start + 1
        local.reset()
        assert local.version == start + 2

    def test_failed_register_changes_nothing(self):
        """Test a malformed bundle rejects the whole registration."""
        local = LocaleStore()
        local.register(_single_rule_locale("xx", "0k"))
        version = local.version

        with pytest.raises(InvalidLocaleDataError):
            local.register([_single_rule_locale("xx", "0q"), {"yy": {"locale": "yy"}}])

        assert local.get("xx").short[0].formats.other.pattern == "0k"
        assert local.get("yy") is None
        assert local.version == version

    def test_stores_are_isolated(self):
        """Test independent stores do not share registrations."""
        local = LocaleStore()
        local.register(es)
        assert store.get("es") is None
