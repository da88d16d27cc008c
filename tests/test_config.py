"""Tests for formatting options."""

from __future__ import annotations

import pytest

from compactnum.config import CompactNumberOptions
from compactnum.errors import FractionDigitsError
from compactnum.types import CompactStyle, RoundingMode


class TestCompactNumberOptions:
    """Tests for CompactNumberOptions."""

    def test_defaults(self):
        """Test default option values."""
        options = CompactNumberOptions()
        assert options.locale == "en"
        assert options.style == CompactStyle.SHORT
        assert options.minimum_fraction_digits == 0
        assert options.maximum_fraction_digits == 1
        assert options.rounding_mode == RoundingMode.ROUND
        assert options.threshold == 0.0005
        assert options.locale_data is None

    def test_merged_ignores_none(self):
        """Test None overrides keep the current value."""
        options = CompactNumberOptions(locale="de").merged(locale=None, style="long")
        assert options.locale == "de"
        assert options.compact_style is CompactStyle.LONG

    def test_merged_rejects_unknown(self):
        """Test unknown option names."""
        with pytest.raises(TypeError, match="precision"):
            CompactNumberOptions().merged(precision=2)

    def test_validate(self):
        """Test fraction digit validation."""
        CompactNumberOptions(minimum_fraction_digits=2, maximum_fraction_digits=2).validate()
        with pytest.raises(FractionDigitsError):
            CompactNumberOptions(maximum_fraction_digits=-1).validate()
        with pytest.raises(FractionDigitsError):
            CompactNumberOptions(minimum_fraction_digits=3, maximum_fraction_digits=2).validate()

    def test_from_dict(self):
        """Test unknown keys are ignored."""
        options = CompactNumberOptions.from_dict({"locale": "es", "extra": 1})
        assert options.locale == "es"

    def test_from_env(self, monkeypatch):
        """Test environment variables with the package prefix."""
        monkeypatch.setenv("COMPACTNUM_LOCALE", "de")
        monkeypatch.setenv("COMPACTNUM_STYLE", "long")
        monkeypatch.setenv("COMPACTNUM_MAXIMUM_FRACTION_DIGITS", "2")
        monkeypatch.setenv("COMPACTNUM_THRESHOLD", "0.001")
        monkeypatch.setenv("COMPACTNUM_ROUNDING_MODE", "")
        options = CompactNumberOptions.from_env()
        assert options.locale == "de"
        assert options.style == "long"
        assert options.maximum_fraction_digits == 2
        assert options.threshold == 0.001
        assert options.rounding_mode == RoundingMode.ROUND
