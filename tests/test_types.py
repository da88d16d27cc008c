"""Tests for rule and locale records."""

from __future__ import annotations

import pytest

from compactnum.errors import InvalidLocaleDataError
from compactnum.locales import de, en
from compactnum.types import (
    CompactStyle,
    FormatRule,
    FormatRules,
    FormatTemplate,
    Locale,
    PluralForm,
    PluralizedFormat,
)


class TestFormatTemplate:
    """Tests for FormatTemplate."""

    def test_split_around_placeholder(self):
        """Test prefix and suffix are computed once."""
        template = FormatTemplate("00 Mio'.'", 2)
        assert template.prefix == ""
        assert template.suffix == " Mio'.'"
        assert template.has_placeholder

    def test_render_strips_quotes(self):
        """Test quoting characters are removed from the output."""
        assert FormatTemplate("0 Mio'.'", 1).render("1.5") == "1.5 Mio."
        assert FormatTemplate("0K", 1).render("-1.2") == "-1.2K"

    def test_render_replaces_only_first_run(self):
        """Test only the first zero run is a placeholder."""
        assert FormatTemplate("0 x 0", 1).render("7") == "7 x 0"

    def test_symbol(self):
        """Test the bare symbol used for parsing."""
        assert FormatTemplate("0K", 1).symbol == "k"
        assert FormatTemplate("000 mil M", 3).symbol == "mil m"
        assert FormatTemplate("0 Mrd'.'", 1).symbol == "mrd."
        assert FormatTemplate("0", 1).symbol == ""
        assert FormatTemplate("", 0).symbol == ""

    def test_empty_template(self):
        """Test empty templates have no placeholder."""
        template = FormatTemplate("", 0)
        assert template.is_empty
        assert not template.has_placeholder
        assert template.render("1") == ""

    def test_coerce(self):
        """Test construction from pairs and bare patterns."""
        assert FormatTemplate.coerce(["00K", 2]) == FormatTemplate("00K", 2)
        assert FormatTemplate.coerce("000K").digit_count == 3

    def test_invalid_digit_count(self):
        """Test negative digit counts are rejected."""
        with pytest.raises(InvalidLocaleDataError):
            FormatTemplate("0K", -1)


class TestFormatRules:
    """Tests for FormatRules."""

    def test_accepts_raw_pairs(self):
        """Test the nested list/dict shape is coerced."""
        rules = FormatRules([
            [1000, {"one": ["0K", 1], "other": ["0K", 1]}],
            [1000000, {"one": ["0M", 1], "other": ["0M", 1]}],
        ])
        assert len(rules) == 2
        assert rules.divisors == [1000, 1000000]
        assert rules[1].formats.select(PluralForm.OTHER).pattern == "0M"

    def test_missing_plural_is_empty(self):
        """Test a missing plural form becomes an empty template."""
        rules = FormatRules([[1000, {"other": ["0K", 1]}]])
        assert rules[0].formats.one.is_empty

    def test_rejects_descending_divisors(self):
        """Test ascending order is enforced."""
        with pytest.raises(InvalidLocaleDataError, match="strictly ascending"):
            FormatRules([
                [1000000, {"one": ["0M", 1], "other": ["0M", 1]}],
                [1000, {"one": ["0K", 1], "other": ["0K", 1]}],
            ])

    def test_rejects_duplicate_divisors(self):
        """Test duplicate divisors are rejected."""
        rule = [1000, {"one": ["0K", 1], "other": ["0K", 1]}]
        with pytest.raises(InvalidLocaleDataError):
            FormatRules([rule, rule])

    def test_rejects_malformed_rule(self):
        """Test non-pair rules are rejected."""
        with pytest.raises(InvalidLocaleDataError):
            FormatRules([1000])

    def test_digit_count_uses_other_form(self):
        """Test pre-scaling digits come from the plural template."""
        rule = FormatRule(
            10000,
            PluralizedFormat(one=FormatTemplate("", 0), other=FormatTemplate("0万", 1)),
        )
        assert rule.digit_count == 1

    def test_round_trip_to_list(self):
        """Test rules serialize back to the nested shape."""
        raw = [[1000, {"one": ["0K", 1], "other": ["0K", 1]}]]
        assert FormatRules(raw).to_list() == raw


class TestLocale:
    """Tests for Locale records."""

    def test_from_dict(self):
        """Test the nested locale shape."""
        locale = Locale.from_dict({
            "locale": "fr-CA",
            "numbers": {
                "decimal": {
                    "long": [[1000, {"one": ["0 mille", 1], "other": ["0 mille", 1]}]],
                    "short": [[1000, {"one": ["0k", 1], "other": ["0k", 1]}]],
                },
            },
        })
        assert locale.locale == "fr-CA"
        assert locale.rules_for(CompactStyle.SHORT)[0].formats.other.pattern == "0k"
        assert locale.rules_for("long")[0].formats.other.pattern == "0 mille"

    def test_from_dict_missing_tables(self):
        """Test incomplete locale data is rejected."""
        with pytest.raises(InvalidLocaleDataError, match="numbers.decimal"):
            Locale.from_dict({"locale": "xx", "numbers": {}})

    def test_to_dict_round_trip(self):
        """Test bundled data survives serialization."""
        data = de["de"].to_dict()
        assert Locale.from_dict(data) == de["de"]

    def test_bundled_tables_are_ascending(self):
        """Test bundled tables cover thousand to trillion."""
        assert en["en"].short.divisors[0] == 1000
        assert en["en"].short.divisors[-1] == 100000000000000
