"""Tests for currencies, rounding, formatting and conversion."""

import itertools
import math

import pytest

from pocketledger.models import Currency, ExchangeRates


class TestCurrency:
    """Tests for the Currency enum."""

    def test_default_is_usd(self):
        """Test the default currency."""
        assert Currency.default() == Currency.USD

    def test_parse_ignores_case_and_whitespace(self):
        """Test parsing currency codes."""
        assert Currency.parse(" eur ") == Currency.EUR
        assert Currency.parse("JPY") == Currency.JPY

    def test_parse_rejects_unknown_code(self):
        """Test that unsupported codes are rejected."""
        with pytest.raises(ValueError):
            Currency.parse("XYZ")

    def test_names_and_symbols(self):
        """Test display properties."""
        assert Currency.USD.symbol == "$"
        assert Currency.EUR.symbol == "€"
        assert Currency.GBP.symbol == "£"
        assert Currency.GBP.short_name == "GBP"
        assert Currency.JPY.long_name == "Japanese Yen"

    def test_only_jpy_has_no_fraction(self):
        """Test which currencies carry cents."""
        assert not Currency.JPY.has_fraction
        assert all(c.has_fraction for c in Currency if c is not Currency.JPY)


class TestNormalizeAmount:
    """Tests for rounding amounts to the currency's smallest unit."""

    def test_rounds_to_cents(self):
        """Test two-decimal rounding."""
        assert Currency.USD.normalize_amount(12.344) == 12.34
        assert Currency.EUR.normalize_amount(12.346) == 12.35

    def test_rounds_half_away_from_zero(self):
        """Test the tie-breaking rule on the decimal form of the float."""
        assert Currency.USD.normalize_amount(2.675) == 2.68
        assert Currency.USD.normalize_amount(0.125) == 0.13
        assert Currency.USD.normalize_amount(-0.125) == -0.13

    def test_jpy_rounds_to_whole_yen(self):
        """Test whole-unit rounding for JPY."""
        assert Currency.JPY.normalize_amount(1234.5) == 1235.0
        assert Currency.JPY.normalize_amount(1234.4) == 1234.0
        assert Currency.JPY.normalize_amount(-2.5) == -3.0

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_normalizes_to_zero(self, value):
        """Test that non-finite input normalizes to 0.0."""
        for currency in Currency:
            assert currency.normalize_amount(value) == 0.0


class TestFormatAmount:
    """Tests for display formatting."""

    def test_format_usd(self):
        """Test symbol, grouping and two decimals."""
        assert Currency.USD.format_amount(70) == "$70.00"
        assert Currency.USD.format_amount(1234.5) == "$1 234.50"
        assert Currency.USD.format_amount(1234567.891) == "$1 234 567.89"

    def test_format_negative(self):
        """Test that negative values get a leading minus."""
        assert Currency.EUR.format_amount(-70) == "-€70.00"
        assert Currency.GBP.format_amount(-1000.5) == "-£1 000.50"

    def test_format_zero(self):
        """Test that zero gets no sign."""
        assert Currency.CAD.format_amount(0.0) == "$0.00"

    def test_format_jpy(self):
        """Test JPY: whole yen, no symbol and no decimal point."""
        assert Currency.JPY.format_amount(1234567.5) == "1 234 568"
        assert Currency.JPY.format_amount(-999.4) == "-999"

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_format_non_finite(self, value):
        """Test that non-finite values render as N/A."""
        assert Currency.USD.format_amount(value) == "N/A"
        assert Currency.JPY.format_amount(value) == "N/A"


class TestExchangeRates:
    """Tests for the EUR-based rate table."""

    def test_eur_is_pinned_to_one(self):
        """Test that EUR is 1.0 whatever the source says."""
        rates = ExchangeRates.from_mapping(
            {"EUR": 2.0, "USD": 1.08, "CAD": 1.47, "GBP": 0.85, "JPY": 160.0}
        )
        assert rates.rate(Currency.EUR) == 1.0

    def test_unknown_codes_are_ignored(self, rates):
        """Test that codes outside the supported set are dropped."""
        table = ExchangeRates.from_mapping(
            {"USD": 1.08, "CAD": 1.47, "GBP": 0.85, "JPY": 160.0, "CHF": 0.97}
        )
        assert set(table.rates) == set(Currency)
        assert table.rate(Currency.USD) == rates.rate(Currency.USD)

    def test_missing_rate_is_rejected(self):
        """Test that every supported currency needs a rate."""
        with pytest.raises(ValueError):
            ExchangeRates.from_mapping({"USD": 1.08, "CAD": 1.47, "GBP": 0.85})

    @pytest.mark.parametrize("bad", [0.0, -1.0, math.inf, math.nan])
    def test_unusable_rate_is_rejected(self, bad):
        """Test that zero, negative and non-finite rates are rejected."""
        with pytest.raises(ValueError):
            ExchangeRates.from_mapping({"USD": 1.08, "CAD": 1.47, "GBP": 0.85, "JPY": bad})

    def test_convert_same_currency_is_identity(self, rates):
        """Test that same-currency conversion applies no rounding."""
        for currency in Currency:
            assert rates.convert_amount(12.3456, currency, currency) == 12.3456

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_convert_passes_infinities_through(self, rates, value):
        """Test that infinite amounts are returned unchanged."""
        assert rates.convert_amount(value, Currency.USD, Currency.EUR) == value

    def test_convert_passes_nan_through(self, rates):
        """Test that NaN is returned unchanged."""
        assert math.isnan(rates.convert_amount(math.nan, Currency.USD, Currency.JPY))

    def test_convert_between_currencies(self, rates):
        """Test conversion and target rounding."""
        assert rates.convert_amount(108.0, Currency.USD, Currency.EUR) == 100.0
        assert rates.convert_amount(100.0, Currency.EUR, Currency.JPY) == 16000.0
        assert rates.convert_amount(85.0, Currency.GBP, Currency.EUR) == 100.0
        # 10 * 160 / 1.08 = 1481.48...
        assert rates.convert_amount(10.0, Currency.USD, Currency.JPY) == 1481.0

    @pytest.mark.parametrize("source, target", list(itertools.permutations(Currency, 2)))
    @pytest.mark.parametrize("amount", [0.01, 0.5, 19.99, 123.45, 2500.0, -1200.0, 98765.43])
    def test_round_trip_stays_within_one_unit(self, rates, source, target, amount):
        """Test that converting there and back is off by at most one rounding unit."""
        unit = 0.01 if source.has_fraction else 1.0
        original = source.normalize_amount(amount)
        there = rates.convert_amount(original, source, target)
        back = rates.convert_amount(there, target, source)
        assert abs(back - original) <= unit + 1e-9
