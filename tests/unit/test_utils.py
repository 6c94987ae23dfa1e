"""
Unit tests for the field normalizers.
"""

from datetime import date

import pytest

from dataroma_holdings.errors import DateParseError
from dataroma_holdings.sources.utils import parse_date, parse_number, split_symbol_name


class TestParseNumber:
    """Tests for parse_number."""

    def test_percentage(self):
        assert parse_number("12.34%") == pytest.approx(12.34)

    def test_currency_and_thousands_separators(self):
        assert parse_number("$1,234.56") == pytest.approx(1234.56)

    def test_plain_integer(self):
        assert parse_number("2,500") == 2500.0

    def test_no_digits_returns_zero(self):
        assert parse_number("N/A") == 0.0

    def test_empty_and_none_return_zero(self):
        assert parse_number("") == 0.0
        assert parse_number(None) == 0.0

    def test_multiple_decimal_points_return_zero(self):
        assert parse_number("1.2.3") == 0.0

    def test_lone_decimal_point_returns_zero(self):
        assert parse_number("$.") == 0.0

    def test_sign_is_discarded(self):
        """Only digits and the decimal point survive cleaning."""
        assert parse_number("-5.5") == pytest.approx(5.5)

    def test_overflow_returns_zero(self):
        assert parse_number("9" * 400) == 0.0


class TestParseDate:
    """Tests for parse_date."""

    def test_day_month_year(self):
        assert parse_date("31/12/2023") == date(2023, 12, 31)

    def test_day_first_when_ambiguous(self):
        assert parse_date("01/02/2024") == date(2024, 2, 1)

    def test_surrounding_whitespace_allowed(self):
        assert parse_date("  15/11/2023\n") == date(2023, 11, 15)

    @pytest.mark.parametrize(
        "value",
        [
            "12/31/2023",  # month first
            "31/12/23",  # two digit year
            "15 Nov 2023",  # textual month
            "2023-12-31",
            "1/2/2024",
            "31/02/2023",  # no such day
            "",
            None,
        ],
    )
    def test_other_layouts_rejected(self, value):
        with pytest.raises(DateParseError):
            parse_date(value)

    def test_date_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_date("yesterday")


class TestSplitSymbolName:
    """Tests for split_symbol_name."""

    def test_symbol_and_name_trimmed(self):
        assert split_symbol_name("AAPL - Apple Inc.") == ("AAPL", "Apple Inc.")

    def test_without_spaces(self):
        assert split_symbol_name("MSFT-Microsoft") == ("MSFT", "Microsoft")

    def test_hyphenated_ticker_rejected(self):
        with pytest.raises(ValueError):
            split_symbol_name("BRK-B - Berkshire Hathaway")

    def test_missing_delimiter_rejected(self):
        with pytest.raises(ValueError):
            split_symbol_name("AAPL Apple Inc.")

    def test_blank_part_rejected(self):
        with pytest.raises(ValueError):
            split_symbol_name(" - Apple Inc.")
