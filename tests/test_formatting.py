"""Tests for display formatting."""

from datetime import date
from decimal import Decimal

import pytest

from loan_ledger.formatting import format_rupees, freeze_caption, group_digits


class TestGroupDigits:
    """Tests for group_digits."""

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            ("0", "0"),
            ("999", "999"),
            ("1000", "1,000"),
            ("100000", "1,00,000"),
            ("1234567", "12,34,567"),
        ],
    )
    def test_indian(self, digits: str, expected: str) -> None:
        assert group_digits(digits) == expected

    def test_western(self) -> None:
        assert group_digits("1234567", indian=False) == "1,234,567"


class TestFormatRupees:
    """Tests for format_rupees."""

    def test_lakh(self) -> None:
        assert format_rupees(Decimal("120000")) == "₹1,20,000.00"

    def test_rounds_half_up(self) -> None:
        assert format_rupees(Decimal("1234567.895")) == "₹12,34,567.90"

    def test_zero(self) -> None:
        assert format_rupees(Decimal("0")) == "₹0.00"

    def test_negative(self) -> None:
        assert format_rupees(Decimal("-1500.5")) == "-₹1,500.50"

    def test_custom_symbol_and_grouping(self) -> None:
        assert format_rupees(Decimal("1234567"), symbol="Rs ", indian_grouping=False) == "Rs 1,234,567.00"

    def test_accepts_int(self) -> None:
        assert format_rupees(1200) == "₹1,200.00"

    def test_amount_beyond_default_precision(self) -> None:
        text = format_rupees(Decimal("2e28"))

        assert text.startswith("₹20,00,00,")
        assert text.endswith(",000.00")


class TestFreezeCaption:
    """Tests for freeze_caption."""

    def test_caption(self) -> None:
        assert freeze_caption(date(2026, 10, 19)) == "Till 1st October 2026"

    def test_caption_january(self) -> None:
        assert freeze_caption(date(2025, 1, 1)) == "Till 1st January 2025"
