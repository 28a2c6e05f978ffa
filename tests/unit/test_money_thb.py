"""Unit tests for the MoneyTHB value object."""

from decimal import Decimal

import pytest

from lead_intake.domain.value_objects.money_thb import MoneyTHB, format_currency


def test_negative_amount_rejected():
    """Test MoneyTHB refuses negative amounts."""
    with pytest.raises(ValueError):
        MoneyTHB(Decimal("-1"))


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("350000", "350,000 บาท"),
        ("1,250,000", "1,250,000 บาท"),
        ("99999.5", "99,999.50 บาท"),
        ("", ""),
        ("ไม่เกิน 2 แสน", "ไม่เกิน 2 แสน"),
        ("200000-300000", "200000-300000"),
    ],
)
def test_format_currency(raw, expected):
    """Test budget display formatting."""
    assert format_currency(raw) == expected


def test_parse_rejects_non_numeric():
    """Test parse returns None for free text."""
    assert MoneyTHB.parse("abc") is None
    assert MoneyTHB.parse("NaN") is None
