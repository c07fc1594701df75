from datetime import date

import pytest

from inventory.formatters import (
    calculate_margin,
    calculate_selling_price,
    format_currency,
    format_date,
    format_number,
    format_size,
)


def test_calculate_margin():
    assert calculate_margin(20, 22) == pytest.approx(10.0)
    assert calculate_margin(0, 5) == 0.0
    assert calculate_margin(100, 90) == pytest.approx(-10.0)


def test_calculate_selling_price():
    assert calculate_selling_price(200, 10) == pytest.approx(220.0)


@pytest.mark.parametrize(
    "amount,expected",
    [
        (0, "₹0"),
        (22, "₹22"),
        (450.5, "₹450.5"),
        (1000, "₹1,000"),
        (123456.75, "₹1,23,456.75"),
        (1234567, "₹12,34,567"),
        (-50, "-₹50"),
        ("135", "₹135"),
        ("abc", "₹0"),
        (None, "₹0"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_size():
    assert format_size(1.0, "kg") == "1 kg"
    assert format_size(2.5, "L") == "2.5 L"


def test_format_date():
    assert format_date(date(2026, 1, 5)) == "5/1/2026"


def test_format_size_keeps_every_digit():
    assert format_size(12345.25, "g") == "12345.25 g"
    assert format_number(12345.67) == "12345.67"
