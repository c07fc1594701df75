"""Money, margin and size formatting for the Indian shop context."""

from __future__ import annotations

from datetime import date
from typing import Union

Number = Union[int, float]


def calculate_margin(buying: Number, selling: Number) -> float:
    """Return the profit margin in percent of the buying price."""
    if buying == 0:
        return 0.0
    return (selling - buying) / buying * 100


def calculate_selling_price(buying: Number, margin_percent: Number) -> float:
    return buying + buying * margin_percent / 100


def _group_indian(digits: str) -> str:
    # 1234567 -> 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: Union[Number, str]) -> str:
    """Format ``amount`` as rupees with Indian digit grouping (₹1,23,456.5)."""
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return "₹0"
    if value != value:  # NaN
        return "₹0"

    sign = "-" if value < 0 else ""
    text = f"{abs(value):.2f}".rstrip("0").rstrip(".")
    whole, _, fraction = text.partition(".")
    result = f"{sign}₹{_group_indian(whole)}"
    if fraction:
        result += f".{fraction}"
    return result


def format_number(value: Number) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_size(value: Number, unit: str) -> str:
    return f"{format_number(value)} {unit}"


def format_date(value: date) -> str:
    """Return ``value`` the way hi-IN prints short dates (d/m/yyyy)."""
    return f"{value.day}/{value.month}/{value.year}"
