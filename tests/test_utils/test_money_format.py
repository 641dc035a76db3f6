"""
Tests for money and work-time formatting
"""
import pytest
from decimal import Decimal

from buybye.utils.money import (
    describe_work_time,
    format_money,
    format_money2,
    format_work_time,
    quantize_money,
    round_half_up,
)


@pytest.mark.parametrize("amount,currency,expected", [
    (15000, "$", "$15,000"),
    (Decimal("1200.50"), "$", "$1,201"),
    ("0", "€", "€0"),
    (-5, "$", "-$5"),
])
def test_format_money(amount, currency, expected):
    assert format_money(amount, currency) == expected


def test_format_money2():
    assert format_money2(Decimal("161.051")) == "$161.05"
    assert format_money2(1234567.891, "£") == "£1,234,567.89"


def test_quantize_and_round():
    assert quantize_money(Decimal("0.125")) == Decimal("0.13")
    assert round_half_up(Decimal("2.5")) == 3
    assert round_half_up(Decimal("2.49")) == 2


def test_format_work_time():
    assert format_work_time(4, 0) == "4h 0m"


@pytest.mark.parametrize("hours,minutes,expected", [
    (1, 7, "1 hour, 7 minutes"),
    (3, 0, "3 hours"),
    (0, 45, "45 minutes"),
    (0, 1, "1 minute"),
    (0, 0, "0 minutes"),
    (2, 1, "2 hours, 1 minute"),
])
def test_describe_work_time(hours, minutes, expected):
    assert describe_work_time(hours, minutes) == expected
