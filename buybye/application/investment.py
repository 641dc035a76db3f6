"""
Investment projections - what the money would become if invested instead.

Two separate formulas:
  lump sum       one amount compounded annually for a fixed horizon
  annuity due    equal yearly payments made at the start of each period
"""
from decimal import Decimal

from buybye.utils.money import quantize_money
from buybye.utils.validation import non_negative_decimal, non_negative_int

HUNDRED = Decimal("100")


def _growth_factor(annual_rate_percent: Decimal) -> Decimal:
    return Decimal("1") + annual_rate_percent / HUNDRED


def lump_sum_future_value(amount, annual_rate_percent, years: int) -> Decimal:
    """
    FV = amount * (1 + rate/100) ** years, rounded to cents

    >>> lump_sum_future_value(100, 10, 5)
    Decimal('161.05')

    Raises:
        InvalidInputError: отрицательная сумма, ставка или срок
    """
    amount = non_negative_decimal(amount, "amount")
    rate = non_negative_decimal(annual_rate_percent, "annual_rate_percent")
    years = non_negative_int(years, "years")

    return quantize_money(amount * _growth_factor(rate) ** years)


def annuity_due_future_value(annual_payment, annual_rate_percent, years: int) -> Decimal:
    """
    FV of `years` payments made at the start of each year, rounded to cents

    rate > 0:  P * ((1+r)^n - 1) / r * (1+r)
    rate == 0: P * n
    """
    payment = non_negative_decimal(annual_payment, "annual_payment")
    rate = non_negative_decimal(annual_rate_percent, "annual_rate_percent")
    years = non_negative_int(years, "years")

    if payment == 0 or years == 0:
        return quantize_money(Decimal("0"))

    if rate == 0:
        return quantize_money(payment * years)

    r = rate / HUNDRED
    growth = _growth_factor(rate)
    return quantize_money(payment * (growth ** years - 1) / r * growth)
