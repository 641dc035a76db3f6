"""
Unified money and work-time formatting for the whole project.

Usage:
    from buybye.utils.money import format_money

    format_money(15000, "$")      -> "$15,000"
    format_money(161.051, "$", 2) -> "$161.05"
    format_money(0, "€")          -> "€0"

The currency symbol is display-only: nothing here feeds back into arithmetic.
"""
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def quantize_money(amount: Decimal) -> Decimal:
    """Округлить сумму до центов (half-up)."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def round_half_up(amount: Decimal) -> int:
    """Округлить до целого как Math.round для неотрицательных чисел."""
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_money(amount, currency: str = "$", decimals: int = 0) -> str:
    """
    Отформатировать сумму с разделителями тысяч и символом валюты впереди.

    Args:
        amount: число (int / float / Decimal / str)
        currency: символ валюты ($, €, £ …)
        decimals: знаков после запятой (0 - целое, 2 - центы)

    Returns:
        "$15,000" / "$161.05"
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    amount = amount.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    formatted = f"{abs(amount):,.{decimals}f}"
    return f"{sign}{currency}{formatted}"


def format_money2(amount, currency: str = "$") -> str:
    """Формат с 2 знаками после запятой (для оценки покупки)."""
    return format_money(amount, currency, decimals=2)


def format_work_time(hours: int, minutes: int) -> str:
    """Compact form used on cards: "4h 0m"."""
    return f"{hours}h {minutes}m"


def describe_work_time(hours: int, minutes: int) -> str:
    """
    Long form: "1 hour, 7 minutes" / "3 hours" / "45 minutes" / "0 minutes"
    """
    parts = []
    if hours:
        parts.append(f"{hours} hour" if hours == 1 else f"{hours} hours")
    if minutes or not hours:
        parts.append(f"{minutes} minute" if minutes == 1 else f"{minutes} minutes")
    return ", ".join(parts)
