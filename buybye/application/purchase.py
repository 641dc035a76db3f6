"""
Purchase evaluation - price translated into work time and forgone growth
"""
from dataclasses import dataclass
from decimal import Decimal

from buybye.application.investment import lump_sum_future_value
from buybye.application.rates import convert_price_to_work_time, resolve_hourly_rate
from buybye.config import get_settings
from buybye.domain.savings import WorkTime
from buybye.domain.settings import UserSettings
from buybye.utils.validation import non_negative_decimal


@dataclass(frozen=True)
class PurchaseEvaluation:
    price: Decimal
    hourly_rate: Decimal
    work_time: WorkTime
    investment_value: Decimal  # FV of the price over horizon_years
    horizon_years: int


def evaluate_purchase(
    price,
    settings: UserSettings,
    horizon_years: int | None = None
) -> PurchaseEvaluation:
    """
    Оценить покупку: сколько часов работы и сколько бы выросли деньги

    Args:
        price: Цена товара
        settings: Настройки пользователя (доход, доходность)
        horizon_years: Горизонт инвестиций; по умолчанию INVESTMENT_HORIZON_YEARS

    Raises:
        InvalidInputError: отрицательная цена или ставка доходности
    """
    price = non_negative_decimal(price, "price")
    if horizon_years is None:
        horizon_years = get_settings().INVESTMENT_HORIZON_YEARS

    hourly_rate = resolve_hourly_rate(settings)

    return PurchaseEvaluation(
        price=price,
        hourly_rate=hourly_rate,
        work_time=convert_price_to_work_time(price, hourly_rate),
        investment_value=lump_sum_future_value(
            price, settings.investment_return_rate, horizon_years
        ),
        horizon_years=horizon_years,
    )
