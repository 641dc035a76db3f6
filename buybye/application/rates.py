"""
Hourly rate resolution and price -> work time conversion
"""
from decimal import Decimal, ROUND_FLOOR

from buybye.config import get_settings
from buybye.domain.savings import WorkTime, MINUTES_PER_HOUR
from buybye.domain.settings import UserSettings
from buybye.utils.money import round_half_up
from buybye.utils.validation import InvalidInputError, non_negative_decimal, to_decimal


def resolve_hourly_rate(settings: UserSettings, work_hours_per_year: int | None = None) -> Decimal:
    """
    Hourly wage used for work-time conversion

    salary: yearly_salary / WORK_HOURS_PER_YEAR (2080 = 40h x 52wk)
    hourly: hourly_rate as is

    Результат может быть <= 0 (не заполненный доход) - конвертер тогда
    возвращает нулевое время.
    """
    if settings.is_hourly:
        return settings.hourly_rate

    return settings.yearly_salary / resolve_work_hours(work_hours_per_year)


def resolve_work_hours(work_hours_per_year: int | None = None) -> Decimal:
    """
    Annual work hours: the override or WORK_HOURS_PER_YEAR

    Raises:
        InvalidInputError: значение <= 0 или не целое
    """
    if work_hours_per_year is None:
        work_hours_per_year = get_settings().WORK_HOURS_PER_YEAR
    is_int = isinstance(work_hours_per_year, int) and not isinstance(work_hours_per_year, bool)
    if not is_int or work_hours_per_year <= 0:
        raise InvalidInputError(
            f"work_hours_per_year must be a positive integer, got {work_hours_per_year!r}"
        )
    return Decimal(work_hours_per_year)


def convert_price_to_work_time(price, hourly_rate) -> WorkTime:
    """
    Сколько рабочего времени стоит покупка

    total_hours = price / hourly_rate; часы - floor, минуты - округление
    остатка, 60 минут переносятся в часы.

    Args:
        price: Цена (>= 0)
        hourly_rate: Ставка в час; <= 0 даёт 0h 0m

    Raises:
        InvalidInputError: отрицательная или нечисловая цена
    """
    price = non_negative_decimal(price, "price")
    hourly_rate = to_decimal(hourly_rate, "hourly_rate")

    if hourly_rate <= 0:
        return WorkTime()

    total_hours = price / hourly_rate
    hours = int(total_hours.to_integral_value(rounding=ROUND_FLOOR))
    minutes = round_half_up((total_hours - hours) * MINUTES_PER_HOUR)
    if minutes == MINUTES_PER_HOUR:
        hours += 1
        minutes = 0

    return WorkTime(hours=hours, minutes=minutes)
