"""
Profile settings - income sync and investment preferences.

Editing either income field recomputes the other one:
    hourly_rate   = round(yearly_salary / 2080, 2)
    yearly_salary = round(hourly_rate * 2080)
"""
from dataclasses import replace
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from buybye.application.rates import resolve_work_hours
from buybye.config import get_settings
from buybye.domain.settings import UserSettings, INCOME_MODES
from buybye.utils.money import quantize_money
from buybye.utils.validation import InvalidInputError, non_negative_decimal, non_negative_int


class SettingsValidationError(InvalidInputError):
    """Ошибка валидации настроек пользователя"""
    pass


def _validated(fn, value, field: str):
    try:
        return fn(value, field)
    except InvalidInputError as e:
        raise SettingsValidationError(str(e)) from e


def default_settings() -> UserSettings:
    """Settings a freshly signed-up user starts with"""
    cfg = get_settings()
    return UserSettings(
        currency=cfg.DEFAULT_CURRENCY,
        income_mode=cfg.DEFAULT_INCOME_MODE,
        yearly_salary=cfg.DEFAULT_YEARLY_SALARY,
        hourly_rate=cfg.DEFAULT_HOURLY_RATE,
        investment_return_rate=cfg.DEFAULT_RETURN_RATE,
        retirement_age=cfg.DEFAULT_RETIREMENT_AGE,
        birthday=cfg.DEFAULT_BIRTHDAY,
    )


def set_yearly_salary(settings: UserSettings, value) -> UserSettings:
    salary = _validated(non_negative_decimal, value, "yearly_salary")
    hours = resolve_work_hours()
    return replace(
        settings,
        yearly_salary=salary,
        hourly_rate=quantize_money(salary / hours),
    )


def set_hourly_rate(settings: UserSettings, value) -> UserSettings:
    rate = _validated(non_negative_decimal, value, "hourly_rate")
    hours = resolve_work_hours()
    return replace(
        settings,
        hourly_rate=rate,
        yearly_salary=(rate * hours).quantize(Decimal("1"), rounding=ROUND_HALF_UP),
    )


def set_income_mode(settings: UserSettings, mode: str) -> UserSettings:
    if mode not in INCOME_MODES:
        raise SettingsValidationError(f"Unknown income mode: {mode!r}")
    return replace(settings, income_mode=mode)


def set_currency(settings: UserSettings, currency: str) -> UserSettings:
    currency = (currency or "").strip()
    if not currency:
        raise SettingsValidationError("Currency symbol cannot be empty")
    return replace(settings, currency=currency)


def update_investment_preferences(
    settings: UserSettings,
    return_rate=None,
    retirement_age: int | None = None,
    birthday: date | None = None
) -> UserSettings:
    """
    Обновить доходность, пенсионный возраст и дату рождения

    Непереданные поля остаются без изменений.
    """
    changes = {}

    if return_rate is not None:
        changes["investment_return_rate"] = _validated(
            non_negative_decimal, return_rate, "investment_return_rate"
        )

    if retirement_age is not None:
        age = _validated(non_negative_int, retirement_age, "retirement_age")
        if age == 0:
            raise SettingsValidationError("retirement_age must be greater than zero")
        changes["retirement_age"] = age

    if birthday is not None:
        if not isinstance(birthday, date):
            raise SettingsValidationError(f"birthday must be a date, got {birthday!r}")
        changes["birthday"] = birthday

    if not changes:
        return settings
    return replace(settings, **changes)
