"""
Retirement projection - annuity-due extrapolation of the current savings pace.

Текущие накопления используются как годовой взнос (monthly = total / 12).
Это упрощение: реальный ежемесячный приток не отслеживается.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Sequence

from buybye.application.goals import selected_goals, total_saved as goals_total_saved
from buybye.application.investment import annuity_due_future_value
from buybye.domain.goal import Goal
from buybye.domain.settings import UserSettings
from buybye.utils.money import quantize_money
from buybye.utils.validation import non_negative_decimal, non_negative_int

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class RetirementProjection:
    current_age: int
    years_to_retirement: int
    monthly_contribution: Decimal
    projected_value: Decimal


def compute_current_age(birthday: date, today: date) -> int:
    """Whole-year approximation: today.year - birthday.year"""
    return today.year - birthday.year


def project_retirement(
    total_saved,
    investment_return_rate,
    birthday: date,
    retirement_age: int,
    today: date | None = None
) -> RetirementProjection:
    """
    Projected nominal value at retirement

    Args:
        total_saved: Накоплено сейчас (прокси годового взноса)
        investment_return_rate: Доходность, % годовых
        birthday: Дата рождения (используется только год)
        retirement_age: Возраст выхода на пенсию
        today: Текущая дата (для тестов)
    """
    total_saved = non_negative_decimal(total_saved, "total_saved")
    rate = non_negative_decimal(investment_return_rate, "investment_return_rate")
    retirement_age = non_negative_int(retirement_age, "retirement_age")
    today = today or date.today()

    current_age = compute_current_age(birthday, today)
    years = max(0, retirement_age - current_age)
    monthly = total_saved / MONTHS_PER_YEAR

    if monthly <= 0:
        projected = Decimal("0")
    else:
        projected = annuity_due_future_value(monthly * MONTHS_PER_YEAR, rate, years)

    return RetirementProjection(
        current_age=current_age,
        years_to_retirement=years,
        monthly_contribution=quantize_money(monthly),
        projected_value=quantize_money(projected),
    )


def project_retirement_for(
    settings: UserSettings,
    goals: Sequence[Goal],
    today: date | None = None
) -> RetirementProjection:
    """Projection from the user's settings and selected goals' saved total"""
    return project_retirement(
        total_saved=goals_total_saved(selected_goals(goals)),
        investment_return_rate=settings.investment_return_rate,
        birthday=settings.birthday,
        retirement_age=settings.retirement_age,
        today=today,
    )
