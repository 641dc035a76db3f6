"""
UserSettings domain entity - income and investment preferences of a user
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

# Income modes
INCOME_MODE_SALARY = "salary"  # yearly_salary is the source of truth
INCOME_MODE_HOURLY = "hourly"  # hourly_rate is the source of truth

INCOME_MODES = [INCOME_MODE_SALARY, INCOME_MODE_HOURLY]


@dataclass(frozen=True)
class UserSettings:
    """
    User settings (value object)

    Оба поля дохода хранятся всегда и синхронизируются при редактировании
    (yearly_salary = hourly_rate * 2080), но для расчётов используется
    только то, на которое указывает income_mode.
    """
    currency: str  # display-only symbol: $, €, £
    income_mode: str  # salary, hourly
    yearly_salary: Decimal
    hourly_rate: Decimal
    investment_return_rate: Decimal  # percent, 10 = 10%/yr
    retirement_age: int
    birthday: date

    @property
    def is_hourly(self) -> bool:
        return self.income_mode == INCOME_MODE_HOURLY
