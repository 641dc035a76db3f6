"""
Goal domain entity - a user-defined savings target
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Goal:
    """
    Savings goal (value object)

    Goal не меняется на месте: ledger возвращает новый экземпляр с обновлённым
    saved_amount, а редактирование набора целей заменяет весь список.

    title участвует в нечётком сопоставлении с категорией покупки.
    target_amount=None означает цель без лимита.
    """
    id: str
    title: str
    icon: str = ""
    selected: bool = True
    target_amount: Optional[Decimal] = None
    saved_amount: Decimal = Decimal("0")

    @property
    def target_or_zero(self) -> Decimal:
        return self.target_amount if self.target_amount is not None else Decimal("0")

    def credit(self, amount: Decimal) -> "Goal":
        """Вернуть копию цели с увеличенным saved_amount (target не трогаем)"""
        return replace(self, saved_amount=self.saved_amount + amount)
