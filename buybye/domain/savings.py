"""
Savings aggregate - running totals of everything the user decided not to buy
"""
from dataclasses import dataclass, field, replace
from decimal import Decimal

MINUTES_PER_HOUR = 60


@dataclass(frozen=True)
class WorkTime:
    """
    Work-time duration: whole hours plus minutes in [0, 60)

    Сложение переносит лишние минуты в часы.
    """
    hours: int = 0
    minutes: int = 0

    def __post_init__(self):
        if self.hours < 0 or self.minutes < 0:
            raise ValueError(f"WorkTime cannot be negative: {self.hours}h {self.minutes}m")
        if self.minutes >= MINUTES_PER_HOUR:
            carry, rest = divmod(self.minutes, MINUTES_PER_HOUR)
            object.__setattr__(self, "hours", self.hours + carry)
            object.__setattr__(self, "minutes", rest)

    @property
    def total_minutes(self) -> int:
        return self.hours * MINUTES_PER_HOUR + self.minutes

    def __add__(self, other: "WorkTime") -> "WorkTime":
        if not isinstance(other, WorkTime):
            return NotImplemented
        return WorkTime(hours=self.hours + other.hours, minutes=self.minutes + other.minutes)


@dataclass(frozen=True)
class SavingsAggregate:
    """
    Process-wide savings totals (value object)

    - money_saved: сумма всех отказов от покупок (в том числе без цели)
    - work_time_saved: сколько рабочих часов не пришлось потратить
    - investment_potential: сумма FV по каждому решению, дальше не капитализируется
    - credited_decision_ids: id уже учтённых решений (защита от повторного зачисления)

    Сбрасывается только при выходе из аккаунта / удалении аккаунта.
    credited_decision_ids растёт без ограничения до reset() ledger.
    """
    money_saved: Decimal = Decimal("0")
    work_time_saved: WorkTime = field(default_factory=WorkTime)
    investment_potential: Decimal = Decimal("0")
    credited_decision_ids: frozenset[str] = frozenset()

    def has_credited(self, decision_id: str) -> bool:
        return decision_id in self.credited_decision_ids

    def add(
        self,
        decision_id: str,
        amount: Decimal,
        work_time: WorkTime,
        investment_value: Decimal
    ) -> "SavingsAggregate":
        """Вернуть новый агрегат с учётом одного решения"""
        return replace(
            self,
            money_saved=self.money_saved + amount,
            work_time_saved=self.work_time_saved + work_time,
            investment_potential=self.investment_potential + investment_value,
            credited_decision_ids=self.credited_decision_ids | {decision_id},
        )
