"""
Savings timeline - spread goal targets evenly over a 1/2/3-year horizon.

Pure read-layer over a goal list: no mutations.
Only selected goals participate.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from buybye.application.goals import selected_goals, total_saved, total_target
from buybye.config import get_settings
from buybye.domain.goal import Goal
from buybye.utils.money import round_half_up
from buybye.utils.validation import InvalidInputError

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class TimelineLine:
    target: Decimal
    saved: Decimal
    remaining: Decimal
    yearly_target: int
    progress_percent: Decimal


@dataclass(frozen=True)
class GoalTimelineLine:
    goal: Goal
    line: TimelineLine


@dataclass(frozen=True)
class TimelinePlan:
    horizon: int
    total: TimelineLine
    goals: list[GoalTimelineLine]


def _clamp(val: Decimal, lo: Decimal = Decimal("0"), hi: Decimal = HUNDRED) -> Decimal:
    return max(lo, min(hi, val))


def timeline_line(target: Decimal, saved: Decimal, horizon: int) -> TimelineLine:
    """
    yearly_target = round(target / horizon) - не зависит от уже накопленного
    progress_percent = clamp(saved / target * 100, 0, 100), 0 при target == 0
    """
    progress = _clamp(saved / target * HUNDRED) if target > 0 else Decimal("0")
    return TimelineLine(
        target=target,
        saved=saved,
        remaining=max(Decimal("0"), target - saved),
        yearly_target=round_half_up(target / horizon),
        progress_percent=progress,
    )


def validate_horizon(horizon) -> int:
    allowed = get_settings().TIMELINE_HORIZONS
    if isinstance(horizon, bool) or horizon not in allowed:
        raise InvalidInputError(f"Horizon must be one of {allowed}, got {horizon!r}")
    return int(horizon)


def allocate_timeline(goals: Sequence[Goal], horizon: int) -> TimelinePlan:
    """
    Рассчитать план накоплений на горизонт

    Args:
        goals: Все цели пользователя (невыбранные отфильтруются)
        horizon: 1, 2 или 3 года

    Raises:
        InvalidInputError: горизонт не из TIMELINE_HORIZONS
    """
    horizon = validate_horizon(horizon)
    active = selected_goals(goals)

    return TimelinePlan(
        horizon=horizon,
        total=timeline_line(total_target(active), total_saved(active), horizon),
        goals=[
            GoalTimelineLine(goal=g, line=timeline_line(g.target_or_zero, g.saved_amount, horizon))
            for g in active
        ],
    )
