"""
Savings ledger - the only place where savings state changes.

credit_decision() is a pure function over (goals, aggregate).
SavingsLedger owns the current state for a caller and serializes credits:
goals and aggregate are replaced together under one lock, so a reader never
sees the aggregate updated without the goal (or the other way round).
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Sequence

from buybye.application.goal_matching import DEFAULT_MATCHER, GoalMatcher
from buybye.application.goals import replace_goal_set
from buybye.application.purchase import evaluate_purchase
from buybye.domain.decision import PurchaseDecision
from buybye.domain.goal import Goal
from buybye.domain.savings import SavingsAggregate
from buybye.domain.settings import UserSettings

logger = logging.getLogger(__name__)


def credit_decision(
    decision: PurchaseDecision,
    goals: Sequence[Goal],
    aggregate: SavingsAggregate,
    settings: UserSettings,
    *,
    matcher: GoalMatcher | None = None,
    horizon_years: int | None = None
) -> tuple[list[Goal], SavingsAggregate]:
    """
    Зачислить отказ от покупки в накопления

    - повторный decision_id: состояние не меняется
    - outcome buy / unsure: состояние не меняется
    - dont_buy: money_saved, work_time_saved, investment_potential растут,
      найденная цель получает +price к saved_amount

    Returns:
        (goals, aggregate) - новые значения (входные не мутируются)
    """
    goals = list(goals)

    if aggregate.has_credited(decision.decision_id):
        logger.info("Decision %s already credited, skipping", decision.decision_id)
        return goals, aggregate

    if not decision.is_credited_outcome:
        return goals, aggregate

    matcher = matcher or DEFAULT_MATCHER
    evaluation = evaluate_purchase(decision.estimated_price, settings, horizon_years)

    new_aggregate = aggregate.add(
        decision_id=decision.decision_id,
        amount=evaluation.price,
        work_time=evaluation.work_time,
        investment_value=evaluation.investment_value,
    )

    matched = matcher.match(decision.category, goals)
    if matched is None:
        logger.debug("No goal matches category %r", decision.category)
        return goals, new_aggregate

    # matcher may return a copy: credit the first goal with the same id
    new_goals = []
    credited = False
    for goal in goals:
        if not credited and goal.id == matched.id:
            goal = goal.credit(evaluation.price)
            credited = True
        new_goals.append(goal)
    logger.info(
        "Credited %s to goal %s (decision %s)",
        evaluation.price, matched.id, decision.decision_id
    )
    return new_goals, new_aggregate


@dataclass(frozen=True)
class SavingsSnapshot:
    goals: tuple[Goal, ...] = ()
    aggregate: SavingsAggregate = field(default_factory=SavingsAggregate)


@dataclass(frozen=True)
class CreditResult:
    snapshot: SavingsSnapshot
    applied: bool  # False for replays and non-credited outcomes


class SavingsLedger:
    """
    Caller-owned savings state with a single writer

    Example:
        >>> ledger = SavingsLedger(goals=goals)
        >>> result = ledger.credit(decision, settings)
        >>> result.snapshot.aggregate.money_saved
    """

    def __init__(
        self,
        goals: Sequence[Goal] = (),
        aggregate: SavingsAggregate | None = None,
        matcher: GoalMatcher | None = None
    ):
        self._lock = threading.Lock()
        self._matcher = matcher or DEFAULT_MATCHER
        self._snapshot = SavingsSnapshot(
            goals=tuple(replace_goal_set(goals)),
            aggregate=aggregate or SavingsAggregate(),
        )

    def snapshot(self) -> SavingsSnapshot:
        """Immutable view of the current state, safe to read from any thread"""
        return self._snapshot

    def credit(
        self,
        decision: PurchaseDecision,
        settings: UserSettings,
        horizon_years: int | None = None
    ) -> CreditResult:
        with self._lock:
            current = self._snapshot
            goals, aggregate = credit_decision(
                decision,
                current.goals,
                current.aggregate,
                settings,
                matcher=self._matcher,
                horizon_years=horizon_years,
            )
            applied = aggregate is not current.aggregate
            if applied:
                self._snapshot = SavingsSnapshot(goals=tuple(goals), aggregate=aggregate)
            return CreditResult(snapshot=self._snapshot, applied=applied)

    def replace_goals(self, goals: Sequence[Goal]) -> SavingsSnapshot:
        """Заменить весь набор целей (delete-and-reinsert), агрегат не трогаем"""
        new_goals = tuple(replace_goal_set(goals))
        with self._lock:
            self._snapshot = SavingsSnapshot(goals=new_goals, aggregate=self._snapshot.aggregate)
            return self._snapshot

    def reset(self) -> SavingsSnapshot:
        """Logout / account deletion: drop goals and totals"""
        with self._lock:
            self._snapshot = SavingsSnapshot()
            logger.info("Savings state reset")
            return self._snapshot
