"""
Goal use cases - validation and whole-set replacement of savings goals
"""
import uuid
from dataclasses import replace
from decimal import Decimal
from typing import Sequence

from buybye.domain.goal import Goal
from buybye.utils.validation import InvalidInputError, non_negative_decimal


class GoalValidationError(InvalidInputError):
    """Ошибка валидации цели"""
    pass


def create_goal(
    title: str,
    icon: str = "",
    target_amount=None,
    saved_amount=0,
    selected: bool = True,
    goal_id: str | None = None
) -> Goal:
    """
    Создать цель

    Args:
        title: Название цели (участвует в сопоставлении с категорией)
        icon: Эмодзи / имя иконки, движку не важно
        target_amount: Целевая сумма (None - без лимита)
        saved_amount: Уже накоплено
        selected: Участвует ли цель в общих расчётах
        goal_id: Стабильный id; по умолчанию uuid4

    Raises:
        GoalValidationError: пустое название, отрицательные суммы
    """
    title = (title or "").strip()
    if not title:
        raise GoalValidationError("Goal title cannot be empty")

    try:
        target = non_negative_decimal(target_amount, "target_amount") if target_amount is not None else None
        saved = non_negative_decimal(saved_amount, "saved_amount")
    except InvalidInputError as e:
        raise GoalValidationError(str(e)) from e

    return Goal(
        id=goal_id or uuid.uuid4().hex,
        title=title,
        icon=icon,
        selected=selected,
        target_amount=target,
        saved_amount=saved,
    )


def replace_goal_set(goals: Sequence[Goal]) -> list[Goal]:
    """
    Проверить новый набор целей целиком (замена, не слияние)

    Raises:
        GoalValidationError: дубли id, пустые названия, отрицательные суммы
    """
    seen: set[str] = set()
    for goal in goals:
        if goal.id in seen:
            raise GoalValidationError(f"Duplicate goal id: {goal.id}")
        seen.add(goal.id)

        if not goal.title.strip():
            raise GoalValidationError(f"Goal {goal.id} has an empty title")
        if goal.target_amount is not None and goal.target_amount < 0:
            raise GoalValidationError(f"Goal {goal.id} target cannot be negative")
        if goal.saved_amount < 0:
            raise GoalValidationError(f"Goal {goal.id} saved amount cannot be negative")

    return list(goals)


def selected_goals(goals: Sequence[Goal]) -> list[Goal]:
    return [g for g in goals if g.selected]


def toggle_goal_selection(goals: Sequence[Goal], goal_id: str) -> list[Goal]:
    """Переключить selected у одной цели, вернуть новый список"""
    if not any(g.id == goal_id for g in goals):
        raise GoalValidationError(f"Goal {goal_id} not found")
    return [replace(g, selected=not g.selected) if g.id == goal_id else g for g in goals]


def total_saved(goals: Sequence[Goal]) -> Decimal:
    return sum((g.saved_amount for g in goals), Decimal("0"))


def total_target(goals: Sequence[Goal]) -> Decimal:
    return sum((g.target_or_zero for g in goals), Decimal("0"))
