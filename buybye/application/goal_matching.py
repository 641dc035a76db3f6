"""
Goal matching - which savings goal a purchase category belongs to.

The ledger depends only on the GoalMatcher protocol, so the loose default
rule can be replaced by a stricter one without touching crediting logic.
"""
from typing import Optional, Protocol, Sequence

from buybye.domain.goal import Goal


class GoalMatcher(Protocol):
    def match(self, category: str, goals: Sequence[Goal]) -> Optional[Goal]:
        ...


class SubstringGoalMatcher:
    """
    Default rule: title contains category or category contains title,
    case-insensitive. First match in list order wins.

    "Electronics" -> "New Headphones (Electronics)"
    "Travel"      -> "Travel"
    """

    def match(self, category: str, goals: Sequence[Goal]) -> Optional[Goal]:
        needle = category.strip().casefold()
        if not needle:
            return None

        for goal in goals:
            title = goal.title.strip().casefold()
            if not title:
                continue
            if needle in title or title in needle:
                return goal
        return None


class ExactTitleGoalMatcher:
    """Strict rule: category equals goal title (case-insensitive)."""

    def match(self, category: str, goals: Sequence[Goal]) -> Optional[Goal]:
        needle = category.strip().casefold()
        for goal in goals:
            if goal.title.strip().casefold() == needle:
                return goal
        return None


DEFAULT_MATCHER = SubstringGoalMatcher()
