"""
Savings dashboard - aggregated read view for a refresh.

Pure read-layer: no mutations, works on a SavingsSnapshot.
Blocks:
  1. Savings totals (money, work time, investment potential)
  2. Goal timeline for the chosen horizon
  3. Retirement projection
"""
from datetime import date
from typing import Any

from buybye.application.ledger import SavingsSnapshot
from buybye.application.retirement import project_retirement_for
from buybye.application.timeline import allocate_timeline
from buybye.domain.settings import UserSettings
from buybye.utils.money import describe_work_time, format_money, format_work_time


def build_dashboard(
    snapshot: SavingsSnapshot,
    settings: UserSettings,
    horizon: int,
    today: date | None = None
) -> dict[str, Any]:
    """
    Returns:
        savings:    formatted totals + raw values
        timeline:   TimelinePlan + formatted yearly targets per goal
        retirement: RetirementProjection + formatted value
    """
    currency = settings.currency
    aggregate = snapshot.aggregate
    work_time = aggregate.work_time_saved

    plan = allocate_timeline(snapshot.goals, horizon)
    retirement = project_retirement_for(settings, snapshot.goals, today)

    return {
        "savings": {
            "money_saved": aggregate.money_saved,
            "money_saved_label": format_money(aggregate.money_saved, currency),
            "work_time_saved": work_time,
            "work_time_label": format_work_time(work_time.hours, work_time.minutes),
            "work_time_text": describe_work_time(work_time.hours, work_time.minutes),
            "investment_potential": aggregate.investment_potential,
            "investment_potential_label": format_money(aggregate.investment_potential, currency),
        },
        "timeline": {
            "plan": plan,
            "yearly_target_label": format_money(plan.total.yearly_target, currency),
            "goals": [
                {
                    "goal_id": item.goal.id,
                    "title": item.goal.title,
                    "icon": item.goal.icon,
                    "yearly_target_label": format_money(item.line.yearly_target, currency),
                    "progress_percent": item.line.progress_percent,
                }
                for item in plan.goals
            ],
        },
        "retirement": {
            "projection": retirement,
            "projected_value_label": format_money(retirement.projected_value, currency),
        },
    }
