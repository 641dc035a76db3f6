"""Reminders for "unsure" purchase decisions (park the item, ask again later)."""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from buybye.config import get_settings
from buybye.domain.decision import PurchaseDecision, OUTCOME_UNSURE
from buybye.utils.validation import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PurchaseReminder:
    decision_id: str
    product_name: str
    category: str
    price: Decimal
    remind_at: datetime
    label: str


def reminder_presets() -> list[int]:
    return list(get_settings().UNSURE_REMINDER_HOURS)


def reminder_label(hours: int) -> str:
    """1 -> "1 hour", 24 -> "24 hours" """
    return "1 hour" if hours == 1 else f"{hours} hours"


def schedule_reminder(
    decision: PurchaseDecision,
    hours: int,
    now: datetime | None = None
) -> PurchaseReminder:
    """
    Запланировать напоминание о товаре, по которому пользователь не решил

    Raises:
        InvalidInputError: решение не "unsure" или hours не из пресетов
    """
    if decision.outcome != OUTCOME_UNSURE:
        raise InvalidInputError(
            f"Reminders are only for unsure decisions, got {decision.outcome!r}"
        )

    presets = reminder_presets()
    if isinstance(hours, bool) or hours not in presets:
        raise InvalidInputError(f"Reminder must be one of {presets} hours, got {hours!r}")

    now = now or datetime.now(timezone.utc)
    reminder = PurchaseReminder(
        decision_id=decision.decision_id,
        product_name=decision.product_name,
        category=decision.category,
        price=decision.estimated_price,
        remind_at=now + timedelta(hours=hours),
        label=reminder_label(hours),
    )
    logger.info("Reminder for %s scheduled in %s", decision.decision_id, reminder.label)
    return reminder
