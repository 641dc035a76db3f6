"""
Pytest fixtures for testing
"""
import pytest
from datetime import date
from decimal import Decimal

from buybye.domain.decision import PurchaseDecision
from buybye.domain.goal import Goal
from buybye.domain.settings import UserSettings


@pytest.fixture
def salary_settings() -> UserSettings:
    """52 000 в год -> 25 в час, доходность 10%"""
    return UserSettings(
        currency="$",
        income_mode="salary",
        yearly_salary=Decimal("52000"),
        hourly_rate=Decimal("25"),
        investment_return_rate=Decimal("10"),
        retirement_age=65,
        birthday=date(2004, 1, 1),
    )


@pytest.fixture
def sample_goals() -> list[Goal]:
    return [
        Goal(id="headphones", title="New Headphones (Electronics)", icon="🎧",
             target_amount=Decimal("300")),
        Goal(id="travel", title="Travel", icon="🌍", target_amount=Decimal("1200")),
        Goal(id="emergency", title="Emergency fund", icon="🛟", selected=False),
    ]


@pytest.fixture
def make_decision():
    """Factory for dont_buy decisions with an explicit id"""
    def _make(decision_id="d-1", price="100", category="Electronics", outcome="dont_buy",
              product_name="Wireless earbuds"):
        return PurchaseDecision(
            decision_id=decision_id,
            product_name=product_name,
            estimated_price=Decimal(price),
            category=category,
            outcome=outcome,
        )
    return _make
