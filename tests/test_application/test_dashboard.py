"""
Tests for the savings dashboard read view
"""
from dataclasses import replace
from datetime import date
from decimal import Decimal

from buybye.application.dashboard import build_dashboard
from buybye.application.ledger import SavingsLedger

TODAY = date(2026, 10, 19)


def test_empty_dashboard(salary_settings):
    dashboard = build_dashboard(SavingsLedger().snapshot(), salary_settings, horizon=1, today=TODAY)

    assert dashboard["savings"]["money_saved_label"] == "$0"
    assert dashboard["savings"]["work_time_label"] == "0h 0m"
    assert dashboard["savings"]["work_time_text"] == "0 minutes"
    assert dashboard["timeline"]["goals"] == []
    assert dashboard["retirement"]["projection"].projected_value == 0


def test_dashboard_after_credits(salary_settings, sample_goals, make_decision):
    ledger = SavingsLedger(goals=sample_goals)
    ledger.credit(make_decision("d-1", price="100", category="Electronics"), salary_settings)
    ledger.credit(make_decision("d-2", price="50", category="Travel"), salary_settings)

    dashboard = build_dashboard(ledger.snapshot(), salary_settings, horizon=3, today=TODAY)
    savings = dashboard["savings"]

    assert savings["money_saved"] == Decimal("150")
    assert savings["money_saved_label"] == "$150"
    assert savings["work_time_label"] == "6h 0m"
    assert savings["work_time_text"] == "6 hours"
    assert savings["investment_potential"] == Decimal("241.58")
    assert savings["investment_potential_label"] == "$242"

    # 300 + 1200 (emergency не выбрана) / 3 года
    assert dashboard["timeline"]["plan"].total.yearly_target == 500
    assert dashboard["timeline"]["yearly_target_label"] == "$500"
    assert [g["goal_id"] for g in dashboard["timeline"]["goals"]] == ["headphones", "travel"]
    assert dashboard["timeline"]["goals"][1]["yearly_target_label"] == "$400"

    retirement = dashboard["retirement"]["projection"]
    assert retirement.years_to_retirement == 43
    assert retirement.monthly_contribution == Decimal("12.50")
    assert dashboard["retirement"]["projected_value_label"].startswith("$")


def test_currency_symbol_only_changes_labels(salary_settings, sample_goals, make_decision):
    ledger = SavingsLedger(goals=sample_goals)
    ledger.credit(make_decision(), salary_settings)
    euro = replace(salary_settings, currency="€")

    usd = build_dashboard(ledger.snapshot(), salary_settings, horizon=1, today=TODAY)
    eur = build_dashboard(ledger.snapshot(), euro, horizon=1, today=TODAY)

    assert eur["savings"]["money_saved_label"] == "€100"
    assert eur["savings"]["investment_potential"] == usd["savings"]["investment_potential"]
    assert eur["retirement"]["projection"] == usd["retirement"]["projection"]
