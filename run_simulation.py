"""
Прогнать несколько решений о покупке через ledger и вывести дашборд.
Run:  python run_simulation.py [decisions.json]

decisions.json - список объектов
    {"productName": ..., "estimatedPrice": ..., "category": ..., "outcome": ..., "decisionId": ...}
"""
import json
import logging
import sys

from buybye.application.dashboard import build_dashboard
from buybye.application.goals import create_goal
from buybye.application.ledger import SavingsLedger
from buybye.application.profile import default_settings
from buybye.config import get_settings
from buybye.domain.decision import PurchaseDecision

logging.basicConfig(level=get_settings().LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger("run_simulation")

SAMPLE_DECISIONS = [
    {"productName": "Wireless earbuds", "estimatedPrice": 100, "category": "Electronics", "outcome": "dont_buy"},
    {"productName": "Weekend flight", "estimatedPrice": 240, "category": "Travel", "outcome": "dont_buy"},
    {"productName": "Sneakers", "estimatedPrice": 130, "category": "Fashion", "outcome": "dont_buy"},
    {"productName": "Coffee machine", "estimatedPrice": 89.99, "category": "Kitchen", "outcome": "buy"},
]

settings = default_settings()
ledger = SavingsLedger(goals=[
    create_goal("New Headphones (Electronics)", icon="🎧", target_amount=300, goal_id="headphones"),
    create_goal("Travel", icon="🌍", target_amount=1200, goal_id="travel"),
    create_goal("Emergency fund", icon="🛟", goal_id="emergency", selected=False),
])

if len(sys.argv) > 1:
    with open(sys.argv[1], encoding="utf-8") as f:
        raw_decisions = json.load(f)
else:
    raw_decisions = SAMPLE_DECISIONS

for i, raw in enumerate(raw_decisions, start=1):
    decision = PurchaseDecision.from_classifier(
        raw, raw["outcome"], decision_id=raw.get("decisionId", f"sim-{i}")
    )
    result = ledger.credit(decision, settings)
    logger.info("%s (%s): applied=%s", decision.product_name, decision.outcome, result.applied)

dashboard = build_dashboard(ledger.snapshot(), settings, horizon=1)

print(f"Money saved:          {dashboard['savings']['money_saved_label']}")
print(f"Work time saved:      {dashboard['savings']['work_time_text']}")
print(f"Investment potential: {dashboard['savings']['investment_potential_label']}")
print(f"Save per year:        {dashboard['timeline']['yearly_target_label']}")
for item in dashboard["timeline"]["goals"]:
    print(f"  {item['icon']} {item['title']}: {item['yearly_target_label']} ({item['progress_percent']:.0f}%)")
print(f"At retirement:        {dashboard['retirement']['projected_value_label']}")
