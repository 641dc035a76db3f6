"""
Tests for PurchaseDecision boundary validation
"""
import pytest
from decimal import Decimal

from buybye.domain.decision import PurchaseDecision, OUTCOME_DONT_BUY, OUTCOME_BUY
from buybye.utils.validation import InvalidInputError

CLASSIFIER_PAYLOAD = {
    "productName": "Wireless earbuds",
    "estimatedPrice": 89.99,
    "category": "Electronics",
}


class TestFromClassifier:
    def test_valid_payload(self):
        decision = PurchaseDecision.from_classifier(CLASSIFIER_PAYLOAD, OUTCOME_DONT_BUY, decision_id="d-1")

        assert decision.decision_id == "d-1"
        assert decision.product_name == "Wireless earbuds"
        assert decision.estimated_price == Decimal("89.99")
        assert decision.category == "Electronics"
        assert decision.is_credited_outcome

    def test_generates_decision_id_when_missing(self):
        """Без id генерируется уникальный ключ"""
        a = PurchaseDecision.from_classifier(CLASSIFIER_PAYLOAD, OUTCOME_BUY)
        b = PurchaseDecision.from_classifier(CLASSIFIER_PAYLOAD, OUTCOME_BUY)
        assert a.decision_id and b.decision_id
        assert a.decision_id != b.decision_id
        assert not a.is_credited_outcome

    def test_strips_whitespace(self):
        payload = {**CLASSIFIER_PAYLOAD, "category": "  Travel  "}
        decision = PurchaseDecision.from_classifier(payload, OUTCOME_DONT_BUY)
        assert decision.category == "Travel"

    @pytest.mark.parametrize("price", [0, -5, "abc", None, True])
    def test_rejects_bad_price(self, price):
        payload = {**CLASSIFIER_PAYLOAD, "estimatedPrice": price}
        with pytest.raises(InvalidInputError, match="estimatedPrice"):
            PurchaseDecision.from_classifier(payload, OUTCOME_DONT_BUY)

    def test_rejects_blank_category(self):
        payload = {**CLASSIFIER_PAYLOAD, "category": "   "}
        with pytest.raises(InvalidInputError, match="category"):
            PurchaseDecision.from_classifier(payload, OUTCOME_DONT_BUY)

    def test_rejects_missing_product_name(self):
        payload = {k: v for k, v in CLASSIFIER_PAYLOAD.items() if k != "productName"}
        with pytest.raises(InvalidInputError, match="productName"):
            PurchaseDecision.from_classifier(payload, OUTCOME_DONT_BUY)

    def test_rejects_unknown_outcome(self):
        with pytest.raises(InvalidInputError, match="outcome"):
            PurchaseDecision.from_classifier(CLASSIFIER_PAYLOAD, "maybe")

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            PurchaseDecision.from_classifier({}, OUTCOME_DONT_BUY)


def test_decision_is_immutable(make_decision):
    decision = make_decision()
    with pytest.raises(Exception):
        decision.category = "Travel"
