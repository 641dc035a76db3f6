"""
PurchaseDecision - a user's resolved choice about a priced item

Решение не хранится движком: оно приходит от внешнего потока покупки
(классификатор по фото + выбор пользователя) и либо зачисляется в ledger,
либо отбрасывается.
"""
import uuid
from decimal import Decimal
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from buybye.utils.validation import InvalidInputError

# Decision outcomes
OUTCOME_BUY = "buy"
OUTCOME_DONT_BUY = "dont_buy"
OUTCOME_UNSURE = "unsure"

OUTCOMES = [OUTCOME_BUY, OUTCOME_DONT_BUY, OUTCOME_UNSURE]


def new_decision_id() -> str:
    return uuid.uuid4().hex


class PurchaseDecision(BaseModel):
    """
    Validated purchase decision

    decision_id - ключ идемпотентности: повторное зачисление с тем же id
    ничего не меняет. Если вызывающий код не передал id, генерируется uuid4.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    decision_id: str = Field(default_factory=new_decision_id, alias="decisionId")
    product_name: str = Field(alias="productName")
    estimated_price: Decimal = Field(alias="estimatedPrice", gt=0)
    category: str
    outcome: Literal["buy", "dont_buy", "unsure"]

    @field_validator("estimated_price", mode="before")
    @classmethod
    def coerce_price(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("estimatedPrice must be a number")
        if isinstance(v, float):
            return str(v)
        return v

    @field_validator("decision_id", "product_name", "category")
    @classmethod
    def strip_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @property
    def is_credited_outcome(self) -> bool:
        """Only a declined purchase moves money into savings"""
        return self.outcome == OUTCOME_DONT_BUY

    @classmethod
    def from_classifier(
        cls,
        payload: Mapping[str, Any],
        outcome: str,
        decision_id: str | None = None
    ) -> "PurchaseDecision":
        """
        Build a decision from the product classifier output

        Args:
            payload: {"productName": ..., "estimatedPrice": ..., "category": ...}
            outcome: buy, dont_buy, unsure
            decision_id: Ключ идемпотентности (опционально)

        Raises:
            InvalidInputError: пропущенные или некорректные поля
        """
        data = {
            "productName": payload.get("productName"),
            "estimatedPrice": payload.get("estimatedPrice"),
            "category": payload.get("category"),
            "outcome": outcome,
        }
        if decision_id is not None:
            data["decisionId"] = decision_id

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise InvalidInputError(f"Invalid purchase decision: {errors}") from e
