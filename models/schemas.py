"""
Pydantic models describing a basket configuration document: products,
delivery rules and offers, as read from JSON or any other plain-data source.
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, field_validator

from models.enums import AdjustmentKind, ConditionKind
from models.money import to_decimal


def _optional_decimal(value: Any) -> Decimal | None:
    if value is None:
        return None
    return to_decimal(value)


# Money accepts strings or numbers; floats keep their literal digits
Money = Annotated[Decimal, BeforeValidator(to_decimal)]
OptionalMoney = Annotated[Decimal | None, BeforeValidator(_optional_decimal)]


class CatalogProductModel(BaseModel):
    sku: str = Field(min_length=1)
    name: str
    price: Money = Field(ge=0)


class DeliveryChargeRuleModel(BaseModel):
    min_price: OptionalMoney = None
    max_price: OptionalMoney = None
    price: OptionalMoney = None


class QuantityConditionModel(BaseModel):
    type: ConditionKind = ConditionKind.QUANTITY
    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)


class PriceAdjustmentModel(BaseModel):
    kind: AdjustmentKind = AdjustmentKind.FIXED
    value: Money

    @field_validator("kind")
    @classmethod
    def only_fixed(cls, kind: AdjustmentKind) -> AdjustmentKind:
        # Percentage adjustments have a kind tag but no implementation yet
        if kind is not AdjustmentKind.FIXED:
            raise ValueError(f"Unsupported adjustment kind: {kind.value}")
        return kind


class ProductOfferModel(BaseModel):
    title: str
    description: str = ""
    conditions: list[QuantityConditionModel] = []
    adjustments: list[PriceAdjustmentModel] = []


class BasketSetupModel(BaseModel):
    """Top-level configuration document."""

    products: list[CatalogProductModel]
    delivery_rules: list[DeliveryChargeRuleModel] = []
    offers: dict[str, ProductOfferModel] = {}
