"""
Product offers: conditional price adjustments for one basket line.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from models.adjustments import PriceAdjustment
from models.conditions import Condition, passes_all
from models.money import DecimalLike, add, to_decimal


@dataclass
class ProductOffer:
    """
    An offer such as "buy one, get the second at half price".

    The basket maps each offer to a SKU. The offer applies when every
    condition passes for the line quantity; applying it adds every
    adjustment to the line subtotal.
    """

    title: str
    description: str
    conditions: Sequence[Condition] = field(default_factory=list)
    adjustments: Sequence[PriceAdjustment] = field(default_factory=list)

    def is_eligible(self, quantity: int) -> bool:
        return passes_all(self.conditions, quantity)

    def get_total(self, subtotal: DecimalLike, scale: int | None = None) -> Decimal:
        """
        Line total after adjustments, applied in list order.

        Does not check eligibility; call ``is_eligible`` first.
        """
        total = to_decimal(subtotal)
        for adjustment in self.adjustments:
            total = add(total, adjustment.get_value(), scale)
        return total
