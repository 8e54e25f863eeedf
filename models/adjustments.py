"""
Price adjustments applied to a line subtotal when an offer is used.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from models.enums import AdjustmentKind
from models.money import DecimalLike, to_decimal


class PriceAdjustment(ABC):
    """
    Produces a signed delta that the offer adds to a line subtotal.
    ``kind`` identifies the adjustment type when stored, e.g. in a database.
    """

    kind: AdjustmentKind

    @abstractmethod
    def get_value(self) -> Decimal:
        """Signed amount to add. Negative values are discounts."""


class FixedAdjustment(PriceAdjustment):
    """Adds or subtracts a fixed amount, e.g. +15 or -5."""

    kind = AdjustmentKind.FIXED

    def __init__(self, amount: DecimalLike):
        self.amount = to_decimal(amount)

    def get_value(self) -> Decimal:
        return self.amount

    def __repr__(self) -> str:
        return f"FixedAdjustment(amount={self.amount!s})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedAdjustment):
            return NotImplemented
        return self.amount == other.amount

    def __hash__(self) -> int:
        return hash((self.kind, self.amount))
