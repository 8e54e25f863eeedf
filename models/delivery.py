"""
Delivery charge bands keyed on the basket subtotal.
"""

from decimal import Decimal

from models.money import ZERO, DecimalLike, add, compare, to_decimal


class DeliveryChargeRule:
    """
    A flat delivery charge for basket totals in ``[min_price, max_price)``.

    Either bound may be None to leave that side open. ``price`` may be
    negative (discount) or None (free delivery).
    """

    def __init__(
        self,
        min_price: DecimalLike | None = None,
        max_price: DecimalLike | None = None,
        price: DecimalLike | None = None,
    ):
        self.min_price = self.handle_nullable_price(min_price)
        self.max_price = self.handle_nullable_price(max_price)
        self.price = self.handle_nullable_price(price)

    @staticmethod
    def handle_nullable_price(value: DecimalLike | None) -> Decimal | None:
        """Keep None as None, convert anything else to Decimal."""
        if value is None:
            return None
        return to_decimal(value)

    def is_eligible(self, cart_total: DecimalLike) -> bool:
        """True when ``min_price <= cart_total < max_price``, ignoring unset bounds."""
        if self.min_price is not None and compare(cart_total, self.min_price) < 0:
            return False
        if self.max_price is not None and compare(cart_total, self.max_price) >= 0:
            return False
        return True

    def get_price(self) -> Decimal:
        """Charge added when the rule applies. Zero when no price was set."""
        if self.price is None:
            return ZERO
        return self.price

    def get_total(self, cart_total: DecimalLike, scale: int | None = None) -> Decimal:
        """
        Cart total including this rule's charge, truncated to ``scale`` when given.
        Returns the cart total unchanged when the rule does not apply.
        """
        if self.is_eligible(cart_total):
            return add(cart_total, self.get_price(), scale)
        return to_decimal(cart_total)

    def get_min_price(self) -> Decimal | None:
        return self.min_price

    def get_max_price(self) -> Decimal | None:
        return self.max_price

    def __repr__(self) -> str:
        return (
            f"DeliveryChargeRule(min_price={self.min_price}, "
            f"max_price={self.max_price}, price={self.price})"
        )
