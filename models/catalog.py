"""
Catalog data model for products that can be added to a basket.
"""

from dataclasses import dataclass
from decimal import Decimal

from models.money import ZERO, to_decimal


@dataclass(frozen=True)
class CatalogProduct:
    """
    A product in the catalog. Baskets look products up by ``sku``.

    ``price`` accepts any decimal-like value and is stored as ``Decimal``.
    """

    sku: str
    name: str
    price: Decimal

    def __post_init__(self):
        price = to_decimal(self.price)
        if price < ZERO:
            raise ValueError(f"Price for {self.sku} must not be negative: {price}")
        # frozen dataclass, so bypass __setattr__ for the normalised value
        object.__setattr__(self, "price", price)
