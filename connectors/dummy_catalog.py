"""
Module: connectors.dummy_catalog

Provides an in-memory Acme widgets catalog, offers and delivery bands for
demos and tests.
"""

from models.adjustments import FixedAdjustment
from models.catalog import CatalogProduct
from models.conditions import QuantityCondition
from models.delivery import DeliveryChargeRule
from models.offers import ProductOffer


class DummyCatalog:
    """
    Dummy catalog connector for the Acme widget store.
    Each call returns fresh objects built from the static data below.
    """

    _products = {
        "R01": {"name": "Red Widget", "price": "32.95"},
        "G01": {"name": "Green Widget", "price": "24.95"},
        "B01": {"name": "Blue Widget", "price": "7.95"},
    }
    # (min_price, max_price, price)
    _delivery_bands = [
        (None, "50", "4.95"),
        ("50", "90", "2.95"),
        ("90", None, "0.00"),
    ]

    def get_products(self) -> list[CatalogProduct]:
        return [
            CatalogProduct(sku=sku, name=info["name"], price=info["price"])
            for sku, info in self._products.items()
        ]

    def get_delivery_rules(self) -> list[DeliveryChargeRule]:
        return [DeliveryChargeRule(low, high, price) for low, high, price in self._delivery_bands]

    def get_offers(self) -> dict[str, ProductOffer]:
        return {
            "R01": ProductOffer(
                title="Buy one red widget, get the second at half price",
                description="Limited time offer",
                conditions=[QuantityCondition(min=2, max=None)],
                adjustments=[FixedAdjustment("-16.475")],
            )
        }
