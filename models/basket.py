"""
Shopping basket that tracks product quantities and prices them.
"""

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal

from config.config import BasketConfig
from models.catalog import CatalogProduct
from models.delivery import DeliveryChargeRule
from models.exceptions import ProductNotFoundError
from models.money import ZERO, DecimalLike, add, multiply, to_display
from models.offers import ProductOffer

logger = logging.getLogger(__name__)


class Basket:
    """
    Tracks the quantity of each catalog product added and calculates the
    basket total, including product offers and delivery charges.

    The catalog, delivery rules and offers are read-only for the lifetime of
    the basket and can be shared between baskets. Only the quantity map
    changes. A basket is meant for a single caller; it does no locking.
    """

    def __init__(
        self,
        catalog_products: Iterable[CatalogProduct] | Mapping[str, CatalogProduct],
        delivery_charge_rules: Iterable[DeliveryChargeRule],
        offers: Mapping[str, ProductOffer],
        config: BasketConfig | None = None,
    ):
        """
        Args:
            catalog_products: Products that may be added. A mapping is accepted
                too; only its values are used. Products are indexed by their own
                SKU and a duplicate SKU replaces the earlier product (last wins).
            delivery_charge_rules: Delivery bands applied to the basket subtotal.
            offers: Offer for each SKU that has one.
            config: Working scale and display rounding. Defaults to ``BasketConfig()``.
        """
        self.config = config or BasketConfig()
        if isinstance(catalog_products, Mapping):
            catalog_products = catalog_products.values()

        self.catalog: dict[str, CatalogProduct] = {}
        for product in catalog_products:
            if product.sku in self.catalog:
                logger.warning(f"Duplicate SKU {product.sku} in catalog, keeping the last entry")
            self.catalog[product.sku] = product

        self.delivery_charge_rules: list[DeliveryChargeRule] = list(delivery_charge_rules)
        self.offers: dict[str, ProductOffer] = dict(offers)
        # sku -> quantity, always > 0, insertion ordered
        self._items: dict[str, int] = {}

    # --- Quantity tracking --- #

    def add(self, sku: str) -> None:
        """
        Add one unit of a product to the basket.

        Raises:
            ProductNotFoundError: the SKU is not in the catalog.
        """
        if not self.product_is_in_catalog(sku):
            logger.warning(f"Rejected SKU {sku}: not in catalog")
            raise ProductNotFoundError(sku)
        self._items[sku] = self._items.get(sku, 0) + 1
        logger.debug(f"Added {sku}, quantity now {self._items[sku]}")

    def remove(self, sku: str) -> None:
        """Remove one unit of a product. Does nothing if it is not in the basket."""
        if not self.product_is_in_basket(sku):
            return
        self._items[sku] -= 1
        if self._items[sku] <= 0:
            del self._items[sku]
            logger.debug(f"Removed last unit of {sku}")
        else:
            logger.debug(f"Removed {sku}, quantity now {self._items[sku]}")

    def clear(self) -> None:
        """Empty the basket. The catalog, offers and delivery rules are kept."""
        self._items.clear()
        logger.debug("Basket cleared")

    def count_unique_items(self) -> int:
        return len(self._items)

    def count_total_items(self) -> int:
        return sum(self._items.values())

    def get_quantity(self, sku: str) -> int:
        return self._items.get(sku, 0)

    @property
    def items(self) -> dict[str, int]:
        """Copy of the SKU -> quantity map in the order products were added."""
        return dict(self._items)

    # --- Lookups --- #

    def product_has_offer(self, sku: str) -> bool:
        return sku in self.offers

    def get_product_offer(self, sku: str) -> ProductOffer | None:
        return self.offers.get(sku)

    def product_is_in_catalog(self, sku: str) -> bool:
        return sku in self.catalog

    def product_is_in_basket(self, sku: str) -> bool:
        return sku in self._items

    # --- Pricing --- #

    def get_delivery_cost(self, total: DecimalLike) -> Decimal:
        """
        Sum of the charges of every delivery rule the total is eligible for.
        Overlapping bands all contribute.
        """
        delivery_cost = ZERO
        for rule in self.delivery_charge_rules:
            if rule.is_eligible(total):
                delivery_cost = add(delivery_cost, rule.get_price(), self.config.decimal_scale)
        return delivery_cost

    def get_line_total(self, sku: str, quantity: int) -> Decimal:
        """Price of ``quantity`` units of a product, with its offer applied if eligible."""
        scale = self.config.decimal_scale
        product = self.catalog[sku]
        subtotal = multiply(product.price, quantity, scale)

        offer = self.get_product_offer(sku)
        if offer is None or not offer.is_eligible(quantity):
            return subtotal
        return offer.get_total(subtotal, scale)

    def get_subtotal(self) -> Decimal:
        """Sum of all line totals, before delivery."""
        subtotal = ZERO
        for sku, quantity in self._items.items():
            subtotal = add(subtotal, self.get_line_total(sku, quantity), self.config.decimal_scale)
        return subtotal

    def get_total(self) -> Decimal:
        """
        Basket total including offers and delivery.

        An empty basket, or one whose offers bring the subtotal to zero or
        below, totals exactly zero and is not charged delivery.
        """
        total = self.get_subtotal()
        if total <= ZERO:
            return ZERO

        delivery_cost = self.get_delivery_cost(total)
        logger.debug(f"Basket subtotal {total}, delivery {delivery_cost}")
        return add(total, delivery_cost, self.config.decimal_scale)

    def get_display_total(self) -> Decimal:
        """``get_total`` quantized with the configured display places and rounding."""
        return to_display(
            self.get_total(),
            places=self.config.display_places,
            rounding=self.config.display_rounding,
        )

    def __repr__(self) -> str:
        return f"Basket(items={self._items!r})"
