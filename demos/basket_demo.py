"""
Demonstration of basket pricing with the Acme widgets catalog.

Prices four example baskets and logs the exact and display totals.
Run with: python -m demos.basket_demo
"""

from decimal import Decimal

from config.config import BasketConfig
from connectors.dummy_catalog import DummyCatalog
from models.basket import Basket
from utils.logger import get_logger

EXAMPLE_BASKETS: list[list[str]] = [
    ["B01", "G01"],
    ["R01", "R01"],
    ["R01", "G01"],
    ["B01", "B01", "R01", "R01", "R01"],
]


def run_demo(config: BasketConfig | None = None) -> list[tuple[list[str], Decimal, Decimal]]:
    """Price each example basket. Returns (skus, exact total, display total) rows."""
    config = config or BasketConfig.from_env()
    logger = get_logger("basket-demo", level=config.log_level)

    catalog = DummyCatalog()
    basket = Basket(
        catalog.get_products(),
        catalog.get_delivery_rules(),
        catalog.get_offers(),
        config=config,
    )

    results = []
    for skus in EXAMPLE_BASKETS:
        basket.clear()
        for sku in skus:
            basket.add(sku)
        total = basket.get_total()
        display_total = basket.get_display_total()
        logger.info(f"{', '.join(skus):<28} total={total} display=${display_total}")
        results.append((skus, total, display_total))
    return results


if __name__ == "__main__":
    run_demo()
