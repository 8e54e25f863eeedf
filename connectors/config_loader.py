"""
Module: connectors.config_loader

Builds catalog products, delivery rules and offers from a configuration
document (a mapping or a JSON file) and hands them to a Basket.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from config.config import BasketConfig
from models.adjustments import FixedAdjustment, PriceAdjustment
from models.basket import Basket
from models.catalog import CatalogProduct
from models.conditions import QuantityCondition
from models.delivery import DeliveryChargeRule
from models.enums import AdjustmentKind
from models.offers import ProductOffer
from models.schemas import BasketSetupModel, PriceAdjustmentModel, ProductOfferModel

logger = logging.getLogger(__name__)

BasketSetup = tuple[list[CatalogProduct], list[DeliveryChargeRule], dict[str, ProductOffer]]


def _build_adjustment(model: PriceAdjustmentModel) -> PriceAdjustment:
    if model.kind is AdjustmentKind.FIXED:
        return FixedAdjustment(model.value)
    raise ValueError(f"Unsupported adjustment kind: {model.kind.value}")


def _build_offer(model: ProductOfferModel) -> ProductOffer:
    return ProductOffer(
        title=model.title,
        description=model.description,
        conditions=[QuantityCondition(min=c.min, max=c.max) for c in model.conditions],
        adjustments=[_build_adjustment(a) for a in model.adjustments],
    )


def parse_basket_setup(data: Mapping[str, Any]) -> BasketSetup:
    """
    Validate a configuration mapping and build the basket inputs.

    Raises:
        pydantic.ValidationError: the document is malformed.
    """
    setup = BasketSetupModel.model_validate(data)

    products = [CatalogProduct(sku=p.sku, name=p.name, price=p.price) for p in setup.products]
    rules = [
        DeliveryChargeRule(min_price=r.min_price, max_price=r.max_price, price=r.price)
        for r in setup.delivery_rules
    ]
    offers = {sku: _build_offer(offer) for sku, offer in setup.offers.items()}

    unknown = sorted(set(offers) - {p.sku for p in products})
    if unknown:
        logger.warning(f"Offers configured for SKUs missing from the catalog: {', '.join(unknown)}")

    logger.info(
        f"Loaded {len(products)} products, {len(rules)} delivery rules and {len(offers)} offers"
    )
    return products, rules, offers


def load_basket_setup(path: str | Path) -> BasketSetup:
    """Read a JSON configuration file and build the basket inputs."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    logger.debug(f"Read basket configuration from {path}")
    return parse_basket_setup(data)


def load_basket(source: str | Path | Mapping[str, Any], config: BasketConfig | None = None) -> Basket:
    """Create an empty Basket from a configuration mapping or JSON file path."""
    if isinstance(source, Mapping):
        products, rules, offers = parse_basket_setup(source)
    else:
        products, rules, offers = load_basket_setup(source)
    return Basket(products, rules, offers, config=config)
