from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from models.catalog import CatalogProduct
from models.exceptions import ParseError


def test_product_returns_sku_name_price():
    product = CatalogProduct("sku", "Product Name", 32.95)

    assert product.sku == "sku"
    assert product.name == "Product Name"
    assert product.price == Decimal("32.95")
    assert isinstance(product.price, Decimal)


def test_product_is_immutable():
    product = CatalogProduct("R01", "Red Widget", "32.95")
    with pytest.raises(FrozenInstanceError):
        product.price = Decimal("1")


def test_product_rejects_negative_price():
    with pytest.raises(ValueError):
        CatalogProduct("X", "Broken", "-0.01")


def test_product_rejects_malformed_price():
    with pytest.raises(ParseError):
        CatalogProduct("X", "Broken", "free")


def test_zero_price_is_allowed():
    assert CatalogProduct("F01", "Freebie", 0).price == Decimal("0")
