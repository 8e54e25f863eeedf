"""
Exception types raised by the basket pricing models.
"""


class BasketError(Exception):
    """Base class for basket pricing errors."""


class ProductNotFoundError(BasketError, KeyError):
    """Raised when a SKU is not part of the basket's catalog."""

    def __init__(self, sku: str):
        self.sku = sku
        super().__init__(f"Product not found in catalog: {sku}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class ParseError(BasketError, ValueError):
    """Raised when a value cannot be read as a decimal number."""
