"""
Conditions that decide whether an offer applies to a basket line.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


class Condition(ABC):
    """
    Predicate over the quantity of a product in the basket.
    Subclass and implement ``test`` to add new kinds of condition.
    """

    @abstractmethod
    def test(self, quantity: int) -> bool:
        """Return True when the condition passes for this line quantity."""

    @staticmethod
    def test_all(conditions: Iterable["Condition"], quantity: int) -> bool:
        return passes_all(conditions, quantity)


@dataclass(frozen=True)
class QuantityCondition(Condition):
    """
    Passes when ``min <= quantity < max``.
    A bound set to None is not checked. Bounds are whole numbers because
    they are compared against a count of units, not a price.
    """

    min: int | None = None
    max: int | None = None

    def test(self, quantity: int) -> bool:
        above_min = self.min is None or quantity >= self.min
        below_max = self.max is None or quantity < self.max
        return above_min and below_max


def passes_all(conditions: Iterable[Condition], quantity: int) -> bool:
    """True when every condition passes. Stops at the first failure; empty passes."""
    return all(condition.test(quantity) for condition in conditions)
