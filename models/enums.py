"""
Centralized Enum definitions for the basket pricing models.
"""

from enum import Enum


class AdjustmentKind(str, Enum):
    """Identifies a price adjustment type when stored outside the process"""

    FIXED = "FIXED"  # Add or subtract a fixed amount, e.g. +15 or -5
    PERCENTAGE = "PERCENTAGE"  # Add or subtract a percentage, e.g. +10% or -5%


class ConditionKind(str, Enum):
    """Identifies an offer condition type in configuration documents"""

    QUANTITY = "quantity"
