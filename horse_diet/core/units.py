"""Weight unit conversion utilities.

Requirement coefficients are per pound of body weight, so every weight
is converted to pounds before it reaches the calculations.
"""

from enum import Enum


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


KG_TO_LBS = 2.20462


def to_lbs(value: float, unit: WeightUnit) -> float:
    """Express a body weight in pounds, unrounded."""
    if unit == WeightUnit.KG:
        return value * KG_TO_LBS
    return value
