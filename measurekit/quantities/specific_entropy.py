"""Specific entropy units: heat capacity per unit mass and temperature.

The base unit is the joule per kilogram kelvin. A temperature difference of
one degree Celsius equals one kelvin, so each ``..._DEGREE_CELSIUS`` unit has
the same factor as its kelvin counterpart.
"""

from __future__ import annotations

from enum import Enum

from ..unit.dimensions import DimensionVector
from ..unit.quantity import Quantity


class SpecificEntropyUnit(Enum):
    UNDEFINED = 0
    CALORIE_PER_GRAM_KELVIN = 1
    JOULE_PER_KILOGRAM_DEGREE_CELSIUS = 2
    JOULE_PER_KILOGRAM_KELVIN = 3
    KILOCALORIE_PER_GRAM_KELVIN = 4
    KILOJOULE_PER_KILOGRAM_DEGREE_CELSIUS = 5
    KILOJOULE_PER_KILOGRAM_KELVIN = 6
    MEGAJOULE_PER_KILOGRAM_DEGREE_CELSIUS = 7
    MEGAJOULE_PER_KILOGRAM_KELVIN = 8


class SpecificEntropy(Quantity):
    """Specific entropy with J/(kg·K) as base unit.

    Example:
        >>> water = SpecificEntropy(1, SpecificEntropyUnit.CALORIE_PER_GRAM_KELVIN)
        >>> water.to(SpecificEntropyUnit.KILOJOULE_PER_KILOGRAM_KELVIN)
        4.184
    """

    UNIT = SpecificEntropyUnit
    BASE_UNIT = SpecificEntropyUnit.JOULE_PER_KILOGRAM_KELVIN
    DIMENSIONS = DimensionVector(length=2, time=-2, temperature=-1)
    FACTORS = {
        SpecificEntropyUnit.CALORIE_PER_GRAM_KELVIN: 4.184e3,
        SpecificEntropyUnit.JOULE_PER_KILOGRAM_DEGREE_CELSIUS: 1.0,
        SpecificEntropyUnit.JOULE_PER_KILOGRAM_KELVIN: 1.0,
        SpecificEntropyUnit.KILOCALORIE_PER_GRAM_KELVIN: 4.184e6,
        SpecificEntropyUnit.KILOJOULE_PER_KILOGRAM_DEGREE_CELSIUS: 1e3,
        SpecificEntropyUnit.KILOJOULE_PER_KILOGRAM_KELVIN: 1e3,
        SpecificEntropyUnit.MEGAJOULE_PER_KILOGRAM_DEGREE_CELSIUS: 1e6,
        SpecificEntropyUnit.MEGAJOULE_PER_KILOGRAM_KELVIN: 1e6,
    }
    ABBREVIATIONS = (
        ("en-US", SpecificEntropyUnit.CALORIE_PER_GRAM_KELVIN, ("cal/g.K",)),
        ("en-US", SpecificEntropyUnit.JOULE_PER_KILOGRAM_DEGREE_CELSIUS, ("J/kg.C",)),
        ("en-US", SpecificEntropyUnit.JOULE_PER_KILOGRAM_KELVIN, ("J/kg.K",)),
        ("en-US", SpecificEntropyUnit.KILOCALORIE_PER_GRAM_KELVIN, ("kcal/g.K",)),
        ("en-US", SpecificEntropyUnit.KILOJOULE_PER_KILOGRAM_DEGREE_CELSIUS, ("kJ/kg.C",)),
        ("en-US", SpecificEntropyUnit.KILOJOULE_PER_KILOGRAM_KELVIN, ("kJ/kg.K",)),
        ("en-US", SpecificEntropyUnit.MEGAJOULE_PER_KILOGRAM_DEGREE_CELSIUS, ("MJ/kg.C",)),
        ("en-US", SpecificEntropyUnit.MEGAJOULE_PER_KILOGRAM_KELVIN, ("MJ/kg.K",)),
    )
