"""Mass units.

The kilogram is the base unit. The pound and ounce use the international
avoirdupois definitions.
"""

from __future__ import annotations

from enum import Enum

from ..unit.dimensions import DimensionVector
from ..unit.quantity import Quantity


class MassUnit(Enum):
    UNDEFINED = 0
    KILOGRAM = 1
    GRAM = 2
    MILLIGRAM = 3
    MICROGRAM = 4
    TONNE = 5
    POUND = 6
    OUNCE = 7
    STONE = 8


class Mass(Quantity):
    """Mass quantity with the kilogram as base unit.

    Example:
        >>> payload = Mass(2.5, MassUnit.KILOGRAM)
        >>> payload.to_string(MassUnit.POUND)
        '5.51 lb'
    """

    UNIT = MassUnit
    BASE_UNIT = MassUnit.KILOGRAM
    DIMENSIONS = DimensionVector(mass=1)
    FACTORS = {
        MassUnit.KILOGRAM: 1.0,
        MassUnit.GRAM: 1e-3,
        MassUnit.MILLIGRAM: 1e-6,
        MassUnit.MICROGRAM: 1e-9,
        MassUnit.TONNE: 1e3,
        MassUnit.POUND: 0.45359237,
        MassUnit.OUNCE: 0.028349523125,
        MassUnit.STONE: 6.35029318,
    }
    ABBREVIATIONS = (
        ("en-US", MassUnit.KILOGRAM, ("kg",)),
        ("en-US", MassUnit.GRAM, ("g",)),
        ("en-US", MassUnit.MILLIGRAM, ("mg",)),
        ("en-US", MassUnit.MICROGRAM, ("µg",)),
        ("en-US", MassUnit.TONNE, ("t",)),
        ("en-US", MassUnit.POUND, ("lb", "lbs", "lbm")),
        ("en-US", MassUnit.OUNCE, ("oz",)),
        ("en-US", MassUnit.STONE, ("st",)),
        ("ru-RU", MassUnit.KILOGRAM, ("кг",)),
        ("ru-RU", MassUnit.GRAM, ("г",)),
        ("ru-RU", MassUnit.MILLIGRAM, ("мг",)),
        ("ru-RU", MassUnit.MICROGRAM, ("мкг",)),
        ("ru-RU", MassUnit.TONNE, ("т",)),
        ("ru-RU", MassUnit.POUND, ("фунт",)),
        ("ru-RU", MassUnit.OUNCE, ("унц",)),
    )
