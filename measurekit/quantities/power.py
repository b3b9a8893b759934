"""Power units.

Base unit is the watt. Horsepower is the mechanical (imperial) horsepower.
"""

from __future__ import annotations

from enum import Enum

from ..unit.dimensions import DimensionVector
from ..unit.quantity import Quantity


class PowerUnit(Enum):
    UNDEFINED = 0
    WATT = 1
    MILLIWATT = 2
    KILOWATT = 3
    MEGAWATT = 4
    GIGAWATT = 5
    MECHANICAL_HORSEPOWER = 6
    BRITISH_THERMAL_UNIT_PER_HOUR = 7


class Power(Quantity):
    """Power quantity with the watt as base unit.

    Example:
        >>> Power(1.5, PowerUnit.KILOWATT).to_string(PowerUnit.WATT)
        '1,500 W'
    """

    UNIT = PowerUnit
    BASE_UNIT = PowerUnit.WATT
    DIMENSIONS = DimensionVector(length=2, mass=1, time=-3)
    FACTORS = {
        PowerUnit.WATT: 1.0,
        PowerUnit.MILLIWATT: 1e-3,
        PowerUnit.KILOWATT: 1e3,
        PowerUnit.MEGAWATT: 1e6,
        PowerUnit.GIGAWATT: 1e9,
        PowerUnit.MECHANICAL_HORSEPOWER: 745.69987158227022,
        PowerUnit.BRITISH_THERMAL_UNIT_PER_HOUR: 0.293071,
    }
    ABBREVIATIONS = (
        ("en-US", PowerUnit.WATT, ("W",)),
        ("en-US", PowerUnit.MILLIWATT, ("mW",)),
        ("en-US", PowerUnit.KILOWATT, ("kW",)),
        ("en-US", PowerUnit.MEGAWATT, ("MW",)),
        ("en-US", PowerUnit.GIGAWATT, ("GW",)),
        ("en-US", PowerUnit.MECHANICAL_HORSEPOWER, ("hp(I)", "hp")),
        ("en-US", PowerUnit.BRITISH_THERMAL_UNIT_PER_HOUR, ("Btu/hr", "Btu/h")),
        ("ru-RU", PowerUnit.WATT, ("Вт",)),
        ("ru-RU", PowerUnit.MILLIWATT, ("мВт",)),
        ("ru-RU", PowerUnit.KILOWATT, ("кВт",)),
        ("ru-RU", PowerUnit.MEGAWATT, ("МВт",)),
        ("ru-RU", PowerUnit.GIGAWATT, ("ГВт",)),
        ("ru-RU", PowerUnit.MECHANICAL_HORSEPOWER, ("л.с.",)),
    )
