"""Energy units, including the watt-hour family used for battery capacity.

The joule is the base unit. The calorie is the thermochemical calorie
(4.184 J) and the BTU the international table BTU.

Example:
    >>> battery = Energy(99, EnergyUnit.WATT_HOUR)
    >>> battery.to(EnergyUnit.KILOJOULE)
    356.4
"""

from __future__ import annotations

from enum import Enum

from ..unit.dimensions import DimensionVector
from ..unit.quantity import Quantity


class EnergyUnit(Enum):
    """Unit identifiers for Energy."""

    UNDEFINED = 0
    JOULE = 1
    KILOJOULE = 2
    MEGAJOULE = 3
    WATT_HOUR = 4
    KILOWATT_HOUR = 5
    MEGAWATT_HOUR = 6
    CALORIE = 7
    KILOCALORIE = 8
    BRITISH_THERMAL_UNIT = 9
    ELECTRON_VOLT = 10


class Energy(Quantity):
    """Energy quantity with the joule as base unit."""

    UNIT = EnergyUnit
    BASE_UNIT = EnergyUnit.JOULE
    DIMENSIONS = DimensionVector(length=2, mass=1, time=-2)
    FACTORS = {
        EnergyUnit.JOULE: 1.0,
        EnergyUnit.KILOJOULE: 1e3,
        EnergyUnit.MEGAJOULE: 1e6,
        EnergyUnit.WATT_HOUR: 3600.0,
        EnergyUnit.KILOWATT_HOUR: 3.6e6,
        EnergyUnit.MEGAWATT_HOUR: 3.6e9,
        EnergyUnit.CALORIE: 4.184,
        EnergyUnit.KILOCALORIE: 4184.0,
        EnergyUnit.BRITISH_THERMAL_UNIT: 1055.05585262,
        EnergyUnit.ELECTRON_VOLT: 1.602176634e-19,
    }
    ABBREVIATIONS = (
        ("en-US", EnergyUnit.JOULE, ("J",)),
        ("en-US", EnergyUnit.KILOJOULE, ("kJ",)),
        ("en-US", EnergyUnit.MEGAJOULE, ("MJ",)),
        ("en-US", EnergyUnit.WATT_HOUR, ("Wh",)),
        ("en-US", EnergyUnit.KILOWATT_HOUR, ("kWh",)),
        ("en-US", EnergyUnit.MEGAWATT_HOUR, ("MWh",)),
        ("en-US", EnergyUnit.CALORIE, ("cal",)),
        ("en-US", EnergyUnit.KILOCALORIE, ("kcal",)),
        ("en-US", EnergyUnit.BRITISH_THERMAL_UNIT, ("BTU",)),
        ("en-US", EnergyUnit.ELECTRON_VOLT, ("eV",)),
        ("ru-RU", EnergyUnit.JOULE, ("Дж",)),
        ("ru-RU", EnergyUnit.KILOJOULE, ("кДж",)),
        ("ru-RU", EnergyUnit.MEGAJOULE, ("МДж",)),
        ("ru-RU", EnergyUnit.WATT_HOUR, ("Вт·ч",)),
        ("ru-RU", EnergyUnit.KILOWATT_HOUR, ("кВт·ч",)),
        ("ru-RU", EnergyUnit.MEGAWATT_HOUR, ("МВт·ч",)),
        ("ru-RU", EnergyUnit.CALORIE, ("кал",)),
        ("ru-RU", EnergyUnit.KILOCALORIE, ("ккал",)),
        ("ru-RU", EnergyUnit.ELECTRON_VOLT, ("эВ",)),
    )
