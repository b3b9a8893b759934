"""Velocity units.

The meter per second is the base unit. Includes the slow and fast scales
used in flight planning (m/h, km/s) next to the common road and marine
units.

Example:
    >>> cruise = Speed(54, SpeedUnit.KILOMETER_PER_HOUR)
    >>> round(cruise.to(SpeedUnit.METER_PER_SECOND), 9)
    15.0
"""

from __future__ import annotations

from enum import Enum

from ..unit.dimensions import DimensionVector
from ..unit.quantity import Quantity


class SpeedUnit(Enum):
    UNDEFINED = 0
    METER_PER_SECOND = 1
    METER_PER_HOUR = 2
    KILOMETER_PER_SECOND = 3
    KILOMETER_PER_HOUR = 4
    MILE_PER_HOUR = 5
    FOOT_PER_SECOND = 6
    KNOT = 7


class Speed(Quantity):
    """Speed quantity with meters per second as base unit."""

    UNIT = SpeedUnit
    BASE_UNIT = SpeedUnit.METER_PER_SECOND
    DIMENSIONS = DimensionVector(length=1, time=-1)
    FACTORS = {
        SpeedUnit.METER_PER_SECOND: 1.0,
        SpeedUnit.METER_PER_HOUR: 1.0 / 3600.0,
        SpeedUnit.KILOMETER_PER_SECOND: 1e3,
        SpeedUnit.KILOMETER_PER_HOUR: 1.0 / 3.6,
        SpeedUnit.MILE_PER_HOUR: 0.44704,
        SpeedUnit.FOOT_PER_SECOND: 0.3048,
        SpeedUnit.KNOT: 1852.0 / 3600.0,
    }
    ABBREVIATIONS = (
        ("en-US", SpeedUnit.METER_PER_SECOND, ("m/s",)),
        ("en-US", SpeedUnit.METER_PER_HOUR, ("m/h",)),
        ("en-US", SpeedUnit.KILOMETER_PER_SECOND, ("km/s",)),
        ("en-US", SpeedUnit.KILOMETER_PER_HOUR, ("km/h", "kph")),
        ("en-US", SpeedUnit.MILE_PER_HOUR, ("mph",)),
        ("en-US", SpeedUnit.FOOT_PER_SECOND, ("ft/s",)),
        ("en-US", SpeedUnit.KNOT, ("kn", "kt", "knot", "knots")),
        ("ru-RU", SpeedUnit.METER_PER_SECOND, ("м/с",)),
        ("ru-RU", SpeedUnit.METER_PER_HOUR, ("м/ч",)),
        ("ru-RU", SpeedUnit.KILOMETER_PER_SECOND, ("км/с",)),
        ("ru-RU", SpeedUnit.KILOMETER_PER_HOUR, ("км/ч",)),
        ("ru-RU", SpeedUnit.MILE_PER_HOUR, ("миль/ч",)),
        ("ru-RU", SpeedUnit.FOOT_PER_SECOND, ("фут/с",)),
        ("ru-RU", SpeedUnit.KNOT, ("уз.",)),
    )
