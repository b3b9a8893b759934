"""Time span units for durations and intervals.

The second is the SI base unit. Calendar units assume fixed lengths: a day
is 24 hours, a week 7 days and a year 365 days.

Classes:
    DurationUnit: Unit identifiers for Duration.
    Duration: Quantity kind for time spans.

Example:
    >>> flight = Duration(90, DurationUnit.MINUTE)
    >>> flight.to(DurationUnit.HOUR)
    1.5
    >>> Duration.parse("1 h 30 min").to(DurationUnit.MINUTE)
    90.0
"""

from __future__ import annotations

from enum import Enum

from ..unit.dimensions import DimensionVector
from ..unit.quantity import Quantity


class DurationUnit(Enum):
    """Unit identifiers for Duration."""

    UNDEFINED = 0
    SECOND = 1
    NANOSECOND = 2
    MICROSECOND = 3
    MILLISECOND = 4
    MINUTE = 5
    HOUR = 6
    DAY = 7
    WEEK = 8
    YEAR365 = 9


class Duration(Quantity):
    """Duration quantity with the second as base unit.

    Commonly used for:
    - Flight and mission times
    - Timeouts and update intervals
    - Scheduling windows
    """

    UNIT = DurationUnit
    BASE_UNIT = DurationUnit.SECOND
    DIMENSIONS = DimensionVector(time=1)
    FACTORS = {
        DurationUnit.SECOND: 1.0,
        DurationUnit.NANOSECOND: 1e-9,
        DurationUnit.MICROSECOND: 1e-6,
        DurationUnit.MILLISECOND: 1e-3,
        DurationUnit.MINUTE: 60.0,
        DurationUnit.HOUR: 3600.0,
        DurationUnit.DAY: 86400.0,
        DurationUnit.WEEK: 604800.0,
        DurationUnit.YEAR365: 31536000.0,
    }
    ABBREVIATIONS = (
        ("en-US", DurationUnit.SECOND, ("s", "sec", "secs", "second", "seconds")),
        ("en-US", DurationUnit.NANOSECOND, ("ns",)),
        ("en-US", DurationUnit.MICROSECOND, ("µs",)),
        ("en-US", DurationUnit.MILLISECOND, ("ms",)),
        ("en-US", DurationUnit.MINUTE, ("m", "min", "minute", "minutes")),
        ("en-US", DurationUnit.HOUR, ("h", "hr", "hrs", "hour", "hours")),
        ("en-US", DurationUnit.DAY, ("d", "day", "days")),
        ("en-US", DurationUnit.WEEK, ("wk", "week", "weeks")),
        ("en-US", DurationUnit.YEAR365, ("yr", "year", "years")),
        ("ru-RU", DurationUnit.SECOND, ("с", "сек")),
        ("ru-RU", DurationUnit.NANOSECOND, ("нс",)),
        ("ru-RU", DurationUnit.MICROSECOND, ("мкс",)),
        ("ru-RU", DurationUnit.MILLISECOND, ("мс",)),
        ("ru-RU", DurationUnit.MINUTE, ("мин",)),
        ("ru-RU", DurationUnit.HOUR, ("ч",)),
        ("ru-RU", DurationUnit.DAY, ("д",)),
        ("ru-RU", DurationUnit.WEEK, ("нед",)),
        ("ru-RU", DurationUnit.YEAR365, ("год",)),
        ("nb-NO", DurationUnit.SECOND, ("s", "sek")),
        ("nb-NO", DurationUnit.MINUTE, ("min",)),
        ("nb-NO", DurationUnit.HOUR, ("t", "time", "timer")),
        ("nb-NO", DurationUnit.DAY, ("d", "døgn")),
        ("nb-NO", DurationUnit.WEEK, ("uke", "uker")),
        ("nb-NO", DurationUnit.YEAR365, ("år",)),
    )
