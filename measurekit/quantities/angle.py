"""Angular units for headings and rotations.

The degree is the base unit; radians convert through it with the factor
180/π. A full revolution is 360 degrees.

Classes:
    AngleUnit: Unit identifiers for Angle.
    Angle: Quantity kind for plane angles.
"""

from __future__ import annotations

import math
from enum import Enum

from ..unit.dimensions import DIMENSIONLESS
from ..unit.quantity import Quantity


class AngleUnit(Enum):
    """Unit identifiers for Angle."""

    UNDEFINED = 0
    DEGREE = 1
    RADIAN = 2
    MILLIRADIAN = 3
    GRADIAN = 4
    ARCMINUTE = 5
    ARCSECOND = 6
    REVOLUTION = 7


class Angle(Quantity):
    """Plane angle with the degree as base unit.

    Angles are dimensionless; their DimensionVector has every exponent zero.

    Example:
        >>> heading = Angle(90, AngleUnit.DEGREE)
        >>> math.isclose(heading.to(AngleUnit.RADIAN), math.pi / 2)
        True
    """

    UNIT = AngleUnit
    BASE_UNIT = AngleUnit.DEGREE
    DIMENSIONS = DIMENSIONLESS
    FACTORS = {
        AngleUnit.DEGREE: 1.0,
        AngleUnit.RADIAN: 180.0 / math.pi,
        AngleUnit.MILLIRADIAN: 0.18 / math.pi,
        AngleUnit.GRADIAN: 0.9,
        AngleUnit.ARCMINUTE: 1.0 / 60.0,
        AngleUnit.ARCSECOND: 1.0 / 3600.0,
        AngleUnit.REVOLUTION: 360.0,
    }
    ABBREVIATIONS = (
        ("en-US", AngleUnit.DEGREE, ("°", "deg")),
        ("en-US", AngleUnit.RADIAN, ("rad",)),
        ("en-US", AngleUnit.MILLIRADIAN, ("mrad",)),
        ("en-US", AngleUnit.GRADIAN, ("g", "gon")),
        ("en-US", AngleUnit.ARCMINUTE, ("'", "arcmin", "amin", "min")),
        ("en-US", AngleUnit.ARCSECOND, ('"', "arcsec", "asec", "sec")),
        ("en-US", AngleUnit.REVOLUTION, ("r", "rev")),
        ("ru-RU", AngleUnit.DEGREE, ("°",)),
        ("ru-RU", AngleUnit.RADIAN, ("рад",)),
        ("ru-RU", AngleUnit.MILLIRADIAN, ("мрад",)),
        ("ru-RU", AngleUnit.GRADIAN, ("g",)),
        ("ru-RU", AngleUnit.ARCMINUTE, ("'",)),
        ("ru-RU", AngleUnit.ARCSECOND, ('"',)),
        ("ru-RU", AngleUnit.REVOLUTION, ("r",)),
    )
