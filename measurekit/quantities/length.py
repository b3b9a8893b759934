"""Length units for distances, ranges and dimensions.

All lengths convert through the meter, the SI base unit. Imperial units use
their exact international definitions (1 in = 25.4 mm).

Besides the usual symbols, feet and inches accept the prime marks ``'`` and
``"``, so compound text such as ``5' 11"`` parses to a single Length.

Classes:
    LengthUnit: Unit identifiers for Length.
    Length: Quantity kind for length.

Example:
    >>> round(Length.parse("1 ft 2 in").to(LengthUnit.INCH), 6)
    14.0
    >>> Length(1500, LengthUnit.METER).to_string(LengthUnit.KILOMETER)
    '1.5 km'
"""

from __future__ import annotations

from enum import Enum

from ..unit.dimensions import DimensionVector
from ..unit.quantity import Quantity


class LengthUnit(Enum):
    """Unit identifiers for Length; UNDEFINED is never a valid quantity unit."""

    UNDEFINED = 0
    METER = 1
    KILOMETER = 2
    DECIMETER = 3
    CENTIMETER = 4
    MILLIMETER = 5
    MICROMETER = 6
    NANOMETER = 7
    MILE = 8
    YARD = 9
    FOOT = 10
    INCH = 11
    NAUTICAL_MILE = 12


class Length(Quantity):
    """Length quantity with the meter as base unit.

    Commonly used for:
    - Distances and ranges
    - Altitudes and elevations
    - Object dimensions in metric or imperial units

    Example:
        >>> altitude = Length(120, LengthUnit.METER)
        >>> round(altitude.to(LengthUnit.FOOT), 1)
        393.7
    """

    UNIT = LengthUnit
    BASE_UNIT = LengthUnit.METER
    DIMENSIONS = DimensionVector(length=1)
    FACTORS = {
        LengthUnit.METER: 1.0,
        LengthUnit.KILOMETER: 1e3,
        LengthUnit.DECIMETER: 1e-1,
        LengthUnit.CENTIMETER: 1e-2,
        LengthUnit.MILLIMETER: 1e-3,
        LengthUnit.MICROMETER: 1e-6,
        LengthUnit.NANOMETER: 1e-9,
        LengthUnit.MILE: 1609.344,
        LengthUnit.YARD: 0.9144,
        LengthUnit.FOOT: 0.3048,
        LengthUnit.INCH: 0.0254,
        LengthUnit.NAUTICAL_MILE: 1852.0,
    }
    ABBREVIATIONS = (
        ("en-US", LengthUnit.METER, ("m",)),
        ("en-US", LengthUnit.KILOMETER, ("km",)),
        ("en-US", LengthUnit.DECIMETER, ("dm",)),
        ("en-US", LengthUnit.CENTIMETER, ("cm",)),
        ("en-US", LengthUnit.MILLIMETER, ("mm",)),
        ("en-US", LengthUnit.MICROMETER, ("µm",)),
        ("en-US", LengthUnit.NANOMETER, ("nm",)),
        ("en-US", LengthUnit.MILE, ("mi",)),
        ("en-US", LengthUnit.YARD, ("yd",)),
        ("en-US", LengthUnit.FOOT, ("ft", "'")),
        ("en-US", LengthUnit.INCH, ("in", '"')),
        ("en-US", LengthUnit.NAUTICAL_MILE, ("NM",)),
        ("ru-RU", LengthUnit.METER, ("м",)),
        ("ru-RU", LengthUnit.KILOMETER, ("км",)),
        ("ru-RU", LengthUnit.DECIMETER, ("дм",)),
        ("ru-RU", LengthUnit.CENTIMETER, ("см",)),
        ("ru-RU", LengthUnit.MILLIMETER, ("мм",)),
        ("ru-RU", LengthUnit.MICROMETER, ("мкм",)),
        ("ru-RU", LengthUnit.NANOMETER, ("нм",)),
        ("ru-RU", LengthUnit.MILE, ("миля",)),
        ("ru-RU", LengthUnit.YARD, ("ярд",)),
        ("ru-RU", LengthUnit.FOOT, ("фут",)),
        ("ru-RU", LengthUnit.INCH, ("дюйм",)),
    )
