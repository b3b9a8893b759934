"""Conversion core: dimensions, conversion tables, kinds and quantities.

This package holds everything needed to represent a physical quantity and
convert it between units of the same kind, independent of any text handling.

Architecture:
    - dimensions: DimensionVector exponent tuples
    - conversion: ConversionRule and per-kind ConversionTable
    - unit_base: QuantityKind descriptors and the kind registry
    - comparison: tolerance-based equality helpers
    - quantity: the generic Quantity base class

Example:
    >>> from measurekit.unit import convert
    >>> from measurekit.quantities import LengthUnit
    >>> convert(1, LengthUnit.METER, LengthUnit.CENTIMETER)
    100.0
"""

from .comparison import ComparisonType, equals, equals_absolute, equals_relative
from .conversion import ConversionRule, ConversionTable
from .dimensions import DIMENSIONLESS, DimensionVector
from .quantity import Quantity
from .unit_base import (
    QuantityKind,
    convert,
    kind_by_name,
    kind_for_unit_type,
    quantity_type_for,
    register_kind,
    registered_kinds,
    valid_units,
)

__all__ = [
    # Dimensions
    "DimensionVector",
    "DIMENSIONLESS",
    # Conversion
    "ConversionRule",
    "ConversionTable",
    "convert",
    # Kinds
    "QuantityKind",
    "register_kind",
    "kind_for_unit_type",
    "kind_by_name",
    "quantity_type_for",
    "registered_kinds",
    "valid_units",
    # Quantities
    "Quantity",
    "ComparisonType",
    "equals",
    "equals_absolute",
    "equals_relative",
]
