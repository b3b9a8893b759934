"""Physical quantities with unit-safe conversion, parsing and formatting.

This package pairs numeric magnitudes with units of a quantity kind, converts
them between units of the same kind, and reads and writes them as localized
text through a culture-aware abbreviation registry.

Architecture:
    The package is organized into specialized modules:

    - unit: DimensionVector, ConversionTable, QuantityKind and the generic
      Quantity base class
    - text: abbreviation registry, quantity/unit parsers and formatting
    - quantities: built-in kinds (Length, Mass, Duration, ...)
    - config: numeric type aliases, cultures and the default culture
    - errors: error taxonomy shared by every module
    - result: ParseResult returned by the try-variants of parsing
    - display: rich tables of kinds and units

Key Features:
    - Type Safety: quantities of different kinds never combine
    - Base-Unit Conversion: every unit converts through one anchor unit
    - Localized Text: parsing and formatting per culture with en-US fallback
    - Ambiguity Detection: abbreviations matching several units are rejected
    - Extensible: new kinds are declared as small Quantity subclasses and new
      abbreviations can be registered at runtime

Example:
    >>> from measurekit import Length, LengthUnit, convert
    >>>
    >>> # Conversion within one kind
    >>> height = Length(1.8, LengthUnit.METER)
    >>> round(height.to(LengthUnit.FOOT), 2)
    5.91
    >>> convert(1, LengthUnit.METER, LengthUnit.CENTIMETER)
    100.0
    >>>
    >>> # Compound parsing keeps the unit of the first segment
    >>> Length.parse("1 m 100 cm")
    Length(2.0, LengthUnit.METER)
    >>>
    >>> # Localized formatting
    >>> Length(1234.5, LengthUnit.METER).to_string(culture="de-DE")
    '1.234,5 m'
"""

import logging

# The conversion core must be imported before the text package.
from .unit import (
    DIMENSIONLESS,
    ComparisonType,
    ConversionRule,
    ConversionTable,
    DimensionVector,
    Quantity,
    QuantityKind,
    convert,
    equals,
    kind_by_name,
    kind_for_unit_type,
    quantity_type_for,
    register_kind,
    registered_kinds,
)
from .config import (
    BASE_TYPE,
    CULTURES,
    FALLBACK_CULTURE,
    Culture,
    get_culture,
    get_default_culture,
    set_default_culture,
)
from .errors import (
    AmbiguousUnitError,
    ArgumentNullError,
    IncompatibleQuantityError,
    InvalidArgumentError,
    InvalidUnitError,
    MeasureKitError,
    NonFiniteValueError,
    QuantityFormatError,
    UnrecognizedUnitError,
    UnsupportedUnitError,
)
from .result import ParseResult
from .text import QuantityParser, UnitAbbreviationsCache, UnitParser, map_unit_to_abbreviation
from .quantities import *  # noqa: F403
from .quantities import __all__ as _quantities_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core
    "DimensionVector",
    "DIMENSIONLESS",
    "ConversionRule",
    "ConversionTable",
    "QuantityKind",
    "Quantity",
    "ComparisonType",
    "convert",
    "equals",
    "register_kind",
    "kind_for_unit_type",
    "kind_by_name",
    "quantity_type_for",
    "registered_kinds",
    # Configuration
    "BASE_TYPE",
    "CULTURES",
    "FALLBACK_CULTURE",
    "Culture",
    "get_culture",
    "get_default_culture",
    "set_default_culture",
    # Text
    "UnitAbbreviationsCache",
    "QuantityParser",
    "UnitParser",
    "ParseResult",
    "map_unit_to_abbreviation",
    # Errors
    "MeasureKitError",
    "InvalidUnitError",
    "NonFiniteValueError",
    "UnsupportedUnitError",
    "IncompatibleQuantityError",
    "InvalidArgumentError",
    "ArgumentNullError",
    "QuantityFormatError",
    "UnrecognizedUnitError",
    "AmbiguousUnitError",
    *_quantities_all,
]
