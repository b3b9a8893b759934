"""Text handling: abbreviation registry, parsing and formatting.

Modules:
    - abbreviations: culture-partitioned UnitAbbreviationsCache
    - parser: UnitParser and QuantityParser
    - formatter: culture-aware number rendering
"""

from .abbreviations import (
    UnitAbbreviationsCache,
    UnitValueAbbreviationLookup,
    default_abbreviation,
    map_unit_to_abbreviation,
)
from .formatter import format_quantity, format_value, format_with
from .parser import QuantityParser, UnitParser

__all__ = [
    "UnitAbbreviationsCache",
    "UnitValueAbbreviationLookup",
    "default_abbreviation",
    "map_unit_to_abbreviation",
    "QuantityParser",
    "UnitParser",
    "format_quantity",
    "format_value",
    "format_with",
]
