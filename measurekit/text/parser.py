"""Parsing of unit abbreviations and quantity strings.

Quantity text is one or more ``<number>[whitespace]<abbreviation>`` segments
separated by whitespace, e.g. ``"5.5 m"`` or ``"1 ft 2 in"``. Parsing runs in
stages:

1. Split the trimmed text into segments. Numbers follow the culture's decimal
   and group separators and may carry an exponent. The abbreviation is the
   longest known abbreviation of the unit type (requested culture plus the
   fallback culture) that is followed by whitespace, the end of the text, or
   the next number.
2. Resolve each abbreviation through the abbreviation registry. No match is
   an UnrecognizedUnitError, several distinct matches an AmbiguousUnitError.
3. Build one quantity per segment and add them up; the result keeps the
   unit of the first segment.

Try-variants never raise for bad input. They return a ParseResult whose value
is the documented default: zero in the base unit for quantities, the
UNDEFINED member for units.

Example:
    >>> QuantityParser.default().parse("1 m 100 cm", Length)
    Length(2.0, LengthUnit.METER)
"""

from __future__ import annotations

import logging
import operator
import re
import threading
from functools import lru_cache, reduce
from typing import TYPE_CHECKING, ClassVar

from ..config import Culture, get_culture
from ..errors import (
    AmbiguousUnitError,
    ArgumentNullError,
    MeasureKitError,
    QuantityFormatError,
    UnrecognizedUnitError,
)
from ..result import ParseResult
from ..unit.unit_base import UNDEFINED_VALUE
from .abbreviations import UnitAbbreviationsCache

if TYPE_CHECKING:
    from enum import Enum

    from ..unit.quantity import Quantity

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s*")
_TOKEN = re.compile(r"\S+")

FORMAT_HINT = (
    'Expected string to have at least one pair of quantity and unit in the format '
    '"<quantity> <unit>". Example: "5.5 m". The spacing is optional.'
)


@lru_cache(maxsize=32)
def _number_pattern(decimal_separator: str, group_separator: str) -> re.Pattern:
    d = re.escape(decimal_separator)
    g = re.escape(group_separator)
    return re.compile(
        rf"[-+]?(?:(?:\d{{1,3}}(?:{g}\d{{3}})+|\d+)(?:{d}\d+)?|{d}\d+)(?:[eE][-+]?\d+)?"
    )


@lru_cache(maxsize=256)
def _unit_pattern(abbreviations: tuple[str, ...], decimal_separator: str) -> re.Pattern | None:
    if not abbreviations:
        return None
    alternatives = "|".join(re.escape(a) for a in sorted(abbreviations, key=len, reverse=True))
    d = re.escape(decimal_separator)
    return re.compile(rf"(?P<unit>{alternatives})(?=\s|$|[-+]?(?:\d|{d}\d))")


def _undefined(unit_type: type[Enum]) -> Enum | None:
    try:
        return unit_type(UNDEFINED_VALUE)
    except ValueError:
        return None


class UnitParser:
    """Resolves unit abbreviations into unit enum members."""

    _default: ClassVar[UnitParser | None] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, cache: UnitAbbreviationsCache | None = None):
        """Create a parser.

        Args:
            cache: Abbreviation registry to consult; the process-wide cache
                when None.
        """
        self._cache = cache

    @classmethod
    def default(cls) -> UnitParser:
        parser = cls._default
        if parser is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls()
                parser = cls._default
        return parser

    @property
    def cache(self) -> UnitAbbreviationsCache:
        return self._cache if self._cache is not None else UnitAbbreviationsCache.default()

    def candidates(self, abbreviation: str, unit_type: type[Enum], culture: str | Culture | None = None) -> tuple[Enum, ...]:
        """Return the distinct units an abbreviation denotes, in registration order.

        Repeated registrations of one unit count once and UNDEFINED is skipped.
        """
        units: dict[Enum, None] = {}
        for value in self.cache.get_units_for_abbreviation(unit_type, abbreviation, culture):
            if value != UNDEFINED_VALUE:
                units.setdefault(unit_type(value))
        return tuple(units)

    def parse(self, abbreviation: str, unit_type: type[Enum], culture: str | Culture | None = None) -> Enum:
        """Resolve an abbreviation such as "km" into a unit.

        Args:
            abbreviation: Abbreviation text; surrounding whitespace is ignored.
            unit_type: Unit enum class to resolve into.
            culture: Culture to look up first; None for the process default.

        Returns:
            Enum: The single unit the abbreviation denotes.

        Raises:
            ArgumentNullError: If abbreviation is None.
            QuantityFormatError: If abbreviation is blank.
            UnrecognizedUnitError: If no unit matches in either culture.
            AmbiguousUnitError: If several distinct units match.
        """
        if abbreviation is None:
            raise ArgumentNullError("abbreviation")
        resolved = get_culture(culture)
        text = abbreviation.strip()
        if not text:
            msg = "Expected a unit abbreviation, got blank text"
            raise QuantityFormatError(msg, abbreviation, resolved.name)

        units = self.candidates(text, unit_type, resolved)
        if not units:
            raise UnrecognizedUnitError(text, unit_type, resolved.name)
        if len(units) > 1:
            raise AmbiguousUnitError(text, units)
        return units[0]

    def try_parse(
        self, abbreviation: str | None, unit_type: type[Enum], culture: str | Culture | None = None
    ) -> ParseResult[Enum]:
        """Like parse, but returns a ParseResult holding UNDEFINED on failure."""
        default = _undefined(unit_type)
        if not isinstance(abbreviation, str) or not abbreviation.strip():
            return ParseResult.fail(default)
        try:
            return ParseResult.ok(self.parse(abbreviation, unit_type, culture))
        except MeasureKitError as e:
            logger.debug("Could not parse unit %r: %s", abbreviation, e)
            return ParseResult.fail(default, e)


class QuantityParser:
    """Parses quantity text into Quantity instances."""

    _default: ClassVar[QuantityParser | None] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, cache: UnitAbbreviationsCache | None = None):
        self._cache = cache
        self._unit_parser = UnitParser(cache)

    @classmethod
    def default(cls) -> QuantityParser:
        parser = cls._default
        if parser is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls()
                parser = cls._default
        return parser

    @property
    def cache(self) -> UnitAbbreviationsCache:
        return self._cache if self._cache is not None else UnitAbbreviationsCache.default()

    def tokenize(self, text: str, unit_type: type[Enum], culture: Culture) -> list[tuple[float, str]]:
        """Split text into (number, abbreviation) segments.

        Args:
            text: Quantity text.
            unit_type: Unit enum class whose abbreviations are recognized.
            culture: Culture providing separators and abbreviations.

        Returns:
            list[tuple[float, str]]: One entry per segment, in input order.

        Raises:
            QuantityFormatError: If text is blank, a number is malformed, or a
                number has no unit.
            UnrecognizedUnitError: If the text after a number is not a known
                abbreviation.
        """
        stripped = text.strip()
        if not stripped:
            raise QuantityFormatError(FORMAT_HINT, text, culture.name)

        numbers = _number_pattern(culture.decimal_separator, culture.group_separator)
        known = dict.fromkeys(
            self.cache.get_all_abbreviations_for_type(unit_type, culture)
            + self.cache.get_all_abbreviations_for_type(unit_type, self.cache.fallback_culture)
        )
        units = _unit_pattern(tuple(known), culture.decimal_separator)

        segments: list[tuple[float, str]] = []
        pos = 0
        while pos < len(stripped):
            number = numbers.match(stripped, pos)
            if number is None:
                msg = f"Expected a number at position {pos} of {text!r}. {FORMAT_HINT}"
                raise QuantityFormatError(msg, text, culture.name)
            value = self._to_float(number.group(), culture)
            pos = _WHITESPACE.match(stripped, number.end()).end()

            unit = units.match(stripped, pos) if units is not None else None
            if unit is None:
                token = _TOKEN.match(stripped, pos)
                if token is None:
                    msg = f"Missing unit after {number.group()!r} in {text!r}. {FORMAT_HINT}"
                    raise QuantityFormatError(msg, text, culture.name)
                if token.group()[0].isdigit() or token.group()[0] in (
                    culture.decimal_separator,
                    culture.group_separator,
                ):
                    msg = f"Malformed number near {token.group()!r} in {text!r}"
                    raise QuantityFormatError(msg, text, culture.name)
                raise UnrecognizedUnitError(token.group(), unit_type, culture.name)

            segments.append((value, unit.group("unit")))
            pos = _WHITESPACE.match(stripped, unit.end()).end()
        return segments

    @staticmethod
    def _to_float(number: str, culture: Culture) -> float:
        invariant = number.replace(culture.group_separator, "").replace(culture.decimal_separator, ".")
        return float(invariant)

    def parse(self, text: str, quantity_type: type[Quantity], culture: str | Culture | None = None) -> Quantity:
        """Parse text into a single quantity of ``quantity_type``.

        Compound text such as "1 ft 2 in" is summed; the result is expressed
        in the unit of the first segment.

        Raises:
            ArgumentNullError: If text is None.
            QuantityFormatError: If text is blank or malformed.
            UnrecognizedUnitError: If an abbreviation matches no unit.
            AmbiguousUnitError: If an abbreviation matches several units.
            NonFiniteValueError: If a number overflows to infinity.
        """
        if text is None:
            raise ArgumentNullError("text")
        resolved = get_culture(culture)
        unit_type = quantity_type.KIND.unit_type
        quantities = [
            quantity_type(value, self._unit_parser.parse(abbreviation, unit_type, resolved))
            for value, abbreviation in self.tokenize(text, unit_type, resolved)
        ]
        return reduce(operator.add, quantities)

    def try_parse(
        self, text: str | None, quantity_type: type[Quantity], culture: str | Culture | None = None
    ) -> ParseResult[Quantity]:
        """Like parse, but returns a ParseResult holding zero() on failure."""
        default = quantity_type.zero()
        if not isinstance(text, str) or not text.strip():
            return ParseResult.fail(default)
        try:
            return ParseResult.ok(self.parse(text, quantity_type, culture))
        except MeasureKitError as e:
            logger.debug("Could not parse %s from %r: %s", quantity_type.__name__, text, e)
            return ParseResult.fail(default, e)
