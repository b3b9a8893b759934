"""Generic immutable quantity type with unit-safe conversion and arithmetic.

Quantity pairs a finite float magnitude with a unit of one quantity kind.
Concrete kinds are declared as subclasses that only supply class-level data;
declaring the subclass builds its conversion table, its QuantityKind
descriptor and registers it, so all behaviour lives in this one class.

Key Features:
- Construction guards: the UNDEFINED unit and NaN/infinite magnitudes fail
- Conversion to any unit of the same kind through the kind's base unit
- Type-safe arithmetic and comparison within one kind
- Tolerance-based equality (relative or absolute)
- Culture-aware parsing and formatting through the abbreviation registry

Binary operators convert the right operand into the left operand's unit, so
operand order decides the unit of the result, never its value.

Example:
    >>> class LengthUnit(Enum):
    ...     UNDEFINED = 0
    ...     METER = 1
    ...     KILOMETER = 2
    >>> class Length(Quantity):
    ...     UNIT = LengthUnit
    ...     BASE_UNIT = LengthUnit.METER
    ...     FACTORS = {LengthUnit.METER: 1.0, LengthUnit.KILOMETER: 1e3}
    ...     DIMENSIONS = DimensionVector(length=1)
    >>> d = Length(2.5, LengthUnit.KILOMETER) + Length(500, LengthUnit.METER)
    >>> d.value, d.unit
    (3.0, <LengthUnit.KILOMETER: 2>)
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from enum import Enum
from math import isfinite
from typing import Any, ClassVar, Self

from ..config import DEFAULT_SIGNIFICANT_DIGITS, Culture, Number, get_culture
from ..errors import (
    ArgumentNullError,
    IncompatibleQuantityError,
    InvalidArgumentError,
    InvalidUnitError,
    NonFiniteValueError,
    UnsupportedUnitError,
)
from ..result import ParseResult
from ..text import formatter
from ..text.abbreviations import UnitAbbreviationsCache
from ..text.parser import QuantityParser, UnitParser
from .comparison import ComparisonType, equals
from .conversion import ConversionTable
from .dimensions import DIMENSIONLESS, DimensionVector
from .unit_base import Localization, QuantityKind, is_undefined, register_kind, valid_units


class Quantity:
    """Base class for all quantity kinds.

    Subclasses declare a kind by setting ``UNIT``; intermediate subclasses
    that do not set it inherit their parent's kind.

    Attributes:
        KIND (ClassVar[QuantityKind]): Descriptor built when the subclass is declared.
        UNIT (ClassVar[type[Enum]]): Unit enum class of the kind.
        BASE_UNIT (ClassVar[Enum]): Unit all conversions go through.
        FACTORS (ClassVar[Mapping[Enum, float]]): Factor to the base unit per unit.
        DIMENSIONS (ClassVar[DimensionVector]): Base-dimension exponents.
        ABBREVIATIONS (ClassVar[Sequence[Localization]]): Built-in abbreviations.
        NAME (ClassVar[str]): Kind name, defaults to the class name.
    """

    __slots__ = ("_value", "_unit")
    __array_priority__ = 1000

    KIND: ClassVar[QuantityKind]
    UNIT: ClassVar[type[Enum]]
    BASE_UNIT: ClassVar[Enum]
    FACTORS: ClassVar[Mapping[Enum, float]]
    DIMENSIONS: ClassVar[DimensionVector] = DIMENSIONLESS
    ABBREVIATIONS: ClassVar[Sequence[Localization]] = ()
    NAME: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs):
        """Build and register the kind descriptor for a declaring subclass.

        Raises:
            TypeError: If the declaration is incomplete, misses a factor for a
                valid unit, or declares data for another unit type.
        """
        super().__init_subclass__(**kwargs)
        if "UNIT" not in cls.__dict__:
            return

        unit_type = cls.UNIT
        if not (isinstance(unit_type, type) and issubclass(unit_type, Enum)):
            msg = f"{cls.__name__}.UNIT must be an Enum class"
            raise TypeError(msg)
        for attr in ("BASE_UNIT", "FACTORS"):
            if attr not in cls.__dict__:
                msg = f"{cls.__name__} declares UNIT but not {attr}"
                raise TypeError(msg)

        missing = [u.name for u in valid_units(unit_type) if u not in cls.FACTORS]
        if missing:
            msg = f"{cls.__name__} has no conversion factor for: {', '.join(missing)}"
            raise TypeError(msg)

        for _, unit, _ in cls.ABBREVIATIONS:
            if not isinstance(unit, unit_type):
                msg = f"{cls.__name__}.ABBREVIATIONS refers to {unit!r}, not a {unit_type.__name__}"
                raise TypeError(msg)

        cls.KIND = QuantityKind(
            name=cls.__dict__.get("NAME") or cls.__name__,
            unit_type=unit_type,
            base_unit=cls.BASE_UNIT,
            conversions=ConversionTable(unit_type, cls.BASE_UNIT, cls.FACTORS),
            dimensions=cls.DIMENSIONS,
            localizations=tuple(
                (culture, unit, tuple(abbreviations))
                for culture, unit, abbreviations in cls.ABBREVIATIONS
            ),
        )
        register_kind(cls.KIND, cls)

    def __init__(self, value: Number, unit: Enum):
        """Create a quantity.

        Args:
            value: Finite magnitude expressed in ``unit``.
            unit: A valid unit of this kind.

        Raises:
            TypeError: If the class declares no kind.
            ArgumentNullError: If unit is None.
            InvalidUnitError: If unit is the UNDEFINED sentinel.
            UnsupportedUnitError: If unit belongs to another unit type.
            NonFiniteValueError: If value is NaN or infinite.
        """
        kind = getattr(type(self), "KIND", None)
        if kind is None:
            msg = f"{type(self).__name__} does not declare a quantity kind"
            raise TypeError(msg)
        if unit is None:
            raise ArgumentNullError("unit")
        if not isinstance(unit, kind.unit_type):
            raise UnsupportedUnitError(unit, f"{unit!r} is not a {kind.unit_type.__name__}")
        if is_undefined(unit):
            msg = "The quantity can not be created with an undefined unit"
            raise InvalidUnitError(msg)

        value = float(value)
        if not isfinite(value):
            msg = f"The quantity value must be finite, got {value}"
            raise NonFiniteValueError(msg)

        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_unit", unit)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self):
        return (type(self), (self._value, self._unit))

    # -------------------------------- Kind Metadata --------------------------------
    @classmethod
    def units(cls) -> tuple[Enum, ...]:
        """Return every valid unit of the kind; UNDEFINED is never included."""
        return cls.KIND.units

    @classmethod
    def base_unit(cls) -> Enum:
        return cls.KIND.base_unit

    @classmethod
    def dimensions(cls) -> DimensionVector:
        return cls.KIND.dimensions

    @classmethod
    def from_unit(cls, value: Number, unit: Enum) -> Self:
        return cls(value, unit)

    @classmethod
    def zero(cls) -> Self:
        return cls(0.0, cls.KIND.base_unit)

    @classmethod
    def max_value(cls) -> Self:
        return cls(sys.float_info.max, cls.KIND.base_unit)

    @classmethod
    def min_value(cls) -> Self:
        return cls(-sys.float_info.max, cls.KIND.base_unit)

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> Enum:
        return self._unit

    @property
    def kind(self) -> QuantityKind:
        return type(self).KIND

    # -------------------------------- Conversion --------------------------------
    def to(self, unit: Enum) -> float:
        """Return the magnitude expressed in another unit of the same kind.

        Args:
            unit: Target unit.

        Returns:
            float: The converted magnitude; exactly ``value`` for the same unit.

        Raises:
            UnsupportedUnitError: If unit is not a valid unit of this kind.
        """
        if unit is self._unit:
            return self._value
        return self.kind.conversions.convert(self._value, self._unit, unit)

    def to_unit(self, unit: Enum) -> Self:
        """Convert to another unit while preserving the quantity type.

        Args:
            unit: Target unit.

        Returns:
            Quantity: New instance of the same kind tagged with ``unit``.
        """
        return type(self)(self.to(unit), unit)

    def as_base(self) -> float:
        """Return the magnitude expressed in the kind's base unit."""
        return self.kind.conversions.to_base(self._unit, self._value)

    def _check_same_kind(self, other: Quantity) -> None:
        """Check that another quantity belongs to the same kind.

        Raises:
            IncompatibleQuantityError: If the kinds (and so their dimensions) differ.
        """
        if self.kind is not other.kind:
            msg = (
                f"Cannot combine {self.kind.name} [{self.kind.dimensions}] "
                f"with {other.kind.name} [{other.kind.dimensions}]"
            )
            raise IncompatibleQuantityError(msg)

    # -------------------------------- Comparison --------------------------------
    def compare_to(self, other: Quantity) -> int:
        """Compare with another quantity of the same kind.

        ``other`` is converted into this quantity's unit before comparing.

        Args:
            other: Quantity to compare against.

        Returns:
            int: -1, 0 or 1.

        Raises:
            ArgumentNullError: If other is None.
            InvalidArgumentError: If other is not a quantity.
            IncompatibleQuantityError: If other is of a different kind.
        """
        if other is None:
            raise ArgumentNullError("other")
        if not isinstance(other, Quantity):
            msg = f"Expected type {type(self).__name__}, got {type(other).__name__}"
            raise InvalidArgumentError(msg)
        self._check_same_kind(other)
        other_value = other.to(self._unit)
        return (self._value > other_value) - (self._value < other_value)

    def equals(
        self,
        other: Quantity,
        tolerance: float,
        comparison_type: ComparisonType = ComparisonType.RELATIVE,
    ) -> bool:
        """Compare with another quantity within a tolerance.

        ``other`` is converted into this quantity's unit. In relative mode the
        tolerance is a fraction of this quantity's magnitude, so the check is
        not symmetric between the two operands.

        Args:
            other: Quantity of the same kind.
            tolerance: Non-negative tolerance.
            comparison_type: RELATIVE or ABSOLUTE.

        Returns:
            bool: True if the values are within tolerance.

        Raises:
            InvalidArgumentError: If tolerance is negative.
            IncompatibleQuantityError: If other is of a different kind.
        """
        if tolerance < 0:
            msg = "Tolerance must be greater than or equal to 0"
            raise InvalidArgumentError(msg)
        if other is None:
            raise ArgumentNullError("other")
        self._check_same_kind(other)
        return equals(self._value, other.to(self._unit), tolerance, comparison_type)

    def __eq__(self, other: object) -> bool:
        """Exact equality after converting other into this quantity's unit.

        Agrees with compare_to. Quantities of different kinds are never equal.
        """
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        # Equal quantities may differ in their base value; hash the kind only.
        return hash(self.kind.name)

    def __lt__(self, other: Quantity) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Quantity) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Quantity) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Quantity) -> bool:
        return self.compare_to(other) >= 0

    # -------------------------------- Arithmetic Operations --------------------------------
    def __neg__(self) -> Self:
        return type(self)(-self._value, self._unit)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return type(self)(abs(self._value), self._unit)

    def __add__(self, other: Quantity) -> Self:
        """Add two quantities of the same kind.

        Args:
            other: Quantity to add; converted into this quantity's unit.

        Returns:
            Quantity: Sum expressed in this quantity's unit.

        Raises:
            IncompatibleQuantityError: If the kinds differ.
        """
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_same_kind(other)
        return type(self)(self._value + other.to(self._unit), self._unit)

    def __radd__(self, other: Quantity | int) -> Self:
        """Support ``sum()`` by treating a literal 0 start value as neutral."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Quantity) -> Self:
        """Subtract a quantity of the same kind.

        Args:
            other: Quantity to subtract; converted into this quantity's unit.

        Returns:
            Quantity: Difference expressed in this quantity's unit.
        """
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_same_kind(other)
        return type(self)(self._value - other.to(self._unit), self._unit)

    def __mul__(self, k: Number) -> Self:
        """Multiply by a scalar value.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            Quantity: Scaled quantity in the same unit.
        """
        if isinstance(k, Number):
            return type(self)(self._value * k, self._unit)
        return NotImplemented

    def __rmul__(self, k: Number) -> Self:
        return self.__mul__(k)

    def __truediv__(self, other: Number | Quantity) -> Self | float:
        """Divide by a scalar, or by a quantity of the same kind.

        Args:
            other: Numeric scalar, or a quantity converted into this unit.

        Returns:
            Quantity for a scalar divisor, a dimensionless float ratio for a
            quantity divisor.

        Raises:
            ZeroDivisionError: If the divisor is zero.
            IncompatibleQuantityError: If a quantity divisor has another kind.
        """
        if isinstance(other, Quantity):
            self._check_same_kind(other)
            return self._value / other.to(self._unit)
        if isinstance(other, Number):
            return type(self)(self._value / other, self._unit)
        return NotImplemented

    # -------------------------------- Parsing --------------------------------
    @classmethod
    def parse(cls, text: str, culture: str | Culture | None = None) -> Self:
        """Parse text such as "5.5 m" or "1 ft 2 in" into a quantity.

        Raises:
            ArgumentNullError: If text is None.
            QuantityFormatError: If text is blank or malformed.
            UnrecognizedUnitError: If an abbreviation matches no unit.
            AmbiguousUnitError: If an abbreviation matches several units.
        """
        return QuantityParser.default().parse(text, cls, culture)

    @classmethod
    def try_parse(cls, text: str | None, culture: str | Culture | None = None) -> ParseResult[Self]:
        """Like parse, but returns a ParseResult; the value is zero() on failure."""
        return QuantityParser.default().try_parse(text, cls, culture)

    @classmethod
    def parse_unit(cls, text: str, culture: str | Culture | None = None) -> Enum:
        return UnitParser.default().parse(text, cls.KIND.unit_type, culture)

    @classmethod
    def try_parse_unit(cls, text: str | None, culture: str | Culture | None = None) -> ParseResult[Enum]:
        """Like parse_unit, but returns a ParseResult; the value is UNDEFINED on failure."""
        return UnitParser.default().try_parse(text, cls.KIND.unit_type, culture)

    # -------------------------------- Formatting --------------------------------
    @classmethod
    def get_abbreviation(cls, unit: Enum, culture: str | Culture | None = None) -> str:
        return UnitAbbreviationsCache.default().get_default_abbreviation(cls.KIND.unit_type, unit, culture)

    def to_string(
        self,
        unit: Enum | None = None,
        culture: str | Culture | None = None,
        significant_digits_after_radix: int = DEFAULT_SIGNIFICANT_DIGITS,
    ) -> str:
        """Format as "<value> <abbreviation>".

        Args:
            unit: Unit to express the value in; defaults to this quantity's unit.
            culture: Culture for separators and abbreviations.
            significant_digits_after_radix: Digits after the radix, or
                significant digits for magnitudes below 1.

        Returns:
            str: e.g. "1,234.57 m" for en-US.
        """
        if unit is None:
            unit = self._unit
        resolved = get_culture(culture)
        return formatter.format_quantity(
            self.to(unit),
            self.get_abbreviation(unit, resolved),
            resolved,
            significant_digits_after_radix,
        )

    def format(
        self,
        fmt: str,
        *args: Any,
        unit: Enum | None = None,
        culture: str | Culture | None = None,
    ) -> str:
        """Format with a caller-supplied ``str.format`` template.

        The template receives the value as ``{0}``, the default abbreviation as
        ``{1}`` and ``args`` from ``{2}`` on.

        Raises:
            ArgumentNullError: If fmt is None.
        """
        if fmt is None:
            raise ArgumentNullError("fmt")
        if unit is None:
            unit = self._unit
        return formatter.format_with(fmt, self.to(unit), self.get_abbreviation(unit, culture), args)

    def __format__(self, spec: str) -> str:
        if not spec:
            return self.to_string()
        return f"{format(self._value, spec)} {self.get_abbreviation(self._unit)}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, {type(self._unit).__name__}.{self._unit.name})"
