"""Linear conversion tables anchored on a single base unit.

Every unit of a quantity kind is described by one multiplicative factor
relative to the kind's base unit::

    value_in_base = value_in_unit * k
    value_in_unit = value_in_base / k

Converting between two arbitrary units always goes through the base unit, so
each conversion costs at most two floating point operations and every unit's
rounding error is anchored to the same reference. Converting a unit to itself
returns the input untouched.

Values may be Python scalars or NumPy arrays; arrays are converted
element-wise.

Classes:
    ConversionRule: Factor of one unit relative to the base unit.
    ConversionTable: Per-kind mapping from unit identifier to ConversionRule.

Example:
    >>> table = ConversionTable(LengthUnit, LengthUnit.METER, {
    ...     LengthUnit.METER: 1.0, LengthUnit.KILOMETER: 1000.0})
    >>> table.convert(2.5, LengthUnit.KILOMETER, LengthUnit.METER)
    2500.0
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from math import isfinite

import numpy as np

from ..config import BASE_TYPE
from ..errors import UnsupportedUnitError


@dataclass(frozen=True)
class ConversionRule:
    """Multiplicative factor converting a unit's value into the base unit."""

    factor: float

    def to_base(self, value: BASE_TYPE) -> BASE_TYPE:
        return value * self.factor

    def from_base(self, value: BASE_TYPE) -> BASE_TYPE:
        return value / self.factor


class ConversionTable:
    """Read-only conversion rules for every unit of one quantity kind.

    Attributes:
        unit_type: The unit enum class this table covers.
        base_unit: The unit with factor 1 that anchors all conversions.
    """

    __slots__ = ("unit_type", "base_unit", "_rules")

    def __init__(
        self,
        unit_type: type[Enum],
        base_unit: Enum,
        factors: Mapping[Enum, float],
    ):
        """Build a table from a unit → factor mapping.

        Args:
            unit_type: The unit enum class.
            base_unit: Member of unit_type used as the anchor.
            factors: Factor k for each supported unit, value_in_base = value * k.

        Raises:
            TypeError: If the mapping mixes unit types, contains the UNDEFINED
                sentinel, has a non-positive or non-finite factor, or the base
                unit's factor is not exactly 1.
        """
        rules: dict[Enum, ConversionRule] = {}
        for unit, factor in factors.items():
            if not isinstance(unit, unit_type):
                msg = f"{unit!r} is not a {unit_type.__name__}"
                raise TypeError(msg)
            if unit.value == 0:
                msg = f"{unit_type.__name__}.{unit.name} is the undefined sentinel and cannot be converted"
                raise TypeError(msg)
            factor = float(factor)
            if not isfinite(factor) or factor <= 0.0:
                msg = f"Conversion factor for {unit_type.__name__}.{unit.name} must be positive and finite"
                raise TypeError(msg)
            rules[unit] = ConversionRule(factor)

        if rules.get(base_unit) != ConversionRule(1.0):
            msg = f"Base unit {unit_type.__name__}.{base_unit.name} must have factor 1"
            raise TypeError(msg)

        self.unit_type = unit_type
        self.base_unit = base_unit
        self._rules = rules

    def __contains__(self, unit) -> bool:
        return unit in self._rules

    def __iter__(self) -> Iterator[Enum]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def rule(self, unit: Enum) -> ConversionRule:
        """Return the conversion rule for a unit.

        Raises:
            UnsupportedUnitError: If the unit is unknown or UNDEFINED.
        """
        try:
            return self._rules[unit]
        except (KeyError, TypeError):
            raise UnsupportedUnitError(unit) from None

    def factor(self, unit: Enum) -> float:
        return self.rule(unit).factor

    def to_base(self, unit: Enum, value: BASE_TYPE) -> BASE_TYPE:
        """Convert a value expressed in ``unit`` into the base unit."""
        return self.rule(unit).to_base(value)

    def from_base(self, unit: Enum, value: BASE_TYPE) -> BASE_TYPE:
        """Convert a value expressed in the base unit into ``unit``."""
        return self.rule(unit).from_base(value)

    def convert(self, value: BASE_TYPE, from_unit: Enum, to_unit: Enum) -> BASE_TYPE:
        """Convert a value between two units of this table.

        Same-unit conversion returns ``value`` untouched, with no round trip
        through the base unit.

        Args:
            value: Scalar or ndarray expressed in from_unit.
            from_unit: Unit the value is expressed in.
            to_unit: Unit to express the value in.

        Returns:
            The converted value, same shape as the input.

        Raises:
            UnsupportedUnitError: If either unit is not in the table.
        """
        from_rule = self.rule(from_unit)
        to_rule = self.rule(to_unit)
        if from_unit == to_unit:
            return value
        return to_rule.from_base(from_rule.to_base(value))

    def convert_array(self, values, from_unit: Enum, to_unit: Enum) -> np.ndarray:
        """Convert any array-like of values, always returning a float64 ndarray."""
        return np.asarray(self.convert(np.asarray(values, dtype=np.float64), from_unit, to_unit))
