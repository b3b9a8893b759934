"""Quantity-kind descriptors and the process-wide kind registry.

A quantity kind is a family of physically comparable units (length, mass,
time, ...). Each kind is described by a QuantityKind: its unit enum class,
its base unit, its conversion table, its dimension vector and its built-in
abbreviation table. Kinds are registered once, when their Quantity subclass
is declared, and are looked up by unit enum class or by name.

The unit enum class doubles as the kind's type tag: every registry in the
package is keyed by it instead of by runtime type introspection.

Classes:
    QuantityKind: Immutable descriptor of one quantity kind.

Functions:
    register_kind: Add a kind to the registry.
    kind_for_unit_type: Look up a kind by unit enum class.
    kind_by_name: Look up a kind by name.
    registered_kinds: Snapshot of every registered kind.
    valid_units: Members of a unit enum, excluding the UNDEFINED sentinel.
    convert: Convert a value between two units of any registered kind.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..errors import IncompatibleQuantityError, UnsupportedUnitError
from .conversion import ConversionTable
from .dimensions import DimensionVector

logger = logging.getLogger(__name__)

UNDEFINED_VALUE = 0
"""Numeric value reserved for the UNDEFINED member of every unit enum."""

Localization = tuple[str, Enum, tuple[str, ...]]
"""Built-in abbreviation entry: (culture name, unit, abbreviations)."""


def is_undefined(unit: Enum) -> bool:
    """Return True if ``unit`` is its enum's UNDEFINED sentinel."""
    return unit.value == UNDEFINED_VALUE


def valid_units(unit_type: type[Enum]) -> tuple[Enum, ...]:
    """Return every member of ``unit_type`` except UNDEFINED, in declaration order."""
    return tuple(u for u in unit_type if not is_undefined(u))


@dataclass(frozen=True)
class QuantityKind:
    """Descriptor a quantity type supplies to the conversion core.

    Attributes:
        name: Kind name, e.g. "Length".
        unit_type: Unit enum class; also the kind's registry key.
        base_unit: Unit all conversions go through.
        conversions: Conversion table for every valid unit.
        dimensions: Base-dimension exponents of the kind.
        localizations: Built-in abbreviations loaded into the registry.
    """

    name: str
    unit_type: type[Enum]
    base_unit: Enum
    conversions: ConversionTable
    dimensions: DimensionVector
    localizations: tuple[Localization, ...] = ()

    @property
    def units(self) -> tuple[Enum, ...]:
        return valid_units(self.unit_type)

    def __str__(self) -> str:
        return self.name


_kinds_by_unit_type: dict[type[Enum], QuantityKind] = {}
_registered: tuple[QuantityKind, ...] = ()
_kinds_by_name: dict[str, QuantityKind] = {}
_quantity_types: dict[type[Enum], type] = {}
_lock = threading.Lock()


def register_kind(kind: QuantityKind, quantity_type: type | None = None) -> None:
    """Add a kind to the process-wide registry.

    Args:
        kind: The kind descriptor.
        quantity_type: Quantity subclass implementing the kind, if any.

    Raises:
        TypeError: If another kind already uses the same unit enum or name.
    """
    global _registered
    with _lock:
        existing = _kinds_by_unit_type.get(kind.unit_type) or _kinds_by_name.get(kind.name)
        if existing is not None and existing is not kind:
            msg = f"Quantity kind {kind.name!r} conflicts with registered kind {existing.name!r}"
            raise TypeError(msg)
        _kinds_by_unit_type[kind.unit_type] = kind
        _kinds_by_name[kind.name] = kind
        if quantity_type is not None:
            _quantity_types[kind.unit_type] = quantity_type
        _registered = tuple(_kinds_by_unit_type.values())
    logger.debug("Registered quantity kind %s with %d units", kind.name, len(kind.conversions))


def kind_for_unit_type(unit_type: type[Enum]) -> QuantityKind | None:
    return _kinds_by_unit_type.get(unit_type)


def kind_by_name(name: str) -> QuantityKind | None:
    return _kinds_by_name.get(name)


def quantity_type_for(unit_type: type[Enum]) -> type | None:
    """Return the Quantity subclass declared for a unit enum, if any."""
    return _quantity_types.get(unit_type)


def registered_kinds() -> Sequence[QuantityKind]:
    """Return every registered kind in registration order, without locking."""
    return _registered


def convert(value, from_unit: Enum, to_unit: Enum):
    """Convert a value between two units, routing by their unit enum class.

    Args:
        value: Scalar or ndarray expressed in from_unit.
        from_unit: Source unit.
        to_unit: Target unit of the same kind.

    Returns:
        The converted value.

    Raises:
        IncompatibleQuantityError: If the units belong to different kinds.
        UnsupportedUnitError: If the unit type has no registered kind, or a
            unit is UNDEFINED.
    """
    if type(from_unit) is not type(to_unit):
        msg = f"Cannot convert {type(from_unit).__name__} to {type(to_unit).__name__}"
        raise IncompatibleQuantityError(msg)
    kind = kind_for_unit_type(type(from_unit))
    if kind is None:
        raise UnsupportedUnitError(from_unit, f"No quantity kind is registered for {type(from_unit).__name__}")
    return kind.conversions.convert(value, from_unit, to_unit)
