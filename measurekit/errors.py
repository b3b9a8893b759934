"""Error taxonomy for quantity construction, conversion and parsing.

Every error raised by measurekit derives from MeasureKitError and also from
the builtin exception a Python caller would expect (ValueError or TypeError),
so both ``except MeasureKitError`` and ``except ValueError`` work.

Classes:
    MeasureKitError: Base class for all errors raised by this package.
    InvalidUnitError: A quantity was constructed with the UNDEFINED unit.
    NonFiniteValueError: A quantity was constructed with NaN or infinity.
    UnsupportedUnitError: A unit is missing from a conversion table.
    IncompatibleQuantityError: Two operands belong to different quantity kinds.
    InvalidArgumentError: An argument is out of range or of the wrong kind.
    ArgumentNullError: A required argument was None.
    QuantityFormatError: Text could not be split into number/unit segments.
    UnrecognizedUnitError: An abbreviation matches no unit.
    AmbiguousUnitError: An abbreviation matches more than one unit.
"""

from __future__ import annotations

from enum import Enum


class MeasureKitError(Exception):
    """Base class for all measurekit errors."""


class InvalidUnitError(MeasureKitError, ValueError):
    """Raised when a quantity is constructed with the UNDEFINED unit."""


class NonFiniteValueError(MeasureKitError, ValueError):
    """Raised when a quantity magnitude is NaN or infinite."""


class UnsupportedUnitError(MeasureKitError, ValueError):
    """Raised when a conversion is requested for a unit absent from the table.

    Attributes:
        unit: The offending unit identifier.
    """

    def __init__(self, unit, message: str | None = None):
        self.unit = unit
        super().__init__(message or f"Unit {unit!r} is not supported by this conversion table")


class IncompatibleQuantityError(MeasureKitError, TypeError):
    """Raised when operands of different quantity kinds are combined."""


class InvalidArgumentError(MeasureKitError, ValueError):
    """Raised for arguments that are out of range or of the wrong kind."""


class ArgumentNullError(MeasureKitError, TypeError):
    """Raised when a required argument is None.

    Attributes:
        argument: Name of the missing argument.
    """

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class QuantityFormatError(MeasureKitError, ValueError):
    """Raised when text is not a sequence of ``<number> <unit>`` segments.

    Attributes:
        text: The input being parsed.
        culture: Name of the culture used for parsing.
    """

    def __init__(self, message: str, text: str | None = None, culture: str | None = None):
        self.text = text
        self.culture = culture
        super().__init__(message)


class UnrecognizedUnitError(MeasureKitError, ValueError):
    """Raised when an abbreviation matches no unit in either culture.

    Attributes:
        abbreviation: The abbreviation that was looked up.
        unit_type: The unit enum class searched.
        culture: Name of the requested culture.
    """

    def __init__(self, abbreviation: str, unit_type: type[Enum], culture: str | None = None):
        self.abbreviation = abbreviation
        self.unit_type = unit_type
        self.culture = culture
        super().__init__(
            f"Unit abbreviation {abbreviation!r} is not a recognized {unit_type.__name__}"
        )


class AmbiguousUnitError(MeasureKitError, ValueError):
    """Raised when an abbreviation matches more than one unit.

    Attributes:
        abbreviation: The abbreviation that was looked up.
        candidates: Every unit the abbreviation could denote.
    """

    def __init__(self, abbreviation: str, candidates: tuple[Enum, ...]):
        self.abbreviation = abbreviation
        self.candidates = tuple(candidates)
        names = ", ".join(f"{type(c).__name__}.{c.name}" for c in self.candidates)
        super().__init__(f"Cannot parse {abbreviation!r} since it could be either of these: {names}")
