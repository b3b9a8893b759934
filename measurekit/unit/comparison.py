"""Tolerance-based equality of floating point quantity values.

Relative tolerance is measured against the reference (left) value only, so
``equals(a, b, tol)`` and ``equals(b, a, tol)`` can disagree, most visibly
near zero where the reference magnitude is tiny.

Example:
    >>> equals_relative(100.0, 101.0, 0.01)
    True
    >>> equals_absolute(100.0, 101.0, 0.5)
    False
"""

from __future__ import annotations

from enum import Enum

from ..errors import InvalidArgumentError


class ComparisonType(Enum):
    """How a tolerance is applied when comparing two values."""

    RELATIVE = "relative"
    ABSOLUTE = "absolute"


def _check_tolerance(tolerance: float) -> None:
    if tolerance < 0:
        msg = "Tolerance must be greater than or equal to 0"
        raise InvalidArgumentError(msg)


def equals_relative(reference: float, other: float, tolerance: float) -> bool:
    """Return True if |reference - other| <= tolerance * |reference|."""
    _check_tolerance(tolerance)
    return abs(reference - other) <= tolerance * abs(reference)


def equals_absolute(reference: float, other: float, tolerance: float) -> bool:
    """Return True if |reference - other| <= tolerance."""
    _check_tolerance(tolerance)
    return abs(reference - other) <= tolerance


def equals(
    reference: float,
    other: float,
    tolerance: float,
    comparison_type: ComparisonType = ComparisonType.RELATIVE,
) -> bool:
    """Compare two values using the given tolerance mode.

    Args:
        reference: Value the relative tolerance is measured against.
        other: Value being compared.
        tolerance: Non-negative tolerance, a fraction in relative mode.
        comparison_type: RELATIVE or ABSOLUTE.

    Raises:
        InvalidArgumentError: If tolerance is negative or the mode is unknown.
    """
    if comparison_type is ComparisonType.RELATIVE:
        return equals_relative(reference, other, tolerance)
    if comparison_type is ComparisonType.ABSOLUTE:
        return equals_absolute(reference, other, tolerance)
    msg = f"Unknown comparison type {comparison_type!r}"
    raise InvalidArgumentError(msg)
