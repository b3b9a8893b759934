"""Culture-aware text rendering of quantity values.

Values are rendered with N digits of precision (trailing zeros dropped).
Magnitude decides the notation:

- exactly zero: ``0``
- below 1e-3: scientific, e.g. ``1.23e-05``
- from 1e-3 up to 1: N significant digits, e.g. ``0.0012`` or ``0.046``
- from 1 up to 1e15: N digits after the radix with grouping, e.g. ``12,345.68``
- from 1e15 up: scientific, e.g. ``1.2e+15``

The culture's decimal and group separators replace the invariant ones.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..config import DEFAULT_SIGNIFICANT_DIGITS, Culture
from ..errors import ArgumentNullError, InvalidArgumentError

SCIENTIFIC_BELOW = 1e-3
SIGNIFICANT_BELOW = 1.0
SCIENTIFIC_FROM = 1e15


def _strip_fraction(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _localize(text: str, culture: Culture) -> str:
    return text.translate(str.maketrans({",": culture.group_separator, ".": culture.decimal_separator}))


def format_value(
    value: float,
    culture: Culture,
    significant_digits_after_radix: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    """Render a number using the culture's separators.

    Args:
        value: Number to render.
        culture: Culture providing the separators.
        significant_digits_after_radix: Digits after the radix, or
            significant digits for magnitudes below 1.

    Raises:
        InvalidArgumentError: If the digit count is negative.
    """
    if significant_digits_after_radix < 0:
        msg = "significant_digits_after_radix must be greater than or equal to 0"
        raise InvalidArgumentError(msg)

    digits = significant_digits_after_radix
    magnitude = abs(value)
    if magnitude == 0:
        text = "0"
    elif magnitude < SCIENTIFIC_BELOW or magnitude >= SCIENTIFIC_FROM:
        mantissa, exponent = f"{value:.{digits}e}".split("e")
        text = f"{_strip_fraction(mantissa)}e{exponent}"
    elif magnitude < SIGNIFICANT_BELOW:
        text = f"{value:.{max(digits, 1)}g}"
    else:
        text = _strip_fraction(f"{value:,.{digits}f}")
    return _localize(text, culture)


def format_quantity(
    value: float,
    abbreviation: str,
    culture: Culture,
    significant_digits_after_radix: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    """Render "<value> <abbreviation>"."""
    return f"{format_value(value, culture, significant_digits_after_radix)} {abbreviation}"


def format_with(fmt: str, value: float, abbreviation: str, args: Sequence[Any] = ()) -> str:
    """Apply a caller ``str.format`` template to value, abbreviation and extra args.

    Raises:
        ArgumentNullError: If fmt or args is None.
        InvalidArgumentError: If the template refers to missing arguments or
            uses an invalid format spec.
    """
    if fmt is None:
        raise ArgumentNullError("fmt")
    if args is None:
        raise ArgumentNullError("args")
    try:
        return fmt.format(value, abbreviation, *args)
    except (IndexError, KeyError, ValueError) as e:
        msg = f"Invalid format string {fmt!r}: {e}"
        raise InvalidArgumentError(msg) from e
