"""Global configuration and type definitions for the quantity engine.

This module provides centralized configuration and the fundamental type
definitions used throughout measurekit. It establishes the numeric type
aliases accepted by the conversion layer, the culture (locale) model used for
numeral formatting and abbreviation lookup, and the process-wide default
culture.

Type Definitions:
    BASE_TYPE: Union type defining acceptable numeric inputs for conversion.
               Supports Python native types (int, float) and NumPy arrays for
               vectorized conversion of many values at once.
    Number: Scalar numeric input accepted by quantity constructors.

Cultures:
    A Culture is the caller-supplied locale. It names the partition used by
    the abbreviation registry and carries the decimal and group separators
    used when parsing and formatting numbers. A small table of well-known
    cultures is built in; any other name is accepted and gets invariant
    separators.

Example:
    >>> from measurekit.config import get_culture, set_default_culture
    >>> get_culture("ru-RU").decimal_separator
    ','
    >>> set_default_culture("nb-NO")
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from numpy import ndarray

BASE_TYPE = int | float | ndarray
Number = int | float


@dataclass(frozen=True)
class Culture:
    """Locale identifier plus the numeral conventions used for text.

    Attributes:
        name: Culture name such as "en-US"; used as the registry partition key.
        decimal_separator: Separator between integer and fractional digits.
        group_separator: Separator between groups of three integer digits.
    """

    name: str
    decimal_separator: str = "."
    group_separator: str = ","

    def __str__(self) -> str:
        return self.name


CULTURES: dict[str, Culture] = {
    "en-US": Culture("en-US", ".", ","),
    "en-GB": Culture("en-GB", ".", ","),
    "ru-RU": Culture("ru-RU", ",", "\u00a0"),
    "nb-NO": Culture("nb-NO", ",", "\u00a0"),
    "de-DE": Culture("de-DE", ",", "."),
    "fr-FR": Culture("fr-FR", ",", "\u202f"),
}

FALLBACK_CULTURE = CULTURES["en-US"]
"""Culture consulted when the requested culture has no abbreviation data."""

DEFAULT_SIGNIFICANT_DIGITS = 2
"""Digits kept after the radix when formatting a quantity."""

_default_culture: Culture = FALLBACK_CULTURE
_default_culture_lock = threading.Lock()


def get_culture(culture: str | Culture | None = None) -> Culture:
    """Resolve a culture argument into a Culture.

    Args:
        culture: Culture instance, culture name, or None for the process default.

    Returns:
        Culture: The resolved culture.

    Raises:
        TypeError: If culture is neither a string nor a Culture.
    """
    if culture is None:
        return get_default_culture()
    if isinstance(culture, Culture):
        return culture
    if isinstance(culture, str):
        return CULTURES.get(culture) or Culture(culture)
    msg = f"Expected a culture name or Culture, got {type(culture).__name__}"
    raise TypeError(msg)


def get_default_culture() -> Culture:
    """Return the culture used whenever a culture argument is omitted."""
    return _default_culture


def set_default_culture(culture: str | Culture) -> Culture:
    """Change the process-wide default culture.

    Args:
        culture: Culture instance or culture name.

    Returns:
        Culture: The previous default, so callers can restore it.
    """
    global _default_culture
    resolved = get_culture(culture)
    with _default_culture_lock:
        previous = _default_culture
        _default_culture = resolved
    return previous
