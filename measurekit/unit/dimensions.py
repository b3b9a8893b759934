"""Base-dimension exponent vectors for physical quantity kinds.

Each quantity kind carries one DimensionVector, established once when the
kind is declared. Vectors are compared component-wise and are used to assert
that two operands describe the same physical dimension before they are
combined.

Exponent order follows the SI base quantities:
    length, mass, time, electric current, temperature,
    amount of substance, luminous intensity.

Example:
    >>> speed = DimensionVector(length=1, time=-1)
    >>> speed * DimensionVector(time=1) == DimensionVector(length=1)
    True
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields


@dataclass(frozen=True)
class DimensionVector:
    """Immutable 7-integer exponent tuple identifying a physical dimension.

    Attributes:
        length: Exponent of length (L).
        mass: Exponent of mass (M).
        time: Exponent of time (T).
        current: Exponent of electric current (I).
        temperature: Exponent of thermodynamic temperature (Θ).
        amount: Exponent of amount of substance (N).
        luminous_intensity: Exponent of luminous intensity (J).
    """

    length: int = 0
    mass: int = 0
    time: int = 0
    current: int = 0
    temperature: int = 0
    amount: int = 0
    luminous_intensity: int = 0

    def __post_init__(self):
        for f in fields(self):
            if not isinstance(getattr(self, f.name), int):
                msg = f"Dimension exponent '{f.name}' must be an int"
                raise TypeError(msg)

    def as_tuple(self) -> tuple[int, ...]:
        return astuple(self)

    def is_dimensionless(self) -> bool:
        return not any(self.as_tuple())

    # Exponent algebra for combining quantities of different kinds.
    def __mul__(self, other: DimensionVector) -> DimensionVector:
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return DimensionVector(*(a + b for a, b in zip(self.as_tuple(), other.as_tuple())))

    def __truediv__(self, other: DimensionVector) -> DimensionVector:
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return DimensionVector(*(a - b for a, b in zip(self.as_tuple(), other.as_tuple())))

    def __pow__(self, n: int) -> DimensionVector:
        if not isinstance(n, int):
            return NotImplemented
        return DimensionVector(*(a * n for a in self.as_tuple()))

    def __str__(self) -> str:
        symbols = ("L", "M", "T", "I", "Θ", "N", "J")
        parts = [
            s if e == 1 else f"{s}^{e}"
            for s, e in zip(symbols, self.as_tuple())
            if e != 0
        ]
        return "·".join(parts) or "1"


DIMENSIONLESS = DimensionVector()
