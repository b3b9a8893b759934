"""Amount of substance units, with the mole as base unit."""

from __future__ import annotations

from enum import Enum

from ..unit.dimensions import DimensionVector
from ..unit.quantity import Quantity


class AmountOfSubstanceUnit(Enum):
    UNDEFINED = 0
    MOLE = 1
    CENTIMOLE = 2
    DECIMOLE = 3
    KILOMOLE = 4
    MICROMOLE = 5
    MILLIMOLE = 6
    NANOMOLE = 7
    POUND_MOLE = 8


class AmountOfSubstance(Quantity):
    """Amount of substance: the number of elementary entities, in moles."""

    UNIT = AmountOfSubstanceUnit
    BASE_UNIT = AmountOfSubstanceUnit.MOLE
    DIMENSIONS = DimensionVector(amount=1)
    FACTORS = {
        AmountOfSubstanceUnit.MOLE: 1.0,
        AmountOfSubstanceUnit.CENTIMOLE: 1e-2,
        AmountOfSubstanceUnit.DECIMOLE: 1e-1,
        AmountOfSubstanceUnit.KILOMOLE: 1e3,
        AmountOfSubstanceUnit.MICROMOLE: 1e-6,
        AmountOfSubstanceUnit.MILLIMOLE: 1e-3,
        AmountOfSubstanceUnit.NANOMOLE: 1e-9,
        AmountOfSubstanceUnit.POUND_MOLE: 453.59237,
    }
    ABBREVIATIONS = (
        ("en-US", AmountOfSubstanceUnit.MOLE, ("mol",)),
        ("en-US", AmountOfSubstanceUnit.CENTIMOLE, ("cmol",)),
        ("en-US", AmountOfSubstanceUnit.DECIMOLE, ("dmol",)),
        ("en-US", AmountOfSubstanceUnit.KILOMOLE, ("kmol",)),
        ("en-US", AmountOfSubstanceUnit.MICROMOLE, ("µmol",)),
        ("en-US", AmountOfSubstanceUnit.MILLIMOLE, ("mmol",)),
        ("en-US", AmountOfSubstanceUnit.NANOMOLE, ("nmol",)),
        ("en-US", AmountOfSubstanceUnit.POUND_MOLE, ("lbmol",)),
    )
