"""Built-in quantity kinds.

Importing this package declares and registers every built-in kind, which
makes their conversion tables available to ``measurekit.convert`` and their
abbreviations available to parsing and formatting.

Available Kinds:
    - Length: meter (base), km, cm, mm, mile, yard, foot, inch, ...
    - Mass: kilogram (base), gram, tonne, pound, ounce, ...
    - Duration: second (base), minute, hour, day, week, year
    - Angle: degree (base), radian, gradian, arcminute, revolution, ...
    - Speed: m/s (base), km/h, mph, knot, ...
    - Power: watt (base), kW, MW, horsepower, ...
    - Energy: joule (base), kJ, Wh, kWh, calorie, BTU, eV, ...
    - AmountOfSubstance: mole (base), mmol, kmol, ...
    - SpecificEntropy: J/(kg·K) (base), kJ/(kg·K), cal/(g·K), ...
"""

from .amount_of_substance import AmountOfSubstance, AmountOfSubstanceUnit
from .angle import Angle, AngleUnit
from .duration import Duration, DurationUnit
from .energy import Energy, EnergyUnit
from .length import Length, LengthUnit
from .mass import Mass, MassUnit
from .power import Power, PowerUnit
from .specific_entropy import SpecificEntropy, SpecificEntropyUnit
from .speed import Speed, SpeedUnit

__all__ = [
    "AmountOfSubstance",
    "AmountOfSubstanceUnit",
    "Angle",
    "AngleUnit",
    "Duration",
    "DurationUnit",
    "Energy",
    "EnergyUnit",
    "Length",
    "LengthUnit",
    "Mass",
    "MassUnit",
    "Power",
    "PowerUnit",
    "SpecificEntropy",
    "SpecificEntropyUnit",
    "Speed",
    "SpeedUnit",
]
