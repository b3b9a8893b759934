"""
Tests for the generic Quantity type.
"""

import math
import pickle
import sys
import unittest
from enum import Enum

from measurekit.errors import (
    ArgumentNullError,
    IncompatibleQuantityError,
    InvalidArgumentError,
    InvalidUnitError,
    NonFiniteValueError,
    UnsupportedUnitError,
)
from measurekit.quantities import Duration, DurationUnit, Length, LengthUnit, Mass, MassUnit, Speed
from measurekit.unit.comparison import ComparisonType
from measurekit.unit.dimensions import DimensionVector
from measurekit.unit.quantity import Quantity
from measurekit.unit.unit_base import kind_by_name, quantity_type_for, registered_kinds


class TestConstruction(unittest.TestCase):
    """Test quantity construction guards."""

    def test_valid_construction(self):
        """Test creating a quantity."""
        q = Length(2, LengthUnit.KILOMETER)
        self.assertEqual(q.value, 2.0)
        self.assertIsInstance(q.value, float)
        self.assertIs(q.unit, LengthUnit.KILOMETER)
        self.assertIs(q.kind, Length.KIND)

    def test_undefined_unit(self):
        """Test that the UNDEFINED unit is rejected."""
        with self.assertRaises(InvalidUnitError):
            Length(1, LengthUnit.UNDEFINED)
        with self.assertRaises(ValueError):
            Length(1, LengthUnit.UNDEFINED)

    def test_non_finite_values(self):
        """Test that NaN and infinities are rejected."""
        for value in (math.nan, math.inf, -math.inf):
            with self.subTest(value=value):
                with self.assertRaises(NonFiniteValueError):
                    Length(value, LengthUnit.METER)

    def test_missing_unit(self):
        """Test that a None unit is rejected."""
        with self.assertRaises(ArgumentNullError):
            Length(1, None)

    def test_unit_of_another_kind(self):
        """Test that a unit of another kind is rejected."""
        with self.assertRaises(UnsupportedUnitError):
            Length(1, MassUnit.KILOGRAM)

    def test_base_class_has_no_kind(self):
        """Test that the generic base cannot be instantiated."""
        with self.assertRaises(TypeError):
            Quantity(1, LengthUnit.METER)

    def test_immutable(self):
        """Test that attributes cannot be set or deleted."""
        q = Length(1, LengthUnit.METER)
        with self.assertRaises(AttributeError):
            q.value = 2
        with self.assertRaises(AttributeError):
            q._value = 2
        with self.assertRaises(AttributeError):
            del q._unit

    def test_pickle(self):
        """Test that quantities survive pickling."""
        q = Length(3.5, LengthUnit.FOOT)
        restored = pickle.loads(pickle.dumps(q))
        self.assertEqual(restored.value, 3.5)
        self.assertIs(restored.unit, LengthUnit.FOOT)


class TestKindMetadata(unittest.TestCase):
    """Test per-kind class metadata."""

    def test_units_never_contain_undefined(self):
        """Test that no kind lists the UNDEFINED sentinel."""
        for kind in registered_kinds():
            with self.subTest(kind=kind.name):
                self.assertNotIn(kind.unit_type(0), kind.units)
                self.assertEqual(len(kind.units), len(kind.unit_type) - 1)

    def test_length_units(self):
        """Test the unit list of Length."""
        units = Length.units()
        self.assertNotIn(LengthUnit.UNDEFINED, units)
        self.assertEqual(units[0], LengthUnit.METER)
        self.assertIn(LengthUnit.INCH, units)

    def test_base_unit_and_dimensions(self):
        """Test base unit and dimension vector."""
        self.assertIs(Length.base_unit(), LengthUnit.METER)
        self.assertEqual(Length.dimensions(), DimensionVector(length=1))
        self.assertEqual(Speed.dimensions(), Length.dimensions() / Duration.dimensions())

    def test_factories(self):
        """Test zero, extremes and from_unit."""
        self.assertEqual(Length.zero().value, 0.0)
        self.assertIs(Length.zero().unit, LengthUnit.METER)
        self.assertEqual(Length.max_value().value, sys.float_info.max)
        self.assertEqual(Length.min_value().value, -sys.float_info.max)
        self.assertEqual(Length.from_unit(4, LengthUnit.INCH), Length(4, LengthUnit.INCH))

    def test_registry(self):
        """Test that declared kinds are registered."""
        self.assertIs(kind_by_name("Length"), Length.KIND)
        self.assertIs(quantity_type_for(LengthUnit), Length)

    def test_malformed_declarations(self):
        """Test that incomplete kind declarations fail at class creation."""

        class BrokenUnit(Enum):
            UNDEFINED = 0
            ONE = 1
            TWO = 2

        with self.assertRaises(TypeError):
            class MissingFactor(Quantity):
                UNIT = BrokenUnit
                BASE_UNIT = BrokenUnit.ONE
                FACTORS = {BrokenUnit.ONE: 1.0}

        with self.assertRaises(TypeError):
            class BadBase(Quantity):
                UNIT = BrokenUnit
                BASE_UNIT = BrokenUnit.TWO
                FACTORS = {BrokenUnit.ONE: 1.0, BrokenUnit.TWO: 2.0}

        with self.assertRaises(TypeError):
            class NoBase(Quantity):
                UNIT = BrokenUnit
                FACTORS = {BrokenUnit.ONE: 1.0, BrokenUnit.TWO: 2.0}

        with self.assertRaises(TypeError):
            class ForeignAbbreviation(Quantity):
                UNIT = BrokenUnit
                BASE_UNIT = BrokenUnit.ONE
                FACTORS = {BrokenUnit.ONE: 1.0, BrokenUnit.TWO: 2.0}
                ABBREVIATIONS = (("en-US", LengthUnit.METER, ("m",)),)

        self.assertIsNone(quantity_type_for(BrokenUnit))

    def test_conflicting_kind(self):
        """Test that a unit enum cannot back two kinds."""
        with self.assertRaises(TypeError):
            class SecondLength(Quantity):
                UNIT = LengthUnit
                BASE_UNIT = LengthUnit.METER
                FACTORS = Length.FACTORS


class TestConversion(unittest.TestCase):
    """Test unit conversion of quantities."""

    def test_to_same_unit_is_exact(self):
        """Test that same-unit conversion has no drift."""
        q = Length(0.1, LengthUnit.INCH)
        self.assertIs(q.to(LengthUnit.INCH), q.value)

    def test_to(self):
        """Test conversion to another unit."""
        self.assertEqual(Length(1.5, LengthUnit.KILOMETER).to(LengthUnit.METER), 1500.0)

    def test_to_unit(self):
        """Test conversion into a new quantity."""
        q = Length(1, LengthUnit.FOOT).to_unit(LengthUnit.INCH)
        self.assertIsInstance(q, Length)
        self.assertIs(q.unit, LengthUnit.INCH)
        self.assertAlmostEqual(q.value, 12.0)

    def test_as_base(self):
        """Test the value in the base unit."""
        self.assertAlmostEqual(Mass(500, MassUnit.GRAM).as_base(), 0.5)

    def test_to_undefined(self):
        """Test that converting to UNDEFINED fails."""
        with self.assertRaises(UnsupportedUnitError):
            Length(1, LengthUnit.METER).to(LengthUnit.UNDEFINED)


class TestComparison(unittest.TestCase):
    """Test ordering and equality."""

    def test_compare_to(self):
        """Test three-way comparison across units."""
        km = Length(1, LengthUnit.KILOMETER)
        self.assertEqual(km.compare_to(Length(999, LengthUnit.METER)), 1)
        self.assertEqual(km.compare_to(Length(1000, LengthUnit.METER)), 0)
        self.assertEqual(km.compare_to(Length(1001, LengthUnit.METER)), -1)

    def test_compare_to_invalid(self):
        """Test compare_to argument checks."""
        q = Length(1, LengthUnit.METER)
        with self.assertRaises(ArgumentNullError):
            q.compare_to(None)
        with self.assertRaises(InvalidArgumentError):
            q.compare_to(5)
        with self.assertRaises(IncompatibleQuantityError):
            q.compare_to(Mass(1, MassUnit.KILOGRAM))

    def test_ordering_operators(self):
        """Test rich comparison operators and sorting."""
        a = Length(1, LengthUnit.FOOT)
        b = Length(1, LengthUnit.METER)
        c = Length(1, LengthUnit.YARD)
        self.assertTrue(a < b)
        self.assertTrue(b > c)
        self.assertTrue(a <= Length(1, LengthUnit.FOOT))
        self.assertTrue(a >= Length(1, LengthUnit.FOOT))
        self.assertEqual(sorted([b, c, a]), [a, c, b])

    def test_equality_and_hash(self):
        """Test equality in the base unit and consistent hashing."""
        a = Length(1, LengthUnit.KILOMETER)
        b = Length(1000, LengthUnit.METER)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)
        self.assertNotEqual(a, Length(1, LengthUnit.METER))
        self.assertNotEqual(a, 1000)

    def test_equality_across_kinds(self):
        """Test that quantities of different kinds are never equal."""
        length = Length(1, LengthUnit.METER)
        mass = Mass(1, MassUnit.KILOGRAM)
        self.assertNotEqual(length, mass)
        self.assertFalse(length == mass)
        self.assertNotIn(length, [mass])
        self.assertEqual(len({length, mass}), 2)
        self.assertEqual({length: "l", mass: "m"}[mass], "m")

    def test_equality_agrees_with_ordering(self):
        """Test that == and the ordering operators never disagree."""
        a = Length(168.67743760860213, LengthUnit.INCH)
        b = a.to_unit(LengthUnit.DECIMETER)
        for x, y in ((a, b), (b, a)):
            self.assertEqual(x == y, x.compare_to(y) == 0)
            self.assertEqual(x == y, not (x < y or x > y))
            self.assertEqual(x != y, x.compare_to(y) != 0)
            if x == y:
                self.assertEqual(hash(x), hash(y))

    def test_equals_absolute(self):
        """Test tolerance equality in absolute mode."""
        q = Length(1, LengthUnit.METER)
        for tolerance in (0, 1e-12, 1, 1e9):
            self.assertTrue(q.equals(Length(1, LengthUnit.METER), tolerance, ComparisonType.ABSOLUTE))
        self.assertTrue(q.equals(Length(101, LengthUnit.CENTIMETER), 0.011, ComparisonType.ABSOLUTE))
        self.assertFalse(q.equals(Length(102, LengthUnit.CENTIMETER), 0.011, ComparisonType.ABSOLUTE))

    def test_equals_relative(self):
        """Test tolerance equality in relative mode."""
        q = Length(100, LengthUnit.METER)
        self.assertTrue(q.equals(Length(101, LengthUnit.METER), 0.01))
        self.assertFalse(q.equals(Length(102, LengthUnit.METER), 0.01))

    def test_relative_tolerance_is_asymmetric(self):
        """Test that the relative tolerance scales with the left operand."""
        tiny = Length(1e-9, LengthUnit.METER)
        zero = Length(0, LengthUnit.METER)
        self.assertTrue(tiny.equals(zero, 1.0))
        self.assertFalse(zero.equals(tiny, 1.0))

    def test_negative_tolerance(self):
        """Test that a negative tolerance is rejected."""
        q = Length(1, LengthUnit.METER)
        with self.assertRaises(InvalidArgumentError):
            q.equals(q, -0.1, ComparisonType.ABSOLUTE)
        with self.assertRaises(InvalidArgumentError):
            q.equals(q, -0.1, ComparisonType.RELATIVE)


class TestArithmetic(unittest.TestCase):
    """Test arithmetic operators."""

    def test_addition_keeps_left_unit(self):
        """Test that the left operand decides the result unit."""
        km = Length(1, LengthUnit.KILOMETER)
        m = Length(500, LengthUnit.METER)
        left = km + m
        self.assertIs(left.unit, LengthUnit.KILOMETER)
        self.assertEqual(left.value, 1.5)
        right = m + km
        self.assertIs(right.unit, LengthUnit.METER)
        self.assertEqual(right.value, 1500.0)
        self.assertEqual(left, right)

    def test_sum(self):
        """Test that sum() accepts its 0 start value and keeps the first unit."""
        total = sum([Length(1, LengthUnit.KILOMETER), Length(500, LengthUnit.METER)])
        self.assertIs(total.unit, LengthUnit.KILOMETER)
        self.assertEqual(total.value, 1.5)
        self.assertEqual(sum([], Length.zero()), Length.zero())
        with self.assertRaises(TypeError):
            1 + Length(1, LengthUnit.METER)
        with self.assertRaises(IncompatibleQuantityError):
            sum([Length(1, LengthUnit.METER), Mass(1, MassUnit.KILOGRAM)])

    def test_subtraction(self):
        """Test subtraction across units."""
        result = Duration(1, DurationUnit.HOUR) - Duration(30, DurationUnit.MINUTE)
        self.assertIs(result.unit, DurationUnit.HOUR)
        self.assertEqual(result.value, 0.5)

    def test_unary_operators(self):
        """Test negation, plus and abs."""
        q = Length(2, LengthUnit.METER)
        self.assertEqual((-q).value, -2.0)
        self.assertIs(+q, q)
        self.assertEqual(abs(-q).value, 2.0)

    def test_scalar_multiplication_and_division(self):
        """Test scaling by a number on either side."""
        q = Length(2, LengthUnit.FOOT)
        self.assertEqual((q * 3).value, 6.0)
        self.assertEqual((3 * q).value, 6.0)
        self.assertEqual((q / 4).value, 0.5)
        self.assertIs((q / 4).unit, LengthUnit.FOOT)

    def test_quantity_division_is_ratio(self):
        """Test that dividing two quantities yields a float."""
        ratio = Length(1, LengthUnit.KILOMETER) / Length(500, LengthUnit.METER)
        self.assertIsInstance(ratio, float)
        self.assertEqual(ratio, 2.0)

    def test_division_by_zero(self):
        """Test division by a zero scalar."""
        with self.assertRaises(ZeroDivisionError):
            Length(1, LengthUnit.METER) / 0

    def test_incompatible_operands(self):
        """Test that mixing kinds or numbers fails."""
        with self.assertRaises(IncompatibleQuantityError):
            Length(1, LengthUnit.METER) + Mass(1, MassUnit.KILOGRAM)
        with self.assertRaises(TypeError):
            Length(1, LengthUnit.METER) + 1
        with self.assertRaises(TypeError):
            Length(1, LengthUnit.METER) * Length(1, LengthUnit.METER)

    def test_overflow_is_rejected(self):
        """Test that an overflowing result cannot be constructed."""
        with self.assertRaises(NonFiniteValueError):
            Length.max_value() * 2


class TestRepresentation(unittest.TestCase):
    """Test repr and str."""

    def test_repr(self):
        """Test the debug representation."""
        self.assertEqual(repr(Length(2, LengthUnit.METER)), "Length(2.0, LengthUnit.METER)")

    def test_str(self):
        """Test that str uses the default abbreviation."""
        self.assertEqual(str(Length(2, LengthUnit.METER)), "2 m")


if __name__ == '__main__':
    unittest.main()
