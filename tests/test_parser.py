"""
Tests for unit and quantity parsing.
"""

import unittest
from concurrent.futures import ThreadPoolExecutor
from enum import Enum

from measurekit.errors import (
    AmbiguousUnitError,
    ArgumentNullError,
    MeasureKitError,
    NonFiniteValueError,
    QuantityFormatError,
    UnrecognizedUnitError,
)
from measurekit.quantities import Duration, DurationUnit, Length, LengthUnit, Mass, MassUnit
from measurekit.text.abbreviations import UnitAbbreviationsCache
from measurekit.text.parser import QuantityParser, UnitParser
from measurekit.unit.quantity import Quantity


class GadgetUnit(Enum):
    UNDEFINED = 0
    SMALL = 1
    LARGE = 2


class Gadget(Quantity):
    UNIT = GadgetUnit
    BASE_UNIT = GadgetUnit.SMALL
    FACTORS = {GadgetUnit.SMALL: 1.0, GadgetUnit.LARGE: 10.0}


class TestUnitParser(unittest.TestCase):
    """Test UnitParser class."""

    def setUp(self):
        """Set up a parser over an empty registry."""
        self.cache = UnitAbbreviationsCache(load_builtin=False)
        self.parser = UnitParser(self.cache)

    def test_unique_abbreviation(self):
        """Test that a single registration parses deterministically."""
        self.cache.register(GadgetUnit, GadgetUnit.SMALL, "en-US", ["g"])
        self.assertIs(self.parser.parse("g", GadgetUnit), GadgetUnit.SMALL)
        self.assertIs(self.parser.parse("  g ", GadgetUnit), GadgetUnit.SMALL)

    def test_ambiguous_abbreviation(self):
        """Test that two units sharing an abbreviation are rejected."""
        self.cache.register(GadgetUnit, GadgetUnit.SMALL, "en-US", ["g"])
        self.cache.register(GadgetUnit, GadgetUnit.LARGE, "en-US", ["g"])
        with self.assertRaises(AmbiguousUnitError) as ctx:
            self.parser.parse("g", GadgetUnit)
        self.assertEqual(ctx.exception.candidates, (GadgetUnit.SMALL, GadgetUnit.LARGE))
        self.assertIn("GadgetUnit.LARGE", str(ctx.exception))

    def test_duplicate_registration_is_not_ambiguous(self):
        """Test that registering one unit twice still parses."""
        self.cache.register(GadgetUnit, GadgetUnit.LARGE, "en-US", ["G"])
        self.cache.register(GadgetUnit, GadgetUnit.LARGE, "en-US", ["G"])
        self.assertIs(self.parser.parse("G", GadgetUnit), GadgetUnit.LARGE)

    def test_fallback_culture(self):
        """Test that a unit registered only in en-US is found from another culture."""
        self.cache.register(GadgetUnit, GadgetUnit.SMALL, "en-US", ["sm"])
        self.assertIs(self.parser.parse("sm", GadgetUnit, "fr-FR"), GadgetUnit.SMALL)

    def test_unrecognized(self):
        """Test an abbreviation registered nowhere."""
        with self.assertRaises(UnrecognizedUnitError) as ctx:
            self.parser.parse("zz", GadgetUnit, "fr-FR")
        self.assertEqual(ctx.exception.abbreviation, "zz")
        self.assertIs(ctx.exception.unit_type, GadgetUnit)
        self.assertEqual(ctx.exception.culture, "fr-FR")

    def test_null_and_blank(self):
        """Test None and whitespace-only input."""
        with self.assertRaises(ArgumentNullError):
            self.parser.parse(None, GadgetUnit)
        with self.assertRaises(QuantityFormatError):
            self.parser.parse("   ", GadgetUnit)

    def test_try_parse(self):
        """Test that try_parse never raises."""
        self.cache.register(GadgetUnit, GadgetUnit.SMALL, "en-US", ["g"])
        ok, unit = self.parser.try_parse("g", GadgetUnit)
        self.assertTrue(ok)
        self.assertIs(unit, GadgetUnit.SMALL)

        for text in (None, "", "  ", "zz"):
            with self.subTest(text=text):
                result = self.parser.try_parse(text, GadgetUnit)
                self.assertFalse(result)
                self.assertIs(result.value, GadgetUnit.UNDEFINED)

        self.assertIsInstance(self.parser.try_parse("zz", GadgetUnit).error, UnrecognizedUnitError)

    def test_try_parse_non_string(self):
        """Test that non-string input fails without raising."""
        for value in (5, 2.5, b"g", ["g"]):
            with self.subTest(value=value):
                result = self.parser.try_parse(value, GadgetUnit)
                self.assertFalse(result)
                self.assertIs(result.value, GadgetUnit.UNDEFINED)
                self.assertIsNone(result.error)

    def test_default_is_shared_across_threads(self):
        """Test that concurrent first calls to default() agree on one instance."""
        with ThreadPoolExecutor(max_workers=8) as pool:
            parsers = list(pool.map(lambda _: UnitParser.default(), range(32)))
            quantity_parsers = list(pool.map(lambda _: QuantityParser.default(), range(32)))
        self.assertEqual(len({id(p) for p in parsers}), 1)
        self.assertEqual(len({id(p) for p in quantity_parsers}), 1)
        self.assertIs(parsers[0], UnitParser.default())
        self.assertIs(quantity_parsers[0], QuantityParser.default())


class TestQuantityParser(unittest.TestCase):
    """Test QuantityParser over built-in kinds."""

    def test_simple(self):
        """Test a single number and unit."""
        q = Length.parse("5.5 m")
        self.assertEqual(q.value, 5.5)
        self.assertIs(q.unit, LengthUnit.METER)

    def test_optional_space(self):
        """Test that the space between number and unit is optional."""
        self.assertEqual(Length.parse("5m").value, 5.0)
        self.assertIs(Length.parse("5km").unit, LengthUnit.KILOMETER)
        self.assertEqual(Length.parse("  7 cm  ").value, 7.0)

    def test_number_forms(self):
        """Test signs, exponents, leading separators and grouping."""
        self.assertEqual(Length.parse("-5 m").value, -5.0)
        self.assertEqual(Length.parse("+5 m").value, 5.0)
        self.assertEqual(Length.parse("1e3 m").value, 1000.0)
        self.assertEqual(Length.parse("2.5E-2 m").value, 0.025)
        self.assertEqual(Length.parse(".5 m").value, 0.5)
        self.assertEqual(Length.parse("1,000.5 m").value, 1000.5)

    def test_longest_abbreviation_wins(self):
        """Test that "mi" and "mm" are not read as "m"."""
        self.assertIs(Length.parse("3 mi").unit, LengthUnit.MILE)
        self.assertIs(Length.parse("3 mm").unit, LengthUnit.MILLIMETER)
        self.assertIs(Duration.parse("3 ms").unit, DurationUnit.MILLISECOND)
        self.assertIs(Duration.parse("3 min").unit, DurationUnit.MINUTE)

    def test_compound(self):
        """Test that segments are summed in the first segment's unit."""
        q = Length.parse("1 m 100 cm")
        self.assertIs(q.unit, LengthUnit.METER)
        self.assertEqual(q.value, 2.0)

    def test_compound_feet_and_inches(self):
        """Test the feet-and-inches forms."""
        q = Length.parse("1 ft 2 in")
        self.assertIs(q.unit, LengthUnit.FOOT)
        self.assertAlmostEqual(q.to(LengthUnit.INCH), 14.0)
        self.assertAlmostEqual(Length.parse("5' 11\"").to(LengthUnit.INCH), 71.0)
        self.assertAlmostEqual(Length.parse("5'11\"").to(LengthUnit.INCH), 71.0)
        self.assertAlmostEqual(Duration.parse("1 h 30 min").to(DurationUnit.MINUTE), 90.0)

    def test_cultures(self):
        """Test culture-specific separators and abbreviations."""
        q = Length.parse("1,5 м", "ru-RU")
        self.assertEqual(q.value, 1.5)
        self.assertIs(q.unit, LengthUnit.METER)
        self.assertEqual(Length.parse("1\u00a0000,5 км", "ru-RU").value, 1000.5)
        self.assertEqual(Mass.parse("1.250,5 kg", "de-DE").value, 1250.5)
        self.assertIs(Duration.parse("1,5 t", "nb-NO").unit, DurationUnit.HOUR)

    def test_fallback_abbreviations(self):
        """Test that en-US abbreviations parse under other cultures."""
        q = Length.parse("2,5 km", "ru-RU")
        self.assertEqual(q.value, 2.5)
        self.assertIs(q.unit, LengthUnit.KILOMETER)
        self.assertIs(Mass.parse("3 lb", "ja-JP").unit, MassUnit.POUND)

    def test_format_errors(self):
        """Test structurally invalid text."""
        for text in ("", "   ", "m", "5", "5 m 3", "1.2.3 m", "1,5 m", "m 5"):
            with self.subTest(text=text):
                with self.assertRaises(QuantityFormatError) as ctx:
                    Length.parse(text)
                self.assertEqual(ctx.exception.text, text)

    def test_unrecognized_unit(self):
        """Test a well-formed number followed by an unknown unit."""
        with self.assertRaises(UnrecognizedUnitError) as ctx:
            Length.parse("5 parsecs")
        self.assertEqual(ctx.exception.abbreviation, "parsecs")
        with self.assertRaises(UnrecognizedUnitError):
            Length.parse("5 mx")
        with self.assertRaises(UnrecognizedUnitError):
            Length.parse("5 kg")

    def test_null(self):
        """Test None input."""
        with self.assertRaises(ArgumentNullError):
            Length.parse(None)

    def test_overflow(self):
        """Test that an overflowing number is rejected."""
        with self.assertRaises(NonFiniteValueError):
            Length.parse("1e999 m")

    def test_errors_share_base(self):
        """Test that parse errors are MeasureKitError and ValueError."""
        with self.assertRaises(MeasureKitError):
            Length.parse("5 parsecs")
        with self.assertRaises(ValueError):
            Length.parse("5 parsecs")

    def test_try_parse(self):
        """Test try_parse success and failure defaults."""
        ok, q = Length.try_parse("5 m")
        self.assertTrue(ok)
        self.assertEqual(q, Length(5, LengthUnit.METER))

        for text in (None, "", "garbage", "5 parsecs", "1e999 m"):
            with self.subTest(text=text):
                result = Length.try_parse(text)
                self.assertFalse(result.success)
                self.assertEqual(result.value, Length.zero())
                self.assertIs(result.value.unit, LengthUnit.METER)

        self.assertIsNone(Length.try_parse(None).error)
        self.assertIsInstance(Length.try_parse("garbage").error, QuantityFormatError)

    def test_try_parse_non_string(self):
        """Test that non-string input yields the zero default."""
        for value in (5, 2.5, object()):
            with self.subTest(value=value):
                result = Length.try_parse(value)
                self.assertFalse(result.success)
                self.assertEqual(result.value, Length.zero())
                self.assertIsNone(result.error)

    def test_parse_unit(self):
        """Test standalone unit parsing on a quantity type."""
        self.assertIs(Length.parse_unit("km"), LengthUnit.KILOMETER)
        self.assertIs(Length.parse_unit("м", "ru-RU"), LengthUnit.METER)
        self.assertIs(Length.parse_unit("'"), LengthUnit.FOOT)
        with self.assertRaises(UnrecognizedUnitError):
            Length.parse_unit("kg")
        ok, unit = Length.try_parse_unit("")
        self.assertFalse(ok)
        self.assertIs(unit, LengthUnit.UNDEFINED)

    def test_custom_registry(self):
        """Test a parser bound to its own registry."""
        cache = UnitAbbreviationsCache(load_builtin=False)
        cache.register(GadgetUnit, GadgetUnit.SMALL, "en-US", ["gs"])
        cache.register(GadgetUnit, GadgetUnit.LARGE, "en-US", ["gl"])
        parser = QuantityParser(cache)
        q = parser.parse("1 gl 5 gs", Gadget)
        self.assertIs(q.unit, GadgetUnit.LARGE)
        self.assertEqual(q.value, 1.5)
        self.assertEqual(parser.tokenize("1 gl 5 gs", GadgetUnit, cache.fallback_culture), [(1.0, "gl"), (5.0, "gs")])

        cache.register(GadgetUnit, GadgetUnit.LARGE, "en-US", ["gs"])
        with self.assertRaises(AmbiguousUnitError):
            parser.parse("5 gs", Gadget)
        result = parser.try_parse("5 gs", Gadget)
        self.assertFalse(result)
        self.assertIsInstance(result.error, AmbiguousUnitError)

    def test_unregistered_kind(self):
        """Test parsing a kind that has no abbreviations at all."""
        with self.assertRaises(UnrecognizedUnitError):
            Gadget.parse("5 gs")


if __name__ == '__main__':
    unittest.main()
