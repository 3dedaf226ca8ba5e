"""Tests for parsing, validation, conversion and formatting."""

import itertools

import pytest
from kitchen_converter.core.engine.conversion import CategoryMismatchError, convert
from kitchen_converter.core.engine.engine import ConversionEngine
from kitchen_converter.core.engine.formatting import fraction_digits_for, format_result
from kitchen_converter.core.engine.number_format import (
    LocaleNumberFormat,
    UnknownLocaleError,
    get_number_format,
)
from kitchen_converter.core.engine.parsing import (
    NO_INPUT,
    InputStatus,
    ParseError,
    ValidationError,
    check_input,
    parse_amount,
    validate,
)
from kitchen_converter.utils.units import UnitCategory, base_unit, get_unit, units_for

EN = get_number_format("en_US")
DE = get_number_format("de_DE")
FR = get_number_format("fr_FR")


def _pairs(category):
    return list(itertools.product(units_for(category), repeat=2))


ALL_PAIRS = _pairs(UnitCategory.VOLUME) + _pairs(UnitCategory.MASS)


class TestParseAmount:
    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_is_no_input(self, text):
        assert parse_amount(text, EN) is NO_INPUT

    @pytest.mark.parametrize("text, expected", [
        ("2", 2.0),
        ("2.5", 2.5),
        (" 3 ", 3.0),
        ("-3", -3.0),
        ("+4", 4.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1,234.5", 1234.5),
        ("1,000,000", 1_000_000.0),
    ])
    def test_valid_en_us(self, text, expected):
        assert parse_amount(text, EN) == expected

    @pytest.mark.parametrize("text", [
        "abc", "1e3", "nan", "inf", ".", "-", "1.2.3", "1,2", "12,34,567", "2 cups",
        "\u0663", "\uff11\uff12", "1.\u0665",
    ])
    def test_invalid_en_us(self, text):
        with pytest.raises(ParseError) as exc_info:
            parse_amount(text, EN)
        assert exc_info.value.code == "InvalidFormat"
        assert exc_info.value.message == "Enter a valid number"

    def test_decimal_comma(self):
        assert parse_amount("2,5", DE) == 2.5
        assert parse_amount("1.234,5", DE) == 1234.5

    def test_decimal_point_rejected_in_comma_locale(self):
        with pytest.raises(ParseError):
            parse_amount("2.5", DE)

    def test_french_grouping(self):
        assert parse_amount("1\u202f234,5", FR) == 1234.5

    def test_overflowing_digits_rejected(self):
        with pytest.raises(ParseError):
            parse_amount("9" * 400, EN)


class TestValidate:
    def test_negative(self):
        value = parse_amount("-3", EN)
        assert value == -3
        with pytest.raises(ValidationError) as exc_info:
            validate(value)
        assert exc_info.value.code == "Negative"
        assert exc_info.value.message == "Enter a non-negative amount"

    @pytest.mark.parametrize("value", [0.0, -0.0, 1e12])
    def test_accepted(self, value):
        validate(value)

    def test_check_input_states(self):
        assert check_input("", EN)[0] is InputStatus.EMPTY
        assert check_input("x", EN)[0] is InputStatus.INVALID
        assert check_input("-1", EN)[0] is InputStatus.INVALID
        status, value, error = check_input("1.5", EN)
        assert status is InputStatus.VALID
        assert value == 1.5
        assert error is None


class TestConvert:
    @pytest.mark.parametrize("a, b", ALL_PAIRS, ids=lambda u: u.id)
    def test_round_trip(self, a, b):
        for v in (0.0, 0.5, 2.25, 1000.0, 123456.789):
            assert convert(convert(v, a, b), b, a) == pytest.approx(v, rel=1e-12)

    @pytest.mark.parametrize("unit", units_for(UnitCategory.VOLUME) + units_for(UnitCategory.MASS), ids=lambda u: u.id)
    def test_identity_is_exact(self, unit):
        assert convert(0.1 + 0.2, unit, unit) == 0.1 + 0.2

    @pytest.mark.parametrize("category", list(UnitCategory))
    def test_one_unit_in_base(self, category):
        base = base_unit(category)
        for unit in units_for(category):
            assert convert(1, unit, base) == unit.factor_to_base

    def test_cups_to_ml(self):
        cup = get_unit(UnitCategory.VOLUME, "cup")
        ml = get_unit(UnitCategory.VOLUME, "ml")
        assert convert(2, cup, ml) == pytest.approx(473.176)

    def test_pounds_to_ounces(self):
        lb = get_unit(UnitCategory.MASS, "lb")
        oz = get_unit(UnitCategory.MASS, "oz")
        assert convert(1, lb, oz) == pytest.approx(16.0, rel=1e-4)

    def test_cross_category_rejected(self):
        cup = get_unit(UnitCategory.VOLUME, "cup")
        g = get_unit(UnitCategory.MASS, "g")
        with pytest.raises(CategoryMismatchError, match="volume unit 'cup' to mass unit 'g'"):
            convert(1, cup, g)


class TestFormatResult:
    @pytest.mark.parametrize("value, expected", [
        (1234.5, "1,235"),
        (12.345, "12.35"),
        (5.6789, "5.679"),
        (0.123456, "0.1235"),
        (473.176, "473.18"),
        (1_234_567.891, "1,234,568"),
        (1000.0, "1,000"),
        (999.999, "1,000"),
        (2.5, "2.5"),
        (10.0, "10"),
        (-12.345, "-12.35"),
    ])
    def test_en_us(self, value, expected):
        assert format_result(value, EN) == expected

    @pytest.mark.parametrize("value", [0.0, -0.0, -0.00001])
    def test_zero_renders_plain(self, value):
        assert format_result(value, EN) == "0"

    def test_digit_buckets(self):
        assert fraction_digits_for(5000) == 0
        assert fraction_digits_for(-50) == 2
        assert fraction_digits_for(5) == 3
        assert fraction_digits_for(0.5) == 4
        assert fraction_digits_for(0) == 4

    def test_de_de(self):
        assert format_result(1234.5, DE) == "1.235"
        assert format_result(12.345, DE) == "12,35"

    def test_fr_fr(self):
        assert format_result(1234.5, FR) == "1\u202f235"

    def test_injected_format(self):
        fmt = LocaleNumberFormat("test", "·", "_")
        assert format_result(1234567.0, fmt) == "1_234_567"
        assert format_result(0.5, fmt) == "0·5"

    def test_huge_value(self):
        assert format_result(1e30, EN).startswith("1,000,000,000,000,000,0")

    def test_infinite(self):
        assert format_result(float("inf"), EN) == "∞"


class TestLocales:
    @pytest.mark.parametrize("name", ["en_US", "en-US", "EN_us", " en-us "])
    def test_lookup_normalizes(self, name):
        assert get_number_format(name).name == "en_US"

    def test_unknown(self):
        with pytest.raises(UnknownLocaleError, match="xx_YY"):
            get_number_format("xx_YY")


class TestConversionEngine:
    def setup_method(self):
        self.engine = ConversionEngine(EN)
        self.cup = self.engine.get_unit(UnitCategory.VOLUME, "cup")
        self.ml = self.engine.base_unit(UnitCategory.VOLUME)

    def test_end_to_end(self):
        view = self.engine.result_text("2", self.cup, self.ml)
        assert view.result_text == "473.18 ml"
        assert view.error_text is None
        assert view.status is InputStatus.VALID
        assert view.value == pytest.approx(473.176)

    def test_no_input(self):
        view = self.engine.result_text("  ", self.cup, self.ml)
        assert view.result_text == "—"
        assert view.error_text is None
        assert view.status is InputStatus.EMPTY

    def test_invalid_input(self):
        view = self.engine.result_text("abc", self.cup, self.ml)
        assert view.result_text == "—"
        assert view.error_text == "Enter a valid number"

    def test_negative_input(self):
        view = self.engine.result_text("-3", self.cup, self.ml)
        assert view.result_text == "—"
        assert view.error_text == "Enter a non-negative amount"

    def test_custom_placeholder(self):
        engine = ConversionEngine(EN, placeholder="--")
        assert engine.result_text("", self.cup, self.ml).result_text == "--"

    def test_locale_injected(self):
        engine = ConversionEngine(DE)
        kg = engine.get_unit(UnitCategory.MASS, "kg")
        g = engine.base_unit(UnitCategory.MASS)
        assert engine.result_text("2,5", kg, g).result_text == "2.500 g"
