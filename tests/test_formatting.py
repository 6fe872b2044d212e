#
# BigDecimal - Formatting Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bigdecimal.core import BigDecimal, ZERO
from bigdecimal.formatting import format_decimal, group_digits, round_trip
from bigdecimal.number_format import NumberFormat


# Tests ----------------------------------------------------------------------------------------------------------------

class TestGeneral:

    @pytest.mark.parametrize("text, expected", [
        pytest.param("12000", "12000", id="integer"),
        pytest.param("12000.123", "12000.123", id="decimal"),
        pytest.param("-12000.123", "-12000.123", id="negative"),
        pytest.param("0.00123", "0.00123", id="leading_zeros"),
        pytest.param("-0.00123", "-0.00123", id="negative_leading_zeros"),
        pytest.param("120000000000000", "120000000000000", id="large_integer"),
        pytest.param("0", "0", id="zero"),
        pytest.param("1E-30", "0.000000000000000000000000000001", id="tiny_exact"),
    ])
    def test_exact(self, dec, text, expected):
        v = dec(text)
        assert format_decimal(v) == expected
        assert format_decimal(v, "G") == expected
        assert format_decimal(v, "G0") == expected
        assert str(v) == expected

    @pytest.mark.parametrize("text, fmt, expected", [
        pytest.param("12000", "G2", "12000", id="G2_integer"),
        pytest.param("12000000.123", "G2", "1.2E+7", id="G2_exponential"),
        pytest.param("12000.123", "G8", "12000.123", id="G8"),
        pytest.param("12000.123", "G10", "12000.123", id="G10"),
        pytest.param("12000.12345678901234", "G8", "12000.123", id="G8_rounded"),
        pytest.param("12000.12345678901234", "G10", "12000.12346", id="G10_rounded"),
        pytest.param("12000000000.12345", "G8", "1.2E+10", id="G8_large"),
        pytest.param("12000000000.12345", "G10", "1.2E+10", id="G10_large"),
        pytest.param("0.00123", "G3", "0.00123", id="G3_small"),
        pytest.param("-0.00123", "G3", "-0.00123", id="G3_small_negative"),
        pytest.param("0.00123", "G1", "0.001", id="G1_small"),
        pytest.param("-0.00123", "G1", "-0.001", id="G1_small_negative"),
        pytest.param("0.0000000123", "G3", "1.23E-8", id="G3_tiny"),
        pytest.param("-0.00000001", "G1", "-1E-8", id="G1_tiny_negative"),
    ])
    def test_precision(self, dec, text, fmt, expected):
        assert format_decimal(dec(text), fmt) == expected


class TestFixedAndNumber:

    @pytest.mark.parametrize("text, fmt, expected", [
        pytest.param("1", "F", "1.00", id="F_default"),
        pytest.param("1", "F4", "1.0000", id="F4"),
        pytest.param("0.05", "F1", "0.1", id="F1_away"),
        pytest.param("0.05", "F2", "0.05", id="F2"),
        pytest.param("-1000.05", "F0", "-1000", id="F0_negative"),
        pytest.param("-1000.05", "F4", "-1000.0500", id="F4_negative"),
        pytest.param("-0.001", "F2", "0.00", id="F2_rounds_to_zero"),
        pytest.param("1", "N", "1.00", id="N_default"),
        pytest.param("1", "N4", "1.0000", id="N4"),
        pytest.param("0.05", "N1", "0.1", id="N1_away"),
        pytest.param("0.05", "N2", "0.05", id="N2"),
        pytest.param("-1000.05", "N0", "-1,000", id="N0_negative"),
        pytest.param("-1000.05", "N4", "-1,000.0500", id="N4_negative"),
        pytest.param("1234567.891", "N", "1,234,567.89", id="N_grouping"),
        pytest.param("-0.5", "N0", "-1", id="N0_half_away"),
    ])
    def test_invariant(self, dec, text, fmt, expected):
        assert format_decimal(dec(text), fmt) == expected

    @pytest.mark.parametrize("pattern, expected", [
        pytest.param(0, "(1,234.50)", id="parentheses"),
        pytest.param(1, "-1,234.50", id="leading"),
        pytest.param(2, "- 1,234.50", id="leading_space"),
        pytest.param(3, "1,234.50-", id="trailing"),
        pytest.param(4, "1,234.50 -", id="trailing_space"),
    ])
    def test_number_negative_pattern(self, dec, pattern, expected):
        nf = NumberFormat(number_negative_pattern=pattern)
        assert format_decimal(dec("-1234.5"), "N", nf) == expected

    def test_locale_separators(self, dec, de_format):
        assert format_decimal(dec("1234567.891"), "N", de_format) == "1.234.567,89"
        assert format_decimal(dec("1234567.891"), "F3", de_format) == "1234567,891"
        assert format_decimal(dec("-0.5"), "G", de_format) == "-0,5"

    @pytest.mark.parametrize("sizes, expected", [
        pytest.param((3,), "1,234,567,890.00", id="threes"),
        pytest.param((3, 2), "1,23,45,67,890.00", id="indian"),
        pytest.param((3, 0), "1234567,890.00", id="stop_after_first"),
        pytest.param((), "1234567890.00", id="no_grouping"),
    ])
    def test_group_sizes(self, sizes, expected):
        nf = NumberFormat(number_group_sizes=sizes)
        assert format_decimal(BigDecimal(1234567890), "N", nf) == expected


class TestExponential:

    @pytest.mark.parametrize("text, fmt, expected", [
        pytest.param("12000.123", "E", "1.200012E+4", id="default_six"),
        pytest.param("12000.123", "E2", "1.20E+4", id="two"),
        pytest.param("-0.00123", "E1", "-1.2E-3", id="negative"),
        pytest.param("9999", "E2", "1.00E+4", id="carry"),
        pytest.param("1.25", "E1", "1.3E+0", id="half_away"),
        pytest.param("5", "E0", "5E+0", id="no_fraction"),
        pytest.param("0", "E2", "0.00E+0", id="zero"),
        pytest.param("1E100", "e3", "1.000E+100", id="lowercase_specifier"),
    ])
    def test_exponential(self, dec, text, fmt, expected):
        assert format_decimal(dec(text), fmt) == expected


class TestCurrency:

    @pytest.mark.parametrize("text, fmt, expected", [
        pytest.param("12000", "C", "¤12,000.00", id="default"),
        pytest.param("0.123456", "C", "¤0.12", id="rounded"),
        pytest.param("12000", "C4", "¤12,000.0000", id="C4"),
        pytest.param("-12000", "C", "(¤12,000.00)", id="negative"),
        pytest.param("-0.123456", "C", "(¤0.12)", id="negative_rounded"),
        pytest.param("-12000", "C4", "(¤12,000.0000)", id="negative_C4"),
        pytest.param("12000", "C0", "¤12,000", id="C0"),
        pytest.param("-12000", "C0", "(¤12,000)", id="negative_C0"),
    ])
    def test_invariant(self, dec, text, fmt, expected):
        assert format_decimal(dec(text), fmt) == expected

    @pytest.mark.parametrize("pattern, expected", [
        pytest.param(1, "-$5.00", id="1"),
        pytest.param(5, "-5.00$", id="5"),
        pytest.param(8, "-5.00 $", id="8"),
        pytest.param(12, "$ -5.00", id="12"),
        pytest.param(16, "$- 5.00", id="16"),
    ])
    def test_negative_patterns(self, dec, pattern, expected):
        nf = NumberFormat(currency_symbol="$", currency_negative_pattern=pattern)
        assert format_decimal(dec("-5"), "C", nf) == expected

    def test_positive_pattern_and_locale(self, dec, de_format):
        assert format_decimal(dec("1234.5"), "C", de_format) == "1.234,50 €"
        assert format_decimal(dec("-1234.5"), "C", de_format) == "-1.234,50 €"


class TestPercent:

    @pytest.mark.parametrize("text, fmt, expected", [
        pytest.param("0.50", "P", "50.00 %", id="default"),
        pytest.param("-0.50", "P0", "-50 %", id="negative_P0"),
        pytest.param("120", "P", "12,000.00 %", id="grouped"),
        pytest.param("0.00123456", "P", "0.12 %", id="rounded"),
        pytest.param("120", "P4", "12,000.0000 %", id="P4"),
        pytest.param("-120", "P", "-12,000.00 %", id="negative"),
        pytest.param("-0.00123456", "P", "-0.12 %", id="negative_rounded"),
        pytest.param("-120", "P4", "-12,000.0000 %", id="negative_P4"),
        pytest.param("120", "P0", "12,000 %", id="P0"),
        pytest.param("-120", "P0", "-12,000 %", id="negative_P0_grouped"),
    ])
    def test_invariant(self, dec, text, fmt, expected):
        assert format_decimal(dec(text), fmt) == expected

    @pytest.mark.parametrize("positive, negative, expected", [
        pytest.param(1, 1, ("50%", "-50%"), id="no_space"),
        pytest.param(2, 2, ("%50", "-%50"), id="symbol_first"),
        pytest.param(3, 11, ("% 50", "50- %"), id="symbol_space"),
    ])
    def test_patterns(self, dec, positive, negative, expected):
        nf = NumberFormat(percent_positive_pattern=positive, percent_negative_pattern=negative)
        assert format_decimal(dec("0.5"), "P0", nf) == expected[0]
        assert format_decimal(dec("-0.5"), "P0", nf) == expected[1]

    def test_unsupported_patterns(self, dec):
        with pytest.raises(NotImplementedError, match="positive percent pattern"):
            format_decimal(dec("0.5"), "P", NumberFormat(percent_positive_pattern=4))
        with pytest.raises(NotImplementedError, match="negative percent pattern"):
            format_decimal(dec("0.5"), "P", NumberFormat(percent_negative_pattern=12))


class TestRoundTripAndSpecifiers:

    @pytest.mark.parametrize("text, expected", [
        pytest.param("12000", "12E3", id="positive_exponent"),
        pytest.param("-0.0125", "-125E-4", id="negative_exponent"),
        pytest.param("42", "42", id="zero_exponent"),
        pytest.param("0", "0", id="zero"),
    ])
    def test_round_trip(self, dec, text, expected):
        assert format_decimal(dec(text), "R") == expected
        assert round_trip(dec(text)) == expected

    def test_round_trip_ignores_locale(self, dec):
        nf = NumberFormat(negative_sign="~")
        assert format_decimal(dec("-1.5"), "R", nf) == "-15E-1"

    @pytest.mark.parametrize("fmt", [" f2 ", "F2", "f2"])
    def test_specifier_normalization(self, dec, fmt):
        assert format_decimal(dec("1.005"), fmt) == "1.01"

    @pytest.mark.parametrize("fmt", ["", "   ", None])
    def test_empty_is_general(self, dec, fmt):
        assert format_decimal(dec("1.5"), fmt) == "1.5"

    @pytest.mark.parametrize("fmt", ["F-1", "Gx", "N1.5", "C 2"])
    def test_invalid_precision(self, dec, fmt):
        with pytest.raises(ValueError, match="Invalid precision specifier"):
            format_decimal(dec("1"), fmt)

    @pytest.mark.parametrize("fmt", ["X", "D2", "%"])
    def test_invalid_specifier(self, dec, fmt):
        with pytest.raises(ValueError, match="Format specifier was invalid"):
            format_decimal(dec("1"), fmt)

    def test_type_errors(self, dec):
        with pytest.raises(TypeError, match="value"):
            format_decimal(1.5)
        with pytest.raises(TypeError, match="fmt"):
            format_decimal(ZERO, 2)
        with pytest.raises(TypeError, match="number_format"):
            format_decimal(ZERO, "G", "invariant")

    def test_beyond_str_limit(self, low_str_digits):
        v = BigDecimal(10 ** 2000 + 1, -1000)
        s = format_decimal(v)
        assert len(s) == 2002
        assert s.startswith("1" + "0" * 999) and s.endswith(".000" + "0" * 996 + "1")


class TestGroupDigits:

    @pytest.mark.parametrize("digits, sizes, expected", [
        pytest.param("1", (3,), "1", id="short"),
        pytest.param("123", (3,), "123", id="exact_group"),
        pytest.param("1234", (3,), "1,234", id="one_separator"),
        pytest.param("123456789", (3, 2), "12,34,56,789", id="mixed"),
        pytest.param("123456789", (3, 0), "123456,789", id="stop"),
        pytest.param("123456789", (1,), "1,2,3,4,5,6,7,8,9", id="ones"),
    ])
    def test_group_digits(self, digits, sizes, expected):
        assert group_digits(digits, ",", sizes) == expected

    def test_empty_separator(self):
        assert group_digits("123456", "", (3,)) == "123456"
