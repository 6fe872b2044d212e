"""
Conversions between BigDecimal and Python's native numeric types.

Ints and decimal.Decimal values convert exactly in both directions. Floats are binary
fractions, so converting one to a BigDecimal takes a `FloatConversion` mode that decides
how many of its decimal digits are kept.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from decimal import Decimal
from enum import Enum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .core import BigDecimal
from .digits import count_digits, from_digits
from .formatting import round_trip
from .number_format import NumberStyles
from .parsing import parse
from .pow_cache import POW10, POW5
from .rounding import RoundingMode, divide_int
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class FloatConversion(Enum):
    """
    How a float is turned into decimal digits.

    Attributes:
        ROUNDTRIP:    17 significant digits, enough to identify every float
        TRUNCATE:     15 significant digits, the digits a float reliably stores
        EXACT:        every digit of the binary fraction, e.g. 0.1 has 55 of them
        PARSE_STRING: the shortest digits that repr() prints for the float
    """
    ROUNDTRIP = "roundtrip"
    TRUNCATE = "truncate"
    EXACT = "exact"
    PARSE_STRING = "parse_string"


_FLOAT_PRECISION = {
    FloatConversion.ROUNDTRIP: 17,
    FloatConversion.TRUNCATE: 15,
    FloatConversion.EXACT: 0,
}


# Methods --------------------------------------------------------------------------------------------------------------

def from_float(value: float, mode: FloatConversion = FloatConversion.TRUNCATE) -> BigDecimal:
    """
    Convert a float to a BigDecimal.

    Digits beyond the mode's significant digit count are dropped, not rounded.

    Examples:
        >>> from_float(0.1)
        BigDecimal('0.1')
        >>> from_float(1 / 3, FloatConversion.ROUNDTRIP)
        BigDecimal('0.33333333333333331')
        >>> str(from_float(0.1, FloatConversion.EXACT))
        '0.1000000000000000055511151231257827021181583404541015625'

    Raises:
        TypeError: If value is not a float or mode is not a FloatConversion.
        ValueError: If value is NaN or infinite.
    """
    if not isinstance(value, float):
        raise TypeError(f"value must be float, but got {fmt_type(value)}")
    if not isinstance(mode, FloatConversion):
        raise TypeError(f"mode must be FloatConversion, but got {fmt_type(mode)}")
    if math.isnan(value):
        raise ValueError("NaN cannot be converted to BigDecimal")
    if math.isinf(value):
        raise ValueError(f"infinity cannot be converted to BigDecimal: {fmt_value(value)}")

    if mode is FloatConversion.PARSE_STRING:
        return parse(repr(value), NumberStyles.FLOAT)

    numerator, denominator = value.as_integer_ratio()
    if numerator == 0:
        return BigDecimal.ZERO

    # denominator is 2**k, and n / 2**k == n * 5**k / 10**k
    k = denominator.bit_length() - 1
    mantissa = numerator * POW5.get(k) if k else numerator
    exponent = -k

    precision = _FLOAT_PRECISION[mode]
    if precision:
        extra = count_digits(mantissa) - precision
        if extra > 0:
            mantissa = divide_int(mantissa, POW10.get(extra), RoundingMode.TO_ZERO)
            exponent += extra

    return BigDecimal(mantissa, exponent)


def to_float(value: BigDecimal) -> float:
    """
    Convert to the nearest float through the round-trip text form.

    Magnitudes beyond the float range become infinity, tiny ones become zero.
    """
    if not isinstance(value, BigDecimal):
        raise TypeError(f"value must be BigDecimal, but got {fmt_type(value)}")
    return float(round_trip(value))


def from_decimal(value: Decimal) -> BigDecimal:
    """
    Exact conversion of a finite decimal.Decimal.

    Raises:
        TypeError: If value is not a Decimal.
        ValueError: If value is NaN or infinite.
    """
    if not isinstance(value, Decimal):
        raise TypeError(f"value must be Decimal, but got {fmt_type(value)}")
    if not value.is_finite():
        raise ValueError(f"only finite Decimal values can be converted, but got {fmt_value(value)}")

    sign, digits, exponent = value.as_tuple()
    mantissa = from_digits("".join(map(str, digits)))
    return BigDecimal(-mantissa if sign else mantissa, exponent)


def to_decimal(value: BigDecimal) -> Decimal:
    """Exact conversion to decimal.Decimal, independent of the active decimal context."""
    if not isinstance(value, BigDecimal):
        raise TypeError(f"value must be BigDecimal, but got {fmt_type(value)}")
    return Decimal(round_trip(value))


def from_int(value: int) -> BigDecimal:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"value must be int, but got {fmt_type(value)}")
    return BigDecimal(value)


def to_int(value: BigDecimal) -> int:
    """Integer part of value, truncated toward zero."""
    if not isinstance(value, BigDecimal):
        raise TypeError(f"value must be BigDecimal, but got {fmt_type(value)}")
    return int(value)
