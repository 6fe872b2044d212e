"""
Rounding modes and integer division under a rounding mode.

Every rounding decision in the package (value rounding, extended-precision division,
formatting) ends up in `divide_int()`.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class RoundingMode(Enum):
    """
    Rules for choosing between the two integers that bracket an inexact quotient.

    Midpoint modes round to the nearest candidate and only use their named rule to break
    exact ties. Directed modes always move in their named direction.

    Attributes:
        MIDPOINT_TO_EVEN:              nearest, ties to the even candidate    2.5 -> 2, 3.5 -> 4
        MIDPOINT_AWAY_FROM_ZERO:       nearest, ties away from zero           2.5 -> 3, -2.5 -> -3
        MIDPOINT_TO_ZERO:              nearest, ties toward zero              2.5 -> 2, -2.5 -> -2
        MIDPOINT_TO_NEGATIVE_INFINITY: nearest, ties toward -inf              2.5 -> 2, -2.5 -> -3
        MIDPOINT_TO_POSITIVE_INFINITY: nearest, ties toward +inf              2.5 -> 3, -2.5 -> -2
        TO_ZERO:                       truncate                               2.7 -> 2, -2.7 -> -2
        TO_NEGATIVE_INFINITY:          floor                                  2.7 -> 2, -2.2 -> -3
        TO_POSITIVE_INFINITY:          ceiling                                2.2 -> 3, -2.7 -> -2
    """
    MIDPOINT_TO_EVEN = "midpoint_to_even"
    MIDPOINT_AWAY_FROM_ZERO = "midpoint_away_from_zero"
    MIDPOINT_TO_ZERO = "midpoint_to_zero"
    MIDPOINT_TO_NEGATIVE_INFINITY = "midpoint_to_negative_infinity"
    MIDPOINT_TO_POSITIVE_INFINITY = "midpoint_to_positive_infinity"
    TO_ZERO = "to_zero"
    TO_NEGATIVE_INFINITY = "to_negative_infinity"
    TO_POSITIVE_INFINITY = "to_positive_infinity"
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def divide_int(dividend: int, divisor: int, mode: RoundingMode) -> int:
    """
    Divide two ints and round the quotient with the given mode.

    The quotient magnitude is computed by truncation, then bumped by one when the mode
    asks to move away from zero. Midpoint modes classify the discarded remainder by
    comparing `2*|remainder|` against `|divisor|`, so a quotient that lies beyond the last
    digit of the dividend (e.g. 5 / 10**1) still gets the midpoint test.

    Examples:
        >>> divide_int(25, 10, RoundingMode.MIDPOINT_TO_EVEN)
        2
        >>> divide_int(-25, 10, RoundingMode.MIDPOINT_AWAY_FROM_ZERO)
        -3
        >>> divide_int(1, 3, RoundingMode.TO_POSITIVE_INFINITY)
        1

    Raises:
        ZeroDivisionError: If divisor is zero.
        TypeError: If mode is not a RoundingMode.
    """
    if not isinstance(mode, RoundingMode):
        raise TypeError(f"mode must be RoundingMode, but got {fmt_type(mode)}")
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")

    negative = (dividend < 0) != (divisor < 0)
    quotient, remainder = divmod(abs(dividend), abs(divisor))

    if remainder and _away_from_zero(quotient, remainder, abs(divisor), negative, mode):
        quotient += 1

    return -quotient if negative else quotient


def _away_from_zero(quotient: int, remainder: int, divisor: int, negative: bool, mode: RoundingMode) -> bool:
    """Decide whether a non-zero remainder bumps the truncated quotient magnitude."""
    if mode is RoundingMode.TO_ZERO:
        return False
    if mode is RoundingMode.TO_NEGATIVE_INFINITY:
        return negative
    if mode is RoundingMode.TO_POSITIVE_INFINITY:
        return not negative

    doubled = remainder * 2
    if doubled != divisor:
        return doubled > divisor

    # Exact midpoint
    if mode is RoundingMode.MIDPOINT_TO_EVEN:
        return quotient % 2 == 1
    if mode is RoundingMode.MIDPOINT_AWAY_FROM_ZERO:
        return True
    if mode is RoundingMode.MIDPOINT_TO_ZERO:
        return False
    if mode is RoundingMode.MIDPOINT_TO_NEGATIVE_INFINITY:
        return negative
    if mode is RoundingMode.MIDPOINT_TO_POSITIVE_INFINITY:
        return not negative

    raise NotImplementedError(f"unsupported rounding mode {fmt_value(mode)}")
