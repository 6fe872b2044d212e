"""
Arbitrary-precision decimal value type.

A `BigDecimal` is an immutable `mantissa * 10**exponent` pair kept in a canonical form:
the mantissa carries no trailing zero digits and zero is always `(0, 0)`. Addition,
subtraction and multiplication are exact; division is exact whenever the quotient
terminates and falls back to a bounded extended precision otherwise.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import sys
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .digits import digits_and_trailing_zeros
from .number_format import NumberFormat, NumberStyles
from .pow_cache import MAX_CACHED_POWER, POW10
from .rounding import RoundingMode, divide_int
from .utils import class_name, fmt_type, fmt_value

logger = logging.getLogger(__name__)

# Numeric hash parameters shared with int, float, Fraction and Decimal
_PyHASH_MODULUS = sys.hash_info.modulus
_PyHASH_10INV = pow(10, _PyHASH_MODULUS - 2, _PyHASH_MODULUS)


# Classes --------------------------------------------------------------------------------------------------------------

class DecimalConf:
    """
    Default configuration constants for BigDecimal arithmetic.

    Attributes:
        MAX_EXTENDED_DIVISION_PRECISION: Significant digits kept by the `/` operator when
            the quotient does not terminate. Explicit `divide()` calls take their own bound.

        POW_CACHE_SIZE: Largest memoized exponent of the shared power caches. Shifts by
            more digits than this are computed on every use.

        DEFAULT_MODE: Rounding mode used by `/`, `round()` and friends when none is given.
    """
    MAX_EXTENDED_DIVISION_PRECISION: int = 50
    POW_CACHE_SIZE: int = MAX_CACHED_POWER
    DEFAULT_MODE: RoundingMode = RoundingMode.MIDPOINT_TO_EVEN


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class BigDecimal:
    """
    Immutable arbitrary-precision decimal number, `mantissa * 10**exponent`.

    The constructor normalizes its input: trailing zero digits of the mantissa move into
    the exponent and the significant digit count is stored in `precision`. Two values are
    equal exactly when their normalized mantissas and exponents match.

    Operands of type int and decimal.Decimal are accepted by every operator and converted
    exactly; float and bool operands are refused, use `BigDecimal.from_float()` to choose
    how a float is converted.

    Examples:
        >>> BigDecimal(12000)
        BigDecimal('12000')
        >>> BigDecimal(12000).mantissa, BigDecimal(12000).exponent
        (12, 3)
        >>> BigDecimal(1) / 8
        BigDecimal('0.125')
        >>> BigDecimal.parse("0.1") + BigDecimal.parse("0.2") == BigDecimal.parse("0.3")
        True

    Raises:
        TypeError: If mantissa or exponent is not an int.
    """

    mantissa: int = 0
    exponent: int = 0
    precision: int = field(init=False)

    ZERO: ClassVar["BigDecimal"]
    ONE: ClassVar["BigDecimal"]
    MINUS_ONE: ClassVar["BigDecimal"]

    def __post_init__(self):
        """Validate and normalize mantissa and exponent, set precision"""
        _check_int(self.mantissa, "mantissa")
        _check_int(self.exponent, "exponent")

        mantissa = self.mantissa
        if mantissa == 0:
            object.__setattr__(self, "exponent", 0)
            object.__setattr__(self, "precision", 1)
            return

        digits, zeros = digits_and_trailing_zeros(mantissa)
        if zeros:
            object.__setattr__(self, "mantissa", mantissa // POW10.get(zeros))
            object.__setattr__(self, "exponent", self.exponent + zeros)
        object.__setattr__(self, "precision", digits - zeros)

    @classmethod
    def _trusted(cls, mantissa: int, exponent: int, precision: int) -> Self:
        """Build a value from fields the caller knows are already normalized."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "mantissa", mantissa)
        object.__setattr__(obj, "exponent", exponent)
        object.__setattr__(obj, "precision", precision)
        return obj

    # Factories --------------------------------------------------------------------------

    @classmethod
    def pow10(cls, exponent: int) -> Self:
        """
        Exact power of ten, `10**exponent`, for any int exponent.

        Examples:
            >>> BigDecimal.pow10(-3)
            BigDecimal('0.001')
        """
        _check_int(exponent, "exponent")
        return cls._trusted(1, exponent, 1)

    @classmethod
    def parse(cls, text: str, style: NumberStyles = NumberStyles.NUMBER,
              number_format: NumberFormat | None = None) -> Self:
        """
        Parse text into a BigDecimal. See `bigdecimal.parsing.parse()`.

        Raises:
            ValueError: If text is not in a format accepted by style.
        """
        from .parsing import parse
        return parse(text, style, number_format)

    @classmethod
    def try_parse(cls, text: str, style: NumberStyles = NumberStyles.NUMBER,
                  number_format: NumberFormat | None = None) -> tuple[bool, Self]:
        """Parse text, returning (False, ZERO) instead of raising on malformed input."""
        from .parsing import try_parse
        return try_parse(text, style, number_format)

    @classmethod
    def from_float(cls, value: float, mode=None) -> Self:
        """
        Convert a float. See `bigdecimal.conversions.from_float()` for the modes.

        Raises:
            ValueError: If value is NaN or infinite.
        """
        from .conversions import FloatConversion, from_float
        return from_float(value, FloatConversion.TRUNCATE if mode is None else mode)

    # Properties -------------------------------------------------------------------------

    @property
    def sign(self) -> int:
        """-1, 0 or 1"""
        return (self.mantissa > 0) - (self.mantissa < 0)

    @property
    def is_zero(self) -> bool:
        return self.mantissa == 0

    @property
    def is_one(self) -> bool:
        return self.mantissa == 1 and self.exponent == 0

    @property
    def decimal_places(self) -> int:
        """Number of digits after the decimal point in the exact representation."""
        return max(0, -self.exponent)

    def is_integer(self) -> bool:
        return self.exponent >= 0

    def is_even_integer(self) -> bool:
        # A positive exponent means a factor of ten
        return self.exponent > 0 or (self.exponent == 0 and self.mantissa % 2 == 0)

    def is_odd_integer(self) -> bool:
        return self.exponent == 0 and self.mantissa % 2 == 1

    # Arithmetic -------------------------------------------------------------------------

    def shift_decimal(self, shift: int) -> Self:
        """
        Multiply by `10**shift` by moving the decimal point, no mantissa arithmetic.

        Examples:
            >>> BigDecimal(15).shift_decimal(-3)
            BigDecimal('0.015')
        """
        _check_int(shift, "shift")
        if self.mantissa == 0 or shift == 0:
            return self
        return self._trusted(self.mantissa, self.exponent + shift, self.precision)

    def try_divide_exact(self, divisor: Any) -> tuple[bool, Self]:
        """
        Divide when the quotient has a finite decimal expansion.

        The dividend mantissa is scaled by enough extra digits to absorb every factor of 2
        and 5 the divisor may contribute, so a remainder left after that proves the quotient
        repeats forever.

        Returns:
            (True, quotient) when exact, otherwise (False, ZERO).

        Raises:
            ZeroDivisionError: If divisor is zero.
        """
        divisor = _operand(divisor, "divisor")
        if divisor.mantissa == 0:
            raise ZeroDivisionError("decimal division by zero")
        if self.mantissa == 0:
            return True, BigDecimal.ZERO
        if divisor.mantissa in (1, -1):
            result = self.shift_decimal(-divisor.exponent)
            return True, (-result if divisor.mantissa < 0 else result)

        max_precision = self.precision + -(-10 * divisor.precision // 3)
        shift = max(0, max_precision - self.precision + divisor.precision)
        quotient, remainder = divmod(self.mantissa * POW10.get(shift), divisor.mantissa)
        if remainder:
            return False, BigDecimal.ZERO
        return True, BigDecimal(quotient, self.exponent - divisor.exponent - shift)

    def divide_exact(self, divisor: Any) -> Self:
        """
        Divide, requiring a terminating quotient.

        Raises:
            ZeroDivisionError: If divisor is zero.
            ArithmeticError: If the quotient has no finite decimal expansion.
        """
        ok, result = self.try_divide_exact(divisor)
        if not ok:
            raise ArithmeticError(f"the result of dividing {self} by {divisor} does not terminate")
        return result

    def divide(self, divisor: Any,
               max_extended_precision: int = DecimalConf.MAX_EXTENDED_DIVISION_PRECISION,
               mode: RoundingMode = DecimalConf.DEFAULT_MODE) -> Self:
        """
        Divide with a bounded number of significant digits.

        The quotient keeps at least `max(max_extended_precision, self.precision,
        divisor.precision)` significant digits and is rounded with `mode`.

        Examples:
            >>> BigDecimal(2).divide(3, 5)
            BigDecimal('0.66667')

        Raises:
            ZeroDivisionError: If divisor is zero.
            ValueError: If max_extended_precision is not positive.
        """
        divisor = _operand(divisor, "divisor")
        _check_int(max_extended_precision, "max_extended_precision")
        if max_extended_precision <= 0:
            raise ValueError(f"max_extended_precision must be > 0, but got {fmt_value(max_extended_precision)}")
        if divisor.mantissa == 0:
            raise ZeroDivisionError("decimal division by zero")
        if self.mantissa == 0:
            return BigDecimal.ZERO
        if divisor.is_one:
            return self

        max_precision = max(max_extended_precision, self.precision, divisor.precision)
        shift = max(0, max_precision - self.precision + divisor.precision)
        mantissa = divide_int(self.mantissa * POW10.get(shift), divisor.mantissa, mode)
        return BigDecimal(mantissa, self.exponent - divisor.exponent - shift)

    def divide_rounded(self, divisor: Any, decimals: int,
                       mode: RoundingMode = DecimalConf.DEFAULT_MODE) -> Self:
        """
        Divide and round the quotient to a number of decimal places in a single step.

        A negative `decimals` rounds to a digit left of the decimal point.

        Examples:
            >>> BigDecimal(10).divide_rounded(3, 5)
            BigDecimal('3.33333')
            >>> BigDecimal(25).divide_rounded(1, -1)
            BigDecimal('20')

        Raises:
            ZeroDivisionError: If divisor is zero.
        """
        divisor = _operand(divisor, "divisor")
        _check_int(decimals, "decimals")
        if divisor.mantissa == 0:
            raise ZeroDivisionError("decimal division by zero")
        if self.mantissa == 0:
            return BigDecimal.ZERO

        shift = self.exponent - divisor.exponent + decimals
        if shift >= 0:
            mantissa = divide_int(self.mantissa * POW10.get(shift), divisor.mantissa, mode)
        else:
            mantissa = divide_int(self.mantissa, divisor.mantissa * POW10.get(-shift), mode)
        return BigDecimal(mantissa, -decimals)

    def pow(self, exponent: int) -> Self:
        """
        Raise to a non-negative integer power, exactly.

        Raises:
            ValueError: If exponent is negative.
        """
        _check_int(exponent, "exponent")
        if exponent < 0:
            raise ValueError(f"exponent must be >= 0, but got {fmt_value(exponent)}")
        if exponent == 0:
            return BigDecimal.ONE
        if exponent == 1 or self.mantissa == 0:
            return self
        return BigDecimal(self.mantissa ** exponent, self.exponent * exponent)

    # Rounding ---------------------------------------------------------------------------

    def truncate(self) -> Self:
        """Drop the fractional digits, rounding toward zero."""
        if self.exponent >= 0:
            return self
        return BigDecimal(divide_int(self.mantissa, POW10.get(-self.exponent), RoundingMode.TO_ZERO))

    def truncate_to_precision(self, precision: int) -> Self:
        """
        Drop least significant digits until at most `precision` remain, no rounding.

        Raises:
            ValueError: If precision is less than 1.
        """
        _check_precision(precision)
        extra = self.precision - precision
        if extra <= 0:
            return self
        mantissa = divide_int(self.mantissa, POW10.get(extra), RoundingMode.TO_ZERO)
        return BigDecimal(mantissa, self.exponent + extra)

    def floor(self) -> Self:
        """Largest integer value not greater than this one."""
        if self.exponent >= 0:
            return self
        result = self.truncate()
        return result - BigDecimal.ONE if self.mantissa < 0 else result

    def ceiling(self) -> Self:
        """Smallest integer value not less than this one."""
        if self.exponent >= 0:
            return self
        result = self.truncate()
        return result + BigDecimal.ONE if self.mantissa > 0 else result

    def round(self, decimals: int = 0, mode: RoundingMode = DecimalConf.DEFAULT_MODE) -> Self:
        """
        Round to a number of decimal places.

        Values that already fit are returned unchanged. A negative `decimals` rounds to
        tens, hundreds, and so on.

        Examples:
            >>> BigDecimal.parse("1234.5").round()
            BigDecimal('1234')
            >>> BigDecimal.parse("1234.5").round(0, RoundingMode.MIDPOINT_AWAY_FROM_ZERO)
            BigDecimal('1235')
            >>> BigDecimal(1250).round(-2)
            BigDecimal('1200')
        """
        _check_int(decimals, "decimals")
        extra = -self.exponent - decimals
        if extra <= 0:
            return self
        mantissa = divide_int(self.mantissa, POW10.get(extra), mode)
        return BigDecimal(mantissa, self.exponent + extra)

    def round_to_precision(self, precision: int, mode: RoundingMode = DecimalConf.DEFAULT_MODE) -> Self:
        """
        Round to a number of significant digits.

        Raises:
            ValueError: If precision is less than 1.
        """
        _check_precision(precision)
        extra = self.precision - precision
        if extra <= 0:
            return self
        mantissa = divide_int(self.mantissa, POW10.get(extra), mode)
        return BigDecimal(mantissa, self.exponent + extra)

    # Comparison -------------------------------------------------------------------------

    def compare(self, other: Any) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        return _compare(self, _operand(other, "other"))

    def __eq__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.mantissa == other.mantissa and self.exponent == other.exponent

    def __lt__(self, other: Any) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else _compare(self, other) < 0

    def __le__(self, other: Any) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else _compare(self, other) <= 0

    def __gt__(self, other: Any) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else _compare(self, other) > 0

    def __ge__(self, other: Any) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else _compare(self, other) >= 0

    def __hash__(self) -> int:
        if self.exponent >= 0:
            exp_hash = pow(10, self.exponent, _PyHASH_MODULUS)
        else:
            exp_hash = pow(_PyHASH_10INV, -self.exponent, _PyHASH_MODULUS)
        hash_ = abs(self.mantissa) * exp_hash % _PyHASH_MODULUS
        ans = hash_ if self.mantissa >= 0 else -hash_
        return -2 if ans == -1 else ans

    def __bool__(self) -> bool:
        return self.mantissa != 0

    # Operators --------------------------------------------------------------------------

    def __neg__(self) -> Self:
        if self.mantissa == 0:
            return self
        return self._trusted(-self.mantissa, self.exponent, self.precision)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return -self if self.mantissa < 0 else self

    def __add__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _add(self, other)

    def __radd__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _add(other, self)

    def __sub__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _add(self, -other)

    def __rsub__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _add(other, -self)

    def __mul__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _multiply(self, other)

    def __rmul__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _multiply(other, self)

    def __truediv__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _true_divide(self, other)

    def __rtruediv__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _true_divide(other, self)

    def __floordiv__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _true_divide(self, other).floor()

    def __rfloordiv__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _true_divide(other, self).floor()

    def __mod__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _divmod(self, other)[1]

    def __rmod__(self, other: Any) -> Self:
        other = _coerce(other)
        return NotImplemented if other is None else _divmod(other, self)[1]

    def __divmod__(self, other: Any) -> tuple[Self, Self]:
        other = _coerce(other)
        return NotImplemented if other is None else _divmod(self, other)

    def __rdivmod__(self, other: Any) -> tuple[Self, Self]:
        other = _coerce(other)
        return NotImplemented if other is None else _divmod(other, self)

    def __pow__(self, exponent: Any, modulo: Any = None) -> Self:
        """
        Integer powers; a negative exponent is the reciprocal of the positive power.
        """
        if modulo is not None or not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        if exponent < 0:
            return _true_divide(BigDecimal.ONE, self.pow(-exponent))
        return self.pow(exponent)

    # Conversions ------------------------------------------------------------------------

    def __int__(self) -> int:
        if self.exponent >= 0:
            return self.mantissa * POW10.get(self.exponent)
        return divide_int(self.mantissa, POW10.get(-self.exponent), RoundingMode.TO_ZERO)

    def __float__(self) -> float:
        from .conversions import to_float
        return to_float(self)

    def __trunc__(self) -> int:
        return int(self)

    def __floor__(self) -> int:
        return int(self.floor())

    def __ceil__(self) -> int:
        return int(self.ceiling())

    def __round__(self, ndigits: int | None = None) -> "int | BigDecimal":
        if ndigits is None:
            return int(self.round(0))
        return self.round(ndigits)

    def __str__(self) -> str:
        from .formatting import format_decimal
        return format_decimal(self, "G")

    def __repr__(self) -> str:
        return f"{class_name(self)}('{self}')"

    def __format__(self, format_spec: str) -> str:
        from .formatting import format_decimal
        return format_decimal(self, format_spec or None)


BigDecimal.ZERO = BigDecimal._trusted(0, 0, 1)
BigDecimal.ONE = BigDecimal._trusted(1, 0, 1)
BigDecimal.MINUS_ONE = BigDecimal._trusted(-1, 0, 1)

ZERO = BigDecimal.ZERO
ONE = BigDecimal.ONE
MINUS_ONE = BigDecimal.MINUS_ONE


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_int(value: Any, name: str):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, but got {fmt_type(value)}")


def _check_precision(precision: Any):
    _check_int(precision, "precision")
    if precision < 1:
        raise ValueError(f"precision must be >= 1, but got {fmt_value(precision)}")


def _coerce(value: Any) -> BigDecimal | None:
    """Exact conversion of an operator operand, None when the type is not supported."""
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return BigDecimal(value)
    if isinstance(value, Decimal) and value.is_finite():
        from .conversions import from_decimal
        return from_decimal(value)
    return None


def _operand(value: Any, name: str) -> BigDecimal:
    result = _coerce(value)
    if result is None:
        raise TypeError(f"{name} must be BigDecimal, int or finite Decimal, but got {fmt_value(value)}")
    return result


def _align(a: BigDecimal, b: BigDecimal) -> tuple[int, int, int]:
    """Mantissas of a and b scaled to their common (smaller) exponent."""
    if a.exponent > b.exponent:
        return a.mantissa * POW10.get(a.exponent - b.exponent), b.mantissa, b.exponent
    if a.exponent < b.exponent:
        return a.mantissa, b.mantissa * POW10.get(b.exponent - a.exponent), a.exponent
    return a.mantissa, b.mantissa, a.exponent


def _compare(a: BigDecimal, b: BigDecimal) -> int:
    if a.exponent == b.exponent:
        x, y = a.mantissa, b.mantissa
    elif a.sign != b.sign:
        x, y = a.sign, b.sign
    else:
        x, y, _ = _align(a, b)
    return (x > y) - (x < y)


def _add(a: BigDecimal, b: BigDecimal) -> BigDecimal:
    if b.mantissa == 0:
        return a
    if a.mantissa == 0:
        return b
    x, y, exponent = _align(a, b)
    return BigDecimal(x + y, exponent)


def _multiply(a: BigDecimal, b: BigDecimal) -> BigDecimal:
    if a.mantissa == 0 or b.mantissa == 0:
        return BigDecimal.ZERO
    if b.mantissa in (1, -1):
        result = a.shift_decimal(b.exponent)
        return -result if b.mantissa < 0 else result
    if a.mantissa in (1, -1):
        result = b.shift_decimal(a.exponent)
        return -result if a.mantissa < 0 else result
    return BigDecimal(a.mantissa * b.mantissa, a.exponent + b.exponent)


def _true_divide(a: BigDecimal, b: BigDecimal) -> BigDecimal:
    ok, result = a.try_divide_exact(b)
    if ok:
        return result
    logger.debug("quotient %r / %r does not terminate, rounding to %s digits",
                 a, b, DecimalConf.MAX_EXTENDED_DIVISION_PRECISION)
    return a.divide(b, DecimalConf.MAX_EXTENDED_DIVISION_PRECISION, DecimalConf.DEFAULT_MODE)


def _divmod(a: BigDecimal, b: BigDecimal) -> tuple[BigDecimal, BigDecimal]:
    quotient = _true_divide(a, b).floor()
    return quotient, a - b * quotient
