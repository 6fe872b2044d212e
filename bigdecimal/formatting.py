"""
BigDecimal to text formatting with .NET-style standard numeric format specifiers.

Supported specifiers, each optionally followed by a non-negative precision:

    G  general: exact digits, or N significant digits in fixed or exponential form
    F  fixed-point with N decimal places
    N  fixed-point with group separators and the locale negative pattern
    E  exponential with N fractional mantissa digits (default 6)
    C  currency with N decimal places
    P  percentage (value * 100) with N decimal places
    R  round-trip, `<mantissa>E<exponent>`, always culture-invariant
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Sequence

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .core import BigDecimal
from .digits import from_digits, is_ascii_digits, to_digits
from .number_format import NumberFormat
from .pow_cache import POW10
from .rounding import RoundingMode, divide_int
from .utils import fmt_type, fmt_value

# Pattern placeholders: n number, $ symbol, - negative sign
_NUMBER_NEGATIVE_PATTERNS = frozendict({0: "(n)", 1: "-n", 2: "- n", 3: "n-", 4: "n -"})

_CURRENCY_POSITIVE_PATTERNS = frozendict({0: "$n", 1: "n$", 2: "$ n", 3: "n $"})

_CURRENCY_NEGATIVE_PATTERNS = frozendict({
    0: "($n)", 1: "-$n", 2: "$-n", 3: "$n-", 4: "(n$)", 5: "-n$", 6: "n-$", 7: "n$-", 8: "-n $",
    9: "-$ n", 10: "n $-", 11: "$ n-", 12: "$ -n", 13: "n- $", 14: "($ n)", 15: "(n $)", 16: "$- n",
})

# Percent patterns rendered through the equivalent currency pattern
_PERCENT_POSITIVE_TO_CURRENCY = frozendict({0: 3, 1: 1, 2: 0, 3: 2})

_PERCENT_NEGATIVE_TO_CURRENCY = frozendict({
    0: 8, 1: 5, 2: 1, 3: 2, 4: 3, 5: 6, 6: 7, 7: 9, 8: 10, 9: 11, 10: 12, 11: 13,
})

_EXPONENTIAL_DEFAULT_DECIMALS = 6


# Methods --------------------------------------------------------------------------------------------------------------

def format_decimal(value: BigDecimal, fmt: str | None = None, number_format: NumberFormat | None = None) -> str:
    """
    Format a BigDecimal as text.

    Args:
        value: The value to format.
        fmt: Specifier letter plus optional precision, e.g. "G", "F2", "n0", " C4 ".
            Case-insensitive, surrounding white space ignored; None or empty means "G".
        number_format: Locale information; invariant when None.

    Returns:
        The formatted text. All specifiers except R round with MIDPOINT_AWAY_FROM_ZERO.

    Examples:
        >>> format_decimal(BigDecimal.parse("12000.123"))
        '12000.123'
        >>> format_decimal(BigDecimal.parse("12000000.123"), "G2")
        '1.2E+7'
        >>> format_decimal(BigDecimal(-12000), "C0")
        '(¤12,000)'
        >>> format_decimal(BigDecimal.parse("0.5"), "P")
        '50.00 %'

    Raises:
        TypeError: If value, fmt or number_format has the wrong type.
        ValueError: If the specifier or its precision is invalid.
        NotImplementedError: If the percent pattern of number_format has no currency equivalent.
    """
    if not isinstance(value, BigDecimal):
        raise TypeError(f"value must be BigDecimal, but got {fmt_type(value)}")
    if number_format is None:
        number_format = NumberFormat.invariant()
    elif not isinstance(number_format, NumberFormat):
        raise TypeError(f"number_format must be NumberFormat | None, but got {fmt_type(number_format)}")

    specifier, precision = _parse_format(fmt)
    nf = number_format

    if specifier == "G":
        return _general(value, precision, nf)

    if specifier in ("F", "N"):
        decimals = nf.number_decimal_digits if precision is None else precision
        value = value.round(decimals, RoundingMode.MIDPOINT_AWAY_FROM_ZERO)
        if specifier == "F":
            number = _fixed(value, decimals, nf.number_decimal_separator)
            return nf.negative_sign + number if value.sign < 0 else number
        number = _fixed(value, decimals, nf.number_decimal_separator,
                        nf.number_group_separator, nf.number_group_sizes)
        if value.sign < 0:
            return _apply_pattern(_NUMBER_NEGATIVE_PATTERNS[nf.number_negative_pattern], number, "", nf)
        return number

    if specifier == "E":
        return _exponential(value, _EXPONENTIAL_DEFAULT_DECIMALS if precision is None else precision, nf)

    if specifier == "C":
        decimals = nf.currency_decimal_digits if precision is None else precision
        return _currency(value, decimals, nf.currency_symbol, nf.currency_decimal_separator,
                         nf.currency_group_separator, nf.currency_group_sizes,
                         nf.currency_positive_pattern, nf.currency_negative_pattern, nf)

    if specifier == "P":
        positive = _PERCENT_POSITIVE_TO_CURRENCY.get(nf.percent_positive_pattern)
        if positive is None:
            raise NotImplementedError(f"unsupported positive percent pattern {fmt_value(nf.percent_positive_pattern)}")
        negative = _PERCENT_NEGATIVE_TO_CURRENCY.get(nf.percent_negative_pattern)
        if negative is None:
            raise NotImplementedError(f"unsupported negative percent pattern {fmt_value(nf.percent_negative_pattern)}")

        decimals = nf.percent_decimal_digits if precision is None else precision
        return _currency(value.shift_decimal(2), decimals, nf.percent_symbol, nf.percent_decimal_separator,
                         nf.percent_group_separator, nf.percent_group_sizes, positive, negative, nf)

    if specifier == "R":
        return round_trip(value)

    raise ValueError(f"Format specifier was invalid: '{specifier}'")


def round_trip(value: BigDecimal) -> str:
    """
    Culture-invariant `<mantissa>E<exponent>` text, or just the mantissa for exponent 0.

    Examples:
        >>> round_trip(BigDecimal.parse("-0.0125"))
        '-125E-4'
    """
    mantissa = ("-" if value.mantissa < 0 else "") + to_digits(value.mantissa)
    if value.exponent == 0:
        return mantissa
    return f"{mantissa}E{value.exponent}"


def group_digits(digits: str, separator: str, sizes: Sequence[int]) -> str:
    """
    Insert separator into a run of digits, counting group sizes from the right.

    The last size repeats; a size of 0 leaves the remaining digits ungrouped.

    Examples:
        >>> group_digits("123456789", ",", (3,))
        '123,456,789'
        >>> group_digits("123456789", ",", (3, 2))
        '12,34,56,789'
        >>> group_digits("123456789", " ", (3, 0))
        '123456 789'
    """
    if not separator or not sizes:
        return digits

    groups = []
    end = len(digits)
    index = 0
    size = sizes[0]
    while 0 < size < end:
        groups.append(digits[end - size:end])
        end -= size
        if index < len(sizes) - 1:
            index += 1
            size = sizes[index]
    groups.append(digits[:end])
    return separator.join(reversed(groups))


# Private Methods ------------------------------------------------------------------------------------------------------

def _parse_format(fmt: str | None) -> tuple[str, int | None]:
    if fmt is None:
        return "G", None
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be str | None, but got {fmt_type(fmt)}")

    fmt = fmt.strip()
    if not fmt:
        return "G", None

    specifier, precision = fmt[0].upper(), fmt[1:]
    if not precision:
        return specifier, None
    if not is_ascii_digits(precision):
        raise ValueError(f"Invalid precision specifier: '{precision}'")
    return specifier, from_digits(precision)


def _general(value: BigDecimal, precision: int | None, nf: NumberFormat) -> str:
    if precision:
        value = value.round_to_precision(precision, RoundingMode.MIDPOINT_AWAY_FROM_ZERO)

        if value.exponent >= 0:
            fixed_length = value.precision + value.exponent
        else:
            # digits + leading zeros + decimal separator
            fixed_length = value.precision + max(0, -value.exponent - value.precision) + 1
        # digits + ".E+99"
        if fixed_length > value.precision + 5:
            return _exponential(value, min(value.precision, precision) - 1, nf)

    number = _fixed(value, None, nf.number_decimal_separator)
    return nf.negative_sign + number if value.sign < 0 else number


def _fixed(value: BigDecimal, decimals: int | None, decimal_separator: str,
           group_separator: str = "", group_sizes: Sequence[int] = ()) -> str:
    """Unsigned fixed-point digits, fraction zero-padded to decimals when given."""
    digits = to_digits(value.mantissa)
    if value.exponent >= 0:
        whole, fraction = digits + "0" * value.exponent, ""
    else:
        places = -value.exponent
        if len(digits) <= places:
            whole, fraction = "0", digits.rjust(places, "0")
        else:
            whole, fraction = digits[:-places], digits[-places:]

    if decimals is not None:
        fraction = fraction.ljust(decimals, "0")

    whole = group_digits(whole, group_separator, group_sizes)
    return whole + decimal_separator + fraction if fraction else whole


def _exponential(value: BigDecimal, decimals: int, nf: NumberFormat) -> str:
    digits = to_digits(value.mantissa)
    exponent = value.exponent + len(digits) - 1

    keep = decimals + 1
    if len(digits) > keep:
        rounded = divide_int(abs(value.mantissa), POW10.get(len(digits) - keep),
                             RoundingMode.MIDPOINT_AWAY_FROM_ZERO)
        digits = to_digits(rounded)
        if len(digits) > keep:
            # 9.99 -> 10.0 carried into a new leading digit
            digits = digits[:keep]
            exponent += 1
    digits = digits.ljust(keep, "0")

    mantissa = digits[0] + (nf.number_decimal_separator + digits[1:] if decimals else "")
    if value.sign < 0:
        mantissa = nf.negative_sign + mantissa
    exponent_sign = nf.negative_sign if exponent < 0 else nf.positive_sign
    return f"{mantissa}E{exponent_sign}{abs(exponent)}"


def _currency(value: BigDecimal, decimals: int, symbol: str, decimal_separator: str,
              group_separator: str, group_sizes: Sequence[int],
              positive_pattern: int, negative_pattern: int, nf: NumberFormat) -> str:
    value = value.round(decimals, RoundingMode.MIDPOINT_AWAY_FROM_ZERO)
    number = _fixed(value, decimals, decimal_separator, group_separator, group_sizes)
    if value.sign < 0:
        return _apply_pattern(_CURRENCY_NEGATIVE_PATTERNS[negative_pattern], number, symbol, nf)
    return _apply_pattern(_CURRENCY_POSITIVE_PATTERNS[positive_pattern], number, symbol, nf)


def _apply_pattern(pattern: str, number: str, symbol: str, nf: NumberFormat) -> str:
    parts = []
    for char in pattern:
        if char == "n":
            parts.append(number)
        elif char == "$":
            parts.append(symbol)
        elif char == "-":
            parts.append(nf.negative_sign)
        else:
            parts.append(char)
    return "".join(parts)
