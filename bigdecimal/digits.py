"""
Decimal digit helpers for arbitrary-size ints.

Python refuses int/str conversions above `sys.get_int_max_str_digits()` digits. The helpers
here split oversized values on powers of ten so mantissas of any size can be counted,
rendered and parsed.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import sys

# Local ----------------------------------------------------------------------------------------------------------------
from .pow_cache import POW10

# log10(2) scaled by 10**5, for digit estimates from bit lengths
_LOG10_2 = 30103
_ASCII_DIGITS = frozenset("0123456789")


# Methods --------------------------------------------------------------------------------------------------------------

def to_digits(n: int) -> str:
    """
    Decimal digits of abs(n) without a sign, not limited by the interpreter digit cap.

    Examples:
        >>> to_digits(-1200)
        '1200'
        >>> len(to_digits(10 ** 10000))
        10001
    """
    n = abs(n)
    if _fits_str_limit(n.bit_length()):
        return str(n)

    # Split roughly in half by digit count, zero-pad the low part
    k = max(1, n.bit_length() * _LOG10_2 // 100_000 // 2)
    high, low = divmod(n, POW10.get(k))
    return to_digits(high) + to_digits(low).rjust(k, "0")


def from_digits(s: str) -> int:
    """
    Parse a string of ASCII decimal digits into a non-negative int.

    Raises:
        ValueError: If s is empty or contains anything but ASCII digits.
    """
    if not s or not _ASCII_DIGITS.issuperset(s):
        raise ValueError(f"ASCII decimal digits expected, but got {s!r:.40}")
    return _from_digits(s)


def count_digits(n: int) -> int:
    """Number of decimal digits in abs(n); zero has one digit."""
    return len(to_digits(n))


def digits_and_trailing_zeros(n: int) -> tuple[int, int]:
    """
    Return (digit count, trailing zero count) of abs(n) from a single digit-string pass.

    Zero reports (1, 0).

    Examples:
        >>> digits_and_trailing_zeros(-12000)
        (5, 3)
    """
    s = to_digits(n)
    if s == "0":
        return 1, 0
    return len(s), len(s) - len(s.rstrip("0"))


def is_ascii_digits(s: str) -> bool:
    return bool(s) and _ASCII_DIGITS.issuperset(s)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fits_str_limit(bits: int) -> bool:
    limit = sys.get_int_max_str_digits()
    # 3.32 bits per digit keeps the estimate strictly below the limit
    return limit == 0 or bits < (limit - 1) * 332 // 100


def _from_digits(s: str) -> int:
    limit = sys.get_int_max_str_digits()
    if limit == 0 or len(s) < limit:
        return int(s)
    k = len(s) // 2
    return _from_digits(s[:-k]) * POW10.get(k) + _from_digits(s[-k:])
