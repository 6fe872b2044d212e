"""
Parse styles and locale number-format information.

`NumberStyles` selects which tokens the parser accepts; `NumberFormat` carries the signs,
separators, grouping and sign/symbol placement used by both the parser and the formatter.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import locale
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from enum import Flag
from typing import Any, Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
class NumberStyles(Flag):
    """
    Tokens permitted in parsed text.

    Composite styles:
        INTEGER:  leading/trailing white space, leading sign
        NUMBER:   INTEGER + trailing sign, decimal point, thousands separators
        FLOAT:    INTEGER + decimal point, exponent
        CURRENCY: NUMBER + parentheses, currency symbol
        ANY:      CURRENCY + exponent
    """
    NONE                    = 0
    ALLOW_LEADING_WHITE     = 0x001
    ALLOW_TRAILING_WHITE    = 0x002
    ALLOW_LEADING_SIGN      = 0x004
    ALLOW_TRAILING_SIGN     = 0x008
    ALLOW_PARENTHESES       = 0x010
    ALLOW_DECIMAL_POINT     = 0x020
    ALLOW_THOUSANDS         = 0x040
    ALLOW_EXPONENT          = 0x080
    ALLOW_CURRENCY_SYMBOL   = 0x100

    INTEGER  = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_LEADING_SIGN
    NUMBER   = INTEGER | ALLOW_TRAILING_SIGN | ALLOW_DECIMAL_POINT | ALLOW_THOUSANDS
    FLOAT    = INTEGER | ALLOW_DECIMAL_POINT | ALLOW_EXPONENT
    CURRENCY = NUMBER | ALLOW_PARENTHESES | ALLOW_CURRENCY_SYMBOL
    ANY      = CURRENCY | ALLOW_EXPONENT
# @formatter:on


@dataclass(frozen=True)
class NumberFormat:
    """
    Locale information for parsing and formatting decimal text.

    Defaults describe the culture-invariant format: "." decimal point, "," grouping by
    three, two decimal digits, currency rendered as "¤n" / "(¤n)" and percent as
    "n %" / "-n %".

    Group sizes are read from the decimal point leftwards; the last size repeats and a
    trailing 0 leaves the remaining digits ungrouped. An empty group separator or empty
    sizes disable grouping.

    Placement patterns:
        number_negative_pattern:    0 "(n)", 1 "-n", 2 "- n", 3 "n-", 4 "n -"
        currency_positive_pattern:  0 "$n", 1 "n$", 2 "$ n", 3 "n $"
        currency_negative_pattern:  0 "($n)", 1 "-$n", 2 "$-n", 3 "$n-", 4 "(n$)",
                                    5 "-n$", 6 "n-$", 7 "n$-", 8 "-n $", 9 "-$ n",
                                    10 "n $-", 11 "$ n-", 12 "$ -n", 13 "n- $",
                                    14 "($ n)", 15 "(n $)", 16 "$- n"
        percent_positive_pattern:   0 "n %", 1 "n%", 2 "%n", 3 "% n"
        percent_negative_pattern:   0 "-n %", 1 "-n%", 2 "-%n", 3 "%-n", 4 "%n-",
                                    5 "n-%", 6 "n%-", 7 "-% n", 8 "n %-", 9 "% n-",
                                    10 "% -n", 11 "n- %"

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If a separator is empty, a group size or pattern is out of range.
    """

    positive_sign: str = "+"
    negative_sign: str = "-"

    number_decimal_separator: str = "."
    number_group_separator: str = ","
    number_group_sizes: Sequence[int] = (3,)
    number_decimal_digits: int = 2
    number_negative_pattern: int = 1

    currency_symbol: str = "¤"
    currency_decimal_separator: str = "."
    currency_group_separator: str = ","
    currency_group_sizes: Sequence[int] = (3,)
    currency_decimal_digits: int = 2
    currency_positive_pattern: int = 0
    currency_negative_pattern: int = 0

    percent_symbol: str = "%"
    percent_decimal_separator: str = "."
    percent_group_separator: str = ","
    percent_group_sizes: Sequence[int] = (3,)
    percent_decimal_digits: int = 2
    percent_positive_pattern: int = 0
    percent_negative_pattern: int = 0

    def __post_init__(self):
        """Validate fields, freeze group sizes into tuples"""
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name.endswith("_group_sizes"):
                object.__setattr__(self, f.name, _group_sizes(value, f.name))
            elif f.type is str:
                if not isinstance(value, str):
                    raise TypeError(f"{f.name} must be str, but got {fmt_type(value)}")
            elif not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{f.name} must be int, but got {fmt_type(value)}")
            elif value < 0:
                raise ValueError(f"{f.name} must be >= 0, but got {fmt_value(value)}")

        for name in ("number_decimal_separator", "currency_decimal_separator", "percent_decimal_separator",
                     "positive_sign", "negative_sign"):
            if not getattr(self, name):
                raise ValueError(f"{name} must be a non-empty str")

        for name, limit in (("number_negative_pattern", 4),
                            ("currency_positive_pattern", 3),
                            ("currency_negative_pattern", 16)):
            if getattr(self, name) > limit:
                raise ValueError(f"{name} must be in range 0..{limit}, but got {fmt_value(getattr(self, name))}")

    @classmethod
    def invariant(cls) -> Self:
        """Culture-invariant number format."""
        return _INVARIANT if cls is NumberFormat else cls()

    @classmethod
    def from_localeconv(cls, conv: Mapping[str, Any] | None = None) -> Self:
        """
        Build a NumberFormat from a `locale.localeconv()` mapping.

        Missing or empty entries fall back to the invariant values, so the "C" locale
        yields the invariant format without grouping.

        Args:
            conv: localeconv-style mapping; the current locale is read when None.

        Examples:
            >>> nf = NumberFormat.from_localeconv({"decimal_point": ",", "thousands_sep": ".",
            ...                                    "grouping": [3, 0]})
            >>> nf.number_decimal_separator, nf.number_group_sizes
            (',', (3,))
        """
        if conv is None:
            conv = locale.localeconv()
        elif not isinstance(conv, Mapping):
            raise TypeError(f"conv must be a Mapping, but got {fmt_type(conv)}")

        decimal_point = conv.get("decimal_point") or "."
        frac_digits = conv.get("frac_digits", _CHAR_MAX)

        return cls(
            positive_sign=conv.get("positive_sign") or "+",
            negative_sign=conv.get("negative_sign") or "-",
            number_decimal_separator=decimal_point,
            number_group_separator=conv.get("thousands_sep", ""),
            number_group_sizes=_posix_grouping(conv.get("grouping", ())),
            currency_symbol=conv.get("currency_symbol") or "¤",
            currency_decimal_separator=conv.get("mon_decimal_point") or decimal_point,
            currency_group_separator=conv.get("mon_thousands_sep", ""),
            currency_group_sizes=_posix_grouping(conv.get("mon_grouping", ())),
            currency_decimal_digits=frac_digits if 0 <= frac_digits < _CHAR_MAX else 2,
            currency_positive_pattern=_currency_positive_pattern(
                conv.get("p_cs_precedes", _CHAR_MAX), conv.get("p_sep_by_space", _CHAR_MAX)),
            currency_negative_pattern=_currency_negative_pattern(
                conv.get("n_cs_precedes", _CHAR_MAX), conv.get("n_sep_by_space", _CHAR_MAX),
                conv.get("n_sign_posn", _CHAR_MAX)),
            percent_decimal_separator=decimal_point,
            percent_group_separator=conv.get("thousands_sep", ""),
            percent_group_sizes=_posix_grouping(conv.get("grouping", ())),
        )

    def merge(self, **overrides: Any) -> Self:
        """
        Create a new NumberFormat with some fields replaced.

        Examples:
            >>> NumberFormat.invariant().merge(currency_symbol="$").currency_symbol
            '$'

        Raises:
            TypeError: If an override names an unknown field.
        """
        return replace(self, **overrides)


# Private Methods ------------------------------------------------------------------------------------------------------

_CHAR_MAX = getattr(locale, "CHAR_MAX", 127)

# (symbol precedes, space separates, sign position) -> currency negative pattern
_POSIX_CURRENCY_NEGATIVE = frozendict({
    (True, False, 0): 0, (True, False, 1): 1, (True, False, 3): 1, (True, False, 4): 2,
    (True, False, 2): 3,
    (False, False, 0): 4, (False, False, 1): 5, (False, False, 3): 6, (False, False, 2): 7,
    (False, False, 4): 7,
    (False, True, 1): 8, (True, True, 1): 9, (True, True, 3): 9, (False, True, 2): 10,
    (False, True, 4): 10, (True, True, 2): 11, (False, True, 3): 13, (True, True, 0): 14,
    (False, True, 0): 15, (True, True, 4): 16,
})


def _group_sizes(value: Any, name: str) -> tuple[int, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence of int, but got {fmt_type(value)}")
    sizes = tuple(value)
    for i, size in enumerate(sizes):
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError(f"{name} must contain int items, but got {fmt_value(size)}")
        if size < 0 or (size == 0 and i != len(sizes) - 1):
            raise ValueError(f"{name} items must be positive, 0 is allowed only as the last item, "
                             f"but got {fmt_value(sizes)}")
    return sizes


def _posix_grouping(grouping: Sequence[int]) -> tuple[int, ...]:
    """Convert a C `grouping` list: 0 repeats the previous size, CHAR_MAX stops grouping."""
    sizes = []
    for size in grouping:
        if size == 0:
            break
        if size >= _CHAR_MAX:
            sizes.append(0)
            break
        sizes.append(size)
    if sizes == [0]:
        return ()
    return tuple(sizes)


def _currency_positive_pattern(cs_precedes: int, sep_by_space: int) -> int:
    precedes = cs_precedes != 0
    spaced = sep_by_space not in (0, _CHAR_MAX)
    return (0 if precedes else 1) + (2 if spaced else 0)


def _currency_negative_pattern(cs_precedes: int, sep_by_space: int, sign_posn: int) -> int:
    precedes = cs_precedes != 0
    spaced = sep_by_space not in (0, _CHAR_MAX)
    if sign_posn not in (0, 1, 2, 3, 4):
        sign_posn = 0
    return _POSIX_CURRENCY_NEGATIVE.get((precedes, spaced, sign_posn), 1 if precedes else 5)


_INVARIANT = NumberFormat()
