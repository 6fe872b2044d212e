"""
Text to BigDecimal parsing driven by NumberStyles flags and NumberFormat locale data.

Parsing is exact: every digit in the text ends up in the value, no rounding happens.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging

# Local ----------------------------------------------------------------------------------------------------------------
from .core import BigDecimal
from .digits import from_digits, is_ascii_digits
from .number_format import NumberFormat, NumberStyles
from .utils import fmt_type, fmt_value

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str, style: NumberStyles = NumberStyles.NUMBER,
          number_format: NumberFormat | None = None) -> BigDecimal:
    """
    Parse text into a BigDecimal.

    Args:
        text: The text to parse.
        style: Tokens permitted around and inside the digits.
        number_format: Signs, separators and currency symbol; invariant when None.

    Returns:
        The exact value of text.

    Examples:
        >>> parse("12,000.50")
        BigDecimal('12000.5')
        >>> parse("-1.20000E-7", NumberStyles.FLOAT)
        BigDecimal('-0.00000012')
        >>> parse("(¤1,200.00)", NumberStyles.CURRENCY)
        BigDecimal('-1200')

    Raises:
        TypeError: If text is not a str.
        ValueError: If text is not in a format accepted by style.
    """
    style, number_format = _check_args(text, style, number_format)
    try:
        return _parse(text, style, number_format)
    except _ParseFailure as exc:
        raise ValueError(f"Input string was not in a correct format: {fmt_value(text)}") from exc


def try_parse(text: str, style: NumberStyles = NumberStyles.NUMBER,
              number_format: NumberFormat | None = None) -> tuple[bool, BigDecimal]:
    """
    Parse text into a BigDecimal without raising on malformed input.

    Returns:
        (True, value) on success, (False, BigDecimal.ZERO) when text does not match style.

    Raises:
        TypeError: If text is not a str.
    """
    style, number_format = _check_args(text, style, number_format)
    try:
        return True, _parse(text, style, number_format)
    except _ParseFailure as exc:
        logger.debug("cannot parse %r: %s", text, exc)
        return False, BigDecimal.ZERO


# Private Classes ------------------------------------------------------------------------------------------------------

class _ParseFailure(Exception):
    """Names the parsing stage that rejected the text."""


class _Scanner:
    """Mutable parsing state over the remaining text."""

    def __init__(self, text: str, style: NumberStyles, nf: NumberFormat):
        self.text = text
        self.style = style
        self.nf = nf
        self.sign = 0
        self.currency = False

    def allows(self, flag: NumberStyles) -> bool:
        return flag in self.style

    def trim_start(self):
        if self.allows(NumberStyles.ALLOW_LEADING_WHITE):
            self.text = self.text.lstrip()

    def trim_end(self):
        if self.allows(NumberStyles.ALLOW_TRAILING_WHITE):
            self.text = self.text.rstrip()

    def set_sign(self, sign: int):
        if self.sign != 0:
            raise _ParseFailure("duplicate sign")
        self.sign = sign

    def set_currency(self):
        if self.currency:
            raise _ParseFailure("duplicate currency symbol")
        self.currency = True

    def strip_parentheses(self):
        text = self.text
        if self.allows(NumberStyles.ALLOW_PARENTHESES) and len(text) >= 3 and text[0] == "(":
            if text[-1] != ")":
                raise _ParseFailure("unbalanced parentheses")
            self.sign = -1
            self.text = text[1:-1]
            self.trim_start()
            self.trim_end()

    def strip_leading(self):
        nf = self.nf
        while self.text and not is_ascii_digits(self.text[0]) \
                and not self.text.startswith(nf.number_decimal_separator):
            if self.allows(NumberStyles.ALLOW_CURRENCY_SYMBOL) and self.text.startswith(nf.currency_symbol):
                self.set_currency()
                self.text = self.text[len(nf.currency_symbol):]
            elif self.allows(NumberStyles.ALLOW_LEADING_SIGN) and self.text.startswith(nf.positive_sign):
                self.set_sign(1)
                self.text = self.text[len(nf.positive_sign):]
            elif self.allows(NumberStyles.ALLOW_LEADING_SIGN) and self.text.startswith(nf.negative_sign):
                self.set_sign(-1)
                self.text = self.text[len(nf.negative_sign):]
            else:
                raise _ParseFailure(f"unexpected leading character {self.text[0]!r}")
            self.trim_start()

    def strip_trailing(self):
        nf = self.nf
        while self.text and not is_ascii_digits(self.text[-1]) \
                and not self.text.endswith(nf.number_decimal_separator):
            if self.allows(NumberStyles.ALLOW_CURRENCY_SYMBOL) and self.text.endswith(nf.currency_symbol):
                self.set_currency()
                self.text = self.text[:-len(nf.currency_symbol)]
            elif self.allows(NumberStyles.ALLOW_TRAILING_SIGN) and self.text.endswith(nf.positive_sign):
                self.set_sign(1)
                self.text = self.text[:-len(nf.positive_sign)]
            elif self.allows(NumberStyles.ALLOW_TRAILING_SIGN) and self.text.endswith(nf.negative_sign):
                self.set_sign(-1)
                self.text = self.text[:-len(nf.negative_sign)]
            else:
                raise _ParseFailure(f"unexpected trailing character {self.text[-1]!r}")
            self.trim_end()

    def split_exponent(self) -> int:
        if not self.allows(NumberStyles.ALLOW_EXPONENT):
            return 0
        index = max(self.text.rfind("E"), self.text.rfind("e"))
        if index < 0:
            return 0

        exponent = self.text[index + 1:]
        self.text = self.text[:index]

        sign = 1
        if exponent.startswith(self.nf.positive_sign):
            exponent = exponent[len(self.nf.positive_sign):]
        elif exponent.startswith(self.nf.negative_sign):
            sign = -1
            exponent = exponent[len(self.nf.negative_sign):]
        if not is_ascii_digits(exponent):
            raise _ParseFailure("invalid exponent")
        return sign * from_digits(exponent)

    def split_fraction(self) -> BigDecimal | None:
        if not self.allows(NumberStyles.ALLOW_DECIMAL_POINT):
            return None
        separator = self.nf.currency_decimal_separator if self.currency else self.nf.number_decimal_separator
        index = self.text.find(separator)
        if index < 0:
            return None

        fraction = self.text[index + len(separator):]
        self.text = self.text[:index]
        if not fraction:
            return None

        fraction = fraction.rstrip("0")
        if not fraction:
            return BigDecimal.ZERO
        exponent = -len(fraction)
        fraction = fraction.lstrip("0")
        if not is_ascii_digits(fraction):
            raise _ParseFailure("invalid fractional digits")
        return BigDecimal._trusted(from_digits(fraction), exponent, len(fraction))

    def whole(self) -> BigDecimal | None:
        text = self.text
        if not text:
            return None

        if self.allows(NumberStyles.ALLOW_THOUSANDS):
            separator = self.nf.currency_group_separator if self.currency else self.nf.number_group_separator
            if separator:
                if text.startswith(separator):
                    raise _ParseFailure("group separator before the first digit")
                text = text.replace(separator, "")

        if not is_ascii_digits(text):
            raise _ParseFailure("invalid whole digits")

        text = text.lstrip("0")
        if not text:
            return BigDecimal.ZERO
        digits = text.rstrip("0")
        return BigDecimal._trusted(from_digits(digits), len(text) - len(digits), len(digits))


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_args(text, style, number_format) -> tuple[NumberStyles, NumberFormat]:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but got {fmt_type(text)}")
    if not isinstance(style, NumberStyles):
        raise TypeError(f"style must be NumberStyles, but got {fmt_type(style)}")
    if number_format is None:
        number_format = NumberFormat.invariant()
    elif not isinstance(number_format, NumberFormat):
        raise TypeError(f"number_format must be NumberFormat | None, but got {fmt_type(number_format)}")
    return style, number_format


def _parse(text: str, style: NumberStyles, number_format: NumberFormat) -> BigDecimal:
    scanner = _Scanner(text, style, number_format)
    scanner.trim_start()
    scanner.trim_end()

    scanner.strip_parentheses()
    scanner.strip_leading()
    scanner.strip_trailing()
    exponent = scanner.split_exponent()
    fraction = scanner.split_fraction()
    whole = scanner.whole()

    if fraction is None and whole is None:
        raise _ParseFailure("no digits")

    result = (fraction or BigDecimal.ZERO) + (whole or BigDecimal.ZERO)
    if scanner.sign < 0:
        result = -result
    return result.shift_decimal(exponent)
