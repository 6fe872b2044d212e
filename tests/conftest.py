#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import sys

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bigdecimal.core import BigDecimal
from bigdecimal.number_format import NumberFormat, NumberStyles


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def dec():
    """Parse decimal literals with the float style, e.g. dec("-1.2E-3")."""

    def _dec(text: str) -> BigDecimal:
        return BigDecimal.parse(text, NumberStyles.FLOAT)

    return _dec


@pytest.fixture
def invariant() -> NumberFormat:
    return NumberFormat.invariant()


@pytest.fixture
def de_format() -> NumberFormat:
    """German-like format: ',' decimal point, '.' grouping, euro after the number."""
    return NumberFormat(
        number_decimal_separator=",",
        number_group_separator=".",
        currency_symbol="€",
        currency_decimal_separator=",",
        currency_group_separator=".",
        currency_positive_pattern=3,
        currency_negative_pattern=8,
        percent_decimal_separator=",",
        percent_group_separator=".",
    )


@pytest.fixture
def low_str_digits():
    """Lower the interpreter int/str digit limit for the duration of a test."""
    old = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(640)
    yield 640
    sys.set_int_max_str_digits(old)
