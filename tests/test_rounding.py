#
# BigDecimal - Rounding Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bigdecimal.rounding import RoundingMode, divide_int

M = RoundingMode


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDivideInt:

    @pytest.mark.parametrize("mode, expected", [
        pytest.param(M.MIDPOINT_TO_EVEN, [2, 4, -2, -4], id="to_even"),
        pytest.param(M.MIDPOINT_AWAY_FROM_ZERO, [3, 4, -3, -4], id="away_from_zero"),
        pytest.param(M.MIDPOINT_TO_ZERO, [2, 3, -2, -3], id="to_zero"),
        pytest.param(M.MIDPOINT_TO_NEGATIVE_INFINITY, [2, 3, -3, -4], id="to_neg_inf"),
        pytest.param(M.MIDPOINT_TO_POSITIVE_INFINITY, [3, 4, -2, -3], id="to_pos_inf"),
    ])
    def test_midpoint_ties(self, mode, expected):
        dividends = [25, 35, -25, -35]
        assert [divide_int(d, 10, mode) for d in dividends] == expected

    @pytest.mark.parametrize("mode, expected", [
        pytest.param(M.TO_ZERO, [2, -2, 2, -2], id="to_zero"),
        pytest.param(M.TO_NEGATIVE_INFINITY, [2, -3, 2, -3], id="to_neg_inf"),
        pytest.param(M.TO_POSITIVE_INFINITY, [3, -2, 3, -2], id="to_pos_inf"),
    ])
    def test_directed(self, mode, expected):
        dividends = [27, -27, 21, -21]
        assert [divide_int(d, 10, mode) for d in dividends] == expected

    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_exact_is_unchanged(self, mode):
        assert divide_int(-120, 10, mode) == -12

    @pytest.mark.parametrize("mode", [m for m in RoundingMode if m.name.startswith("MIDPOINT_")])
    def test_midpoint_not_a_tie(self, mode):
        assert divide_int(26, 10, mode) == 3
        assert divide_int(-24, 10, mode) == -2

    def test_midpoint_below_last_digit(self):
        # 5 / 100 is 0.05, below the half of the unit
        assert divide_int(5, 100, M.MIDPOINT_AWAY_FROM_ZERO) == 0
        assert divide_int(5, 10, M.MIDPOINT_AWAY_FROM_ZERO) == 1
        assert divide_int(5, 10, M.MIDPOINT_TO_EVEN) == 0

    def test_negative_divisor(self):
        assert divide_int(25, -10, M.MIDPOINT_AWAY_FROM_ZERO) == -3
        assert divide_int(-7, -2, M.TO_ZERO) == 3

    def test_zero_divisor(self):
        with pytest.raises(ZeroDivisionError):
            divide_int(1, 0, M.TO_ZERO)

    def test_mode_type(self):
        with pytest.raises(TypeError, match="RoundingMode"):
            divide_int(1, 2, "to_zero")
