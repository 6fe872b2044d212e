"""
Memoized integer powers used for exponent alignment and decimal shifting.

Powers of ten are on the hot path of every addition, comparison and rounding with
mismatched exponents; powers of five are used for exact binary-fraction conversions.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

class PowCache:
    """
    Cache of `base ** n` for non-negative `n`.

    Exponents up to `max_cached` are memoized in a fixed-size slot list; larger exponents
    are computed on demand and never stored.

    A slot goes from empty to its final value exactly once. Two threads filling the same
    slot store identical ints, and the int is fully built before it is published, so no
    locking is needed.

    Examples:
        >>> POW10.get(3)
        1000
        >>> POW5.get(2)
        25
    """

    __slots__ = ("_base", "_max_cached", "_slots")

    def __init__(self, base: int, max_cached: int):
        if not isinstance(base, int) or isinstance(base, bool):
            raise TypeError(f"base must be int, but got {fmt_type(base)}")
        if base < 2:
            raise ValueError(f"base must be >= 2, but got {fmt_value(base)}")
        if not isinstance(max_cached, int) or max_cached < 0:
            raise ValueError(f"max_cached must be a non-negative int, but got {fmt_value(max_cached)}")

        self._base = base
        self._max_cached = max_cached
        self._slots: list[int | None] = [None] * (max_cached + 1)

    def __repr__(self) -> str:
        cached = sum(1 for v in self._slots if v is not None)
        return f"PowCache(base={self._base}, max_cached={self._max_cached}, cached={cached})"

    @property
    def base(self) -> int:
        return self._base

    @property
    def max_cached(self) -> int:
        return self._max_cached

    def get(self, n: int) -> int:
        """
        Return `base ** n`.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"power exponent must be >= 0, but got {fmt_value(n)}")

        if n > self._max_cached:
            logger.debug("computing uncached power %s**%s", self._base, n)
            return self._base ** n

        value = self._slots[n]
        if value is None:
            value = self._base ** n
            self._slots[n] = value
        return value


# Module Instances -----------------------------------------------------------------------------------------------------

# Largest memoized exponent; larger powers are rebuilt on each use
MAX_CACHED_POWER = 1024

POW10 = PowCache(10, MAX_CACHED_POWER)
POW5 = PowCache(5, MAX_CACHED_POWER)
