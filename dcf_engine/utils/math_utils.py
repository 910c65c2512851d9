"""
Financial Math Utilities.

Dimensionless helpers behind the valuation engine: period counting,
discount factors, rounding and saturation of floats, and a bracketed
bisection root finder.  Nothing here knows about Money or cash flows;
amounts stay in ``Decimal`` and are handled by the engine.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Callable, Final, Optional

from dcf_engine.errors import NumericOverflowError

__all__: list[str] = [
    "DAYS_PER_YEAR",
    "bisect_root",
    "clamp_to_i32",
    "discount_factor",
    "periods_between",
    "round_half_away_from_zero",
]

# Fixed day count: every year is 365 days regardless of leap years.
DAYS_PER_YEAR: Final[float] = 365.0

_I32_MIN: Final[int] = -(2 ** 31)
_I32_MAX: Final[int] = 2 ** 31 - 1


def periods_between(as_of: int, target: int, periods_per_year: int) -> float:
    """Return the number of discounting periods from *as_of* to *target*.

    A period lasts ``365 / periods_per_year`` days.  The result may be
    fractional, and it is negative when *target* precedes *as_of*.
    """
    delta_days: float = float(target - as_of)
    return delta_days / (DAYS_PER_YEAR / periods_per_year)


def discount_factor(annual_rate: float, periods: float, periods_per_year: int) -> float:
    """Compute ``(1 + annual_rate / periods_per_year) ** periods``.

    Floating point is acceptable here because the factor is a
    dimensionless ratio, never a money amount.

    Raises:
        NumericOverflowError: If the base is zero or negative (no real
            power for fractional exponents), or the factor is non-finite
            or underflows to exactly zero.
    """
    base: float = 1.0 + annual_rate / periods_per_year
    if base <= 0.0:
        raise NumericOverflowError()

    try:
        factor: float = base ** periods
    except OverflowError as exc:
        raise NumericOverflowError(exc) from exc

    if not math.isfinite(factor) or factor == 0.0:
        raise NumericOverflowError()
    return factor


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integer, midpoints away from zero.

    Python's ``round`` uses banker's rounding (``round(0.5) == 0``); the
    engine needs ``0.5 -> 1`` and ``-0.5 -> -1``.  NaN and infinities are
    returned unchanged.
    """
    if not math.isfinite(value):
        return value
    # The fractional part is exact; ``abs(value) + 0.5`` is not, and would
    # carry 0.49999999999999994 up to 1.
    whole: int = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return float(whole)


def clamp_to_i32(value: float) -> int:
    """Saturate a float into the signed 32-bit range.

    NaN maps to 0; values beyond either bound map to that bound instead
    of wrapping.  In-range values are truncated toward zero.
    """
    if math.isnan(value):
        return 0
    if value < _I32_MIN:
        return _I32_MIN
    if value > _I32_MAX:
        return _I32_MAX
    return int(value)


def bisect_root(
    objective: Callable[[float], Decimal],
    low: float,
    high: float,
    tolerance: Decimal,
    max_iterations: int,
) -> Optional[float]:
    """Find a root of *objective* inside ``[low, high]`` by bisection.

    The objective is opaque: any exception it raises aborts the search
    and propagates unchanged.

    Args:
        objective: Function of a rate returning an exact decimal value.
        low: Lower bound of the bracket.
        high: Upper bound of the bracket.
        tolerance: A midpoint whose ``|objective|`` is below this value is
            accepted as the root.
        max_iterations: Upper bound on midpoint evaluations.

    Returns:
        The accepted midpoint; the midpoint of the final bracket when the
        iterations run out without meeting *tolerance*; or ``None`` when
        the objective has the same sign at both bounds.  "Same sign" means
        both negative or both non-negative.
    """
    value_low: Decimal = objective(low)
    value_high: Decimal = objective(high)

    if (value_low < 0) == (value_high < 0):
        return None

    for _ in range(max_iterations):
        mid: float = (low + high) / 2.0
        value_mid: Decimal = objective(mid)

        if abs(value_mid) < tolerance:
            return mid

        # Keep the half-interval whose endpoints still straddle the sign change.
        if (value_mid < 0) == (value_low < 0):
            low, value_low = mid, value_mid
        else:
            high = mid

    return (low + high) / 2.0
