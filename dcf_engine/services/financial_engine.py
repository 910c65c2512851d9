"""
Valuation Financial Engine.

Pure logic library: input model -> output model, no side effects, no
logging, no shared state.  Exact-decimal accumulation for money; binary
floating point only for the dimensionless discount factor.

The IRR search treats the NPV function as an opaque objective handed to
``bisect_root``; the search never sees cash flows and the NPV function
never sees the search.
"""

from __future__ import annotations

from decimal import Decimal, DecimalException, localcontext
from functools import partial
from typing import Final, Optional

from dcf_engine.errors import IrrNotFoundError, NumericOverflowError
from dcf_engine.models.money import MONEY_CONTEXT, Money
from dcf_engine.models.valuation import BPS_DENOMINATOR, ValuationInput, ValuationOutput
from dcf_engine.utils.math_utils import (
    bisect_root,
    clamp_to_i32,
    discount_factor,
    periods_between,
    round_half_away_from_zero,
)

__all__ = [
    "IRR_LOWER_BOUND",
    "IRR_MAX_ITERATIONS",
    "IRR_TOLERANCE",
    "IRR_UPPER_BOUND",
    "calculate_irr",
    "calculate_irr_bps",
    "calculate_npv",
    "calculate_valuation",
    "rate_to_bps",
    "solve_irr_rate",
]

# Fixed search bracket: -99.99% to 1000% annual.  Roots outside it are
# reported as "no IRR"; the bracket is never widened.
IRR_LOWER_BOUND: Final[float] = -0.9999
IRR_UPPER_BOUND: Final[float] = 10.0

# Absolute NPV tolerance, in currency units.
IRR_TOLERANCE: Final[Decimal] = Decimal("1E-7")
IRR_MAX_ITERATIONS: Final[int] = 128


# --- 1. NPV ---

def calculate_npv(engine_input: ValuationInput, annual_rate: float) -> Decimal:
    """Discount every cash flow to the as-of date and sum them.

    Args:
        engine_input: Schedule, compounding convention and as-of date.
            ``discount_rate_bps`` is ignored; the rate comes from
            *annual_rate* so the IRR solver can reuse this function.
        annual_rate: Annual rate as a ratio (0.08 for 8%).

    Returns:
        The exact-decimal NPV.  An empty schedule yields ``Decimal(0)``.

    Raises:
        InvalidMoneyError: Propagated from a malformed amount.
        NumericOverflowError: If a discount base is non-positive, a
            discount factor is non-finite or zero, or decimal arithmetic
            leaves its range.
    """
    frequency: int = engine_input.compounding.periods_per_year
    total: Decimal = Decimal("0")

    try:
        with localcontext(MONEY_CONTEXT):
            for cashflow in engine_input.cashflows:
                amount: Decimal = cashflow.amount.to_decimal()
                periods: float = periods_between(
                    engine_input.as_of_epoch_days, cashflow.date_epoch_days, frequency,
                )
                factor: float = discount_factor(annual_rate, periods, frequency)
                total += amount / Decimal(factor)
    except DecimalException as exc:
        raise NumericOverflowError(exc) from exc

    return total


# --- 2. IRR ---

def solve_irr_rate(engine_input: ValuationInput) -> Optional[float]:
    """Return the raw annual rate at which NPV crosses zero, or ``None``.

    ``None`` means the schedule is empty or NPV has the same sign at both
    ends of the bracket.  An overflow at any evaluated rate aborts the
    search with ``NumericOverflowError``.
    """
    if not engine_input.cashflows:
        return None

    return bisect_root(
        partial(calculate_npv, engine_input),
        IRR_LOWER_BOUND,
        IRR_UPPER_BOUND,
        IRR_TOLERANCE,
        IRR_MAX_ITERATIONS,
    )


def rate_to_bps(rate: float) -> int:
    """Convert a ratio to basis points, rounded half away from zero and
    saturated to the int32 range."""
    return clamp_to_i32(round_half_away_from_zero(rate * BPS_DENOMINATOR))


def calculate_irr(engine_input: ValuationInput) -> Optional[int]:
    """IRR in basis points, or ``None`` when no root lies in the bracket."""
    rate: Optional[float] = solve_irr_rate(engine_input)
    if rate is None:
        return None
    return rate_to_bps(rate)


# --- 3. Facade ---

def calculate_valuation(engine_input: ValuationInput) -> ValuationOutput:
    """The ``npv`` operation: NPV at the input's rate plus the IRR.

    Both parts must succeed; there is no partial output.
    """
    npv_decimal: Decimal = calculate_npv(engine_input, engine_input.discount_rate)
    npv_money: Money = Money.from_decimal(npv_decimal)
    irr_bps: Optional[int] = calculate_irr(engine_input)
    return ValuationOutput(npv=npv_money, irr_bps=irr_bps)


def calculate_irr_bps(engine_input: ValuationInput) -> int:
    """The ``irr`` operation.

    Raises:
        IrrNotFoundError: If the solver finds no root.
        NumericOverflowError: Propagated from the solver.
    """
    irr_bps: Optional[int] = calculate_irr(engine_input)
    if irr_bps is None:
        raise IrrNotFoundError()
    return irr_bps
