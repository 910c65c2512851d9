"""
Valuation Data Transfer Objects.

Pydantic models for the engine's input and output.  Field names are
snake_case; the camelCase wire names (``dateEpochDays``,
``discountRateBps`` ...) are mapped at the document boundary by
``dcf_engine.utils.string_helpers``.

Integer fields are strict: a JSON string or float where an int32 is
expected is a document error, not something to coerce.
"""

from __future__ import annotations

from typing import Annotated, Final, Optional

from pydantic import BaseModel, ConfigDict, Field

from dcf_engine.models.enums import Compounding
from dcf_engine.models.money import Money

__all__ = [
    "BPS_DENOMINATOR",
    "INT32_MAX",
    "INT32_MIN",
    "Cashflow",
    "Int32",
    "ValuationInput",
    "ValuationOutput",
]

INT32_MIN: Final[int] = -(2 ** 31)
INT32_MAX: Final[int] = 2 ** 31 - 1

# One basis point is 1 / 10,000 of a unit ratio.
BPS_DENOMINATOR: Final[int] = 10_000

Int32 = Annotated[int, Field(strict=True, ge=INT32_MIN, le=INT32_MAX)]


class Cashflow(BaseModel):
    """A Money amount dated in days since the epoch."""

    model_config = ConfigDict(frozen=True)

    date_epoch_days: Int32
    amount: Money


class ValuationInput(BaseModel):
    """Top-level input to the NPV function and the IRR solver.

    Cash flows may arrive in any order; each one is discounted
    independently relative to ``as_of_epoch_days``.
    """

    model_config = ConfigDict(frozen=True)

    cashflows: tuple[Cashflow, ...]
    discount_rate_bps: Int32
    compounding: Compounding
    as_of_epoch_days: Int32

    @property
    def discount_rate(self) -> float:
        """The discount rate as a float ratio (800 bps -> 0.08)."""
        return self.discount_rate_bps / BPS_DENOMINATOR


class ValuationOutput(BaseModel):
    """Result of the ``npv`` facade operation.

    ``irr_bps`` is ``None`` when the schedule is empty or no root lies in
    the search bracket.
    """

    model_config = ConfigDict(frozen=True)

    npv: Money
    irr_bps: Optional[Int32] = None
