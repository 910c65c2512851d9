"""
Input Guards.

Host-side helpers applied before an input reaches the engine.  The engine
itself accepts unsorted and empty schedules; these guards exist for hosts
that want the stricter contract (at least one cash flow) or a
chronologically ordered copy for display.
"""

from __future__ import annotations

from dcf_engine.errors import InputValidationError
from dcf_engine.models.valuation import ValuationInput

__all__ = ["normalize_input", "validate_input"]


def normalize_input(engine_input: ValuationInput) -> ValuationInput:
    """Return a copy with cash flows sorted by date.

    The sort is stable: flows on the same day keep their relative order.
    NPV and IRR do not depend on the order.
    """
    ordered = tuple(sorted(engine_input.cashflows, key=lambda cf: cf.date_epoch_days))
    return engine_input.model_copy(update={"cashflows": ordered})


def validate_input(engine_input: ValuationInput) -> None:
    """Reject inputs the strict host contract does not allow.

    Field types, int32 ranges and Money syntax are already enforced by
    the models; this adds the schedule-level rule.

    Raises:
        InputValidationError: If the schedule has no cash flows.
    """
    if not engine_input.cashflows:
        raise InputValidationError("cashflows must contain at least one entry")
