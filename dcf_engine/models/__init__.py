from __future__ import annotations

"""
Data Models Package.

Re-exports all Pydantic models for convenient imports:
    from dcf_engine.models import Money, Cashflow, ValuationInput, ValuationOutput
    from dcf_engine.models import Compounding, ServiceResult
"""

from dcf_engine.models.enums import Compounding
from dcf_engine.models.money import Money
from dcf_engine.models.valuation import Cashflow, ValuationInput, ValuationOutput
from dcf_engine.models.service_models import ServiceResult, ValuationEngine

__all__ = [
    "Compounding",
    "Money",
    "Cashflow",
    "ValuationInput",
    "ValuationOutput",
    "ServiceResult",
    "ValuationEngine",
]
