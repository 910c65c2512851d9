"""
DCF Valuation Engine.

Net Present Value and Internal Rate of Return over a schedule of dated
exact-decimal cash amounts.  Pure calculation library: hosts pass a
``ValuationInput`` (or its camelCase document) and read a
``ValuationOutput`` (or its document) back.

Quick start::

    from dcf_engine import create_services

    service = create_services()["valuation_service"]
    service.npv_document({
        "cashflows": [
            {"dateEpochDays": 18250, "amount": {"micro": "-100000000"}},
            {"dateEpochDays": 18615, "amount": {"micro": "60000000"}},
            {"dateEpochDays": 18980, "amount": {"micro": "60000000"}},
        ],
        "discountRateBps": 800,
        "compounding": "annual",
        "asOfEpochDays": 18250,
    })
"""

from dcf_engine.config import EngineConfig, get_config
from dcf_engine.errors import (
    EngineError,
    InputValidationError,
    InvalidMoneyError,
    IrrNotFoundError,
    NumericOverflowError,
    SerializationError,
)
from dcf_engine.models import (
    Cashflow,
    Compounding,
    Money,
    ServiceResult,
    ValuationEngine,
    ValuationInput,
    ValuationOutput,
)
from dcf_engine.services import ServiceContainer, create_services
from dcf_engine.services.document_codec import decode_input, encode_output, encode_output_json
from dcf_engine.services.financial_engine import (
    calculate_irr,
    calculate_irr_bps,
    calculate_npv,
    calculate_valuation,
    solve_irr_rate,
)
from dcf_engine.services.input_guards import normalize_input, validate_input
from dcf_engine.services.valuation_service import ValuationService

__all__ = [
    "Cashflow",
    "Compounding",
    "EngineConfig",
    "EngineError",
    "InputValidationError",
    "InvalidMoneyError",
    "IrrNotFoundError",
    "Money",
    "NumericOverflowError",
    "SerializationError",
    "ServiceContainer",
    "ServiceResult",
    "ValuationEngine",
    "ValuationInput",
    "ValuationOutput",
    "ValuationService",
    "calculate_irr",
    "calculate_irr_bps",
    "calculate_npv",
    "calculate_valuation",
    "create_services",
    "decode_input",
    "encode_output",
    "encode_output_json",
    "get_config",
    "normalize_input",
    "solve_irr_rate",
    "validate_input",
]
