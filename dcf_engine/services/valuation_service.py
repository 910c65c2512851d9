"""
Valuation Service.

The engine facade as seen by a host.  Wraps the pure financial engine
with document decoding, optional strict validation and structured logging.

Two calling styles:
    - ``npv`` / ``irr`` raise ``EngineError`` subclasses.
    - ``npv_document`` / ``irr_document`` return a ``ServiceResult``
      envelope with the camelCase output document or the failure message.

Every call is a pure function of its input; the service holds only its
logger and configuration.
"""

from __future__ import annotations

from typing import Union

from dcf_engine.config import EngineConfig
from dcf_engine.errors import EngineError
from dcf_engine.logger import StructuredLogger
from dcf_engine.models.service_models import ServiceResult
from dcf_engine.models.valuation import ValuationInput, ValuationOutput
from dcf_engine.services.base_service import BaseService
from dcf_engine.services.document_codec import Document, decode_input, encode_output
from dcf_engine.services.financial_engine import calculate_irr_bps, calculate_valuation
from dcf_engine.services.input_guards import validate_input

ValuationRequest = Union[ValuationInput, Document]


class ValuationService(BaseService):
    """
    Stateless NPV / IRR calculator service.

    Dependencies are injected via __init__ -- no global state.  Satisfies
    the ``ValuationEngine`` protocol.
    """

    def __init__(
        self,
        logger: StructuredLogger,
        config: EngineConfig,
    ) -> None:
        super().__init__(logger)
        self._config: EngineConfig = config

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _prepare(self, data: ValuationRequest) -> ValuationInput:
        engine_input: ValuationInput = (
            data if isinstance(data, ValuationInput) else decode_input(data)
        )
        if self._config.STRICT_INPUT_VALIDATION:
            validate_input(engine_input)
        return engine_input

    def _failure(self, operation: str, exc: EngineError) -> ServiceResult:
        self._logger.warning(
            "%s failed: %s",
            operation,
            exc,
            extra={"operation": operation, "error_code": exc.code},
        )
        return ServiceResult(success=False, error=exc.message, error_code=exc.code)

    # ------------------------------------------------------------------
    # Public: facade operations
    # ------------------------------------------------------------------

    def npv(self, data: ValuationRequest) -> ValuationOutput:
        """Compute NPV at the input's discount rate, together with the IRR.

        Args:
            data: A ``ValuationInput`` or a host document (mapping or JSON).

        Returns:
            ``ValuationOutput`` with ``npv`` as Money and ``irr_bps`` or
            ``None``.

        Raises:
            SerializationError, InvalidMoneyError, NumericOverflowError,
            InputValidationError.
        """
        engine_input: ValuationInput = self._prepare(data)
        output: ValuationOutput = calculate_valuation(engine_input)
        self._logger.debug(
            "npv computed",
            extra={
                "cashflow_count": len(engine_input.cashflows),
                "compounding": engine_input.compounding.value,
                "npv_micro": output.npv.micro,
                "irr_bps": output.irr_bps,
            },
        )
        return output

    def irr(self, data: ValuationRequest) -> int:
        """Compute the IRR in basis points.

        Raises:
            IrrNotFoundError: If no root lies in the search bracket.
            SerializationError, InvalidMoneyError, NumericOverflowError,
            InputValidationError.
        """
        engine_input: ValuationInput = self._prepare(data)
        irr_bps: int = calculate_irr_bps(engine_input)
        self._logger.debug(
            "irr computed",
            extra={"cashflow_count": len(engine_input.cashflows), "irr_bps": irr_bps},
        )
        return irr_bps

    # ------------------------------------------------------------------
    # Public: envelope operations
    # ------------------------------------------------------------------

    def npv_document(self, document: ValuationRequest) -> ServiceResult[dict[str, object]]:
        """``npv`` returning ``{"npv": {"micro": ...}, "irrBps"?: n}`` in an envelope."""
        try:
            output: ValuationOutput = self.npv(document)
        except EngineError as exc:
            return self._failure("npv", exc)
        return ServiceResult(success=True, data=encode_output(output))

    def irr_document(self, document: ValuationRequest) -> ServiceResult[int]:
        """``irr`` returning the basis-point rate in an envelope."""
        try:
            irr_bps: int = self.irr(document)
        except EngineError as exc:
            return self._failure("irr", exc)
        return ServiceResult(success=True, data=irr_bps)
