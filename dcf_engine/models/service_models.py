"""
Service Layer Data Transfer Objects.

The result envelope returned by document-level service methods and the
structural protocol every valuation engine satisfies.
"""

from __future__ import annotations

from typing import Generic, Optional, Protocol, TypeVar, Union, runtime_checkable

from pydantic import BaseModel

from dcf_engine.models.valuation import ValuationInput, ValuationOutput

T = TypeVar("T")

__all__ = [
    "ServiceResult",
    "ValuationEngine",
]


class ServiceResult(BaseModel, Generic[T]):
    """
    Standard service return envelope.

    Hosts that prefer failure values over exceptions call the
    ``*_document`` service methods and receive this envelope.  On failure
    ``error`` holds the engine's message (e.g. ``"IRR not found"``) and
    ``error_code`` the stable ``EngineError.code``.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


@runtime_checkable
class ValuationEngine(Protocol):
    """The two operations a host may call on a valuation engine."""

    def npv(self, data: Union[ValuationInput, dict[str, object], str, bytes]) -> ValuationOutput: ...  # noqa: E704

    def irr(self, data: Union[ValuationInput, dict[str, object], str, bytes]) -> int: ...  # noqa: E704
