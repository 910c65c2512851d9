"""
Engine Error Taxonomy.

Every failure the valuation engine can report is a subclass of
``EngineError``.  Each class carries a stable ``code`` so hosts that
receive a ``ServiceResult`` envelope can branch without parsing messages.
None of these conditions is retried inside the engine.
"""

from __future__ import annotations

from typing import ClassVar, Optional

__all__ = [
    "EngineError",
    "InputValidationError",
    "InvalidMoneyError",
    "IrrNotFoundError",
    "NumericOverflowError",
    "SerializationError",
]


class EngineError(Exception):
    """Base class for all valuation engine failures."""

    code: ClassVar[str] = "engine_error"

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        self.message: str = message
        self.original_error: Optional[Exception] = original_error
        super().__init__(self.message)


class InvalidMoneyError(EngineError):
    """A Money micro-string is not a signed base-10 integer in range."""

    code: ClassVar[str] = "invalid_money"

    def __init__(self, raw: object) -> None:
        self.raw: str = str(raw)
        super().__init__(f"invalid money amount: {self.raw}")


class NumericOverflowError(EngineError):
    """An arithmetic result left the representable range.

    Also raised for a non-positive discount base and for a discount factor
    that is non-finite or exactly zero.
    """

    code: ClassVar[str] = "overflow"

    def __init__(self, original_error: Optional[Exception] = None) -> None:
        super().__init__("numeric overflow", original_error)


class SerializationError(EngineError):
    """A boundary document could not be decoded or an output encoded."""

    code: ClassVar[str] = "serialization"

    def __init__(self, detail: str, original_error: Optional[Exception] = None) -> None:
        self.detail: str = detail
        super().__init__(f"serialization error: {detail}", original_error)


class IrrNotFoundError(EngineError):
    """No IRR root exists inside the search bracket."""

    code: ClassVar[str] = "irr_not_found"

    def __init__(self) -> None:
        super().__init__("IRR not found")


class InputValidationError(EngineError):
    """Host-side strict validation rejected an otherwise decodable input."""

    code: ClassVar[str] = "validation"

    def __init__(self, detail: str) -> None:
        self.detail: str = detail
        super().__init__(f"invalid valuation input: {detail}")
