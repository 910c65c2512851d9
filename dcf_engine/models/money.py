"""
Money Value Object.

Exact fixed-point amounts held as an integer count of micro-units
(1 unit = 1,000,000 micros).  The wire form is the base-10 string of that
integer, ``{"micro": "-100000000"}``, never a decimal-point notation, so
no binary floating point touches an amount between host and engine.

All decimal arithmetic on amounts runs inside ``MONEY_CONTEXT`` so results
never depend on the caller's thread-local ``decimal`` context.
"""

from __future__ import annotations

import math
import re
from decimal import (
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Final, Union

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_serializer, field_validator

from dcf_engine.errors import InvalidMoneyError, NumericOverflowError
from dcf_engine.utils.math_utils import round_half_away_from_zero

__all__ = [
    "MICROS_PER_UNIT",
    "MICRO_MAX",
    "MICRO_MIN",
    "MICRO_SCALE",
    "MONEY_CONTEXT",
    "Money",
    "WIRE_CONTEXT",
    "WIRE_CONTEXT_KEY",
    "parse_micros",
]

MICRO_SCALE: Final[int] = 6
MICROS_PER_UNIT: Final[int] = 10 ** MICRO_SCALE

# Signed 128-bit range of the micro count.
MICRO_MIN: Final[int] = -(2 ** 127)
MICRO_MAX: Final[int] = 2 ** 127 - 1

# 60 digits holds any in-range micro count (39 digits) plus the scale with
# room to spare for quotients during discounting.
MONEY_CONTEXT: Final[Context] = Context(
    prec=60,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

_MICRO_QUANTUM: Final[Decimal] = Decimal(1).scaleb(-MICRO_SCALE)

# Validation context for host documents: there ``micro`` must be a string.
WIRE_CONTEXT_KEY: Final[str] = "wire"
WIRE_CONTEXT: Final[dict[str, bool]] = {WIRE_CONTEXT_KEY: True}

# ``int()`` alone would also accept whitespace and underscores.
_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def parse_micros(raw: str) -> int:
    """Parse a signed base-10 integer micro count.

    Raises:
        InvalidMoneyError: If *raw* is not a plain integer string or its
            value does not fit the 128-bit micro range.
    """
    if not isinstance(raw, str) or _INTEGER_RE.fullmatch(raw) is None:
        raise InvalidMoneyError(raw)
    value: int = int(raw)
    if not MICRO_MIN <= value <= MICRO_MAX:
        raise InvalidMoneyError(raw)
    return value


class Money(BaseModel):
    """An exact amount with six fractional digits.

    ``micro`` is the integer micro count.  Validation accepts either an
    integer string (the wire form) or a Python ``int``; anything else is a
    document-shape error surfaced by pydantic.  Under ``WIRE_CONTEXT``
    (host documents) only the string form is accepted.  A malformed or
    out-of-range micro string raises ``InvalidMoneyError`` directly.
    """

    model_config = ConfigDict(frozen=True)

    micro: int

    @field_validator("micro", mode="before")
    @classmethod
    def _parse_micro(cls, value: object, info: ValidationInfo) -> int:
        if isinstance(value, bool):
            raise ValueError("micro must be an integer string")
        if isinstance(value, int):
            if info.context and info.context.get(WIRE_CONTEXT_KEY):
                raise ValueError("micro must be an integer string")
            if not MICRO_MIN <= value <= MICRO_MAX:
                raise InvalidMoneyError(value)
            return value
        if isinstance(value, str):
            return parse_micros(value)
        raise ValueError("micro must be an integer string")

    @field_serializer("micro")
    def _serialize_micro(self, value: int) -> str:
        return str(value)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_string(cls, raw: str) -> Money:
        """Build Money from its wire string, e.g. ``"-100000000"``."""
        return cls(micro=parse_micros(raw))

    @classmethod
    def from_micros(cls, micro: Union[int, str]) -> Money:
        return cls(micro=micro)

    @classmethod
    def from_number(cls, units: float) -> Money:
        """Build Money from a floating amount of whole units.

        The amount is scaled to micros and rounded half away from zero.
        Intended for hosts assembling inputs, never for engine arithmetic.
        """
        if not math.isfinite(units):
            raise InvalidMoneyError(units)
        return cls(micro=int(round_half_away_from_zero(units * MICROS_PER_UNIT)))

    @classmethod
    def zero(cls) -> Money:
        return cls(micro=0)

    @classmethod
    def from_decimal(cls, value: Decimal) -> Money:
        """Round an exact decimal amount to micros.

        Rounds to six fractional digits half away from zero (0.0000005 ->
        0.000001, -0.0000005 -> -0.000001), then scales to an integer.

        Raises:
            NumericOverflowError: If *value* is not finite or the micro
                count leaves the 128-bit range.
        """
        if not value.is_finite():
            raise NumericOverflowError()
        try:
            with localcontext(MONEY_CONTEXT):
                rounded: Decimal = value.quantize(_MICRO_QUANTUM, rounding=ROUND_HALF_UP)
                micros: int = int(rounded.scaleb(MICRO_SCALE).to_integral_value())
        except DecimalException as exc:
            raise NumericOverflowError(exc) from exc
        if not MICRO_MIN <= micros <= MICRO_MAX:
            raise NumericOverflowError()
        return cls(micro=micros)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_decimal(self) -> Decimal:
        """Return the amount in whole units as an exact ``Decimal``."""
        return Decimal(self.micro).scaleb(-MICRO_SCALE, MONEY_CONTEXT)

    def to_number(self) -> float:
        """Approximate the amount as a float, for display only."""
        return float(self.micro) / MICROS_PER_UNIT
