"""
Document Codec.

Converts host documents (camelCase mappings or JSON text) into
``ValuationInput`` and ``ValuationOutput`` back into documents.  Key case
conversion goes through ``dcf_engine.utils.string_helpers``; shape and
type checks go through the pydantic models.

Any document that cannot be decoded raises ``SerializationError`` carrying
the parser diagnostic.  A malformed micro string is a Money error and
surfaces as ``InvalidMoneyError`` instead.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Union

from pydantic import ValidationError

from dcf_engine.errors import SerializationError
from dcf_engine.models.money import WIRE_CONTEXT
from dcf_engine.models.valuation import ValuationInput, ValuationOutput
from dcf_engine.utils.string_helpers import denormalize_keys, normalize_keys

__all__ = ["Document", "decode_input", "encode_output", "encode_output_json"]

Document = Union[Mapping[str, object], str, bytes, bytearray]


def decode_input(document: Document) -> ValuationInput:
    """Decode a host input document.

    Args:
        document: A mapping shaped like
            ``{"cashflows": [{"dateEpochDays": 0, "amount": {"micro": "..."}}],
            "discountRateBps": 800, "compounding": "annual", "asOfEpochDays": 0}``
            or the same as JSON text.

    Raises:
        SerializationError: Malformed JSON, a non-object top level, a
            non-string micro, a missing or mistyped field, or an int32 out
            of range.  Keys must be camelCase; any other spelling is
            ignored like an unknown key, so a required field spelled that
            way is missing.
        InvalidMoneyError: A micro string that is not an in-range integer.
    """
    payload: object
    if isinstance(document, (str, bytes, bytearray)):
        try:
            payload = json.loads(document)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SerializationError(str(exc), exc) from exc
    else:
        payload = document

    if not isinstance(payload, Mapping):
        raise SerializationError(
            f"expected a JSON object, got {type(payload).__name__}"
        )

    try:
        return ValuationInput.model_validate(
            normalize_keys(payload, camel_only=True), context=WIRE_CONTEXT,
        )
    except ValidationError as exc:
        raise SerializationError(str(exc), exc) from exc


def encode_output(output: ValuationOutput) -> dict[str, object]:
    """Encode an output as ``{"npv": {"micro": "..."}, "irrBps": n}``.

    ``irrBps`` is omitted entirely when there is no IRR.
    """
    return denormalize_keys(output.model_dump(exclude_none=True))


def encode_output_json(output: ValuationOutput) -> str:
    """Encode an output as compact JSON text."""
    try:
        return json.dumps(encode_output(output), separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), exc) from exc
