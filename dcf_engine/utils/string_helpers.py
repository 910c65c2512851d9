"""
String Helpers: Naming Convention Converter.

Single source of truth for key conversion at the document boundary.
Host documents use camelCase (``dateEpochDays``); the models use
snake_case (``date_epoch_days``).  All key transformations flow through
these functions instead of per-field alias tables.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Union, overload

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "to_snake_case",
    "to_camel_case",
    "is_camel_case",
    "normalize_keys",
    "denormalize_keys",
]

# ---------------------------------------------------------------------------
# Recursive JSON value type (PEP 484, no use of ``Any``)
# ---------------------------------------------------------------------------

JsonValue = Union[
    str,
    int,
    float,
    bool,
    None,
    dict[str, "JsonValue"],
    list["JsonValue"],
]

# ---------------------------------------------------------------------------
# Pre-compiled regex patterns
# ---------------------------------------------------------------------------

# Inserts underscore between a run of uppercase letters and an uppercase
# letter followed by a lowercase letter.  e.g. "IRRBps" -> "IRR_Bps"
_RE_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# Inserts underscore at the camelCase boundary where a lowercase letter or
# digit is followed by an uppercase letter.  e.g. "asOf" -> "as_Of"
_RE_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")

# Collapses multiple consecutive underscores into a single one.
_RE_MULTI_UNDERSCORE = re.compile(r"_+")


# ---------------------------------------------------------------------------
# Case-conversion primitives
# ---------------------------------------------------------------------------


def to_snake_case(name: str) -> str:
    """Convert a camelCase, PascalCase, or mixed-case string to snake_case.

    Examples from the valuation document::

        dateEpochDays    -> date_epoch_days
        discountRateBps  -> discount_rate_bps
        asOfEpochDays    -> as_of_epoch_days
        irrBps           -> irr_bps
        micro            -> micro
    """
    s1 = _RE_UPPER_RUN.sub(r"\1_\2", name)
    s2 = _RE_CAMEL_BOUNDARY.sub(r"\1_\2", s1)
    s3 = _RE_MULTI_UNDERSCORE.sub("_", s2)
    return s3.lower()


def to_camel_case(name: str) -> str:
    """Convert a snake_case string to camelCase.

    ``as_of_epoch_days -> asOfEpochDays``.  Leading underscores are not
    expected in model field names and are dropped.
    """
    parts: list[str] = [part for part in name.split("_") if part]
    if not parts:
        return name
    head, *tail = parts
    return head + "".join(part[:1].upper() + part[1:] for part in tail)


def is_camel_case(name: str) -> bool:
    """True when *name* is already in canonical camelCase.

    ``dateEpochDays`` and ``micro`` qualify; ``date_epoch_days`` and
    ``DateEpochDays`` do not.
    """
    return to_camel_case(to_snake_case(name)) == name


# ---------------------------------------------------------------------------
# Recursive key-conversion helpers
# ---------------------------------------------------------------------------


@overload
def normalize_keys(data: dict[str, JsonValue], *, camel_only: bool = ...) -> dict[str, JsonValue]: ...


@overload
def normalize_keys(data: list[JsonValue], *, camel_only: bool = ...) -> list[JsonValue]: ...


@overload
def normalize_keys(data: JsonValue, *, camel_only: bool = ...) -> JsonValue: ...


def normalize_keys(
    data: Union[dict[str, JsonValue], list[JsonValue], JsonValue],
    *,
    camel_only: bool = False,
) -> Union[dict[str, JsonValue], list[JsonValue], JsonValue]:
    """
    Recursively convert all mapping keys to snake_case.

    Used on incoming host documents before they are validated into the
    models.  Values are never touched.

    With *camel_only*, keys that are not canonical camelCase are dropped
    rather than converted, so a document spelling ``discount_rate_bps``
    reads as if that field were absent.
    """
    if isinstance(data, Mapping):
        return {
            to_snake_case(str(k)): normalize_keys(v, camel_only=camel_only)
            for k, v in data.items()
            if not camel_only or is_camel_case(str(k))
        }
    if isinstance(data, (list, tuple)):
        return [normalize_keys(item, camel_only=camel_only) for item in data]
    return data


def denormalize_keys(
    data: Union[dict[str, JsonValue], list[JsonValue], JsonValue],
) -> Union[dict[str, JsonValue], list[JsonValue], JsonValue]:
    """Recursively convert all mapping keys to camelCase for the host."""
    if isinstance(data, Mapping):
        return {to_camel_case(str(k)): denormalize_keys(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [denormalize_keys(item) for item in data]
    return data
