"""Shared utility functions for the valuation engine.

This package provides convenience re-exports so that consumers can import
directly from ``dcf_engine.utils`` (e.g. ``from dcf_engine.utils import
normalize_keys``) while full absolute imports (e.g. ``from
dcf_engine.utils.string_helpers import normalize_keys``) remain supported.
"""

from dcf_engine.utils.dates import date_to_epoch_days, epoch_days_to_date
from dcf_engine.utils.math_utils import (
    bisect_root,
    clamp_to_i32,
    discount_factor,
    periods_between,
    round_half_away_from_zero,
)
from dcf_engine.utils.string_helpers import (
    denormalize_keys,
    is_camel_case,
    normalize_keys,
    to_camel_case,
    to_snake_case,
)

__all__ = [
    "bisect_root",
    "clamp_to_i32",
    "date_to_epoch_days",
    "denormalize_keys",
    "discount_factor",
    "epoch_days_to_date",
    "is_camel_case",
    "normalize_keys",
    "periods_between",
    "round_half_away_from_zero",
    "to_camel_case",
    "to_snake_case",
]
