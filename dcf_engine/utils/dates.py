"""Epoch-day helpers for hosts assembling valuation inputs."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Final, Union

__all__ = ["EPOCH", "date_to_epoch_days", "epoch_days_to_date"]

EPOCH: Final[date] = date(1970, 1, 1)


def date_to_epoch_days(value: Union[date, str]) -> int:
    """Days since 1970-01-01 for a ``date`` or an ISO ``YYYY-MM-DD`` string.

    Time-of-day and timezone are not part of the day-number model; pass a
    plain calendar date.
    """
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return (value - EPOCH).days


def epoch_days_to_date(epoch_days: int) -> date:
    return EPOCH + timedelta(days=epoch_days)
