"""
Shared Enumerations for Valuation Models.

StrEnum values compare equal to their string equivalents, so
``Compounding.ANNUAL == "annual"`` holds and the wire form is the value.
"""

from __future__ import annotations
from enum import StrEnum


class Compounding(StrEnum):
    """Discounting convention: how many periods make up one year.

    Only annual and monthly compounding are supported.  The period length
    is always ``365 / periods_per_year`` days (no leap-year adjustment).
    """

    ANNUAL = "annual"
    MONTHLY = "monthly"

    @property
    def periods_per_year(self) -> int:
        if self is Compounding.MONTHLY:
            return 12
        return 1
