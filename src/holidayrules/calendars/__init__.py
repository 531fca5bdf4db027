"""
holidayrules Calendars: built-in jurisdiction rule sets.

Each module defines its holidays as module constants and one
Jurisdiction assembling them in configured order.
"""
from __future__ import annotations

from holidayrules.calendars.new_zealand import (
    ANZAC_DAY,
    DAY_AFTER_NEW_YEARS_DAY,
    KINGS_BIRTHDAY,
    LABOUR_DAY,
    MATARIKI,
    NEW_ZEALAND,
    QUEENS_BIRTHDAY,
    WAITANGI_DAY,
    get_nz_holiday_name,
    get_nz_holidays,
    is_nz_holiday,
)

BUILTIN_JURISDICTIONS = (NEW_ZEALAND,)

__all__ = [
    "BUILTIN_JURISDICTIONS",
    # New Zealand
    "NEW_ZEALAND",
    "DAY_AFTER_NEW_YEARS_DAY",
    "WAITANGI_DAY",
    "ANZAC_DAY",
    "QUEENS_BIRTHDAY",
    "KINGS_BIRTHDAY",
    "MATARIKI",
    "LABOUR_DAY",
    "get_nz_holidays",
    "is_nz_holiday",
    "get_nz_holiday_name",
]
