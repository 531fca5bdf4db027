"""
New Zealand (en-NZ) Holiday Calendar

National public holidays. Regional anniversary days are not included.

Rules sourced from
    https://www.employment.govt.nz/leave-and-holidays/public-holidays/public-holidays-and-anniversary-dates/
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from holidayrules.builder import MONDAYISATION
from holidayrules.common import (
    BOXING_DAY,
    CHRISTMAS_DAY,
    EASTER_MONDAY,
    EASTER_SUNDAY,
    GOOD_FRIDAY,
    NEW_YEARS_DAY,
)
from holidayrules.jurisdiction import Jurisdiction
from holidayrules.rules import (
    DayInYear,
    FixedHoliday,
    NthDayOfWeekInMonthHoliday,
    Weekday,
    YearDependantHoliday,
    YearMapHoliday,
    year_range,
)


DAY_AFTER_NEW_YEARS_DAY = FixedHoliday("Day after New Year's Day", 1, 2)
WAITANGI_DAY = FixedHoliday("Waitangi Day", 2, 6)
ANZAC_DAY = FixedHoliday("Anzac Day", 4, 25)

# 1st Monday in June; the Sovereign's Birthday was renamed from 2023.
QUEENS_BIRTHDAY = YearDependantHoliday(
    year_range(last=2022),
    NthDayOfWeekInMonthHoliday("Queen's Birthday", 1, Weekday.MONDAY, 6),
)
KINGS_BIRTHDAY = YearDependantHoliday(
    year_range(first=2023),
    NthDayOfWeekInMonthHoliday("King's Birthday", 1, Weekday.MONDAY, 6),
)

# No closed-form rule; dates set by the Matariki Advisory Group up to 2052.
# See https://www.mbie.govt.nz/assets/matariki-dates-2022-to-2052-matariki-advisory-group.pdf
MATARIKI = YearMapHoliday(
    "Matariki",
    {
        2022: DayInYear(6, 24),
        2023: DayInYear(7, 14),
        2024: DayInYear(6, 28),
        2025: DayInYear(6, 20),
        2026: DayInYear(7, 10),
        2027: DayInYear(6, 25),
        2028: DayInYear(7, 14),
        2029: DayInYear(7, 6),
        2030: DayInYear(6, 21),
        2031: DayInYear(7, 11),
        2032: DayInYear(7, 2),
        2033: DayInYear(6, 24),
        2034: DayInYear(7, 7),
        2035: DayInYear(6, 29),
    },
)

LABOUR_DAY = NthDayOfWeekInMonthHoliday("Labour Day", 4, Weekday.MONDAY, 10)


NEW_ZEALAND = Jurisdiction(
    locale="en-NZ",
    name="New Zealand",
    rules=(
        NEW_YEARS_DAY,
        DAY_AFTER_NEW_YEARS_DAY,
        WAITANGI_DAY,
        GOOD_FRIDAY,
        EASTER_SUNDAY,
        EASTER_MONDAY,
        ANZAC_DAY,
        QUEENS_BIRTHDAY,
        KINGS_BIRTHDAY,
        MATARIKI,
        LABOUR_DAY,
        CHRISTMAS_DAY,
        BOXING_DAY,
    ),
    # Mondayised: Saturday -> Monday, Sunday -> Tuesday
    shiftable=frozenset({
        NEW_YEARS_DAY,
        DAY_AFTER_NEW_YEARS_DAY,
        CHRISTMAS_DAY,
        BOXING_DAY,
    }),
    policy=MONDAYISATION,
)


def get_nz_holidays(year: int) -> list[tuple[date, str]]:
    """New Zealand public holidays for a year, sorted by date."""
    return NEW_ZEALAND.get_holidays_for_year(year)


def is_nz_holiday(d: date) -> bool:
    """Check if a date is a New Zealand public holiday."""
    return NEW_ZEALAND.is_holiday(d)


def get_nz_holiday_name(d: date) -> Optional[str]:
    return NEW_ZEALAND.get_holiday_name(d)
