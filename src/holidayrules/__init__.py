"""
holidayrules - Public Holiday Rule Engine

Computes the dates public holidays fall on for a year and a jurisdiction,
including "observed" days created when a holiday is shifted off a weekend.

Key Features:
- Rule algebra: fixed dates, nth weekday of month, nth weekday after
  another holiday, year-gated rules, explicit year maps, Easter offsets
- Per-year calendar with deterministic collision merging
  ("Easter Monday/Anzac Day")
- Jurisdiction observance policies (Mondayisation / Tuesdayisation)
- Built-in en-NZ calendar, plus YAML rule-set packs for more

Quick Start:
    from datetime import date
    from holidayrules import get_jurisdiction

    nz = get_jurisdiction("en-NZ")
    for day, name in nz.get_holidays_for_year(2027):
        print(day, name)

    nz.is_holiday(date(2027, 12, 27))   # True: Christmas Day Observed

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Rules
# =============================================================================
from .rules import (
    CombinedHoliday,
    CountDirection,
    DayInYear,
    EasterOffsetHoliday,
    FixedHoliday,
    HolidayRule,
    NthDayOfWeekAfterDayHoliday,
    NthDayOfWeekInMonthHoliday,
    ObservedHoliday,
    Weekday,
    YearDependantHoliday,
    YearMapHoliday,
    easter_sunday,
    resolve_instance,
    year_range,
)

# =============================================================================
# Builder & Jurisdictions
# =============================================================================
from .builder import (
    MONDAYISATION,
    NEXT_MONDAY,
    NO_OBSERVANCE,
    ObservancePolicy,
    build_year_calendar,
)
from .jurisdiction import Jurisdiction
from .registry import (
    bootstrap,
    get_jurisdiction,
    holidays_for_year,
    list_locales,
    register_jurisdiction,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    ConfigurationError,
    DuplicateLocaleError,
    HolidayRulesError,
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
    RuleConfigurationError,
    UnknownLocaleError,
)

__all__ = [
    "__version__",
    # Rules
    "HolidayRule",
    "FixedHoliday",
    "NthDayOfWeekInMonthHoliday",
    "NthDayOfWeekAfterDayHoliday",
    "YearDependantHoliday",
    "YearMapHoliday",
    "EasterOffsetHoliday",
    "ObservedHoliday",
    "CombinedHoliday",
    "DayInYear",
    "Weekday",
    "CountDirection",
    "easter_sunday",
    "resolve_instance",
    "year_range",
    # Builder & Jurisdictions
    "ObservancePolicy",
    "MONDAYISATION",
    "NEXT_MONDAY",
    "NO_OBSERVANCE",
    "build_year_calendar",
    "Jurisdiction",
    "get_jurisdiction",
    "list_locales",
    "register_jurisdiction",
    "holidays_for_year",
    "bootstrap",
    # Exceptions
    "HolidayRulesError",
    "RuleConfigurationError",
    "ConfigurationError",
    "UnknownLocaleError",
    "DuplicateLocaleError",
    "PackLoadError",
    "PackValidationError",
    "PackVersionMismatch",
]
