"""
Shared Holidays

Canonical holiday singletons reused by several jurisdictions. Rules
compare by identity, so every calendar that observes Christmas must
reference CHRISTMAS_DAY itself rather than an equal-looking copy.
"""
from __future__ import annotations

from .rules import EasterOffsetHoliday, FixedHoliday, HolidayRule


# Global
NEW_YEARS_DAY = FixedHoliday("New Year's Day", 1, 1)
BOXING_DAY = FixedHoliday("Boxing Day", 12, 26)

# Christian
GOOD_FRIDAY = EasterOffsetHoliday("Good Friday", -2)
EASTER_SUNDAY = EasterOffsetHoliday("Easter Sunday", 0)
EASTER_MONDAY = EasterOffsetHoliday("Easter Monday", 1)
CHRISTMAS_DAY = FixedHoliday("Christmas Day", 12, 25)


# Keys used by rule-set packs to reference the shared singletons.
COMMON_HOLIDAYS: dict[str, HolidayRule] = {
    "new_years_day": NEW_YEARS_DAY,
    "good_friday": GOOD_FRIDAY,
    "easter_sunday": EASTER_SUNDAY,
    "easter_monday": EASTER_MONDAY,
    "christmas_day": CHRISTMAS_DAY,
    "boxing_day": BOXING_DAY,
}


def get_common_holiday(key: str) -> HolidayRule:
    """Look up a shared holiday by pack key (e.g. "christmas_day")."""
    try:
        return COMMON_HOLIDAYS[key]
    except KeyError:
        available = ", ".join(sorted(COMMON_HOLIDAYS))
        raise KeyError(f"Unknown common holiday: '{key}'. Available: {available}") from None


__all__ = [
    "NEW_YEARS_DAY",
    "BOXING_DAY",
    "GOOD_FRIDAY",
    "EASTER_SUNDAY",
    "EASTER_MONDAY",
    "CHRISTMAS_DAY",
    "COMMON_HOLIDAYS",
    "get_common_holiday",
]
