"""
Holiday Rules

The resolvable-date building blocks of every jurisdiction calendar.

Each rule knows how to compute its own occurrence for an arbitrary year,
or report that it does not occur that year by returning None. Absence is
a normal outcome (a year-gated or year-mapped holiday simply not existing
for that year) and is never signalled with an exception.

Configured rules are immutable and compare by identity: two rules are
"the same holiday" only when they are the same object, regardless of their
names. The entries the year calendar builder derives (ObservedHoliday,
CombinedHoliday) compare by value, so rebuilding a year gives an equal
calendar.

Invalid parameters are rejected at construction time with
RuleConfigurationError.

Usage:
    from holidayrules.rules import FixedHoliday, NthDayOfWeekInMonthHoliday, Weekday

    anzac = FixedHoliday("Anzac Day", 4, 25)
    labour = NthDayOfWeekInMonthHoliday("Labour Day", 4, Weekday.MONDAY, 10)

    anzac.get_instance(2024)    # date(2024, 4, 25)
    labour.get_instance(2024)   # date(2024, 10, 28)
"""
from __future__ import annotations

import calendar
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date, timedelta
from enum import Enum, IntEnum
from typing import Callable, Mapping, Optional, Union

from .exceptions import RuleConfigurationError


# =============================================================================
# Enums
# =============================================================================

class Weekday(IntEnum):
    """Day of week, numbered like date.weekday()."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class CountDirection(str, Enum):
    """Which end of the month an nth-weekday rule counts from."""
    FROM_FIRST = "from_first"
    FROM_LAST = "from_last"


# =============================================================================
# Date helpers
# =============================================================================

# Leap year used to validate month/day pairs, so Feb 29 is accepted.
_LEAP_REFERENCE_YEAR = 2000


def _make_date(year: int, month: int, day: int) -> Optional[date]:
    """Build a date, or None when it does not exist in that year."""
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _shift(d: date, days: int) -> Optional[date]:
    """Add days to a date, or None when the result leaves the date range."""
    try:
        return d + timedelta(days=days)
    except OverflowError:
        return None


def _in_year_range(year: int) -> bool:
    return MINYEAR <= year <= MAXYEAR


def easter_sunday(year: int) -> date:
    """Calculate Western Easter Sunday using the Anonymous Gregorian algorithm."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


# =============================================================================
# Validation helpers
# =============================================================================

def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise RuleConfigurationError(
            message="Holiday name must be a non-empty string",
            details={"name": name},
        )


def _check_month_day(month: int, day: int, name: str) -> None:
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise RuleConfigurationError(
            message=f"month must be 1-12, got {month!r} for {name!r}",
            details={"month": month, "holiday": name},
        )
    max_day = calendar.monthrange(_LEAP_REFERENCE_YEAR, month)[1]
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= max_day:
        raise RuleConfigurationError(
            message=f"day must be 1-{max_day} for month {month}, got {day!r} for {name!r}",
            details={"month": month, "day": day, "holiday": name},
        )


def _check_weekday(weekday: int, name: str) -> Weekday:
    if not isinstance(weekday, bool):
        try:
            return Weekday(weekday)
        except ValueError:
            pass
    raise RuleConfigurationError(
        message=f"weekday must be 0-6 (Monday-Sunday), got {weekday!r} for {name!r}",
        details={"weekday": weekday, "holiday": name},
    )


def _check_ordinal(n: int, name: str, upper: Optional[int] = None) -> None:
    valid = isinstance(n, int) and not isinstance(n, bool) and n >= 1
    if valid and upper is not None:
        valid = n <= upper
    if not valid:
        bound = f"1-{upper}" if upper is not None else ">= 1"
        raise RuleConfigurationError(
            message=f"ordinal must be {bound}, got {n!r} for {name!r}",
            details={"ordinal": n, "holiday": name},
        )


# =============================================================================
# Value types
# =============================================================================

@dataclass(frozen=True)
class DayInYear:
    """A month/day pair not yet bound to a year."""
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_month_day(self.month, self.day, f"{self.month}-{self.day}")

    def in_year(self, year: int) -> Optional[date]:
        """The concrete date in a year, or None if it does not exist (Feb 29)."""
        return _make_date(year, self.month, self.day)


DayInYearLike = Union[DayInYear, tuple[int, int]]


def _as_day_in_year(value: DayInYearLike) -> DayInYear:
    if isinstance(value, DayInYear):
        return value
    try:
        month, day = value
    except (TypeError, ValueError):
        raise RuleConfigurationError(
            message=f"Expected DayInYear or (month, day), got {value!r}",
            details={"value": repr(value)},
        ) from None
    return DayInYear(month, day)


YearPredicate = Callable[[int], bool]


def year_range(first: Optional[int] = None, last: Optional[int] = None) -> YearPredicate:
    """Inclusive year-range predicate; None leaves that end open."""
    if first is not None and last is not None and first > last:
        raise RuleConfigurationError(
            message=f"Year range is empty: {first} > {last}",
            details={"first": first, "last": last},
        )

    def predicate(year: int) -> bool:
        if first is not None and year < first:
            return False
        if last is not None and year > last:
            return False
        return True

    return predicate


# =============================================================================
# Rule base
# =============================================================================

class HolidayRule(ABC):
    """
    A holiday that can resolve its own date for any year.

    Configured rule classes are frozen dataclasses declared with eq=False
    so equality and hashing stay identity based.
    """

    name: str

    @abstractmethod
    def get_instance(self, year: int) -> Optional[date]:
        """Date of this holiday in the given year, or None if it does not occur."""
        ...

    def __str__(self) -> str:
        return self.name


def resolve_instance(rule: HolidayRule, year: int) -> Optional[date]:
    """Resolve a rule for a year."""
    return rule.get_instance(year)


# =============================================================================
# Rule variants
# =============================================================================

@dataclass(frozen=True, eq=False)
class FixedHoliday(HolidayRule):
    """Same calendar date every year (absent on Feb 29 of non-leap years)."""
    name: str
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_month_day(self.month, self.day, self.name)

    def get_instance(self, year: int) -> Optional[date]:
        return _make_date(year, self.month, self.day)


@dataclass(frozen=True, eq=False)
class NthDayOfWeekInMonthHoliday(HolidayRule):
    """
    The nth given weekday of a month, counted from the start or the end.

    When the nth occurrence does not exist in the month (a 5th Monday in
    a month that has four), the holiday is absent that year.
    """
    name: str
    n: int
    weekday: Weekday
    month: int
    direction: CountDirection = CountDirection.FROM_FIRST

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_ordinal(self.n, self.name, upper=5)
        object.__setattr__(self, "weekday", _check_weekday(self.weekday, self.name))
        _check_month_day(self.month, 1, self.name)
        try:
            object.__setattr__(self, "direction", CountDirection(self.direction))
        except ValueError:
            raise RuleConfigurationError(
                message=f"Unknown count direction {self.direction!r} for {self.name!r}",
                details={"direction": self.direction, "holiday": self.name},
            ) from None

    def get_instance(self, year: int) -> Optional[date]:
        if not _in_year_range(year):
            return None
        if self.direction is CountDirection.FROM_FIRST:
            first_day = date(year, self.month, 1)
            days_until_weekday = (self.weekday - first_day.weekday()) % 7
            result = _shift(first_day, days_until_weekday + 7 * (self.n - 1))
        else:
            last_day = date(year, self.month, calendar.monthrange(year, self.month)[1])
            days_since_weekday = (last_day.weekday() - self.weekday) % 7
            result = _shift(last_day, -(days_since_weekday + 7 * (self.n - 1)))
        if result is None or result.month != self.month or result.year != year:
            return None
        return result


@dataclass(frozen=True, eq=False)
class NthDayOfWeekAfterDayHoliday(HolidayRule):
    """
    The nth given weekday strictly after another holiday.

    The base holiday's own date never counts, even on a matching weekday.
    Absent whenever the base holiday is absent.
    """
    name: str
    n: int
    weekday: Weekday
    base: HolidayRule

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_ordinal(self.n, self.name)
        object.__setattr__(self, "weekday", _check_weekday(self.weekday, self.name))
        if not isinstance(self.base, HolidayRule):
            raise RuleConfigurationError(
                message=f"base must be a HolidayRule for {self.name!r}",
                details={"base": repr(self.base), "holiday": self.name},
            )

    def get_instance(self, year: int) -> Optional[date]:
        base_date = self.base.get_instance(year)
        if base_date is None:
            return None
        days_until_weekday = (self.weekday - base_date.weekday() - 1) % 7 + 1
        return _shift(base_date, days_until_weekday + 7 * (self.n - 1))


@dataclass(frozen=True, eq=False)
class YearDependantHoliday(HolidayRule):
    """Delegates to an inner rule only in years the predicate accepts."""
    predicate: YearPredicate
    inner: HolidayRule
    name: str = ""

    def __post_init__(self) -> None:
        if not callable(self.predicate):
            raise RuleConfigurationError(
                message="predicate must be callable(year) -> bool",
                details={"predicate": repr(self.predicate)},
            )
        if not isinstance(self.inner, HolidayRule):
            raise RuleConfigurationError(
                message="inner must be a HolidayRule",
                details={"inner": repr(self.inner)},
            )
        if not self.name:
            object.__setattr__(self, "name", self.inner.name)
        _check_name(self.name)

    def get_instance(self, year: int) -> Optional[date]:
        if not self.predicate(year):
            return None
        return self.inner.get_instance(year)


@dataclass(frozen=True, eq=False)
class YearMapHoliday(HolidayRule):
    """
    Explicit year -> day lookup for holidays with no closed-form rule.

    Years missing from the mapping are absent; there is no interpolation.
    """
    name: str
    occurrences: Mapping[int, DayInYear] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_name(self.name)
        table: dict[int, DayInYear] = {}
        for year, day in dict(self.occurrences).items():
            if not isinstance(year, int) or isinstance(year, bool):
                raise RuleConfigurationError(
                    message=f"Year keys must be integers, got {year!r} for {self.name!r}",
                    details={"year": repr(year), "holiday": self.name},
                )
            table[year] = _as_day_in_year(day)
        object.__setattr__(self, "occurrences", table)

    def get_instance(self, year: int) -> Optional[date]:
        day = self.occurrences.get(year)
        if day is None:
            return None
        return day.in_year(year)

    @property
    def years(self) -> list[int]:
        """Years this holiday is known for, ascending."""
        return sorted(self.occurrences)


@dataclass(frozen=True, eq=False)
class EasterOffsetHoliday(HolidayRule):
    """A fixed number of days from Western Easter Sunday (Good Friday = -2)."""
    name: str
    offset_days: int = 0

    def __post_init__(self) -> None:
        _check_name(self.name)
        if not isinstance(self.offset_days, int) or isinstance(self.offset_days, bool):
            raise RuleConfigurationError(
                message=f"offset_days must be an integer, got {self.offset_days!r}",
                details={"offset_days": self.offset_days, "holiday": self.name},
            )

    def get_instance(self, year: int) -> Optional[date]:
        if not _in_year_range(year):
            return None
        return _shift(easter_sunday(year), self.offset_days)


@dataclass(frozen=True)
class ObservedHoliday(NthDayOfWeekAfterDayHoliday):
    """
    Weekday a shiftable holiday is observed on when it falls on a weekend.

    Built by the year calendar builder. Equal to any other observance with
    the same name, target weekday and (identical) base holiday.
    """


@dataclass(frozen=True)
class CombinedHoliday(HolidayRule):
    """
    Two or more rules that landed on the same date in one year.

    Built by the year calendar builder only. It occurs on its single date
    and is absent in every other year. Compares by (name, on, parts).
    """
    name: str
    on: date
    parts: tuple[HolidayRule, ...] = ()

    def get_instance(self, year: int) -> Optional[date]:
        if year != self.on.year:
            return None
        return self.on


__all__ = [
    "Weekday",
    "CountDirection",
    "DayInYear",
    "easter_sunday",
    "year_range",
    "HolidayRule",
    "resolve_instance",
    "FixedHoliday",
    "NthDayOfWeekInMonthHoliday",
    "NthDayOfWeekAfterDayHoliday",
    "YearDependantHoliday",
    "YearMapHoliday",
    "EasterOffsetHoliday",
    "ObservedHoliday",
    "CombinedHoliday",
]
