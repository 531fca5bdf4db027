"""
Jurisdiction Rule Sets

A jurisdiction is a named, ordered list of holiday rules plus the subset
of those rules that shift to a weekday when they fall on a weekend.
Adding a jurisdiction means supplying a new Jurisdiction; the engine
itself does not change.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import MINYEAR, date
from typing import Optional

from .builder import MONDAYISATION, ObservancePolicy, build_year_calendar
from .exceptions import RuleConfigurationError
from .rules import HolidayRule


@dataclass(frozen=True, eq=False)
class Jurisdiction:
    """
    Holiday configuration for one locale.

    shiftable must be a subset of rules (checked by identity) so a
    shiftable holiday can't be silently left out of the calendar.
    """
    locale: str
    name: str
    rules: tuple[HolidayRule, ...]
    shiftable: frozenset[HolidayRule] = field(default_factory=frozenset)
    policy: ObservancePolicy = MONDAYISATION

    def __post_init__(self) -> None:
        if not isinstance(self.locale, str) or not self.locale.strip():
            raise RuleConfigurationError(
                message="Jurisdiction locale must be a non-empty string",
                details={"locale": self.locale},
            )
        rules = tuple(self.rules)
        shiftable = frozenset(self.shiftable)
        object.__setattr__(self, "rules", rules)
        object.__setattr__(self, "shiftable", shiftable)

        seen: set[int] = set()
        for rule in rules:
            if not isinstance(rule, HolidayRule):
                raise RuleConfigurationError(
                    message=f"Not a holiday rule: {rule!r}",
                    details={"rule": repr(rule)},
                    locale=self.locale,
                )
            if id(rule) in seen:
                raise RuleConfigurationError(
                    message=f"Holiday configured twice: {rule.name!r}",
                    details={"holiday": rule.name},
                    locale=self.locale,
                )
            seen.add(id(rule))

        missing = [rule.name for rule in shiftable if id(rule) not in seen]
        if missing:
            raise RuleConfigurationError(
                message=f"Shiftable holidays not in rule list: {', '.join(sorted(missing))}",
                details={"missing": sorted(missing)},
                locale=self.locale,
            )

    def year_calendar(self, year: int) -> dict[date, HolidayRule]:
        """Resolved, merged and observance-augmented holidays for a year."""
        return build_year_calendar(self.rules, self.shiftable, year, self.policy)

    def get_holidays_for_year(self, year: int) -> list[tuple[date, str]]:
        """(date, name) pairs for a year, sorted by date."""
        return sorted(
            ((d, holiday.name) for d, holiday in self.year_calendar(year).items()),
            key=lambda x: x[0],
        )

    def holiday_on(self, d: date) -> Optional[HolidayRule]:
        """
        The holiday entry for a date, or None.

        A late-December holiday can be observed in early January, so
        January dates also check the previous year's calendar. An entry
        in the date's own year wins.
        """
        holiday = self.year_calendar(d.year).get(d)
        if holiday is None and d.month == 1 and d.year > MINYEAR:
            holiday = self.year_calendar(d.year - 1).get(d)
        return holiday

    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday (observed days included)."""
        return self.holiday_on(d) is not None

    def get_holiday_name(self, d: date) -> Optional[str]:
        holiday = self.holiday_on(d)
        return holiday.name if holiday is not None else None

    def holiday_names(self) -> list[str]:
        """Names of the configured rules, in order."""
        return [rule.name for rule in self.rules]


__all__ = ["Jurisdiction"]
