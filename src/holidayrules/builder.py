"""
Year Calendar Builder

Resolves an ordered list of holiday rules for one year and merges the
results into a single date -> holiday mapping.

Steps per rule, in configured order:
1. Resolve the rule; skip it if absent that year.
2. Collision merge: a date already taken by an earlier rule becomes a
   CombinedHoliday named "{existing}/{new}".
3. Observance: a shiftable rule falling on a weekday named by the
   observance policy gets an extra "{name} Observed" entry on the first
   target weekday after it. Observance entries bypass the collision merge.

The rule order is significant: it decides merged names.
"""
from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Optional

from .exceptions import RuleConfigurationError
from .rules import (
    CombinedHoliday,
    HolidayRule,
    ObservedHoliday,
    Weekday,
)

logger = logging.getLogger(__name__)


OBSERVED_SUFFIX = " Observed"


@dataclass(frozen=True)
class ObservancePolicy:
    """
    Which weekend weekdays shift a holiday, and to which weekday.

    shifts maps the weekday a shiftable holiday falls on to the weekday it
    is observed on (the first such weekday strictly after the holiday).
    """
    shifts: Mapping[Weekday, Weekday] = field(default_factory=dict)
    suffix: str = OBSERVED_SUFFIX

    def __post_init__(self) -> None:
        table: dict[Weekday, Weekday] = {}
        for falls_on, observed_on in dict(self.shifts).items():
            try:
                table[Weekday(falls_on)] = Weekday(observed_on)
            except ValueError:
                raise RuleConfigurationError(
                    message=f"Invalid observance shift {falls_on!r} -> {observed_on!r}",
                    details={"falls_on": falls_on, "observed_on": observed_on},
                ) from None
        object.__setattr__(self, "shifts", MappingProxyType(table))

    def __hash__(self) -> int:
        return hash((frozenset(self.shifts.items()), self.suffix))

    def target_for(self, weekday: int) -> Optional[Weekday]:
        """Weekday the holiday is observed on, or None if it is not shifted."""
        return self.shifts.get(Weekday(weekday))

    def observance_for(self, rule: HolidayRule, occurrence: date) -> Optional[ObservedHoliday]:
        """Observed-day rule for a holiday occurrence, or None if not shifted."""
        target = self.target_for(occurrence.weekday())
        if target is None:
            return None
        return ObservedHoliday(rule.name + self.suffix, 1, target, rule)


# Saturday holidays observed on Monday, Sunday holidays on Tuesday.
MONDAYISATION = ObservancePolicy(
    shifts={
        Weekday.SATURDAY: Weekday.MONDAY,
        Weekday.SUNDAY: Weekday.TUESDAY,
    }
)

# Weekend holidays observed on the next Monday.
NEXT_MONDAY = ObservancePolicy(
    shifts={
        Weekday.SATURDAY: Weekday.MONDAY,
        Weekday.SUNDAY: Weekday.MONDAY,
    }
)

NO_OBSERVANCE = ObservancePolicy()


def merge_holidays(existing: HolidayRule, incoming: HolidayRule, on: date) -> CombinedHoliday:
    """Combine two holidays sharing a date, keeping the existing name first."""
    parts = existing.parts if isinstance(existing, CombinedHoliday) else (existing,)
    return CombinedHoliday(
        name=f"{existing.name}/{incoming.name}",
        on=on,
        parts=parts + (incoming,),
    )


def build_year_calendar(
    rules: Iterable[HolidayRule],
    shiftable: Collection[HolidayRule],
    year: int,
    policy: ObservancePolicy = MONDAYISATION,
) -> dict[date, HolidayRule]:
    """
    Build the holiday map for one year.

    Args:
        rules: Holiday rules in configured order
        shiftable: Rules eligible for observance shifting (identity membership)
        year: Target year
        policy: Weekday shifts applied to shiftable rules

    Returns:
        Insertion-ordered mapping of date -> holiday. A fresh dict every call.
    """
    calendar: dict[date, HolidayRule] = {}

    for rule in rules:
        occurrence = rule.get_instance(year)
        if occurrence is None:
            continue

        existing = calendar.get(occurrence)
        if existing is not None:
            combined = merge_holidays(existing, rule, occurrence)
            logger.debug(
                "Merged holidays on %s: %s",
                occurrence.isoformat(),
                combined.name,
                extra={"year": year, "holiday": combined.name},
            )
            calendar[occurrence] = combined
        else:
            calendar[occurrence] = rule

        if rule not in shiftable:
            continue
        observance = policy.observance_for(rule, occurrence)
        if observance is None:
            continue
        observed_on = observance.get_instance(year)
        if observed_on is None:
            continue
        displaced = calendar.get(observed_on)
        if displaced is not None:
            logger.warning(
                "%s on %s replaces %s",
                observance.name,
                observed_on.isoformat(),
                displaced.name,
                extra={"year": year, "holiday": observance.name},
            )
        logger.debug(
            "%s falls on %s; observed %s",
            rule.name,
            occurrence.strftime("%A"),
            observed_on.isoformat(),
            extra={"year": year, "holiday": observance.name},
        )
        calendar[observed_on] = observance

    return calendar


__all__ = [
    "OBSERVED_SUFFIX",
    "ObservancePolicy",
    "MONDAYISATION",
    "NEXT_MONDAY",
    "NO_OBSERVANCE",
    "merge_holidays",
    "build_year_calendar",
]
