"""Tests for holiday rule variants and their per-year resolution."""

import dataclasses
from datetime import date

import pytest

from holidayrules.exceptions import RuleConfigurationError
from holidayrules.rules import (
    CombinedHoliday,
    CountDirection,
    DayInYear,
    EasterOffsetHoliday,
    FixedHoliday,
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


# ---------------------------------------------------------------------------
# DayInYear
# ---------------------------------------------------------------------------

class TestDayInYear:
    def test_in_year(self):
        assert DayInYear(6, 24).in_year(2022) == date(2022, 6, 24)

    def test_feb_29_accepted_at_construction(self):
        leap_day = DayInYear(2, 29)
        assert leap_day.in_year(2024) == date(2024, 2, 29)
        assert leap_day.in_year(2023) is None

    @pytest.mark.parametrize("month,day", [(0, 1), (13, 1), (1, 0), (1, 32), (2, 30), (4, 31)])
    def test_invalid_month_day_rejected(self, month, day):
        with pytest.raises(RuleConfigurationError):
            DayInYear(month, day)

    def test_value_equality(self):
        assert DayInYear(1, 2) == DayInYear(1, 2)


# ---------------------------------------------------------------------------
# FixedHoliday
# ---------------------------------------------------------------------------

class TestFixedHoliday:
    @pytest.mark.parametrize("year", [1900, 2011, 2024, 2100, 2999])
    def test_occurs_every_year(self, year):
        anzac = FixedHoliday("Anzac Day", 4, 25)
        assert anzac.get_instance(year) == date(year, 4, 25)

    def test_feb_29_absent_in_non_leap_years(self):
        leap = FixedHoliday("Leap Day", 2, 29)
        assert leap.get_instance(2024) == date(2024, 2, 29)
        assert leap.get_instance(2000) == date(2000, 2, 29)
        assert leap.get_instance(2023) is None
        assert leap.get_instance(2100) is None

    def test_out_of_range_year_is_absent(self):
        assert FixedHoliday("Anzac Day", 4, 25).get_instance(10000) is None

    @pytest.mark.parametrize("month,day", [(13, 1), (0, 5), (2, 30), (6, 31), (1, 0)])
    def test_invalid_date_rejected(self, month, day):
        with pytest.raises(RuleConfigurationError, match="must be"):
            FixedHoliday("Bad", month, day)

    def test_blank_name_rejected(self):
        with pytest.raises(RuleConfigurationError, match="name"):
            FixedHoliday("  ", 1, 1)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            FixedHoliday("Bad", 13, 1)

    def test_frozen(self):
        holiday = FixedHoliday("Anzac Day", 4, 25)
        with pytest.raises(dataclasses.FrozenInstanceError):
            holiday.day = 26  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Identity semantics
# ---------------------------------------------------------------------------

class TestIdentity:
    def test_same_parameters_are_different_holidays(self):
        a = FixedHoliday("Christmas Day", 12, 25)
        b = FixedHoliday("Christmas Day", 12, 25)
        assert a != b
        assert a == a
        assert len({a, b}) == 2

    def test_membership_is_by_identity(self):
        a = FixedHoliday("Christmas Day", 12, 25)
        b = FixedHoliday("Christmas Day", 12, 25)
        assert a in frozenset({a})
        assert b not in frozenset({a})
        assert b not in [a]

    def test_str_is_name(self):
        assert str(FixedHoliday("Waitangi Day", 2, 6)) == "Waitangi Day"


# ---------------------------------------------------------------------------
# NthDayOfWeekInMonthHoliday
# ---------------------------------------------------------------------------

class TestNthDayOfWeekInMonth:
    @pytest.mark.parametrize("year,expected", [
        (2011, date(2011, 10, 24)),
        (2023, date(2023, 10, 23)),
        (2024, date(2024, 10, 28)),
    ])
    def test_fourth_monday_of_october(self, year, expected):
        labour = NthDayOfWeekInMonthHoliday("Labour Day", 4, Weekday.MONDAY, 10)
        assert labour.get_instance(year) == expected

    def test_first_occurrence_on_the_first(self):
        # 1 Jan 2024 is a Monday
        rule = NthDayOfWeekInMonthHoliday("First Monday", 1, Weekday.MONDAY, 1)
        assert rule.get_instance(2024) == date(2024, 1, 1)

    def test_last_monday_of_may(self):
        rule = NthDayOfWeekInMonthHoliday(
            "Last Monday", 1, Weekday.MONDAY, 5, CountDirection.FROM_LAST
        )
        assert rule.get_instance(2024) == date(2024, 5, 27)

    def test_second_to_last_monday_of_may(self):
        rule = NthDayOfWeekInMonthHoliday(
            "Second Last Monday", 2, Weekday.MONDAY, 5, CountDirection.FROM_LAST
        )
        assert rule.get_instance(2024) == date(2024, 5, 20)

    def test_last_weekday_on_the_last_day(self):
        # 31 Oct 2024 is a Thursday
        rule = NthDayOfWeekInMonthHoliday(
            "Last Thursday", 1, Weekday.THURSDAY, 10, CountDirection.FROM_LAST
        )
        assert rule.get_instance(2024) == date(2024, 10, 31)

    def test_last_day_of_december(self):
        # 31 Dec 2024 is a Tuesday
        rule = NthDayOfWeekInMonthHoliday(
            "Last Tuesday", 1, Weekday.TUESDAY, 12, CountDirection.FROM_LAST
        )
        assert rule.get_instance(2024) == date(2024, 12, 31)

    def test_direction_accepts_string_value(self):
        rule = NthDayOfWeekInMonthHoliday("Last Monday", 1, 0, 5, "from_last")
        assert rule.direction is CountDirection.FROM_LAST
        assert rule.weekday is Weekday.MONDAY

    def test_fifth_occurrence_present(self):
        rule = NthDayOfWeekInMonthHoliday("Fifth Monday", 5, Weekday.MONDAY, 9)
        assert rule.get_instance(2024) == date(2024, 9, 30)

    def test_fifth_occurrence_missing_is_absent(self):
        forward = NthDayOfWeekInMonthHoliday("Fifth Monday", 5, Weekday.MONDAY, 2)
        backward = NthDayOfWeekInMonthHoliday(
            "Fifth Last Monday", 5, Weekday.MONDAY, 2, CountDirection.FROM_LAST
        )
        assert forward.get_instance(2024) is None
        assert backward.get_instance(2024) is None

    @pytest.mark.parametrize("kwargs,message", [
        ({"n": 0}, "ordinal"),
        ({"n": 6}, "ordinal"),
        ({"weekday": 7}, "weekday"),
        ({"month": 13}, "month"),
        ({"direction": "sideways"}, "direction"),
    ])
    def test_invalid_configuration(self, kwargs, message):
        params = {"name": "Bad", "n": 1, "weekday": Weekday.MONDAY, "month": 6}
        params.update(kwargs)
        with pytest.raises(RuleConfigurationError, match=message):
            NthDayOfWeekInMonthHoliday(**params)


# ---------------------------------------------------------------------------
# NthDayOfWeekAfterDayHoliday
# ---------------------------------------------------------------------------

class TestNthDayOfWeekAfterDay:
    def setup_method(self):
        # 1 Jan 2022 is a Saturday
        self.base = FixedHoliday("New Year's Day", 1, 1)

    def test_first_monday_after(self):
        rule = NthDayOfWeekAfterDayHoliday("Observed", 1, Weekday.MONDAY, self.base)
        assert rule.get_instance(2022) == date(2022, 1, 3)

    def test_after_is_strict(self):
        rule = NthDayOfWeekAfterDayHoliday("Next Saturday", 1, Weekday.SATURDAY, self.base)
        assert rule.get_instance(2022) == date(2022, 1, 8)

    def test_second_occurrence(self):
        rule = NthDayOfWeekAfterDayHoliday("Second Tuesday", 2, Weekday.TUESDAY, self.base)
        assert rule.get_instance(2022) == date(2022, 1, 11)

    def test_chained_rules(self):
        first_monday = NthDayOfWeekAfterDayHoliday("Monday", 1, Weekday.MONDAY, self.base)
        tuesday = NthDayOfWeekAfterDayHoliday("Tuesday", 1, Weekday.TUESDAY, first_monday)
        assert tuesday.get_instance(2022) == date(2022, 1, 4)

    def test_can_cross_into_next_year(self):
        # 31 Dec 2022 is a Saturday
        new_years_eve = FixedHoliday("New Year's Eve", 12, 31)
        rule = NthDayOfWeekAfterDayHoliday("Monday", 1, Weekday.MONDAY, new_years_eve)
        assert rule.get_instance(2022) == date(2023, 1, 2)

    def test_absent_base_propagates(self):
        base = YearMapHoliday("Mapped", {2022: DayInYear(6, 24)})
        rule = NthDayOfWeekAfterDayHoliday("Monday After", 1, Weekday.MONDAY, base)
        assert rule.get_instance(2022) == date(2022, 6, 27)
        assert rule.get_instance(2023) is None

    def test_overflow_is_absent(self):
        new_years_eve = FixedHoliday("New Year's Eve", 12, 31)
        rule = NthDayOfWeekAfterDayHoliday("Monday", 1, Weekday.MONDAY, new_years_eve)
        assert rule.get_instance(9999) is None

    def test_base_must_be_rule(self):
        with pytest.raises(RuleConfigurationError, match="base"):
            NthDayOfWeekAfterDayHoliday("Bad", 1, Weekday.MONDAY, date(2022, 1, 1))

    def test_ordinal_must_be_positive(self):
        with pytest.raises(RuleConfigurationError, match="ordinal"):
            NthDayOfWeekAfterDayHoliday("Bad", 0, Weekday.MONDAY, self.base)


# ---------------------------------------------------------------------------
# YearDependantHoliday
# ---------------------------------------------------------------------------

class TestYearDependant:
    def setup_method(self):
        self.inner = NthDayOfWeekInMonthHoliday("Queen's Birthday", 1, Weekday.MONDAY, 6)
        self.rule = YearDependantHoliday(year_range(last=2022), self.inner)

    def test_inside_range_matches_inner(self):
        for year in (1990, 2011, 2022):
            assert self.rule.get_instance(year) == self.inner.get_instance(year)
        assert self.rule.get_instance(2022) == date(2022, 6, 6)

    def test_outside_range_is_absent(self):
        assert self.rule.get_instance(2023) is None
        assert self.rule.get_instance(2050) is None

    def test_name_defaults_to_inner(self):
        assert self.rule.name == "Queen's Birthday"

    def test_explicit_name(self):
        rule = YearDependantHoliday(lambda y: y % 2 == 0, self.inner, name="Even Birthday")
        assert rule.name == "Even Birthday"
        assert rule.get_instance(2023) is None
        assert rule.get_instance(2024) == date(2024, 6, 3)

    def test_predicate_must_be_callable(self):
        with pytest.raises(RuleConfigurationError, match="callable"):
            YearDependantHoliday(2022, self.inner)

    def test_inner_must_be_rule(self):
        with pytest.raises(RuleConfigurationError, match="inner"):
            YearDependantHoliday(year_range(), "Queen's Birthday")


class TestYearRange:
    def test_bounds_are_inclusive(self):
        predicate = year_range(2020, 2022)
        assert [predicate(y) for y in (2019, 2020, 2021, 2022, 2023)] == [
            False, True, True, True, False,
        ]

    def test_open_ends(self):
        assert year_range()(1) is True
        assert year_range(first=2023)(2022) is False
        assert year_range(last=2022)(2023) is False

    def test_empty_range_rejected(self):
        with pytest.raises(RuleConfigurationError, match="empty"):
            year_range(2030, 2020)


# ---------------------------------------------------------------------------
# YearMapHoliday
# ---------------------------------------------------------------------------

class TestYearMap:
    def test_mapped_year(self):
        rule = YearMapHoliday("Matariki", {2022: DayInYear(6, 24), 2023: DayInYear(7, 14)})
        assert rule.get_instance(2022) == date(2022, 6, 24)
        assert rule.get_instance(2023) == date(2023, 7, 14)

    def test_unmapped_year_is_absent(self):
        rule = YearMapHoliday("Matariki", {2022: DayInYear(6, 24)})
        assert rule.get_instance(2021) is None
        assert rule.get_instance(2024) is None

    def test_tuple_values_are_accepted(self):
        rule = YearMapHoliday("Matariki", {2024: (6, 28)})
        assert rule.occurrences[2024] == DayInYear(6, 28)
        assert rule.get_instance(2024) == date(2024, 6, 28)

    def test_mapping_is_copied(self):
        table = {2022: DayInYear(6, 24)}
        rule = YearMapHoliday("Matariki", table)
        table[2030] = DayInYear(6, 21)
        assert rule.get_instance(2030) is None

    def test_years_sorted(self):
        rule = YearMapHoliday("Mapped", {2030: (1, 1), 2022: (1, 1), 2025: (1, 1)})
        assert rule.years == [2022, 2025, 2030]

    def test_invalid_day_rejected(self):
        with pytest.raises(RuleConfigurationError):
            YearMapHoliday("Bad", {2022: (13, 1)})

    def test_non_integer_year_rejected(self):
        with pytest.raises(RuleConfigurationError, match="Year keys"):
            YearMapHoliday("Bad", {"2022": (6, 24)})


# ---------------------------------------------------------------------------
# Easter
# ---------------------------------------------------------------------------

class TestEaster:
    @pytest.mark.parametrize("year,expected", [
        (2011, date(2011, 4, 24)),
        (2022, date(2022, 4, 17)),
        (2023, date(2023, 4, 9)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2027, date(2027, 3, 28)),
    ])
    def test_easter_sunday(self, year, expected):
        assert easter_sunday(year) == expected

    def test_offsets(self):
        assert EasterOffsetHoliday("Good Friday", -2).get_instance(2024) == date(2024, 3, 29)
        assert EasterOffsetHoliday("Easter Monday", 1).get_instance(2011) == date(2011, 4, 25)

    def test_offset_must_be_integer(self):
        with pytest.raises(RuleConfigurationError, match="offset_days"):
            EasterOffsetHoliday("Bad", 1.5)


# ---------------------------------------------------------------------------
# CombinedHoliday & resolve_instance
# ---------------------------------------------------------------------------

class TestCombinedHoliday:
    def test_only_occurs_in_its_own_year(self):
        combined = CombinedHoliday("Easter Monday/Anzac Day", date(2011, 4, 25))
        assert combined.get_instance(2011) == date(2011, 4, 25)
        assert combined.get_instance(2012) is None

    def test_equal_by_value(self):
        easter_monday = EasterOffsetHoliday("Easter Monday", 1)
        anzac = FixedHoliday("Anzac Day", 4, 25)
        first = CombinedHoliday("Easter Monday/Anzac Day", date(2011, 4, 25), (easter_monday, anzac))
        second = CombinedHoliday("Easter Monday/Anzac Day", date(2011, 4, 25), (easter_monday, anzac))
        assert first == second
        assert hash(first) == hash(second)

    def test_parts_compared_by_identity(self):
        anzac = FixedHoliday("Anzac Day", 4, 25)
        lookalike = FixedHoliday("Anzac Day", 4, 25)
        on = date(2011, 4, 25)
        assert CombinedHoliday("Anzac Day", on, (anzac,)) != CombinedHoliday("Anzac Day", on, (lookalike,))


class TestObservedHoliday:
    def setup_method(self):
        # 25 Dec 2027 is a Saturday
        self.christmas = FixedHoliday("Christmas Day", 12, 25)

    def test_resolves_like_nth_weekday_after(self):
        observed = ObservedHoliday("Christmas Day Observed", 1, Weekday.MONDAY, self.christmas)
        assert isinstance(observed, NthDayOfWeekAfterDayHoliday)
        assert observed.get_instance(2027) == date(2027, 12, 27)

    def test_equal_by_value(self):
        first = ObservedHoliday("Christmas Day Observed", 1, Weekday.MONDAY, self.christmas)
        second = ObservedHoliday("Christmas Day Observed", 1, Weekday.MONDAY, self.christmas)
        assert first == second
        assert len({first, second}) == 1

    def test_different_base_not_equal(self):
        other = FixedHoliday("Christmas Day", 12, 25)
        first = ObservedHoliday("Christmas Day Observed", 1, Weekday.MONDAY, self.christmas)
        second = ObservedHoliday("Christmas Day Observed", 1, Weekday.MONDAY, other)
        assert first != second

    def test_not_equal_to_configured_rule(self):
        observed = ObservedHoliday("Christmas Day Observed", 1, Weekday.MONDAY, self.christmas)
        configured = NthDayOfWeekAfterDayHoliday("Christmas Day Observed", 1, Weekday.MONDAY, self.christmas)
        assert observed != configured


class TestBooleanArguments:
    @pytest.mark.parametrize("month,day", [(True, 1), (1, True), (False, 1)])
    def test_fixed_holiday_rejects_bools(self, month, day):
        with pytest.raises(RuleConfigurationError):
            FixedHoliday("Flag Day", month, day)

    def test_day_in_year_rejects_bools(self):
        with pytest.raises(RuleConfigurationError, match="month must be"):
            DayInYear(True, 1)

    def test_weekday_rejects_bools(self):
        with pytest.raises(RuleConfigurationError, match="weekday must be"):
            NthDayOfWeekInMonthHoliday("Flag Day", 1, True, 6)

    def test_weekday_after_rejects_bools(self):
        base = FixedHoliday("Base", 1, 1)
        with pytest.raises(RuleConfigurationError, match="weekday must be"):
            NthDayOfWeekAfterDayHoliday("Flag Day", 1, False, base)


class TestResolveInstance:
    def test_delegates_to_rule(self):
        waitangi = FixedHoliday("Waitangi Day", 2, 6)
        assert resolve_instance(waitangi, 2025) == date(2025, 2, 6)

    def test_deterministic(self):
        labour = NthDayOfWeekInMonthHoliday("Labour Day", 4, Weekday.MONDAY, 10)
        assert {resolve_instance(labour, 2030) for _ in range(5)} == {date(2030, 10, 28)}
