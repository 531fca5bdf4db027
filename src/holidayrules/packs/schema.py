"""
Rule-Set Pack Schemas

Pydantic models for validating jurisdiction rule-set YAML/JSON files.

A pack lists a jurisdiction's holidays in configured order. Each entry
declares exactly one rule kind:

    fixed                 {month, day}
    nth_weekday_in_month  {n, weekday, month, direction}
    nth_weekday_after     {n, weekday, after: <id of an earlier entry>}
    year_map              {year: "MM-DD", ...}
    easter_offset         days from Easter Sunday
    common                key of a shared holiday (e.g. christmas_day)

Optional per-entry keys: id, from_year, until_year, shiftable.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check the major version
"""
from __future__ import annotations

import re
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

WeekdayValue = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]

CountDirectionValue = Literal["from_first", "from_last"]

RULE_KINDS = (
    "fixed",
    "nth_weekday_in_month",
    "nth_weekday_after",
    "year_map",
    "easter_offset",
    "common",
)

MONTH_DAY_PATTERN = re.compile(r"^(\d{1,2})-(\d{1,2})$")


# =============================================================================
# Rule Schemas
# =============================================================================

class FixedSchema(BaseModel):
    """Same month/day every year."""
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)

    model_config = {"extra": "forbid"}


class NthWeekdayInMonthSchema(BaseModel):
    """Nth weekday of a month, counted from the first or last occurrence."""
    n: int = Field(1, ge=1, le=5, description="Ordinal (1 = first/last)")
    weekday: WeekdayValue
    month: int = Field(..., ge=1, le=12)
    direction: CountDirectionValue = "from_first"

    model_config = {"extra": "forbid"}


class NthWeekdayAfterSchema(BaseModel):
    """Nth weekday strictly after another holiday in the same pack."""
    n: int = Field(1, ge=1)
    weekday: WeekdayValue
    after: str = Field(..., description="id of an earlier holiday entry")

    model_config = {"extra": "forbid"}


class HolidaySchema(BaseModel):
    """One holiday entry. Exactly one rule kind must be set."""
    id: Optional[str] = Field(None, description="Reference key for nth_weekday_after")
    name: Optional[str] = Field(None, description="Display name (not allowed with common)")

    fixed: Optional[FixedSchema] = None
    nth_weekday_in_month: Optional[NthWeekdayInMonthSchema] = None
    nth_weekday_after: Optional[NthWeekdayAfterSchema] = None
    year_map: Optional[dict[int, str]] = None
    easter_offset: Optional[int] = None
    common: Optional[str] = None

    from_year: Optional[int] = Field(None, description="First year the holiday exists")
    until_year: Optional[int] = Field(None, description="Last year the holiday exists")
    shiftable: bool = Field(False, description="Shift off weekends per the pack's observance")

    model_config = {"extra": "forbid"}

    @field_validator("year_map")
    @classmethod
    def validate_year_map(cls, v: Optional[dict[int, str]]) -> Optional[dict[int, str]]:
        if v is None:
            return v
        for year, month_day in v.items():
            if not MONTH_DAY_PATTERN.match(str(month_day)):
                raise ValueError(f"year_map[{year}] must be 'MM-DD', got {month_day!r}")
        return v

    @model_validator(mode="after")
    def validate_structure(self) -> "HolidaySchema":
        """Exactly one rule kind; names and year bounds consistent."""
        kinds = [kind for kind in RULE_KINDS if getattr(self, kind) is not None]
        if len(kinds) != 1:
            raise ValueError(
                f"Holiday entry must declare exactly one of {', '.join(RULE_KINDS)}; got {kinds or 'none'}"
            )
        if self.common is not None:
            if self.name is not None:
                raise ValueError("'name' cannot be combined with 'common'")
        elif not self.name:
            raise ValueError(f"Holiday entry of kind '{kinds[0]}' requires 'name'")
        if (
            self.from_year is not None
            and self.until_year is not None
            and self.from_year > self.until_year
        ):
            raise ValueError(f"from_year {self.from_year} is after until_year {self.until_year}")
        return self

    @property
    def kind(self) -> str:
        return next(kind for kind in RULE_KINDS if getattr(self, kind) is not None)

    @property
    def key(self) -> Optional[str]:
        """Reference key: explicit id, else the common key."""
        return self.id or self.common


# =============================================================================
# Rule-Set Pack Schema (Top-Level)
# =============================================================================

class RuleSetPackSchema(BaseModel):
    """
    Top-level schema for a rule-set pack YAML/JSON file.

    observance maps the weekday a shiftable holiday falls on to the
    weekday it is observed on. Omit it for no shifting.
    """
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version for compatibility")
    locale: str = Field(..., description="Locale tag (e.g., 'en-NZ')")
    name: str = Field(..., description="Human-readable jurisdiction name")
    description: Optional[str] = None
    observance: dict[WeekdayValue, WeekdayValue] = Field(default_factory=dict)
    holidays: list[HolidaySchema] = Field(default_factory=list)

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("locale must not be blank")
        return v


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_rule_set_pack(data: dict[str, Any]) -> RuleSetPackSchema:
    """
    Validate a rule-set pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return RuleSetPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """True when the pack's major schema version matches SCHEMA_VERSION."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]


__all__ = [
    "SCHEMA_VERSION",
    "RULE_KINDS",
    "FixedSchema",
    "NthWeekdayInMonthSchema",
    "NthWeekdayAfterSchema",
    "HolidaySchema",
    "RuleSetPackSchema",
    "validate_rule_set_pack",
    "check_schema_version",
]
