"""
Rule-Set Pack Loader

Loads and validates jurisdiction rule-set packs from YAML or JSON files.

Converts Pydantic schema models to holiday rules and a Jurisdiction.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..builder import ObservancePolicy
from ..common import get_common_holiday
from ..exceptions import (
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
    RuleConfigurationError,
)
from ..jurisdiction import Jurisdiction
from ..rules import (
    CountDirection,
    DayInYear,
    EasterOffsetHoliday,
    FixedHoliday,
    HolidayRule,
    NthDayOfWeekAfterDayHoliday,
    NthDayOfWeekInMonthHoliday,
    Weekday,
    YearDependantHoliday,
    YearMapHoliday,
    year_range,
)
from .schema import (
    MONTH_DAY_PATTERN,
    SCHEMA_VERSION,
    HolidaySchema,
    RuleSetPackSchema,
    check_schema_version,
    validate_rule_set_pack,
)

logger = logging.getLogger(__name__)

PACK_SUFFIXES = {".yaml", ".yml", ".json"}


# =============================================================================
# Reference Integrity Validation
# =============================================================================

def validate_reference_integrity(schema: RuleSetPackSchema, path: str = "") -> None:
    """
    Validate internal references are consistent.

    Catches:
    - Duplicate holiday ids
    - nth_weekday_after referencing a missing or later entry
    - The same common holiday listed twice

    Raises:
        ValueError: If reference integrity errors are found
    """
    errors = []
    seen_keys: set[str] = set()
    seen_common: set[str] = set()

    for index, entry in enumerate(schema.holidays):
        label = entry.name or entry.common or f"#{index}"

        after = entry.nth_weekday_after.after if entry.nth_weekday_after else None
        if after is not None and after not in seen_keys:
            errors.append(
                f"Holiday '{label}' references '{after}', which is not an earlier holiday id"
            )

        if entry.common is not None:
            if entry.common in seen_common:
                errors.append(f"Common holiday listed twice: '{entry.common}'")
            seen_common.add(entry.common)

        key = entry.key
        if key is not None:
            if key in seen_keys:
                errors.append(f"Duplicate holiday id: '{key}'")
            seen_keys.add(key)

    if errors:
        path_str = f" in {path}" if path else ""
        raise ValueError(
            f"Reference integrity errors{path_str}:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )


# =============================================================================
# Schema to Rule Converters
# =============================================================================

def _weekday(value: str) -> Weekday:
    return Weekday[value.upper()]


def _convert_year_map(year_map: dict[int, str]) -> dict[int, DayInYear]:
    occurrences = {}
    for year, month_day in year_map.items():
        match = MONTH_DAY_PATTERN.match(month_day)
        occurrences[year] = DayInYear(int(match.group(1)), int(match.group(2)))
    return occurrences


def _convert_holiday(entry: HolidaySchema, known: dict[str, HolidayRule]) -> HolidayRule:
    """Convert one HolidaySchema entry to a rule, year bounds applied."""
    rule: HolidayRule
    if entry.common is not None:
        rule = get_common_holiday(entry.common)
    elif entry.fixed is not None:
        rule = FixedHoliday(entry.name, entry.fixed.month, entry.fixed.day)
    elif entry.nth_weekday_in_month is not None:
        nth = entry.nth_weekday_in_month
        rule = NthDayOfWeekInMonthHoliday(
            entry.name,
            nth.n,
            _weekday(nth.weekday),
            nth.month,
            CountDirection(nth.direction),
        )
    elif entry.nth_weekday_after is not None:
        nth = entry.nth_weekday_after
        rule = NthDayOfWeekAfterDayHoliday(
            entry.name, nth.n, _weekday(nth.weekday), known[nth.after]
        )
    elif entry.year_map is not None:
        rule = YearMapHoliday(entry.name, _convert_year_map(entry.year_map))
    else:
        rule = EasterOffsetHoliday(entry.name, entry.easter_offset)

    if entry.from_year is not None or entry.until_year is not None:
        rule = YearDependantHoliday(year_range(entry.from_year, entry.until_year), rule)
    return rule


def _convert_rule_set_pack(schema: RuleSetPackSchema) -> Jurisdiction:
    """Convert RuleSetPackSchema to a Jurisdiction."""
    known: dict[str, HolidayRule] = {}
    rules: list[HolidayRule] = []
    shiftable: list[HolidayRule] = []

    for entry in schema.holidays:
        rule = _convert_holiday(entry, known)
        if entry.key is not None:
            known[entry.key] = rule
        rules.append(rule)
        if entry.shiftable:
            shiftable.append(rule)

    policy = ObservancePolicy(
        shifts={_weekday(k): _weekday(v) for k, v in schema.observance.items()}
    )
    return Jurisdiction(
        locale=schema.locale,
        name=schema.name,
        rules=tuple(rules),
        shiftable=frozenset(shiftable),
        policy=policy,
    )


# =============================================================================
# Rule-Set Pack Loader
# =============================================================================

class RuleSetPackLoader:
    """
    Loads rule-set packs from YAML or JSON files.

    Usage:
        loader = RuleSetPackLoader()
        jurisdiction = loader.load("packs/en_nz.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version
        self._jurisdictions: dict[str, Jurisdiction] = {}

    def load(self, path: Union[str, Path]) -> Jurisdiction:
        """
        Load a rule-set pack from a file.

        Raises:
            PackLoadError: If file cannot be read
            PackValidationError: If validation fails
            PackVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise PackLoadError(
                message=f"Failed to load rule-set pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        jurisdiction = self.load_data(data, source=str(path))
        logger.info(
            "Loaded rule-set pack %s (%d holidays)",
            path.name,
            len(jurisdiction.rules),
            extra={"locale": jurisdiction.locale},
        )
        return jurisdiction

    def load_data(self, data: Any, source: str = "<string>") -> Jurisdiction:
        """Validate and compile an already-parsed pack document."""
        if not isinstance(data, dict):
            raise PackValidationError(
                message="Rule-set pack must be a mapping at the top level",
                details={"path": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise PackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                    "path": source,
                },
            )

        try:
            schema = validate_rule_set_pack(data)
        except ValidationError as e:
            raise PackValidationError(
                message=f"Rule-set pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "path": source},
            ) from e

        try:
            validate_reference_integrity(schema, source)
        except ValueError as e:
            raise PackValidationError(
                message="Reference integrity validation failed",
                details={"errors": str(e), "path": source},
                locale=schema.locale,
            ) from e

        try:
            jurisdiction = _convert_rule_set_pack(schema)
        except (RuleConfigurationError, KeyError) as e:
            raise PackValidationError(
                message=f"Rule-set pack contains an invalid holiday: {e}",
                details={"path": source},
                locale=schema.locale,
            ) from e

        self._jurisdictions[jurisdiction.locale] = jurisdiction
        return jurisdiction

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def load_directory(self, directory: Union[str, Path]) -> list[Jurisdiction]:
        """Load every pack file in a directory, in file-name order."""
        directory = Path(directory)
        if not directory.is_dir():
            raise PackLoadError(
                message=f"Pack directory not found: {directory}",
                details={"path": str(directory)},
            )
        return [
            self.load(path)
            for path in sorted(directory.iterdir())
            if path.suffix.lower() in PACK_SUFFIXES
        ]

    def get_jurisdiction(self, locale: str) -> Optional[Jurisdiction]:
        """Get a loaded jurisdiction by locale tag."""
        return self._jurisdictions.get(locale)

    def list_locales(self) -> list[str]:
        """Locale tags of all loaded packs."""
        return list(self._jurisdictions.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_rule_set_pack(path: Union[str, Path]) -> Jurisdiction:
    """Load a rule-set pack from a file with a temporary loader."""
    return RuleSetPackLoader().load(path)


def load_rule_set_pack_from_string(content: str, format: str = "yaml") -> Jurisdiction:
    """
    Load a rule-set pack from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (ValueError, yaml.YAMLError) as e:
        raise PackLoadError(
            message=f"Failed to parse rule-set pack: {e}",
            details={"format": format, "error": str(e)},
        ) from e
    return RuleSetPackLoader().load_data(data)


__all__ = [
    "RuleSetPackLoader",
    "load_rule_set_pack",
    "load_rule_set_pack_from_string",
    "validate_reference_integrity",
]
