"""
holidayrules Rule-Set Packs

Schema validation and loading for jurisdiction rule-set packs.

Rule-set packs are YAML or JSON files listing a jurisdiction's holidays
in configured order, which of them shift off weekends, and how.

Usage:
    from holidayrules.packs import load_rule_set_pack, RuleSetPackLoader

    # Load a single pack
    jurisdiction = load_rule_set_pack("packs/en_nz.yaml")
    jurisdiction.get_holidays_for_year(2025)

    # Load a directory of packs
    loader = RuleSetPackLoader()
    loader.load_directory("packs/")
"""
from __future__ import annotations

from .loader import (
    RuleSetPackLoader,
    load_rule_set_pack,
    load_rule_set_pack_from_string,
    validate_reference_integrity,
)
from .schema import (
    RULE_KINDS,
    SCHEMA_VERSION,
    FixedSchema,
    HolidaySchema,
    NthWeekdayAfterSchema,
    NthWeekdayInMonthSchema,
    RuleSetPackSchema,
    check_schema_version,
    validate_rule_set_pack,
)

__all__ = [
    # Loader
    "RuleSetPackLoader",
    "load_rule_set_pack",
    "load_rule_set_pack_from_string",
    "validate_reference_integrity",
    # Schema
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
