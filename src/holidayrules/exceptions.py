"""
holidayrules Exception Hierarchy

Every error raised by the library carries a machine-readable code.
Absence of a holiday in a given year is NOT an error and never raises;
these exceptions cover configuration mistakes and lookup failures only.

Exception codes follow the pattern: HR_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class HolidayRulesError(Exception):
    """
    Base exception for all holidayrules errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (HR_*)
        details: Additional context about the error
        locale: Associated locale tag if applicable
    """
    message: str
    code: str = "HR_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    locale: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.locale:
            parts.append(f"(locale: {self.locale})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.locale:
            result["locale"] = self.locale
        return result


# =============================================================================
# Rule Configuration Errors
# =============================================================================

@dataclass
class RuleConfigurationError(HolidayRulesError, ValueError):
    """A holiday rule or jurisdiction was constructed with invalid parameters."""
    code: str = "HR_RULE_INVALID"


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class ConfigurationError(HolidayRulesError):
    """Environment settings are invalid."""
    code: str = "HR_CONFIG_INVALID"


# =============================================================================
# Registry Errors
# =============================================================================

@dataclass
class UnknownLocaleError(HolidayRulesError, LookupError):
    """No jurisdiction is registered for the requested locale."""
    code: str = "HR_LOCALE_UNKNOWN"


@dataclass
class DuplicateLocaleError(HolidayRulesError):
    """A jurisdiction is already registered for the locale."""
    code: str = "HR_LOCALE_DUPLICATE"


# =============================================================================
# Pack Errors
# =============================================================================

@dataclass
class PackLoadError(HolidayRulesError):
    """Failed to read a rule-set pack from file."""
    code: str = "HR_PACK_LOAD_ERROR"


@dataclass
class PackValidationError(HolidayRulesError):
    """Rule-set pack failed schema or reference validation."""
    code: str = "HR_PACK_INVALID"


@dataclass
class PackVersionMismatch(HolidayRulesError):
    """Pack schema version doesn't match the supported version."""
    code: str = "HR_PACK_VERSION_MISMATCH"


__all__ = [
    "HolidayRulesError",
    "RuleConfigurationError",
    "ConfigurationError",
    "UnknownLocaleError",
    "DuplicateLocaleError",
    "PackLoadError",
    "PackValidationError",
    "PackVersionMismatch",
]
