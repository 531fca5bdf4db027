"""
Jurisdiction Registry: locale tag to rule set lookup.

Built-in calendars are registered at import. Extra jurisdictions can be
registered at runtime or loaded from a directory of rule-set packs
(HR_PACK_DIR, see holidayrules.config).

Locale tags are matched case-insensitively, with "_" accepted for "-".

Usage:
    >>> from holidayrules.registry import get_jurisdiction, list_locales
    >>> nz = get_jurisdiction("en-NZ")
    >>> nz.get_holiday_name(date(2025, 2, 6))
    'Waitangi Day'
    >>> "en-NZ" in list_locales()
    True
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union

from holidayrules.calendars import BUILTIN_JURISDICTIONS
from holidayrules.config import Settings, default_locale_from_env
from holidayrules.exceptions import DuplicateLocaleError, UnknownLocaleError
from holidayrules.jurisdiction import Jurisdiction
from holidayrules.packs.loader import RuleSetPackLoader

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Registry: maps normalized locale tag → Jurisdiction
# ---------------------------------------------------------------------------

def normalize_locale(locale: str) -> str:
    """Canonical registry key for a locale tag ("en_NZ" -> "en-nz")."""
    return locale.strip().replace("_", "-").lower()


JURISDICTIONS: dict[str, Jurisdiction] = {
    normalize_locale(j.locale): j for j in BUILTIN_JURISDICTIONS
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_jurisdiction(
    locale: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Jurisdiction:
    """Look up a jurisdiction by locale tag.

    Args:
        locale: Locale tag (e.g., "en-NZ"). Defaults to the configured
                default locale.
        settings: Settings to read the default from (environment if None).

    Raises:
        UnknownLocaleError: If no jurisdiction is registered for the tag.
    """
    if locale is None:
        if settings is not None:
            locale = settings.default_locale
        else:
            locale = default_locale_from_env()

    jurisdiction = JURISDICTIONS.get(normalize_locale(locale))
    if jurisdiction is None:
        available = ", ".join(list_locales())
        raise UnknownLocaleError(
            message=f"Unknown locale: '{locale}'. Available locales: {available}",
            details={"available": list_locales()},
            locale=locale,
        )
    return jurisdiction


def list_locales() -> list[str]:
    """Locale tags of all registered jurisdictions, as declared."""
    return sorted(j.locale for j in JURISDICTIONS.values())


def register_jurisdiction(jurisdiction: Jurisdiction, replace: bool = False) -> None:
    """Register a jurisdiction under its locale tag.

    Raises:
        DuplicateLocaleError: If the locale is taken and replace is False.
    """
    key = normalize_locale(jurisdiction.locale)
    if key in JURISDICTIONS and not replace:
        raise DuplicateLocaleError(
            message=f"A jurisdiction is already registered for '{jurisdiction.locale}'",
            locale=jurisdiction.locale,
        )
    JURISDICTIONS[key] = jurisdiction
    logger.info(
        "Registered jurisdiction %s (%s)",
        jurisdiction.locale,
        jurisdiction.name,
        extra={"locale": jurisdiction.locale},
    )


def unregister_jurisdiction(locale: str) -> Jurisdiction:
    """Remove and return the jurisdiction registered for a locale."""
    jurisdiction = JURISDICTIONS.pop(normalize_locale(locale), None)
    if jurisdiction is None:
        raise UnknownLocaleError(message=f"Unknown locale: '{locale}'", locale=locale)
    return jurisdiction


def reset_registry() -> None:
    """Drop runtime registrations, keeping only the built-in calendars."""
    JURISDICTIONS.clear()
    JURISDICTIONS.update(
        {normalize_locale(j.locale): j for j in BUILTIN_JURISDICTIONS}
    )


def register_packs_from(
    directory: Union[str, Path],
    replace: bool = False,
) -> list[Jurisdiction]:
    """Load every rule-set pack in a directory and register it."""
    jurisdictions = RuleSetPackLoader().load_directory(directory)
    for jurisdiction in jurisdictions:
        register_jurisdiction(jurisdiction, replace=replace)
    return jurisdictions


def bootstrap(settings: Optional[Settings] = None) -> list[str]:
    """Register packs from the configured pack directory, if any.

    Returns:
        All registered locale tags afterwards.
    """
    settings = settings or Settings.from_env()
    if settings.pack_dir is not None:
        register_packs_from(settings.pack_dir, replace=True)
    return list_locales()


def holidays_for_year(year: int, locale: Optional[str] = None) -> list[tuple[date, str]]:
    """(date, name) pairs for a locale's year calendar, sorted by date."""
    return get_jurisdiction(locale).get_holidays_for_year(year)


# ---------------------------------------------------------------------------
# Exports
# ---------------------------------------------------------------------------

__all__ = [
    "JURISDICTIONS",
    "normalize_locale",
    "get_jurisdiction",
    "list_locales",
    "register_jurisdiction",
    "unregister_jurisdiction",
    "reset_registry",
    "register_packs_from",
    "bootstrap",
    "holidays_for_year",
]
