"""Shared pytest configuration: path setup and fixtures for holidayrules tests."""

import sys
from pathlib import Path

import pytest

# Allow ``from holidayrules import ...`` without an installed package
_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT / "src"))

from holidayrules.registry import reset_registry  # noqa: E402
from holidayrules.rules import FixedHoliday  # noqa: E402

PACKS_DIR = _ROOT / "packs"


SAMPLE_PACK_YAML = """\
schema_version: "1.0.0"
locale: xx-TEST
name: Testland
observance:
  saturday: monday
  sunday: monday
holidays:
  - common: new_years_day
    shiftable: true
  - id: founding
    name: Founding Day
    fixed: {month: 3, day: 1}
  - name: Founding Day Tuesday
    nth_weekday_after: {n: 1, weekday: tuesday, after: founding}
  - name: Harvest Day
    nth_weekday_in_month: {n: 1, weekday: friday, month: 9, direction: from_last}
"""


@pytest.fixture(autouse=True)
def clean_registry():
    """Every test starts and ends with only the built-in jurisdictions."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def pack_dir(tmp_path: Path) -> Path:
    """Directory holding one valid rule-set pack."""
    (tmp_path / "xx_test.yaml").write_text(SAMPLE_PACK_YAML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def same_day_rules():
    """Two distinct rules on the same date (1 March)."""
    return FixedHoliday("Alpha Day", 3, 1), FixedHoliday("Beta Day", 3, 1)
