"""
Rules file loading tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from aeroclub.components.billing_cycle import DEFAULT_CYCLE_CONFIG
from aeroclub.rules.loader import load_rules, parse_rules
from aeroclub.rules.models import DEFAULT_TIME_ZONE, CalendarRules

VALID_RULES = """
tenant:
  name: Test Club
  timezone: America/New_York
membership_year:
  start_month: 7
  start_day: 1
  end_month: 6
  end_day: 30
business_hours:
  open_time: "07:00:00"
  close_time: "19:00:00"
"""


class TestParseRules:
    def test_valid(self) -> None:
        rules = parse_rules(VALID_RULES)

        assert rules.tenant.timezone == "America/New_York"
        assert rules.membership_year.start_key == (7, 1)
        assert rules.business_hours.close_time == "19:00:00"
        assert rules.membership.grace_period_days == 30

    def test_empty_uses_defaults(self) -> None:
        rules = parse_rules("")

        assert rules == CalendarRules()
        assert rules.tenant.timezone == DEFAULT_TIME_ZONE
        assert rules.membership_year == DEFAULT_CYCLE_CONFIG

    def test_fenced_block(self) -> None:
        """Rules embedded in markdown are read from the ```yaml block."""
        content = f"# Calendar rules\n\nSome notes.\n\n```yaml\n{VALID_RULES}\n```\n\nMore notes.\n"
        assert parse_rules(content).tenant.name == "Test Club"

    def test_bad_yaml(self) -> None:
        with pytest.raises(ValueError, match="Invalid YAML syntax"):
            parse_rules("tenant: [unclosed")

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ValueError, match="mapping"):
            parse_rules("- just\n- a list\n")

    def test_invalid_cycle(self) -> None:
        content = (
            "membership_year:\n"
            "  start_month: 2\n  start_day: 30\n  end_month: 1\n  end_day: 31\n"
        )
        with pytest.raises(ValueError, match="Rules validation failed"):
            parse_rules(content)

    def test_unknown_section(self) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            parse_rules("billing_currency: NZD\n")


class TestLoadRules:
    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(VALID_RULES)
        assert load_rules(path).tenant.timezone == "America/New_York"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_project_rules_file(self) -> None:
        """The rules.yaml shipped at the project root is valid."""
        path = Path(__file__).resolve().parents[2] / "rules.yaml"
        rules = load_rules(path)
        assert rules.tenant.timezone == "Pacific/Auckland"
        assert rules.membership_year.start_key == (4, 1)
