"""
Command line interface tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from aeroclub.app_shell.cli import main

NZ = "Pacific/Auckland"


@pytest.fixture
def no_rules(tmp_path: Path) -> list[str]:
    """Point the CLI at a missing rules file so defaults apply."""
    return ["--rules", str(tmp_path / "absent.yaml")]


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(
        "tenant:\n"
        "  timezone: America/New_York\n"
        "membership_year:\n"
        "  start_month: 1\n"
        "  start_day: 1\n"
        "  end_month: 12\n"
        "  end_day: 31\n"
    )
    return path


def run_cli(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
    code = main(list(argv))
    return code, capsys.readouterr().out.strip()


class TestConversions:
    def test_to_local(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(capsys, *no_rules, "to-local", "2026-01-06T20:00:00Z", "--zone", NZ)
        assert code == 0
        assert out == "2026-01-07T09:00"

    def test_to_local_uses_tenant_zone(
        self, capsys: pytest.CaptureFixture[str], rules_file: Path
    ) -> None:
        code, out = run_cli(capsys, "--rules", str(rules_file), "to-local", "2026-01-06T20:00:00Z")
        assert code == 0
        assert out == "2026-01-06T15:00"

    def test_to_utc(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(capsys, *no_rules, "to-utc", "2026-04-05", "02:30")
        assert code == 0
        assert out == "2026-04-04T13:30:00Z"

    def test_to_utc_later(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(
            capsys, *no_rules, "to-utc", "2026-04-05", "02:30", "--ambiguity", "later"
        )
        assert code == 0
        assert out == "2026-04-04T14:30:00Z"

    def test_to_utc_reject(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(
            capsys, *no_rules, "to-utc", "2026-04-05", "02:30", "--ambiguity", "reject"
        )
        assert code == 1
        assert out == ""

    def test_day_range(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(capsys, *no_rules, "day-range", "2026-04-05")
        assert code == 0
        assert out == "2026-04-04T11:00:00Z 2026-04-05T12:00:00Z (25h)"

    def test_weekday(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(capsys, *no_rules, "weekday", "2026-01-07")
        assert code == 0
        assert out == "3 wednesday"

    def test_invalid_date(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, _ = run_cli(capsys, *no_rules, "weekday", "2026-02-30")
        assert code == 1


class TestMembership:
    def test_cycle_defaults(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(capsys, *no_rules, "cycle", "2026-01-07")
        assert code == 0
        assert out.splitlines() == [
            "2025-04-01 2026-03-31",
            "2025-2026 Membership Year (April 1st to March 31st)",
        ]

    def test_cycle_from_rules(self, capsys: pytest.CaptureFixture[str], rules_file: Path) -> None:
        code, out = run_cli(capsys, "--rules", str(rules_file), "cycle", "2026-01-07")
        assert code == 0
        assert out.splitlines()[0] == "2026-01-01 2026-12-31"

    def test_renew(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(capsys, *no_rules, "renew", "2026-03-31")
        assert code == 0
        assert out == "2027-03-31"

    def test_status(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(capsys, *no_rules, "status", "2026-03-31", "--today", "2026-03-15")
        assert code == 0
        assert out == "active (16 days left), expiring soon"

    def test_status_grace(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(capsys, *no_rules, "status", "2026-03-31", "--today", "2026-04-10")
        assert code == 0
        assert out == "grace (20 grace days left)"

    def test_status_unpaid(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(
            capsys, *no_rules, "status", "2026-03-31", "--today", "2026-03-15", "--unpaid"
        )
        assert code == 0
        assert out == "unpaid"


class TestOpenAndRules:
    def test_open(self, capsys: pytest.CaptureFixture[str], no_rules: list[str]) -> None:
        code, out = run_cli(capsys, *no_rules, "open", "2026-01-06T20:00:00Z")
        assert code == 0
        assert out == "open (Hours 08:00-17:00, local time 09:00)"

    def test_validate_rules(self, capsys: pytest.CaptureFixture[str], rules_file: Path) -> None:
        code, out = run_cli(capsys, "--rules", str(rules_file), "validate-rules")
        assert code == 0
        assert out == "Rules valid: zone America/New_York, January 1st to December 31st"

    def test_validate_rules_bad_zone(
        self, capsys: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("tenant:\n  timezone: Nowhere/Special\n")
        code, _ = run_cli(capsys, "--rules", str(path), "validate-rules")
        assert code == 1

    def test_validate_rules_missing_file(
        self, capsys: pytest.CaptureFixture[str], no_rules: list[str]
    ) -> None:
        code, _ = run_cli(capsys, *no_rules, "validate-rules")
        assert code == 1

    def test_requires_command(self) -> None:
        with pytest.raises(SystemExit):
            main([])
