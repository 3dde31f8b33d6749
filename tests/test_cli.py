"""Tests for the corestab CLI."""

from __future__ import annotations

import json

import pytest
import yaml

from corestab.__main__ import main
from corestab.scenarios import SCENARIOS


def write_instance(tmp_path, name: str, **overrides) -> str:
    data = SCENARIOS[name].to_dict()
    data.update(overrides)
    path = tmp_path / f"{name}.yaml"
    path.write_text(yaml.safe_dump(data))
    return str(path)


class TestScenariosCommand:
    """Test the reference scenario runner."""

    def test_all_pass(self, capsys):
        """Every shipped scenario matches its expectation."""
        exit_code = main(["scenarios"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "All scenarios passed" in out
        assert "Scenario A [ok]: BLOCKED by [2, 4]" in out


class TestCheckCommand:
    """Test checking a YAML instance."""

    def test_blocked_instance(self, tmp_path, capsys):
        """A blocked instance prints its witness and exits 0 when expected."""
        path = write_instance(tmp_path, "A")

        exit_code = main(["check", path])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "BLOCKED by [2, 4]" in out
        assert "wants to move to tier 1" in out

    def test_stable_instance(self, tmp_path, capsys):
        """A stable instance reports STABLE."""
        path = write_instance(tmp_path, "C")

        assert main(["check", path]) == 0
        assert "STABLE" in capsys.readouterr().out

    def test_json_output(self, tmp_path, capsys):
        """--json prints the structured result."""
        path = write_instance(tmp_path, "A")

        main(["check", path, "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["stable"] is False
        assert payload["witness"]["coalition"] == [2, 4]
        assert payload["witness"]["target_tier"] == 1

    def test_mismatch_exits_nonzero(self, tmp_path, capsys):
        """An outcome that contradicts expected exits 1."""
        path = write_instance(tmp_path, "A", expected=True)

        assert main(["check", path]) == 1
        assert "expected stable" in capsys.readouterr().out

    def test_invalid_instance(self, tmp_path, capsys):
        """Validation failures are printed, not raised."""
        path = write_instance(tmp_path, "A", tiers=[[0, 1], [2]])

        assert main(["check", path]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        """A missing file is reported as an error."""
        assert main(["check", str(tmp_path / "nope.yaml")]) == 1

    def test_broken_yaml(self, tmp_path, capsys):
        """A YAML syntax error is printed, not raised."""
        path = tmp_path / "broken.yaml"
        path.write_text("tiers: [[0, 1]\n")

        assert main(["check", str(path)]) == 1
        assert "invalid YAML" in capsys.readouterr().out


def test_log_level_is_restricted(capsys):
    """An unknown --log-level is rejected by argparse before any logging setup."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "LOUD", "scenarios"])

    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_log_level_case_insensitive(capsys):
    """Lower-case level names are accepted."""
    assert main(["--log-level", "debug", "scenarios"]) == 0


def test_no_command_prints_help(capsys):
    """Running without a command prints usage and exits 1."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
