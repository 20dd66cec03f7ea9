"""Tests for settings CLI commands."""

import json

import pytest
from click.testing import CliRunner

from moneycalc.cli.__main__ import cli


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the CLI at an empty config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("MONEY_CALC_CONFIG_PATH", str(config_dir))
    return config_dir


class TestSettingsTaxYear:

    def test_set_and_use(self, isolated_config):
        """A saved tax year becomes the default for calculators."""
        runner = CliRunner()
        result = runner.invoke(cli, ["settings", "tax-year", "2026-27"])
        assert result.exit_code == 0, result.output
        assert "Set tax_year: 2026-27" in result.output

        saved = json.loads((isolated_config / "settings.json").read_text())
        assert saved == {"tax_year": "2026-27"}

        result = runner.invoke(cli, ["take-home", "30000", "--format", "json"])
        assert json.loads(result.output)["tax_year"] == "2026-27"

    def test_invalid_year_not_saved(self, isolated_config):
        """Unknown years are rejected and nothing is written."""
        result = CliRunner().invoke(cli, ["settings", "tax-year", "1999-00"])
        assert result.exit_code == 1
        assert not (isolated_config / "settings.json").exists()

    def test_show_current(self, isolated_config):
        """Without a year argument the current value is shown."""
        result = CliRunner().invoke(cli, ["settings", "tax-year"])
        assert result.exit_code == 0
        assert "Using default: 2025-26" in result.output

    def test_clear(self, isolated_config):
        """--clear removes the setting, and reports when nothing was set."""
        runner = CliRunner()
        runner.invoke(cli, ["settings", "tax-year", "2024-25"])

        result = runner.invoke(cli, ["settings", "tax-year", "--clear"])
        assert "Cleared tax_year setting." in result.output

        result = runner.invoke(cli, ["settings", "tax-year", "--clear"])
        assert "tax_year was not set." in result.output


class TestSettingsShow:

    def test_defaults(self, isolated_config):
        result = CliRunner().invoke(cli, ["settings", "show"])
        assert result.exit_code == 0, result.output
        assert str(isolated_config) in result.output
        assert "No settings configured" in result.output
        assert "Effective tax year: 2025-26" in result.output

    def test_with_setting(self, isolated_config):
        (isolated_config / "settings.json").write_text(json.dumps({"tax_year": "2024-25"}))
        result = CliRunner().invoke(cli, ["settings", "show"])
        assert "tax_year: 2024-25" in result.output
        assert "Effective tax year: 2024-25" in result.output
