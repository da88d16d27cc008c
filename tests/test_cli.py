"""Tests for the compactnum CLI."""

from __future__ import annotations

from typer.testing import CliRunner

from compactnum.cli import app

runner = CliRunner()


class TestCLICommands:
    """Tests for CLI commands."""

    def test_format(self):
        """Test formatting with defaults."""
        result = runner.invoke(app, ["format", "1234"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "1.2K"

    def test_format_options(self):
        """Test formatting options."""
        result = runner.invoke(
            app,
            ["format", "2000000", "--locale", "es", "--style", "long", "-d", "0"],
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "2 millones"

    def test_format_env_defaults(self, monkeypatch):
        """Test environment defaults apply."""
        monkeypatch.setenv("COMPACTNUM_LOCALE", "de")
        result = runner.invoke(app, ["format", "1234"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "1.2 Tsd."

    def test_format_error(self):
        """Test domain errors exit with status 1."""
        result = runner.invoke(app, ["format", "1234", "--locale", "unknown"])
        assert result.exit_code == 1

    def test_parse(self):
        """Test parsing."""
        result = runner.invoke(app, ["parse", "1.5M"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "1500000"

        result = runner.invoke(app, ["parse", "1.2 mil", "--locale", "es"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "1200"

    def test_parse_error(self):
        """Test unknown symbols exit with status 1."""
        result = runner.invoke(app, ["parse", "1.2X"])
        assert result.exit_code == 1

    def test_locales(self):
        """Test the locale listing."""
        result = runner.invoke(app, ["locales"])
        assert result.exit_code == 0
        assert "es" in result.stdout
        assert "1.2K" in result.stdout
