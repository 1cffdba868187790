"""Unit tests for the CLI — Typer command registration and basic behavior."""

from __future__ import annotations

import logging
from pathlib import Path

from typer.testing import CliRunner

from suiteplug.cli.app import app
from suiteplug.config import config

runner = CliRunner()


class TestCliApp:
    """The CLI must register all expected commands and show help."""

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        # Typer's no_args_is_help may exit with 0 or 2 depending on version
        assert result.exit_code in (0, 2)
        assert "usage" in result.output.lower()

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "inspect" in result.output
        assert "kinds" in result.output

    def test_inspect_command_exists(self):
        result = runner.invoke(app, ["inspect", "--help"])
        assert result.exit_code == 0

    def test_kinds_lists_all_kinds(self):
        result = runner.invoke(app, ["kinds"])
        assert result.exit_code == 0
        assert "mochaHooks" in result.output
        assert "rootHooks" in result.output
        assert "globalSetup" in result.output


class TestInspectCommand:
    def test_summarizes_plugins(self, write_plugin, tmp_path: Path):
        write_plugin("hooks.py", """
            def before():
                pass

            mochaHooks = {"beforeEach": [before, before]}
            mochaGlobalSetup = [before]
        """)
        result = runner.invoke(app, ["inspect", "hooks.py", "--base-dir", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "mochaHooks" in result.output
        assert "absent" in result.output

    def test_invalid_plugin_exits_1(self, write_plugin, tmp_path: Path):
        write_plugin("bad.py", "mochaGlobalSetup = [1, 2]\n")
        result = runner.invoke(app, ["inspect", "bad.py", "--base-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "Unsupported plugin" in result.output

    def test_missing_file_exits_1(self, tmp_path: Path):
        result = runner.invoke(app, ["inspect", "nope.py", "--base-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "Require failed" in result.output

    def test_nothing_to_require(self, monkeypatch):
        monkeypatch.setattr(config, "require", [])
        result = runner.invoke(app, ["inspect"])
        assert result.exit_code == 0
        assert "Nothing to require" in result.output


class TestLoggingOptions:
    def test_debug_setting_lowers_root_level(self, monkeypatch):
        monkeypatch.setattr(config, "debug", True)
        monkeypatch.setattr(config, "log_level", "ERROR")
        result = runner.invoke(app, ["kinds"])
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_log_level_option_wins_over_debug(self, monkeypatch):
        monkeypatch.setattr(config, "debug", True)
        result = runner.invoke(app, ["--log-level", "warning", "kinds"])
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.WARNING

    def test_default_level_from_settings(self, monkeypatch):
        monkeypatch.setattr(config, "debug", False)
        monkeypatch.setattr(config, "log_level", "error")
        result = runner.invoke(app, ["kinds"])
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR
