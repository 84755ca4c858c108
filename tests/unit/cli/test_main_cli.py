"""Unit tests for the main Typer application."""

import logging
from pathlib import Path
from unittest.mock import patch

from molt import __version__
from molt.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"molt version {__version__}" in result.stdout

    def test_help_lists_commands(self) -> None:
        """--help lists every subcommand."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("prune", "backup", "config"):
            assert command in result.stdout

    def test_debug_configures_logging(self, tmp_path: Path) -> None:
        """--debug installs a DEBUG-level handler."""
        with patch("molt.cli.main.logging.basicConfig") as mock_basic:
            result = runner.invoke(app, ["--debug", "prune", "-p", str(tmp_path), "--no-banner"])

        assert result.exit_code == 0
        mock_basic.assert_called_once()
        assert mock_basic.call_args.kwargs["level"] == logging.DEBUG

    def test_no_debug_leaves_logging_alone(self, tmp_path: Path) -> None:
        """Without --debug no handler is installed."""
        with patch("molt.cli.main.logging.basicConfig") as mock_basic:
            result = runner.invoke(app, ["prune", "-p", str(tmp_path), "--no-banner"])

        assert result.exit_code == 0
        mock_basic.assert_not_called()
