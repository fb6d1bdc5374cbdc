"""Unit tests for the labyrinth console entry point."""

import logging

import pytest
from click.testing import CliRunner

from labyrinth.__main__ import main


@pytest.fixture
def runner(tmp_path, monkeypatch) -> CliRunner:
    """CliRunner writing session logs to a temporary directory."""
    monkeypatch.setenv("LABYRINTH_LOGS_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("LABYRINTH_CATALOG_DIR", raising=False)
    monkeypatch.delenv("LABYRINTH_CATALOG", raising=False)
    monkeypatch.delenv("LABYRINTH_SEED", raising=False)

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield CliRunner()

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


class TestValidate:

    def test_default_catalog(self, runner) -> None:
        result = runner.invoke(main, ["--validate"])

        assert result.exit_code == 0
        assert "Catalog Validation: default" in result.output
        assert "Catalog is valid!" in result.output

    def test_missing_catalog(self, runner) -> None:
        result = runner.invoke(main, ["--validate", "--catalog", "ghost"])

        assert result.exit_code == 1
        assert "Error: Catalog 'ghost' not found" in result.output


class TestPlay:

    def test_scripted_session(self, runner, tmp_path) -> None:
        result = runner.invoke(main, ["--seed", "1"], input="help\ncontinue\nragequit\n")

        assert result.exit_code == 0
        assert result.output.startswith("Welcome to the Labyrinth!")
        assert "> help" in result.output
        assert "SHOWING 'Labyrinth' COMMANDS" in result.output
        assert "=== Room 1:" in result.output
        assert "Quitting Labyrinth..." in result.output
        assert list((tmp_path / "logs").glob("labyrinth_*.log"))

    def test_ends_on_end_of_input(self, runner) -> None:
        result = runner.invoke(main, ["--seed", "1"], input="continue\n")

        assert result.exit_code == 0
        assert "> continue" in result.output

    def test_missing_catalog(self, runner) -> None:
        result = runner.invoke(main, ["--catalog", "ghost"])

        assert result.exit_code == 1
