"""Tests for command dispatch and the command boundary."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence
from unittest.mock import patch

import pytest

from pkgkeeper.commands.base import execute, run_command, validate_folder
from pkgkeeper.config.resolver import ValidationStep, resolve_settings
from pkgkeeper.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_FAILURE
from pkgkeeper.exceptions import ScanError
from pkgkeeper.models.config import CommandOptions
from pkgkeeper.models.settings import LogLevel, SettingsContainer


class FakeCommand:
    """Command that records the settings it was run with."""

    name = "fake"
    output_format = "terminal"

    def __init__(
        self, steps: Sequence[ValidationStep] = (), exit_code: int = EXIT_SUCCESS
    ) -> None:
        self._steps = list(steps)
        self.exit_code = exit_code
        self.settings: SettingsContainer | None = None

    @property
    def extra_steps(self) -> Sequence[ValidationStep]:
        return self._steps

    def run(self, settings: SettingsContainer) -> int:
        self.settings = settings
        return self.exit_code


class FailingCommand(FakeCommand):
    """Command whose run raises a pkgkeeper error."""

    def run(self, settings: SettingsContainer) -> int:
        raise ScanError("Folder vanished")


class TestValidateFolder:
    """Tests for the folder validation step."""

    def test_existing_folder(self, tmp_path: Path) -> None:
        """Test that an existing folder passes."""
        assert validate_folder(SettingsContainer(), str(tmp_path)).is_success

    def test_missing_folder(self, tmp_path: Path) -> None:
        """Test that a missing folder fails with its name."""
        missing = tmp_path / "missing"

        result = validate_folder(SettingsContainer(), str(missing))

        assert not result.is_success
        assert result.error_message == f"Folder '{missing}' does not exist"


class TestRunCommand:
    """Tests for run_command."""

    def test_success_returns_command_exit_code(self) -> None:
        """Test that validated settings are handed to the command."""
        command = FakeCommand(exit_code=7)

        code = run_command(CommandOptions(age="3d"), command)

        assert code == 7
        assert command.settings is not None
        assert command.settings.modal_settings.command == "fake"

    def test_validation_failure_returns_minus_one(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a failed step is logged and the command never runs."""
        command = FakeCommand()

        code = run_command(CommandOptions(age="xyz"), command)

        assert code == EXIT_VALIDATION_FAILURE
        assert command.settings is None
        assert "Min package age 'xyz' could not be parsed" in caplog.text

    def test_command_step_failure(self, tmp_path: Path) -> None:
        """Test that a command's own step can reject the settings."""
        command = FakeCommand(
            steps=[ValidationStep(validate_folder, str(tmp_path / "missing"))]
        )

        assert run_command(CommandOptions(), command) == EXIT_VALIDATION_FAILURE
        assert command.settings is None

    def test_log_level_applied_before_validation(self) -> None:
        """Test that verbosity is configured before any step runs."""
        levels: list[int] = []

        def recording_resolve(*args: Any, **kwargs: Any) -> Any:
            levels.append(logging.getLogger("pkgkeeper").level)
            return resolve_settings(*args, **kwargs)

        with patch(
            "pkgkeeper.commands.base.resolve_settings", side_effect=recording_resolve
        ):
            run_command(
                CommandOptions(verbosity=LogLevel.DETAILED, age="bad"), FakeCommand()
            )

        assert levels == [logging.DEBUG]

    def test_verbosity_reaches_modal_settings(self) -> None:
        """Test that the command can see the chosen verbosity."""
        command = FakeCommand()

        run_command(CommandOptions(verbosity=LogLevel.QUIET), command)

        assert command.settings is not None
        assert command.settings.modal_settings.verbosity is LogLevel.QUIET


class TestExecute:
    """Tests for the outermost command boundary."""

    def test_layers_cli_over_config(self, tmp_path: Path) -> None:
        """Test that command-line values override the config file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("age: 2w\ninclude: '^File'\n")
        command = FakeCommand()

        code = execute({"include": "^Cli"}, command, str(config_file))

        assert code == EXIT_SUCCESS
        assert command.settings is not None
        includes = command.settings.user_settings.package_includes
        assert includes is not None and includes.pattern == "^Cli"
        assert command.settings.user_settings.minimum_package_age.days == 14

    def test_invalid_config_returns_minus_one(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a broken config file is reported like a validation failure."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("bogus: 1\n")

        code = execute({}, FakeCommand(), str(config_file))

        assert code == EXIT_VALIDATION_FAILURE
        assert "Invalid configuration" in caplog.text

    def test_command_error_returns_exit_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that errors raised while running map to EXIT_ERROR."""
        monkeypatch.chdir(tmp_path)

        code = execute({}, FailingCommand())

        assert code == EXIT_ERROR
        assert "ScanError: Folder vanished" in caplog.text
