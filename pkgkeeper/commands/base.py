"""Command dispatch: resolve settings, then hand them to a command."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Sequence

from pkgkeeper.config.loader import load_config, merge_options
from pkgkeeper.config.resolver import ValidationStep, resolve_settings
from pkgkeeper.constants import EXIT_ERROR, EXIT_VALIDATION_FAILURE
from pkgkeeper.exceptions import ConfigurationError, PackageKeeperError
from pkgkeeper.log import configure_log_level
from pkgkeeper.models.config import CommandOptions
from pkgkeeper.models.settings import LogLevel, ModalSettings, SettingsContainer
from pkgkeeper.models.validation import ValidationResult

logger = logging.getLogger(__name__)


class Command(Protocol):
    """A command that runs on validated settings."""

    name: str
    output_format: str

    @property
    def extra_steps(self) -> Sequence[ValidationStep]:
        """Validation steps run after the base steps."""
        ...

    def run(self, settings: SettingsContainer) -> int:
        """Execute the command and return its exit code."""
        ...


def validate_folder(settings: SettingsContainer, value: Any) -> ValidationResult:
    """Validation step: the folder a command works on must exist."""
    if not Path(value).is_dir():
        return ValidationResult.failure(f"Folder '{value}' does not exist")
    return ValidationResult.success()


def run_command(options: CommandOptions, command: Command) -> int:
    """Configure logging, validate settings and run the command.

    Args:
        options: Layered command options.
        command: Command to run on success.

    Returns:
        EXIT_VALIDATION_FAILURE if validation failed, otherwise the
        command's exit code.
    """
    configure_log_level(options.verbosity)

    settings, result = resolve_settings(
        options,
        extra_steps=command.extra_steps,
        modal_settings=ModalSettings(
            command=command.name,
            output_format=command.output_format,
            verbosity=options.verbosity,
        ),
    )
    if not result.is_success:
        logger.error("%s", result.error_message)
        return EXIT_VALIDATION_FAILURE

    return command.run(settings)


def execute(
    cli_values: Mapping[str, Any],
    command: Command,
    config_path: Optional[str] = None,
) -> int:
    """Outermost command boundary: turns errors into log messages and exit codes.

    Args:
        cli_values: Option values given on the command line.
        command: Command to run.
        config_path: Explicit configuration file, if any.

    Returns:
        Process exit code.
    """
    try:
        options = merge_options(cli_values, load_config(config_path))
    except ConfigurationError as e:
        configure_log_level(LogLevel.NORMAL)
        logger.error("%s", e)
        return EXIT_VALIDATION_FAILURE

    try:
        return run_command(options, command)
    except PackageKeeperError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return EXIT_ERROR
