"""Configuration file discovery, loading and option layering for pkgkeeper."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from pkgkeeper.config.defaults import (
    DEFAULT_CONFIG_NAMES,
    get_default_config,
    get_default_options,
)
from pkgkeeper.exceptions import ConfigurationError
from pkgkeeper.models.config import CommandOptions, FileSettings

logger = logging.getLogger(__name__)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in the specified directory.

    Searches for `.pkgkeeper.yaml` first, then `.pkgkeeper.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.exists():
            return config_path
    return None


def load_config_file(path: Path) -> FileSettings:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated FileSettings instance.

    Raises:
        ConfigurationError: If file cannot be read, has invalid YAML,
            or fails Pydantic validation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, PermissionError) as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    # Handle empty files - return default config
    if not content.strip():
        return get_default_config()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in '{path}': {e}"
        ) from e

    # Handle YAML that parses to None (empty or just comments)
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return FileSettings.model_validate(data)
    except ValidationError as e:
        error_messages = _format_validation_errors(e)
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {error_messages}"
        ) from e


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        msg = err["msg"]
        messages.append(f"{loc}: {msg}")
    return "; ".join(messages)


def load_config(config_path: str | None = None) -> FileSettings:
    """Load configuration from file or use defaults.

    If a config_path is provided, loads from that file.
    Otherwise, searches for a configuration file in the current directory.
    If no file is found, returns default configuration.

    Args:
        config_path: Optional path to configuration file.
            If provided, must exist and be valid.

    Returns:
        FileSettings with loaded or default values.

    Raises:
        ConfigurationError: If the specified or discovered config file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file()
    if discovered is not None:
        logger.debug("Using configuration file %s", discovered)
        return load_config_file(discovered)

    return get_default_config()


def merge_options(
    cli_values: Mapping[str, Any], file_settings: FileSettings
) -> CommandOptions:
    """Layer command-line values over file settings over built-in defaults.

    A command-line value of None (or an empty sequence, for repeatable
    options) counts as "not given" and falls through to the next layer.

    Args:
        cli_values: Option values keyed by CommandOptions field name.
        file_settings: Values loaded from the configuration file.

    Returns:
        CommandOptions with every field resolved.

    Raises:
        ConfigurationError: If a command-line value cannot be coerced.
    """
    merged: dict[str, Any] = get_default_options().model_dump()
    file_values = file_settings.model_dump(exclude_none=True)
    merged.update(file_values)

    for name in CommandOptions.model_fields:
        value = cli_values.get(name)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = list(value)
        merged[name] = value

    try:
        return CommandOptions.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid options: {_format_validation_errors(e)}"
        ) from e
