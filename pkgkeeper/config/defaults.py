"""Default configuration values for pkgkeeper."""

from __future__ import annotations

from pkgkeeper.models.config import CommandOptions, FileSettings

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".pkgkeeper.yaml", ".pkgkeeper.yml"]


def get_default_config() -> FileSettings:
    """Get the default file configuration.

    Returns:
        FileSettings with all defaults (all fields None).
    """
    return FileSettings()


def get_default_options() -> CommandOptions:
    """Get the built-in option values, the lowest precedence layer."""
    return CommandOptions()
