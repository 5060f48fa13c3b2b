"""Configuration handling for pkgkeeper."""
from __future__ import annotations

from pkgkeeper.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from pkgkeeper.config.duration import parse_duration
from pkgkeeper.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
    merge_options,
)
from pkgkeeper.config.resolver import (
    PatternResult,
    ValidationStep,
    compile_pattern,
    resolve_settings,
)
from pkgkeeper.models.config import CommandOptions, FileSettings

__all__ = [
    "CommandOptions",
    "DEFAULT_CONFIG_NAMES",
    "FileSettings",
    "PatternResult",
    "ValidationStep",
    "compile_pattern",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
    "merge_options",
    "parse_duration",
    "resolve_settings",
]
