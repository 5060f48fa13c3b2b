"""Configuration Pydantic models for pkgkeeper."""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from pkgkeeper.constants import DEFAULT_MINIMUM_PACKAGE_AGE
from pkgkeeper.models.settings import LogLevel, VersionChange


def _coerce_version_change(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().capitalize()
    return value


def _coerce_log_level(value: Any) -> Any:
    if isinstance(value, str):
        return LogLevel.parse(value)
    return value


class FileSettings(BaseModel):
    """Option defaults read from a configuration file.

    All fields are optional with None defaults to allow partial configuration.
    A field left as None falls through to the built-in default.
    """

    model_config = {"extra": "forbid"}

    change: Optional[VersionChange] = Field(
        default=None,
        description="Allowed version change: Patch, Minor or Major.",
    )
    sources: Optional[List[str]] = Field(
        default=None,
        description="Package sources overriding NuGet.config files.",
    )
    verbosity: Optional[LogLevel] = Field(
        default=None,
        description="Verbosity: quiet, minimal, normal or detailed.",
    )
    age: Optional[str] = Field(
        default=None,
        description="Minimum package age, e.g. 0, 12h, 3d, 2w.",
    )
    include: Optional[str] = Field(
        default=None,
        description="Only consider packages matching this regex pattern.",
    )
    exclude: Optional[str] = Field(
        default=None,
        description="Do not consider packages matching this regex pattern.",
    )

    @field_validator("change", mode="before")
    @classmethod
    def normalize_change(cls, value: Any) -> Any:
        return _coerce_version_change(value)

    @field_validator("verbosity", mode="before")
    @classmethod
    def normalize_verbosity(cls, value: Any) -> Any:
        return _coerce_log_level(value)

    @field_validator("age", mode="before")
    @classmethod
    def normalize_age(cls, value: Any) -> Any:
        # YAML reads a bare 0 as an integer
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class CommandOptions(BaseModel):
    """Raw option values shared by every command, after layering.

    Values are still unvalidated strings where the validation pipeline
    is responsible for parsing them (age, include, exclude).
    """

    model_config = {"extra": "forbid"}

    change: VersionChange = Field(default=VersionChange.MAJOR)
    sources: Optional[List[str]] = Field(default=None)
    verbosity: LogLevel = Field(default=LogLevel.NORMAL)
    age: str = Field(default=DEFAULT_MINIMUM_PACKAGE_AGE)
    include: Optional[str] = Field(default=None)
    exclude: Optional[str] = Field(default=None)

    @field_validator("change", mode="before")
    @classmethod
    def normalize_change(cls, value: Any) -> Any:
        return _coerce_version_change(value)

    @field_validator("verbosity", mode="before")
    @classmethod
    def normalize_verbosity(cls, value: Any) -> Any:
        return _coerce_log_level(value)
