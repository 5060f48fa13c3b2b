"""Settings Pydantic models for pkgkeeper."""

from __future__ import annotations

import re
from datetime import timedelta
from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from pkgkeeper.constants import NUGET_GLOBAL_FEED


class VersionChange(Enum):
    """Largest version change an update is allowed to make."""

    PATCH = "Patch"
    MINOR = "Minor"
    MAJOR = "Major"


class LogLevel(Enum):
    """Command verbosity levels."""

    QUIET = "quiet"
    MINIMAL = "minimal"
    NORMAL = "normal"
    DETAILED = "detailed"

    @classmethod
    def parse(cls, value: str) -> LogLevel:
        """Parse a verbosity name or its single-letter abbreviation.

        Args:
            value: One of q[uiet], m[inimal], n[ormal], d[etailed].

        Returns:
            The matching LogLevel.

        Raises:
            ValueError: If the value names no level.
        """
        lowered = value.strip().lower()
        for level in cls:
            if lowered in (level.value, level.value[0]):
                return level
        raise ValueError(f"Unknown verbosity '{value}'")


class NuGetSources(BaseModel):
    """Ordered package sources that override ambient NuGet configuration."""

    model_config = {"extra": "forbid", "frozen": True}

    items: list[str] = Field(
        min_length=1,
        description="Package source locations, in the order given",
    )

    @classmethod
    def from_values(cls, values: Optional[Sequence[str]]) -> Optional[NuGetSources]:
        """Build sources from raw option values.

        Args:
            values: Source strings as given on the command line or config file.

        Returns:
            NuGetSources, or None when no sources were given, meaning
            the ambient configuration applies.
        """
        if not values:
            return None
        return cls(items=list(values))

    @classmethod
    def global_feed(cls) -> NuGetSources:
        """Sources containing only the public nuget.org feed."""
        return cls(items=[NUGET_GLOBAL_FEED])

    def command_line(self, flag: str) -> list[str]:
        """Render the sources as repeated command-line arguments.

        Args:
            flag: The option name the external tool expects, e.g. "-Source".

        Returns:
            Flat argument list such as ["-Source", "a", "-Source", "b"].
        """
        args: list[str] = []
        for source in self.items:
            args.extend([flag, source])
        return args


class ModalSettings(BaseModel):
    """Settings set by the command being run rather than by the user."""

    model_config = {"extra": "forbid"}

    command: Optional[str] = Field(default=None, description="Command name")
    output_format: str = Field(default="terminal", description="Report format")
    verbosity: LogLevel = Field(
        default=LogLevel.NORMAL, description="Verbosity the command reports at"
    )


class UserSettings(BaseModel):
    """Settings supplied by the user, populated by the validation pipeline."""

    model_config = {"extra": "forbid"}

    allowed_change: VersionChange = Field(
        default=VersionChange.MAJOR,
        description="Largest version change allowed",
    )
    nuget_sources: Optional[NuGetSources] = Field(
        default=None,
        description="Source override; None uses ambient NuGet configuration",
    )
    minimum_package_age: timedelta = Field(
        default=timedelta(0),
        description="Minimum age of a package version before it is used",
    )
    package_includes: Optional[re.Pattern] = Field(
        default=None,
        description="Only consider packages matching this pattern; None means no filter",
    )
    package_excludes: Optional[re.Pattern] = Field(
        default=None,
        description="Skip packages matching this pattern; None means no filter",
    )


class SettingsContainer(BaseModel):
    """All settings for one command invocation."""

    model_config = {"extra": "forbid"}

    modal_settings: ModalSettings = Field(default_factory=ModalSettings)
    user_settings: UserSettings = Field(default_factory=UserSettings)
