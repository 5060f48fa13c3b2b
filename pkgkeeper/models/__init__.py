"""Pydantic data models for pkgkeeper."""

from pkgkeeper.models.config import CommandOptions, FileSettings
from pkgkeeper.models.package_path import PackagePath, PackageReferenceType
from pkgkeeper.models.reference import InspectionResult, PackageReference
from pkgkeeper.models.settings import (
    LogLevel,
    ModalSettings,
    NuGetSources,
    SettingsContainer,
    UserSettings,
    VersionChange,
)
from pkgkeeper.models.validation import ValidationResult

__all__ = [
    "CommandOptions",
    "FileSettings",
    "InspectionResult",
    "LogLevel",
    "ModalSettings",
    "NuGetSources",
    "PackagePath",
    "PackageReference",
    "PackageReferenceType",
    "SettingsContainer",
    "UserSettings",
    "ValidationResult",
    "VersionChange",
]
