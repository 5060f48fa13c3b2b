"""Discovery of package-reference files in a repository checkout."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from pkgkeeper.models.package_path import PackagePath, PackageReferenceType
from pkgkeeper.restore.folder import Folder

logger = logging.getLogger(__name__)

MSBUILD_2003_NAMESPACE = "http://schemas.microsoft.com/developer/msbuild/2003"

PROJECT_FILE_PATTERNS = ("*.csproj", "*.vbproj", "*.fsproj")

# Files whose dialect is known from the name alone
FIXED_PATTERNS: tuple[tuple[str, PackageReferenceType], ...] = (
    ("packages.config", PackageReferenceType.PACKAGES_CONFIG),
    ("*.nuspec", PackageReferenceType.NUSPEC),
    ("Directory.Build.props", PackageReferenceType.DIRECTORY_BUILD_TARGETS),
    ("Directory.Build.targets", PackageReferenceType.DIRECTORY_BUILD_TARGETS),
)


def classify_project_file(path: Path) -> PackageReferenceType:
    """Tell SDK-style project files from old-style MSBuild 2003 ones.

    Args:
        path: Project file to inspect.

    Returns:
        PROJECT_FILE if the root element carries an Sdk attribute.
        Otherwise PROJECT_FILE_OLD_STYLE if the root element is in the
        MSBuild 2003 namespace, and PROJECT_FILE for anything else
        (including unparseable files, which the reader reports).
    """
    try:
        with open(path, "rb") as stream:
            # Only the root element is needed
            for _, element in ET.iterparse(stream, events=("start",)):
                if "Sdk" in element.attrib:
                    return PackageReferenceType.PROJECT_FILE
                if element.tag.startswith("{" + MSBUILD_2003_NAMESPACE + "}"):
                    return PackageReferenceType.PROJECT_FILE_OLD_STYLE
                return PackageReferenceType.PROJECT_FILE
    except (ET.ParseError, OSError) as e:
        logger.debug("Could not classify %s: %s", path, e)
    return PackageReferenceType.PROJECT_FILE


def _to_package_path(
    base: Path, file_path: Path, reference_type: PackageReferenceType
) -> PackagePath:
    relative = file_path.relative_to(base)
    return PackagePath(str(base), str(relative), reference_type)


def find_package_files(base_directory: Union[str, Path]) -> list[PackagePath]:
    """Find every file that can declare package references.

    Args:
        base_directory: Root of the checkout.

    Returns:
        One PackagePath per file, ordered by dialect then path.

    Raises:
        ScanError: If the base directory does not exist.
    """
    base = Path(base_directory)
    folder = Folder(base)
    found: list[PackagePath] = []

    for pattern, reference_type in FIXED_PATTERNS:
        for file_path in folder.find(pattern):
            found.append(_to_package_path(base, file_path, reference_type))

    for pattern in PROJECT_FILE_PATTERNS:
        for file_path in folder.find(pattern):
            found.append(
                _to_package_path(base, file_path, classify_project_file(file_path))
            )

    logger.debug("Found %d package file(s) under %s", len(found), base)
    return found
