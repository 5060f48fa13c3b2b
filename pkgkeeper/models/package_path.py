"""Location of a package-reference file within a repository checkout."""

from __future__ import annotations

import os
from enum import Enum

from pkgkeeper.exceptions import ArgumentError

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep, "/") if sep)


class PackageReferenceType(Enum):
    """File-format dialect a package reference was read from."""

    PACKAGES_CONFIG = "packages_config"
    PROJECT_FILE = "project_file"
    PROJECT_FILE_OLD_STYLE = "project_file_old_style"
    NUSPEC = "nuspec"
    DIRECTORY_BUILD_TARGETS = "directory_build_targets"


class PackagePath:
    """Canonical, immutable address of a package-reference file.

    All derived paths are computed once at construction time.

    Attributes:
        base_directory: The working directory at the root of all the files.
        relative_path: Path from base_directory to the file, including file name.
        file_name: Just the file name.
        full_path: Full path to the file.
        full_directory: The full directory path to the file, without file name.
        package_reference_type: Dialect of the file.
    """

    __slots__ = (
        "_base_directory",
        "_relative_path",
        "_package_reference_type",
        "_file_name",
        "_full_path",
        "_full_directory",
    )

    def __init__(
        self,
        base_directory: str,
        relative_path: str,
        package_reference_type: PackageReferenceType,
    ) -> None:
        if not base_directory or not base_directory.strip():
            raise ArgumentError("base_directory")
        if not relative_path or not relative_path.strip():
            raise ArgumentError("relative_path")

        # Only one leading separator is stripped
        if relative_path.startswith(_SEPARATORS):
            relative_path = relative_path[1:]

        self._base_directory = base_directory
        self._relative_path = relative_path
        self._package_reference_type = package_reference_type
        self._file_name = os.path.basename(relative_path)
        self._full_path = os.path.join(base_directory, relative_path)
        self._full_directory = os.path.dirname(self._full_path)

    @property
    def base_directory(self) -> str:
        return self._base_directory

    @property
    def relative_path(self) -> str:
        return self._relative_path

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def full_path(self) -> str:
        return self._full_path

    @property
    def full_directory(self) -> str:
        return self._full_directory

    @property
    def package_reference_type(self) -> PackageReferenceType:
        return self._package_reference_type

    def _key(self) -> tuple[str, str, PackageReferenceType]:
        return (self._base_directory, self._relative_path, self._package_reference_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackagePath):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"PackagePath(base_directory={self._base_directory!r}, "
            f"relative_path={self._relative_path!r}, "
            f"package_reference_type={self._package_reference_type.name})"
        )
