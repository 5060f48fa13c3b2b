"""Folder abstraction used to discover files in a checkout."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union

from pkgkeeper.exceptions import ScanError


class FolderLike(Protocol):
    """Anything that can find files matching a glob pattern."""

    def find(self, pattern: str) -> list[Path]: ...


class Folder:
    """A directory on disk, searched recursively."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def find(self, pattern: str) -> list[Path]:
        """Find files matching a glob pattern at any depth.

        Args:
            pattern: File name glob, e.g. "*.sln".

        Returns:
            Matching files, sorted by path for deterministic output.

        Raises:
            ScanError: If the folder does not exist.
        """
        if not self._path.is_dir():
            raise ScanError(f"Folder '{self._path}' does not exist")

        return sorted(p for p in self._path.rglob(pattern) if p.is_file())

    def __repr__(self) -> str:
        return f"Folder({str(self._path)!r})"
