"""Solution restore workflow."""

from pkgkeeper.restore.commands import (
    RESTORE_TOOLS,
    DotNetRestoreCommand,
    FileRestoreCommand,
    NuGetFileRestoreCommand,
)
from pkgkeeper.restore.folder import Folder, FolderLike
from pkgkeeper.restore.solutions import SolutionsRestore

__all__ = [
    "RESTORE_TOOLS",
    "DotNetRestoreCommand",
    "FileRestoreCommand",
    "Folder",
    "FolderLike",
    "NuGetFileRestoreCommand",
    "SolutionsRestore",
]
