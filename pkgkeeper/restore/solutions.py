"""Restore every solution file in a working folder."""

from __future__ import annotations

import logging
from typing import Optional

from pkgkeeper.constants import SOLUTION_FILE_PATTERN
from pkgkeeper.models.settings import NuGetSources
from pkgkeeper.restore.commands import FileRestoreCommand
from pkgkeeper.restore.folder import FolderLike

logger = logging.getLogger(__name__)


class SolutionsRestore:
    """Restore packages for all solutions in a folder, one at a time.

    Restores share the tool's global package cache, so invocations are
    never run concurrently. The first failure propagates and the
    remaining solutions are not attempted.
    """

    def __init__(self, file_restore_command: FileRestoreCommand) -> None:
        self._file_restore_command = file_restore_command

    async def restore(
        self, working_folder: FolderLike, sources: Optional[NuGetSources]
    ) -> None:
        """Restore each solution found in the folder.

        Args:
            working_folder: Checkout to search for solution files.
            sources: Package sources, or None for ambient configuration.

        Raises:
            RestoreError: From the first solution whose restore fails.
        """
        solution_files = working_folder.find(SOLUTION_FILE_PATTERN)
        logger.debug("Found %d solution file(s)", len(solution_files))

        for sln in solution_files:
            await self._file_restore_command.invoke(sln, sources)
