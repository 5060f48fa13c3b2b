"""The restore command: restore every solution in a folder."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Sequence

from pkgkeeper.commands.base import validate_folder
from pkgkeeper.config.resolver import ValidationStep
from pkgkeeper.constants import EXIT_SUCCESS
from pkgkeeper.models.settings import SettingsContainer
from pkgkeeper.restore.commands import RESTORE_TOOLS, FileRestoreCommand
from pkgkeeper.restore.folder import Folder
from pkgkeeper.restore.solutions import SolutionsRestore

logger = logging.getLogger(__name__)


class RestoreCommand:
    """Restore packages for all solutions under a folder."""

    name = "restore"
    output_format = "terminal"

    def __init__(
        self,
        folder: str,
        tool: str = "nuget",
        file_restore_command: Optional[FileRestoreCommand] = None,
    ) -> None:
        self.folder = folder
        self.tool = tool
        self._file_restore_command = file_restore_command

    @property
    def extra_steps(self) -> Sequence[ValidationStep]:
        return [ValidationStep(validate_folder, self.folder)]

    def run(self, settings: SettingsContainer) -> int:
        restore_command = self._file_restore_command or RESTORE_TOOLS[self.tool]()
        solutions_restore = SolutionsRestore(restore_command)

        asyncio.run(
            solutions_restore.restore(
                Folder(self.folder), settings.user_settings.nuget_sources
            )
        )

        logger.info("Restore of %s complete", self.folder)
        return EXIT_SUCCESS
