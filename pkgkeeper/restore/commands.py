"""External restore commands."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pkgkeeper.exceptions import RestoreError
from pkgkeeper.models.settings import NuGetSources

logger = logging.getLogger(__name__)


class FileRestoreCommand(ABC):
    """Abstract base class for commands that restore one file's packages."""

    @abstractmethod
    async def invoke(self, path: Path, sources: Optional[NuGetSources]) -> None:
        """Restore packages for a solution or project file.

        Args:
            path: File to restore.
            sources: Package sources to use, or None for ambient configuration.

        Raises:
            RestoreError: If the restore did not complete successfully.
        """


class ExternalRestoreCommand(FileRestoreCommand):
    """Restore by running an external tool in the file's directory."""

    source_flag = ""

    def __init__(self, executable: str) -> None:
        self.executable = executable

    @abstractmethod
    def build_arguments(
        self, path: Path, sources: Optional[NuGetSources]
    ) -> list[str]:
        """Arguments passed to the executable for one file."""

    async def invoke(self, path: Path, sources: Optional[NuGetSources]) -> None:
        args = self.build_arguments(path, sources)
        logger.info("Restoring %s", path)
        logger.debug("Running %s %s", self.executable, " ".join(args))

        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *args,
                cwd=str(path.parent),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise RestoreError(
                f"Could not run '{self.executable}' to restore {path}: {e}"
            ) from e

        stdout, stderr = await process.communicate()
        output = (stdout or b"").decode("utf-8", errors="replace")
        errors = (stderr or b"").decode("utf-8", errors="replace")

        if process.returncode != 0:
            detail = errors.strip() or output.strip()
            raise RestoreError(
                f"Restore of {path} failed with exit code "
                f"{process.returncode}: {detail}"
            )

        logger.debug("%s", output.strip())


class NuGetFileRestoreCommand(ExternalRestoreCommand):
    """Restore with ``nuget restore``."""

    source_flag = "-Source"

    def __init__(self, executable: str = "nuget") -> None:
        super().__init__(executable)

    def build_arguments(
        self, path: Path, sources: Optional[NuGetSources]
    ) -> list[str]:
        args = ["restore", str(path), "-NonInteractive"]
        if sources is not None:
            args.extend(sources.command_line(self.source_flag))
        return args


class DotNetRestoreCommand(ExternalRestoreCommand):
    """Restore with ``dotnet restore``."""

    source_flag = "-s"

    def __init__(self, executable: str = "dotnet") -> None:
        super().__init__(executable)

    def build_arguments(
        self, path: Path, sources: Optional[NuGetSources]
    ) -> list[str]:
        args = ["restore", str(path)]
        if sources is not None:
            args.extend(sources.command_line(self.source_flag))
        return args


RESTORE_TOOLS: dict[str, type[ExternalRestoreCommand]] = {
    "nuget": NuGetFileRestoreCommand,
    "dotnet": DotNetRestoreCommand,
}
