"""The inspect command: list package references in a folder."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import click
from rich.console import Console

from pkgkeeper.analysis.filtering import filter_packages
from pkgkeeper.commands.base import validate_folder
from pkgkeeper.config.resolver import ValidationStep
from pkgkeeper.constants import EXIT_SUCCESS
from pkgkeeper.inspection.finder import find_package_files
from pkgkeeper.inspection.reader import read_package_references
from pkgkeeper.models.reference import InspectionResult, PackageReference
from pkgkeeper.models.settings import SettingsContainer
from pkgkeeper.output.inspect_json import InspectJsonFormatter
from pkgkeeper.output.terminal import TerminalFormatter

logger = logging.getLogger(__name__)


class InspectCommand:
    """Scan a folder, read its package references and report them."""

    name = "inspect"

    def __init__(
        self,
        folder: str,
        output_format: str = "terminal",
        console: Optional[Console] = None,
    ) -> None:
        self.folder = folder
        self.output_format = output_format
        self._console = console

    @property
    def extra_steps(self) -> Sequence[ValidationStep]:
        return [ValidationStep(validate_folder, self.folder)]

    def inspect(self, settings: SettingsContainer) -> InspectionResult:
        """Find, read and filter the references under the folder."""
        base = Path(self.folder).resolve()
        package_files = find_package_files(base)

        references: list[PackageReference] = []
        for package_file in package_files:
            references.extend(read_package_references(package_file))

        filter_result = filter_packages(references, settings.user_settings)
        if filter_result.filtered_count:
            logger.debug(
                "Filtered out %d reference(s): %s",
                filter_result.filtered_count,
                ", ".join(filter_result.filtered_names),
            )

        return InspectionResult(
            base_directory=str(base),
            files_scanned=len(package_files),
            references=filter_result.references,
            filtered_names=filter_result.filtered_names,
        )

    def run(self, settings: SettingsContainer) -> int:
        result = self.inspect(settings)

        if settings.modal_settings.output_format == "json":
            click.echo(InspectJsonFormatter().format_inspection_result(result))
        else:
            TerminalFormatter(
                console=self._console,
                verbosity=settings.modal_settings.verbosity,
            ).format_inspection_result(result, settings.user_settings)

        return EXIT_SUCCESS
