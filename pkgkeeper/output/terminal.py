"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pkgkeeper.models.reference import InspectionResult
from pkgkeeper.models.settings import LogLevel, UserSettings


class TerminalFormatter:
    """Format inspection results for terminal display using Rich.

    Shows one table row per package reference, with the file it was
    declared in and that file's dialect.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: LogLevel = LogLevel.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_inspection_result(
        self, result: InspectionResult, settings: Optional[UserSettings] = None
    ) -> None:
        """Format and display inspection results as a Rich table.

        Args:
            result: The inspection result to display.
            settings: Settings the result was produced with, shown in
                detailed mode.
        """
        if self._verbosity == LogLevel.QUIET:
            self._print_summary(result)
            return

        if result.total_references == 0:
            self._console.print("[yellow]No package references found[/yellow]")
            self._print_summary(result)
            return

        table = Table(title="Package References")

        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Version", style="magenta")
        table.add_column("File", style="green")
        if self._verbosity == LogLevel.DETAILED:
            table.add_column("Type", style="blue")

        sorted_references = sorted(
            result.references, key=lambda r: (r.name.lower(), r.path.relative_path)
        )

        for reference in sorted_references:
            version = (
                escape(reference.version) if reference.version else "[yellow]-[/yellow]"
            )
            row = [
                escape(reference.name),
                version,
                escape(reference.path.relative_path),
            ]
            if self._verbosity == LogLevel.DETAILED:
                row.append(reference.path.package_reference_type.value)
            table.add_row(*row)

        self._console.print(table)
        self._print_summary(result)

        if self._verbosity == LogLevel.DETAILED and settings is not None:
            self._print_settings(settings)

    def _print_summary(self, result: InspectionResult) -> None:
        summary = (
            f"{result.total_references} reference(s) in "
            f"{result.files_scanned} file(s)"
        )
        if result.filtered_names:
            summary += f", {len(result.filtered_names)} filtered out"
        self._console.print(summary)

    def _print_settings(self, settings: UserSettings) -> None:
        includes = settings.package_includes.pattern if settings.package_includes else "-"
        excludes = settings.package_excludes.pattern if settings.package_excludes else "-"
        # Patterns are user text and may look like markup tags
        includes = escape(includes)
        excludes = escape(excludes)
        self._console.print(
            f"[dim]Include: {includes}  Exclude: {excludes}  "
            f"Change: {settings.allowed_change.value}  "
            f"Min age: {settings.minimum_package_age}[/dim]"
        )
