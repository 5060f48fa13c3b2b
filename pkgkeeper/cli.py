"""CLI entry point for pkgkeeper."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional

import click
from rich.console import Console

from pkgkeeper import __version__
from pkgkeeper.commands.base import execute
from pkgkeeper.commands.inspect import InspectCommand
from pkgkeeper.commands.restore import RestoreCommand
from pkgkeeper.restore.commands import RESTORE_TOOLS

# Module-level console for consistent output
_console = Console()

VERBOSITY_CHOICES = ["q", "quiet", "m", "minimal", "n", "normal", "d", "detailed"]


def shared_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options every command accepts.

    Defaults are None so that unset flags fall through to the
    configuration file and then to the built-in defaults.
    """
    options = [
        click.option(
            "--change",
            "-c",
            "change",
            type=click.Choice(["Patch", "Minor", "Major"], case_sensitive=False),
            default=None,
            help="Allowed version change: Patch, Minor, Major. Defaults to Major.",
        ),
        click.option(
            "--source",
            "-s",
            "sources",
            multiple=True,
            help="NuGet package source to use. Overrides all sources in "
            "NuGet.config files. May be given multiple times.",
        ),
        click.option(
            "--verbosity",
            "-v",
            "verbosity",
            type=click.Choice(VERBOSITY_CHOICES, case_sensitive=False),
            default=None,
            help="Verbosity: q[uiet], m[inimal], n[ormal], d[etailed]. "
            "Defaults to normal.",
        ),
        click.option(
            "--age",
            "-a",
            "age",
            default=None,
            help="Minimum package age before an update is considered. "
            "Examples: 0 = zero, 12h = 12 hours, 3d = 3 days, 2w = two weeks. "
            "Defaults to 7d.",
        ),
        click.option(
            "--include",
            "-i",
            "include",
            default=None,
            help="Only consider packages matching this regex pattern.",
        ),
        click.option(
            "--exclude",
            "-e",
            "exclude",
            default=None,
            help="Do not consider packages matching this regex pattern.",
        ),
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help="Path to configuration file.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _cli_values(
    change: Optional[str],
    sources: tuple[str, ...],
    verbosity: Optional[str],
    age: Optional[str],
    include: Optional[str],
    exclude: Optional[str],
) -> dict[str, Any]:
    return {
        "change": change,
        "sources": sources,
        "verbosity": verbosity,
        "age": age,
        "include": include,
        "exclude": exclude,
    }


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """pkgkeeper - Inspect and restore NuGet package references.

    Scans a repository checkout for package references and restores
    its solutions.

    \b
    Examples:
        pkgkeeper inspect
        pkgkeeper inspect src --include "^Microsoft\\."
        pkgkeeper restore --source https://api.nuget.org/v3/index.json
    """
    pass


@main.command()
@click.argument(
    "folder", type=click.Path(file_okay=False), default=".", required=False
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for inspection results (default: terminal).",
)
@shared_options
def inspect(
    folder: str,
    output_format: str,
    change: Optional[str],
    sources: tuple[str, ...],
    verbosity: Optional[str],
    age: Optional[str],
    include: Optional[str],
    exclude: Optional[str],
    config_path: Optional[str],
) -> None:
    """List package references found in a folder.

    Reads packages.config, project, nuspec and Directory.Build files
    and applies the include and exclude patterns.

    \b
    Examples:
        pkgkeeper inspect
        pkgkeeper inspect path/to/repo --format json
        pkgkeeper inspect --exclude "^System\\." --verbosity d
    """
    command = InspectCommand(
        folder, output_format=output_format.lower(), console=_console
    )
    values = _cli_values(change, sources, verbosity, age, include, exclude)
    sys.exit(execute(values, command, config_path))


@main.command()
@click.argument(
    "folder", type=click.Path(file_okay=False), default=".", required=False
)
@click.option(
    "--tool",
    type=click.Choice(sorted(RESTORE_TOOLS), case_sensitive=False),
    default="nuget",
    help="Restore tool to run for each solution (default: nuget).",
)
@shared_options
def restore(
    folder: str,
    tool: str,
    change: Optional[str],
    sources: tuple[str, ...],
    verbosity: Optional[str],
    age: Optional[str],
    include: Optional[str],
    exclude: Optional[str],
    config_path: Optional[str],
) -> None:
    """Restore packages for every solution file in a folder.

    Solutions are restored one at a time. The first failure stops the run.

    \b
    Examples:
        pkgkeeper restore
        pkgkeeper restore path/to/repo --tool dotnet
        pkgkeeper restore -s https://my.feed/v3/index.json
    """
    command = RestoreCommand(folder, tool=tool.lower())
    values = _cli_values(change, sources, verbosity, age, include, exclude)
    sys.exit(execute(values, command, config_path))


if __name__ == "__main__":
    main()
