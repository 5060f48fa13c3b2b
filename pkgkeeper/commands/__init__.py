"""Commands runnable from the pkgkeeper CLI."""

from pkgkeeper.commands.base import Command, execute, run_command, validate_folder
from pkgkeeper.commands.inspect import InspectCommand
from pkgkeeper.commands.restore import RestoreCommand

__all__ = [
    "Command",
    "InspectCommand",
    "RestoreCommand",
    "execute",
    "run_command",
    "validate_folder",
]
