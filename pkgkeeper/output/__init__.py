"""Output formatters for pkgkeeper."""

from pkgkeeper.output.inspect_json import InspectJsonFormatter
from pkgkeeper.output.terminal import TerminalFormatter

__all__ = [
    "InspectJsonFormatter",
    "TerminalFormatter",
]
