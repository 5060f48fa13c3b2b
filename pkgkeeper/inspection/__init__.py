"""Repository inspection: finding and reading package references."""

from pkgkeeper.inspection.finder import classify_project_file, find_package_files
from pkgkeeper.inspection.reader import read_package_references

__all__ = [
    "classify_project_file",
    "find_package_files",
    "read_package_references",
]
