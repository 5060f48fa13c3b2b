"""Reading package references out of repository files."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from pkgkeeper.exceptions import ScanError
from pkgkeeper.models.package_path import PackagePath, PackageReferenceType
from pkgkeeper.models.reference import PackageReference


def _local_name(tag: str) -> str:
    """Element name without its XML namespace."""
    return tag.rsplit("}", 1)[-1]


def _iter_elements(root: ET.Element, name: str) -> Iterator[ET.Element]:
    for element in root.iter():
        if isinstance(element.tag, str) and _local_name(element.tag) == name:
            yield element


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    for child in element:
        if not isinstance(child.tag, str) or _local_name(child.tag) != name:
            continue
        if child.text:
            return child.text.strip()
    return None


def _read_packages_config(root: ET.Element) -> Iterator[tuple[str, Optional[str]]]:
    for element in _iter_elements(root, "package"):
        package_id = element.get("id")
        if package_id:
            yield package_id, element.get("version")


def _read_project(root: ET.Element) -> Iterator[tuple[str, Optional[str]]]:
    for element in _iter_elements(root, "PackageReference"):
        # Directory.Build files may use Update instead of Include
        package_id = element.get("Include") or element.get("Update")
        if package_id:
            version = element.get("Version") or _child_text(element, "Version")
            yield package_id, version


def _read_nuspec(root: ET.Element) -> Iterator[tuple[str, Optional[str]]]:
    for element in _iter_elements(root, "dependency"):
        package_id = element.get("id")
        if package_id:
            yield package_id, element.get("version")


_READERS = {
    PackageReferenceType.PACKAGES_CONFIG: _read_packages_config,
    PackageReferenceType.PROJECT_FILE: _read_project,
    PackageReferenceType.PROJECT_FILE_OLD_STYLE: _read_project,
    PackageReferenceType.DIRECTORY_BUILD_TARGETS: _read_project,
    PackageReferenceType.NUSPEC: _read_nuspec,
}


def read_package_references(path: PackagePath) -> list[PackageReference]:
    """Read the package references declared in one file.

    Args:
        path: Location and dialect of the file.

    Returns:
        References in document order.

    Raises:
        ScanError: If the file cannot be read or is not well-formed XML.
    """
    try:
        root = ET.parse(path.full_path).getroot()
    except ET.ParseError as e:
        raise ScanError(f"Cannot parse '{path.relative_path}': {e}") from e
    except OSError as e:
        raise ScanError(f"Cannot read '{path.relative_path}': {e}") from e

    reader = _READERS[path.package_reference_type]
    return [
        PackageReference(name=name, version=version, path=path)
        for name, version in reader(root)
    ]
