"""Package filtering for include/exclude patterns."""

from __future__ import annotations

from typing import NamedTuple

from pkgkeeper.models.reference import PackageReference
from pkgkeeper.models.settings import UserSettings


class FilterResult(NamedTuple):
    """Result of filtering package references.

    Attributes:
        references: References kept after filtering.
        filtered_count: Number of references dropped.
        filtered_names: Names of references dropped, in input order.
    """

    references: list[PackageReference]
    filtered_count: int
    filtered_names: list[str]


def is_package_selected(name: str, settings: UserSettings) -> bool:
    """Check a package name against the include and exclude patterns.

    Patterns match anywhere in the name (search, not full match). An unset
    pattern places no restriction on its axis.

    Args:
        name: Package id.
        settings: Validated user settings.

    Returns:
        True if the package should be considered.
    """
    if settings.package_includes is not None and not settings.package_includes.search(
        name
    ):
        return False
    if settings.package_excludes is not None and settings.package_excludes.search(name):
        return False
    return True


def filter_packages(
    references: list[PackageReference],
    settings: UserSettings,
) -> FilterResult:
    """Keep only the references selected by the include/exclude patterns.

    Args:
        references: References to filter.
        settings: Validated user settings holding the patterns.

    Returns:
        FilterResult with kept references and a summary of dropped ones.
        If neither pattern is set, returns all references.
    """
    if settings.package_includes is None and settings.package_excludes is None:
        return FilterResult(
            references=references,
            filtered_count=0,
            filtered_names=[],
        )

    kept: list[PackageReference] = []
    filtered_names: list[str] = []

    for reference in references:
        if is_package_selected(reference.name, settings):
            kept.append(reference)
        else:
            filtered_names.append(reference.name)

    return FilterResult(
        references=kept,
        filtered_count=len(filtered_names),
        filtered_names=filtered_names,
    )
