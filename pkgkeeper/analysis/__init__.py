"""Package reference analysis for pkgkeeper."""
from pkgkeeper.analysis.filtering import (
    FilterResult,
    filter_packages,
    is_package_selected,
)

__all__ = [
    "FilterResult",
    "filter_packages",
    "is_package_selected",
]
