"""Package reference Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from pkgkeeper.models.package_path import PackagePath


class PackageReference(BaseModel):
    """A single package dependency declared in a repository file."""

    model_config = {"extra": "forbid", "frozen": True, "arbitrary_types_allowed": True}

    name: str = Field(description="Package id")
    version: Optional[str] = Field(
        default=None, description="Declared version or range, if any"
    )
    path: PackagePath = Field(description="File the reference was read from")


class InspectionResult(BaseModel):
    """Package references found in a folder after filtering."""

    model_config = {"extra": "forbid", "arbitrary_types_allowed": True}

    base_directory: str = Field(description="Folder that was scanned")
    files_scanned: int = Field(default=0, description="Package files read")
    references: list[PackageReference] = Field(
        default_factory=list,
        description="References kept by the include/exclude filters",
    )
    filtered_names: list[str] = Field(
        default_factory=list,
        description="Names of references dropped by the include/exclude filters",
    )

    @property
    def total_references(self) -> int:
        """Number of references kept."""
        return len(self.references)
