"""Tests for the JSON inspection formatter."""

import json

from pkgkeeper import __version__
from pkgkeeper.models.package_path import PackagePath, PackageReferenceType
from pkgkeeper.models.reference import InspectionResult, PackageReference
from pkgkeeper.output.inspect_json import InspectJsonFormatter

_PATH = PackagePath("/repo", "packages.config", PackageReferenceType.PACKAGES_CONFIG)


class TestInspectJsonFormatter:
    """Tests for InspectJsonFormatter."""

    def test_structure(self) -> None:
        """Test the top-level sections and their content."""
        result = InspectionResult(
            base_directory="/repo",
            files_scanned=1,
            references=[
                PackageReference(name="Polly", version="7.1.0", path=_PATH),
                PackageReference(name="moq", version="4.10.1", path=_PATH),
            ],
            filtered_names=["NUnit"],
        )

        data = json.loads(InspectJsonFormatter().format_inspection_result(result))

        assert data["inspect_metadata"]["tool_version"] == __version__
        assert data["inspect_metadata"]["base_directory"] == "/repo"
        assert data["summary"] == {
            "files_scanned": 1,
            "total_references": 2,
            "filtered_count": 1,
            "filtered_names": ["NUnit"],
        }
        assert [r["name"] for r in data["references"]] == ["moq", "Polly"]
        assert data["references"][1] == {
            "name": "Polly",
            "version": "7.1.0",
            "file": "packages.config",
            "type": "packages_config",
        }

    def test_empty_result(self) -> None:
        """Test output for no references."""
        data = json.loads(
            InspectJsonFormatter().format_inspection_result(
                InspectionResult(base_directory="/repo")
            )
        )

        assert data["references"] == []
        assert data["summary"]["total_references"] == 0
