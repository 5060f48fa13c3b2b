"""Tests for reading package references."""

from pathlib import Path

import pytest

from pkgkeeper.exceptions import ScanError
from pkgkeeper.inspection.reader import read_package_references
from pkgkeeper.models.package_path import PackagePath, PackageReferenceType


def _read(repo: Path, relative: str, reference_type: PackageReferenceType):
    return read_package_references(PackagePath(str(repo), relative, reference_type))


class TestReadPackageReferences:
    """Tests for read_package_references."""

    def test_sdk_project(self, repo: Path) -> None:
        """Test attribute and child-element versions."""
        refs = _read(repo, "src/App/App.csproj", PackageReferenceType.PROJECT_FILE)

        assert [(r.name, r.version) for r in refs] == [
            ("Newtonsoft.Json", "12.0.1"),
            ("Serilog", "2.8.0"),
        ]

    def test_old_style_project_ignores_namespace(self, repo: Path) -> None:
        """Test that namespaced MSBuild elements are read."""
        refs = _read(
            repo, "src/Legacy/Legacy.csproj", PackageReferenceType.PROJECT_FILE_OLD_STYLE
        )

        assert [(r.name, r.version) for r in refs] == [("NUnit", "3.11.0")]

    def test_packages_config(self, repo: Path) -> None:
        """Test packages.config entries."""
        refs = _read(
            repo, "src/Legacy/packages.config", PackageReferenceType.PACKAGES_CONFIG
        )

        assert [(r.name, r.version) for r in refs] == [
            ("Moq", "4.10.1"),
            ("System.Net.Http", "4.3.4"),
        ]

    def test_nuspec(self, repo: Path) -> None:
        """Test nuspec dependencies."""
        refs = _read(repo, "My.Library.nuspec", PackageReferenceType.NUSPEC)

        assert [(r.name, r.version) for r in refs] == [("Polly", "7.1.0")]

    def test_directory_build_props_update(self, repo: Path) -> None:
        """Test Update-style references in Directory.Build files."""
        refs = _read(
            repo, "Directory.Build.props", PackageReferenceType.DIRECTORY_BUILD_TARGETS
        )

        assert [(r.name, r.version) for r in refs] == [("StyleCop.Analyzers", "1.1.118")]

    def test_reference_without_version(self, tmp_path: Path) -> None:
        """Test that a missing version is kept as None."""
        (tmp_path / "A.csproj").write_text(
            '<Project Sdk="Microsoft.NET.Sdk">'
            '<ItemGroup><PackageReference Include="Implicit" /></ItemGroup>'
            "</Project>"
        )

        refs = _read(tmp_path, "A.csproj", PackageReferenceType.PROJECT_FILE)

        assert refs[0].name == "Implicit"
        assert refs[0].version is None

    def test_references_carry_their_path(self, repo: Path) -> None:
        """Test that every reference points at its file."""
        path = PackagePath(str(repo), "My.Library.nuspec", PackageReferenceType.NUSPEC)

        refs = read_package_references(path)

        assert all(r.path == path for r in refs)

    def test_malformed_xml_raises_scan_error(self, tmp_path: Path) -> None:
        """Test that broken XML names the file."""
        (tmp_path / "Broken.csproj").write_text("<Project><ItemGroup>")

        with pytest.raises(ScanError, match="Broken.csproj"):
            _read(tmp_path, "Broken.csproj", PackageReferenceType.PROJECT_FILE)

    def test_missing_file_raises_scan_error(self, tmp_path: Path) -> None:
        """Test that an unreadable file raises ScanError."""
        with pytest.raises(ScanError, match="Cannot read"):
            _read(tmp_path, "Gone.csproj", PackageReferenceType.PROJECT_FILE)
