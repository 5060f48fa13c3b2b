"""Shared fixtures for pkgkeeper tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

SDK_PROJECT = """<Project Sdk="Microsoft.NET.Sdk">
  <ItemGroup>
    <PackageReference Include="Newtonsoft.Json" Version="12.0.1" />
    <PackageReference Include="Serilog">
      <Version>2.8.0</Version>
    </PackageReference>
  </ItemGroup>
</Project>
"""

OLD_STYLE_PROJECT = """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="15.0" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <ItemGroup>
    <PackageReference Include="NUnit" Version="3.11.0" />
  </ItemGroup>
</Project>
"""

PACKAGES_CONFIG = """<?xml version="1.0" encoding="utf-8"?>
<packages>
  <package id="Moq" version="4.10.1" targetFramework="net461" />
  <package id="System.Net.Http" version="4.3.4" targetFramework="net461" />
</packages>
"""

NUSPEC = """<?xml version="1.0"?>
<package xmlns="http://schemas.microsoft.com/packaging/2013/05/nuspec.xsd">
  <metadata>
    <id>My.Library</id>
    <dependencies>
      <dependency id="Polly" version="7.1.0" />
    </dependencies>
  </metadata>
</package>
"""

DIRECTORY_BUILD_PROPS = """<Project>
  <ItemGroup>
    <PackageReference Update="StyleCop.Analyzers" Version="1.1.118" />
  </ItemGroup>
</Project>
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A checkout with one file of every package-reference dialect."""
    (tmp_path / "src" / "App").mkdir(parents=True)
    (tmp_path / "src" / "Legacy").mkdir(parents=True)
    (tmp_path / "src" / "App" / "App.csproj").write_text(SDK_PROJECT)
    (tmp_path / "src" / "Legacy" / "Legacy.csproj").write_text(OLD_STYLE_PROJECT)
    (tmp_path / "src" / "Legacy" / "packages.config").write_text(PACKAGES_CONFIG)
    (tmp_path / "My.Library.nuspec").write_text(NUSPEC)
    (tmp_path / "Directory.Build.props").write_text(DIRECTORY_BUILD_PROPS)
    (tmp_path / "Repo.sln").write_text("")
    return tmp_path
