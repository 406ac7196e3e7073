"""Core constants, data types and configuration for vsfile."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Language(str, Enum):
    BASIC = "vb"
    CSHARP = "cs"
    FSHARP = "fs"


class ProjectTypeGuid:
    """Project type identifiers found in solution files."""
    BASIC = "F184B08F-C81C-45F6-A57F-5ABD9991F28F"
    CSHARP = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"
    FSHARP = "F2A71F9B-5D33-465A-A702-920D77279786"
    WEB_SITE = "E24C65DC-7377-472B-9ABA-BC803B73C61A"


class FormatVersion:
    """Solution file format versions by Visual Studio release."""
    VS2002 = 7
    VS2003 = 8
    VS2005 = 9
    VS2008 = 10
    VS2010 = 11
    VS2012 = 12

    MINIMUM = VS2002


SOLUTION_EXTENSION = ".sln"

PROJECT_EXTENSIONS: dict[Language, str] = {
    Language.BASIC: ".vbproj",
    Language.CSHARP: ".csproj",
    Language.FSHARP: ".fsproj",
}

SOURCE_EXTENSIONS: dict[Language, str] = {
    Language.BASIC: ".vb",
    Language.CSHARP: ".cs",
    Language.FSHARP: ".fs",
}

# Project type GUID -> language of the referenced project file
PROJECT_LANGUAGES: dict[str, Language] = {
    ProjectTypeGuid.BASIC: Language.BASIC,
    ProjectTypeGuid.CSHARP: Language.CSHARP,
    ProjectTypeGuid.FSHARP: Language.FSHARP,
}

# Source languages a web site directory is scanned for
WEB_SITE_LANGUAGES: tuple[Language, ...] = (Language.BASIC, Language.CSHARP)


@dataclass
class ScanConfig:
    paths: list[str] = field(default_factory=list)
    recursive: bool = False
    skip_invalid: bool = False
    output_path: str | None = None
    verbose: bool = False
    quiet: bool = False


@dataclass
class ScanError:
    """A file that failed to load during a scan and was skipped."""
    path: str
    error: str
    message: str


@dataclass
class ScanResult:
    version: str = "1.0"
    metadata: dict[str, Any] = field(default_factory=dict)
    stats: dict[str, Any] = field(default_factory=dict)
    solutions: list[dict] = field(default_factory=list)
    projects: list[dict] = field(default_factory=list)
    web_sites: list[dict] = field(default_factory=list)
    sources: list[dict] = field(default_factory=list)
    errors: list[dict] = field(default_factory=list)
