"""VSFile - Resolve file references in Visual Studio solutions and projects."""

from vsfile.dotnet.project import ProjectFile
from vsfile.dotnet.solution import SolutionFile
from vsfile.dotnet.source import SourceFile
from vsfile.dotnet.website import WebSiteDirectory
from vsfile.files import VisualStudioFiles

__version__ = "0.1.0"
__all__ = [
    "ProjectFile",
    "SolutionFile",
    "SourceFile",
    "VisualStudioFiles",
    "WebSiteDirectory",
]
