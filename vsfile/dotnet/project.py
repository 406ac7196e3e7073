"""Parse .vbproj/.csproj/.fsproj files (XML with MSBuild schema)."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from vsfile.config import PROJECT_EXTENSIONS, SOURCE_EXTENSIONS, Language
from vsfile.dotnet.located import locate
from vsfile.dotnet.source import SourceFile
from vsfile.system.filesystem import FileSystem, LocalFileSystem
from vsfile.system.xml_reader import ElementTreeReader, XmlFileReader

logger = logging.getLogger(__name__)


def _namespace(root: ET.Element) -> str:
    """Return the '{uri}' tag prefix of the root element, or ''."""
    if root.tag.startswith("{"):
        return root.tag.split("}")[0] + "}"
    return ""


def _is_auto_generated(item: ET.Element, ns: str) -> bool:
    auto_gen = item.find(f"{ns}AutoGen")
    if auto_gen is None or auto_gen.text is None:
        return False
    return auto_gen.text.strip().lower() == "true"


def compile_includes(root: ET.Element, source_extension: str) -> list[str]:
    """Return Include paths of hand-written Compile items with the given extension.

    Handles both the MSBuild 2003 namespace and SDK-style (no namespace) projects.
    """
    ns = _namespace(root)
    includes = []
    for group in root.findall(f"{ns}ItemGroup"):
        for item in group.findall(f"{ns}Compile"):
            if _is_auto_generated(item, ns):
                continue
            include = item.get("Include", "")
            if include.lower().endswith(source_extension.lower()):
                includes.append(include)
    return includes


class ProjectFile:
    """A Visual Basic, C# or F# project file and the source files it compiles."""

    def __init__(
        self,
        language: Language,
        file_path: str,
        project_name: str | None = None,
        xml_reader: XmlFileReader | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.language = language
        self.filesystem = filesystem or LocalFileSystem()
        self.xml_reader = xml_reader or ElementTreeReader()
        self.location = locate(file_path, PROJECT_EXTENSIONS[language], self.filesystem)

        if project_name is None or not project_name.strip():
            project_name = self.location.file_name_no_extension
        self.project_name = project_name
        self._source_files: list[SourceFile] = []

    @property
    def file_path(self) -> str:
        return self.location.file_path

    @property
    def directory_path(self) -> str:
        return self.location.directory_path

    @property
    def file_name(self) -> str:
        return self.location.file_name

    @property
    def file_extension(self) -> str:
        return self.location.file_extension

    @property
    def source_file_extension(self) -> str:
        return SOURCE_EXTENSIONS[self.language]

    @property
    def source_files(self) -> tuple[SourceFile, ...]:
        return tuple(self._source_files)

    def load(self) -> None:
        """Read the Compile items of the project file.

        Raises:
            NotFoundError: the project file does not exist.
            WrongExtensionError: the file is not a project of this language.
            MalformedProjectFileError: the file is not well-formed XML.
        """
        self.location.check(self.filesystem)
        self._source_files.clear()

        root = self.xml_reader.load(self.file_path)
        for include in compile_includes(root, self.source_file_extension):
            self._source_files.append(SourceFile(
                self.language,
                self.location.full_path(include),
                self.filesystem,
            ))

        logger.debug(f"Project {self.project_name}: {len(self._source_files)} source files")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectFile):
            return NotImplemented
        return (self.language, self.project_name, self.file_path) == (
            other.language, other.project_name, other.file_path
        )

    def __hash__(self) -> int:
        return hash((self.language, self.project_name, self.file_path))

    def __repr__(self) -> str:
        return f"ProjectFile({self.language.value!r}, {self.project_name!r}, {self.file_path!r})"
