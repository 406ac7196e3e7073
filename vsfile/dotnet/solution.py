"""Parse .sln files (custom text format, not XML)."""

from __future__ import annotations

import logging

from vsfile.config import PROJECT_LANGUAGES, SOLUTION_EXTENSION, Language, ProjectTypeGuid
from vsfile.dotnet.located import locate
from vsfile.dotnet.project import ProjectFile
from vsfile.dotnet.website import WebSiteDirectory
from vsfile.solution.header import read_format_version
from vsfile.solution.reference import SolutionReference, read_project_references
from vsfile.system.filesystem import FileSystem, LocalFileSystem
from vsfile.system.line_reader import LineReaderFactory, open_line_reader

logger = logging.getLogger(__name__)


class SolutionFile:
    """A solution file and the projects and web sites it references.

    ``load()`` replaces all previous results. Results are published only
    when the whole file parses; after a failed load every collection is
    empty and ``format_version`` is 0.
    """

    def __init__(
        self,
        file_path: str,
        filesystem: FileSystem | None = None,
        reader_factory: LineReaderFactory | None = None,
    ) -> None:
        self.filesystem = filesystem or LocalFileSystem()
        self.reader_factory = reader_factory or open_line_reader
        self.location = locate(file_path, SOLUTION_EXTENSION, self.filesystem)
        self._reset()

    def _reset(self) -> None:
        self.format_version = 0
        self._references: list[SolutionReference] = []
        self._projects: dict[Language, list[ProjectFile]] = {
            language: [] for language in Language
        }
        self._web_sites: list[WebSiteDirectory] = []

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
    def file_name_no_extension(self) -> str:
        return self.location.file_name_no_extension

    @property
    def file_extension(self) -> str:
        return self.location.file_extension

    @property
    def references(self) -> tuple[SolutionReference, ...]:
        """Every parsed project reference, including unsupported project types."""
        return tuple(self._references)

    @property
    def basic_project_files(self) -> tuple[ProjectFile, ...]:
        return tuple(self._projects[Language.BASIC])

    @property
    def csharp_project_files(self) -> tuple[ProjectFile, ...]:
        return tuple(self._projects[Language.CSHARP])

    @property
    def fsharp_project_files(self) -> tuple[ProjectFile, ...]:
        return tuple(self._projects[Language.FSHARP])

    @property
    def project_files(self) -> tuple[ProjectFile, ...]:
        return self.basic_project_files + self.csharp_project_files + self.fsharp_project_files

    @property
    def web_site_directories(self) -> tuple[WebSiteDirectory, ...]:
        return tuple(self._web_sites)

    def load(self) -> None:
        """Parse the solution file.

        Raises:
            NotFoundError: the file does not exist.
            WrongExtensionError: the file is not a .sln file.
            MalformedSolutionFileError: no header in the first two lines.
            MalformedHeaderError: the header version cannot be parsed.
            MalformedProjectReferenceError: a Project block is malformed.
        """
        self._reset()
        self.location.check(self.filesystem)

        with self.reader_factory(self.file_path) as reader:
            format_version = read_format_version(reader)
            references = read_project_references(reader, format_version)

        projects: dict[Language, list[ProjectFile]] = {language: [] for language in Language}
        web_sites: list[WebSiteDirectory] = []
        for reference in references:
            self._dispatch(reference, projects, web_sites)

        self.format_version = format_version
        self._references = references
        self._projects = projects
        self._web_sites = web_sites

        logger.debug(
            f"Solution {self.file_name}: format {format_version}, "
            f"{len(references)} references"
        )

    def _dispatch(
        self,
        reference: SolutionReference,
        projects: dict[Language, list[ProjectFile]],
        web_sites: list[WebSiteDirectory],
    ) -> None:
        """Route a reference to its typed collection; unsupported types are dropped."""
        type_id = reference.type_id.upper()
        path = self.location.full_path(reference.relative_path)

        language = PROJECT_LANGUAGES.get(type_id)
        if language is not None:
            projects[language].append(
                ProjectFile(language, path, reference.name, filesystem=self.filesystem)
            )
        elif type_id == ProjectTypeGuid.WEB_SITE:
            web_sites.append(WebSiteDirectory(reference.name, path, self.filesystem))
        else:
            logger.debug(f"Skipping unsupported project type {type_id}: {reference.name}")

    def __repr__(self) -> str:
        return f"SolutionFile({self.file_path!r})"
