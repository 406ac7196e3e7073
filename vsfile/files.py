"""Group solution, project and source files named by paths or wildcards."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from vsfile.config import (
    PROJECT_EXTENSIONS,
    SOLUTION_EXTENSION,
    SOURCE_EXTENSIONS,
    Language,
)
from vsfile.dotnet.located import normalise_separators
from vsfile.dotnet.project import ProjectFile
from vsfile.dotnet.solution import SolutionFile
from vsfile.dotnet.source import SourceFile
from vsfile.errors import NotFoundError, require_text
from vsfile.system.filesystem import FileSystem, LocalFileSystem
from vsfile.system.wildcard import has_wildcard

logger = logging.getLogger(__name__)

_PROJECT_BY_EXTENSION = {ext: lang for lang, ext in PROJECT_EXTENSIONS.items()}
_SOURCE_BY_EXTENSION = {ext: lang for lang, ext in SOURCE_EXTENSIONS.items()}

SUPPORTED_EXTENSIONS = (
    set(_PROJECT_BY_EXTENSION) | set(_SOURCE_BY_EXTENSION) | {SOLUTION_EXTENSION}
)


class VisualStudioFiles:
    """Sorts file paths into solution, project and source files by extension.

    A file name part containing '*' or '?' is expanded in its directory
    (recursively when ``recursive`` is set). Paths whose directory part holds
    a wildcard, and files with unsupported extensions, are ignored.
    """

    def __init__(
        self,
        file_paths: Iterable[str],
        recursive: bool = False,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.recursive = recursive
        self.filesystem = filesystem or LocalFileSystem()

        self._solutions: list[SolutionFile] = []
        self._projects: dict[Language, list[ProjectFile]] = {lang: [] for lang in Language}
        self._sources: dict[Language, list[SourceFile]] = {lang: [] for lang in Language}

        for file_path in file_paths:
            self._add(file_path)

    def _add(self, file_path: str) -> None:
        file_path = normalise_separators(require_text(file_path, "file path"))

        directory_path = os.path.dirname(file_path)
        if not directory_path.strip():
            directory_path = self.filesystem.current_directory()

        if has_wildcard(directory_path):
            logger.debug(f"Ignoring wildcard directory: {file_path}")
            return

        file_name = os.path.basename(file_path)
        if has_wildcard(file_name):
            for match in self.filesystem.list_files(directory_path, file_name, self.recursive):
                self._add(match)
            return

        extension = os.path.splitext(file_path)[1].lower()
        if extension not in SUPPORTED_EXTENSIONS:
            return

        if not self.filesystem.file_exists(file_path):
            raise NotFoundError(f"File not found at path: {file_path}")

        if extension == SOLUTION_EXTENSION:
            self._solutions.append(SolutionFile(file_path, self.filesystem))
        elif extension in _PROJECT_BY_EXTENSION:
            language = _PROJECT_BY_EXTENSION[extension]
            self._projects[language].append(
                ProjectFile(language, file_path, filesystem=self.filesystem)
            )
        else:
            language = _SOURCE_BY_EXTENSION[extension]
            self._sources[language].append(SourceFile(language, file_path, self.filesystem))

    @property
    def solution_files(self) -> tuple[SolutionFile, ...]:
        return tuple(self._solutions)

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
    def basic_source_files(self) -> tuple[SourceFile, ...]:
        return tuple(self._sources[Language.BASIC])

    @property
    def csharp_source_files(self) -> tuple[SourceFile, ...]:
        return tuple(self._sources[Language.CSHARP])

    @property
    def fsharp_source_files(self) -> tuple[SourceFile, ...]:
        return tuple(self._sources[Language.FSHARP])

    @property
    def source_files(self) -> tuple[SourceFile, ...]:
        return self.basic_source_files + self.csharp_source_files + self.fsharp_source_files
