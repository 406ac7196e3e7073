"""Web site directories: source files are found by scanning the directory."""

from __future__ import annotations

import logging

from vsfile.config import SOURCE_EXTENSIONS, WEB_SITE_LANGUAGES, Language
from vsfile.dotnet.located import normalise_separators
from vsfile.dotnet.source import SourceFile
from vsfile.errors import NotFoundError, require_text
from vsfile.system.filesystem import FileSystem, LocalFileSystem
from vsfile.system.wildcard import add_asterisk

logger = logging.getLogger(__name__)


class WebSiteDirectory:
    def __init__(
        self, name: str, directory_path: str, filesystem: FileSystem | None = None
    ) -> None:
        self.name = require_text(name, "web site name")
        self.directory_path = normalise_separators(require_text(directory_path, "directory path"))
        self.filesystem = filesystem or LocalFileSystem()
        self._source_files: dict[Language, list[SourceFile]] = {
            language: [] for language in WEB_SITE_LANGUAGES
        }

    @property
    def basic_source_files(self) -> tuple[SourceFile, ...]:
        return tuple(self._source_files[Language.BASIC])

    @property
    def csharp_source_files(self) -> tuple[SourceFile, ...]:
        return tuple(self._source_files[Language.CSHARP])

    @property
    def source_files(self) -> tuple[SourceFile, ...]:
        return self.basic_source_files + self.csharp_source_files

    def load(self) -> None:
        """Scan the top level of the directory for Visual Basic and C# files."""
        if not self.filesystem.directory_exists(self.directory_path):
            raise NotFoundError(f"Directory not found at path: {self.directory_path}")

        for language, files in self._source_files.items():
            files.clear()
            pattern = add_asterisk(SOURCE_EXTENSIONS[language])
            for path in self.filesystem.list_files(self.directory_path, pattern):
                files.append(SourceFile(language, path, self.filesystem))

        logger.debug(f"Web site {self.name}: {len(self.source_files)} source files")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WebSiteDirectory):
            return NotImplemented
        return (self.name, self.directory_path) == (other.name, other.directory_path)

    def __hash__(self) -> int:
        return hash((self.name, self.directory_path))

    def __repr__(self) -> str:
        return f"WebSiteDirectory({self.name!r}, {self.directory_path!r})"
