"""Source files referenced by projects and web sites."""

from __future__ import annotations

from vsfile.config import SOURCE_EXTENSIONS, Language
from vsfile.dotnet.located import locate
from vsfile.system.filesystem import FileSystem, LocalFileSystem


class SourceFile:
    """A .vb, .cs or .fs file. Loading only validates path and extension."""

    def __init__(
        self, language: Language, file_path: str, filesystem: FileSystem | None = None
    ) -> None:
        self.language = language
        self.filesystem = filesystem or LocalFileSystem()
        self.location = locate(file_path, SOURCE_EXTENSIONS[language], self.filesystem)

    def load(self) -> None:
        self.location.check(self.filesystem)

    @property
    def file_path(self) -> str:
        return self.location.file_path

    @property
    def file_name(self) -> str:
        return self.location.file_name

    @property
    def file_extension(self) -> str:
        return self.location.file_extension

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SourceFile):
            return NotImplemented
        return (self.language, self.file_path) == (other.language, other.file_path)

    def __hash__(self) -> int:
        return hash((self.language, self.file_path))

    def __repr__(self) -> str:
        return f"SourceFile({self.language.value!r}, {self.file_path!r})"
