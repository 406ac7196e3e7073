"""Path bookkeeping shared by solution, project and source files."""

from __future__ import annotations

import os
from dataclasses import dataclass

from vsfile.errors import NotFoundError, WrongExtensionError, require_text
from vsfile.system.filesystem import FileSystem

WINDOWS_SEPARATOR = "\\"


def normalise_separators(path: str) -> str:
    """Convert Windows separators stored in VS files to the platform separator."""
    return path.replace(WINDOWS_SEPARATOR, os.sep)


@dataclass(frozen=True)
class LocatedFile:
    file_path: str
    directory_path: str
    file_extension: str

    @property
    def file_name(self) -> str:
        return os.path.basename(self.file_path)

    @property
    def file_name_no_extension(self) -> str:
        return os.path.splitext(self.file_name)[0]

    def full_path(self, relative_path: str) -> str:
        """Join a path relative to this file's directory."""
        return os.path.join(self.directory_path, normalise_separators(relative_path))

    def check(self, filesystem: FileSystem) -> None:
        """Raise unless the file exists and has the expected extension."""
        if not filesystem.file_exists(self.file_path):
            raise NotFoundError(f"File not found at path: {self.file_path}")

        extension = os.path.splitext(self.file_path)[1]
        if extension.lower() != self.file_extension.lower():
            raise WrongExtensionError(
                f"Expected a {self.file_extension} file: {self.file_path}"
            )


def locate(file_path: str | None, file_extension: str | None, filesystem: FileSystem) -> LocatedFile:
    """Build a LocatedFile, defaulting the directory to the current one."""
    require_text(file_extension, "file extension")
    file_path = normalise_separators(require_text(file_path, "file path"))

    directory_path = os.path.dirname(file_path)
    if not directory_path.strip():
        directory_path = filesystem.current_directory()

    return LocatedFile(
        file_path=file_path,
        directory_path=directory_path,
        file_extension=file_extension,
    )
