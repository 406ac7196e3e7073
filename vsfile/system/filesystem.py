"""Filesystem access used to locate solution, project and source files."""

from __future__ import annotations

import fnmatch
import os
from typing import Protocol


class FileSystem(Protocol):
    def file_exists(self, path: str) -> bool:
        ...

    def directory_exists(self, path: str) -> bool:
        ...

    def current_directory(self) -> str:
        ...

    def list_files(self, directory: str, pattern: str, recursive: bool = False) -> list[str]:
        """Return paths of files in *directory* whose names match *pattern*."""
        ...


class LocalFileSystem:
    """FileSystem backed by the operating system."""

    def file_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def directory_exists(self, path: str) -> bool:
        return os.path.isdir(path)

    def current_directory(self) -> str:
        return os.getcwd()

    def list_files(self, directory: str, pattern: str, recursive: bool = False) -> list[str]:
        matches = []
        for dirpath, dirnames, filenames in os.walk(directory):
            dirnames.sort()
            for filename in sorted(filenames):
                if fnmatch.fnmatch(filename, pattern):
                    matches.append(os.path.join(dirpath, filename))
            if not recursive:
                break
        return matches
