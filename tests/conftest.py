"""Shared test helpers."""

from __future__ import annotations

import fnmatch
import os

import pytest

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
SAMPLE_DIR = os.path.join(FIXTURES_DIR, "sample_solution")


class FakeFileSystem:
    """In-memory FileSystem: a set of file paths and directory paths."""

    def __init__(self, files=(), directories=(), cwd=""):
        self.files = set(files)
        self.directories = set(directories)
        self.cwd = cwd
        self.listed: list[tuple[str, str, bool]] = []

    def file_exists(self, path: str) -> bool:
        return path in self.files

    def directory_exists(self, path: str) -> bool:
        return path in self.directories

    def current_directory(self) -> str:
        return self.cwd

    def list_files(self, directory: str, pattern: str, recursive: bool = False) -> list[str]:
        self.listed.append((directory, pattern, recursive))
        matches = []
        for path in sorted(self.files):
            parent = os.path.dirname(path) or self.cwd
            in_scope = parent == directory or (
                recursive and parent.startswith(directory.rstrip(os.sep) + os.sep)
            )
            if in_scope and fnmatch.fnmatch(os.path.basename(path), pattern):
                matches.append(path)
        return matches


@pytest.fixture
def sample_sln() -> str:
    return os.path.join(SAMPLE_DIR, "Sample.sln")
