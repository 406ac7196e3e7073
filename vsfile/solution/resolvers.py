"""Per-project-type path resolvers for solution Project blocks.

Most project types store their real relative path in the Project header
line. Some do not: web sites (format 12+) store a display name or URL there
and keep the real path under ``SlnRelativePath`` in a ProjectSection. A
resolver is handed the line reader positioned just after the header line,
consumes the rest of the block through ``EndProject`` and returns the
corrected path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Protocol

from vsfile.config import FormatVersion, ProjectTypeGuid
from vsfile.errors import MalformedProjectReferenceError
from vsfile.system.line_reader import LineReader

END_PROJECT = "EndProject"
END_PROJECT_SECTION = "EndProjectSection"


class PathResolver(Protocol):
    def get_path(self, reader: LineReader) -> str:
        """Consume the remainder of a Project block and return its relative path."""
        ...


def skip_to_end_project(reader: LineReader) -> None:
    """Consume lines up to and including the block's EndProject."""
    while reader.has_more():
        if reader.read_line() == END_PROJECT:
            return
    raise MalformedProjectReferenceError("Project reference is missing EndProject")


class WebSitePathResolver:
    """Recover a web site's relative path from its SlnRelativePath property."""

    RELATIVE_PATH_KEY = "SlnRelativePath"

    _KEY_VALUE_RE = re.compile(r'^(?P<key>.+?) = "(?P<value>.+)"$')

    def get_path(self, reader: LineReader) -> str:
        path = self._find_relative_path(reader)
        skip_to_end_project(reader)
        return path

    def _find_relative_path(self, reader: LineReader) -> str:
        while reader.has_more():
            line = reader.read_line().strip()
            if line in (END_PROJECT_SECTION, END_PROJECT):
                break

            match = self._KEY_VALUE_RE.match(line)
            if match and match.group("key") == self.RELATIVE_PATH_KEY:
                return match.group("value")

        raise MalformedProjectReferenceError(
            f"Web site reference is missing {self.RELATIVE_PATH_KEY}"
        )


@dataclass(frozen=True)
class ResolverEntry:
    type_id: str
    minimum_format_version: int
    factory: Callable[[], PathResolver]

    def is_match(self, type_id: str, format_version: int) -> bool:
        return (
            type_id.upper() == self.type_id
            and format_version >= self.minimum_format_version
        )


_REGISTRY: list[ResolverEntry] = []


def register_resolver(
    type_id: str,
    factory: Callable[[], PathResolver],
    minimum_format_version: int = FormatVersion.MINIMUM,
) -> None:
    """Register a path resolver for a project type.

    Minimum versions below the oldest known format are raised to it.
    """
    _REGISTRY.append(ResolverEntry(
        type_id=type_id.upper(),
        minimum_format_version=max(minimum_format_version, FormatVersion.MINIMUM),
        factory=factory,
    ))


def get_resolver(type_id: str, format_version: int) -> PathResolver | None:
    """Return a resolver for the project type, or None to keep the header path."""
    for entry in _REGISTRY:
        if entry.is_match(type_id, format_version):
            return entry.factory()
    return None


register_resolver(ProjectTypeGuid.WEB_SITE, WebSitePathResolver, FormatVersion.VS2012)
