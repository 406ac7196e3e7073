"""Read Project ... EndProject blocks from a solution file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from vsfile.errors import MalformedProjectReferenceError
from vsfile.solution.resolvers import END_PROJECT, get_resolver
from vsfile.system.line_reader import LineReader

logger = logging.getLogger(__name__)

BEGIN_PROJECT = "Project"

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.csproj", "{UNIQUE-GUID}"
_GUID = r'"\{{(?P<{group}>[A-Fa-f\d-]+)\}}"'
_PROJECT_RE = re.compile(
    r"^Project\("
    + _GUID.format(group="type_id")
    + r'\) = "(?P<name>[^"]+)", "(?P<path>[^"]+)", '
    + _GUID.format(group="unique_id")
    + r"$"
)


@dataclass(frozen=True)
class SolutionReference:
    """One Project block from a .sln file."""
    name: str
    relative_path: str
    type_id: str
    unique_id: str


def parse_project_line(line: str) -> SolutionReference:
    """Parse a Project header line into a reference holding the literal path."""
    match = _PROJECT_RE.match(line)
    if not match:
        raise MalformedProjectReferenceError(f"Invalid project reference: {line!r}")

    return SolutionReference(
        name=match.group("name"),
        relative_path=match.group("path"),
        type_id=match.group("type_id"),
        unique_id=match.group("unique_id"),
    )


def read_project_reference(reader: LineReader, format_version: int) -> SolutionReference | None:
    """Read the next project reference.

    Returns None when the input ends without another Project block.

    Raises:
        MalformedProjectReferenceError: the block header does not match the
            Project grammar, EndProject appears without a Project, or a
            Project is never closed.
    """
    reference: SolutionReference | None = None

    while reader.has_more():
        line = reader.read_line()

        if line.startswith(BEGIN_PROJECT):
            if reference is not None:
                raise MalformedProjectReferenceError(
                    f"Project reference {reference.name!r} is missing {END_PROJECT}"
                )
            reference = parse_project_line(line)

            resolver = get_resolver(reference.type_id, format_version)
            if resolver is not None:
                path = resolver.get_path(reader)
                logger.debug(
                    f"Resolved path of {reference.name}: {reference.relative_path} -> {path}"
                )
                return SolutionReference(
                    name=reference.name,
                    relative_path=path,
                    type_id=reference.type_id,
                    unique_id=reference.unique_id,
                )

        elif line == END_PROJECT:
            if reference is None:
                raise MalformedProjectReferenceError(
                    f"{END_PROJECT} found without a matching {BEGIN_PROJECT}"
                )
            return reference

    if reference is not None:
        raise MalformedProjectReferenceError(
            f"Project reference {reference.name!r} is missing {END_PROJECT}"
        )
    return None


def read_project_references(reader: LineReader, format_version: int) -> list[SolutionReference]:
    """Read every remaining project reference."""
    references = []
    while True:
        reference = read_project_reference(reader, format_version)
        if reference is None:
            return references
        references.append(reference)
