"""Solution file header: 'Microsoft Visual Studio Solution File, Format Version 12.00'."""

from __future__ import annotations

import re

from vsfile.errors import MalformedHeaderError, MalformedSolutionFileError
from vsfile.system.line_reader import LineReader

HEADER_PREFIX = "Microsoft Visual Studio Solution File, Format Version"

_BOM = "\ufeff"

# The header may sit on line 2 when line 1 is blank
MAX_HEADER_LINES = 2

# major.minor[.build[.revision]]
_VERSION_RE = re.compile(r"^\d+(\.\d+){1,3}$")


def has_header(line: str) -> bool:
    """Check whether a line carries the solution header prefix."""
    line = line.lstrip(_BOM).strip()
    return bool(line) and line.startswith(HEADER_PREFIX)


def parse_format_version(line: str) -> int:
    """Return the major format version from a header line."""
    line = line.lstrip(_BOM).strip()
    version = line[len(HEADER_PREFIX):].strip()
    if not _VERSION_RE.match(version):
        raise MalformedHeaderError(f"Invalid solution file header version: {version!r}")
    return int(version.split(".")[0])


def read_format_version(reader: LineReader) -> int:
    """Read the header from the first lines of a solution file.

    Raises:
        MalformedSolutionFileError: no header within the first two lines.
        MalformedHeaderError: header found but its version is unparseable.
    """
    for _ in range(MAX_HEADER_LINES):
        if not reader.has_more():
            break
        line = reader.read_line()
        if has_header(line):
            return parse_format_version(line)

    raise MalformedSolutionFileError("Solution file header not found")
