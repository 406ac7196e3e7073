"""Error taxonomy for solution, project and directory loading."""

from __future__ import annotations


class VSFileError(Exception):
    """Base class for every error raised by vsfile."""


class InvalidArgumentError(VSFileError, ValueError):
    """A required string argument was None, empty or whitespace."""


class NotFoundError(VSFileError, FileNotFoundError):
    """The target file or directory does not exist."""


class WrongExtensionError(VSFileError, OSError):
    """The file extension does not match the one expected for its type."""


class EndOfInputError(VSFileError, EOFError):
    """A line was requested from an exhausted line reader."""


class FileFormatError(VSFileError):
    """Base class for malformed file contents."""


class MalformedSolutionFileError(FileFormatError):
    """No solution header was found in the first two lines."""


class MalformedHeaderError(FileFormatError):
    """The solution header carries an unparseable format version."""


class MalformedProjectReferenceError(FileFormatError):
    """A Project block is malformed, unterminated or missing required metadata."""


class MalformedProjectFileError(FileFormatError):
    """A project file is not well-formed XML."""


def require_text(value: str | None, what: str) -> str:
    """Return *value* unchanged, or raise if it is None/empty/whitespace."""
    if value is None or not value.strip():
        raise InvalidArgumentError(f"Invalid {what}: {value!r}")
    return value
