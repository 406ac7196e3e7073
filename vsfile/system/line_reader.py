"""Forward-only line readers over in-memory text and files on disk."""

from __future__ import annotations

import re
from typing import Callable, Protocol, runtime_checkable

from vsfile.errors import EndOfInputError

_NEWLINE_RE = re.compile(r"\r\n|\n")
_BOM = "\ufeff"


@runtime_checkable
class LineReader(Protocol):
    """Sequential line source.

    Callers check ``has_more()`` before ``read_line()``; reading past the
    end raises ``EndOfInputError``. Lines are returned without terminators.
    """

    def has_more(self) -> bool:
        ...

    def read_line(self) -> str:
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> LineReader:
        ...

    def __exit__(self, *exc_info) -> None:
        ...


class StringLineReader:
    """Line reader over an in-memory string split on ``\\r\\n`` and ``\\n``."""

    def __init__(self, text: str) -> None:
        if text.startswith(_BOM):
            text = text[1:]
        self._lines = _NEWLINE_RE.split(text)
        self._index = 0

    def has_more(self) -> bool:
        return self._index < len(self._lines)

    def read_line(self) -> str:
        if not self.has_more():
            raise EndOfInputError("No more lines to read")
        line = self._lines[self._index]
        self._index += 1
        return line

    def close(self) -> None:
        self._index = len(self._lines)

    def __enter__(self) -> StringLineReader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class TextFileLineReader:
    """Line reader over a text file using universal-newline text mode.

    Bytes that are not valid UTF-8 (e.g. cp1252 solutions from older
    Visual Studio releases) decode to U+FFFD instead of failing.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._file = open(path, "r", encoding="utf-8-sig", errors="replace")
        self._pending: str | None = None
        try:
            self._advance()
        except Exception:
            self._file.close()
            raise

    def _advance(self) -> None:
        line = self._file.readline() if not self._file.closed else ""
        self._pending = line.rstrip("\n") if line else None

    def has_more(self) -> bool:
        return self._pending is not None

    def read_line(self) -> str:
        if self._pending is None:
            raise EndOfInputError(f"No more lines to read from {self.path}")
        line = self._pending
        self._advance()
        return line

    def close(self) -> None:
        self._pending = None
        self._file.close()

    def __enter__(self) -> TextFileLineReader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


LineReaderFactory = Callable[[str], LineReader]


def open_line_reader(path: str) -> LineReader:
    """Default factory: open a line reader over the file at *path*."""
    return TextFileLineReader(path)
