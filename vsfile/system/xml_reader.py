"""XML document loading for project files."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Protocol

from vsfile.errors import MalformedProjectFileError


class XmlFileReader(Protocol):
    def load(self, path: str) -> ET.Element:
        """Parse the XML file at *path* and return its root element."""
        ...


class ElementTreeReader:
    """XmlFileReader that parses files from disk with ElementTree."""

    def load(self, path: str) -> ET.Element:
        try:
            return ET.parse(path).getroot()
        except ET.ParseError as e:
            raise MalformedProjectFileError(f"Invalid project file {path}: {e}") from e


class StringXmlReader:
    """XmlFileReader returning the same in-memory document for any path."""

    def __init__(self, contents: str) -> None:
        self.contents = contents

    def load(self, path: str) -> ET.Element:
        try:
            return ET.fromstring(self.contents)
        except ET.ParseError as e:
            raise MalformedProjectFileError(f"Invalid project file {path}: {e}") from e
