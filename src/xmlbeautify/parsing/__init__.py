"""Parsing du XML source et détection de la déclaration."""

from xmlbeautify.parsing.declaration import (
    DEFAULT_ENCODING,
    build_declaration,
    extract_encoding,
    has_declaration,
)
from xmlbeautify.parsing.parser import XmlParser, convert_element

__all__ = [
    "DEFAULT_ENCODING",
    "XmlParser",
    "build_declaration",
    "convert_element",
    "extract_encoding",
    "has_declaration",
]
