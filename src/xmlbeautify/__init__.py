"""Mise en forme lisible (indentation) de documents XML.

FR: Point d'entrée principal : beautify() parse un texte XML et le
    réécrit avec une balise par ligne, indentée selon la profondeur.
EN: Main entry point: beautify() parses XML text and rewrites it with one
    tag per line, indented by depth.
"""

from xmlbeautify.errors import ConfigurationError, ParseError, XmlBeautifyError
from xmlbeautify.models import Attribute, BeautifyOptions, Document, Element, TextNode
from xmlbeautify.parsing import XmlParser, extract_encoding, has_declaration
from xmlbeautify.rendering import BuildState, XmlBeautifier, beautify

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "BeautifyOptions",
    "BuildState",
    "ConfigurationError",
    "Document",
    "Element",
    "ParseError",
    "TextNode",
    "XmlBeautifier",
    "XmlBeautifyError",
    "XmlParser",
    "beautify",
    "extract_encoding",
    "has_declaration",
]
