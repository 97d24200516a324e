"""Modèles de données Pydantic pour la mise en forme XML."""

from xmlbeautify.models.nodes import Attribute, Document, Element, TextNode
from xmlbeautify.models.options import BeautifyOptions, resolve_options

__all__ = [
    "Attribute",
    "BeautifyOptions",
    "Document",
    "Element",
    "TextNode",
    "resolve_options",
]
