"""Rendu indenté du modèle d'arbre XML."""

from xmlbeautify.rendering.beautifier import BuildState, XmlBeautifier, beautify, render_element

__all__ = [
    "BuildState",
    "XmlBeautifier",
    "beautify",
    "render_element",
]
