"""Modèle d'arbre XML consommé par le Beautifier.

FR: Représentation immuable d'un document parsé : éléments, nœuds texte
    et attributs, dans l'ordre du document. Indépendante de lxml afin que
    le rendu ne dépende d'aucun objet DOM vivant.
EN: Immutable representation of a parsed document: elements, text nodes
    and attributes, in document order. Independent from lxml so rendering
    never touches a live DOM object.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Espaces, tabulations et fins de ligne ignorés pour décider si un texte est vide
_BLANK_RE = re.compile(r"[ \t\r\n]")


def is_blank(text: str) -> bool:
    """Indique si `text` ne contient que des espaces, tabulations ou fins de ligne."""
    return not _BLANK_RE.sub("", text)


class Attribute(BaseModel):
    """Attribut d'un élément (nom qualifié, valeur décodée)."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class TextNode(BaseModel):
    """Nœud texte (texte décodé, sections CDATA comprises)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    content: str


class Element(BaseModel):
    """Élément XML.

    FR: `text_content` est la concaténation de tout le texte descendant ;
        il sert uniquement à classer l'élément (valeur propre, vide, parent).
        `inner_markup` est la sérialisation du contenu par le parseur,
        renseignée pour les éléments sans enfant élément.
    EN: `text_content` concatenates all descendant text and only drives
        classification. `inner_markup` is the parser's serialization of the
        content, set for elements without child elements.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["element"] = "element"
    tag: str
    attributes: list[Attribute] = Field(default_factory=list)
    children: list[Element | TextNode] = Field(default_factory=list)
    text_content: str = ""
    inner_markup: str | None = None

    @property
    def has_no_children(self) -> bool:
        """Aucun enfant élément (le texte seul ne compte pas)."""
        return not any(isinstance(child, Element) for child in self.children)

    @property
    def has_text_value(self) -> bool:
        return not is_blank(self.text_content)

    @property
    def has_own_value(self) -> bool:
        """Feuille avec texte, ex. `<name>Bob</name>`."""
        return self.has_no_children and self.has_text_value

    @property
    def is_empty(self) -> bool:
        """Feuille sans contenu, ex. `<foo></foo>` ou `<foo/>`."""
        return self.has_no_children and not self.has_text_value


class Document(BaseModel):
    """Document parsé : un unique élément racine.

    FR: La déclaration XML n'appartient pas à l'arbre ; seul son encodage
        est conservé (`None` si le texte source n'en avait pas).
    EN: The XML declaration is not part of the tree; only its encoding is
        kept (`None` when the source had none).
    """

    model_config = ConfigDict(frozen=True)

    root: Element
    declaration_encoding: str | None = None


Element.model_rebuild()
