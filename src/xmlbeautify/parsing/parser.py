"""Parseur XML (lxml) produisant le modèle d'arbre du Beautifier.

FR: Transforme un texte XML en Document : tags qualifiés, attributs dans
    l'ordre du document, nœuds enfants, texte agrégé et sérialisation du
    contenu des feuilles (sections CDATA préservées). Les commentaires et
    instructions de traitement sont ignorés.
EN: Turns XML text into a Document: qualified tags, attributes in document
    order, child nodes, aggregated text and leaf content serialization
    (CDATA sections preserved). Comments and processing instructions are
    dropped.
"""

from __future__ import annotations

import logging

from lxml import etree

from xmlbeautify.errors import ParseError
from xmlbeautify.models.nodes import Attribute, Document, Element, TextNode
from xmlbeautify.parsing.declaration import extract_encoding

logger = logging.getLogger(__name__)

_XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class _Frame:
    """Élément lxml en cours de conversion et ses enfants déjà convertis."""

    __slots__ = ("source", "children")

    def __init__(self, source: etree._Element) -> None:
        self.source = source
        self.children: list[Element | TextNode] = []


class XmlParser:
    """Parseur XML basé sur lxml.

    FR: Chaque instance possède son propre etree.XMLParser ; aucun état
        n'est partagé au niveau du module. Le texte est toujours encodé en
        UTF-8 avant parsing, l'encodage déclaré est donc ignoré par lxml.
        `huge_tree` lève la limite de profondeur par défaut de libxml2 (256).
    EN: Each instance owns its etree.XMLParser; no module-level state.
        Text is always encoded as UTF-8 before parsing, so lxml ignores the
        declared encoding. `huge_tree` lifts libxml2's default depth limit.
    """

    def __init__(self) -> None:
        self._xml_parser = etree.XMLParser(
            encoding="utf-8",
            strip_cdata=False,
            remove_comments=True,
            remove_pis=True,
            huge_tree=True,
        )

    def parse(self, text: str) -> Document:
        """Parse un texte XML.

        Args:
            text: Le XML source, avec ou sans déclaration.

        Returns:
            Le Document converti.

        Raises:
            ParseError: Si le texte est vide ou n'est pas du XML bien formé.
        """
        if not text.strip():
            msg = "Document XML vide"
            logger.warning(msg)
            raise ParseError(msg)

        try:
            root = etree.fromstring(text.encode("utf-8"), parser=self._xml_parser)
        except etree.XMLSyntaxError as exc:
            errors = [f"Ligne {error.line}: {error.message}" for error in exc.error_log]
            logger.warning("Échec du parsing XML : %s", exc)
            msg = f"XML mal formé : {exc}"
            raise ParseError(msg, errors=errors) from exc
        except UnicodeEncodeError as exc:
            logger.warning("Texte XML non encodable en UTF-8 : %s", exc)
            msg = f"Texte XML non encodable : {exc}"
            raise ParseError(msg) from exc

        return Document(root=convert_element(root), declaration_encoding=extract_encoding(text))


def convert_element(root: etree._Element) -> Element:
    """Convertit un sous-arbre lxml en Element.

    FR: Parcours itératif (pile explicite) : la profondeur du document ne
        consomme pas la pile d'appels Python.
    EN: Iterative walk (explicit stack): document depth does not consume
        the Python call stack.
    """
    stack: list[_Frame] = []
    converted: Element | None = None

    for event, source in etree.iterwalk(root, events=("start", "end")):
        if not isinstance(source.tag, str):
            continue

        if event == "start":
            frame = _Frame(source)
            if source.text:
                frame.children.append(TextNode(content=source.text))
            stack.append(frame)
            continue

        frame = stack.pop()
        converted = _build_element(frame)
        if stack:
            parent = stack[-1]
            parent.children.append(converted)
            if source.tail:
                parent.children.append(TextNode(content=source.tail))

    if converted is None:
        msg = "Aucun élément racine dans le document"
        raise ParseError(msg)
    return converted


def _build_element(frame: _Frame) -> Element:
    source = frame.source
    text_content = "".join(
        child.content if isinstance(child, TextNode) else child.text_content
        for child in frame.children
    )
    has_child_elements = any(isinstance(child, Element) for child in frame.children)

    return Element(
        tag=_qualified_name(source.tag, source.prefix),
        attributes=_attributes(source),
        children=frame.children,
        text_content=text_content,
        inner_markup=None if has_child_elements else _inner_markup(source),
    )


def _attributes(source: etree._Element) -> list[Attribute]:
    """Déclarations de namespace propres à l'élément, puis attributs."""
    parent = source.getparent()
    inherited = parent.nsmap if parent is not None else {}
    attributes = [
        Attribute(name=f"xmlns:{prefix}" if prefix else "xmlns", value=uri)
        for prefix, uri in source.nsmap.items()
        if inherited.get(prefix) != uri
    ]
    for name, value in source.attrib.items():
        attributes.append(Attribute(name=_attribute_name(name, source.nsmap), value=value))
    return attributes


def _qualified_name(tag: str, prefix: str | None) -> str:
    local_name = etree.QName(tag).localname
    return f"{prefix}:{local_name}" if prefix else local_name


def _attribute_name(name: str, nsmap: dict[str | None, str]) -> str:
    qname = etree.QName(name)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == _XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _inner_markup(source: etree._Element) -> str:
    """Sérialisation lxml du contenu d'une feuille, sans ses balises."""
    markup = etree.tostring(source, encoding="unicode", with_tail=False)
    if markup.endswith("/>"):
        return ""
    # lxml échappe `>` dans les valeurs d'attribut : le premier `>` ferme la balise
    return markup[markup.index(">") + 1 : markup.rindex("</")]
