"""Beautifier : mise en forme indentée d'un document XML.

FR: Parse le texte source, puis parcourt l'arbre dans l'ordre du document
    en émettant une balise par ligne, indentée selon la profondeur. Les
    feuilles avec texte sont fermées sur la même ligne (`<name>Bob</name>`),
    les éléments vides sont rendus `<foo />` ou `<foo></foo>` selon les
    options. Une déclaration présente dans la source est normalisée en
    version 1.0 avec l'encodage d'origine.
EN: Parses the source text, then walks the tree in document order emitting
    one tag per line, indented by depth. Leaves with text close inline,
    empty elements render as `<foo />` or `<foo></foo>` depending on the
    options. A source declaration is normalized to version 1.0 with the
    original encoding.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from xmlbeautify.models.nodes import Document, Element, TextNode, is_blank
from xmlbeautify.models.options import BeautifyOptions, resolve_options
from xmlbeautify.parsing.declaration import build_declaration
from xmlbeautify.parsing.parser import XmlParser

logger = logging.getLogger(__name__)

CDATA_START = "<![CDATA["
CDATA_END = "]]>"


class BuildState:
    """Accumulateur propre à un appel de rendu.

    FR: Contient le texte produit, la profondeur courante et une copie des
        options actives. Créé pour chaque appel, jamais partagé.
    EN: Holds the output, the current depth and a copy of the active
        options. Created per call, never shared.
    """

    def __init__(self, options: BeautifyOptions) -> None:
        self.indent = options.indent
        self.use_self_closing_element = options.use_self_closing_element
        self.depth = 0
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    def write_indent(self) -> None:
        self._parts.append(self.indent * self.depth)

    def descend(self) -> None:
        self.depth += 1

    def ascend(self) -> None:
        if self.depth == 0:
            msg = "Profondeur d'indentation négative"
            raise RuntimeError(msg)
        self.depth -= 1

    def getvalue(self) -> str:
        return "".join(self._parts)


class XmlBeautifier:
    """Met en forme du XML textuel.

    FR: Le parseur est injectable ; par défaut chaque Beautifier crée son
        propre XmlParser.
    EN: The parser is injectable; by default each Beautifier creates its
        own XmlParser.
    """

    def __init__(self, parser: XmlParser | None = None) -> None:
        self.parser = parser if parser is not None else XmlParser()

    def beautify(
        self,
        xml_text: str,
        options: BeautifyOptions | Mapping[str, object] | None = None,
        **overrides: object,
    ) -> str:
        """Met en forme un texte XML.

        Args:
            xml_text: Le XML source.
            options: BeautifyOptions, mapping d'options (`indent`,
                `useSelfClosingElement`) ou None pour les valeurs par défaut.
            **overrides: Options appliquées par-dessus `options`.

        Returns:
            Le XML indenté, une ligne par balise, terminé par un saut de ligne.

        Raises:
            ConfigurationError: Si les options sont invalides (vérifié avant le parsing).
            ParseError: Si le XML source est vide ou mal formé.
        """
        resolved = resolve_options(options, **overrides)
        if not isinstance(xml_text, str):
            msg = f"Texte XML attendu (str), reçu {type(xml_text).__name__}"
            raise TypeError(msg)

        logger.debug(
            "Mise en forme de %d caractères (indentation %r, auto-fermante=%s)",
            len(xml_text),
            resolved.indent,
            resolved.use_self_closing_element,
        )
        document = self.parser.parse(xml_text)
        return self.render(document, resolved)

    def render(self, document: Document, options: BeautifyOptions) -> str:
        """Rend un Document déjà parsé."""
        state = BuildState(options)
        if document.declaration_encoding is not None:
            state.write(build_declaration(document.declaration_encoding) + "\n")
        render_element(document.root, state)
        return state.getvalue()


def beautify(
    xml_text: str,
    options: BeautifyOptions | Mapping[str, object] | None = None,
    **overrides: object,
) -> str:
    """Raccourci : XmlBeautifier().beautify(...) avec un parseur neuf."""
    return XmlBeautifier().beautify(xml_text, options, **overrides)


def render_element(element: Element, state: BuildState) -> None:
    """Émet `element` et ses descendants dans `state`.

    FR: Parcours en pile explicite. Une entrée fermante est empilée avant les
        enfants d'un élément parent ; elle restaure la profondeur puis écrit
        la balise de fin indentée.
    EN: Explicit-stack walk. A closing entry is pushed before a parent's
        children; it restores the depth then writes the indented end tag.
    """
    stack: list[tuple[Element | TextNode, bool]] = [(element, False)]

    while stack:
        node, closing = stack.pop()

        if closing:
            state.ascend()
            state.write_indent()
            state.write(f"</{node.tag}>\n")
            continue

        if isinstance(node, TextNode):
            if not is_blank(node.content):
                state.write(escape_text(node.content))
            continue

        state.write_indent()
        state.write(start_tag(node))

        if node.is_empty:
            if state.use_self_closing_element:
                state.write(" />\n")
            else:
                state.write(f"></{node.tag}>\n")
        elif node.has_own_value:
            state.write(f">{own_value(node)}</{node.tag}>\n")
        else:
            state.write(">\n")
            stack.append((node, True))
            state.descend()
            stack.extend((child, False) for child in reversed(node.children))


def start_tag(element: Element) -> str:
    """`<tag` suivi des attributs, sans le `>` final."""
    attributes = "".join(f' {attr.name}="{attr.value}"' for attr in element.attributes)
    return f"<{element.tag}{attributes}"


def own_value(element: Element) -> str:
    """Valeur d'une feuille avec texte.

    FR: Si le contenu source contient une section CDATA, le texte agrégé est
        réenveloppé dans une unique section CDATA ; sinon le contenu est
        repris tel que sérialisé par le parseur.
    EN: When the source content holds a CDATA section, the aggregated text
        is re-wrapped in a single CDATA section; otherwise the parser's
        serialization is used as is.
    """
    markup = element.inner_markup if element.inner_markup is not None else element.text_content
    if CDATA_START in markup and CDATA_END in markup:
        return f"{CDATA_START}{element.text_content}{CDATA_END}"
    return markup


def escape_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
