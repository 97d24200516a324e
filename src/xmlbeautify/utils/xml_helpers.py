"""Utilitaires pour la manipulation XML."""

import codecs

from lxml import etree

from xmlbeautify.errors import ParseError
from xmlbeautify.parsing.declaration import DEFAULT_ENCODING

# UTF-32 avant UTF-16 : le BOM UTF-32-LE commence par le BOM UTF-16-LE
_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def decode_xml_bytes(xml_bytes: bytes) -> str:
    """Décode un XML brut selon son BOM ou l'encodage détecté par lxml.

    FR: Un BOM (UTF-8, UTF-16, UTF-32) fixe l'encodage et est retiré. Sans
        BOM, lxml parse les octets et l'encodage du document
        (`docinfo.encoding`) est utilisé, UTF-8 à défaut.
    EN: A BOM (UTF-8, UTF-16, UTF-32) selects the encoding and is stripped.
        Otherwise lxml parses the bytes and the document encoding
        (`docinfo.encoding`) is used, UTF-8 by default.

    Args:
        xml_bytes: Le contenu XML brut.

    Returns:
        Le texte XML décodé.

    Raises:
        ParseError: Si lxml rejette les octets, si l'encodage est inconnu
            ou si les octets sont invalides pour cet encodage.
    """
    encoding = _bom_encoding(xml_bytes) or _document_encoding(xml_bytes)

    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        msg = f"Encodage inconnu : {encoding!r}"
        raise ParseError(msg) from exc

    try:
        return xml_bytes.decode(encoding)
    except UnicodeDecodeError as exc:
        msg = f"Octets invalides pour l'encodage {encoding} : {exc}"
        raise ParseError(msg) from exc


def _bom_encoding(xml_bytes: bytes) -> str | None:
    for bom, encoding in _BOMS:
        if xml_bytes.startswith(bom):
            return encoding
    return None


def _document_encoding(xml_bytes: bytes) -> str:
    """Encodage du document tel que détecté par lxml."""
    parser = etree.XMLParser(huge_tree=True, remove_comments=True, remove_pis=True)
    try:
        root = etree.fromstring(xml_bytes, parser=parser)
    except etree.XMLSyntaxError as exc:
        errors = [f"Ligne {error.line}: {error.message}" for error in exc.error_log]
        msg = f"Octets XML illisibles : {exc}"
        raise ParseError(msg, errors=errors) from exc
    return root.getroottree().docinfo.encoding or DEFAULT_ENCODING
