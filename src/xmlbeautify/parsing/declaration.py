"""Détection de la déclaration XML.

FR: Repère la déclaration `<?xml ...?>` dans le texte brut et en extrait
    l'encodage, puis reconstruit une déclaration normalisée (version 1.0).
EN: Detects the `<?xml ...?>` declaration in raw text, extracts its
    encoding and rebuilds a normalized declaration (version 1.0).
"""

DECLARATION_MARKER = "<?xml"
DEFAULT_ENCODING = "UTF-8"

_ENCODING_START = 'encoding="'
_DECLARATION_END = '"?>'


def has_declaration(text: str) -> bool:
    """Indique si le texte contient `<?xml` (n'importe où)."""
    return DECLARATION_MARKER in text


def extract_encoding(text: str) -> str | None:
    """Extrait l'encodage déclaré, tel qu'écrit dans le texte source.

    FR: Retourne la sous-chaîne entre le premier `encoding="` (insensible à
        la casse) et le `"?>` qui suit. Si l'un des deux marqueurs manque
        alors qu'une déclaration est présente, retourne DEFAULT_ENCODING.
    EN: Returns the substring between the first case-insensitive
        `encoding="` and the following `"?>`. Falls back to
        DEFAULT_ENCODING when a marker is missing.

    Returns:
        L'encodage, ou None si le texte n'a pas de déclaration.
    """
    if not has_declaration(text):
        return None

    start = text.lower().find(_ENCODING_START)
    if start < 0:
        return DEFAULT_ENCODING
    start += len(_ENCODING_START)

    end = text.find(_DECLARATION_END, start)
    if end < 0:
        return DEFAULT_ENCODING

    return text[start:end]


def build_declaration(encoding: str) -> str:
    """Construit la déclaration normalisée (version toujours 1.0)."""
    return f'<?xml version="1.0" encoding="{encoding}"?>'
