"""Hiérarchie d'exceptions pour la mise en forme XML.

FR: Exceptions typées pour les erreurs de parsing du XML source et les
    options de mise en forme invalides.
EN: Typed exceptions for source XML parsing errors and invalid
    formatting options.
"""


class XmlBeautifyError(Exception):
    """Erreur de base pour toutes les opérations xmlbeautify.

    FR: Classe parente de toutes les exceptions levées par le paquet.
    EN: Base class for all package exceptions.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors: list[str] = errors or []


class ParseError(XmlBeautifyError):
    """Le texte source n'a pas pu être transformé en arbre XML.

    FR: Levée quand le parseur lxml rejette le document (XML mal formé,
        document vide) ou quand les octets ne peuvent pas être décodés.
        `errors` contient les messages du journal d'erreurs lxml.
    EN: Raised when lxml rejects the document (malformed XML, empty
        document) or when raw bytes cannot be decoded.
    """


class ConfigurationError(XmlBeautifyError):
    """Options de mise en forme invalides.

    FR: Levée avant tout parsing quand les options ne respectent pas le
        modèle BeautifyOptions (type incorrect, clé inconnue).
    EN: Raised before any parsing when options fail BeautifyOptions
        validation (wrong type, unknown key).
    """
