"""Fixtures partagées pour les tests xmlbeautify."""

import pytest

from xmlbeautify.parsing.parser import XmlParser
from xmlbeautify.rendering.beautifier import XmlBeautifier


@pytest.fixture
def parser() -> XmlParser:
    """Parseur XML neuf."""
    return XmlParser()


@pytest.fixture
def beautifier() -> XmlBeautifier:
    """Beautifier avec son propre parseur."""
    return XmlBeautifier()


@pytest.fixture
def catalog_xml() -> str:
    """Document de test : catalogue compact sur une ligne, avec déclaration."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<catalog id="c1" lang="fr">'
        '<book isbn="978-2" status="available"><title>Le Petit Prince</title>'
        "<author>Saint-Exupéry</author><notes></notes></book>"
        '<book isbn="978-3"><title>Vol de nuit</title><tags/></book>'
        "</catalog>"
    )
