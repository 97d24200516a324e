"""Point d'entrée CLI pour xmlbeautify."""

import logging
import sys
from pathlib import Path
from typing import BinaryIO

import click

from xmlbeautify import __version__
from xmlbeautify.errors import XmlBeautifyError
from xmlbeautify.parsing.declaration import DEFAULT_ENCODING, extract_encoding
from xmlbeautify.rendering.beautifier import CDATA_START, beautify
from xmlbeautify.utils.xml_helpers import decode_xml_bytes

logger = logging.getLogger(__name__)


@click.command(name="xml-beautify")
@click.argument("source", required=False, default="-", type=click.File("rb"))
@click.option("--indent", default="  ", show_default=True, help="Unité d'indentation.")
@click.option("--tabs", is_flag=True, default=False, help="Indenter avec une tabulation (remplace --indent).")
@click.option(
    "--self-closing/--no-self-closing",
    default=False,
    show_default=True,
    help="Écrire les éléments vides sous la forme <foo />.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Fichier de sortie (sortie standard par défaut).",
)
@click.option("--verbose", is_flag=True, default=False, help="Activer les logs de débogage.")
@click.version_option(__version__)
def main(
    source: BinaryIO,
    indent: str,
    tabs: bool,
    self_closing: bool,
    output: Path | None,
    verbose: bool,
) -> None:
    """Met en forme le XML de SOURCE (fichier ou `-` pour l'entrée standard)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        xml_text = decode_xml_bytes(source.read())
        result = beautify(
            xml_text,
            indent="\t" if tabs else indent,
            use_self_closing_element=self_closing,
        )
    except XmlBeautifyError as exc:
        logger.debug("Détails : %s", exc.errors)
        raise click.ClickException(str(exc)) from exc

    if output is None:
        click.echo(result, nl=False)
    else:
        encoding = (extract_encoding(result) or DEFAULT_ENCODING).split('"')[0]
        output.write_bytes(_encode_output(result, encoding))
        logger.info("Résultat écrit dans %s", output)


def _encode_output(result: str, encoding: str) -> bytes:
    """Encode le résultat dans l'encodage déclaré.

    FR: Les caractères non représentables deviennent des références `&#N;`,
        sauf en présence de CDATA où elles ne seraient pas décodées.
    EN: Unencodable characters become `&#N;` references, except when CDATA
        is present since references are not decoded there.
    """
    try:
        return result.encode(encoding)
    except UnicodeEncodeError as exc:
        if CDATA_START in result:
            msg = f"Caractères non représentables en {encoding} dans une section CDATA : {exc}"
            raise click.ClickException(msg) from exc
        return result.encode(encoding, errors="xmlcharrefreplace")
