"""Tests de la détection de déclaration XML.

FR: Vérifie has_declaration(), extract_encoding() et build_declaration(),
    y compris les déclarations sans encodage.
EN: Verifies has_declaration(), extract_encoding() and build_declaration(),
    including declarations without an encoding.
"""

from xmlbeautify.parsing.declaration import (
    DEFAULT_ENCODING,
    build_declaration,
    extract_encoding,
    has_declaration,
)


class TestHasDeclaration:
    """Tests de has_declaration()."""

    def test_with_declaration(self) -> None:
        assert has_declaration('<?xml version="1.0"?><a/>')

    def test_without_declaration(self) -> None:
        assert not has_declaration("<a/>")

    def test_declaration_anywhere(self) -> None:
        assert has_declaration('  \n<?xml version="1.0"?><a/>')


class TestExtractEncoding:
    """Tests de extract_encoding()."""

    def test_no_declaration(self) -> None:
        assert extract_encoding("<a/>") is None

    def test_encoding_verbatim(self) -> None:
        assert extract_encoding('<?xml version="1.1" encoding="ISO-8859-1"?><a/>') == "ISO-8859-1"

    def test_value_case_preserved(self) -> None:
        assert extract_encoding('<?xml version="1.0" encoding="utf-8"?><a/>') == "utf-8"

    def test_token_case_insensitive(self) -> None:
        assert extract_encoding('<?xml version="1.0" ENCODING="Shift_JIS"?><a/>') == "Shift_JIS"

    def test_missing_encoding_defaults(self) -> None:
        assert extract_encoding('<?xml version="1.0"?><a/>') == DEFAULT_ENCODING

    def test_missing_end_marker_defaults(self) -> None:
        assert extract_encoding("<?xml version='1.0' encoding=\"UTF-16\" ?><a/>") == DEFAULT_ENCODING

    def test_substring_up_to_end_marker(self) -> None:
        text = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?><a/>'
        assert extract_encoding(text) == 'UTF-8" standalone="yes'


class TestBuildDeclaration:
    """Tests de build_declaration()."""

    def test_version_forced(self) -> None:
        assert build_declaration("ISO-8859-1") == '<?xml version="1.0" encoding="ISO-8859-1"?>'
