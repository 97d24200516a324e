"""Tests des options de mise en forme.

FR: Vérifie les valeurs par défaut, les alias camelCase, la fusion des
    surcharges et les erreurs de configuration.
EN: Verifies defaults, camelCase aliases, override merging and
    configuration errors.
"""

import pytest

from xmlbeautify.errors import ConfigurationError
from xmlbeautify.models.options import DEFAULT_INDENT, BeautifyOptions, resolve_options


class TestBeautifyOptions:
    """Tests du modèle BeautifyOptions."""

    def test_defaults(self) -> None:
        options = BeautifyOptions()
        assert options.indent == "  "
        assert options.indent == DEFAULT_INDENT
        assert options.use_self_closing_element is False

    def test_camel_case_alias(self) -> None:
        options = BeautifyOptions.model_validate({"useSelfClosingElement": True})
        assert options.use_self_closing_element is True

    def test_field_name(self) -> None:
        options = BeautifyOptions(indent="\t", use_self_closing_element=True)
        assert options.indent == "\t"
        assert options.use_self_closing_element is True

    def test_empty_indent_allowed(self) -> None:
        assert BeautifyOptions(indent="").indent == ""


class TestResolveOptions:
    """Tests de resolve_options()."""

    def test_none_gives_defaults(self) -> None:
        assert resolve_options(None) == BeautifyOptions()

    def test_mapping_with_legacy_keys(self) -> None:
        options = resolve_options({"indent": "    ", "useSelfClosingElement": True})
        assert options.indent == "    "
        assert options.use_self_closing_element is True

    def test_partial_mapping_falls_back_to_defaults(self) -> None:
        options = resolve_options({"useSelfClosingElement": True})
        assert options.indent == "  "

    def test_overrides_win_over_options(self) -> None:
        base = BeautifyOptions(indent="\t", use_self_closing_element=False)
        options = resolve_options(base, use_self_closing_element=True)
        assert options.indent == "\t"
        assert options.use_self_closing_element is True

    def test_snake_case_override_wins_over_legacy_key(self) -> None:
        options = resolve_options({"useSelfClosingElement": False}, use_self_closing_element=True)
        assert options.use_self_closing_element is True

    def test_non_string_indent_raises(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_options({"indent": 4})
        assert any("indent" in error for error in exc_info.value.errors)

    def test_non_bool_flag_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_options({"useSelfClosingElement": "yes"})

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="invalides"):
            resolve_options({"indentation": "  "})

    def test_wrong_options_type_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="mapping"):
            resolve_options(["  "])  # type: ignore[arg-type]
