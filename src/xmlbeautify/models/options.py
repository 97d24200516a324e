"""Options de mise en forme.

FR: Modèle Pydantic des options acceptées par le Beautifier. Les clés
    camelCase historiques (`useSelfClosingElement`) sont acceptées comme
    alias des noms Python.
EN: Pydantic model of the Beautifier options. Legacy camelCase keys
    (`useSelfClosingElement`) are accepted as aliases.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from xmlbeautify.errors import ConfigurationError

DEFAULT_INDENT = "  "

# Clés camelCase historiques → noms de champs
_LEGACY_KEYS = {"useSelfClosingElement": "use_self_closing_element"}


class BeautifyOptions(BaseModel):
    """Configuration d'un appel à beautify().

    FR: `indent` est répété une fois par niveau de profondeur ; une chaîne
        vide produit un document sans indentation. `use_self_closing_element`
        choisit entre `<foo />` et `<foo></foo>` pour les éléments vides.
    EN: `indent` is repeated once per depth level; an empty string disables
        indentation. `use_self_closing_element` picks `<foo />` over
        `<foo></foo>` for empty elements.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    indent: StrictStr = Field(
        default=DEFAULT_INDENT,
        description="Unité d'indentation / Indentation unit",
    )
    use_self_closing_element: StrictBool = Field(
        default=False,
        alias="useSelfClosingElement",
        description="Balise auto-fermante pour les éléments vides / Self-closing empty elements",
    )


def resolve_options(
    options: BeautifyOptions | Mapping[str, object] | None = None,
    **overrides: object,
) -> BeautifyOptions:
    """Construit et valide les options effectives.

    FR: Fusionne `overrides` par-dessus `options` puis valide le tout.
        Les options absentes reprennent leur valeur par défaut.
    EN: Merges `overrides` over `options` then validates the result.

    Raises:
        ConfigurationError: Si une option a un type incorrect ou est inconnue.
    """
    if isinstance(options, BeautifyOptions):
        data: dict[str, object] = options.model_dump()
    elif options is None:
        data = {}
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        msg = f"Options invalides : mapping ou BeautifyOptions attendu, reçu {type(options).__name__}"
        raise ConfigurationError(msg)

    data.update(overrides)
    data = {_LEGACY_KEYS.get(key, key): value for key, value in data.items()}

    try:
        return BeautifyOptions.model_validate(data)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        msg = "Options de mise en forme invalides"
        raise ConfigurationError(msg, errors=errors) from exc
