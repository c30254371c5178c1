"""
Blocs de base : métadonnées statiques (label, settings) + rendu HTML.

Un bloc s'instancie depuis un seul dict d'attributs ; les settings déclarés
fournissent les valeurs par défaut et la validation des attributs.
"""
import html
from typing import Any, ClassVar, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}


class SettingField(BaseModel):
    """Champ configurable d'un bloc (exposé dans l'éditeur)."""
    model_config = ConfigDict(populate_by_name=True)

    label: str = ""
    type: str = "text"
    default: Any = None
    options: Optional[Dict[str, Any]] = None
    required: bool = False
    description: Optional[str] = None
    order: Optional[int] = Field(default=None, alias="_order")

    def get_args(self) -> Dict[str, Any]:
        """Arguments déclarés du champ (clés non renseignées omises)."""
        return {k: v for k, v in self.model_dump(by_alias=True).items() if v is not None}

    def clean(self, value: Any) -> Any:
        """Normalise une valeur d'attribut ; ValueError si invalide."""
        if value is None or value == "":
            return self.default
        if self.type == "number":
            return int(value)
        if self.type == "checkbox":
            return value if isinstance(value, bool) else str(value).lower() in _TRUE_VALUES
        if self.options is not None:
            value = str(value)
            if value not in self.options:
                raise ValueError(f"Option invalide {value!r} pour {self.label or self.type!r}")
            return value
        return str(value)


class BlockMeta(BaseModel):
    label: str = ""
    settings: Dict[str, SettingField] = Field(default_factory=dict)


class Block(BaseModel):
    """
    Bloc de base (classe parente de tous les blocs).

    Sous-classes : définir `type_id`, `meta` et `render()`.
    Un bloc sans label n'est pas exposé dans l'éditeur (bloc interne).
    """
    type_id: ClassVar[str] = ""
    meta: ClassVar[BlockMeta] = BlockMeta()

    attributes: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, **data: Any):
        super().__init__(attributes=dict(attributes or {}), **data)

    @field_validator("attributes")
    @classmethod
    def _apply_settings(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        cleaned = {name: field.clean(value.get(name)) for name, field in cls.meta.settings.items()}
        for name, item in value.items():
            cleaned.setdefault(name, item)
        return cleaned

    @classmethod
    def get_meta(cls, name: str) -> Any:
        return getattr(cls.meta, name, None)

    def get(self, name: str, default: Any = None) -> Any:
        value = self.attributes.get(name)
        return default if value is None else value

    def get_items(self, name: str) -> list:
        """Attribut liste d'objets (annonces, catégories) ; toute autre valeur → []."""
        value = self.get(name)
        if not isinstance(value, (list, tuple)):
            return []
        return [item for item in value if isinstance(item, Mapping)]

    def render(self) -> str:
        raise NotImplementedError(f"{type(self).__name__}.render()")


# ── Helpers HTML ────────────────────────────────────────────────────────────

def html_attrs(attrs: Mapping[str, Any]) -> str:
    """{"class": ["a", "b"], "data-columns": 3} → ' class="a b" data-columns="3"'"""
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value if v)
        parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


def esc(value: Any) -> str:
    return html.escape(str(value))
