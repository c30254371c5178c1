"""
Editor : pont entre les classes de blocs et les runtimes du CMS hôte.

Flux (une fois au démarrage) :
  BlockRegistry
    → discover_blocks()        {type_id: BlockDescriptor}
    → register()               éditeur : script + types de blocs + JSON global
    → register_fallback()      shortcodes <prefix>_<type_id>
  render(type_id, attributes)  → " " + HTML du bloc
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, Field

from ..blocks.base import Block
from ..blocks.registry import BlockRegistry
from ..config import Settings
from ..core.i18n import translate
from .errors import UnsupportedOperation
from .registrar import Registrar, RenderCallback

log = logging.getLogger(__name__)

BLANK_OPTION = "—"
RENDER_PREFIX = "render_"
EDITOR_SCRIPT_DEPS = ("wp-blocks", "wp-element", "wp-components", "wp-editor")


class BlockDescriptor(BaseModel):
    """Projection d'un bloc au format attendu par l'éditeur."""
    title: str
    type: str
    script: str
    attributes: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    settings: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


def sanitize_slug(value: str) -> str:
    return value.strip().lower().replace("_", "-")


def prepare_options(options: Mapping[str, Any], required: bool) -> Dict[str, Any]:
    """
    Options structurées {"a": {"label": "A"}} → {"a": "A"} (ordre conservé).
    Champ non requis sans option vide → option vide ajoutée en tête.
    """
    options = dict(options)
    if options and isinstance(next(iter(options.values())), Mapping):
        options = {
            key: value.get("label", "") if isinstance(value, Mapping) else value
            for key, value in options.items()
        }
    if not required and "" not in options:
        options = {"": BLANK_OPTION, **options}
    return options


def _first_mapping(args: tuple) -> Dict[str, Any]:
    if args and isinstance(args[0], Mapping):
        return dict(args[0])
    return {}


class Editor:

    def __init__(self, registry: BlockRegistry, registrar: Optional[Registrar] = None,
                 settings: Optional[Settings] = None):
        self.registry = registry
        self.registrar = registrar or Registrar()
        self.settings = settings or Settings()

    # ── Découverte ──────────────────────────────────────────────────────────

    def discover_blocks(self) -> Dict[str, BlockDescriptor]:
        """Un descripteur par bloc ayant un label ; les blocs internes sont ignorés."""
        blocks: Dict[str, BlockDescriptor] = {}
        for type_id, block_cls in self.registry.items():
            if block_cls.get_meta("label"):
                blocks[type_id] = self._build_descriptor(type_id, block_cls)
        return blocks

    def _build_descriptor(self, type_id: str, block_cls: Type[Block]) -> BlockDescriptor:
        """Labels du bloc, des champs et des options résolus dans la langue des settings."""
        lang = self.settings.lang
        descriptor = BlockDescriptor(
            title=translate(block_cls.get_meta("label"), lang),
            type=f"{self.settings.namespace}/{sanitize_slug(type_id)}",
            script=self.settings.script_handle,
        )

        for field_name, field in (block_cls.get_meta("settings") or {}).items():
            field_args = field.get_args()
            if "label" in field_args:
                field_args["label"] = translate(field_args["label"], lang)

            if "options" in field_args:
                field_args["options"] = prepare_options(
                    field_args["options"], field_args.get("required", False),
                )
                field_args["options"] = {
                    key: translate(label, lang) if isinstance(label, str) else label
                    for key, label in field_args["options"].items()
                }

            descriptor.attributes[field_name] = {
                "type": "string",
                "default": field_args.get("default", ""),
            }
            descriptor.settings[field_name] = field_args

        return descriptor

    # ── Enregistrement ──────────────────────────────────────────────────────

    def register(self, descriptors: Mapping[str, BlockDescriptor]) -> None:
        """Enregistre le script éditeur (une fois) puis chaque type de bloc."""
        if not descriptors:
            return
        if not self.registrar.supports_block_types:
            log.debug("Runtime éditeur indisponible : enregistrement ignoré")
            return

        handle = self.settings.script_handle
        self.registrar.register_script(
            handle, self.settings.script_src, EDITOR_SCRIPT_DEPS, self.settings.version,
        )

        for type_id, descriptor in descriptors.items():
            self.registrar.register_block_type(
                descriptor.type,
                editor_script=descriptor.script,
                render_callback=self.get_render_callback(type_id),
                attributes=descriptor.attributes,
            )

        self.registrar.localize_script(
            handle,
            self.settings.js_var,
            {type_id: d.model_dump() for type_id, d in descriptors.items()},
        )
        log.info("%d blocs enregistrés dans l'éditeur", len(descriptors))

    def register_fallback(self, descriptors: Mapping[str, BlockDescriptor]) -> None:
        """Shortcodes <prefix>_<type_id> → même callback de rendu."""
        if not self.registrar.supports_shortcodes:
            log.debug("Runtime shortcodes indisponible : enregistrement ignoré")
            return
        for type_id in descriptors:
            self.registrar.add_shortcode(
                f"{self.settings.shortcode_prefix}_{type_id}",
                self.get_render_callback(type_id),
            )

    def register_blocks(self) -> Dict[str, BlockDescriptor]:
        descriptors = self.discover_blocks()
        self.register(descriptors)
        self.register_fallback(descriptors)
        return descriptors

    def register_categories(self, categories: List[Dict[str, str]]) -> List[Dict[str, str]]:
        """Ajoute la catégorie de blocs du plugin (une seule fois)."""
        categories = list(categories)
        if not any(c.get("slug") == self.settings.namespace for c in categories):
            categories.append({"title": self.settings.name, "slug": self.settings.namespace})
        return categories

    def register_editor_styles(self) -> None:
        for style in self.settings.styles:
            scope = style.get("scope") or []
            scopes = [scope] if isinstance(scope, str) else list(scope)
            if "editor" in scopes:
                self.registrar.add_editor_style(style["src"])

    # ── Rendu ───────────────────────────────────────────────────────────────

    def render(self, type_id: str, attributes: Optional[Mapping[str, Any]] = None) -> str:
        """
        Rend un bloc, préfixé d'un espace.
        Bloc inconnu ou attributs invalides → " " (jamais d'exception).
        """
        output = " "

        block_cls = self.registry.get(type_id)
        if block_cls is None:
            log.debug("Bloc inconnu : %r", type_id)
            return output

        try:
            block = block_cls(attributes)
        except (TypeError, ValueError) as e:
            log.debug("Bloc %r non instancié : %s", type_id, e)
            return output

        return output + block.render()

    def get_render_callback(self, type_id: str) -> RenderCallback:
        """Callback hôte : seul le 1er argument positionnel (attributs) est lu."""
        def render_callback(*args: Any) -> str:
            return self.render(type_id, _first_mapping(args))

        render_callback.__name__ = f"{RENDER_PREFIX}{type_id}"
        return render_callback

    def dispatch(self, method: str, *args: Any) -> str:
        """Appel par nom : seul `render_<type_id>` est supporté."""
        if method.startswith(RENDER_PREFIX):
            return self.get_render_callback(method[len(RENDER_PREFIX):])(*args)
        raise UnsupportedOperation(method)
