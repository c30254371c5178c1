"""
Registrar : capacités d'enregistrement fournies par le CMS hôte.

Registrar       → implémentation no-op (aucun runtime hôte disponible)
MemoryRegistrar → garde tout en mémoire (tests, API HTTP)
"""
from typing import Any, Callable, Dict, List, Sequence

RenderCallback = Callable[..., str]


class Registrar:
    """Aucune capacité : chaque appel est ignoré."""
    supports_block_types = False
    supports_shortcodes = False

    def register_script(self, handle: str, src: str, deps: Sequence[str] = (), version: str = "") -> None:
        pass

    def register_block_type(self, block_type: str, editor_script: str,
                            render_callback: RenderCallback, attributes: Dict[str, Any]) -> None:
        pass

    def localize_script(self, handle: str, name: str, data: Any) -> None:
        pass

    def add_shortcode(self, tag: str, callback: RenderCallback) -> None:
        pass

    def add_editor_style(self, src: str) -> None:
        pass


class MemoryRegistrar(Registrar):

    def __init__(self, block_types: bool = True, shortcodes: bool = True):
        self.supports_block_types = block_types
        self.supports_shortcodes = shortcodes
        self.scripts: Dict[str, Dict[str, Any]] = {}
        self.block_types: Dict[str, Dict[str, Any]] = {}
        self.localized: Dict[str, Dict[str, Any]] = {}
        self.shortcodes: Dict[str, RenderCallback] = {}
        self.editor_styles: List[str] = []

    def register_script(self, handle, src, deps=(), version=""):
        self.scripts[handle] = {"src": src, "deps": list(deps), "version": version}

    def register_block_type(self, block_type, editor_script, render_callback, attributes):
        self.block_types[block_type] = {
            "editor_script": editor_script,
            "render_callback": render_callback,
            "attributes": attributes,
        }

    def localize_script(self, handle, name, data):
        self.localized.setdefault(handle, {})[name] = data

    def add_shortcode(self, tag, callback):
        self.shortcodes[tag] = callback

    def add_editor_style(self, src):
        if src not in self.editor_styles:
            self.editor_styles.append(src)
