"""
Configuration du plugin : lue depuis l'environnement (os.getenv).

Variables :
  MB_NAME        → titre de la catégorie de blocs dans l'éditeur
  MB_NAMESPACE   → préfixe des types de blocs, shortcodes et handles de script
  MB_ASSETS_URL  → URL de base des assets (script éditeur, feuilles de style)
  MB_VERSION     → version passée au runtime pour le cache-busting
  MB_LANG        → langue du catalog de chaînes
"""
import os
import re
from typing import Any, Dict, List

from pydantic import BaseModel, Field

DEFAULT_STYLES: List[Dict[str, Any]] = [
    {"handle": "grid",     "src": "/assets/css/grid.min.css",     "scope": ["frontend", "editor"]},
    {"handle": "frontend", "src": "/assets/css/frontend.min.css", "scope": ["frontend", "editor"]},
    {"handle": "backend",  "src": "/assets/css/backend.min.css",  "scope": "backend"},
]


class Settings(BaseModel):
    name: str = "Marketplace"
    namespace: str = "marketplace"
    assets_url: str = ""
    version: str = "1.0.0"
    lang: str = "en"
    styles: List[Dict[str, Any]] = Field(default_factory=lambda: [dict(s) for s in DEFAULT_STYLES])

    @property
    def shortcode_prefix(self) -> str:
        return self.namespace

    @property
    def script_handle(self) -> str:
        return f"{self.namespace}-blocks"

    @property
    def script_src(self) -> str:
        return f"{self.assets_url}/assets/js/block.min.js"

    @property
    def js_var(self) -> str:
        """Nom de la variable globale JS qui reçoit les descripteurs."""
        return "".join(p.capitalize() if i else p for i, p in enumerate(re.split(r"[-_]", self.namespace))) + "Blocks"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            name=os.getenv("MB_NAME", "Marketplace"),
            namespace=os.getenv("MB_NAMESPACE", "marketplace"),
            assets_url=os.getenv("MB_ASSETS_URL", "").rstrip("/"),
            version=os.getenv("MB_VERSION", "1.0.0"),
            lang=os.getenv("MB_LANG", "en"),
        )
