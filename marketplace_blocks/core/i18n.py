"""
i18n : chaînes d'interface des templates et des blocs.

Clés format "namespace.key" → texte localisé (fichiers i18n/{lang}.json du package)
Clé absente → "[missing:key]"
"""
import json
from pathlib import Path

_I18N_CACHE: dict = {}
_I18N_DIR = Path(__file__).parent.parent / "i18n"

DEFAULT_LANG = "en"


def _load_lang(lang: str) -> dict:
    """Charge le fichier i18n/{lang}.json (lazy, mis en cache)."""
    if lang not in _I18N_CACHE:
        path = _I18N_DIR / f"{lang}.json"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                _I18N_CACHE[lang] = json.load(f)
        else:
            _I18N_CACHE[lang] = {}
    return _I18N_CACHE[lang]


def get_string(key: str, lang: str = DEFAULT_LANG) -> str:
    """
    "listing.report" → "Report Listing"
    Repli sur la langue par défaut si la clé manque dans `lang`.
    """
    for catalog in (_load_lang(lang), _load_lang(DEFAULT_LANG)):
        node = catalog
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                node = None
                break
        if node is not None and not isinstance(node, dict):
            return str(node)
    return f"[missing:{key}]"


def reload_cache():
    """Force le rechargement du cache i18n (utile en dev)."""
    _I18N_CACHE.clear()


def translate(value: str, lang: str = DEFAULT_LANG) -> str:
    """Clé du catalog → texte localisé ; texte libre (clé inconnue) → inchangé."""
    text = get_string(value, lang)
    return value if text == f"[missing:{value}]" else text
