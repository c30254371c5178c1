"""
Templates : arbres de blocs des pages annonce / annonces.

  build_detail_tree(overrides)   → arbre de ListingViewPage
  build_archive_tree(overrides)  → arbre de ListingsViewPage
"""
from typing import Any, Dict, Mapping, Optional, Type

from ..core.i18n import DEFAULT_LANG
from .base import Page, PageSidebarLeft, PageSidebarRight, Template
from .listing_view_page import ListingViewPage
from .listings_view_page import ListingsViewPage

TEMPLATES: Dict[str, Type[Template]] = {
    "listing_view_page":  ListingViewPage,
    "listings_view_page": ListingsViewPage,
}


def get_template(name: str, overrides: Optional[Mapping[str, Any]] = None,
                 lang: str = DEFAULT_LANG) -> Template:
    template_cls = TEMPLATES.get(name)
    if template_cls is None:
        raise ValueError(f"Template inconnu : {name!r}. Registry : {list(TEMPLATES)}")
    return template_cls(overrides, lang=lang)


def build_detail_tree(overrides: Optional[Mapping[str, Any]] = None,
                      lang: str = DEFAULT_LANG) -> Dict[str, Any]:
    return ListingViewPage(overrides, lang=lang).tree


def build_archive_tree(overrides: Optional[Mapping[str, Any]] = None,
                       lang: str = DEFAULT_LANG) -> Dict[str, Any]:
    return ListingsViewPage(overrides, lang=lang).tree


__all__ = [
    "Template", "Page", "PageSidebarLeft", "PageSidebarRight",
    "ListingViewPage", "ListingsViewPage",
    "TEMPLATES", "get_template",
    "build_detail_tree", "build_archive_tree",
]
