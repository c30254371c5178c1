"""Blocs formulaire et compteur de résultats."""
from typing import ClassVar

from ..core.i18n import get_string
from .base import Block, BlockMeta, esc, html_attrs


class ListingSearchFormBlock(Block):
    type_id: ClassVar[str] = "listing_search_form"
    meta: ClassVar[BlockMeta] = BlockMeta(label="listing.search_form")

    def render(self) -> str:
        attrs = html_attrs({
            "class": ["hp-form", "hp-form--listing-search", "hp-block"],
            "action": self.get("action", "/"),
            "method": "get",
        })
        keywords = esc(get_string("listing.keywords"))
        search = esc(get_string("listing.search"))
        value = html_attrs({"value": self.get("s")})
        return (
            f"<form{attrs}>\n"
            f'  <input type="search" name="s" placeholder="{keywords}"{value}>\n'
            f'  <input type="hidden" name="post_type" value="hp_listing">\n'
            f'  <button type="submit" class="hp-form__button button">{search}</button>\n'
            f"</form>"
        )


class ResultCountBlock(Block):
    """Compteur de résultats : bloc interne des templates d'archive."""
    type_id: ClassVar[str] = "result_count"

    def render(self) -> str:
        return f'<div class="hp-result-count">{esc(self.get("total", 0))}</div>'
