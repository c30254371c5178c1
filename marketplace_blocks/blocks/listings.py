"""Blocs Listings : grille d'annonces + variante annonces similaires."""
from typing import ClassVar

from ..core.i18n import get_string
from .base import Block, BlockMeta, SettingField, esc, html_attrs

COLUMN_OPTIONS = {"1": "1", "2": "2", "3": "3", "4": "4"}


class ListingsBlock(Block):
    type_id: ClassVar[str] = "listings"
    meta: ClassVar[BlockMeta] = BlockMeta(
        label="listing.listings",
        settings={
            "columns": SettingField(
                label="listing.columns",
                type="select",
                default="3",
                options=COLUMN_OPTIONS,
                required=True,
                _order=10,
            ),
            "number": SettingField(
                label="listing.number",
                type="number",
                default=6,
                required=True,
                _order=20,
            ),
            "order": SettingField(
                label="listing.order",
                type="select",
                options={
                    "created_date": {"label": "order.date"},
                    "title":        {"label": "order.title"},
                    "random":       {"label": "order.random"},
                },
                _order=30,
            ),
            "featured": SettingField(
                label="listing.featured",
                type="checkbox",
                default=False,
                _order=40,
            ),
        },
    )

    css_block: ClassVar[str] = "view-block"

    def _listings(self) -> list:
        listings = self.get_items("listings")
        if self.get("featured"):
            listings = [item for item in listings if item.get("featured")]
        order = self.get("order")
        if order == "title":
            listings.sort(key=lambda item: str(item.get("title", "")).lower())
        elif order == "created_date":
            listings.sort(key=lambda item: str(item.get("created_date", "")), reverse=True)
        return listings[: self.get("number", 0)]

    def render(self) -> str:
        listings = self._listings()
        if not listings:
            return f'<p class="hp-no-results">{esc(get_string("listing.no_results"))}</p>'

        columns = int(self.get("columns", "3"))
        items = "\n".join(
            f'  <div class="hp-grid__item hp-col-sm-{12 // columns} hp-col-xs-12">'
            f'<article class="hp-listing hp-listing--{self.css_block}">'
            f'<h4 class="hp-listing__title"><a href="{esc(item.get("url", "#"))}">{esc(item.get("title", ""))}</a></h4>'
            f"</article></div>"
            for item in listings
        )
        attrs = html_attrs({
            "class": ["hp-listings", "hp-block", "hp-grid"],
            "data-component": "listings",
            "data-columns": columns,
        })
        return f'<div{attrs}>\n  <div class="hp-row">\n{items}\n  </div>\n</div>'


class RelatedListingsBlock(ListingsBlock):
    """Annonces similaires : bloc interne des templates (pas de label éditeur)."""
    type_id: ClassVar[str] = "related_listings"
    meta: ClassVar[BlockMeta] = BlockMeta(settings=ListingsBlock.meta.settings)
