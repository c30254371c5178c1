"""Bloc Listing Categories : grille de catégories d'annonces."""
from typing import ClassVar

from .base import Block, BlockMeta, SettingField, esc, html_attrs
from .listings import COLUMN_OPTIONS


class ListingCategoriesBlock(Block):
    type_id: ClassVar[str] = "listing_categories"
    meta: ClassVar[BlockMeta] = BlockMeta(
        label="listing.categories",
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
                default=3,
                _order=20,
            ),
            "parent": SettingField(
                label="listing.category",
                type="text",
                _order=30,
            ),
        },
    )

    def render(self) -> str:
        parent = self.get("parent")
        categories = [
            c for c in self.get_items("categories")
            if parent is None or c.get("parent") == parent
        ]
        number = self.get("number")
        if number:
            categories = categories[:number]

        columns = int(self.get("columns", "3"))
        items = "\n".join(
            f'  <div class="hp-grid__item hp-col-sm-{12 // columns} hp-col-xs-12">'
            f'<a class="hp-listing-category__name" href="{esc(c.get("url", "#"))}">{esc(c.get("name", ""))}</a>'
            f'<span class="hp-listing-category__count">{esc(c.get("count", 0))}</span></div>'
            for c in categories
        )
        attrs = html_attrs({"class": ["hp-listing-categories", "hp-block", "hp-grid"]})
        return f'<div{attrs}>\n  <div class="hp-row">\n{items}\n  </div>\n</div>'
