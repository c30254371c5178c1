"""Tests blocs : settings, instanciation depuis attributs, rendu HTML, registry."""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from pydantic import ValidationError

from marketplace_blocks.blocks import (
    BLOCK_CLASSES, Block, BlockRegistry, ListingCategoriesBlock, ListingsBlock,
    ListingSearchFormBlock, RelatedListingsBlock, ResultCountBlock, SettingField,
    default_registry,
)
from marketplace_blocks.blocks.base import html_attrs


# ── SettingField ─────────────────────────────────────────────────────────────

def test_setting_field_get_args_omits_unset():
    field = SettingField(label="Columns", type="select", options={"2": "2"}, required=True, _order=10)
    assert field.get_args() == {
        "label": "Columns",
        "type": "select",
        "options": {"2": "2"},
        "required": True,
        "_order": 10,
    }


def test_setting_field_clean():
    assert SettingField(type="number", default=6).clean("4") == 4
    assert SettingField(type="number", default=6).clean("") == 6
    assert SettingField(type="checkbox").clean("yes") is True
    assert SettingField(type="checkbox").clean("0") is False
    assert SettingField(type="select", options={"3": "3"}).clean(3) == "3"


def test_setting_field_clean_invalid_option():
    with pytest.raises(ValueError):
        SettingField(type="select", options={"3": "3"}).clean("7")


# ── Instanciation ────────────────────────────────────────────────────────────

def test_listings_block_defaults():
    b = ListingsBlock()
    assert b.attributes["columns"] == "3"
    assert b.attributes["number"] == 6
    assert b.attributes["order"] is None
    assert b.attributes["featured"] is False


def test_block_positional_attributes_and_extras_kept():
    b = ListingsBlock({"columns": "2", "className": "is-style-wide"})
    assert b.attributes["columns"] == "2"
    assert b.attributes["className"] == "is-style-wide"


def test_block_invalid_attribute_raises_validation_error():
    with pytest.raises(ValidationError):
        ListingsBlock({"columns": "7"})
    with pytest.raises(ValidationError):
        ListingsBlock({"number": "many"})


def test_get_meta():
    assert ListingsBlock.get_meta("label") == "listing.listings"
    assert "columns" in ListingsBlock.get_meta("settings")
    assert RelatedListingsBlock.get_meta("label") == ""
    assert ResultCountBlock.get_meta("settings") == {}
    assert ListingsBlock.get_meta("unknown") is None


def test_base_block_render_not_implemented():
    with pytest.raises(NotImplementedError):
        Block().render()


# ── Rendu ────────────────────────────────────────────────────────────────────

def test_listings_render_empty():
    html = ListingsBlock().render()
    assert html == '<p class="hp-no-results">No listings found.</p>'


def test_listings_render_grid_order_and_number():
    b = ListingsBlock({
        "columns": "2",
        "number": "2",
        "order": "title",
        "listings": [
            {"title": "Zebra", "url": "/z"},
            {"title": "apple", "url": "/a"},
            {"title": "Mango", "url": "/m"},
        ],
    })
    html = b.render()
    assert 'data-columns="2"' in html
    assert "hp-col-sm-6" in html
    assert html.index("apple") < html.index("Mango")
    assert "Zebra" not in html


def test_listings_render_featured_only():
    b = ListingsBlock({
        "featured": "1",
        "listings": [{"title": "Plain"}, {"title": "Star", "featured": True}],
    })
    html = b.render()
    assert "Star" in html
    assert "Plain" not in html


def test_listings_render_escapes_titles():
    html = ListingsBlock({"listings": [{"title": "<b>x</b>"}]}).render()
    assert "&lt;b&gt;x&lt;/b&gt;" in html


def test_related_listings_uses_view_block_markup():
    html = RelatedListingsBlock({"listings": [{"title": "Near"}]}).render()
    assert "hp-listing--view-block" in html


def test_listing_categories_render_filters_parent():
    b = ListingCategoriesBlock({
        "parent": "cars",
        "categories": [
            {"name": "Sedan", "parent": "cars", "count": 4},
            {"name": "Flats", "parent": "homes", "count": 9},
        ],
    })
    html = b.render()
    assert "Sedan" in html
    assert "Flats" not in html
    assert "hp-listing-categories" in html


def test_search_form_render():
    html = ListingSearchFormBlock({"s": "bike"}).render()
    assert html.startswith("<form")
    assert 'name="s"' in html
    assert 'value="bike"' in html


def test_result_count_render():
    assert ResultCountBlock({"total": 12}).render() == '<div class="hp-result-count">12</div>'


def test_html_attrs():
    assert html_attrs({"class": ["a", "", "b"], "data-x": 3, "hidden": None}) == ' class="a b" data-x="3"'
    assert html_attrs({"title": '"q"'}) == ' title="&quot;q&quot;"'


# ── Registry ─────────────────────────────────────────────────────────────────

def test_default_registry_contains_all_blocks():
    registry = default_registry()
    assert len(registry) == len(BLOCK_CLASSES)
    assert registry.get("listings") is ListingsBlock
    assert "related_listings" in registry
    assert registry.get("missing") is None


def test_registry_register_overwrites_and_custom_type_id():
    registry = BlockRegistry()
    registry.register(ListingsBlock)
    registry.register(RelatedListingsBlock, type_id="listings")
    registry.register(ListingsBlock, type_id="featured_listings")
    assert registry.get("listings") is RelatedListingsBlock
    assert list(registry) == ["listings", "featured_listings"]


def test_registry_rejects_missing_type_id():
    with pytest.raises(ValueError):
        BlockRegistry().register(Block)


def test_get_items_ignores_non_list_values():
    assert ListingsBlock({"listings": 5}).get_items("listings") == []
    assert ListingsBlock({"listings": "abc"}).get_items("listings") == []
    assert ListingsBlock({"listings": [{"title": "A"}, 3, "x"]}).get_items("listings") == [{"title": "A"}]


def test_render_with_non_list_items():
    assert ListingsBlock({"listings": 5}).render() == '<p class="hp-no-results">No listings found.</p>'
    html = ListingCategoriesBlock({"categories": {"name": "Cars"}}).render()
    assert "hp-listing-categories" in html
    assert "Cars" not in html
