"""Tests arbres : fusion profonde, associativité, ordre de rendu, recherche."""
import sys
from copy import deepcopy
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from marketplace_blocks.core.schemas import BlockNode
from marketplace_blocks.core.tree import (
    MergePolicy, find_block, iter_blocks, merge_trees, sort_blocks,
)


# ── Politique de fusion ──────────────────────────────────────────────────────

def test_scalar_override_replaces():
    assert merge_trees({"title": "A", "tag": "h1"}, {"title": "B"}) == {"title": "B", "tag": "h1"}


def test_nested_mapping_recurses():
    base = {"attributes": {"class": ["a"], "data-component": "sticky"}}
    result = merge_trees(base, {"attributes": {"data-component": "fixed"}})
    assert result == {"attributes": {"class": ["a"], "data-component": "fixed"}}


def test_lists_concatenate_without_duplicates():
    base = {"attributes": {"class": ["hp-row", "hp-listing"]}}
    result = merge_trees(base, {"attributes": {"class": ["hp-listing", "hp-listing--view-page"]}})
    assert result["attributes"]["class"] == ["hp-row", "hp-listing", "hp-listing--view-page"]


def test_lists_keep_duplicates_when_not_unique():
    result = merge_trees({"tags": ["a"]}, {"tags": ["a"]}, MergePolicy(unique=False))
    assert result["tags"] == ["a", "a"]


def test_replace_policy_for_list_field():
    policy = MergePolicy(replace=frozenset({"class"}))
    result = merge_trees({"attributes": {"class": ["a", "b"]}}, {"attributes": {"class": ["c"]}}, policy)
    assert result["attributes"]["class"] == ["c"]


def test_kind_mismatch_override_wins():
    assert merge_trees({"attributes": {"class": ["a"]}}, {"attributes": "raw"}) == {"attributes": "raw"}
    assert merge_trees({"columns": 3}, {"columns": {"sm": 2}}) == {"columns": {"sm": 2}}


def test_new_child_added_at_current_level():
    base = {"blocks": {"a": {"_order": 10}}}
    result = merge_trees(base, {"blocks": {"b": {"_order": 20}}})
    assert set(result["blocks"]) == {"a", "b"}


def test_child_merged_into_deeper_node_with_same_name():
    base = {"blocks": {"page_container": {"blocks": {"page_columns": {"blocks": {
        "page_content": {"tag": "main", "blocks": {}},
    }}}}}}
    override = {"blocks": {"page_content": {"blocks": {"listing_title": {"_order": 10}}}}}
    result = merge_trees(base, override)

    assert "page_content" not in result["blocks"]
    content = result["blocks"]["page_container"]["blocks"]["page_columns"]["blocks"]["page_content"]
    assert content["tag"] == "main"
    assert content["blocks"] == {"listing_title": {"_order": 10}}


def test_inputs_not_mutated():
    base = {"blocks": {"a": {"attributes": {"class": ["x"]}, "blocks": {"a1": {}}}}}
    override = {"blocks": {"a1": {"tag": "span"}, "a": {"attributes": {"class": ["y"]}}}}
    base_copy, override_copy = deepcopy(base), deepcopy(override)

    result = merge_trees(base, override)
    result["blocks"]["a"]["attributes"]["class"].append("z")

    assert base == base_copy
    assert override == override_copy


def test_none_arguments():
    assert merge_trees(None, None) == {}
    assert merge_trees({"a": 1}, None) == {"a": 1}


# ── Associativité ────────────────────────────────────────────────────────────

_TRIPLES = [
    (
        {"blocks": {"a": {"_order": 10}}},
        {"blocks": {"b": {"_order": 20}}},
        {"blocks": {"c": {"_order": 30}}},
    ),
    (
        {"title": "A", "attributes": {"class": ["a"]}},
        {"title": "B", "attributes": {"class": ["b", "a"], "data-component": "sticky"}},
        {"attributes": {"class": ["c"], "data-component": "fixed"}},
    ),
    (
        {"blocks": {"x": {"_order": 10, "attributes": {"class": ["a"]}, "blocks": {"x1": {"type": "part"}}}}, "title": "A"},
        {"blocks": {"x": {"attributes": {"class": ["b", "a"]}}, "y": {"_order": 5}}, "title": "B"},
        {"blocks": {"x": {"_order": 20, "blocks": {"x1": {"path": "p"}}}, "x1": {"tag": "span"}}, "tags": ["c"]},
    ),
    (
        {"blocks": {"page_columns": {"blocks": {"page_sidebar": {"attributes": {"data-component": "sticky"}}}}}},
        {"blocks": {"page_sidebar": {"blocks": {"widgets": {"_order": 100}}}}},
        {"blocks": {"page_sidebar": {"attributes": {"data-component": "fixed"}, "blocks": {"vendor": {"_order": 30}}}}},
    ),
]


@pytest.mark.parametrize("a,b,c", _TRIPLES)
def test_merge_is_associative(a, b, c):
    left = merge_trees(merge_trees(a, b), c)
    right = merge_trees(a, merge_trees(b, c))
    assert left == right


# ── Lecture ──────────────────────────────────────────────────────────────────

def test_sort_blocks_by_order_then_name():
    blocks = {"c": {"_order": 20}, "b": {"_order": 10}, "a": {"_order": 20}, "d": {}}
    assert [name for name, _ in sort_blocks(blocks)] == ["d", "b", "a", "c"]


def test_sort_blocks_ignores_insertion_order():
    first = {"x": {"_order": 2}, "y": {"_order": 1}}
    second = {"y": {"_order": 1}, "x": {"_order": 2}}
    assert sort_blocks(first) == sort_blocks(second)


def test_iter_blocks_depth_first_in_render_order():
    tree = {"blocks": {
        "b": {"_order": 20, "blocks": {"b2": {"_order": 2}, "b1": {"_order": 1}}},
        "a": {"_order": 10},
    }}
    assert [name for name, _ in iter_blocks(tree)] == ["a", "b", "b1", "b2"]


def test_find_block():
    tree = {"blocks": {"a": {"blocks": {"b": {"type": "part"}}}}}
    assert find_block(tree, "b") == {"type": "part"}
    assert find_block(tree, "missing") is None


# ── BlockNode ────────────────────────────────────────────────────────────────

def test_block_node_from_tree():
    node = BlockNode.from_tree({
        "type": "container",
        "_order": 20,
        "_capability": "read",
        "attributes": {"class": ["hp-widget"]},
        "blocks": {
            "second": {"type": "part", "_order": 20, "path": "a/b"},
            "first": {"type": "form", "form": "listing_report", "_order": 10},
        },
        "custom_key": "kept",
    })
    assert node.order == 20
    assert node.capability == "read"
    assert node.css_classes == ["hp-widget"]
    assert [name for name, _ in node.ordered_blocks()] == ["first", "second"]
    assert node.blocks["first"].form == "listing_report"
    assert node.custom_key == "kept"


def test_name_at_two_depths_is_not_associative():
    # Un nom présent à la racine et sous un autre noeud : l'ordre de fusion compte.
    a = {"blocks": {"x": {"a": 1}}}
    b = {"blocks": {"p": {"blocks": {"x": {"b": 1}}}}}
    c = {"blocks": {"x": {"c": 1}}}

    left = merge_trees(merge_trees(a, b), c)
    right = merge_trees(a, merge_trees(b, c))

    assert left == {"blocks": {"x": {"a": 1, "c": 1}, "p": {"blocks": {"x": {"b": 1}}}}}
    assert right == {"blocks": {"x": {"a": 1}, "p": {"blocks": {"x": {"b": 1, "c": 1}}}}}
