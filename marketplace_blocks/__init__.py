"""
marketplace_blocks : blocs éditeur + templates de pages annonces.

Usage (éditeur) :
    >>> from marketplace_blocks import Editor, MemoryRegistrar, default_registry
    >>> editor = Editor(default_registry(), MemoryRegistrar())
    >>> descriptors = editor.register_blocks()
    >>> html = editor.render("listings", {"columns": "2"})

Usage (templates) :
    >>> from marketplace_blocks import build_detail_tree, find_block
    >>> tree = build_detail_tree({"blocks": {"page_sidebar": {"attributes": {"data-component": "fixed"}}}})
    >>> find_block(tree, "listing_vendor")["template"]
    'vendor_view_block'
"""
from .blocks import (
    Block, BlockMeta, SettingField,
    ListingsBlock, RelatedListingsBlock, ListingCategoriesBlock,
    ListingSearchFormBlock, ResultCountBlock,
    BlockRegistry, default_registry,
)
from .config import Settings
from .core.schemas import BlockNode
from .core.tree import MergePolicy, find_block, iter_blocks, merge_trees, sort_blocks
from .editor import BlockDescriptor, Editor, MemoryRegistrar, Registrar, UnsupportedOperation
from .templates import (
    Template, ListingViewPage, ListingsViewPage,
    build_detail_tree, build_archive_tree, get_template,
)

__version__ = "1.0.0"

__all__ = [
    # blocs
    "Block", "BlockMeta", "SettingField",
    "ListingsBlock", "RelatedListingsBlock", "ListingCategoriesBlock",
    "ListingSearchFormBlock", "ResultCountBlock",
    "BlockRegistry", "default_registry",
    # config
    "Settings",
    # arbres
    "BlockNode", "MergePolicy", "merge_trees", "find_block", "iter_blocks", "sort_blocks",
    # éditeur
    "BlockDescriptor", "Editor", "MemoryRegistrar", "Registrar", "UnsupportedOperation",
    # templates
    "Template", "ListingViewPage", "ListingsViewPage",
    "build_detail_tree", "build_archive_tree", "get_template",
]
