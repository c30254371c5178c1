"""
Blocs : exports publics + liste des classes livrées.
"""
from .base import Block, BlockMeta, SettingField
from .listings import ListingsBlock, RelatedListingsBlock
from .listing_categories import ListingCategoriesBlock
from .forms import ListingSearchFormBlock, ResultCountBlock
from .registry import BlockRegistry, default_registry

BLOCK_CLASSES = [
    ListingsBlock,
    RelatedListingsBlock,
    ListingCategoriesBlock,
    ListingSearchFormBlock,
    ResultCountBlock,
]

__all__ = [
    "Block", "BlockMeta", "SettingField",
    "ListingsBlock", "RelatedListingsBlock",
    "ListingCategoriesBlock",
    "ListingSearchFormBlock", "ResultCountBlock",
    "BlockRegistry", "default_registry",
    "BLOCK_CLASSES",
]
