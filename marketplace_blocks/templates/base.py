"""
Templates de page : arbres de blocs composés par héritage.

Chaque constructeur fusionne son arbre par défaut avec les arguments reçus
(les arguments gagnent), puis délègue au constructeur parent :

  ListingViewPage → PageSidebarRight → Page → Template
"""
from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..core.i18n import DEFAULT_LANG
from ..core.schemas import BlockNode
from ..core.tree import find_block, merge_trees, sort_blocks


class Template:

    def __init__(self, args: Optional[Mapping[str, Any]] = None, lang: str = DEFAULT_LANG):
        self.lang = lang
        self._tree = merge_trees({"blocks": {}}, args)

    @property
    def tree(self) -> Dict[str, Any]:
        """Copie de l'arbre complet ({"blocks": ...})."""
        return deepcopy(self._tree)

    @property
    def blocks(self) -> Dict[str, Any]:
        return deepcopy(self._tree["blocks"])

    def get_block(self, name: str) -> Optional[Dict[str, Any]]:
        block = find_block(self._tree, name)
        return deepcopy(block) if block is not None else None

    def ordered_blocks(self) -> List[Tuple[str, Any]]:
        return sort_blocks(self.blocks)

    def to_node(self) -> BlockNode:
        return BlockNode.from_tree(self._tree)


class Page(Template):
    """Page du site : en-tête, barre supérieure, pied de page."""

    def __init__(self, args=None, lang=DEFAULT_LANG):
        args = merge_trees(
            {
                "blocks": {
                    "page_container": {
                        "type": "page",
                        "_order": 10,

                        "blocks": {
                            "page_header": {
                                "type": "container",
                                "tag": "header",
                                "optional": True,
                                "_order": 10,
                                "attributes": {"class": ["hp-page__header"]},
                                "blocks": {},
                            },

                            "page_topbar": {
                                "type": "container",
                                "optional": True,
                                "_order": 20,
                                "attributes": {"class": ["hp-page__topbar"]},
                                "blocks": {},
                            },

                            "page_footer": {
                                "type": "container",
                                "tag": "footer",
                                "optional": True,
                                "_order": 1000,
                                "attributes": {"class": ["hp-page__footer"]},
                                "blocks": {},
                            },
                        },
                    },
                },
            },
            args,
        )

        super().__init__(args, lang=lang)


def _columns(sidebar_order: int, content_order: int) -> Dict[str, Any]:
    return {
        "blocks": {
            "page_container": {
                "blocks": {
                    "page_columns": {
                        "type": "container",
                        "_order": 40,
                        "attributes": {"class": ["hp-row"]},

                        "blocks": {
                            "page_sidebar": {
                                "type": "container",
                                "tag": "aside",
                                "_order": sidebar_order,
                                "attributes": {
                                    "class": ["hp-page__sidebar", "hp-col-sm-4", "hp-col-xs-12"],
                                },
                                "blocks": {},
                            },

                            "page_content": {
                                "type": "container",
                                "tag": "main",
                                "_order": content_order,
                                "attributes": {
                                    "class": ["hp-page__content", "hp-col-sm-8", "hp-col-xs-12"],
                                },
                                "blocks": {},
                            },
                        },
                    },
                },
            },
        },
    }


class PageSidebarLeft(Page):

    def __init__(self, args=None, lang=DEFAULT_LANG):
        super().__init__(merge_trees(_columns(sidebar_order=10, content_order=20), args), lang=lang)


class PageSidebarRight(Page):

    def __init__(self, args=None, lang=DEFAULT_LANG):
        super().__init__(merge_trees(_columns(sidebar_order=20, content_order=10), args), lang=lang)
