"""Template page annonces (archive, contexte vue)."""
from ..core.i18n import DEFAULT_LANG
from ..core.tree import merge_trees
from .base import PageSidebarLeft


class ListingsViewPage(PageSidebarLeft):

    def __init__(self, args=None, lang=DEFAULT_LANG):
        args = merge_trees(
            {
                "blocks": {
                    "page_header": {
                        "blocks": {
                            "listing_search_form": {
                                "type": "listing_search_form",
                                "_order": 10,
                            },

                            "listing_filter_link": {
                                "type": "part",
                                "path": "listing/view/listing-filter-link",
                                "_order": 20,
                            },
                        },
                    },

                    "page_sidebar": {
                        "attributes": {
                            "data-component": "sticky",
                        },

                        "blocks": {
                            "listing_filter_container": {
                                "type": "container",
                                "_order": 10,

                                "attributes": {
                                    "class": ["widget", "hp-widget", "hp-widget--listing-filter"],
                                },

                                "blocks": {
                                    "listing_filter_modal": {
                                        "type": "modal",
                                        "_order": 10,

                                        "attributes": {
                                            "class": ["hp-modal--mobile"],
                                        },

                                        "blocks": {
                                            "listing_filter_form": {
                                                "type": "form",
                                                "form": "listing_filter",
                                                "_order": 10,

                                                "attributes": {
                                                    "class": ["hp-form--narrow"],
                                                },
                                            },
                                        },
                                    },
                                },
                            },

                            "page_sidebar_widgets": {
                                "type": "widgets",
                                "area": "hp_listings_view_sidebar",
                                "_order": 100,
                            },
                        },
                    },

                    "page_topbar": {
                        "type": "results",
                        "optional": True,

                        "blocks": {
                            "listing_count": {
                                "type": "result_count",
                                "_order": 10,
                            },

                            "listing_sort_form": {
                                "type": "form",
                                "form": "listing_sort",
                                "_order": 20,

                                "attributes": {
                                    "class": ["hp-form--pivot"],
                                },
                            },
                        },
                    },

                    "page_content": {
                        "blocks": {
                            "listings_container": {
                                "type": "results",
                                "_order": 20,

                                "blocks": {
                                    "listings": {
                                        "type": "listings",
                                        "columns": 2,
                                        "_order": 10,
                                    },

                                    "listing_pagination": {
                                        "type": "part",
                                        "path": "page/pagination",
                                        "_order": 20,
                                    },
                                },
                            },
                        },
                    },
                },
            },
            args,
        )

        super().__init__(args, lang=lang)
